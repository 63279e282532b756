"""Static page schemas."""

from pydantic import BaseModel


class PageSection(BaseModel):
    """A titled block of text with an optional bullet list."""

    title: str
    paragraphs: list[str] = []
    items: list[str] = []


class PageResponse(BaseModel):
    """A static content page."""

    title: str
    subtitle: str | None = None
    updated: str | None = None
    sections: list[PageSection]
