"""Static page views."""

from .content import ABOUT, PRIVACY
from .schemas import PageResponse


def get_about() -> PageResponse:
    return ABOUT


def get_privacy() -> PageResponse:
    return PRIVACY
