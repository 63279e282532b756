"""Politician browse state - in-memory list, selection and filters."""

from dataclasses import dataclass, field

FILTER_FIELDS = ("state", "party", "office")


@dataclass
class PoliticianBrowseState:
    """Client cache of fetched politicians and the active filters."""

    politicians: list[dict] = field(default_factory=list)
    selected: dict | None = None
    filters: dict[str, str] = field(default_factory=dict)

    def set_politicians(self, politicians: list[dict]) -> None:
        self.politicians = list(politicians)

    def set_selected_politician(self, politician: dict | None) -> None:
        self.selected = politician

    def set_filters(self, filters: dict[str, str | None]) -> None:
        """Replace the filters; empty values and unknown keys are dropped."""
        self.filters = {k: v for k, v in filters.items() if k in FILTER_FIELDS and v}

    def filtered(self) -> list[dict]:
        """Politicians matching every active filter exactly."""
        return [p for p in self.politicians if all(p.get(k) == v for k, v in self.filters.items())]
