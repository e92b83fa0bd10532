"""Per-document find state."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class SearchSession:
    """Query text and modifiers for one document view.

    ``term`` is ``None`` until a query is known; an empty string means the
    query was cleared. The modifiers only change through the toggles (and
    through ``find``, which records the sensitivity it ran with).
    """

    term: str | None = None
    case_sensitive: bool = False
    wrap_around: bool = True

    def toggle_case_sensitivity(self) -> bool:
        self.case_sensitive = not self.case_sensitive
        return self.case_sensitive

    def toggle_wrap_around(self) -> bool:
        self.wrap_around = not self.wrap_around
        return self.wrap_around

    def set_term(self, term: str) -> None:
        self.term = term

    def get_term(self) -> str | None:
        return self.term

    @property
    def ignore_case(self) -> bool:
        return not self.case_sensitive


__all__ = ["SearchSession"]
