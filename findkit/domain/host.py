"""Capabilities the controller needs from the UI layer."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class SearchHost(Protocol):
    """The document view that owns the find affordance.

    The controller never touches widgets directly; everything visual goes
    through these calls, always on the owning context.
    """

    def show_affordance(self) -> None:
        ...

    def hide_affordance(self) -> None:
        ...

    def is_affordance_visible(self) -> bool:
        ...

    def affordance_height(self) -> float:
        """Height the document content must be offset by while the bar is open."""
        ...

    def current_query_text(self) -> str:
        ...

    def set_query_text(self, text: str) -> None:
        ...

    def focus_query_field(self) -> None:
        ...

    def focus_document(self) -> None:
        ...

    def adjust_layout_offset(self, amount: float) -> None:
        ...


__all__ = ["SearchHost"]
