"""Terminal stand-in for a document view's find bar."""

from __future__ import annotations

from findkit.logging import logger


class ConsoleHost:
    """SearchHost that keeps widget state in memory and logs every change."""

    def __init__(self, *, affordance_height: float = 28.0) -> None:
        self._height = affordance_height
        self.visible = False
        self.query_text = ""
        self.focus = "document"
        self.layout_offset = 0.0

    def show_affordance(self) -> None:
        self.visible = True
        logger.info("find_bar_shown")

    def hide_affordance(self) -> None:
        self.visible = False
        logger.info("find_bar_hidden")

    def is_affordance_visible(self) -> bool:
        return self.visible

    def affordance_height(self) -> float:
        return self._height

    def current_query_text(self) -> str:
        return self.query_text

    def set_query_text(self, text: str) -> None:
        self.query_text = text
        logger.info("find_field_updated", text=text)

    def focus_query_field(self) -> None:
        self.focus = "query"
        logger.debug("focus_changed", target=self.focus)

    def focus_document(self) -> None:
        self.focus = "document"
        logger.debug("focus_changed", target=self.focus)

    def adjust_layout_offset(self, amount: float) -> None:
        self.layout_offset = amount
        logger.debug("layout_offset_changed", offset=amount)


__all__ = ["ConsoleHost"]
