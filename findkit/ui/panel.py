"""Event routing for the find bar widgets."""

from __future__ import annotations

from findkit.services.controller import SearchController

PREVIOUS_SEGMENT = 0
NEXT_SEGMENT = 1


class FindPanel:
    """Translates find-bar widget events into controller calls."""

    def __init__(self, controller: SearchController) -> None:
        self._controller = controller

    @property
    def ignore_case(self) -> bool:
        return self._controller.session.ignore_case

    @property
    def wrap_around(self) -> bool:
        return self._controller.session.wrap_around

    def on_submit(self, text: str) -> None:
        self._controller.search(text)

    def on_navigate(self, segment: int) -> None:
        wrap_around = self._controller.session.wrap_around
        if segment == PREVIOUS_SEGMENT:
            self._controller.find_previous(wrap_around)
        elif segment == NEXT_SEGMENT:
            self._controller.find_next(wrap_around, allow_same=False)

    def on_cancel(self) -> None:
        # Escape closes the bar even when the field still has text.
        self._controller.close()

    def on_toggle_ignore_case(self) -> bool:
        """Flip the "Ignore Case" menu item and return its new checkmark state."""

        return not self._controller.toggle_case_sensitivity()

    def on_toggle_wrap_around(self) -> bool:
        return self._controller.toggle_wrap_around()


__all__ = ["FindPanel", "NEXT_SEGMENT", "PREVIOUS_SEGMENT"]
