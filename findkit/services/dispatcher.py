"""Route find-interface actions to the controller."""

from __future__ import annotations

from collections import deque
from enum import Enum
from typing import Callable

from findkit.domain.models import FindAction
from findkit.logging import logger
from findkit.services.controller import SearchController

DIAGNOSTICS_LIMIT = 50


class DispatchOutcome(str, Enum):
    HANDLED = "handled"
    NOT_IMPLEMENTED = "not_implemented"
    UNKNOWN = "unknown"


class ActionDispatcher:
    """Maps action identifiers onto controller calls.

    Replace and select-all actions belong to the vocabulary but have no
    handler; dispatching one records a diagnostic and does nothing else.
    Only the latest ``DIAGNOSTICS_LIMIT`` diagnostics are kept.
    """

    def __init__(self, controller: SearchController) -> None:
        self._controller = controller
        self.diagnostics: deque[str] = deque(maxlen=DIAGNOSTICS_LIMIT)
        self._handlers: dict[FindAction, Callable[[], None]] = {
            FindAction.SHOW: controller.open,
            FindAction.HIDE: controller.close,
            FindAction.NEXT_MATCH: self._next_match,
            FindAction.PREVIOUS_MATCH: self._previous_match,
            FindAction.SET_SEARCH_STRING: self._set_search_string,
        }

    def dispatch(self, action: FindAction | str) -> DispatchOutcome:
        parsed = FindAction.parse(action)
        if parsed is None:
            logger.debug("find_action_unknown", action=str(action))
            return DispatchOutcome.UNKNOWN

        handler = self._handlers.get(parsed)
        if handler is None:
            logger.warning("find_action_not_implemented", action=parsed.value)
            self.diagnostics.append(parsed.value)
            return DispatchOutcome.NOT_IMPLEMENTED

        handler()
        return DispatchOutcome.HANDLED

    def _next_match(self) -> None:
        session = self._controller.session
        self._controller.find_next(session.wrap_around, allow_same=False)

    def _previous_match(self) -> None:
        self._controller.find_previous(self._controller.session.wrap_around)

    def _set_search_string(self) -> None:
        self._controller.open()
        self._controller.find(None, self._controller.session.case_sensitive)


__all__ = ["ActionDispatcher", "DIAGNOSTICS_LIMIT", "DispatchOutcome"]
