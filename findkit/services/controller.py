"""Find coordination between a document view and its search engine."""

from __future__ import annotations

from typing import Any

from findkit.domain.host import SearchHost
from findkit.domain.models import FindOperation
from findkit.domain.session import SearchSession
from findkit.logging import logger
from findkit.services.backend import BackendLink
from findkit.services.context import OwningContext


class SearchController:
    """Drives the engine's find state for one document view.

    All public methods run on the owning context. The only reply the
    controller consumes (the engine's current query, requested by a
    term-less ``find``) is posted back to that context before it touches
    the session or the host. Outstanding replies are never cancelled, so
    whichever arrives last is what the field ends up showing.
    """

    def __init__(
        self,
        host: SearchHost,
        link: BackendLink,
        context: OwningContext,
        session: SearchSession | None = None,
    ) -> None:
        self._host = host
        self._link = link
        self._context = context
        self._session = session or SearchSession()

    @property
    def session(self) -> SearchSession:
        return self._session

    def open(self) -> None:
        if not self._host.is_affordance_visible():
            self._host.show_affordance()
            self._host.adjust_layout_offset(self._host.affordance_height())

            query = self._host.current_query_text()
            if query:
                # Re-highlight whatever the field still holds from last time.
                self.find(query, self._session.case_sensitive)

        self._host.focus_query_field()

    def close(self) -> None:
        if self._host.is_affordance_visible():
            self._host.hide_affordance()
            self.clear()
            self._host.adjust_layout_offset(0)

        self._host.focus_document()

    def find(self, term: str | None, case_sensitive: bool) -> None:
        self._session.case_sensitive = case_sensitive

        if term is not None:
            self._session.set_term(term)
            self._link.send(
                FindOperation.FIND.value,
                {"chars": term, "case_sensitive": case_sensitive},
            )
            return

        self._link.send(
            FindOperation.FIND.value,
            {"case_sensitive": case_sensitive},
            self._on_current_query,
        )

    def find_next(self, wrap_around: bool, allow_same: bool) -> None:
        params: dict[str, Any] = {"wrap_around": wrap_around}
        if allow_same:
            params["allow_same"] = True
        self._link.send(FindOperation.FIND_NEXT.value, params)

    def find_previous(self, wrap_around: bool) -> None:
        self._link.send(FindOperation.FIND_PREVIOUS.value, {"wrap_around": wrap_around})

    def clear(self) -> None:
        self._link.send(FindOperation.FIND.value, {"chars": ""})

    def search(self, term: str) -> None:
        """Run ``term`` and jump to its first match."""

        self.find(term, self._session.case_sensitive)
        self.find_next(self._session.wrap_around, allow_same=False)

    def toggle_case_sensitivity(self) -> bool:
        case_sensitive = self._session.toggle_case_sensitivity()
        self.find(self._host.current_query_text(), case_sensitive)
        self.find_next(self._session.wrap_around, allow_same=True)
        return case_sensitive

    def toggle_wrap_around(self) -> bool:
        return self._session.toggle_wrap_around()

    def _on_current_query(self, value: Any) -> None:
        # May run on a transport thread.
        self._context.post(self._apply_current_query, value)

    def _apply_current_query(self, value: Any) -> None:
        if not isinstance(value, str):
            logger.warning("find_reply_ignored", reply_type=type(value).__name__)
            return
        self._session.set_term(value)
        self._host.set_query_text(value)
        logger.debug("find_reply_applied", term=value)


__all__ = ["SearchController"]
