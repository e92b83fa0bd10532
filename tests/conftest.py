"""Shared pytest fixtures: in-memory host, recording link, queued context."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable

import pytest

from findkit.domain.session import SearchSession
from findkit.services.controller import SearchController


class FakeHost:
    def __init__(self, *, visible: bool = False, query_text: str = "", height: float = 24.0) -> None:
        self.visible = visible
        self.query_text = query_text
        self.height = height
        self.calls: list[tuple[str, Any]] = []

    def show_affordance(self) -> None:
        self.visible = True
        self.calls.append(("show", None))

    def hide_affordance(self) -> None:
        self.visible = False
        self.calls.append(("hide", None))

    def is_affordance_visible(self) -> bool:
        return self.visible

    def affordance_height(self) -> float:
        return self.height

    def current_query_text(self) -> str:
        return self.query_text

    def set_query_text(self, text: str) -> None:
        self.query_text = text
        self.calls.append(("set_query_text", text))

    def focus_query_field(self) -> None:
        self.calls.append(("focus", "query"))

    def focus_document(self) -> None:
        self.calls.append(("focus", "document"))

    def adjust_layout_offset(self, amount: float) -> None:
        self.calls.append(("offset", amount))

    def last_focus(self) -> str | None:
        targets = [value for name, value in self.calls if name == "focus"]
        return targets[-1] if targets else None


@dataclass
class SentRequest:
    operation: str
    params: dict[str, Any]
    on_reply: Callable[[Any], None] | None


@dataclass
class RecordingLink:
    sent: list[SentRequest] = field(default_factory=list)

    def send(self, operation, params, on_reply=None) -> None:
        self.sent.append(SentRequest(operation, dict(params), on_reply))

    def operations(self) -> list[tuple[str, dict[str, Any]]]:
        return [(request.operation, request.params) for request in self.sent]


class QueuedContext:
    """Owning context that holds posted callbacks until the test runs them."""

    def __init__(self) -> None:
        self.pending: list[tuple[Callable[..., Any], tuple[Any, ...]]] = []

    def post(self, callback, *args) -> None:
        self.pending.append((callback, args))

    def run_pending(self) -> None:
        pending, self.pending = self.pending, []
        for callback, args in pending:
            callback(*args)


@pytest.fixture
def host() -> FakeHost:
    return FakeHost()


@pytest.fixture
def link() -> RecordingLink:
    return RecordingLink()


@pytest.fixture
def context() -> QueuedContext:
    return QueuedContext()


@pytest.fixture
def controller(host, link, context) -> SearchController:
    return SearchController(host, link, context, session=SearchSession())
