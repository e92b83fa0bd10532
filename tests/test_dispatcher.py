from __future__ import annotations

import pytest

from findkit.domain.models import FindAction
from findkit.services.dispatcher import DIAGNOSTICS_LIMIT, ActionDispatcher, DispatchOutcome

UNSUPPORTED = [
    FindAction.REPLACE,
    FindAction.REPLACE_ALL,
    FindAction.REPLACE_AND_FIND,
    FindAction.REPLACE_ALL_IN_SELECTION,
    FindAction.SELECT_ALL,
    FindAction.SELECT_ALL_IN_SELECTION,
    FindAction.SHOW_REPLACE_INTERFACE,
    FindAction.HIDE_REPLACE_INTERFACE,
]


def test_show_opens_affordance(controller, host):
    dispatcher = ActionDispatcher(controller)

    assert dispatcher.dispatch("show") is DispatchOutcome.HANDLED
    assert host.visible is True
    assert host.last_focus() == "query"


def test_hide_closes_affordance(controller, host, link):
    host.visible = True
    dispatcher = ActionDispatcher(controller)

    assert dispatcher.dispatch(FindAction.HIDE) is DispatchOutcome.HANDLED
    assert host.visible is False
    assert host.last_focus() == "document"
    assert link.operations() == [("find", {"chars": ""})]


def test_next_match_uses_session_wrap_without_allow_same(controller, link):
    controller.toggle_wrap_around()
    dispatcher = ActionDispatcher(controller)

    dispatcher.dispatch("next-match")

    assert link.operations() == [("find_next", {"wrap_around": False})]


def test_previous_match_uses_session_wrap(controller, link):
    dispatcher = ActionDispatcher(controller)

    dispatcher.dispatch("previous-match")

    assert link.operations() == [("find_previous", {"wrap_around": True})]


def test_set_search_string_opens_then_queries_current_term(controller, link, host, context):
    controller.session.case_sensitive = True
    dispatcher = ActionDispatcher(controller)

    assert dispatcher.dispatch("set-search-string") is DispatchOutcome.HANDLED

    assert host.visible is True
    assert link.operations() == [("find", {"case_sensitive": True})]
    link.sent[0].on_reply("selected words")
    context.run_pending()
    assert host.query_text == "selected words"


@pytest.mark.parametrize("action", UNSUPPORTED)
def test_unsupported_actions_record_diagnostic(controller, link, action):
    dispatcher = ActionDispatcher(controller)
    before = (controller.session.term, controller.session.case_sensitive, controller.session.wrap_around)

    outcome = dispatcher.dispatch(action.value)

    assert outcome is DispatchOutcome.NOT_IMPLEMENTED
    assert list(dispatcher.diagnostics) == [action.value]
    assert link.sent == []
    after = (controller.session.term, controller.session.case_sensitive, controller.session.wrap_around)
    assert after == before


def test_replace_all_is_a_logged_noop(controller, link, host):
    dispatcher = ActionDispatcher(controller)

    dispatcher.dispatch("replace-all")

    assert link.sent == []
    assert host.calls == []
    assert list(dispatcher.diagnostics) == ["replace-all"]


@pytest.mark.parametrize("action", ["transmogrify", "", 42, None])
def test_unknown_actions_are_ignored(controller, link, action):
    dispatcher = ActionDispatcher(controller)

    assert dispatcher.dispatch(action) is DispatchOutcome.UNKNOWN
    assert list(dispatcher.diagnostics) == []
    assert link.sent == []



@pytest.mark.parametrize("action", ["  SHOW ", "Show", "next_match"])
def test_action_identifiers_must_match_exactly(controller, host, link, action):
    dispatcher = ActionDispatcher(controller)

    assert dispatcher.dispatch(action) is DispatchOutcome.UNKNOWN
    assert host.calls == []
    assert link.sent == []


def test_diagnostics_keep_only_latest_entries(controller):
    dispatcher = ActionDispatcher(controller)

    for _ in range(DIAGNOSTICS_LIMIT):
        dispatcher.dispatch("replace")
    dispatcher.dispatch("select-all")

    assert len(dispatcher.diagnostics) == DIAGNOSTICS_LIMIT
    assert dispatcher.diagnostics[-1] == "select-all"
    assert dispatcher.diagnostics[0] == "replace"
