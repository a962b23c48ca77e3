"""Dispatch and subscription behaviour of AuthStore."""

from authstate.schemas.state import INITIAL_STATE, Action
from authstate.state import actions
from authstate.state.store import AuthStore


def test_dispatch_applies_reducer_and_returns_action():
    store = AuthStore()
    action = actions.login_user_request()
    assert store.dispatch(action) is action
    assert store.state.is_authenticating is True


def test_listeners_notified_only_on_change():
    store = AuthStore()
    seen = []
    store.subscribe(seen.append)

    store.dispatch(Action("SOMETHING_ELSE"))
    assert seen == []

    store.dispatch(actions.login_user_request())
    assert len(seen) == 1
    assert seen[0] is store.state


def test_unsubscribe_stops_notifications():
    store = AuthStore()
    seen = []
    unsubscribe = store.subscribe(seen.append)
    unsubscribe()
    unsubscribe()
    store.dispatch(actions.login_user_request())
    assert seen == []


def test_logout_twice_keeps_initial_state():
    store = AuthStore()
    store.dispatch(actions.login_user_request())
    store.dispatch(actions.logout_user())
    store.dispatch(actions.logout_user())
    assert store.state is INITIAL_STATE
