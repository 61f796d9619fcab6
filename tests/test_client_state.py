"""Tests for the client-side state store and error-notification sink."""

from keyshorty.client.notifications import ErrorSink, Notification
from keyshorty.client.state import ShortcutStore
from keyshorty.models.application import Application
from keyshorty.models.shortcut import Shortcut


def _sc(id_: int, app_id: int, keys: str = "Ctrl+S") -> Shortcut:
    return Shortcut(id=id_, application_id=app_id, key_combination=keys, description="d")


# ---------------------------------------------------------------------------
# ShortcutStore
# ---------------------------------------------------------------------------

def test_store_add_and_remove_application():
    store = ShortcutStore()
    store.set_applications([Application(id=1, name="Vim"), Application(id=2, name="Emacs")])
    store.set_shortcuts(1, [_sc(10, 1)])
    store.add_application(Application(id=3, name="Nano"))

    assert [a.name for a in store.applications] == ["Vim", "Emacs", "Nano"]

    store.remove_application(1)
    assert [a.id for a in store.applications] == [2, 3]
    assert store.shortcuts_for(1) == []
    assert 1 not in store.shortcuts


def test_store_set_applications_drops_stale_shortcuts():
    store = ShortcutStore()
    store.set_shortcuts(1, [_sc(10, 1)])
    store.set_shortcuts(2, [_sc(11, 2)])
    store.set_applications([Application(id=2, name="Kept")])
    assert list(store.shortcuts) == [2]


def test_store_shortcut_updates():
    store = ShortcutStore()
    store.add_shortcut(_sc(1, 5, "F1"))
    store.add_shortcut(_sc(2, 5, "F2"))
    store.add_shortcut(_sc(3, 6, "F3"))

    assert [s.key_combination for s in store.shortcuts_for(5)] == ["F1", "F2"]
    assert store.find_shortcut(3).application_id == 6
    assert store.find_shortcut(99) is None

    store.remove_shortcut(1)
    assert [s.id for s in store.shortcuts_for(5)] == [2]
    assert store.shortcuts_for(404) == []


def test_shortcuts_for_returns_a_copy():
    store = ShortcutStore()
    store.add_shortcut(_sc(1, 5))
    store.shortcuts_for(5).clear()
    assert len(store.shortcuts_for(5)) == 1


# ---------------------------------------------------------------------------
# ErrorSink
# ---------------------------------------------------------------------------

def test_sink_notifies_subscribers():
    sink = ErrorSink(timeout=5)
    seen: list[str] = []
    sink.subscribe(lambda n: seen.append(n.message))

    sink.notify("first")
    sink.notify("second")

    assert seen == ["first", "second"]
    assert sink.current.message == "second"


def test_sink_unsubscribe_and_clear():
    sink = ErrorSink(timeout=5)
    seen: list[str] = []

    def callback(n):
        seen.append(n.message)

    sink.subscribe(callback)
    sink.unsubscribe(callback)
    sink.notify("ignored")
    assert seen == []

    sink.clear()
    assert sink.current is None


def test_notification_expires():
    n = Notification(message="boom", timeout=5, created_at=100.0)
    assert not n.expired(now=104.9)
    assert n.expired(now=105.0)


def test_sink_auto_dismisses_expired_notification():
    sink = ErrorSink(timeout=0)
    sink.notify("gone")
    assert sink.current is None
