import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6.QtCore import QObject, QTimer

from passcraft.gui import QtScheduler
from passcraft.notification import Notifier


def test_show_twice_keeps_one_active_timer(qtbot):
    owner = QObject()
    changes = []
    notifier = Notifier(QtScheduler(owner), timeout_ms=50, on_change=changes.append)

    notifier.show("first")
    notifier.show("second")
    active = [t for t in owner.findChildren(QTimer) if t.isActive()]
    assert len(active) == 1

    qtbot.waitUntil(lambda: notifier.message is None, timeout=2000)
    assert changes == ["first", "second", None]


def test_cancelled_timer_never_fires(qtbot):
    owner = QObject()
    fired = []
    handle = QtScheduler(owner).call_later(20, lambda: fired.append(True))
    handle.cancel()
    qtbot.wait(150)
    assert fired == []


def test_timer_fires_once(qtbot):
    owner = QObject()
    fired = []
    QtScheduler(owner).call_later(20, lambda: fired.append(True))
    qtbot.waitUntil(lambda: fired == [True], timeout=2000)
    qtbot.wait(100)
    assert fired == [True]
