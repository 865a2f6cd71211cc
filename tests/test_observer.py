import pytest

from civicdesk.observer import Observer, Subject


class Recorder(Observer):
    def __init__(self):
        self.calls = 0

    def update(self):
        self.calls += 1


def test_observer_is_abstract():
    with pytest.raises(TypeError):
        Observer()


def test_notify_reaches_every_registered_observer():
    subject = Subject()
    first, second = Recorder(), Recorder()
    subject.register_observer(first)
    subject.register_observer(second)
    subject.notify()
    subject.notify()
    assert (first.calls, second.calls) == (2, 2)


def test_unregistered_observer_is_not_notified():
    subject = Subject()
    kept, removed = Recorder(), Recorder()
    subject.register_observer(kept)
    subject.register_observer(removed)
    subject.unregister_observer(removed)
    subject.notify()
    assert kept.calls == 1
    assert removed.calls == 0


def test_unregister_removes_only_one_registration():
    subject = Subject()
    twice = Recorder()
    subject.register_observer(twice)
    subject.register_observer(twice)
    subject.unregister_observer(twice)
    subject.notify()
    assert twice.calls == 1


def test_unregister_unknown_observer_leaves_others():
    subject = Subject()
    known = Recorder()
    subject.register_observer(known)
    subject.unregister_observer(Recorder())
    subject.notify()
    assert known.calls == 1