import pytest

from liquidglass.core.history import HistoryStack
from liquidglass.core.parameters import GlassParameters


def _snap(blur: float) -> GlassParameters:
    return GlassParameters().replace(blur_radius=float(blur))


def test_empty_history():
    h = HistoryStack()
    assert len(h) == 0
    assert h.cursor == -1
    assert h.current is None
    assert not h.can_undo
    assert not h.can_redo
    assert h.undo() is None
    assert h.redo() is None


def test_push_undo_redo_sequence():
    a, b, c = _snap(1), _snap(2), _snap(3)
    h = HistoryStack()
    h.push(a)
    h.push(b)
    h.push(c)

    assert h.undo() == b
    assert h.undo() == a
    assert h.undo() is None
    assert h.current == a
    assert h.redo() == b
    assert h.cursor == 1
    assert h.can_undo and h.can_redo


def test_redo_after_two_undos_walks_forward():
    a, b, c = _snap(1), _snap(2), _snap(3)
    h = HistoryStack()
    for s in (a, b, c):
        h.push(s)
    h.undo()
    h.undo()

    assert h.redo() == b
    assert h.redo() == c
    assert not h.can_redo


def test_push_after_single_undo_replaces_tail():
    a, b, c = _snap(1), _snap(2), _snap(3)
    h = HistoryStack()
    h.push(a)
    h.push(b)
    h.undo()
    h.push(c)

    assert h.entries == (a, c)
    assert h.current == c
    assert h.cursor == 1


def test_push_after_undo_discards_redo_branch():
    a, b, c, d = _snap(1), _snap(2), _snap(3), _snap(4)
    h = HistoryStack()
    for s in (a, b, c):
        h.push(s)
    h.undo()
    h.push(d)

    assert h.entries == (a, b, d)
    assert not h.can_redo
    assert h.redo() is None
    assert h.current == d


def test_push_beyond_limit_evicts_oldest():
    h = HistoryStack()
    for i in range(51):
        h.push(_snap(i))

    assert len(h) == 50
    assert h.entries[0] == _snap(1)
    assert h.current == _snap(50)
    assert h.cursor == 49


def test_small_limit_keeps_newest():
    h = HistoryStack(max_entries=2)
    for i in range(5):
        h.push(_snap(i))
    assert h.entries == (_snap(3), _snap(4))
    assert h.undo() == _snap(3)
    assert h.undo() is None


def test_clear():
    h = HistoryStack()
    h.push(_snap(1))
    h.push(_snap(2))
    h.clear()
    assert len(h) == 0
    assert h.cursor == -1
    assert not h.can_undo


def test_invalid_limit():
    with pytest.raises(ValueError):
        HistoryStack(max_entries=0)
