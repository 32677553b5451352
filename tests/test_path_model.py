"""Tests for the snapshot-publishing path model."""

import threading

import pytest

from sigpad import MalformedPath, PathModel
from sigpad.geometry import LineTo, MoveTo, Point, QuadraticTo


def _move(x, y):
    return MoveTo(Point(x, y))


def _quad(cx, cy, ex, ey):
    return QuadraticTo(Point(cx, cy), Point(ex, ey))


class TestPublishing:
    def test_new_model_is_empty(self):
        model = PathModel()
        assert model.current_snapshot() == ()
        assert model.is_empty()
        assert len(model) == 0

    def test_append_publishes_whole_path(self):
        model = PathModel()
        model.append([_move(0, 0)])
        model.append([_quad(0, 0, 5, 0), _quad(10, 0, 10, 5)])
        assert model.current_snapshot() == (
            _move(0, 0), _quad(0, 0, 5, 0), _quad(10, 0, 10, 5),
        )

    def test_held_snapshot_does_not_change(self):
        model = PathModel()
        model.append([_move(0, 0)])
        held = model.current_snapshot()
        model.append([LineTo(Point(0, 0))])
        assert held == (_move(0, 0),)
        assert len(model.current_snapshot()) == 2

    def test_snapshot_is_immutable(self):
        model = PathModel()
        model.append([_move(1, 2)])
        with pytest.raises((TypeError, AttributeError)):
            model.current_snapshot().append(_move(3, 4))

    def test_clear_publishes_empty_path(self):
        model = PathModel()
        model.append([_move(0, 0), LineTo(Point(0, 0))])
        held = model.current_snapshot()
        model.clear()
        assert model.current_snapshot() == ()
        assert len(held) == 2

    def test_version_advances_on_publish(self):
        model = PathModel()
        v0 = model.version
        model.append([_move(0, 0)])
        v1 = model.version
        model.append([])
        assert model.version == v1
        model.clear()
        assert v0 < v1 < model.version


class TestWellFormedness:
    @pytest.mark.parametrize("segment", [LineTo(Point(1, 1)), _quad(0, 0, 1, 1)])
    def test_drawing_before_move_rejected(self, segment):
        model = PathModel()
        with pytest.raises(MalformedPath):
            model.append([segment])
        assert model.is_empty()

    def test_second_subpath_may_start_anywhere(self):
        model = PathModel()
        model.append([_move(0, 0), LineTo(Point(0, 0))])
        model.append([_move(9, 9)])
        assert len(model) == 3

    def test_non_segment_rejected(self):
        model = PathModel()
        with pytest.raises(TypeError):
            model.append([(0, 0)])


class TestConcurrentReaders:
    def test_readers_only_see_complete_prefixes(self):
        model = PathModel()
        model.append([_move(0, 0)])
        expected = [_move(0, 0)] + [_quad(i, 0, i + 0.5, 0) for i in range(500)]
        stop = threading.Event()
        bad = []

        def reader():
            while not stop.is_set():
                snap = model.current_snapshot()
                if list(snap) != expected[:len(snap)]:
                    bad.append(len(snap))

        threads = [threading.Thread(target=reader) for _ in range(3)]
        for t in threads:
            t.start()
        for segment in expected[1:]:
            model.append([segment])
        stop.set()
        for t in threads:
            t.join()

        assert bad == []
        assert list(model.current_snapshot()) == expected
