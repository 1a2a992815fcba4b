"""Tests for islands/tracker.py"""

from islands import ComponentTracker
from localtypes import Coord


class TestIslands:
    def test_starts_empty(self):
        tracker = ComponentTracker()
        assert tracker.islands == []
        assert tracker.visited == frozenset()
        assert tracker.current_position is None

    def test_create_returns_successive_ids(self):
        tracker = ComponentTracker()
        assert tracker.create_island(Coord(0, 0)) == 0
        assert tracker.create_island(Coord(2, 2)) == 1
        assert tracker.islands == [[Coord(0, 0)], [Coord(2, 2)]]

    def test_append_keeps_order(self):
        tracker = ComponentTracker()
        island_id = tracker.create_island(Coord(0, 1))
        tracker.append_to_island(island_id, Coord(0, 2))
        tracker.append_to_island(island_id, Coord(1, 2))
        assert tracker.islands == [[Coord(0, 1), Coord(0, 2), Coord(1, 2)]]
        assert tracker.first_cell(island_id) == Coord(0, 1)

    def test_assignment(self):
        tracker = ComponentTracker()
        tracker.create_island(Coord(0, 0))
        second = tracker.create_island(Coord(3, 1))
        tracker.append_to_island(second, Coord(3, 2))

        assert tracker.is_assigned(Coord(3, 2))
        assert not tracker.is_assigned(Coord(1, 1))
        assert tracker.islands[second] == [Coord(3, 1), Coord(3, 2)]

    def test_assignment_queries_are_idempotent(self):
        tracker = ComponentTracker()
        tracker.create_island(Coord(0, 0))
        before = tracker.islands

        assert tracker.is_assigned(Coord(0, 0)) == tracker.is_assigned(Coord(0, 0))
        assert tracker.is_assigned(Coord(0, 1)) == tracker.is_assigned(Coord(0, 1))
        assert tracker.islands == before
        assert tracker.visited == frozenset()

    def test_islands_is_a_copy(self):
        tracker = ComponentTracker()
        tracker.create_island(Coord(0, 0))
        tracker.islands[0].append(Coord(9, 9))
        assert tracker.islands == [[Coord(0, 0)]]

    def test_plain_tuples_match_coords(self):
        tracker = ComponentTracker()
        tracker.create_island(Coord(1, 2))
        assert tracker.is_assigned((1, 2))


class TestVisited:
    def test_mark_and_query(self):
        tracker = ComponentTracker()
        tracker.mark_visited(Coord(1, 1))
        assert tracker.is_visited(Coord(1, 1))
        assert not tracker.is_visited(Coord(0, 0))

    def test_visited_queries_are_idempotent(self):
        tracker = ComponentTracker()
        tracker.mark_visited(Coord(0, 0))
        assert tracker.is_visited(Coord(0, 0)) and tracker.is_visited(Coord(0, 0))
        assert not tracker.is_visited(Coord(0, 1)) and not tracker.is_visited(Coord(0, 1))
        assert tracker.visited == frozenset({Coord(0, 0)})

    def test_visited_is_independent_from_assignment(self):
        tracker = ComponentTracker()
        tracker.create_island(Coord(0, 0))
        assert not tracker.is_visited(Coord(0, 0))
        tracker.mark_visited(Coord(0, 1))
        assert not tracker.is_assigned(Coord(0, 1))

    def test_current_position_is_overwritten(self):
        tracker = ComponentTracker()
        tracker.set_current_position(Coord(0, 0))
        tracker.set_current_position(Coord(2, 3))
        assert tracker.current_position == Coord(2, 3)
