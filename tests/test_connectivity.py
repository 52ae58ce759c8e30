"""Test the grid connectivity predicates."""

import pytest

from src.engine import (
    Blacken,
    MarkPath,
    RC,
    is_adjacent,
    is_connected_for_keyword,
    is_on_lolo_path,
    parse_puzzle,
)


class TestIsAdjacent:
    """Straight-line adjacency through done cells."""

    def test_neighbours_are_adjacent(self):
        grid = parse_puzzle("AB\nCD")
        assert is_adjacent(grid, RC(0, 0), RC(0, 1))
        assert is_adjacent(grid, RC(0, 0), RC(1, 0))
        assert is_adjacent(grid, RC(1, 1), RC(0, 1))

    def test_same_cell_is_not_adjacent(self):
        grid = parse_puzzle("AB")
        assert not is_adjacent(grid, RC(0, 0), RC(0, 0))

    def test_diagonal_is_not_adjacent(self):
        grid = parse_puzzle("AB\nCD")
        assert not is_adjacent(grid, RC(0, 0), RC(1, 1))

    def test_gap_between_is_adjacent(self):
        grid = parse_puzzle("A--B")
        assert is_adjacent(grid, RC(0, 0), RC(0, 3))
        assert is_adjacent(grid, RC(0, 3), RC(0, 0))

    def test_letter_between_blocks(self):
        grid = parse_puzzle("AQB")
        assert not is_adjacent(grid, RC(0, 0), RC(0, 2))

    def test_blackened_between_is_adjacent(self):
        grid = parse_puzzle("AQB")
        grid[RC(0, 1)].blacken()
        assert is_adjacent(grid, RC(0, 0), RC(0, 2))

    def test_active_conductor_blocks_adjacency(self):
        grid = parse_puzzle("_X_")
        assert not is_adjacent(grid, RC(0, 0), RC(0, 2))


class TestIsConnectedForKeyword:
    """Keyword connectivity with conductor bends."""

    def test_first_move_always_connected(self):
        grid = parse_puzzle("AB\nCD")
        assert is_connected_for_keyword(grid, [], RC(1, 1))

    def test_must_be_aligned(self):
        grid = parse_puzzle("AB\nCD")
        assert not is_connected_for_keyword(grid, [Blacken(row=0, col=0)], RC(1, 1))

    def test_same_cell_not_connected(self):
        grid = parse_puzzle("AB")
        assert not is_connected_for_keyword(grid, [Blacken(row=0, col=0)], RC(0, 0))

    def test_straight_continuation(self):
        grid = parse_puzzle("ABC")
        prior = [Blacken(row=0, col=0), Blacken(row=0, col=1)]
        assert is_connected_for_keyword(grid, prior, RC(0, 2))

    def test_turn_at_ordinary_cell_rejected(self):
        grid = parse_puzzle("AB\n-C")
        prior = [Blacken(row=0, col=0), Blacken(row=0, col=1)]
        assert not is_connected_for_keyword(grid, prior, RC(1, 1))

    def test_reverse_at_ordinary_cell_rejected(self):
        grid = parse_puzzle("-AB")
        prior = [Blacken(row=0, col=1), Blacken(row=0, col=2)]
        assert not is_connected_for_keyword(grid, prior, RC(0, 0))

    @pytest.mark.parametrize("candidate, expected", [
        (RC(0, 1), True),   # turn up
        (RC(2, 1), True),   # turn down
        (RC(1, 2), True),   # straight on
        (RC(1, 0), False),  # straight back
    ])
    def test_bends_at_marked_conductor(self, candidate, expected):
        grid = parse_puzzle("-A-\nBXC\n-D-")
        prior = [Blacken(row=1, col=0), MarkPath(row=1, col=1)]
        assert is_connected_for_keyword(grid, prior, candidate) is expected

    def test_backtrack_at_conductor_across_gap(self):
        """Walking back over a done cell is still a forbidden reversal."""
        grid = parse_puzzle("A-X")
        prior = [Blacken(row=0, col=0), MarkPath(row=0, col=2)]
        assert not is_connected_for_keyword(grid, prior, RC(0, 0))

    def test_lone_conductor_allows_any_direction(self):
        grid = parse_puzzle("-A-\nBX-")
        prior = [MarkPath(row=1, col=1)]
        assert is_connected_for_keyword(grid, prior, RC(0, 1))
        assert is_connected_for_keyword(grid, prior, RC(1, 0))

    def test_blackened_conductor_does_not_bend(self):
        grid = parse_puzzle("AX\n-B")
        grid[RC(0, 1)].blacken()
        prior = [Blacken(row=0, col=0), MarkPath(row=0, col=1)]
        assert not is_connected_for_keyword(grid, prior, RC(1, 1))

    def test_walks_through_active_conductor(self):
        grid = parse_puzzle("AXB")
        assert is_connected_for_keyword(grid, [Blacken(row=0, col=0)], RC(0, 2))

    def test_blocked_by_unfinished_letter(self):
        grid = parse_puzzle("AQB")
        assert not is_connected_for_keyword(grid, [Blacken(row=0, col=0)], RC(0, 2))

    def test_blocked_by_blank(self):
        grid = parse_puzzle("A_B")
        assert not is_connected_for_keyword(grid, [Blacken(row=0, col=0)], RC(0, 2))


class TestIsOnLoloPath:
    """Rising diagonal membership."""

    @pytest.mark.parametrize("target", [RC(1, 3), RC(0, 4), RC(3, 1), RC(4, 0)])
    def test_on_rising_diagonal(self, target):
        assert is_on_lolo_path(RC(2, 2), target)

    @pytest.mark.parametrize("target", [
        RC(2, 2),  # anchor itself
        RC(2, 4),  # same row
        RC(0, 2),  # same column
        RC(1, 1),  # falling diagonal
        RC(3, 3),  # falling diagonal
        RC(0, 3),  # off any diagonal
    ])
    def test_not_on_rising_diagonal(self, target):
        assert not is_on_lolo_path(RC(2, 2), target)
