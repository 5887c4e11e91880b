import unittest
import sys
import os
import random

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_backtracker.core.cell import Cell, Direction, DIRECTIONS, OPPOSITE, DELTA

class TestCell(unittest.TestCase):
    def test_new_cell_is_closed(self):
        cell = Cell(2, 3)
        self.assertEqual(cell.position, (2, 3))
        self.assertTrue(cell.is_closed())
        for d in DIRECTIONS:
            self.assertTrue(cell.has_wall(d))

    def test_direction_cursor_exhausts(self):
        cell = Cell(0, 0)
        cell.reset(random.Random(7))
        drawn = [cell.next_candidate_direction() for _ in range(4)]
        self.assertEqual(sorted(drawn), sorted(DIRECTIONS))
        # Stays exhausted
        self.assertIsNone(cell.next_candidate_direction())
        self.assertIsNone(cell.next_candidate_direction())

    def test_reset_depends_only_on_rng(self):
        a, b = Cell(0, 0), Cell(0, 0)
        # Disturb a's permutation first
        a.reset(random.Random(1))
        a.reset(random.Random(99))
        b.reset(random.Random(99))
        self.assertEqual([a.next_candidate_direction() for _ in range(4)],
                         [b.next_candidate_direction() for _ in range(4)])

    def test_open_wall_and_reset(self):
        cell = Cell(1, 1)
        cell.open_wall(Direction.EAST)
        self.assertFalse(cell.has_wall(Direction.EAST))
        self.assertTrue(cell.has_wall(Direction.WEST))
        self.assertFalse(cell.is_closed())
        self.assertEqual(cell.wall_count(), 3)

        cell.next_candidate_direction()
        cell.reset(random.Random(3))
        self.assertTrue(cell.is_closed())
        self.assertEqual(len([cell.next_candidate_direction() for _ in range(4)]), 4)

    def test_direction_tables(self):
        for d in DIRECTIONS:
            self.assertEqual(OPPOSITE[OPPOSITE[d]], d)
            dr, dc = DELTA[d]
            odr, odc = DELTA[OPPOSITE[d]]
            self.assertEqual((dr + odr, dc + odc), (0, 0))
        self.assertEqual(DELTA[Direction.NORTH], (-1, 0))

if __name__ == '__main__':
    unittest.main()
