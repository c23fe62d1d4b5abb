# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""Unit tests for models module."""

import os
import sys
import unittest

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from models import (
    EMPTY, Grid, Orientation, PlacedWord, ClueEntry, PuzzleStatistics, Puzzle
)


class TestGrid(unittest.TestCase):
    """Tests for Grid class."""

    def test_new_grid_is_empty(self):
        grid = Grid(rows=3, cols=4)

        self.assertEqual(len(grid.cells), 3)
        self.assertEqual(len(grid.cells[0]), 4)
        self.assertEqual(grid.count_filled(), 0)
        self.assertEqual(grid.total_cells(), 12)
        self.assertTrue(grid.is_empty(2, 3))

    def test_invalid_dimensions(self):
        with self.assertRaises(ValueError):
            Grid(rows=0, cols=5)
        with self.assertRaises(ValueError):
            Grid(rows=5, cols=-1)

    def test_set_and_get_letter(self):
        grid = Grid(rows=2, cols=2)
        grid.set_letter(1, 0, 'q')

        self.assertEqual(grid.get_cell(1, 0), 'q')
        self.assertFalse(grid.is_empty(1, 0))
        self.assertEqual(grid.count_filled(), 1)

    def test_out_of_bounds_access(self):
        grid = Grid(rows=2, cols=2)

        with self.assertRaises(IndexError):
            grid.get_cell(2, 0)
        with self.assertRaises(IndexError):
            grid.set_letter(0, -1, 'a')

    def test_is_filled_handles_out_of_bounds(self):
        grid = Grid(rows=2, cols=2)
        grid.set_letter(0, 0, 'a')

        self.assertTrue(grid.is_filled(0, 0))
        self.assertFalse(grid.is_filled(0, 1))
        self.assertFalse(grid.is_filled(-1, 0))
        self.assertFalse(grid.is_filled(0, 2))

    def test_bounding_box(self):
        grid = Grid(rows=5, cols=5)
        self.assertIsNone(grid.bounding_box())

        grid.set_letter(1, 3, 'a')
        grid.set_letter(3, 2, 'b')
        self.assertEqual(grid.bounding_box(), (1, 2, 3, 3))

    def test_crop_copies_cells(self):
        grid = Grid(rows=4, cols=4)
        grid.set_letter(1, 1, 'x')
        grid.set_letter(2, 2, 'y')

        cropped = grid.crop(1, 1, 2, 2)

        self.assertEqual(cropped.rows, 2)
        self.assertEqual(cropped.cols, 2)
        self.assertEqual(cropped.to_rows(), ["x.", ".y"])

        cropped.set_letter(0, 1, 'z')
        self.assertTrue(grid.is_empty(1, 2))

    def test_to_string(self):
        grid = Grid(rows=1, cols=3)
        grid.set_letter(0, 0, 'h')
        grid.set_letter(0, 2, 'i')

        self.assertEqual(grid.to_string(), "H ■ I")
        self.assertEqual(grid.to_string(show_solution=False), "_ ■ _")


class TestPlacedWord(unittest.TestCase):
    """Tests for PlacedWord class."""

    def test_across_cells(self):
        word = PlacedWord("cat", 2, 1, Orientation.ACROSS, 1)

        self.assertEqual(word.length, 3)
        self.assertTrue(word.is_horizontal)
        self.assertEqual(word.cells(), [(2, 1), (2, 2), (2, 3)])
        self.assertTrue(word.covers(2, 3))
        self.assertFalse(word.covers(3, 1))

    def test_down_cells(self):
        word = PlacedWord("dog", 0, 4, Orientation.DOWN, 2)

        self.assertFalse(word.is_horizontal)
        self.assertEqual(word.cells(), [(0, 4), (1, 4), (2, 4)])
        self.assertTrue(word.covers(1, 4))
        self.assertFalse(word.covers(3, 4))

    def test_shift(self):
        word = PlacedWord("dog", 5, 6, Orientation.DOWN, 1)
        word.shift(-4, -2)

        self.assertEqual((word.row, word.col), (1, 4))


class TestPuzzleStatistics(unittest.TestCase):
    """Tests for PuzzleStatistics class."""

    def test_fill_percentage_rounds(self):
        stats = PuzzleStatistics(total_cells=12, filled_cells=6)
        self.assertEqual(stats.fill_percentage, 50)

        stats = PuzzleStatistics(total_cells=3, filled_cells=2)
        self.assertEqual(stats.fill_percentage, 67)

    def test_fill_percentage_empty_grid(self):
        self.assertEqual(PuzzleStatistics().fill_percentage, 0)


class TestPuzzle(unittest.TestCase):
    """Tests for Puzzle lookups."""

    def setUp(self):
        # .c.
        # cat
        # .r.
        # .t.
        grid = Grid(rows=4, cols=3)
        for row, col, letter in [
            (0, 1, 'c'), (1, 0, 'c'), (1, 1, 'a'), (1, 2, 't'),
            (2, 1, 'r'), (3, 1, 't'),
        ]:
            grid.set_letter(row, col, letter)

        self.cat = ClueEntry(1, "cat", "Pet", 1, 0, Orientation.ACROSS)
        self.car = ClueEntry(2, "car", "Auto", 0, 1, Orientation.DOWN)
        self.art = ClueEntry(3, "art", "Craft", 1, 1, Orientation.DOWN)
        self.puzzle = Puzzle(
            grid=grid,
            words=[
                PlacedWord("cat", 1, 0, Orientation.ACROSS, 1),
                PlacedWord("car", 0, 1, Orientation.DOWN, 2),
                PlacedWord("art", 1, 1, Orientation.DOWN, 3),
            ],
            across=[self.cat],
            down=[self.car, self.art],
        )

    def test_clue_numbers(self):
        self.assertEqual(
            self.puzzle.clue_numbers(),
            {(1, 0): 1, (0, 1): 2, (1, 1): 3}
        )

    def test_clue_numbers_across_wins_shared_start(self):
        self.puzzle.down.append(
            ClueEntry(4, "cop", "Officer", 1, 0, Orientation.DOWN)
        )
        self.assertEqual(self.puzzle.clue_numbers()[(1, 0)], 1)

    def test_words_at(self):
        found = self.puzzle.words_at(1, 1)
        self.assertEqual([e.word for e in found], ["cat", "car", "art"])

        self.assertEqual([e.word for e in self.puzzle.words_at(3, 1)], ["art"])
        self.assertEqual(self.puzzle.words_at(0, 0), [])

    def test_entries(self):
        self.assertEqual(
            [e.number for e in self.puzzle.entries()], [1, 2, 3]
        )

    def test_to_dict(self):
        data = self.puzzle.to_dict()

        self.assertEqual(data['grid'], [".c.", "cat", ".r.", ".t."])
        self.assertEqual(data['words'][1]['orientation'], "down")
        self.assertEqual(data['across'][0]['clue'], "Pet")
        self.assertEqual(data['unplaced'], [])


class TestEmptySentinel(unittest.TestCase):

    def test_empty_is_none(self):
        self.assertIsNone(EMPTY)


if __name__ == '__main__':
    unittest.main()
