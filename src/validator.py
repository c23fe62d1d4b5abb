"""
Crossword Placement Validator

Rules deciding whether a word may be written into the grid:
1. Fit: the word lies inside the grid and agrees with every letter it overlaps
2. Boundaries: the word connects to the puzzle without touching other words
   side by side

Also validates finished puzzles so a layout can be checked before export.
"""

import os
import sys
from dataclasses import dataclass, field
from typing import Dict, List, Tuple

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from models import Grid, Orientation, Puzzle


# Shortest run of letters that counts as a finished neighbouring word
MIN_COMPLETE_WORD_LENGTH = 2


class ValidationError(Exception):
    """Raised when a word list cannot be used to build a puzzle."""
    pass


def can_place_word(
    grid: Grid,
    word: str,
    row: int,
    col: int,
    orientation: Orientation
) -> bool:
    """
    Check that a word fits the grid without letter conflicts.

    Crossword adjacency rules are not considered here.
    """
    length = len(word)
    if row < 0 or col < 0:
        return False
    if orientation.is_horizontal:
        if row >= grid.rows or col + length > grid.cols:
            return False
    else:
        if col >= grid.cols or row + length > grid.rows:
            return False

    d_row, d_col = orientation.step()
    for i, letter in enumerate(word):
        cell = grid.get_cell(row + i * d_row, col + i * d_col)
        if cell is not None and cell != letter:
            return False

    return True


def adjacent_positions(
    row: int,
    col: int,
    orientation: Orientation
) -> List[Tuple[int, int]]:
    """Neighbours of a cell perpendicular to the word direction."""
    if orientation.is_horizontal:
        return [(row - 1, col), (row + 1, col)]
    return [(row, col - 1), (row, col + 1)]


def has_word_ending_at(
    grid: Grid,
    row: int,
    col: int,
    orientation: Orientation
) -> bool:
    """
    Check for a complete word in the given direction ending at a cell.

    Counts filled cells backward (left for ACROSS, up for DOWN) starting at
    the cell itself.
    """
    d_row, d_col = orientation.step()
    length = 0
    while grid.is_filled(row, col):
        length += 1
        row -= d_row
        col -= d_col

    return length >= MIN_COMPLETE_WORD_LENGTH


def has_valid_word_boundaries(
    grid: Grid,
    word: str,
    row: int,
    col: int,
    orientation: Orientation,
    allow_contact_links: bool = False
) -> bool:
    """
    Check that a placement connects to the puzzle and follows crossword rules.

    By default a word must share at least one letter with the puzzle. With
    allow_contact_links, touching the end of a perpendicular word is enough,
    which can leave words that share no cell with the rest of the layout.

    Args:
        grid: Current grid state
        word: Word to place
        row: Starting row
        col: Starting column
        orientation: Placement direction
        allow_contact_links: Let a filled perpendicular neighbour satisfy the
            connection requirement when no letter is shared

    Returns:
        True if placement is valid
    """
    d_row, d_col = orientation.step()
    # Neighbouring words run across the placement direction
    neighbour_orientation = (
        Orientation.DOWN if orientation.is_horizontal else Orientation.ACROSS
    )
    intersections = 0
    contacts = 0

    for i, letter in enumerate(word):
        current_row = row + i * d_row
        current_col = col + i * d_col
        existing = grid.get_cell(current_row, current_col)

        if existing is not None:
            if existing != letter:
                return False
            intersections += 1
            continue

        for adj_row, adj_col in adjacent_positions(
            current_row, current_col, orientation
        ):
            if not grid.is_filled(adj_row, adj_col):
                continue
            if not has_word_ending_at(
                grid, adj_row, adj_col, neighbour_orientation
            ):
                return False
            contacts += 1

    if intersections:
        return True
    return allow_contact_links and contacts > 0


def is_valid_placement(
    grid: Grid,
    word: str,
    row: int,
    col: int,
    orientation: Orientation,
    allow_contact_links: bool = False
) -> bool:
    """Fit test followed by boundary rules."""
    return (
        can_place_word(grid, word, row, col, orientation) and
        has_valid_word_boundaries(
            grid, word, row, col, orientation, allow_contact_links
        )
    )


@dataclass
class ValidationResult:
    """Result of puzzle validation."""
    valid: bool
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    stats: Dict = field(default_factory=dict)

    def __str__(self):
        status = "✅ VALID" if self.valid else "❌ INVALID"

        lines = [f"Layout: {status}"]

        if self.errors:
            lines.append("\nErrors:")
            for e in self.errors:
                lines.append(f"  ❌ {e}")

        if self.warnings:
            lines.append("\nWarnings:")
            for w in self.warnings:
                lines.append(f"  ⚠️ {w}")

        if self.stats:
            lines.append("\nStats:")
            for k, v in self.stats.items():
                lines.append(f"  {k}: {v}")

        return "\n".join(lines)


class PuzzleValidator:
    """
    Checks a generated puzzle against the layout invariants.
    """

    def __init__(self, puzzle: Puzzle, require_shared_cells: bool = True):
        """
        Initialize validator.

        Args:
            puzzle: Puzzle produced by the placement engine
            require_shared_cells: Treat a word that shares no cell with
                earlier words as an error rather than a warning
        """
        self.puzzle = puzzle
        self.require_shared_cells = require_shared_cells

    def validate(self) -> ValidationResult:
        """
        Validate the puzzle.

        Returns:
            ValidationResult with details
        """
        result = ValidationResult(valid=True)
        grid = self.puzzle.grid
        result.stats["size"] = f"{grid.rows}x{grid.cols}"
        result.stats["words"] = len(self.puzzle.words)

        self._check_bounds(result)
        if result.errors:
            result.valid = False
            return result

        self._check_consistency(result)
        self._check_connections(result)
        self._check_trimmed(result)
        self._check_statistics(result)

        if self.puzzle.unplaced:
            result.warnings.append(
                f"{len(self.puzzle.unplaced)} word(s) could not be placed: "
                f"{', '.join(self.puzzle.unplaced)}"
            )

        result.valid = not result.errors
        return result

    def _check_bounds(self, result: ValidationResult):
        grid = self.puzzle.grid
        for word in self.puzzle.words:
            for row, col in word.cells():
                if not grid.is_valid_position(row, col):
                    result.errors.append(
                        f"'{word.text}' extends outside the grid at ({row}, {col})"
                    )
                    break

    def _check_consistency(self, result: ValidationResult):
        """Rebuild the grid from the word list and compare cell by cell."""
        grid = self.puzzle.grid
        rebuilt = Grid(rows=grid.rows, cols=grid.cols)

        for word in self.puzzle.words:
            for (row, col), letter in zip(word.cells(), word.text):
                existing = rebuilt.get_cell(row, col)
                if existing is not None and existing != letter:
                    result.errors.append(
                        f"'{word.text}' conflicts at ({row}, {col}): "
                        f"'{letter}' vs '{existing}'"
                    )
                rebuilt.set_letter(row, col, letter)

        if rebuilt.cells != grid.cells:
            result.errors.append("Grid does not match the placed word list")

    def _check_connections(self, result: ValidationResult):
        """Every word after the first must overlap an earlier word."""
        filled = set()
        for index, word in enumerate(
            sorted(self.puzzle.words, key=lambda w: w.number)
        ):
            cells = word.cells()
            if index > 0 and not any(cell in filled for cell in cells):
                message = f"'{word.text}' does not share a cell with earlier words"
                if self.require_shared_cells:
                    result.errors.append(message)
                else:
                    result.warnings.append(message)
            filled.update(cells)

    def _check_trimmed(self, result: ValidationResult):
        grid = self.puzzle.grid
        box = grid.bounding_box()
        if box is None:
            if self.puzzle.words:
                result.errors.append("Grid is empty but words were placed")
            return
        if box != (0, 0, grid.rows - 1, grid.cols - 1):
            result.errors.append(
                f"Grid has empty border rows or columns (filled area {box})"
            )

    def _check_statistics(self, result: ValidationResult):
        stats = self.puzzle.statistics
        grid = self.puzzle.grid
        expected = {
            "total_words": len(self.puzzle.words),
            "across_words": len(self.puzzle.across),
            "down_words": len(self.puzzle.down),
            "grid_rows": grid.rows,
            "grid_cols": grid.cols,
            "total_cells": grid.total_cells(),
            "filled_cells": grid.count_filled(),
        }
        for name, value in expected.items():
            actual = getattr(stats, name)
            if actual != value:
                result.errors.append(
                    f"Statistic {name} is {actual}, expected {value}"
                )


def validate_puzzle(
    puzzle: Puzzle,
    require_shared_cells: bool = True
) -> ValidationResult:
    """
    Convenience function to validate a puzzle.

    Args:
        puzzle: Puzzle to validate
        require_shared_cells: See PuzzleValidator

    Returns:
        ValidationResult
    """
    validator = PuzzleValidator(puzzle, require_shared_cells)
    return validator.validate()
