"""
Data models for the crossword generator.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple


# Sentinel stored in grid cells that hold no letter
EMPTY = None


class Orientation(Enum):
    ACROSS = "across"
    DOWN = "down"

    @property
    def is_horizontal(self) -> bool:
        return self is Orientation.ACROSS

    def step(self) -> Tuple[int, int]:
        """Row/column delta between consecutive letters."""
        return (0, 1) if self is Orientation.ACROSS else (1, 0)


@dataclass
class Grid:
    """Rectangular letter matrix with fixed dimensions."""
    rows: int
    cols: int
    cells: List[List[Optional[str]]] = field(default_factory=list)

    def __post_init__(self):
        if self.rows < 1 or self.cols < 1:
            raise ValueError(
                f"Grid dimensions must be positive, got {self.rows}x{self.cols}"
            )
        if not self.cells:
            self.cells = [
                [EMPTY for _ in range(self.cols)]
                for _ in range(self.rows)
            ]

    def is_valid_position(self, row: int, col: int) -> bool:
        """Check if position is within grid bounds."""
        return 0 <= row < self.rows and 0 <= col < self.cols

    def get_cell(self, row: int, col: int) -> Optional[str]:
        """Get the letter at position, or EMPTY."""
        if not self.is_valid_position(row, col):
            raise IndexError(
                f"Cell ({row}, {col}) outside {self.rows}x{self.cols} grid"
            )
        return self.cells[row][col]

    def is_empty(self, row: int, col: int) -> bool:
        return self.get_cell(row, col) is EMPTY

    def is_filled(self, row: int, col: int) -> bool:
        """True when the position is in bounds and holds a letter."""
        return self.is_valid_position(row, col) and not self.is_empty(row, col)

    def set_letter(self, row: int, col: int, letter: str):
        """Set a letter in a cell."""
        if not self.is_valid_position(row, col):
            raise IndexError(
                f"Cell ({row}, {col}) outside {self.rows}x{self.cols} grid"
            )
        self.cells[row][col] = letter

    def count_filled(self) -> int:
        """Count cells holding a letter."""
        return sum(
            1 for row in self.cells for cell in row if cell is not EMPTY
        )

    def total_cells(self) -> int:
        return self.rows * self.cols

    def bounding_box(self) -> Optional[Tuple[int, int, int, int]]:
        """
        Smallest rectangle containing every filled cell.

        Returns:
            (min_row, min_col, max_row, max_col), or None if nothing is filled
        """
        min_row, min_col = self.rows, self.cols
        max_row, max_col = -1, -1

        for row in range(self.rows):
            for col in range(self.cols):
                if self.cells[row][col] is not EMPTY:
                    min_row = min(min_row, row)
                    max_row = max(max_row, row)
                    min_col = min(min_col, col)
                    max_col = max(max_col, col)

        if max_row < 0:
            return None
        return min_row, min_col, max_row, max_col

    def crop(self, min_row: int, min_col: int, max_row: int, max_col: int) -> 'Grid':
        """Return a new grid holding the inclusive sub-rectangle."""
        cells = [
            list(self.cells[row][min_col:max_col + 1])
            for row in range(min_row, max_row + 1)
        ]
        return Grid(
            rows=max_row - min_row + 1,
            cols=max_col - min_col + 1,
            cells=cells,
        )

    def to_rows(self, empty_char: str = ".") -> List[str]:
        """Grid as a list of strings, one per row."""
        return [
            "".join(cell if cell is not EMPTY else empty_char for cell in row)
            for row in self.cells
        ]

    def to_string(self, show_solution: bool = True) -> str:
        """Convert grid to string representation."""
        result = []
        for row in self.cells:
            line = ""
            for cell in row:
                if cell is EMPTY:
                    line += "■ "
                elif show_solution:
                    line += f"{cell.upper()} "
                else:
                    line += "_ "
            result.append(line.rstrip())
        return "\n".join(result)


@dataclass
class PlacedWord:
    """A word committed to the grid."""
    text: str
    row: int
    col: int
    orientation: Orientation
    number: int  # Commit order, shared across orientations

    @property
    def length(self) -> int:
        return len(self.text)

    @property
    def is_horizontal(self) -> bool:
        return self.orientation.is_horizontal

    def cells(self) -> List[Tuple[int, int]]:
        """All grid positions covered by this word."""
        d_row, d_col = self.orientation.step()
        return [
            (self.row + i * d_row, self.col + i * d_col)
            for i in range(len(self.text))
        ]

    def covers(self, row: int, col: int) -> bool:
        if self.is_horizontal:
            return row == self.row and self.col <= col < self.col + self.length
        return col == self.col and self.row <= row < self.row + self.length

    def shift(self, d_row: int, d_col: int):
        """Move the word's start by the given offset."""
        self.row += d_row
        self.col += d_col


@dataclass
class ClueEntry:
    """One numbered entry in the across or down list."""
    number: int
    word: str
    clue: str
    row: int
    col: int
    orientation: Orientation

    @property
    def length(self) -> int:
        return len(self.word)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'number': self.number,
            'word': self.word,
            'clue': self.clue,
            'row': self.row,
            'col': self.col,
        }


@dataclass
class PuzzleStatistics:
    """Counts describing a generated puzzle."""
    total_words: int = 0
    across_words: int = 0
    down_words: int = 0
    grid_rows: int = 0
    grid_cols: int = 0
    total_cells: int = 0
    filled_cells: int = 0

    @property
    def fill_percentage(self) -> int:
        if not self.total_cells:
            return 0
        return round(self.filled_cells / self.total_cells * 100)

    def to_dict(self) -> Dict[str, int]:
        return {
            'total_words': self.total_words,
            'across_words': self.across_words,
            'down_words': self.down_words,
            'grid_rows': self.grid_rows,
            'grid_cols': self.grid_cols,
            'total_cells': self.total_cells,
            'filled_cells': self.filled_cells,
            'fill_percentage': self.fill_percentage,
        }


@dataclass
class Puzzle:
    """Complete crossword layout with word lists and statistics."""
    grid: Grid
    words: List[PlacedWord] = field(default_factory=list)
    across: List[ClueEntry] = field(default_factory=list)
    down: List[ClueEntry] = field(default_factory=list)
    statistics: PuzzleStatistics = field(default_factory=PuzzleStatistics)
    unplaced: List[str] = field(default_factory=list)

    def entries(self) -> List[ClueEntry]:
        return self.across + self.down

    def clue_numbers(self) -> Dict[Tuple[int, int], int]:
        """
        Map each word's start cell to the number printed in it.

        Across numbers win when an across and a down word share a start cell.
        """
        numbers = {}
        for entry in self.across:
            numbers[(entry.row, entry.col)] = entry.number
        for entry in self.down:
            numbers.setdefault((entry.row, entry.col), entry.number)
        return numbers

    def words_at(self, row: int, col: int) -> List[ClueEntry]:
        """Entries whose letters cover the given cell, across first."""
        found = []
        for entry in self.across:
            if entry.row == row and entry.col <= col < entry.col + entry.length:
                found.append(entry)
        for entry in self.down:
            if entry.col == col and entry.row <= row < entry.row + entry.length:
                found.append(entry)
        return found

    def to_dict(self) -> Dict[str, Any]:
        """Plain-data view for serialization."""
        return {
            'grid': self.grid.to_rows(),
            'words': [
                {
                    'word': word.text,
                    'row': word.row,
                    'col': word.col,
                    'orientation': word.orientation.value,
                    'number': word.number,
                }
                for word in self.words
            ],
            'across': [entry.to_dict() for entry in self.across],
            'down': [entry.to_dict() for entry in self.down],
            'statistics': self.statistics.to_dict(),
            'unplaced': list(self.unplaced),
        }
