"""
Greedy placement engine for crossword layouts.

Places a word list onto a grid so the words interlock through shared
letters. Words are ordered by how likely they are to create intersections,
the first one seeds the centre of the grid, and every other word is tried at
its best-scoring valid position. Words that do not fit are requeued until a
fixed attempt budget runs out.
"""

import logging
import math
import os
import sys
from collections import deque
from typing import Dict, List, NamedTuple, Optional, Sequence, Tuple

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from clues import ClueProvider
from models import (
    Grid, Orientation, PlacedWord, ClueEntry, Puzzle, PuzzleStatistics
)
from validator import (
    ValidationError, can_place_word, has_valid_word_boundaries,
    is_valid_placement
)


# Approximate English letter frequency, percent
LETTER_FREQUENCY = {
    'e': 12.02, 't': 9.10, 'a': 8.12, 'o': 7.68, 'i': 7.31, 'n': 6.95,
    's': 6.28, 'r': 6.02, 'h': 5.92, 'd': 4.32, 'l': 3.98, 'u': 2.88,
    'c': 2.71, 'm': 2.61, 'w': 2.30, 'f': 2.11, 'g': 2.09, 'y': 2.11,
    'p': 1.82, 'b': 1.49, 'v': 1.11, 'k': 0.69, 'j': 0.10, 'x': 0.10,
    'q': 0.10, 'z': 0.07,
}

DEFAULT_ATTEMPTS_PER_WORD = 100
DEFAULT_MAX_GRID_SIZE = 50

# Position score weights
INTERSECTION_WEIGHT = 10
MIDDLE_WEIGHT = 100


class Position(NamedTuple):
    """Candidate start cell and direction for a word."""
    row: int
    col: int
    orientation: Orientation


def middle_bias(index: int, length: int) -> float:
    """
    Weight of a letter position: 1.0 at the middle of the word, 0.0 at the ends.

    A one-letter word is all middle.
    """
    if length <= 1:
        return 1.0
    return 1 - abs(2 * index / (length - 1) - 1)


def word_intersection_score(word: str) -> float:
    """Sum of letter frequencies weighted toward the middle of the word."""
    length = len(word)
    return sum(
        LETTER_FREQUENCY.get(letter, 0.0) * middle_bias(i, length)
        for i, letter in enumerate(word)
    )


def sort_words_by_intersection_potential(words: Sequence[str]) -> List[str]:
    """
    Order words so the most connectable ones are placed first.

    Descending intersection score, then descending length; input order breaks
    any remaining tie.
    """
    return sorted(
        words,
        key=lambda w: (-word_intersection_score(w), -len(w))
    )


def calculate_grid_size(
    words: Sequence[str],
    max_size: int = DEFAULT_MAX_GRID_SIZE
) -> Tuple[int, int]:
    """
    Estimate working grid dimensions from word count and length.

    The working grid is generous; trimming shrinks it afterwards.

    Returns:
        (rows, cols)
    """
    if not words:
        return max_size, max_size

    max_length = max(len(w) for w in words)
    base = max(max_length + 4, math.ceil(math.sqrt(len(words) * max_length * 3)))
    size = int(base * 1.5)
    size = max(min(size, max_size), max_length)
    return size, size


class PlacementEngine:
    """
    Builds a crossword layout from a word list.

    One engine owns one grid at a time; generate() resets all state, so an
    engine can be reused but must not be shared between concurrent calls.
    """

    def __init__(
        self,
        attempts_per_word: int = DEFAULT_ATTEMPTS_PER_WORD,
        max_grid_size: int = DEFAULT_MAX_GRID_SIZE,
        allow_contact_links: bool = False,
        clue_provider: Optional[ClueProvider] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize the engine.

        Args:
            attempts_per_word: Retry budget per word left after the seed
            max_grid_size: Upper bound for the working grid side length
            allow_contact_links: Accept placements that only touch the
                puzzle through a perpendicular neighbour
            clue_provider: Source of clue text (placeholder clues by default)
            logger: Logger instance (uses module logger if not provided)
        """
        self.attempts_per_word = attempts_per_word
        self.max_grid_size = max_grid_size
        self.allow_contact_links = allow_contact_links
        self.clue_provider = clue_provider or ClueProvider()
        self.logger = logger if logger else logging.getLogger(__name__)

        self.grid: Optional[Grid] = None
        self.placed_words: List[PlacedWord] = []
        self.unplaced_words: List[str] = []
        self.trim_offset: Tuple[int, int] = (0, 0)
        self._next_number = 1
        self._reset_stats()

    def generate(
        self,
        words: Sequence[str],
        clues: Optional[Dict[str, str]] = None
    ) -> Puzzle:
        """
        Generate a crossword layout.

        Args:
            words: Distinct lowercase words
            clues: Optional clue text keyed by word, overriding the defaults

        Returns:
            Puzzle built from the words that could be placed

        Raises:
            ValidationError: If no words are provided
        """
        if not words:
            raise ValidationError("No words provided")

        sorted_words = sort_words_by_intersection_potential(words)
        rows, cols = calculate_grid_size(sorted_words, self.max_grid_size)

        self._reset(rows, cols)
        self.logger.debug(f"Working grid: {rows}x{cols}")
        self.logger.debug(f"Placement order: {', '.join(sorted_words)}")

        self._place_words(sorted_words)
        self._trim_grid()

        provider = self.clue_provider
        if clues:
            provider = provider.with_overrides(clues)
        puzzle = self._create_puzzle(provider)

        self.logger.info(
            f"Placed {len(self.placed_words)}/{len(sorted_words)} words on a "
            f"{self.grid.rows}x{self.grid.cols} grid "
            f"({self.stats['attempts']} attempts)"
        )
        if self.unplaced_words:
            self.logger.info(
                f"Could not place: {', '.join(self.unplaced_words)}"
            )

        return puzzle

    def _reset(self, rows: int, cols: int):
        self.grid = Grid(rows=rows, cols=cols)
        self.placed_words = []
        self.unplaced_words = []
        self.trim_offset = (0, 0)
        self._next_number = 1
        self._reset_stats()

    def _reset_stats(self):
        self.stats: Dict[str, int] = {
            "attempts": 0,
            "max_attempts": 0,
            "requeues": 0,
            "positions_scored": 0,
            "stale_rejections": 0,
        }

    def seed_position(self, word: str) -> Position:
        """Horizontal start cell centring a word on the working grid."""
        return Position(
            row=self.grid.rows // 2,
            col=(self.grid.cols - len(word)) // 2,
            orientation=Orientation.ACROSS,
        )

    def _place_words(self, words: List[str]):
        """Seed the grid with the first word, then place the rest."""
        seed = words[0]
        position = self.seed_position(seed)
        self.place_word(seed, *position)

        queue = deque(words[1:])
        max_attempts = len(queue) * self.attempts_per_word
        self.stats["max_attempts"] = max_attempts

        attempts = 0
        while queue and attempts < max_attempts:
            word = queue[0]
            if self.try_place_word(word):
                queue.popleft()
            else:
                queue.rotate(-1)
                self.stats["requeues"] += 1
            attempts += 1

        self.stats["attempts"] = attempts
        self.unplaced_words = list(queue)
        for word in self.unplaced_words:
            self.logger.debug(f"Dropped '{word}' after {attempts} attempts")

    def try_place_word(self, word: str) -> bool:
        """
        Place a word at its best valid position.

        Returns:
            True if the word was committed
        """
        positions = [
            position for position in self.find_valid_positions(word)
            if has_valid_word_boundaries(
                self.grid, word, *position, self.allow_contact_links
            )
        ]
        if not positions:
            return False

        self.stats["positions_scored"] += len(positions)
        positions.sort(
            key=lambda p: self.calculate_position_score(word, *p),
            reverse=True
        )

        for position in positions:
            if self.place_word(word, *position):
                return True
            self.stats["stale_rejections"] += 1

        return False

    def find_valid_positions(self, word: str) -> List[Position]:
        """
        Every position where the word fits without letter conflicts.

        Horizontal positions come first, each set in row-major order.
        """
        positions = []
        length = len(word)

        for row in range(self.grid.rows):
            for col in range(self.grid.cols - length + 1):
                if can_place_word(self.grid, word, row, col, Orientation.ACROSS):
                    positions.append(Position(row, col, Orientation.ACROSS))

        for row in range(self.grid.rows - length + 1):
            for col in range(self.grid.cols):
                if can_place_word(self.grid, word, row, col, Orientation.DOWN):
                    positions.append(Position(row, col, Orientation.DOWN))

        return positions

    def count_intersections(
        self,
        word: str,
        row: int,
        col: int,
        orientation: Orientation
    ) -> int:
        """Number of the word's cells already holding a letter."""
        d_row, d_col = orientation.step()
        return sum(
            1 for i in range(len(word))
            if not self.grid.is_empty(row + i * d_row, col + i * d_col)
        )

    def calculate_position_score(
        self,
        word: str,
        row: int,
        col: int,
        orientation: Orientation
    ) -> float:
        """
        Score a position, favouring intersections near the middle of the word.

        Returns:
            Position score (higher is better)
        """
        d_row, d_col = orientation.step()
        length = len(word)
        intersections = 0
        middle_total = 0.0

        for i in range(length):
            if not self.grid.is_empty(row + i * d_row, col + i * d_col):
                intersections += 1
                middle_total += middle_bias(i, length)

        return intersections * INTERSECTION_WEIGHT + middle_total * MIDDLE_WEIGHT

    def place_word(
        self,
        word: str,
        row: int,
        col: int,
        orientation: Orientation
    ) -> bool:
        """
        Commit a word if it is valid against the current grid.

        The first word only needs to fit; later words must also satisfy the
        boundary rules.

        Returns:
            True if the word was written to the grid
        """
        if self.placed_words:
            valid = is_valid_placement(
                self.grid, word, row, col, orientation, self.allow_contact_links
            )
        else:
            valid = can_place_word(self.grid, word, row, col, orientation)
        if not valid:
            return False

        intersections = self.count_intersections(word, row, col, orientation)
        d_row, d_col = orientation.step()
        for i, letter in enumerate(word):
            self.grid.set_letter(row + i * d_row, col + i * d_col, letter)

        placed = PlacedWord(
            text=word,
            row=row,
            col=col,
            orientation=orientation,
            number=self._next_number,
        )
        self.placed_words.append(placed)
        self._next_number += 1

        self.logger.debug(
            f"#{placed.number} '{word}' {orientation.value} at ({row}, {col}), "
            f"{intersections} intersections"
        )
        return True

    def _trim_grid(self):
        """Shrink the grid to the filled area and rebase word positions."""
        box = self.grid.bounding_box()
        if box is None:
            return

        min_row, min_col, max_row, max_col = box
        self.grid = self.grid.crop(min_row, min_col, max_row, max_col)
        for placed in self.placed_words:
            placed.shift(-min_row, -min_col)
        self.trim_offset = (min_row, min_col)

    def _create_puzzle(self, clue_provider: ClueProvider) -> Puzzle:
        """Assemble the puzzle structure from the placed words."""
        across = []
        down = []
        for placed in self.placed_words:
            entry = ClueEntry(
                number=placed.number,
                word=placed.text,
                clue=clue_provider.clue_for(placed.text),
                row=placed.row,
                col=placed.col,
                orientation=placed.orientation,
            )
            if placed.is_horizontal:
                across.append(entry)
            else:
                down.append(entry)

        statistics = PuzzleStatistics(
            total_words=len(self.placed_words),
            across_words=len(across),
            down_words=len(down),
            grid_rows=self.grid.rows,
            grid_cols=self.grid.cols,
            total_cells=self.grid.total_cells(),
            filled_cells=self.grid.count_filled(),
        )

        return Puzzle(
            grid=self.grid,
            words=list(self.placed_words),
            across=across,
            down=down,
            statistics=statistics,
            unplaced=list(self.unplaced_words),
        )
