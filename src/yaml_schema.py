# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""
YAML schema definitions for the crossword puzzle export format.

Defines the data structures written to puzzle YAML files.
"""

from dataclasses import dataclass, field
from typing import List, Dict, Any


@dataclass
class WordEntryData:
    """Represents a numbered word (across or down)."""
    number: int
    row: int
    col: int
    length: int
    answer: str
    clue: str


@dataclass
class GridData:
    """Grid representation in the puzzle."""
    rows: int
    columns: int
    pattern: str  # Text representation with '.' for letters and '#' for empty
    solution: str  # Text representation with letters and '#' for empty
    numbers: Dict[str, int] = field(default_factory=dict)  # "row,col" -> number


@dataclass
class GenerationStats:
    """Statistics from the placement run."""
    attempts: int = 0
    max_attempts: int = 0
    requeues: int = 0
    positions_scored: int = 0
    generation_time_seconds: float = 0.0


@dataclass
class StatisticsData:
    """Layout statistics for the puzzle."""
    total_words: int = 0
    across_words: int = 0
    down_words: int = 0
    grid_rows: int = 0
    grid_cols: int = 0
    total_cells: int = 0
    filled_cells: int = 0
    fill_percentage: int = 0


@dataclass
class PuzzleMetadata:
    """Metadata for the puzzle."""
    title: str
    author: str
    date: str
    word_count: int = 0
    generation_stats: GenerationStats = field(default_factory=GenerationStats)


@dataclass
class PuzzleYAMLData:
    """
    Complete puzzle data for the YAML export format.

    This is the main data structure that gets serialized to/from YAML.
    """
    metadata: PuzzleMetadata
    grid: GridData
    words: Dict[str, List[WordEntryData]] = field(
        default_factory=lambda: {'across': [], 'down': []}
    )
    statistics: StatisticsData = field(default_factory=StatisticsData)
    unplaced: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to dictionary for YAML serialization.

        Returns:
            Dictionary representation of the puzzle
        """
        words = {
            direction: [
                {
                    'number': entry.number,
                    'row': entry.row,
                    'col': entry.col,
                    'length': entry.length,
                    'answer': entry.answer,
                    'clue': entry.clue,
                }
                for entry in self.words.get(direction, [])
            ]
            for direction in ('across', 'down')
        }

        stats = self.metadata.generation_stats
        return {
            'metadata': {
                'title': self.metadata.title,
                'author': self.metadata.author,
                'date': self.metadata.date,
                'word_count': self.metadata.word_count,
                'generation_stats': {
                    'attempts': stats.attempts,
                    'max_attempts': stats.max_attempts,
                    'requeues': stats.requeues,
                    'positions_scored': stats.positions_scored,
                    'generation_time_seconds': stats.generation_time_seconds,
                },
            },
            'grid': {
                'dimensions': {
                    'rows': self.grid.rows,
                    'columns': self.grid.columns,
                },
                'pattern': self.grid.pattern,
                'solution': self.grid.solution,
                'numbers': dict(self.grid.numbers),
            },
            'words': words,
            'statistics': {
                'total_words': self.statistics.total_words,
                'across_words': self.statistics.across_words,
                'down_words': self.statistics.down_words,
                'grid_rows': self.statistics.grid_rows,
                'grid_cols': self.statistics.grid_cols,
                'total_cells': self.statistics.total_cells,
                'filled_cells': self.statistics.filled_cells,
                'fill_percentage': self.statistics.fill_percentage,
            },
            'unplaced': list(self.unplaced),
        }
