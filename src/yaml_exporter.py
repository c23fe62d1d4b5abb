# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""
YAML exporter for crossword puzzles.

Exports generated puzzles to a structured YAML document that page-layout
and print tools can consume.
"""

from pathlib import Path
from datetime import datetime
from typing import Dict, Optional, Any

import yaml

from models import Puzzle
from yaml_schema import (
    PuzzleYAMLData, PuzzleMetadata, GridData, WordEntryData,
    GenerationStats, StatisticsData
)


class YAMLExportError(Exception):
    """Raised when YAML export fails."""
    pass


class YAMLExporter:
    """
    Exports crossword puzzles to YAML.

    Usage:
        exporter = YAMLExporter()
        yaml_str = exporter.export(puzzle, title, author)
        exporter.save(puzzle, title, author, 'output/puzzle.yaml')
    """

    def export(
        self,
        puzzle: Puzzle,
        title: str,
        author: str,
        stats: Optional[Dict[str, Any]] = None
    ) -> str:
        """
        Export puzzle to YAML string.

        Args:
            puzzle: Generated puzzle
            title: Puzzle title
            author: Puzzle author
            stats: Optional placement statistics

        Returns:
            YAML string representation of the puzzle
        """
        puzzle_data = self._build_puzzle_data(puzzle, title, author, stats)

        data_dict = puzzle_data.to_dict()

        header = "# Crossword Puzzle\n"
        header += "# Grid, word lists and statistics in structured YAML\n\n"

        try:
            yaml_content = yaml.safe_dump(
                data_dict,
                default_flow_style=False,
                allow_unicode=True,
                sort_keys=False,
                indent=2,
                width=80,
            )
        except yaml.YAMLError as e:
            raise YAMLExportError(f"Could not serialize puzzle: {e}")

        return header + yaml_content

    def save(
        self,
        puzzle: Puzzle,
        title: str,
        author: str,
        path: str,
        stats: Optional[Dict[str, Any]] = None
    ) -> str:
        """
        Save puzzle to YAML file.

        Args:
            puzzle: Generated puzzle
            title: Puzzle title
            author: Puzzle author
            path: Output file path
            stats: Optional placement statistics

        Returns:
            Path to saved file
        """
        yaml_content = self.export(puzzle, title, author, stats)

        path = Path(path)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, 'w', encoding='utf-8') as f:
                f.write(yaml_content)
        except OSError as e:
            raise YAMLExportError(f"Could not write {path}: {e}")

        return str(path)

    def _build_puzzle_data(
        self,
        puzzle: Puzzle,
        title: str,
        author: str,
        stats: Optional[Dict[str, Any]]
    ) -> PuzzleYAMLData:
        """Build PuzzleYAMLData from a puzzle."""

        gen_stats = GenerationStats()
        if stats:
            gen_stats.attempts = stats.get('attempts', 0)
            gen_stats.max_attempts = stats.get('max_attempts', 0)
            gen_stats.requeues = stats.get('requeues', 0)
            gen_stats.positions_scored = stats.get('positions_scored', 0)
            gen_stats.generation_time_seconds = stats.get(
                'generation_time_seconds', 0.0
            )

        metadata = PuzzleMetadata(
            title=title,
            author=author,
            date=datetime.now().strftime("%Y-%m-%d"),
            word_count=puzzle.statistics.total_words,
            generation_stats=gen_stats,
        )

        grid = puzzle.grid
        solution_lines = grid.to_rows(empty_char="#")
        pattern_lines = [
            "".join("#" if ch == "#" else "." for ch in line)
            for line in solution_lines
        ]
        numbers = {
            f"{row},{col}": number
            for (row, col), number in sorted(puzzle.clue_numbers().items())
        }

        grid_data = GridData(
            rows=grid.rows,
            columns=grid.cols,
            pattern="\n".join(pattern_lines),
            solution="\n".join(solution_lines),
            numbers=numbers,
        )

        words = {'across': [], 'down': []}
        for direction, entries in (('across', puzzle.across), ('down', puzzle.down)):
            for entry in entries:
                words[direction].append(WordEntryData(
                    number=entry.number,
                    row=entry.row,
                    col=entry.col,
                    length=entry.length,
                    answer=entry.word,
                    clue=entry.clue,
                ))

        s = puzzle.statistics
        statistics = StatisticsData(
            total_words=s.total_words,
            across_words=s.across_words,
            down_words=s.down_words,
            grid_rows=s.grid_rows,
            grid_cols=s.grid_cols,
            total_cells=s.total_cells,
            filled_cells=s.filled_cells,
            fill_percentage=s.fill_percentage,
        )

        return PuzzleYAMLData(
            metadata=metadata,
            grid=grid_data,
            words=words,
            statistics=statistics,
            unplaced=list(puzzle.unplaced),
        )


def export_puzzle_to_yaml(
    puzzle: Puzzle,
    title: str,
    author: str,
    output_path: str,
    **kwargs
) -> str:
    """
    Convenience function to export puzzle to YAML file.

    Args:
        puzzle: Generated puzzle
        title: Puzzle title
        author: Puzzle author
        output_path: Output file path
        **kwargs: Additional arguments (stats)

    Returns:
        Path to saved file
    """
    exporter = YAMLExporter()
    return exporter.save(puzzle, title, author, output_path, **kwargs)
