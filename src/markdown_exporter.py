"""
Markdown exporter for crossword puzzles.
Exports puzzles to a structured Markdown format.
"""

from datetime import datetime
from typing import List, Optional
from models import Puzzle, ClueEntry


class MarkdownExporter:
    """Exports crossword puzzles to Markdown format."""

    def __init__(self, puzzle: Puzzle, title: str = "Crossword Puzzle", author: str = ""):
        self.puzzle = puzzle
        self.grid = puzzle.grid
        self.title = title
        self.author = author
        self.numbers = puzzle.clue_numbers()

    def export(self, filepath: Optional[str] = None) -> str:
        """
        Export puzzle to Markdown format.

        Args:
            filepath: Optional path to save the file

        Returns:
            Markdown string
        """
        md = []
        stats = self.puzzle.statistics

        # Title and metadata
        md.append(f"# {self.title}")
        md.append("")
        md.append("## Metadata")
        md.append("")
        md.append(f"- **Date**: {datetime.now().strftime('%Y-%m-%d')}")
        if self.author:
            md.append(f"- **Author**: {self.author}")
        md.append(f"- **Size**: {stats.grid_rows}×{stats.grid_cols}")
        md.append(
            f"- **Words**: {stats.total_words} "
            f"({stats.across_words} across, {stats.down_words} down)"
        )
        md.append(
            f"- **Filled Cells**: {stats.filled_cells} / {stats.total_cells} "
            f"({stats.fill_percentage}%)"
        )
        if self.puzzle.unplaced:
            md.append(f"- **Not Placed**: {', '.join(self.puzzle.unplaced)}")
        md.append("")

        # Empty grid (for solving)
        md.append("## Grid")
        md.append("")
        md.append(self._render_grid_table(show_solution=False))
        md.append("")

        # Clues
        md.append("## Clues")
        md.append("")
        md.append("### Across")
        md.append("")
        md.extend(self._render_clues(self.puzzle.across))
        md.append("")

        md.append("### Down")
        md.append("")
        md.extend(self._render_clues(self.puzzle.down))
        md.append("")

        # Solution
        md.append("## Solution")
        md.append("")
        md.append(self._render_grid_table(show_solution=True))
        md.append("")

        result = "\n".join(md)

        if filepath:
            with open(filepath, 'w', encoding='utf-8') as f:
                f.write(result)

        return result

    def _render_clues(self, entries: List[ClueEntry]) -> List[str]:
        if not entries:
            return ["No clues available"]
        return [f"{entry.number}. {entry.clue} ({entry.length})" for entry in entries]

    def _render_grid_table(self, show_solution: bool = False) -> str:
        """Render grid as a Markdown table."""
        lines = []

        # Header row with column numbers
        header = "| |"
        for col in range(self.grid.cols):
            header += f" {col+1} |"
        lines.append(header)

        # Separator row
        separator = "|---|"
        for _ in range(self.grid.cols):
            separator += "---|"
        lines.append(separator)

        # Data rows
        for row in range(self.grid.rows):
            line = f"| {row+1} |"
            for col in range(self.grid.cols):
                letter = self.grid.get_cell(row, col)
                number = self.numbers.get((row, col))
                if letter is None:
                    line += " ■ |"
                elif show_solution:
                    if number:
                        line += f" ^{number}^{letter.upper()} |"
                    else:
                        line += f" {letter.upper()} |"
                else:
                    if number:
                        line += f" ^{number}^ |"
                    else:
                        line += "   |"
            lines.append(line)

        return "\n".join(lines)
