"""
SVG Renderer for crossword puzzles.
Draws the puzzle grid, optionally with the solution and clue lists.
"""

from html import escape
from typing import Dict, List, Optional, Tuple
from dataclasses import dataclass

from models import Puzzle, ClueEntry


@dataclass
class SVGConfig:
    """Configuration for SVG rendering."""
    cell_size: int = 40
    border_width: int = 2
    inner_border_width: int = 1

    # Colors
    background_color: str = "#FFFFFF"
    grid_color: str = "#000000"
    block_color: str = "#000000"
    letter_color: str = "#000000"
    number_color: str = "#333333"

    # Fonts
    font_family: str = "Arial, Helvetica, sans-serif"
    letter_font_size: int = 24
    number_font_size: int = 10

    # Padding
    number_offset_x: int = 3
    number_offset_y: int = 12
    letter_offset_x: int = 20  # Center of cell
    letter_offset_y: int = 30  # Slightly below center

    # Clue section
    clue_font_size: int = 12
    clue_line_height: int = 16
    clue_width: int = 300
    clue_padding: int = 20
    clue_max_chars: int = 40


class SVGRenderer:
    """Renders crossword puzzles as SVG."""

    def __init__(self, config: Optional[SVGConfig] = None):
        self.config = config or SVGConfig()

    def _styles(self, with_clues: bool = False) -> List[str]:
        cfg = self.config
        parts = ['  <style>']
        parts.append(f'    .cell {{ stroke: {cfg.grid_color}; stroke-width: {cfg.inner_border_width}; }}')
        parts.append(f'    .block {{ fill: {cfg.block_color}; }}')
        parts.append(f'    .empty {{ fill: {cfg.background_color}; }}')
        parts.append(f'    .number {{ font-family: {cfg.font_family}; font-size: {cfg.number_font_size}px; fill: {cfg.number_color}; }}')
        parts.append(f'    .letter {{ font-family: {cfg.font_family}; font-size: {cfg.letter_font_size}px; fill: {cfg.letter_color}; text-anchor: middle; }}')
        if with_clues:
            parts.append(f'    .title {{ font-family: {cfg.font_family}; font-size: 20px; font-weight: bold; fill: {cfg.letter_color}; }}')
            parts.append(f'    .clue-header {{ font-family: {cfg.font_family}; font-size: 14px; font-weight: bold; fill: {cfg.letter_color}; }}')
            parts.append(f'    .clue {{ font-family: {cfg.font_family}; font-size: {cfg.clue_font_size}px; fill: {cfg.letter_color}; }}')
        parts.append('  </style>')
        return parts

    def _cells(
        self,
        puzzle: Puzzle,
        offset_x: float,
        offset_y: float,
        show_solution: bool
    ) -> List[str]:
        """SVG elements for every grid cell; empty cells are drawn as blocks."""
        cfg = self.config
        grid = puzzle.grid
        numbers: Dict[Tuple[int, int], int] = puzzle.clue_numbers()
        parts = []

        for row in range(grid.rows):
            for col in range(grid.cols):
                x = offset_x + col * cfg.cell_size
                y = offset_y + row * cfg.cell_size
                letter = grid.get_cell(row, col)

                if letter is None:
                    parts.append(
                        f'  <rect x="{x}" y="{y}" '
                        f'width="{cfg.cell_size}" height="{cfg.cell_size}" '
                        f'class="cell block" />'
                    )
                    continue

                parts.append(
                    f'  <rect x="{x}" y="{y}" '
                    f'width="{cfg.cell_size}" height="{cfg.cell_size}" '
                    f'class="cell empty" />'
                )

                if (row, col) in numbers:
                    parts.append(
                        f'  <text x="{x + cfg.number_offset_x}" '
                        f'y="{y + cfg.number_offset_y}" '
                        f'class="number">{numbers[(row, col)]}</text>'
                    )

                if show_solution:
                    parts.append(
                        f'  <text x="{x + cfg.letter_offset_x}" '
                        f'y="{y + cfg.letter_offset_y}" '
                        f'class="letter">{letter.upper()}</text>'
                    )

        return parts

    def render(
        self,
        puzzle: Puzzle,
        title: str = "Crossword",
        show_solution: bool = False
    ) -> str:
        """
        Render the puzzle grid as SVG.

        Args:
            puzzle: Generated puzzle
            title: Puzzle title
            show_solution: Whether to show letters

        Returns:
            SVG string
        """
        cfg = self.config
        grid_width = puzzle.grid.cols * cfg.cell_size
        grid_height = puzzle.grid.rows * cfg.cell_size
        total_width = grid_width + 2 * cfg.border_width
        total_height = grid_height + 2 * cfg.border_width

        svg_parts = []

        svg_parts.append(
            f'<svg xmlns="http://www.w3.org/2000/svg" '
            f'viewBox="0 0 {total_width} {total_height}" '
            f'width="{total_width}" height="{total_height}">'
        )

        # Title (for accessibility)
        svg_parts.append(f'  <title>{escape(title)}</title>')
        svg_parts.extend(self._styles())

        svg_parts.append(
            f'  <rect x="0" y="0" width="{total_width}" height="{total_height}" '
            f'fill="{cfg.background_color}" />'
        )
        svg_parts.append(
            f'  <rect x="{cfg.border_width/2}" y="{cfg.border_width/2}" '
            f'width="{grid_width + cfg.border_width}" height="{grid_height + cfg.border_width}" '
            f'fill="none" stroke="{cfg.grid_color}" stroke-width="{cfg.border_width}" />'
        )

        svg_parts.extend(
            self._cells(puzzle, cfg.border_width, cfg.border_width, show_solution)
        )

        svg_parts.append('</svg>')

        return '\n'.join(svg_parts)

    def render_with_clues(
        self,
        puzzle: Puzzle,
        title: str = "Crossword",
        show_solution: bool = False
    ) -> str:
        """
        Render SVG with grid and clues.

        Returns a complete puzzle page with grid on top and clues below.
        """
        cfg = self.config

        grid_width = puzzle.grid.cols * cfg.cell_size
        grid_height = puzzle.grid.rows * cfg.cell_size

        across_height = len(puzzle.across) * cfg.clue_line_height + 30
        down_height = len(puzzle.down) * cfg.clue_line_height + 30
        clue_section_height = max(across_height, down_height) + cfg.clue_padding

        total_width = max(
            grid_width + 2 * cfg.border_width,
            2 * cfg.clue_width + cfg.clue_padding
        )
        total_height = grid_height + 2 * cfg.border_width + clue_section_height + 50  # 50 for title

        svg_parts = []

        svg_parts.append(
            f'<svg xmlns="http://www.w3.org/2000/svg" '
            f'viewBox="0 0 {total_width} {total_height}" '
            f'width="{total_width}" height="{total_height}">'
        )
        svg_parts.extend(self._styles(with_clues=True))
        svg_parts.append(f'  <rect x="0" y="0" width="{total_width}" height="{total_height}" fill="{cfg.background_color}" />')
        svg_parts.append(f'  <text x="{total_width/2}" y="30" class="title" text-anchor="middle">{escape(title)}</text>')

        # Grid (offset for title)
        grid_offset_x = (total_width - grid_width) / 2
        grid_offset_y = 50

        svg_parts.append(
            f'  <rect x="{grid_offset_x}" y="{grid_offset_y}" '
            f'width="{grid_width}" height="{grid_height}" '
            f'fill="none" stroke="{cfg.grid_color}" stroke-width="{cfg.border_width}" />'
        )
        svg_parts.extend(
            self._cells(puzzle, grid_offset_x, grid_offset_y, show_solution)
        )

        clue_y_start = grid_offset_y + grid_height + 30
        svg_parts.extend(
            self._clue_column("ACROSS", puzzle.across, cfg.clue_padding, clue_y_start)
        )
        svg_parts.extend(
            self._clue_column(
                "DOWN", puzzle.down, total_width / 2 + cfg.clue_padding, clue_y_start
            )
        )

        svg_parts.append('</svg>')

        return '\n'.join(svg_parts)

    def _clue_column(
        self,
        heading: str,
        entries: List[ClueEntry],
        x: float,
        y_start: float
    ) -> List[str]:
        cfg = self.config
        parts = [f'  <text x="{x}" y="{y_start}" class="clue-header">{heading}</text>']
        for i, entry in enumerate(entries):
            y = y_start + 20 + i * cfg.clue_line_height
            # Truncate long clues
            clue = entry.clue
            if len(clue) > cfg.clue_max_chars:
                clue = clue[:cfg.clue_max_chars] + "..."
            parts.append(
                f'  <text x="{x}" y="{y}" class="clue">{entry.number}. {escape(clue)}</text>'
            )
        return parts

    def save(self, svg_content: str, filepath: str):
        """Save SVG to file."""
        with open(filepath, 'w', encoding='utf-8') as f:
            f.write(svg_content)
