#!/usr/bin/env python3
# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""
Crossword Layout Generator

Builds a free-form crossword from a list of words:
1. Parse and clean the word list
2. Place words greedily on a working grid, favouring central intersections
3. Trim the grid and number the entries
4. Validate the finished layout
5. Export YAML, Markdown, SVG and plain-text output

Usage:
    # With YAML configuration:
    python crossword_generator.py --config config/sample_puzzle.yaml

    # With command-line arguments:
    python crossword_generator.py --words "python,java,ruby" --title "Languages"

    # From a word file with custom clues:
    python crossword_generator.py --word-file words.txt --clues clues.yaml
"""

import logging
import os
import re
import sys
import time
from typing import Dict, List, Optional

# Add src to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from models import Puzzle
from clues import ClueProvider
from placement_engine import PlacementEngine
from validator import validate_puzzle, ValidationError
from word_parser import clean_words, load_words_file, validate_word_list
from config import (
    PuzzleConfig, create_argument_parser, load_config, ConfigValidationError
)
from logging_config import setup_logging
from yaml_exporter import YAMLExporter
from markdown_exporter import MarkdownExporter
from svg_renderer import SVGRenderer


class CrosswordGenerator:
    """
    Crossword layout generator driven by a PuzzleConfig.

    Workflow:
    1. Resolve the word list from the config or a word file
    2. Run the placement engine
    3. Validate the layout
    4. Write every configured output format
    """

    def __init__(self, config: PuzzleConfig):
        """
        Initialize the crossword generator.

        Args:
            config: PuzzleConfig instance with all settings

        Raises:
            ConfigValidationError: If the clue file cannot be loaded
        """
        self.config = config
        self.start_time = time.time()

        # Initialize logging
        self.log_file_path = setup_logging(
            output_dir=config.output.directory,
            log_level=config.output.log_level,
            log_file_prefix=config.output.log_file_prefix,
            enable_console=config.output.enable_console_logging,
        )
        self.logger = logging.getLogger(__name__)
        self.logger.info(f"Initialized CrosswordGenerator: {config.title}")
        self.logger.debug(f"Log file: {self.log_file_path}")

        self.clue_provider = self._build_clue_provider()

        self.engine = PlacementEngine(
            attempts_per_word=config.generation.attempts_per_word,
            max_grid_size=config.generation.max_grid_size,
            allow_contact_links=config.generation.allow_contact_links,
            clue_provider=self.clue_provider,
            logger=logging.getLogger("placement_engine"),
        )

        self.words: List[str] = []
        self.puzzle: Optional[Puzzle] = None

    def _build_clue_provider(self) -> ClueProvider:
        """Clue overrides from the clue file, then inline config clues."""
        provider = ClueProvider()
        if self.config.clue_file:
            try:
                provider = ClueProvider.from_yaml(self.config.clue_file)
            except ValueError as e:
                raise ConfigValidationError(str(e))
            self.logger.info(
                f"Loaded {len(provider.overrides)} clues from {self.config.clue_file}"
            )
        if self.config.clues:
            provider = provider.with_overrides(self.config.clues)
        return provider

    def generate(self) -> Dict[str, str]:
        """
        Generate a crossword layout and write its output files.

        Returns:
            Dict of output format to file path

        Raises:
            ValidationError: If the word list is unusable
        """
        self.logger.info("=" * 60)
        self.logger.info("CROSSWORD GENERATOR")
        self.logger.info("=" * 60)
        self.logger.info(f"   Title: {self.config.title}")
        self.logger.info(f"   Author: {self.config.author}")

        # Step 1: Resolve word list
        self.logger.info("Step 1: Reading word list...")
        self.words = self._resolve_words()
        validate_word_list(self.words, self.config.generation.min_words)
        self.logger.info(f"   - {len(self.words)} words")

        # Step 2: Place words
        self.logger.info("Step 2: Placing words...")
        self.puzzle = self.engine.generate(self.words)
        stats = self.puzzle.statistics
        self.logger.info(
            f"   - {stats.total_words} words placed "
            f"({stats.across_words} across, {stats.down_words} down)"
        )
        self.logger.info(
            f"   - Grid {stats.grid_rows}x{stats.grid_cols}, "
            f"{stats.fill_percentage}% filled"
        )
        if self.puzzle.unplaced:
            self.logger.warning(
                f"   - Could not place: {', '.join(self.puzzle.unplaced)}"
            )

        # Step 3: Validate layout
        self.logger.info("Step 3: Validating layout...")
        validation = validate_puzzle(
            self.puzzle,
            require_shared_cells=not self.config.generation.allow_contact_links,
        )
        for warning in validation.warnings:
            self.logger.warning(f"      - {warning}")
        if validation.valid:
            self.logger.info("   - Layout valid")
        else:
            self.logger.error("   X Layout problems:")
            for error in validation.errors:
                self.logger.error(f"      - {error}")

        # Step 4: Write output
        self.logger.info("Step 4: Writing output...")
        output_files = self._write_output()
        self.logger.info(f"   - Generated {len(output_files)} files")

        # Summary
        elapsed = time.time() - self.start_time
        self.logger.info("=" * 60)
        self.logger.info("GENERATION COMPLETE!")
        self.logger.info("=" * 60)
        self.logger.info("Output files:")
        for name, path in output_files.items():
            self.logger.info(f"   {name}: {path}")

        engine_stats = self.engine.stats
        self.logger.info("Placement Stats:")
        self.logger.info(
            f"   Attempts: {engine_stats['attempts']}/{engine_stats['max_attempts']}"
        )
        self.logger.info(f"   Requeues: {engine_stats['requeues']}")
        self.logger.debug(f"   Positions scored: {engine_stats['positions_scored']}")
        self.logger.info(f"Generation time: {elapsed:.2f} seconds")

        return output_files

    def _resolve_words(self) -> List[str]:
        """Inline words win over a word file."""
        if self.config.words:
            return clean_words(self.config.words)
        if self.config.word_file:
            return load_words_file(self.config.word_file)
        return []

    def _base_name(self) -> str:
        name = re.sub(r"[^a-z0-9]+", "_", self.config.title.lower()).strip("_")
        return name[:30] or "crossword"

    def _write_output(self) -> Dict[str, str]:
        """Write each configured format into the output directory."""
        output_dir = self.config.output.directory
        os.makedirs(output_dir, exist_ok=True)

        base_name = self._base_name()
        title = self.config.title
        author = self.config.author
        puzzle = self.puzzle
        output_files = {}

        formats = self.config.output.formats
        renderer = SVGRenderer()

        if "yaml" in formats:
            stats = dict(self.engine.stats)
            stats["generation_time_seconds"] = round(
                time.time() - self.start_time, 3
            )
            path = os.path.join(output_dir, f"{base_name}.yaml")
            output_files["yaml"] = YAMLExporter().save(
                puzzle, title, author, path, stats=stats
            )

        if "markdown" in formats:
            path = os.path.join(output_dir, f"{base_name}.md")
            MarkdownExporter(puzzle, title, author).export(path)
            output_files["markdown"] = path

        if "svg_puzzle" in formats:
            path = os.path.join(output_dir, f"{base_name}_puzzle.svg")
            renderer.save(renderer.render(puzzle, title, show_solution=False), path)
            output_files["svg_puzzle"] = path

        if "svg_solution" in formats:
            path = os.path.join(output_dir, f"{base_name}_solution.svg")
            renderer.save(renderer.render(puzzle, title, show_solution=True), path)
            output_files["svg_solution"] = path

        if "svg_complete" in formats:
            path = os.path.join(output_dir, f"{base_name}_complete.svg")
            renderer.save(renderer.render_with_clues(puzzle, title), path)
            output_files["svg_complete"] = path

        if "text" in formats:
            path = os.path.join(output_dir, f"{base_name}.txt")
            with open(path, 'w', encoding='utf-8') as f:
                f.write(puzzle.grid.to_string(show_solution=True) + "\n")
            output_files["text"] = path

        return output_files


def main():
    """Main entry point."""
    parser = create_argument_parser()
    args = parser.parse_args()

    try:
        # Load configuration
        config = load_config(args)

        # Handle dry-run
        if args.dry_run:
            print("Configuration valid:")
            print(f"  Title: {config.title}")
            print(f"  Author: {config.author}")
            if config.words:
                print(f"  Words: {len(config.words)} inline")
            if config.word_file:
                print(f"  Word File: {config.word_file}")
            print(f"  Attempts Per Word: {config.generation.attempts_per_word}")
            print(f"  Max Grid Size: {config.generation.max_grid_size}")
            print(f"  Formats: {', '.join(config.output.formats)}")
            print(f"  Output Directory: {config.output.directory}")
            return

        # Generate puzzle
        generator = CrosswordGenerator(config)
        generator.generate()

    except ConfigValidationError as e:
        print(f"Configuration error: {e}")
        sys.exit(1)
    except ValidationError as e:
        print(f"Error: {e}")
        sys.exit(1)
    except KeyboardInterrupt:
        print("\nGeneration cancelled.")
        sys.exit(0)


if __name__ == "__main__":
    main()
