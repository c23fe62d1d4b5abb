# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""
Configuration module for crossword generator.

Handles loading configuration from YAML files and command-line arguments,
with proper merging and validation.
"""

import argparse
from pathlib import Path
from dataclasses import dataclass, field, asdict
from typing import Optional, List, Dict, Any

import yaml


DEFAULT_TITLE = "Crossword Puzzle"

# Valid configuration values
VALID_OUTPUT_FORMATS = [
    "yaml", "markdown", "svg_puzzle", "svg_solution", "svg_complete", "text"
]
VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
MIN_GRID_SIZE = 3


class ConfigValidationError(Exception):
    """Raised when configuration validation fails."""
    pass


@dataclass
class GenerationConfig:
    """Configuration for word placement."""
    attempts_per_word: int = 100
    max_grid_size: int = 50
    min_words: int = 2
    allow_contact_links: bool = False


@dataclass
class OutputConfig:
    """Configuration for output."""
    directory: str = "./output"
    formats: List[str] = field(default_factory=lambda: [
        "yaml", "markdown", "svg_puzzle", "svg_solution"
    ])
    log_level: str = "INFO"
    log_file_prefix: str = "crossword_generator"
    enable_console_logging: bool = True


@dataclass
class PuzzleConfig:
    """Complete configuration for puzzle generation."""
    # Puzzle settings
    title: str = DEFAULT_TITLE
    author: str = "Anonymous"
    words: List[str] = field(default_factory=list)
    word_file: Optional[str] = None
    clues: Dict[str, str] = field(default_factory=dict)
    clue_file: Optional[str] = None

    # Sub-configurations
    generation: GenerationConfig = field(default_factory=GenerationConfig)
    output: OutputConfig = field(default_factory=OutputConfig)

    def __post_init__(self):
        """Convert dicts to dataclass instances if needed."""
        if isinstance(self.generation, dict):
            self.generation = GenerationConfig(**self.generation)
        if isinstance(self.output, dict):
            self.output = OutputConfig(**self.output)

    @classmethod
    def from_yaml(cls, path: str) -> 'PuzzleConfig':
        """
        Load configuration from a YAML file.

        Args:
            path: Path to YAML configuration file

        Returns:
            PuzzleConfig instance

        Raises:
            ConfigValidationError: If file doesn't exist or is invalid
        """
        path = Path(path)
        if not path.exists():
            raise ConfigValidationError(f"Configuration file not found: {path}")

        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigValidationError(f"Invalid YAML in {path}: {e}")

        if not isinstance(data, dict):
            raise ConfigValidationError(
                f"Configuration file must contain a YAML mapping, got {type(data)}"
            )

        return cls._from_dict(data)

    @classmethod
    def _from_dict(cls, data: Dict[str, Any]) -> 'PuzzleConfig':
        """Create PuzzleConfig from dictionary."""
        # Handle nested 'puzzle' key
        puzzle_data = data.get('puzzle') or {}

        words = data.get('words') or []
        if isinstance(words, str):
            words = words.replace(',', '\n').split('\n')
        if not isinstance(words, list):
            raise ConfigValidationError("'words' must be a list of strings")

        clues = data.get('clues') or {}
        if not isinstance(clues, dict):
            raise ConfigValidationError("'clues' must be a mapping of word to clue")

        config = cls(
            title=puzzle_data.get('title', cls.title),
            author=puzzle_data.get('author', cls.author),
            words=[str(w) for w in words],
            word_file=puzzle_data.get('word_file'),
            clues={str(k): str(v) for k, v in clues.items() if v is not None},
            clue_file=puzzle_data.get('clue_file'),
        )

        # Load sub-configurations
        if 'generation' in data:
            gen_data = data['generation'] or {}
            config.generation = GenerationConfig(
                attempts_per_word=gen_data.get(
                    'attempts_per_word', config.generation.attempts_per_word
                ),
                max_grid_size=gen_data.get(
                    'max_grid_size', config.generation.max_grid_size
                ),
                min_words=gen_data.get(
                    'min_words', config.generation.min_words
                ),
                allow_contact_links=gen_data.get(
                    'allow_contact_links',
                    config.generation.allow_contact_links
                ),
            )

        if 'output' in data:
            out_data = data['output'] or {}
            config.output = OutputConfig(
                directory=out_data.get('directory', config.output.directory),
                formats=out_data.get('formats', config.output.formats),
                log_level=out_data.get('log_level', config.output.log_level),
                log_file_prefix=out_data.get(
                    'log_file_prefix', config.output.log_file_prefix
                ),
                enable_console_logging=out_data.get(
                    'enable_console_logging',
                    config.output.enable_console_logging
                ),
            )

        return config

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> 'PuzzleConfig':
        """
        Create configuration from command-line arguments.

        Args:
            args: Parsed command-line arguments

        Returns:
            PuzzleConfig instance
        """
        config = cls()

        # Map CLI arguments to config
        if getattr(args, 'title', None):
            config.title = args.title
        if getattr(args, 'author', None):
            config.author = args.author
        if getattr(args, 'words', None):
            config.words = [w.strip() for w in args.words.split(',') if w.strip()]
        if getattr(args, 'word_file', None):
            config.word_file = args.word_file
        if getattr(args, 'clues', None):
            config.clue_file = args.clues
        if getattr(args, 'output', None):
            config.output.directory = args.output
        if getattr(args, 'format', None):
            config.output.formats = args.format.split(',')
        if getattr(args, 'attempts_per_word', None):
            config.generation.attempts_per_word = args.attempts_per_word
        if getattr(args, 'max_grid_size', None):
            config.generation.max_grid_size = args.max_grid_size
        if getattr(args, 'verbose', False):
            config.output.log_level = "DEBUG"

        return config

    @classmethod
    def merge(
        cls,
        yaml_config: 'PuzzleConfig',
        cli_config: 'PuzzleConfig'
    ) -> 'PuzzleConfig':
        """
        Merge configurations with CLI taking precedence over YAML.

        Args:
            yaml_config: Configuration loaded from YAML file
            cli_config: Configuration from command-line arguments

        Returns:
            Merged PuzzleConfig instance
        """
        # Start with YAML config as base
        merged = PuzzleConfig(
            title=yaml_config.title,
            author=yaml_config.author,
            words=list(yaml_config.words),
            word_file=yaml_config.word_file,
            clues=dict(yaml_config.clues),
            clue_file=yaml_config.clue_file,
            generation=yaml_config.generation,
            output=yaml_config.output,
        )

        # Override with CLI values (non-default values)
        default = cls()

        if cli_config.title != default.title:
            merged.title = cli_config.title
        if cli_config.author != default.author:
            merged.author = cli_config.author
        if cli_config.words:
            merged.words = list(cli_config.words)
        if cli_config.word_file:
            merged.word_file = cli_config.word_file
        if cli_config.clues:
            merged.clues.update(cli_config.clues)
        if cli_config.clue_file:
            merged.clue_file = cli_config.clue_file
        if cli_config.output.directory != default.output.directory:
            merged.output.directory = cli_config.output.directory
        if cli_config.output.formats != default.output.formats:
            merged.output.formats = cli_config.output.formats
        if cli_config.output.log_level != default.output.log_level:
            merged.output.log_level = cli_config.output.log_level
        if (cli_config.generation.attempts_per_word !=
                default.generation.attempts_per_word):
            merged.generation.attempts_per_word = (
                cli_config.generation.attempts_per_word
            )
        if (cli_config.generation.max_grid_size !=
                default.generation.max_grid_size):
            merged.generation.max_grid_size = (
                cli_config.generation.max_grid_size
            )

        return merged

    def validate(self) -> List[str]:
        """
        Validate configuration values.

        Returns:
            List of validation error messages (empty if valid)
        """
        errors = []

        # Validate title
        if not self.title or not self.title.strip():
            errors.append("Title cannot be empty")

        # Validate word sources
        if not self.words and not self.word_file:
            errors.append("No words given: set 'words' or 'word_file'")

        # Validate placement budget
        if self.generation.attempts_per_word < 1:
            errors.append("attempts_per_word must be at least 1")

        if self.generation.max_grid_size < MIN_GRID_SIZE:
            errors.append(
                f"max_grid_size must be at least {MIN_GRID_SIZE}"
            )

        if self.generation.min_words < 1:
            errors.append("min_words must be at least 1")

        # Validate output formats
        for fmt in self.output.formats:
            if fmt not in VALID_OUTPUT_FORMATS:
                errors.append(
                    f"Invalid output format '{fmt}'. "
                    f"Must be one of: {VALID_OUTPUT_FORMATS}"
                )

        # Validate log level
        if self.output.log_level.upper() not in VALID_LOG_LEVELS:
            errors.append(
                f"Invalid log level '{self.output.log_level}'. "
                f"Must be one of: {VALID_LOG_LEVELS}"
            )

        return errors

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            'puzzle': {
                'title': self.title,
                'author': self.author,
                'word_file': self.word_file,
                'clue_file': self.clue_file,
            },
            'words': list(self.words),
            'clues': dict(self.clues),
            'generation': asdict(self.generation),
            'output': asdict(self.output),
        }


def create_argument_parser() -> argparse.ArgumentParser:
    """
    Create command-line argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        description="Generate crossword layouts from a word list",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Using command-line arguments
  crossword-generator --words "python,java,ruby,perl" --title "Languages"

  # Using a word file, one word per line
  crossword-generator --word-file words.txt --clues clues.yaml

  # Using YAML configuration
  crossword-generator --config config/sample_puzzle.yaml

  # CLI arguments override YAML
  crossword-generator --config puzzle.yaml --title "Override"
"""
    )

    # Configuration file
    parser.add_argument(
        "--config", "-c",
        metavar="PATH",
        help="YAML configuration file"
    )

    # Puzzle settings
    parser.add_argument(
        "--words", "-w",
        metavar="WORDS",
        help="Comma-separated word list"
    )
    parser.add_argument(
        "--word-file", "-f",
        metavar="PATH",
        help="Text file with words separated by newlines or commas"
    )
    parser.add_argument(
        "--clues",
        metavar="PATH",
        help="YAML file mapping words to clue text"
    )
    parser.add_argument(
        "--title", "-t",
        metavar="TEXT",
        help="Puzzle title"
    )
    parser.add_argument(
        "--author", "-a",
        metavar="TEXT",
        help="Author name"
    )

    # Output settings
    parser.add_argument(
        "--output", "-o",
        metavar="PATH",
        help="Output directory"
    )
    parser.add_argument(
        "--format",
        metavar="FORMATS",
        help=f"Comma-separated output formats ({', '.join(VALID_OUTPUT_FORMATS)})"
    )

    # Placement settings
    parser.add_argument(
        "--attempts-per-word",
        type=int,
        metavar="INT",
        help="Placement attempts allowed per word (default: 100)"
    )
    parser.add_argument(
        "--max-grid-size",
        type=int,
        metavar="INT",
        help="Largest working grid side length (default: 50)"
    )

    # Other options
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging"
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Validate config without generating"
    )

    return parser


def load_config(args: Optional[argparse.Namespace] = None) -> PuzzleConfig:
    """
    Load configuration from command-line and/or YAML file.

    Args:
        args: Parsed command-line arguments (if None, parses sys.argv)

    Returns:
        Fully resolved PuzzleConfig

    Raises:
        ConfigValidationError: If configuration is invalid
    """
    if args is None:
        parser = create_argument_parser()
        args = parser.parse_args()

    # Load from YAML if specified
    yaml_config = None
    if getattr(args, 'config', None):
        yaml_config = PuzzleConfig.from_yaml(args.config)

    # Load from CLI
    cli_config = PuzzleConfig.from_args(args)

    # Merge configurations
    if yaml_config:
        config = PuzzleConfig.merge(yaml_config, cli_config)
    else:
        config = cli_config

    # Validate
    errors = config.validate()
    if errors:
        raise ConfigValidationError(
            "Configuration validation failed:\n" +
            "\n".join(f"  - {e}" for e in errors)
        )

    return config
