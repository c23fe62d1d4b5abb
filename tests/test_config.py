# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""Unit tests for config module."""

import os
import sys
import tempfile
import unittest

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from config import (
    PuzzleConfig, GenerationConfig, OutputConfig, ConfigValidationError,
    DEFAULT_TITLE, VALID_OUTPUT_FORMATS, create_argument_parser, load_config
)


class TestPuzzleConfig(unittest.TestCase):
    """Tests for PuzzleConfig class."""

    def test_default_config(self):
        """Test default configuration values."""
        config = PuzzleConfig()

        self.assertEqual(config.title, DEFAULT_TITLE)
        self.assertEqual(config.title, "Crossword Puzzle")
        self.assertEqual(config.author, "Anonymous")
        self.assertEqual(config.words, [])
        self.assertIsNone(config.word_file)
        self.assertEqual(config.clues, {})

    def test_nested_config_from_dict(self):
        """Test creating config with nested dict values."""
        config = PuzzleConfig(
            words=["cat", "dog"],
            generation={'attempts_per_word': 10},
            output={'directory': './test_output'}
        )

        self.assertEqual(config.generation.attempts_per_word, 10)
        self.assertEqual(config.output.directory, './test_output')

    def test_validation_valid_config(self):
        """Test validation of valid configuration."""
        config = PuzzleConfig(words=["cat", "dog"])
        self.assertEqual(config.validate(), [])

    def test_validation_word_file_is_enough(self):
        config = PuzzleConfig(word_file="words.txt")
        self.assertEqual(config.validate(), [])

    def test_validation_no_words(self):
        """Test validation catches a missing word source."""
        errors = PuzzleConfig().validate()
        self.assertTrue(any("words" in e.lower() for e in errors))

    def test_validation_empty_title(self):
        """Test validation catches empty title."""
        config = PuzzleConfig(title="  ", words=["cat", "dog"])

        errors = config.validate()
        self.assertTrue(any("title" in e.lower() for e in errors))

    def test_validation_bad_generation_values(self):
        config = PuzzleConfig(
            words=["cat", "dog"],
            generation={'attempts_per_word': 0, 'max_grid_size': 2}
        )

        errors = config.validate()
        self.assertTrue(any("attempts_per_word" in e for e in errors))
        self.assertTrue(any("max_grid_size" in e for e in errors))

    def test_validation_invalid_format(self):
        config = PuzzleConfig(
            words=["cat", "dog"], output={'formats': ["pdf"]}
        )

        errors = config.validate()
        self.assertTrue(any("pdf" in e for e in errors))

    def test_validation_invalid_log_level(self):
        config = PuzzleConfig(
            words=["cat", "dog"], output={'log_level': "LOUD"}
        )

        errors = config.validate()
        self.assertTrue(any("log level" in e.lower() for e in errors))

    def test_to_dict(self):
        """Test conversion to dictionary."""
        config = PuzzleConfig(title="Test", words=["cat"])

        result = config.to_dict()

        self.assertEqual(result['puzzle']['title'], "Test")
        self.assertEqual(result['words'], ["cat"])
        self.assertEqual(result['generation']['attempts_per_word'], 100)
        self.assertEqual(result['output']['directory'], "./output")


class TestGenerationConfig(unittest.TestCase):
    """Tests for GenerationConfig class."""

    def test_default_values(self):
        """Test default generation config values."""
        config = GenerationConfig()

        self.assertEqual(config.attempts_per_word, 100)
        self.assertEqual(config.max_grid_size, 50)
        self.assertEqual(config.min_words, 2)
        self.assertFalse(config.allow_contact_links)


class TestOutputConfig(unittest.TestCase):
    """Tests for OutputConfig class."""

    def test_default_values(self):
        """Test default output config values."""
        config = OutputConfig()

        self.assertEqual(config.directory, "./output")
        self.assertIn("yaml", config.formats)
        self.assertIn("svg_puzzle", config.formats)
        for fmt in config.formats:
            self.assertIn(fmt, VALID_OUTPUT_FORMATS)


class TestYAMLLoading(unittest.TestCase):
    """Tests for YAML configuration loading."""

    def setUp(self):
        """Create a temporary YAML file for testing."""
        self.temp_file = tempfile.NamedTemporaryFile(
            mode='w', suffix='.yaml', delete=False
        )
        self.temp_file.write('''
puzzle:
  title: "Test Title"
  author: "Test Author"
  clue_file: clues.yaml

words:
  - cat
  - car

clues:
  cat: "Feline pet"

generation:
  attempts_per_word: 30
  allow_contact_links: true

output:
  directory: "./test_output"
  formats: [yaml, text]
''')
        self.temp_file.close()

    def tearDown(self):
        """Clean up temporary file."""
        os.unlink(self.temp_file.name)

    def test_load_from_yaml(self):
        """Test loading configuration from YAML file."""
        config = PuzzleConfig.from_yaml(self.temp_file.name)

        self.assertEqual(config.title, "Test Title")
        self.assertEqual(config.author, "Test Author")
        self.assertEqual(config.words, ["cat", "car"])
        self.assertEqual(config.clues, {"cat": "Feline pet"})
        self.assertEqual(config.clue_file, "clues.yaml")
        self.assertEqual(config.generation.attempts_per_word, 30)
        self.assertEqual(config.generation.max_grid_size, 50)
        self.assertTrue(config.generation.allow_contact_links)
        self.assertEqual(config.output.directory, "./test_output")
        self.assertEqual(config.output.formats, ["yaml", "text"])

    def test_words_as_text_block(self):
        with open(self.temp_file.name, 'w') as f:
            f.write('words: |\n  cat, car\n  art\n')

        config = PuzzleConfig.from_yaml(self.temp_file.name)
        self.assertEqual(
            [w.strip() for w in config.words if w.strip()],
            ["cat", "car", "art"]
        )

    def test_not_a_mapping(self):
        with open(self.temp_file.name, 'w') as f:
            f.write('- cat\n- car\n')

        with self.assertRaises(ConfigValidationError):
            PuzzleConfig.from_yaml(self.temp_file.name)

    def test_load_nonexistent_file(self):
        """Test error when loading non-existent file."""
        with self.assertRaises(ConfigValidationError):
            PuzzleConfig.from_yaml("/nonexistent/path.yaml")


class TestCommandLine(unittest.TestCase):
    """Tests for argument parsing and config loading."""

    def test_from_args(self):
        parser = create_argument_parser()
        args = parser.parse_args([
            "--words", "cat, car,art",
            "--title", "Cats",
            "--clues", "clues.yaml",
            "--format", "yaml,text",
            "--attempts-per-word", "5",
            "--max-grid-size", "20",
            "--verbose",
        ])

        config = PuzzleConfig.from_args(args)

        self.assertEqual(config.words, ["cat", "car", "art"])
        self.assertEqual(config.title, "Cats")
        self.assertEqual(config.clue_file, "clues.yaml")
        self.assertEqual(config.output.formats, ["yaml", "text"])
        self.assertEqual(config.generation.attempts_per_word, 5)
        self.assertEqual(config.generation.max_grid_size, 20)
        self.assertEqual(config.output.log_level, "DEBUG")

    def test_load_config_rejects_invalid(self):
        parser = create_argument_parser()
        args = parser.parse_args(["--title", "No words"])

        with self.assertRaises(ConfigValidationError):
            load_config(args)

    def test_load_config_merges_yaml(self):
        with tempfile.NamedTemporaryFile(
            mode='w', suffix='.yaml', delete=False
        ) as f:
            f.write('puzzle:\n  title: "From YAML"\nwords: [cat, car]\n')
            path = f.name
        self.addCleanup(os.unlink, path)

        parser = create_argument_parser()
        args = parser.parse_args(["--config", path, "--author", "Me"])
        config = load_config(args)

        self.assertEqual(config.title, "From YAML")
        self.assertEqual(config.author, "Me")
        self.assertEqual(config.words, ["cat", "car"])


class TestConfigMerge(unittest.TestCase):
    """Tests for configuration merging."""

    def test_merge_prefers_cli(self):
        """Test that CLI config takes precedence over YAML."""
        yaml_config = PuzzleConfig(title="YAML Title", words=["cat"])
        cli_config = PuzzleConfig(title="CLI Title", words=["dog", "emu"])

        merged = PuzzleConfig.merge(yaml_config, cli_config)

        self.assertEqual(merged.title, "CLI Title")
        self.assertEqual(merged.words, ["dog", "emu"])

    def test_merge_keeps_yaml_when_cli_default(self):
        """Test that YAML values are kept when CLI uses defaults."""
        yaml_config = PuzzleConfig(
            title="YAML Title",
            words=["cat", "car"],
            generation={'attempts_per_word': 7},
        )
        cli_config = PuzzleConfig()  # All defaults

        merged = PuzzleConfig.merge(yaml_config, cli_config)

        self.assertEqual(merged.title, "YAML Title")
        self.assertEqual(merged.words, ["cat", "car"])
        self.assertEqual(merged.generation.attempts_per_word, 7)

    def test_merge_layers_clues(self):
        yaml_config = PuzzleConfig(clues={"cat": "Pet", "car": "Auto"})
        cli_config = PuzzleConfig(clues={"car": "Vehicle"})

        merged = PuzzleConfig.merge(yaml_config, cli_config)

        self.assertEqual(merged.clues, {"cat": "Pet", "car": "Vehicle"})


if __name__ == '__main__':
    unittest.main()
