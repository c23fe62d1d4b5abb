# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""Unit tests for word list parsing."""

import os
import sys
import tempfile
import unittest

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from word_parser import (
    clean_words, parse_words, load_words_file, validate_word_list
)
from validator import ValidationError


class TestParseWords(unittest.TestCase):
    """Tests for parse_words."""

    def test_newlines_and_commas(self):
        self.assertEqual(
            parse_words("cat, dog\nbird,,fish\n\n"),
            ["cat", "dog", "bird", "fish"]
        )

    def test_lowercases_and_trims(self):
        self.assertEqual(parse_words("  Python \n JAVA"), ["python", "java"])

    def test_drops_invalid_words(self):
        self.assertEqual(
            parse_words("h3llo, two words, ok, café, x-ray"),
            ["ok"]
        )

    def test_deduplicates_keeping_first(self):
        self.assertEqual(parse_words("Cat, dog, CAT, cat"), ["cat", "dog"])

    def test_empty_input(self):
        self.assertEqual(parse_words(""), [])
        self.assertEqual(parse_words(None), [])
        self.assertEqual(parse_words(" ,\n, "), [])

    def test_clean_words(self):
        self.assertEqual(clean_words(["A", " b ", "a", "1"]), ["a", "b"])


class TestLoadWordsFile(unittest.TestCase):
    """Tests for reading word files."""

    def test_load(self):
        with tempfile.NamedTemporaryFile(
            mode='w', suffix='.txt', delete=False, encoding='utf-8'
        ) as f:
            f.write("alpha\nbeta, gamma\nalpha\n")
            path = f.name
        try:
            self.assertEqual(load_words_file(path), ["alpha", "beta", "gamma"])
        finally:
            os.unlink(path)

    def test_missing_file(self):
        with self.assertRaises(ValidationError):
            load_words_file("/nonexistent/words.txt")


class TestValidateWordList(unittest.TestCase):
    """Tests for word list validation."""

    def test_valid_list(self):
        words = ["cat", "dog"]
        self.assertIs(validate_word_list(words), words)

    def test_empty_list(self):
        with self.assertRaises(ValidationError) as ctx:
            validate_word_list([])
        self.assertIn("No valid words", str(ctx.exception))

    def test_too_few_words(self):
        with self.assertRaises(ValidationError) as ctx:
            validate_word_list(["cat"])
        self.assertIn("at least 2 words", str(ctx.exception))

    def test_custom_minimum(self):
        validate_word_list(["cat"], min_words=1)
        with self.assertRaises(ValidationError):
            validate_word_list(["cat", "dog"], min_words=3)


if __name__ == '__main__':
    unittest.main()
