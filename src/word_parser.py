"""
Word list input handling.

Turns free text (one word per line or comma separated) into the clean,
deduplicated lowercase list the placement engine expects.
"""

import logging
import os
import re
import sys
from pathlib import Path
from typing import Iterable, List

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from validator import ValidationError


logger = logging.getLogger(__name__)

SEPARATOR_PATTERN = re.compile(r"[\n,]+")
WORD_PATTERN = re.compile(r"^[a-z]+$")


def clean_words(words: Iterable[str]) -> List[str]:
    """
    Normalize candidate words.

    Trims and lowercases each token, drops anything that is not purely
    alphabetic, and removes duplicates keeping the first occurrence.
    """
    seen = set()
    result = []
    for raw in words:
        word = raw.strip().lower()
        if not word:
            continue
        if not WORD_PATTERN.match(word):
            logger.debug(f"Skipping invalid word: {raw!r}")
            continue
        if word in seen:
            continue
        seen.add(word)
        result.append(word)
    return result


def parse_words(text: str) -> List[str]:
    """
    Parse and clean words from input text.

    Args:
        text: Raw input, words separated by newlines and/or commas

    Returns:
        Deduplicated lowercase words in input order
    """
    if not text or not isinstance(text, str):
        return []
    return clean_words(SEPARATOR_PATTERN.split(text))


def load_words_file(path: str) -> List[str]:
    """
    Read and parse a word list file.

    Raises:
        ValidationError: If the file cannot be read
    """
    path = Path(path)
    if not path.exists():
        raise ValidationError(f"Word file not found: {path}")
    try:
        text = path.read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as e:
        raise ValidationError(f"Could not read word file {path}: {e}")
    words = parse_words(text)
    logger.debug(f"Loaded {len(words)} words from {path}")
    return words


def validate_word_list(words: List[str], min_words: int = 2) -> List[str]:
    """
    Ensure a parsed word list is usable for a puzzle.

    Args:
        words: Parsed word list
        min_words: Minimum number of words required

    Returns:
        The same list, for chaining

    Raises:
        ValidationError: If the list is empty or too short
    """
    if not words:
        raise ValidationError(
            "No valid words found. Please enter words containing only letters."
        )
    if len(words) < min_words:
        raise ValidationError(
            f"Please enter at least {min_words} words to generate a crossword puzzle."
        )
    return words
