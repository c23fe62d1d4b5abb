"""
Clue text for placed words.

A default generator produces placeholder clues; user-supplied text keyed by
word overrides it.
"""

from pathlib import Path
from typing import Callable, Dict, Optional

import yaml


ClueGenerator = Callable[[str], str]


def default_clue(word: str) -> str:
    """Placeholder clue describing the word length."""
    return f"A {len(word)}-letter word"


def _normalize_overrides(overrides: Optional[Dict[str, str]]) -> Dict[str, str]:
    """Lowercase keys and drop blank clue text."""
    normalized = {}
    for word, clue in (overrides or {}).items():
        if clue is None:
            continue
        text = str(clue).strip()
        if text:
            normalized[str(word).strip().lower()] = text
    return normalized


class ClueProvider:
    """
    Resolves the clue for each word.

    Usage:
        provider = ClueProvider({"cat": "Feline pet"})
        provider.clue_for("cat")   # "Feline pet"
        provider.clue_for("dog")   # "A 3-letter word"
    """

    def __init__(
        self,
        overrides: Optional[Dict[str, str]] = None,
        generator: ClueGenerator = default_clue
    ):
        self.overrides = _normalize_overrides(overrides)
        self.generator = generator

    def clue_for(self, word: str) -> str:
        if word in self.overrides:
            return self.overrides[word]
        return self.generator(word)

    def with_overrides(self, overrides: Optional[Dict[str, str]]) -> 'ClueProvider':
        """New provider with extra overrides layered on top of these."""
        merged = dict(self.overrides)
        merged.update(_normalize_overrides(overrides))
        return ClueProvider(merged, self.generator)

    @classmethod
    def from_yaml(cls, path: str) -> 'ClueProvider':
        """
        Load overrides from a YAML mapping of word to clue.

        Raises:
            ValueError: If the file is missing or not a mapping
        """
        path = Path(path)
        if not path.exists():
            raise ValueError(f"Clue file not found: {path}")

        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {path}: {e}")

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError(
                f"Clue file must contain a YAML mapping, got {type(data).__name__}"
            )
        return cls(data)
