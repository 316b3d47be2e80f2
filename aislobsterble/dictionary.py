"""Word list used as the membership oracle for candidate words."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable

log = logging.getLogger("aislobsterble")


class Dictionary:
    """Immutable, case-folded set of valid words.

    Loaded once at startup and shared read-only by every turn's search.
    """

    __slots__ = ("_words", "source")

    def __init__(self, words: Iterable[str], source: str | None = None):
        self._words = frozenset(w.strip().upper() for w in words if w.strip())
        self.source = source

    @classmethod
    def load(cls, dict_path: str | None = None) -> Dictionary:
        """Load a newline-delimited word list.

        ``dict_path`` is tried first, then a few conventional file names.
        """
        search_paths: list[str] = []
        if dict_path:
            search_paths.append(dict_path)

        search_paths.extend([
            "dictionary.txt",
            "words.txt",
            os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", "dictionary.txt"),
        ])

        for path in search_paths:
            if os.path.isfile(path):
                with open(path, "r", encoding="utf-8") as f:
                    dictionary = cls(f, source=path)
                log.info("Loaded %s words from %s", f"{len(dictionary):,}", path)
                return dictionary

        raise FileNotFoundError(
            f"No word list found (tried: {', '.join(search_paths)})"
        )

    def is_valid(self, word: str) -> bool:
        return word.upper() in self._words

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.is_valid(word)

    def __len__(self) -> int:
        return len(self._words)

    def __repr__(self) -> str:
        return f"Dictionary({len(self._words)} words from {self.source or '<memory>'})"
