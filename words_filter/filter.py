"""
Thread-safe sensitive word filter.

``WordsFilter`` holds the placeholder and whitespace settings and guards
every word tree operation with one reader/writer lock. Root mappings stay
with the caller, so a single filter can check text against several
independent word lists (per category, per tenant, ...).

Example::

    wf = WordsFilter(placeholder="*", strip_space=True)
    root = wf.generate(["bad", "worse"])
    wf.contains("this is b a d", root)    # True
    wf.replace("so bad", root)            # "so*"
"""

import logging
from pathlib import Path
from typing import Iterable, Union

from .rwlock import ReadWriteLock
from .trie import Root, WordTree, count_words
from .wordlist import read_word_list

logger = logging.getLogger(__name__)


def strip_space(text: str) -> str:
    """Remove every run of whitespace from ``text``."""
    return "".join(text.split())


class WordsFilter:
    """
    Sensitive word filter over caller-owned root mappings.

    ``add`` and ``remove`` take the lock exclusively; ``contains`` and
    ``replace`` take it shared. The lock only covers access through this
    instance: a root that is also changed elsewhere is not protected.

    With ``strip_space`` all whitespace is removed from the text before any
    operation, so ``replace`` returns the stripped text.
    """

    def __init__(self, placeholder: str = "*", strip_space: bool = False):
        self.strip_space = strip_space
        self._tree = WordTree(placeholder)
        self._lock = ReadWriteLock()

    @property
    def placeholder(self) -> str:
        return self._tree.placeholder

    def __repr__(self) -> str:
        return f"WordsFilter(placeholder={self.placeholder!r}, strip_space={self.strip_space})"

    def _prepare(self, text: str) -> str:
        if self.strip_space:
            return strip_space(text)
        return text

    def generate(self, words: Iterable[str]) -> Root:
        """
        Build a new root mapping from ``words``.

        Each word is added under its own write lock, so readers sharing the
        returned root may see it partially built until this returns.
        """
        root: Root = {}
        for word in words:
            self.add(word, root)
        logger.debug(f"Generated word tree with {len(root)} roots")
        return root

    def generate_with_file(self, path: Union[str, Path]) -> Root:
        """
        Build a root mapping from a word list file, one word per line.

        Raises:
            OSError: If the file cannot be opened or read
        """
        root = self.generate(read_word_list(path))
        logger.info(f"Word tree for {path}: {count_words(root)} words")
        return root

    def add(self, text: str, root: Root) -> None:
        """Add a sensitive word to ``root``."""
        text = self._prepare(text)
        with self._lock.write_locked():
            self._tree.add(text, root)

    def remove(self, text: str, root: Root) -> None:
        """Remove a sensitive word from ``root``."""
        text = self._prepare(text)
        with self._lock.write_locked():
            removed = self._tree.remove(text, root)
        if removed:
            logger.debug(f"Removed word {text!r}")

    def contains(self, text: str, root: Root) -> bool:
        """Whether ``text`` contains any sensitive word in ``root``."""
        text = self._prepare(text)
        with self._lock.read_locked():
            return self._tree.contains(text, root)

    def replace(self, text: str, root: Root) -> str:
        """Return ``text`` with each sensitive word replaced by the placeholder."""
        text = self._prepare(text)
        with self._lock.read_locked():
            return self._tree.replace(text, root)
