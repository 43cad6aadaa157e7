"""
words_filter
============

Sensitive word filtering with a character trie. Detects and replaces
banned words in text, with thread-safe runtime updates to the word lists.
"""

__version__ = "0.1.0"

from .filter import WordsFilter, strip_space
from .trie import TrieNode, WordTree, count_words, iter_words
from .wordlist import read_word_list, save_word_list

__all__ = [
    'WordsFilter',
    'WordTree',
    'TrieNode',
    'strip_space',
    'count_words',
    'iter_words',
    'read_word_list',
    'save_word_list',
]
