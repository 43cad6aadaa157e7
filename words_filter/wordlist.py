"""
Loading and saving sensitive word lists.

A word list is a UTF-8 text file with one word per line. Only LF ends a
line; each line is trimmed of spaces, tabs, CR, LF, NUL and vertical tab,
and blank lines are skipped. Bytes that are not valid UTF-8 are decoded as
U+FFFD instead of failing the load.
"""

import logging
from pathlib import Path
from typing import Iterable, List, Union

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

# Characters trimmed from both ends of every line
TRIM_CHARS = " \t\n\r\0\x0b"


def clean_line(line: str) -> str:
    """Trim ``TRIM_CHARS`` from both ends of a word-list line."""
    return line.strip(TRIM_CHARS)


def read_word_list(path: PathLike) -> List[str]:
    """
    Read a word list file.
    
    Args:
        path: Path to the word list
        
    Returns:
        Non-blank, trimmed lines in file order
        
    Raises:
        OSError: If the file cannot be opened or read
    """
    path = Path(path)
    words = []
    with open(path, 'r', encoding='utf-8', errors='replace', newline='\n') as f:
        for line in f:
            word = clean_line(line)
            if word:
                words.append(word)

    logger.info(f"Loaded word list: {len(words)} words from {path}")
    return words


def save_word_list(words: Iterable[str], output_path: PathLike) -> None:
    """Save words to a file, one per line, sorted and de-duplicated."""
    output_path = Path(output_path)
    unique = sorted({clean_line(w) for w in words} - {""})
    with open(output_path, 'w', encoding='utf-8') as f:
        for word in unique:
            f.write(f"{word}\n")
    
    logger.info(f"Saved {len(unique)} words to {output_path}")
