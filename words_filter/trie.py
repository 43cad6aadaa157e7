"""
Word tree (trie) used to store and scan for sensitive words.

A root mapping is a plain ``dict`` from first character to ``TrieNode``.
It is owned by the caller and passed to every operation, so one ``WordTree``
can serve any number of independent word lists.
"""

from typing import Dict, List, Optional, Tuple


class TrieNode:
    """Single node in the word tree."""

    __slots__ = ("children", "is_terminal")

    def __init__(self):
        self.children: Dict[str, "TrieNode"] = {}
        self.is_terminal: bool = False

    def __repr__(self) -> str:
        return f"TrieNode(children={sorted(self.children)}, is_terminal={self.is_terminal})"


Root = Dict[str, TrieNode]


class WordTree:
    """
    Insert, scan and remove words in a caller-owned root mapping.

    Matching is a greedy walk from every start offset. ``replace`` keeps the
    longest match found from an offset and then jumps past it, so matches in
    the output never overlap.

    The tree itself holds no per-call state; callers that share a root
    between threads must serialize access (see ``WordsFilter``).
    """

    def __init__(self, placeholder: str = ""):
        self.placeholder = placeholder

    def add(self, word: str, root: Root, placeholder: Optional[str] = None) -> None:
        """
        Insert ``word`` into ``root``.

        Args:
            word: Word to insert. Empty words are ignored.
            root: Root mapping to modify in place.
            placeholder: Replacement string for ``replace``. Stored on the
                tree, so it applies to every root and every later call;
                callers sharing the tree must serialize changes to it.
                Does not change the shape of the tree.
        """
        if placeholder is not None:
            self.placeholder = placeholder
        if not word:
            return

        children = root
        node = None
        for ch in word:
            node = children.get(ch)
            if node is None:
                node = TrieNode()
                children[ch] = node
            children = node.children
        node.is_terminal = True

    def contains(self, text: str, root: Root) -> bool:
        """Return True if any substring of ``text`` is a stored word."""
        for i in range(len(text)):
            if self._match_length(text, i, root, longest=False):
                return True
        return False

    def replace(self, text: str, root: Root) -> str:
        """Replace every matched word in ``text`` with one placeholder."""
        out: List[str] = []
        n = len(text)
        i = 0
        while i < n:
            length = self._match_length(text, i, root)
            if length:
                out.append(self.placeholder)
                i += length
            else:
                out.append(text[i])
                i += 1
        return "".join(out)

    def remove(self, word: str, root: Root) -> bool:
        """
        Delete ``word`` from ``root`` and prune nodes no longer on any
        word's path. Removing an absent word does nothing.

        Returns:
            True if ``word`` was stored and has been removed
        """
        if not word:
            return False

        path: List[Tuple[Root, str, TrieNode]] = []
        children = root
        for ch in word:
            node = children.get(ch)
            if node is None:
                return False
            path.append((children, ch, node))
            children = node.children

        node = path[-1][2]
        if not node.is_terminal:
            return False
        node.is_terminal = False

        for parent_children, ch, node in reversed(path):
            if node.children or node.is_terminal:
                break
            del parent_children[ch]
        return True

    def _match_length(self, text: str, start: int, root: Root, longest: bool = True) -> int:
        """
        Walk the tree from ``text[start]`` and return the length of the
        terminal match found, or 0.

        With ``longest`` the walk continues past terminal nodes and returns
        the last one reached; otherwise it stops at the first.
        """
        matched = 0
        children = root
        for j in range(start, len(text)):
            node = children.get(text[j])
            if node is None:
                break
            if node.is_terminal:
                matched = j - start + 1
                if not longest:
                    break
            children = node.children
        return matched


def count_words(root: Root) -> int:
    """Number of words stored in ``root``."""
    total = 0
    stack = list(root.values())
    while stack:
        node = stack.pop()
        if node.is_terminal:
            total += 1
        stack.extend(node.children.values())
    return total


def iter_words(root: Root):
    """Yield every word stored in ``root``, in no particular order."""
    stack = [(ch, node) for ch, node in root.items()]
    while stack:
        prefix, node = stack.pop()
        if node.is_terminal:
            yield prefix
        for ch, child in node.children.items():
            stack.append((prefix + ch, child))
