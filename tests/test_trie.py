"""
Tests for words_filter/trie.py

Covers insertion, greedy scanning, longest-match replacement and
removal with pruning.
"""

import pytest

from words_filter.trie import TrieNode, WordTree, count_words, iter_words


@pytest.fixture
def tree():
    return WordTree("*")


def build(tree, *words):
    root = {}
    for word in words:
        tree.add(word, root)
    return root


# ---------------------------------------------------------------------------
# add
# ---------------------------------------------------------------------------

class TestAdd:
    def test_creates_path(self, tree):
        root = build(tree, "bad")
        assert list(root) == ["b"]
        node = root["b"].children["a"].children["d"]
        assert node.is_terminal
        assert not root["b"].is_terminal
        assert not root["b"].children["a"].is_terminal

    def test_empty_word_is_noop(self, tree):
        root = {}
        tree.add("", root)
        assert root == {}

    def test_shared_prefix(self, tree):
        root = build(tree, "ab", "abc")
        b = root["a"].children["b"]
        assert b.is_terminal
        assert b.children["c"].is_terminal
        assert count_words(root) == 2

    def test_add_twice_same_shape(self, tree):
        once = build(tree, "bad")
        twice = build(tree, "bad", "bad")
        assert sorted(iter_words(once)) == sorted(iter_words(twice))
        assert count_words(twice) == 1

    def test_placeholder_does_not_change_shape(self, tree):
        root = {}
        tree.add("bad", root, placeholder="#")
        assert count_words(root) == 1
        assert tree.placeholder == "#"
        assert tree.replace("bad", root) == "#"

    def test_placeholder_applies_to_every_root(self, tree):
        """The placeholder lives on the tree, not on a root."""
        first = build(tree, "bad")
        second = {}
        tree.add("ugly", second, placeholder="#")
        assert tree.replace("bad", first) == "#"
        assert tree.replace("ugly", second) == "#"

    def test_multibyte_characters(self, tree):
        root = build(tree, "敏感词")
        assert tree.contains("这是敏感词吗", root)
        assert tree.replace("这是敏感词吗", root) == "这是*吗"


# ---------------------------------------------------------------------------
# contains
# ---------------------------------------------------------------------------

class TestContains:
    def test_exact_word(self, tree):
        root = build(tree, "bad")
        assert tree.contains("bad", root)

    @pytest.mark.parametrize("text", ["xxbadxx", "bad!", "!bad", "so bad"])
    def test_substring(self, tree, text):
        root = build(tree, "bad")
        assert tree.contains(text, root)

    def test_prefix_only_does_not_match(self, tree):
        root = build(tree, "badge")
        assert not tree.contains("bad", root)

    def test_no_match(self, tree):
        root = build(tree, "bad")
        assert not tree.contains("good text", root)

    def test_empty_text(self, tree):
        root = build(tree, "bad")
        assert not tree.contains("", root)

    def test_empty_root(self, tree):
        assert not tree.contains("anything", {})

    def test_match_after_dead_end(self, tree):
        """A failed walk from one offset must not hide a later match."""
        root = build(tree, "abd", "bc")
        assert tree.contains("abc", root)


# ---------------------------------------------------------------------------
# replace
# ---------------------------------------------------------------------------

class TestReplace:
    def test_span_collapses_to_single_placeholder(self, tree):
        root = build(tree, "bad")
        assert tree.replace("this is bad input", root) == "this is * input"

    def test_no_overlap_rescan(self):
        tree = WordTree("#")
        root = build(tree, "aa")
        assert tree.replace("aaa", root) == "#a"

    def test_longest_match_wins(self, tree):
        root = build(tree, "ab", "abcd")
        assert tree.replace("xabcdx", root) == "x*x"

    def test_falls_back_to_shorter_match(self, tree):
        """Walk passes 'ab' terminal, dead-ends before 'abcd' completes."""
        root = build(tree, "ab", "abcd")
        assert tree.replace("abcx", root) == "*cx"

    def test_multiple_matches(self, tree):
        root = build(tree, "bad", "ugly")
        assert tree.replace("bad and ugly", root) == "* and *"

    def test_adjacent_matches(self, tree):
        root = build(tree, "bad")
        assert tree.replace("badbad", root) == "**"

    def test_empty_text(self, tree):
        root = build(tree, "bad")
        assert tree.replace("", root) == ""

    def test_no_match_returns_text(self, tree):
        root = build(tree, "bad")
        assert tree.replace("all good", root) == "all good"

    def test_multichar_placeholder(self):
        tree = WordTree("[censored]")
        root = build(tree, "bad")
        assert tree.replace("so bad", root) == "so [censored]"


# ---------------------------------------------------------------------------
# remove
# ---------------------------------------------------------------------------

class TestRemove:
    def test_round_trip(self, tree):
        root = {}
        tree.add("bad", root)
        assert tree.contains("bad", root)
        tree.remove("bad", root)
        assert not tree.contains("bad", root)

    def test_prunes_to_empty(self, tree):
        root = build(tree, "bad")
        tree.remove("bad", root)
        assert root == {}

    def test_absent_word_is_noop(self, tree):
        root = build(tree, "bad")
        assert tree.remove("bat", root) is False
        assert tree.remove("x", root) is False
        assert tree.remove("", root) is False
        assert sorted(iter_words(root)) == ["bad"]

    def test_remove_twice(self, tree):
        root = build(tree, "bad")
        assert tree.remove("bad", root) is True
        assert tree.remove("bad", root) is False
        assert root == {}

    def test_prefix_of_stored_word_is_noop(self, tree):
        root = build(tree, "badge")
        assert tree.remove("bad", root) is False
        assert sorted(iter_words(root)) == ["badge"]

    def test_keeps_longer_word(self, tree):
        root = build(tree, "ab", "abc")
        tree.remove("ab", root)
        assert not tree.contains("ab", root)
        assert tree.contains("abc", root)
        assert "c" in root["a"].children["b"].children

    def test_keeps_shorter_word(self, tree):
        root = build(tree, "ab", "abc")
        tree.remove("abc", root)
        b = root["a"].children["b"]
        assert b.is_terminal
        assert b.children == {}

    def test_prunes_only_unshared_branch(self, tree):
        root = build(tree, "abc", "abd")
        tree.remove("abc", root)
        b = root["a"].children["b"]
        assert list(b.children) == ["d"]

    def test_every_node_on_a_word_path(self, tree):
        root = build(tree, "car", "cart", "care", "dog")
        for word in ["cart", "dog", "car"]:
            tree.remove(word, root)

        def walk(node):
            assert node.is_terminal or node.children
            for child in node.children.values():
                walk(child)

        for node in root.values():
            walk(node)
        assert sorted(iter_words(root)) == ["care"]


# ---------------------------------------------------------------------------
# helpers
# ---------------------------------------------------------------------------

class TestHelpers:
    def test_count_words_empty(self):
        assert count_words({}) == 0

    def test_iter_words(self, tree):
        root = build(tree, "a", "ab", "b")
        assert sorted(iter_words(root)) == ["a", "ab", "b"]

    def test_node_defaults(self):
        node = TrieNode()
        assert node.children == {}
        assert node.is_terminal is False
