# -*- coding: utf-8 -*-
from __future__ import annotations
from typing import Dict, Iterable, Optional


class TrieNode:
    """Node for the Trie structure for efficient prefix searching."""

    def __init__(self):
        self.children: Dict[str, 'TrieNode'] = {}
        self.is_word = False


class Trie:
    """Insert-only prefix index over dictionary words.

    Every node is reached through exactly one character path from the root.
    The empty word, when inserted, marks the root itself.
    """

    def __init__(self, words: Optional[Iterable[str]] = None):
        self.root = TrieNode()
        self.word_count = 0
        if words is not None:
            for word in words:
                self.insert(word)

    def insert(self, word: str):
        """Inserts a word into the Trie."""
        node = self.root
        for letter in word:
            if letter not in node.children:
                node.children[letter] = TrieNode()
            node = node.children[letter]
        if not node.is_word:
            node.is_word = True
            self.word_count += 1

    def __contains__(self, word: str) -> bool:
        node = self.root
        for letter in word:
            node = node.children.get(letter)
            if node is None:
                return False
        return node.is_word

    def __len__(self) -> int:
        return self.word_count
