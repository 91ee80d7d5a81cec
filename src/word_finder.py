# -*- coding: utf-8 -*-
import logging
from collections import Counter, defaultdict
from pathlib import Path
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Union

from constants import (
    BASIC_WORDS,
    DEFAULT_MIN_LENGTH,
    DEFAULT_STRATEGY,
    STRATEGIES,
    STRATEGY_COPY,
)
from trie import Trie, TrieNode

logger = logging.getLogger(__name__)


def _check_strategy(strategy: str):
    if strategy not in STRATEGIES:
        raise ValueError(f"Unknown search strategy: {strategy!r} (use one of: {', '.join(STRATEGIES)})")


def can_form_word(word: str, available: Mapping[str, int]) -> bool:
    """Checks if the letters of word are a sub-multiset of available."""
    for letter, qty in Counter(word).items():
        if available.get(letter, 0) < qty:
            return False
    return True


def _search_copy(root: TrieNode, remaining_letters: Counter,
                 min_length: int, results: List[str]):
    """Pre-order search where every descent receives its own Counter."""
    # stack entries: (node, prefix, letters left for that branch)
    stack = [(root, "", remaining_letters)]

    while stack:
        node, prefix, branch_letters = stack.pop()
        if node.is_word and len(prefix) >= min_length:
            results.append(prefix)

        # Pushed in reverse so children pop in insertion order
        for letter, child_node in reversed(list(node.children.items())):
            if branch_letters[letter] <= 0:
                continue
            child_letters = branch_letters.copy()
            child_letters[letter] -= 1
            stack.append((child_node, prefix + letter, child_letters))


def _search_backtrack(root: TrieNode, remaining_letters: Counter,
                      min_length: int, results: List[str]):
    """Pre-order search over one shared Counter, restored when a node is left."""
    if root.is_word and min_length <= 0:
        results.append("")

    path: List[str] = []
    # one children iterator per node on the current path
    stack = [iter(root.children.items())]

    while stack:
        for letter, child_node in stack[-1]:
            if remaining_letters[letter] > 0:
                break
        else:
            # Children exhausted: leave the node and give its letter back
            stack.pop()
            if path:
                remaining_letters[path.pop()] += 1
            continue

        remaining_letters[letter] -= 1
        path.append(letter)
        if child_node.is_word and len(path) >= min_length:
            results.append("".join(path))
        stack.append(iter(child_node.children.items()))


def search(root: TrieNode, available: Mapping[str, int],
           strategy: str = DEFAULT_STRATEGY,
           min_length: int = DEFAULT_MIN_LENGTH) -> List[str]:
    """
    Collects every complete word under root that can be spelled with available.

    Children are visited in insertion order, so the result follows a pre-order
    walk of the trie. A branch is only entered while its letter still has a
    positive count; sibling branches always see the caller's counts.
    The mapping passed in is never modified.
    """
    _check_strategy(strategy)
    remaining_letters = Counter(available)
    results: List[str] = []

    if strategy == STRATEGY_COPY:
        _search_copy(root, remaining_letters, min_length, results)
    else:
        _search_backtrack(root, remaining_letters, min_length, results)

    logger.debug(f"Search ({strategy}) over {sum(remaining_letters.values())} letters found {len(results)} words")
    return results


def find_words(input_string: str, dictionary: Sequence[str],
               strategy: str = DEFAULT_STRATEGY,
               min_length: int = DEFAULT_MIN_LENGTH) -> List[str]:
    """
    Finds all dictionary words that can be formed using characters of input_string.

    Each character of input_string can be used at most as many times as it
    appears. An empty input is searched like any other, so the empty word is
    returned when the dictionary contains it.
    """
    _check_strategy(strategy)
    # No valid words exist if the dictionary is empty
    if not dictionary:
        return []

    trie = Trie(dictionary)
    return search(trie.root, Counter(input_string), strategy, min_length)


class WordFinder:
    """Word finder over a long-lived dictionary (Trie + pruned recursive search)

    Strategy:
      - Loads the dictionary once, optionally in uppercase
      - Builds a Trie so shared prefixes are explored only once
      - Each search descends only through letters still available
    """

    def __init__(self, words: Optional[Iterable[str]] = None, normalize_case: bool = False):
        self.normalize_case = normalize_case
        self.dictionary_path: Optional[Path] = None
        self.trie = Trie()
        if words is not None:
            self.set_words(words)

    def _normalize_word(self, word: str) -> str:
        word = word.strip()
        return word.upper() if self.normalize_case else word

    def set_words(self, words: Iterable[str]):
        """Rebuilds the Trie from words, in order."""
        self.trie = Trie(self._normalize_word(w) for w in words)
        logger.debug(f"Trie built with {len(self.trie)} words")

    def load_dictionary(self, path: Union[str, Path]) -> int:
        """Loads a word list (one word per line) and rebuilds the Trie.

        Falls back to the embedded basic dictionary when the file is missing,
        unreadable or empty. Returns the number of distinct words loaded.
        """
        self.dictionary_path = Path(path)
        words: List[str] = []

        if self.dictionary_path.exists():
            try:
                text = self.dictionary_path.read_text(encoding='utf-8')
                words = [l for l in text.splitlines() if l.strip()]
                logger.info(f"Loaded local dictionary: {self.dictionary_path} ({len(words)} lines)")
            except (OSError, UnicodeDecodeError) as e:
                logger.warning(f"Error reading local dictionary: {e}")
        else:
            logger.warning(f"Dictionary not found at: {self.dictionary_path}")

        if not words:
            logger.info("Using embedded basic dictionary")
            words = BASIC_WORDS

        self.set_words(words)
        return len(self.trie)

    def load_basic_dictionary(self) -> int:
        self.dictionary_path = None
        self.set_words(BASIC_WORDS)
        return len(self.trie)

    def normalize_input(self, input_str: str) -> str:
        letters = "".join(input_str.split())
        return letters.upper() if self.normalize_case else letters

    def find(self, letters: str, min_length: int = DEFAULT_MIN_LENGTH,
             strategy: str = DEFAULT_STRATEGY) -> List[str]:
        """Words that can be formed from letters, in trie traversal order."""
        available_letters = Counter(self.normalize_input(letters))
        return search(self.trie.root, available_letters, strategy, min_length)

    def find_sorted(self, letters: str, min_length: int = DEFAULT_MIN_LENGTH,
                    strategy: str = DEFAULT_STRATEGY) -> List[str]:
        results = self.find(letters, min_length, strategy)
        # Sort by decreasing length and lexicographically
        results.sort(key=lambda p: (-len(p), p))
        return results

    @staticmethod
    def group_by_length(words: Iterable[str]) -> Dict[int, List[str]]:
        by_length: Dict[int, List[str]] = defaultdict(list)
        for p in words:
            by_length[len(p)].append(p)
        return dict(by_length)

    def can_form(self, word: str, letters: str) -> bool:
        """True if word is in the dictionary and can be formed from letters."""
        word = self._normalize_word(word)
        return word in self.trie and can_form_word(word, Counter(self.normalize_input(letters)))
