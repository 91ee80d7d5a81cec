from __future__ import annotations

import random
import unittest
from collections import Counter

from constants import STRATEGIES, STRATEGY_BACKTRACK, STRATEGY_COPY
from trie import Trie
from word_finder import can_form_word, find_words, search

DICTIONARY = ["ate", "eat", "tea", "dog", "do", "god", "goo", "go", "good"]


class FindWordsScenarioTest(unittest.TestCase):
    def test_anagrams_of_ate(self) -> None:
        self.assertEqual(find_words("ate", DICTIONARY), ["ate", "eat", "tea"])

    def test_repeated_letters(self) -> None:
        result = find_words("oogd", DICTIONARY)
        self.assertEqual(set(result), {"dog", "do", "god", "goo", "go", "good"})
        self.assertEqual(len(result), 6)

    def test_preorder_traversal_order(self) -> None:
        self.assertEqual(find_words("oogd", DICTIONARY), ["do", "dog", "go", "god", "goo", "good"])

    def test_no_usable_letters(self) -> None:
        self.assertEqual(find_words("lmn", DICTIONARY), [])

    def test_empty_word_matches_any_input(self) -> None:
        self.assertEqual(set(find_words("hi", ["", "hi"])), {"", "hi"})

    def test_empty_input_still_finds_empty_word(self) -> None:
        self.assertEqual(find_words("", ["", "hi"]), [""])

    def test_empty_input_without_empty_word(self) -> None:
        self.assertEqual(find_words("", DICTIONARY), [])

    def test_empty_input_and_dictionary(self) -> None:
        self.assertEqual(find_words("", []), [])

    def test_empty_dictionary(self) -> None:
        self.assertEqual(find_words("anything", []), [])

    def test_letter_used_at_most_its_count(self) -> None:
        self.assertEqual(find_words("god", DICTIONARY), ["do", "dog", "go", "god"])

    def test_duplicate_dictionary_words_reported_once(self) -> None:
        self.assertEqual(find_words("og", ["go", "go", "go"]), ["go"])

    def test_min_length_filters_short_words(self) -> None:
        self.assertEqual(find_words("oogd", DICTIONARY, min_length=3), ["dog", "god", "goo", "good"])
        self.assertEqual(find_words("hi", ["", "hi"], min_length=1), ["hi"])

    def test_case_sensitive(self) -> None:
        self.assertEqual(find_words("ATE", DICTIONARY), [])

    def test_unknown_strategy(self) -> None:
        with self.assertRaises(ValueError):
            find_words("ate", DICTIONARY, strategy="greedy")
        with self.assertRaises(ValueError):
            find_words("ate", [], strategy="greedy")


class StrategyTest(unittest.TestCase):
    def test_strategies_agree(self) -> None:
        for letters in ("ate", "oogd", "", "lmn", "goodate"):
            with self.subTest(letters=letters):
                self.assertEqual(
                    find_words(letters, DICTIONARY, strategy=STRATEGY_COPY),
                    find_words(letters, DICTIONARY, strategy=STRATEGY_BACKTRACK),
                )

    def test_search_leaves_available_letters_untouched(self) -> None:
        trie = Trie(DICTIONARY)
        for strategy in STRATEGIES:
            with self.subTest(strategy=strategy):
                available = Counter("oogdate")
                search(trie.root, available, strategy=strategy)
                self.assertEqual(available, Counter("oogdate"))

    def test_search_accepts_plain_mapping(self) -> None:
        trie = Trie(DICTIONARY)
        self.assertEqual(search(trie.root, {"g": 1, "o": 1}), ["go"])

    def test_very_long_word(self) -> None:
        word = "a" * 5000
        for strategy in STRATEGIES:
            with self.subTest(strategy=strategy):
                self.assertEqual(find_words(word, [word], strategy=strategy), [word])
                self.assertEqual(find_words(word[:-1], [word], strategy=strategy), [])

    def test_letters_restored_after_deep_branch(self) -> None:
        dictionary = ["a" * 3000 + "b", "ba", "b" + "a" * 3000]
        letters = "b" + "a" * 3000
        for strategy in STRATEGIES:
            with self.subTest(strategy=strategy):
                self.assertEqual(find_words(letters, dictionary, strategy=strategy), dictionary)

    def test_sibling_branches_share_letter(self) -> None:
        # both "ab" and "ba" need the single "a"
        self.assertEqual(find_words("ab", ["ab", "ba", "aa"]), ["ab", "ba"])


class CanFormWordTest(unittest.TestCase):
    def test_sub_multiset(self) -> None:
        self.assertTrue(can_form_word("good", Counter("doog")))
        self.assertTrue(can_form_word("", Counter()))
        self.assertFalse(can_form_word("good", Counter("god")))
        self.assertFalse(can_form_word("x", {}))


class FindWordsPropertyTest(unittest.TestCase):
    ALPHABET = "abcde"

    def _random_word(self, rng: random.Random, max_length: int) -> str:
        return "".join(rng.choice(self.ALPHABET) for _ in range(rng.randint(0, max_length)))

    def test_sound_complete_and_order_independent(self) -> None:
        rng = random.Random(1234)
        for _ in range(200):
            dictionary = [self._random_word(rng, 5) for _ in range(rng.randint(0, 25))]
            letters = self._random_word(rng, 7)
            available = Counter(letters)
            expected = {w for w in dictionary if can_form_word(w, available)}

            result = find_words(letters, dictionary)
            self.assertEqual(len(result), len(set(result)))
            self.assertEqual(set(result), expected)

            shuffled = list(dictionary)
            rng.shuffle(shuffled)
            self.assertEqual(set(find_words(letters, shuffled)), expected)
            self.assertEqual(find_words(letters, dictionary, strategy=STRATEGY_BACKTRACK), result)


if __name__ == "__main__":
    unittest.main()
