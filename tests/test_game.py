"""Unit tests for word selection helpers."""

import random
import unittest

from src.bubble_vocab_trainer.domain import (
    DisplayMode,
    WordEntry,
    available_levels,
    choose_target,
    eligible_words,
    label_for,
    select_round_words,
)


def make_catalog() -> list[WordEntry]:
    words = [WordEntry(f"word{i}", f"ことば{i}", 1) for i in range(30)]
    words += [WordEntry(f"hard{i}", f"むずかしい{i}", 2) for i in range(5)]
    return words


class TestSelectRoundWords(unittest.TestCase):
    """Tests for round word selection."""

    def test_large_level_selects_10_to_15(self):
        catalog = make_catalog()
        for seed in range(100):
            words = select_round_words(catalog, 1, random.Random(seed))
            self.assertGreaterEqual(len(words), 10)
            self.assertLessEqual(len(words), 15)
            self.assertTrue(all(w.level == 1 for w in words))
            self.assertEqual(len({w.primary for w in words}), len(words))

    def test_small_level_selects_everything(self):
        catalog = make_catalog()
        words = select_round_words(catalog, 2, random.Random(3))
        self.assertEqual({w.primary for w in words}, {f"hard{i}" for i in range(5)})

    def test_unknown_level_is_empty(self):
        self.assertEqual(select_round_words(make_catalog(), 9, random.Random(0)), [])

    def test_duplicates_are_collapsed(self):
        catalog = [
            WordEntry("cat", "ねこ", 1),
            WordEntry("cat", "ネコ", 1),
            WordEntry("dog", "いぬ", 1),
        ]
        self.assertEqual([w.secondary for w in eligible_words(catalog, 1)], ["ねこ", "いぬ"])
        self.assertEqual(len(select_round_words(catalog, 1, random.Random(0))), 2)


class TestChooseTarget(unittest.TestCase):
    """Tests for target selection."""

    def test_empty(self):
        self.assertIsNone(choose_target([]))

    def test_member(self):
        words = make_catalog()[:4]
        rng = random.Random(5)
        for _ in range(20):
            self.assertIn(choose_target(words, rng), words)


class TestLabels(unittest.TestCase):
    def test_label_for_mode(self):
        w = WordEntry("apple", "りんご", 1)
        self.assertEqual(label_for(w, DisplayMode.PRIMARY), "apple")
        self.assertEqual(label_for(w, DisplayMode.SECONDARY), "りんご")

    def test_available_levels(self):
        self.assertEqual(available_levels(make_catalog()), [1, 2])


if __name__ == "__main__":
    unittest.main()
