"""Unit tests for word catalog loading."""

import os
import tempfile
import unittest

from src.bubble_vocab_trainer.domain import WordEntry, eligible_words
from src.bubble_vocab_trainer.services.catalog import (
    catalog_dataframe,
    load_bundled_words,
    load_words,
    load_words_from_bytes,
    resolve_columns,
)


class TestBundledCatalog(unittest.TestCase):
    def test_levels(self):
        words = load_bundled_words()
        self.assertTrue(all(isinstance(w, WordEntry) for w in words))
        self.assertEqual(sorted({w.level for w in words}), [1, 2, 3])
        self.assertGreaterEqual(len(eligible_words(words, 1)), 10)
        self.assertLess(len(eligible_words(words, 3)), 10)

    def test_unique_primary(self):
        words = load_bundled_words()
        self.assertEqual(len({w.primary for w in words}), len(words))


class TestLoadFromBytes(unittest.TestCase):
    def test_aliases_and_normalization(self):
        data = "EN,JA,Level\n  big   apple ,りんご,1\ndog,いぬ, 2\n".encode("utf-8")
        words = load_words_from_bytes(data)
        self.assertEqual(
            words,
            [WordEntry("big apple", "りんご", 1), WordEntry("dog", "いぬ", 2)],
        )

    def test_skips_invalid_rows_and_duplicates(self):
        data = (
            "english,japanese,level\n"
            "cat,ねこ,1\n"
            "cat,ネコ,1\n"
            "dog,,1\n"
            "fish,さかな,hard\n"
            "bird,とり,2\n"
        ).encode("utf-8")
        words = load_words_from_bytes(data)
        self.assertEqual([w.primary for w in words], ["cat", "bird"])
        self.assertEqual(words[0].secondary, "ねこ")

    def test_missing_column(self):
        with self.assertRaises(ValueError):
            load_words_from_bytes("english,japanese\ncat,ねこ\n".encode("utf-8"))

    def test_no_valid_rows(self):
        with self.assertRaises(ValueError):
            load_words_from_bytes("english,japanese,level\ncat,ねこ,x\n".encode("utf-8"))

    def test_resolve_columns(self):
        resolved, missing = resolve_columns(["英語", "secondary"])
        self.assertEqual(resolved, {"primary": "英語", "secondary": "secondary"})
        self.assertEqual(missing, ["level"])


class TestLoadFromFile(unittest.TestCase):
    def test_missing_file(self):
        with self.assertRaises(FileNotFoundError):
            load_words("/nonexistent/words.csv")

    def test_file(self):
        with tempfile.NamedTemporaryFile("w", suffix=".csv", delete=False, encoding="utf-8") as tf:
            tf.write("english,japanese,level\nsun,たいよう,1\n")
            path = tf.name
        try:
            self.assertEqual(load_words(path), [WordEntry("sun", "たいよう", 1)])
        finally:
            os.remove(path)


class TestCatalogDataframe(unittest.TestCase):
    def test_sorted_by_level_then_english(self):
        words = [WordEntry("b", "び", 2), WordEntry("z", "ず", 1), WordEntry("a", "あ", 2)]
        df = catalog_dataframe(words)
        self.assertEqual(list(df.columns), ["レベル", "英語", "日本語"])
        self.assertEqual(list(df["英語"]), ["z", "a", "b"])


if __name__ == "__main__":
    unittest.main()
