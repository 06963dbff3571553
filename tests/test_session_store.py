"""Unit tests for the session store implementations."""

import unittest
from unittest.mock import patch

import streamlit

from src.bubble_vocab_trainer.adapters.session_store_streamlit import KEY_PREFIX, StSessionStore
from src.bubble_vocab_trainer.app.ports.session_store import DictSessionStore


class TestStSessionStore(unittest.TestCase):
    def setUp(self):
        self.state = {"pick": "widget value"}
        patcher = patch.object(streamlit, "session_state", self.state)
        patcher.start()
        self.addCleanup(patcher.stop)
        self.store = StSessionStore()

    def test_keys_are_prefixed(self):
        self.store.set("pick", 3)
        self.assertEqual(self.state[f"{KEY_PREFIX}pick"], 3)
        # ウィジェットの同名キーは上書きしない
        self.assertEqual(self.state["pick"], "widget value")
        self.assertEqual(self.store.get("pick"), 3)

    def test_get_default(self):
        self.assertIsNone(self.store.get("missing"))
        self.assertEqual(self.store.get("missing", 5), 5)

    def test_setdefault(self):
        self.assertEqual(self.store.setdefault("pick_round", 0), 0)
        self.store.set("pick_round", 4)
        self.assertEqual(self.store.setdefault("pick_round", 0), 4)

    def test_custom_prefix(self):
        StSessionStore(prefix="other.").set("screen", "start")
        self.assertIn("other.screen", self.state)


class TestDictSessionStore(unittest.TestCase):
    def test_get_set(self):
        store = DictSessionStore()
        self.assertEqual(store.get("x", 1), 1)
        store.set("x", 2)
        self.assertEqual(store.get("x"), 2)


if __name__ == "__main__":
    unittest.main()
