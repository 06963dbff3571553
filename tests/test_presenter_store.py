"""Unit tests for the session-store backed presenter."""

import random
import time
import unittest

from src.bubble_vocab_trainer.adapters.presenter_store import (
    POP_DURATION,
    StorePresenter,
    bubble_views,
    current_screen,
)
from src.bubble_vocab_trainer.app.ports.session_store import DictSessionStore
from src.bubble_vocab_trainer.domain import BUBBLE_COLORS, Bubble, Screen, Tone, WordEntry

APPLE = WordEntry("apple", "りんご", 1)


def make_bubble(bubble_id=1, x=10.0, y=70.0):
    return Bubble(id=bubble_id, word=APPLE, x=x, y=y, size=90.0, vx=0.5, vy=0.5)


class TestStorePresenter(unittest.TestCase):
    def setUp(self):
        self.store = DictSessionStore()
        self.presenter = StorePresenter(self.store, rng=random.Random(0))

    def test_view_lifecycle(self):
        bubble = make_bubble()
        self.presenter.render_bubble_created(bubble)
        views = bubble_views(self.store)
        self.assertEqual(len(views), 1)
        self.assertEqual((views[0].x, views[0].y, views[0].size), (10.0, 70.0, 90.0))
        self.assertIn(views[0].color, BUBBLE_COLORS)

        bubble.x, bubble.y = 20.0, 80.0
        self.presenter.render_bubble_moved(bubble)
        self.assertEqual((views[0].x, views[0].y), (20.0, 80.0))

        self.presenter.render_bubble_removed(bubble)
        self.assertEqual(bubble_views(self.store, now=time.time() + 10), [])

    def test_moved_unknown_bubble_is_ignored(self):
        self.presenter.render_bubble_moved(make_bubble(5))
        self.assertEqual(bubble_views(self.store), [])

    def test_views_sorted_by_id(self):
        for i in (3, 1, 2):
            self.presenter.render_bubble_created(make_bubble(i))
        self.assertEqual([v.id for v in bubble_views(self.store)], [1, 2, 3])

    def test_removed_bubble_pops_before_disappearing(self):
        bubble = make_bubble()
        self.presenter.render_bubble_created(bubble)
        self.presenter.render_bubble_removed(bubble)
        now = time.time()
        views = bubble_views(self.store, now=now)
        self.assertEqual([v.id for v in views], [1])
        self.assertTrue(views[0].is_popping(now))
        self.assertGreater(views[0].pop_progress(now + POP_DURATION / 2), 0.0)
        # 演出が終わればストアからも取り除かれる
        self.assertEqual(bubble_views(self.store, now=now + POP_DURATION + 0.01), [])
        self.assertEqual(self.store.get("bubble_views"), {})

    def test_leaving_playfield_clears_views(self):
        bubble = make_bubble()
        self.presenter.render_bubble_created(bubble)
        self.presenter.render_bubble_created(make_bubble(2))
        self.presenter.render_bubble_removed(bubble)
        self.presenter.show_screen(Screen.CLEAR)
        self.assertEqual(bubble_views(self.store), [])

    def test_shake(self):
        bubble = make_bubble()
        self.presenter.render_bubble_created(bubble)
        self.presenter.render_bubble_shake(bubble)
        view = bubble_views(self.store)[0]
        self.assertTrue(view.is_shaking(time.time()))
        self.assertFalse(view.is_shaking(time.time() + 10))

    def test_audio_requests(self):
        self.presenter.speak("apple")
        first = self.store.get("speech_request")
        self.assertEqual(first.text, "apple")
        self.presenter.speak("apple")
        self.assertGreater(self.store.get("speech_request").nonce, first.nonce)
        self.presenter.stop_speech()
        self.assertIsNone(self.store.get("speech_request"))

        self.presenter.play_tone(Tone.INCORRECT)
        self.assertIs(self.store.get("tone_request").tone, Tone.INCORRECT)

    def test_screen_count_and_celebration(self):
        self.assertIs(current_screen(self.store), Screen.START)
        self.presenter.show_screen(Screen.CLEAR)
        self.assertIs(current_screen(self.store), Screen.CLEAR)
        self.presenter.update_remaining_count(4)
        self.assertEqual(self.store.get("remaining_count"), 4)
        self.presenter.render_celebration()
        self.assertTrue(self.store.get("celebrate"))


if __name__ == "__main__":
    unittest.main()
