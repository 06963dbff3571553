"""Unit tests for tone synthesis and speech generation."""

import io
import unittest
import wave
from unittest.mock import MagicMock, patch

import numpy as np

from src.bubble_vocab_trainer.domain import Tone
from src.bubble_vocab_trainer.services import audio


class TestTones(unittest.TestCase):
    def test_wav_format(self):
        for tone in Tone:
            with wave.open(io.BytesIO(audio.synthesize_tone(tone)), "rb") as wf:
                self.assertEqual(wf.getnchannels(), 1)
                self.assertEqual(wf.getsampwidth(), 2)
                self.assertEqual(wf.getframerate(), audio.SAMPLE_RATE)
                self.assertEqual(wf.getnframes(), int(audio.SAMPLE_RATE * audio.TONE_DURATION))

    def test_envelope_decays(self):
        env = audio._envelope(1000)
        self.assertAlmostEqual(env[0], 0.3)
        self.assertTrue(np.all(np.diff(env) < 0))
        self.assertGreater(env[-1], 0.01)

    def test_samples_within_gain(self):
        for tone in Tone:
            samples = audio.tone_samples(tone)
            self.assertLessEqual(float(np.max(np.abs(samples))), 0.3 + 1e-9)

    def test_tones_differ(self):
        self.assertNotEqual(
            audio.synthesize_tone(Tone.CORRECT), audio.synthesize_tone(Tone.INCORRECT)
        )


class TestSpeech(unittest.TestCase):
    def setUp(self):
        audio.synthesize_speech.cache_clear()

    def tearDown(self):
        audio.synthesize_speech.cache_clear()

    def test_empty_text(self):
        self.assertIsNone(audio.synthesize_speech(""))

    def test_without_gtts(self):
        with patch.object(audio, "gTTS", None):
            self.assertIsNone(audio.synthesize_speech("apple"))

    def test_failure_returns_none(self):
        failing = MagicMock(side_effect=RuntimeError("network down"))
        with patch.object(audio, "gTTS", failing):
            self.assertIsNone(audio.synthesize_speech("apple"))

    def test_success(self):
        def write_to_fp(fp):
            fp.write(b"mp3-bytes")

        fake = MagicMock()
        fake.return_value.write_to_fp.side_effect = write_to_fp
        with patch.object(audio, "gTTS", fake):
            self.assertEqual(audio.synthesize_speech("apple", "en", True), b"mp3-bytes")
            # 2 回目はキャッシュから返る
            self.assertEqual(audio.synthesize_speech("apple", "en", True), b"mp3-bytes")
        fake.assert_called_once_with(text="apple", lang="en", slow=True)


if __name__ == "__main__":
    unittest.main()
