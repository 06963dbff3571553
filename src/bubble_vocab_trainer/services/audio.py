"""効果音・読み上げ音声の生成サービス（Streamlit 非依存）。

契約:
- 読み上げは gTTS で mp3 を生成する。gTTS が無い・ネットワーク障害などの場合は None を返す。
- 効果音は numpy で波形を合成し、WAV（16bit モノラル）のバイト列を返す。
- どちらも lru_cache でメモリキャッシュする。
"""

from __future__ import annotations

import logging
import wave
from functools import lru_cache
from io import BytesIO

import numpy as np

from src.bubble_vocab_trainer.domain import Tone
from src.bubble_vocab_trainer.domain.constants import TONE_CORRECT_FREQS, TONE_INCORRECT_FREQS

try:
    from gtts import gTTS
except Exception:  # pragma: no cover - import error handling
    gTTS = None  # type: ignore

logger = logging.getLogger(__name__)

SAMPLE_RATE = 22050
TONE_DURATION = 0.4
TONE_GAIN_START = 0.3
TONE_GAIN_END = 0.01


@lru_cache(maxsize=256)
def synthesize_speech(text: str, lang: str = "en", slow: bool = False) -> bytes | None:
    """テキストから読み上げ音声(mp3)のバイト列を生成して返す。

    - gTTS のネットワーク障害などが起きた場合は None を返す（ゲームは続行する）。
    """
    if not text:
        return None
    if gTTS is None:
        return None
    try:
        tts = gTTS(text=text, lang=lang, slow=slow)
        bio = BytesIO()
        tts.write_to_fp(bio)
        return bio.getvalue()
    except Exception as e:
        logger.warning(f"Speech synthesis failed for {text!r}: {e}")
        return None


def _envelope(n: int) -> np.ndarray:
    """0.3 から 0.01 へ指数的に減衰するゲイン。"""
    t = np.linspace(0.0, 1.0, n, endpoint=False)
    return TONE_GAIN_START * (TONE_GAIN_END / TONE_GAIN_START) ** t


def _correct_wave(n: int) -> np.ndarray:
    # ピンポン: 0.1 秒 C5、その後 E5 の正弦波
    t = np.arange(n) / SAMPLE_RATE
    freq = np.where(t < 0.1, TONE_CORRECT_FREQS[0], TONE_CORRECT_FREQS[1])
    phase = 2 * np.pi * np.cumsum(freq) / SAMPLE_RATE
    return np.sin(phase)


def _incorrect_wave(n: int) -> np.ndarray:
    # ブブー: 0.2 秒かけて G3 -> F3 へ下がるのこぎり波
    t = np.arange(n) / SAMPLE_RATE
    start, end = TONE_INCORRECT_FREQS
    freq = np.where(t < 0.2, start + (end - start) * (t / 0.2), end)
    cycles = np.cumsum(freq) / SAMPLE_RATE
    return 2.0 * (cycles - np.floor(cycles + 0.5))


def tone_samples(tone: Tone) -> np.ndarray:
    """効果音の波形（-1.0〜1.0 の float 配列）を返す。"""
    n = int(SAMPLE_RATE * TONE_DURATION)
    raw = _correct_wave(n) if tone is Tone.CORRECT else _incorrect_wave(n)
    return raw * _envelope(n)


@lru_cache(maxsize=4)
def synthesize_tone(tone: Tone) -> bytes:
    """効果音を WAV バイト列として返す。"""
    pcm = (np.clip(tone_samples(tone), -1.0, 1.0) * 32767).astype("<i2")
    bio = BytesIO()
    with wave.open(bio, "wb") as wf:
        wf.setnchannels(1)
        wf.setsampwidth(2)
        wf.setframerate(SAMPLE_RATE)
        wf.writeframes(pcm.tobytes())
    return bio.getvalue()
