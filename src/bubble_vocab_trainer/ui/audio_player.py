from __future__ import annotations

import base64
import logging
import time
from typing import Any

from src.bubble_vocab_trainer.adapters.presenter_store import AudioRequest
from src.bubble_vocab_trainer.app.ports.session_store import SessionStore
from src.bubble_vocab_trainer.services.audio import synthesize_speech, synthesize_tone
from src.bubble_vocab_trainer.services.session_access import get_settings

logger = logging.getLogger(__name__)

# 要求からこの秒数が経つまでは同じ <audio> を描画し続ける
# （フラグメント再実行で要素が消えると再生が止まるため）
SPEECH_HOLD_SECONDS = 6.0
TONE_HOLD_SECONDS = 1.5


def build_autoplay_html(audio_bytes: bytes, player_id: str, mime: str) -> str:
    """自動再生用の HTML を生成する（コントロール非表示）。"""
    b64 = base64.b64encode(audio_bytes).decode("utf-8")
    return f'<audio id="{player_id}" src="data:{mime};base64,{b64}" autoplay></audio>'


def _is_fresh(req: AudioRequest | None, hold: float, now: float) -> bool:
    return req is not None and now - req.requested_at < hold


def render_audio_requests(speech_slot: Any, tone_slot: Any, store: SessionStore) -> None:
    """最新の読み上げ・効果音の要求をプレースホルダに描画する。

    条件:
    - ミュートではない
    - 要求から一定時間以内
    音声が生成できない場合は何も描画しない（ゲームは続行する）。
    """
    settings = get_settings(store)
    now = time.time()
    speech: AudioRequest | None = store.get("speech_request")
    tone: AudioRequest | None = store.get("tone_request")

    if settings.muted or not _is_fresh(speech, SPEECH_HOLD_SECONDS, now):
        speech_slot.empty()
    else:
        assert speech is not None
        audio_bytes = synthesize_speech(speech.text or "", settings.speech_lang, settings.speech_slow)
        if audio_bytes:
            html = build_autoplay_html(audio_bytes, f"speech-{speech.nonce}", "audio/mp3")
            speech_slot.markdown(html, unsafe_allow_html=True)
        else:
            speech_slot.empty()

    if settings.muted or not _is_fresh(tone, TONE_HOLD_SECONDS, now) or tone.tone is None:
        tone_slot.empty()
    else:
        html = build_autoplay_html(synthesize_tone(tone.tone), f"tone-{tone.nonce}", "audio/wav")
        tone_slot.markdown(html, unsafe_allow_html=True)
