"""セッションストアに表示状態を書き出す Presenter 実装。

目的:
- サービス層から届く描画・音声の要求を、UI が次の描画で読める形でセッションに保存する。
- バブルの表示（色・揺れ・ポップ）はここで id ごとに管理し、ドメインの Bubble には持たせない。

契約（ストアのキー）:
- "screen": Screen
- "bubble_views": dict[int, BubbleView]
- "remaining_count": int
- "speech_request" / "tone_request": AudioRequest | None（最新の 1 件のみ保持）
- "celebrate": bool（UI が演出を描画したら False に戻す）
"""

from __future__ import annotations

import itertools
import random
import time
from dataclasses import dataclass

from src.bubble_vocab_trainer.app.ports.session_store import SessionStore
from src.bubble_vocab_trainer.domain import BUBBLE_COLORS, Bubble, Screen, Tone, WordEntry

# 不正解時にバブルを揺らす秒数
SHAKE_DURATION = 0.5
# 正解時のポップ演出の秒数（終わったら表示から消す）
POP_DURATION = 0.3

_NONCE = itertools.count(1)


@dataclass
class BubbleView:
    id: int
    word: WordEntry
    x: float
    y: float
    size: float
    color: str
    shake_until: float | None = None
    pop_until: float | None = None

    def is_shaking(self, now: float) -> bool:
        return self.shake_until is not None and now < self.shake_until

    def is_popping(self, now: float) -> bool:
        return self.pop_until is not None and now < self.pop_until

    def is_expired(self, now: float) -> bool:
        return self.pop_until is not None and now >= self.pop_until

    def pop_progress(self, now: float) -> float:
        """ポップ演出の進み具合（0.0〜1.0）。ポップ中でなければ 0.0。"""
        if self.pop_until is None:
            return 0.0
        return min(1.0, max(0.0, 1.0 - (self.pop_until - now) / POP_DURATION))


@dataclass(frozen=True)
class AudioRequest:
    """再生要求。nonce で同じ要求の二重再生を防ぐ。"""

    nonce: int
    requested_at: float  # epoch seconds
    text: str | None = None
    tone: Tone | None = None


class StorePresenter:
    """SessionStore に表示状態を保存する Presenter。"""

    def __init__(self, store: SessionStore, rng: random.Random | None = None) -> None:
        self._store = store
        self._rng = rng or random

    def _views(self) -> dict[int, BubbleView]:
        views = self._store.get("bubble_views")
        if views is None:
            views = {}
            self._store.set("bubble_views", views)
        return views

    def render_bubble_created(self, bubble: Bubble) -> None:
        self._views()[bubble.id] = BubbleView(
            id=bubble.id,
            word=bubble.word,
            x=bubble.x,
            y=bubble.y,
            size=bubble.size,
            color=self._rng.choice(BUBBLE_COLORS),
        )

    def render_bubble_moved(self, bubble: Bubble) -> None:
        view = self._views().get(bubble.id)
        if view is None:
            return
        view.x = bubble.x
        view.y = bubble.y

    def render_bubble_removed(self, bubble: Bubble) -> None:
        # すぐには消さず、POP_DURATION のあいだ膨らみながら消えていく
        view = self._views().get(bubble.id)
        if view is not None and view.pop_until is None:
            view.pop_until = time.time() + POP_DURATION

    def render_bubble_shake(self, bubble: Bubble) -> None:
        view = self._views().get(bubble.id)
        if view is not None:
            view.shake_until = time.time() + SHAKE_DURATION

    def play_tone(self, tone: Tone) -> None:
        self._store.set("tone_request", AudioRequest(next(_NONCE), time.time(), tone=tone))

    def speak(self, text: str) -> None:
        self._store.set("speech_request", AudioRequest(next(_NONCE), time.time(), text=text))

    def stop_speech(self) -> None:
        self._store.set("speech_request", None)

    def show_screen(self, screen: Screen) -> None:
        self._store.set("screen", screen)
        if screen is not Screen.GAME:
            # プレイフィールドを離れたら演出中のものも含めて片付ける
            self._views().clear()

    def update_remaining_count(self, n: int) -> None:
        self._store.set("remaining_count", int(n))

    def render_celebration(self) -> None:
        self._store.set("celebrate", True)


def current_screen(store: SessionStore) -> Screen:
    screen = store.get("screen")
    return screen if isinstance(screen, Screen) else Screen.START


def bubble_views(store: SessionStore, now: float | None = None) -> list[BubbleView]:
    """表示中のバブル（ポップ演出中を含む）を id 順で返す。演出が終わったものは取り除く。"""
    ts = time.time() if now is None else now
    views: dict[int, BubbleView] = store.get("bubble_views") or {}
    for k in [k for k, v in views.items() if v.is_expired(ts)]:
        del views[k]
    return [views[k] for k in sorted(views)]
