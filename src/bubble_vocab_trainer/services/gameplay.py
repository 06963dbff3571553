from __future__ import annotations

import logging
import random
import time
from collections.abc import Iterable

from src.bubble_vocab_trainer.app.ports.presenter import Presenter
from src.bubble_vocab_trainer.app.state import GameSession
from src.bubble_vocab_trainer.domain import (
    SPEAK_DELAY,
    ClickResult,
    DisplayMode,
    RoundPhase,
    Screen,
    Tone,
    WordEntry,
    advance,
    choose_target,
    clamp_to_bounds,
    resolve_click,
    select_round_words,
    spawn_bubble,
)
from src.bubble_vocab_trainer.domain.constants import FRAME_RATE, MAX_CATCHUP_FRAMES

# UI からのイベント（開始、バブルクリック、終了、もう一度聞く、画面サイズ変更）を受け取り、
# GameSession の更新とドメイン操作を一箇所に集約する。
# 本モジュールは UI フレームワークに依存しない。表示・音声は Presenter 経由で行う。

logger = logging.getLogger(__name__)

SPEAK_TASK_KEY = "speak"


def _now(now: float | None) -> float:
    return time.time() if now is None else float(now)


def _clear_bubbles(session: GameSession, presenter: Presenter) -> None:
    for bubble in list(session.bubbles.values()):
        presenter.render_bubble_removed(bubble)
    session.bubbles.clear()


def start_round(
    session: GameSession,
    catalog: Iterable[WordEntry],
    mode: DisplayMode,
    level: int,
    presenter: Presenter,
    now: float | None = None,
    rng: random.Random | None = None,
) -> None:
    """新しいラウンドを開始する。

    振る舞い:
    - 前のラウンドの保留タスク・バブルを破棄する。
    - 指定レベルから出題単語を選び、単語ごとにバブルを生成する。
    - 対象単語が 0 件ならそのままクリア扱いにする（出題しない）。
    - それ以外は出題待ちへ遷移し、最初の出題を行う。
    """
    now_ts = _now(now)
    session.scheduler.cancel_all()
    _clear_bubbles(session, presenter)

    words = select_round_words(catalog, level, rng)
    session.round_id += 1
    session.mode = mode
    session.level = int(level)
    session.remaining = {w.primary: w for w in words}
    session.target = None
    for word in words:
        bubble = spawn_bubble(
            word,
            session.allocate_bubble_id(),
            session.width,
            session.height,
            session.header_inset,
            rng,
        )
        session.bubbles[bubble.id] = bubble
        presenter.render_bubble_created(bubble)

    presenter.show_screen(Screen.GAME)
    presenter.update_remaining_count(len(session.remaining))
    logger.info(f"Round {session.round_id} started: level={level}, mode={mode.value}, words={len(words)}")

    if not session.remaining:
        logger.warning(f"No words at level {level}; round {session.round_id} completes immediately")
        _complete_round(session, presenter)
        return

    session.phase = RoundPhase.AWAITING_GUESS
    session.is_active = True
    session.last_tick_at = now_ts
    pick_target(session, presenter, now_ts, rng)


def pick_target(
    session: GameSession,
    presenter: Presenter,
    now: float | None = None,
    rng: random.Random | None = None,
) -> WordEntry | None:
    """残り単語から次の出題を選び、少し遅らせて読み上げを予約する。

    残りが無ければ何もしない（None を返す）。完了判定は呼び出し側で済ませておくこと。
    """
    target = choose_target(list(session.remaining.values()), rng)
    if target is None:
        return None
    session.target = target
    round_id = session.round_id

    def _speak_target() -> None:
        # 予約後に終了・次ラウンドへ移っていれば読み上げない
        if not session.is_active or session.round_id != round_id or session.target is None:
            return
        presenter.speak(session.target.primary)

    session.scheduler.schedule(_now(now) + SPEAK_DELAY, round_id, _speak_target, key=SPEAK_TASK_KEY)
    return target


def handle_bubble_click(
    session: GameSession,
    bubble_id: int,
    presenter: Presenter,
    now: float | None = None,
    rng: random.Random | None = None,
) -> ClickResult | None:
    """バブルクリック時の処理を行う。

    振る舞い:
    - 正解: 効果音、バブルと単語を取り除き、残り 0 ならクリア、そうでなければ次の出題。
    - 不正解: 効果音とバブルの揺れのみ（状態は変えない）。
    - プレイ中でない、出題が無い、存在しない id の場合は何もせず None を返す。
    """
    if not session.is_active or session.target is None:
        return None
    bubble = session.bubbles.get(bubble_id)
    if bubble is None:
        return None

    result = resolve_click(bubble, session.target)
    if result is ClickResult.CORRECT:
        presenter.play_tone(Tone.CORRECT)
        del session.bubbles[bubble_id]
        session.remaining.pop(bubble.word.primary, None)
        presenter.render_bubble_removed(bubble)
        presenter.update_remaining_count(len(session.remaining))
        if not session.remaining:
            _complete_round(session, presenter)
        else:
            pick_target(session, presenter, now, rng)
    else:
        presenter.play_tone(Tone.INCORRECT)
        presenter.render_bubble_shake(bubble)
    return result


def _complete_round(session: GameSession, presenter: Presenter) -> None:
    session.is_active = False
    session.phase = RoundPhase.ROUND_COMPLETE
    session.target = None
    session.last_tick_at = None
    session.scheduler.cancel_round(session.round_id)
    presenter.show_screen(Screen.CLEAR)
    presenter.render_celebration()
    logger.info(f"Round {session.round_id} cleared")


def stop_round(session: GameSession, presenter: Presenter) -> None:
    """ラウンドを強制終了してスタート画面へ戻す。どの状態からでも呼べる。"""
    session.is_active = False
    session.last_tick_at = None
    session.scheduler.cancel_round(session.round_id)
    presenter.stop_speech()
    _clear_bubbles(session, presenter)
    session.remaining = {}
    session.target = None
    session.phase = RoundPhase.NOT_STARTED
    presenter.show_screen(Screen.START)
    logger.info(f"Round {session.round_id} stopped")


def replay_listen(session: GameSession, presenter: Presenter) -> bool:
    """現在の出題をもう一度読み上げる。出題が無ければ何もせず False を返す。"""
    if not session.is_active or session.target is None:
        return False
    # 予約済みの読み上げと二重にならないようにする
    session.scheduler.cancel(SPEAK_TASK_KEY)
    presenter.speak(session.target.primary)
    return True


def tick(session: GameSession, presenter: Presenter, now: float | None = None) -> int:
    """1 回ぶんの更新を行い、進めたフレーム数を返す。

    - 期限の来た遅延タスクを実行する。
    - プレイ中なら、前回からの経過時間ぶん（60fps 換算、上限あり）バブルを進める。
    """
    now_ts = _now(now)
    session.scheduler.run_due(now_ts)
    if not session.is_active:
        return 0
    if session.last_tick_at is None:
        session.last_tick_at = now_ts
        return 0

    elapsed = max(0.0, now_ts - session.last_tick_at)
    frames = int(elapsed * FRAME_RATE)
    if frames <= 0:
        return 0
    if frames > MAX_CATCHUP_FRAMES:
        # 長く止まっていた場合は追いつかずに捨てる
        frames = MAX_CATCHUP_FRAMES
        session.last_tick_at = now_ts
    else:
        session.last_tick_at += frames / FRAME_RATE

    for _ in range(frames):
        for bubble in session.bubbles.values():
            advance(bubble, session.width, session.height, session.header_inset)
    for bubble in session.bubbles.values():
        presenter.render_bubble_moved(bubble)
    return frames


def on_viewport_resized(
    session: GameSession, width: float, height: float, presenter: Presenter
) -> None:
    """画面サイズ変更時に、すべてのバブルを新しい範囲内へ収める。"""
    session.width = float(width)
    session.height = float(height)
    for bubble in session.bubbles.values():
        clamp_to_bounds(bubble, session.width, session.height, session.header_inset)
        presenter.render_bubble_moved(bubble)
