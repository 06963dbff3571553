from __future__ import annotations

import random
from collections.abc import Iterable, Sequence
from enum import Enum

from src.bubble_vocab_trainer.domain.constants import ROUND_MAX_WORDS, ROUND_MIN_WORDS
from src.bubble_vocab_trainer.domain.data import WordEntry, index_by_primary


class DisplayMode(Enum):
    """バブルに表示する言語。読み上げは常に英語。"""

    PRIMARY = "english"
    SECONDARY = "japanese"


class RoundPhase(Enum):
    NOT_STARTED = "not_started"
    AWAITING_GUESS = "awaiting_guess"
    ROUND_COMPLETE = "round_complete"


class Screen(Enum):
    START = "start"
    GAME = "game"
    CLEAR = "clear"


class Tone(Enum):
    CORRECT = "correct"
    INCORRECT = "incorrect"


def label_for(word: WordEntry, mode: DisplayMode) -> str:
    """表示モードに応じたバブルのラベルを返す。"""
    return word.primary if mode is DisplayMode.PRIMARY else word.secondary


def eligible_words(catalog: Iterable[WordEntry], level: int) -> list[WordEntry]:
    """指定レベルの単語を英語表記で重複排除して返す（カタログ順）。"""
    return list(index_by_primary(w for w in catalog if w.level == level).values())


def select_round_words(
    catalog: Iterable[WordEntry],
    level: int,
    rng: random.Random | None = None,
) -> list[WordEntry]:
    """ラウンドで使う単語をシャッフルして選ぶ。

    - 出題数は [ROUND_MIN_WORDS, ROUND_MAX_WORDS] から一様に選ぶ。
    - 対象が足りなければ対象すべてを使う（0 件なら空リスト）。
    """
    r = rng or random
    pool = eligible_words(catalog, level)
    count = min(len(pool), r.randint(ROUND_MIN_WORDS, ROUND_MAX_WORDS))
    r.shuffle(pool)
    return pool[:count]


def choose_target(remaining: Sequence[WordEntry], rng: random.Random | None = None) -> WordEntry | None:
    """残りの単語からランダムに選んで返す。無ければ None。"""
    if not remaining:
        return None
    return (rng or random).choice(list(remaining))
