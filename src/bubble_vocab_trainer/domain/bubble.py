"""バブル（動く単語）のシミュレーション。

目的:
- 単語ごとの円形エンティティの位置・速度を保持し、1 tick ごとに移動させる。
- 画面端で速度を反転し、座標を範囲内に収める。

契約:
- `Bubble` は描画に関する情報（色・DOM 等）を持たない純粋なデータ。
- 座標は正方形の外接矩形の左上。y は `header_inset` 以上に保たれる。
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum

from src.bubble_vocab_trainer.domain.constants import BUBBLE_MIN_SIZE, BUBBLE_SIZE_SPREAD
from src.bubble_vocab_trainer.domain.data import WordEntry


class ClickResult(Enum):
    CORRECT = "correct"
    INCORRECT = "incorrect"


@dataclass
class Bubble:
    """1 単語ぶんのバブル。

    - id: セッション内で一意な連番
    - word: 表示する単語（共有・読み取り専用）
    - x, y: 外接矩形の左上座標
    - size: 直径（生成時に固定）
    - vx, vy: 1 フレームあたりの移動量
    """

    id: int
    word: WordEntry
    x: float
    y: float
    size: float
    vx: float
    vy: float


def _clamp(v: float, lo: float, hi: float) -> float:
    # 範囲が潰れている（画面がバブルより小さい）場合は下限に寄せる
    return max(lo, min(v, max(lo, hi)))


def spawn_bubble(
    word: WordEntry,
    bubble_id: int,
    width: float,
    height: float,
    header_inset: float,
    rng: random.Random | None = None,
) -> Bubble:
    """単語からバブルを生成する。大きさ・位置・速度はそれぞれ独立な一様乱数。"""
    r = rng or random
    size = r.random() * BUBBLE_SIZE_SPREAD + BUBBLE_MIN_SIZE
    x = r.random() * max(0.0, width - size)
    y = header_inset + r.random() * max(0.0, height - size - header_inset)
    vx = (r.random() - 0.5) * 2
    vy = (r.random() - 0.5) * 2
    return Bubble(id=bubble_id, word=word, x=x, y=y, size=size, vx=vx, vy=vy)


def advance(bubble: Bubble, width: float, height: float, header_inset: float) -> None:
    """速度ぶん移動させ、壁に当たったら速度を反転して範囲内へ戻す。"""
    bubble.x += bubble.vx
    bubble.y += bubble.vy

    if bubble.x <= 0 or bubble.x + bubble.size >= width:
        bubble.vx *= -1
        bubble.x = _clamp(bubble.x, 0.0, width - bubble.size)
    if bubble.y <= header_inset or bubble.y + bubble.size >= height:
        bubble.vy *= -1
        bubble.y = _clamp(bubble.y, header_inset, height - bubble.size)


def clamp_to_bounds(bubble: Bubble, width: float, height: float, header_inset: float) -> None:
    """画面サイズ変更時に、外接矩形が画面内に収まるよう座標を補正する（速度は変えない）。"""
    bubble.x = _clamp(bubble.x, 0.0, width - bubble.size)
    bubble.y = _clamp(bubble.y, header_inset, height - bubble.size)


def resolve_click(bubble: Bubble, target: WordEntry) -> ClickResult:
    """クリックされたバブルが正解かを判定する（英語表記の一致で判定）。"""
    if bubble.word.primary == target.primary:
        return ClickResult.CORRECT
    return ClickResult.INCORRECT
