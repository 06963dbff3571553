from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class WordEntry:
    """単語カード（英語/日本語 + レベル）。

    現状の契約:
    - primary: 英語表記（読み上げ対象。ゲーム上の同一性はこの値で判定する）
    - secondary: 日本語表記
    - level: 難易度の段階（1 始まりの整数）
    """

    primary: str  # 英語
    secondary: str  # 日本語
    level: int


def normalize_text(s: str | None) -> str:
    """軽量な正規化を行う。

    - 全角スペースを半角に変換
    - 連続空白を1つに圧縮
    - 前後空白を除去
    """
    if s is None:
        return ""
    s = s.replace("　", " ")
    s = s.strip()
    s = re.sub(r"\s+", " ", s)
    return s


def index_by_primary(words: Iterable[WordEntry]) -> dict[str, WordEntry]:
    """英語表記をキーにした辞書を返す（重複時は最初を優先）。"""
    out: dict[str, WordEntry] = {}
    for w in words:
        if w.primary not in out:
            out[w.primary] = w
    return out


def available_levels(words: Iterable[WordEntry]) -> list[int]:
    """カタログに含まれるレベルを昇順で返す。"""
    return sorted({w.level for w in words})
