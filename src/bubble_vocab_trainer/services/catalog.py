"""
単語カタログ読み込みサービス（Streamlit 非依存）
- 同梱 CSV（data/words.csv）の読込
- アップロードされた CSV バイト列の読込
- 列名エイリアス解決（english/en/英語 など）

戻り値の契約:
    list[WordEntry]（英語表記で重複排除済み、ファイル順）
"""

from __future__ import annotations

import io
import logging
import pathlib

import pandas as pd

from src.bubble_vocab_trainer.domain import WordEntry, normalize_text
from src.bubble_vocab_trainer.domain.constants import COLUMN_ALIASES

logger = logging.getLogger(__name__)

BUNDLED_CATALOG_PATH = pathlib.Path(__file__).resolve().parent.parent / "data" / "words.csv"


def resolve_columns(columns: list[str]) -> tuple[dict[str, str], list[str]]:
    """列名の候補から論理名 -> 実列名の対応を作る。

    Returns:
        (resolved_map, missing_keys)
        resolved_map: {"primary": 実列名, "secondary": 実列名, "level": 実列名}
        missing_keys: 見つからなかった論理名
    """
    by_lower = {c.strip().lower(): c for c in columns}
    resolved: dict[str, str] = {}
    missing: list[str] = []
    for key, aliases in COLUMN_ALIASES.items():
        hit = next((by_lower[a.lower()] for a in aliases if a.lower() in by_lower), None)
        if hit is None:
            missing.append(key)
        else:
            resolved[key] = hit
    return resolved, missing


def words_from_dataframe(df: pd.DataFrame) -> list[WordEntry]:
    """DataFrame から WordEntry のリストを作る。

    - 英語/日本語が空、レベルが整数でない行はスキップ
    - 英語表記が重複する行は最初の 1 件のみ採用
    """
    resolved, missing = resolve_columns([str(c) for c in df.columns])
    if missing:
        raise ValueError("CSV に必要な列が見つかりません: " + ", ".join(missing))

    records: list[WordEntry] = []
    seen: set[str] = set()
    for _, row in df.iterrows():
        primary_raw = row.get(resolved["primary"])
        secondary_raw = row.get(resolved["secondary"])
        level_raw = row.get(resolved["level"])
        if pd.isna(primary_raw) or pd.isna(secondary_raw) or pd.isna(level_raw):
            continue
        primary = normalize_text(str(primary_raw))
        secondary = normalize_text(str(secondary_raw))
        if not primary or not secondary:
            continue
        try:
            level = int(str(level_raw).strip())
        except ValueError:
            continue
        if primary in seen:
            continue
        seen.add(primary)
        records.append(WordEntry(primary=primary, secondary=secondary, level=level))

    if not records:
        raise ValueError("CSV から有効な単語を読み込めませんでした。")
    return records


def load_words(csv_path: str | pathlib.Path) -> list[WordEntry]:
    """CSV ファイルから単語カタログを読み込む。文字コードは UTF-8 を想定。"""
    path = pathlib.Path(csv_path)
    if not path.exists():
        raise FileNotFoundError(f"CSV not found: {path}")
    df = pd.read_csv(path, header=0, dtype=str, encoding="utf-8", skipinitialspace=True)
    words = words_from_dataframe(df)
    logger.info(f"Loaded {len(words)} words from {path.name}")
    return words


def load_words_from_bytes(data: bytes) -> list[WordEntry]:
    """アップロードされた CSV バイト列から単語カタログを読み込む。"""
    df = pd.read_csv(io.BytesIO(data), header=0, dtype=str, encoding="utf-8", skipinitialspace=True)
    words = words_from_dataframe(df)
    logger.info(f"Loaded {len(words)} words from uploaded CSV")
    return words


def load_bundled_words() -> list[WordEntry]:
    """同梱の単語カタログを読み込む。"""
    return load_words(BUNDLED_CATALOG_PATH)


def catalog_dataframe(words: list[WordEntry]) -> pd.DataFrame:
    """一覧表示用に WordEntry のリストを DataFrame にする（レベル→英語順）。"""
    df = pd.DataFrame(
        [{"レベル": w.level, "英語": w.primary, "日本語": w.secondary} for w in words],
        columns=["レベル", "英語", "日本語"],
    )
    return df.sort_values(["レベル", "英語"]).reset_index(drop=True)
