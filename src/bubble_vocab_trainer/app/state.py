"""アプリケーションの状態モデル定義。

目的:
- UI とドメインの境界で用いる明示的な状態構造を提供する（グローバル変数を使わない）。
- サービス層は GameSession を受け取り、その場で更新する。副作用は Presenter 経由で外へ出す。

使い方:
- UI でセッションストアから GameSession を取り出し、サービス関数へ渡す。
- ユーザー操作（クリック・開始・終了・もう一度聞く・画面サイズ変更）はサービス関数に渡す。
"""

from __future__ import annotations

from dataclasses import dataclass, field

from src.bubble_vocab_trainer.domain import (
    HEADER_INSET,
    Bubble,
    DisplayMode,
    RoundPhase,
    TaskScheduler,
    WordEntry,
)


@dataclass
class Settings:
    """画面構成や動作に関する設定。

    現状の契約:
    - width/height はプレイフィールドの大きさ（px）。
    - fps は tick（フラグメント再実行）の頻度。シミュレーション自体は 60fps 基準で追いつく。
    - muted は音声（読み上げ・効果音）のミュート状態を示す。
    - speech_slow/speech_lang は読み上げ（gTTS）の設定。
    """

    width: int = 960
    height: int = 600
    fps: int = 12
    muted: bool = False
    speech_slow: bool = False
    speech_lang: str = "en"


@dataclass
class GameSession:
    """1 プレイヤーぶんのゲーム状態。

    現状の契約:
    - remaining は残り単語（英語表記がキー）。正解で取り除かれる。
    - bubbles は表示中のバブル（id がキー）。is_active の間は len(remaining) と一致する。
    - target は現在の出題。設定されていれば必ず remaining に含まれる。
    - round_id はラウンドごとに増える連番。遅延タスクの有効判定に使う。
    """

    # 進行
    mode: DisplayMode = DisplayMode.PRIMARY
    level: int = 1
    phase: RoundPhase = RoundPhase.NOT_STARTED
    remaining: dict[str, WordEntry] = field(default_factory=dict)
    target: WordEntry | None = None
    is_active: bool = False
    round_id: int = 0

    # シミュレーション
    bubbles: dict[int, Bubble] = field(default_factory=dict)
    next_bubble_id: int = 0
    width: float = 960.0
    height: float = 600.0
    header_inset: float = HEADER_INSET
    last_tick_at: float | None = None  # epoch seconds

    # 遅延タスク
    scheduler: TaskScheduler = field(default_factory=TaskScheduler)

    def allocate_bubble_id(self) -> int:
        bubble_id = self.next_bubble_id
        self.next_bubble_id += 1
        return bubble_id


def new_session(settings: Settings | None = None) -> GameSession:
    """設定のプレイフィールドサイズで GameSession を作る。"""
    s = settings or Settings()
    return GameSession(width=float(s.width), height=float(s.height))
