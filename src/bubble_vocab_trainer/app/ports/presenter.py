"""
アプリケーション層のポート: プレゼンター

目的:
- ゲーム進行（サービス層）から見た「描画・音声」の出口を抽象化する。
- サービス層は本ポート（Protocol）にのみ依存し、Streamlit 等の UI には依存しない。

契約:
- すべて投げっぱなし（fire-and-forget）の副作用。戻り値は使わない。
- 音声系（speak / play_tone）は新しい要求が古い要求を打ち消してよい。
- 音声が使えない環境では何もせずに戻ること（例外を投げない）。
"""

from __future__ import annotations

from typing import Protocol

from src.bubble_vocab_trainer.domain import Bubble, Screen, Tone


class Presenter(Protocol):
    """ゲームの表示・音声出力の抽象。"""

    def render_bubble_created(self, bubble: Bubble) -> None:
        """バブルの表示を作成する。"""

    def render_bubble_moved(self, bubble: Bubble) -> None:
        """バブルの表示位置を更新する。"""

    def render_bubble_removed(self, bubble: Bubble) -> None:
        """バブルの表示を取り除く（正解時はポップ演出）。"""

    def render_bubble_shake(self, bubble: Bubble) -> None:
        """不正解時にバブルを揺らす。"""

    def play_tone(self, tone: Tone) -> None:
        """正解/不正解の効果音を鳴らす。"""

    def speak(self, text: str) -> None:
        """テキストを読み上げる。"""

    def stop_speech(self) -> None:
        """読み上げ中・予定の音声を止める。"""

    def show_screen(self, screen: Screen) -> None:
        """画面（スタート/ゲーム/クリア）を切り替える。"""

    def update_remaining_count(self, n: int) -> None:
        """残り単語数の表示を更新する。"""

    def render_celebration(self) -> None:
        """クリア時の演出を表示する。"""
