"""ドメイン層（純粋ロジック/データモデル）。

提供物:
"""

from src.bubble_vocab_trainer.domain.bubble import (
    Bubble,
    ClickResult,
    advance,
    clamp_to_bounds,
    resolve_click,
    spawn_bubble,
)
from src.bubble_vocab_trainer.domain.constants import BUBBLE_COLORS, HEADER_INSET, SPEAK_DELAY
from src.bubble_vocab_trainer.domain.data import (
    WordEntry,
    available_levels,
    index_by_primary,
    normalize_text,
)
from src.bubble_vocab_trainer.domain.game import (
    DisplayMode,
    RoundPhase,
    Screen,
    Tone,
    choose_target,
    eligible_words,
    label_for,
    select_round_words,
)
from src.bubble_vocab_trainer.domain.scheduler import ScheduledTask, TaskScheduler

__all__ = [
    # data
    "WordEntry",
    "normalize_text",
    "index_by_primary",
    "available_levels",
    # bubble
    "Bubble",
    "ClickResult",
    "spawn_bubble",
    "advance",
    "clamp_to_bounds",
    "resolve_click",
    # game
    "DisplayMode",
    "RoundPhase",
    "Screen",
    "Tone",
    "label_for",
    "eligible_words",
    "select_round_words",
    "choose_target",
    # scheduler
    "ScheduledTask",
    "TaskScheduler",
    # constants
    "BUBBLE_COLORS",
    "HEADER_INSET",
    "SPEAK_DELAY",
]
