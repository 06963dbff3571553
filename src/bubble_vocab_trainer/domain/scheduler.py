"""ラウンドに紐づく遅延タスク。

目的:
- 「0.5 秒後に読み上げ」のような遅延処理を、キャンセル可能なタスクとして保持する。
- 実行は tick からの `run_due(now)` 呼び出しで行う（スレッドは使わない）。

契約:
- key 付きのタスクは、同じ key の保留中タスクを置き換える（新しい要求が古い要求を打ち消す）。
- `run_due` 中に追加されたタスクは、次回の呼び出しまで実行しない。
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass


@dataclass
class ScheduledTask:
    due_at: float  # epoch seconds
    round_id: int
    action: Callable[[], None]
    key: str | None = None


class TaskScheduler:
    def __init__(self) -> None:
        self._tasks: list[ScheduledTask] = []

    def schedule(
        self,
        due_at: float,
        round_id: int,
        action: Callable[[], None],
        key: str | None = None,
    ) -> ScheduledTask:
        """タスクを登録する。key があれば同じ key の保留タスクを破棄する。"""
        if key is not None:
            self.cancel(key)
        task = ScheduledTask(due_at=float(due_at), round_id=round_id, action=action, key=key)
        self._tasks.append(task)
        return task

    def cancel(self, key: str) -> int:
        """指定 key の保留タスクを破棄し、破棄した件数を返す。"""
        before = len(self._tasks)
        self._tasks = [t for t in self._tasks if t.key != key]
        return before - len(self._tasks)

    def cancel_round(self, round_id: int) -> int:
        before = len(self._tasks)
        self._tasks = [t for t in self._tasks if t.round_id != round_id]
        return before - len(self._tasks)

    def cancel_all(self) -> None:
        self._tasks = []

    def pending(self) -> list[ScheduledTask]:
        return list(self._tasks)

    def run_due(self, now: float) -> int:
        """期限到来済みのタスクを期限順に実行し、実行件数を返す。"""
        due = sorted((t for t in self._tasks if t.due_at <= now), key=lambda t: t.due_at)
        if not due:
            return 0
        due_ids = {id(t) for t in due}
        self._tasks = [t for t in self._tasks if id(t) not in due_ids]
        for task in due:
            task.action()
        return len(due)
