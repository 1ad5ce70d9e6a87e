"""Per-step progress records and the observers that consume them."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Callable, Dict, Optional, TextIO

from pso2d.algorithm.components.vector import Vector2, display
from pso2d.config import check_count


@dataclass(frozen=True)
class ProgressRecord:
    """Swarm state after one completed update step (step is 1-based)."""

    step: int
    best_value: float
    best_position: Vector2

    def as_row(self) -> Dict[str, float]:
        return {
            "step": self.step,
            "best_value": self.best_value,
            "best_x": self.best_position.x,
            "best_y": self.best_position.y,
        }

    def __str__(self) -> str:
        return f"Step {self.step}: Best Value = {self.best_value:.6f} at Position {display(self.best_position)}"


Observer = Callable[[ProgressRecord], None]


class ConsoleProgress:
    """Print a progress line every `every` steps."""

    def __init__(self, every: int = 1, stream: Optional[TextIO] = None):
        self.every = check_count("every", every)
        self.stream = stream

    def __call__(self, record: ProgressRecord) -> None:
        if record.step % self.every == 0:
            print(record, file=self.stream or sys.stdout)


def chain(*observers: Optional[Observer]) -> Observer:
    """Combine observers into one; None entries are skipped."""
    active = [o for o in observers if o is not None]

    def _notify(record: ProgressRecord) -> None:
        for observer in active:
            observer(record)

    return _notify
