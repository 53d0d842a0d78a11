"""Helpers for collecting instrumentation data during cave generation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict


@dataclass
class StageMetrics:
    """Aggregated metrics for a single pipeline stage across invocations."""

    name: str
    invocations: int = 0
    total_time: float = 0.0
    total_cells_changed: int = 0
    total_corridors_painted: int = 0

    def record(self, duration: float, cells_changed: int, corridors_painted: int) -> None:
        self.invocations += 1
        self.total_time += duration
        self.total_cells_changed += cells_changed
        self.total_corridors_painted += corridors_painted

    def to_dict(self) -> Dict[str, float | int]:
        average_time = self.total_time / self.invocations if self.invocations else 0.0
        average_cells = (
            self.total_cells_changed / self.invocations if self.invocations else 0.0
        )
        return {
            "invocations": self.invocations,
            "total_time": self.total_time,
            "average_time": average_time,
            "total_cells_changed": self.total_cells_changed,
            "average_cells_changed": average_cells,
            "total_corridors_painted": self.total_corridors_painted,
        }


@dataclass
class GenerationMetrics:
    """Container for stage metrics recorded during a generation run."""

    stages: Dict[str, StageMetrics] = field(default_factory=dict)

    def record_stage_run(
        self,
        name: str,
        duration: float,
        cells_changed: int,
        corridors_painted: int = 0,
    ) -> None:
        metrics = self.stages.get(name)
        if metrics is None:
            metrics = StageMetrics(name=name)
            self.stages[name] = metrics
        metrics.record(duration, cells_changed, corridors_painted)

    def snapshot(self) -> Dict[str, Dict[str, float | int]]:
        return {name: metrics.to_dict() for name, metrics in self.stages.items()}
