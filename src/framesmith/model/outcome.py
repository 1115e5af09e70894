"""Outcome model: the single terminal result of a conversion."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from framesmith.model.diagnostic import Diagnostic


class Status(Enum):
    """Possible outcomes of a conversion."""

    SUCCESS = "success"
    FAIL = "fail"


@dataclass
class MappingStats:
    """Counts of host nodes created by the tree mapper."""

    containers: int = 0
    text_leaves: int = 0

    def to_dict(self) -> dict[str, int]:
        return {"containers": self.containers, "text_leaves": self.text_leaves}


@dataclass
class ConversionResult:
    """Result produced by the pipeline for one convert request."""

    status: Status
    message: str
    root: Any = None
    diagnostics: list[Diagnostic] = field(default_factory=list)
    stats: MappingStats = field(default_factory=MappingStats)

    @classmethod
    def success(
        cls,
        message: str,
        root: Any,
        diagnostics: list[Diagnostic],
        stats: MappingStats,
    ) -> ConversionResult:
        return cls(Status.SUCCESS, message, root=root, diagnostics=diagnostics, stats=stats)

    @classmethod
    def failure(cls, message: str, diagnostics: list[Diagnostic] | None = None) -> ConversionResult:
        return cls(Status.FAIL, message, diagnostics=list(diagnostics or []))

    @property
    def succeeded(self) -> bool:
        return self.status is Status.SUCCESS

    @property
    def failed(self) -> bool:
        return self.status is Status.FAIL
