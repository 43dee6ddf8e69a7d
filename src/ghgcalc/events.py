"""Typed messages used to propagate component totals to an industry ledger."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class EmissionReport:
    """Total emission of one calculator, reported upward after a recompute."""

    source: str
    category: str
    total_tco2e: float
    detail: Mapping[str, Any] = field(default_factory=dict)


EmissionCallback = Callable[[EmissionReport], None]


class ReportEmitter:
    """Send :class:`EmissionReport` messages, skipping unchanged totals."""

    def __init__(
        self,
        source: str,
        category: str,
        callback: EmissionCallback | None = None,
    ) -> None:
        self.source = source
        self.category = category
        self.callback = callback
        self._last_total: float | None = None

    def emit(self, total: float, detail: Mapping[str, Any] | None = None) -> EmissionReport | None:
        """Notify the callback if ``total`` differs from the last one sent."""

        if self.callback is None or total == self._last_total:
            return None
        report = EmissionReport(
            source=self.source,
            category=self.category,
            total_tco2e=total,
            detail=dict(detail or {}),
        )
        self._last_total = total
        logger.info("%s reported %s = %.6f tCO2e", self.source, self.category, total)
        self.callback(report)
        return report


__all__ = ["EmissionReport", "EmissionCallback", "ReportEmitter"]
