"""SolveService: run a puzzle simulator over input text.

The service is the only place domain errors are caught. Each operation
returns a ServiceResult whose ``data["answer"]`` is the puzzle answer.
"""

from __future__ import annotations

import structlog

from puzzlectl.domain.dial import DialSimulator
from puzzlectl.domain.errors import PuzzleError
from puzzlectl.domain.freshness import check_freshness
from puzzlectl.domain.text import iter_lines
from puzzlectl.domain.types import Puzzle
from puzzlectl.services.base import BaseService
from puzzlectl.services.result import ServiceResult
from puzzlectl.services.telemetry import trace_span, traced

logger = structlog.get_logger(__name__)


class SolveService(BaseService):
    """Solve the dial and freshness puzzles."""

    @traced
    def dial(self, text: str) -> ServiceResult:
        cfg = self._settings.dial
        simulator = DialSimulator(start_position=cfg.start_position, size=cfg.size)
        try:
            with trace_span("simulate") as span:
                report = simulator.run(iter_lines(text))
                if span:
                    span.annotate("commands", report.commands)
        except PuzzleError as exc:
            return self._failure(Puzzle.DIAL.value, exc)

        warnings: list[str] = []
        if report.skipped:
            warnings.append(f"Ignored {report.skipped} unrecognized line(s)")
        logger.debug(
            "dial.solved",
            password=report.password,
            final_position=report.final_position,
            commands=report.commands,
            skipped=report.skipped,
        )
        return ServiceResult(
            ok=True,
            op=Puzzle.DIAL.value,
            data={
                "answer": report.password,
                "final_position": report.final_position,
                "start_position": cfg.start_position,
                "commands": report.commands,
                "skipped": report.skipped,
            },
            warnings=warnings,
        )

    @traced
    def fresh(self, text: str) -> ServiceResult:
        try:
            with trace_span("check") as span:
                report = check_freshness(text)
                if span:
                    span.annotate("ranges", report.total_ranges)
                    span.annotate("ids", report.total_ids)
        except PuzzleError as exc:
            return self._failure(Puzzle.FRESH.value, exc)

        logger.debug(
            "fresh.solved",
            fresh=report.fresh,
            total_ids=report.total_ids,
            total_ranges=report.total_ranges,
        )
        return ServiceResult(
            ok=True,
            op=Puzzle.FRESH.value,
            data={
                "answer": report.fresh,
                "total_ids": report.total_ids,
                "total_ranges": report.total_ranges,
            },
        )
