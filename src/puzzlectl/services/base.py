"""BaseService: shared foundation for puzzlectl services.

Every service receives the frozen :class:`PuzzleSettings` at construction
time. Domain code raises :class:`PuzzleError`; services convert it into a
failed :class:`ServiceResult` so callers never handle domain exceptions.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from puzzlectl.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from puzzlectl.config.settings import PuzzleSettings
    from puzzlectl.domain.errors import PuzzleError

logger = structlog.get_logger(__name__)


class BaseService:
    """Base for service-layer classes.

    Usage::

        class SolveService(BaseService):
            def dial(self, text: str) -> ServiceResult:
                try:
                    ...
                except PuzzleError as exc:
                    return self._failure("dial", exc)
    """

    def __init__(self, settings: PuzzleSettings) -> None:
        self._settings = settings

    @property
    def settings(self) -> PuzzleSettings:
        return self._settings

    def _failure(self, op: str, exc: PuzzleError) -> ServiceResult:
        """Build a failed result from a domain error, logging it once."""
        logger.warning(
            "puzzle.failed",
            op=op,
            code=exc.code,
            error=exc.message,
            **exc.to_detail(),
        )
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(code=exc.code, message=str(exc), detail=exc.to_detail()),
        )
