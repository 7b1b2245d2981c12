"""Run the expiration sweep: purge pastes older than the configured threshold."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pastebox.application.dtos.paste import PurgeResult
    from pastebox.application.use_cases.pastes.paste_operations import PasteService

logger = logging.getLogger(__name__)


class ExpirationSweeper:
    """Stateless driver for PasteService.purge_expired.

    A missing threshold means expiry is switched off; the sweep logs that
    and does nothing. There is no retry: a record that fails is reported
    and left for the next run. commit, when given, is handed to the
    service so each removal is committed on its own.
    """

    def __init__(
        self,
        paste_service: "PasteService",
        expiration_secs: int | None,
        *,
        commit: Callable[[], Awaitable[None]] | None = None,
    ) -> None:
        self._paste_service = paste_service
        self._expiration_secs = expiration_secs
        self._commit = commit

    async def run(self) -> "PurgeResult | None":
        """Run one sweep. Returns None when no threshold is configured."""
        if self._expiration_secs is None:
            logger.warning("no expiration time configured, doing nothing")
            return None

        result = await self._paste_service.purge_expired(
            self._expiration_secs, commit=self._commit
        )
        logger.info(
            "expiration sweep: deleted %d of %d expired pastes (%d examined)",
            result.deleted,
            result.expired,
            result.examined,
        )
        if result.failed:
            logger.error(
                "expiration sweep: %d pastes could not be removed: %s",
                result.total_failed,
                ", ".join(result.failed),
            )
        return result
