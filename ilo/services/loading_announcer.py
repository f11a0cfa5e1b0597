"""
Loading Announcer

Rotates a "please wait" phrase on a timer while an enhancement request is
outstanding.
"""

import asyncio
import logging
import random
from typing import Callable, Optional, Sequence

from ilo.content import LOADING_PHRASES

logger = logging.getLogger(__name__)


class LoadingAnnouncer:
    """
    Picks a random phrase immediately on start() and then every `period_seconds`
    until stop(). Consecutive repeats are allowed.

    start() must be called from inside a running event loop.
    """

    def __init__(
        self,
        phrases: Sequence[str] = LOADING_PHRASES,
        period_seconds: float = 3.0,
        on_phrase: Optional[Callable[[str], None]] = None,
        rng: Optional[random.Random] = None,
    ):
        if not phrases:
            raise ValueError("LoadingAnnouncer needs at least one phrase")
        self.phrases = list(phrases)
        self.period_seconds = period_seconds
        self.on_phrase = on_phrase
        self._rng = rng or random.Random()
        self._task: Optional[asyncio.Task] = None
        self.current_phrase: Optional[str] = None

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        if self.is_running:
            return
        loop = asyncio.get_running_loop()
        self._announce()
        self._task = loop.create_task(self._rotate())

    def stop(self) -> None:
        """Cancel the periodic task and clear the displayed phrase. Safe to call twice."""
        if self._task is not None:
            self._task.cancel()
            self._task = None
        self.current_phrase = None

    async def _rotate(self) -> None:
        while True:
            await asyncio.sleep(self.period_seconds)
            self._announce()

    def _announce(self) -> None:
        self.current_phrase = self._rng.choice(self.phrases)
        logger.debug(f"Loading phrase: {self.current_phrase}")
        if self.on_phrase is not None:
            self.on_phrase(self.current_phrase)
