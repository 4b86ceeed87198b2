import asyncio
from typing import Optional

from ..logger import get_logger

logger = get_logger(__name__)

class RateLimitTicker:
    """Periodically refreshes the rate limit countdown and expires stale feedback."""

    def __init__(self, manager, interval: float = 1.0):
        self.manager = manager
        self.interval = interval
        self.running = False
        self._task: Optional[asyncio.Task] = None

    async def start(self):
        """Start the tick loop"""
        if self.running:
            return
        self.running = True
        self._task = asyncio.create_task(self._run())
        logger.info(f"Rate limit ticker started (every {self.interval}s)")

    async def _run(self):
        """Main tick loop; a failing tick is logged and the loop carries on"""
        while self.running:
            try:
                self.manager.tick()
            except Exception as e:
                logger.error(f"Error refreshing rate limit state: {e}")
            await asyncio.sleep(self.interval)

    async def stop(self):
        """Stop the tick loop and wait for the task to finish"""
        self.running = False
        task, self._task = self._task, None
        if task is None:
            return
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            current = asyncio.current_task()
            if current is not None and current.cancelling():
                raise
        logger.info("Rate limit ticker stopped")

    async def __aenter__(self):
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.stop()
