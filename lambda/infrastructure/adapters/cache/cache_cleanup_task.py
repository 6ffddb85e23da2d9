"""
Cache Cleanup Task - Limpeza periódica de entradas expiradas
Task asyncio independente das requisições, cancelável no shutdown
"""
import asyncio
from typing import Optional

from application.ports.output.cache_repository_port import ICacheRepository
from domain.constants import Cache
from shared.config.logger_config import get_logger

logger = get_logger(child=True)


class CacheCleanupTask:
    """
    Executa cache.cleanup() a cada interval_seconds

    Uso:
        task = CacheCleanupTask(cache, interval_seconds=300)
        task.start()       # dentro de um event loop em execução
        ...
        await task.stop()  # cancela e aguarda a task
    """

    def __init__(
        self,
        cache: ICacheRepository,
        interval_seconds: float = Cache.CLEANUP_INTERVAL_SECONDS
    ):
        if interval_seconds <= 0:
            raise ValueError(f"interval_seconds must be positive, got {interval_seconds}")

        self.cache = cache
        self.interval_seconds = interval_seconds
        self._task: Optional[asyncio.Task] = None

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        """Agenda a task no event loop corrente (idempotente)"""
        if self.is_running:
            return

        loop = asyncio.get_running_loop()
        self._task = loop.create_task(self._run(), name="cache-cleanup")
        logger.info("Cache cleanup task started", interval_seconds=self.interval_seconds)

    async def stop(self) -> None:
        """Cancela a task e aguarda o término (idempotente)"""
        task, self._task = self._task, None
        if task is None or task.done():
            return

        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass
        logger.info("Cache cleanup task stopped")

    def run_once(self) -> int:
        """Executa uma passada de limpeza"""
        removed = self.cache.cleanup()
        if removed:
            logger.info("Expired cache entries removed", removed=removed)
        return removed

    async def _run(self) -> None:
        while True:
            await asyncio.sleep(self.interval_seconds)
            try:
                self.run_once()
            except Exception as e:
                logger.error("Cache cleanup failed", error=str(e), exc_info=True)
