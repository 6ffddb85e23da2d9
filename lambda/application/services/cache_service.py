"""
Serviço de cache para a camada de aplicação.
Expõe estatísticas e limpeza sem expor detalhes do adapter.
"""
from application.dtos.responses import CacheStats
from application.ports.output.cache_repository_port import ICacheRepository
from shared.config.logger_config import get_logger

logger = get_logger(child=True)


class CacheService:
    """Coordena operações administrativas do cache via porta de saída."""

    def __init__(self, cache_repository: ICacheRepository):
        self.cache_repository = cache_repository

    def get_stats(self) -> CacheStats:
        return self.cache_repository.get_stats()

    def clear(self) -> None:
        """Remove todas as entradas do cache."""
        stats = self.cache_repository.get_stats()
        self.cache_repository.clear()
        logger.info("Cache cleared", removed_entries=stats.total_entries)
