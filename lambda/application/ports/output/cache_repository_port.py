"""
Output Port: Interface para Cache Repository
Define contrato do cache com TTL por entrada (implementação em memória)
"""
from typing import Any, Optional, Protocol

from application.dtos.responses import CacheStats


class ICacheRepository(Protocol):
    """Interface para repositório de cache com expiração por entrada"""

    def get(self, key: str) -> Optional[Any]:
        """
        Busca valor por chave

        Args:
            key: Chave do cache

        Returns:
            Valor armazenado ou None se ausente/expirado
        """
        ...

    def set(self, key: str, value: Any, ttl_ms: float) -> None:
        """
        Armazena (ou sobrescreve) valor com TTL

        Args:
            key: Chave do cache
            value: Valor a armazenar
            ttl_ms: Tempo de vida em milissegundos (>= 0)

        Raises:
            ValueError: Se ttl_ms for negativo
        """
        ...

    def delete(self, key: str) -> None:
        """Remove entrada (no-op se ausente)"""
        ...

    def clear(self) -> None:
        """Remove todas as entradas"""
        ...

    def get_stats(self) -> CacheStats:
        """Classifica entradas presentes em válidas/expiradas"""
        ...

    def cleanup(self) -> int:
        """
        Remove fisicamente entradas expiradas

        Returns:
            Quantidade de entradas removidas
        """
        ...
