"""
Output Adapter: Cache em memória com TTL por entrada
Expiração lazy no get + limpeza periódica (CacheCleanupTask)
"""
import time
from dataclasses import dataclass
from threading import RLock
from typing import Any, Callable, Dict, Optional

from application.dtos.responses import CacheStats
from application.ports.output.cache_repository_port import ICacheRepository


def monotonic_ms() -> float:
    """Relógio monotônico em milissegundos"""
    return time.monotonic() * 1000


@dataclass(frozen=True)
class CacheEntry:
    """Entrada do cache: valor + instante absoluto de expiração (ms)"""
    key: str
    value: Any
    expires_at: float

    def is_valid(self, now: float) -> bool:
        return now < self.expires_at


class TTLCache(ICacheRepository):
    """
    Cache chave → valor com TTL por entrada

    - Entrada válida sse now < expires_at
    - get em entrada expirada remove a entrada e retorna None
    - Entradas expiradas nunca lidas ficam até o próximo cleanup()
    - Cada operação é atômica (RLock); entradas são imutáveis e trocadas
      inteiras, então nenhum leitor vê valor/expiração pela metade
    """

    def __init__(self, clock: Callable[[], float] = monotonic_ms):
        """
        Args:
            clock: Função que retorna o instante atual em milissegundos
        """
        self._clock = clock
        self._entries: Dict[str, CacheEntry] = {}
        self._lock = RLock()

    def get(self, key: str) -> Optional[Any]:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None

            if not entry.is_valid(self._clock()):
                del self._entries[key]
                return None

            return entry.value

    def set(self, key: str, value: Any, ttl_ms: float) -> None:
        if ttl_ms is None or ttl_ms < 0:
            raise ValueError(f"ttl_ms must be a non-negative duration, got {ttl_ms}")

        with self._lock:
            self._entries[key] = CacheEntry(
                key=key,
                value=value,
                expires_at=self._clock() + ttl_ms
            )

    def delete(self, key: str) -> None:
        with self._lock:
            self._entries.pop(key, None)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def get_stats(self) -> CacheStats:
        with self._lock:
            now = self._clock()
            valid = sum(1 for entry in self._entries.values() if entry.is_valid(now))
            total = len(self._entries)

        return CacheStats(
            total_entries=total,
            valid_entries=valid,
            expired_entries=total - valid
        )

    def cleanup(self) -> int:
        with self._lock:
            now = self._clock()
            expired = [key for key, entry in self._entries.items() if not entry.is_valid(now)]
            for key in expired:
                del self._entries[key]

        return len(expired)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
