"""
Aiohttp Session Manager - Sessão HTTP compartilhada pelos providers
Criado pelo ApplicationContainer e fechado no shutdown
"""
import asyncio
from typing import Optional

import aiohttp

from domain.constants import API
from shared.config.logger_config import get_logger

logger = get_logger(child=True)


class AiohttpSessionManager:
    """
    Mantém uma ClientSession por event loop

    Uma sessão aiohttp fica presa ao loop em que foi criada; se o loop
    corrente mudar (ex: asyncio.run em testes), a sessão antiga é fechada e
    outra é aberta. Pool de conexões e cache DNS são reaproveitados entre
    requisições no mesmo loop.

    Uso:
        manager = AiohttpSessionManager()
        session = await manager.get_session()
        ...
        await manager.close()
    """

    def __init__(
        self,
        timeout: Optional[aiohttp.ClientTimeout] = None,
        limit: int = API.HTTP_CONNECTION_LIMIT,
        limit_per_host: int = API.HTTP_CONNECTION_LIMIT_PER_HOST,
        ttl_dns_cache: int = API.DNS_CACHE_TTL
    ):
        """
        Args:
            timeout: Timeout padrão das requisições (default: 10s total, 3s conexão, 8s leitura)
            limit: Limite total de conexões no pool
            limit_per_host: Limite de conexões por host
            ttl_dns_cache: TTL do cache DNS em segundos
        """
        self.timeout = timeout or aiohttp.ClientTimeout(
            total=API.HTTP_TIMEOUT_TOTAL,
            connect=API.HTTP_TIMEOUT_CONNECT,
            sock_read=API.HTTP_TIMEOUT_READ
        )
        self.limit = limit
        self.limit_per_host = limit_per_host
        self.ttl_dns_cache = ttl_dns_cache

        self._session: Optional[aiohttp.ClientSession] = None
        self._loop: Optional[asyncio.AbstractEventLoop] = None

    @property
    def is_open(self) -> bool:
        return self._session is not None and not self._session.closed

    async def get_session(self) -> aiohttp.ClientSession:
        """Retorna a sessão do loop corrente, abrindo uma nova se necessário"""
        loop = asyncio.get_running_loop()

        if self.is_open and self._loop is loop:
            return self._session

        if self.is_open:
            logger.info("Event loop changed, reopening aiohttp session")
            await self.close()

        self._session = aiohttp.ClientSession(
            timeout=self.timeout,
            connector=aiohttp.TCPConnector(
                limit=self.limit,
                limit_per_host=self.limit_per_host,
                ttl_dns_cache=self.ttl_dns_cache
            )
        )
        self._loop = loop

        logger.info("Aiohttp session opened", limit=self.limit, limit_per_host=self.limit_per_host)
        return self._session

    async def close(self) -> None:
        """Fecha a sessão aberta (idempotente)"""
        session, self._session, self._loop = self._session, None, None
        if session is None or session.closed:
            return

        try:
            await session.close()
        except Exception as e:
            logger.warning("Error closing aiohttp session", error=str(e))
            return

        logger.info("Aiohttp session closed")
