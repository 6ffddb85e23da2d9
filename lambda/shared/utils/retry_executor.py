"""
Retry Executor - Exponential backoff para operações assíncronas
Construído sobre tenacity (AsyncRetrying) com política configurável por chamada
"""
import asyncio
import inspect
import socket
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Optional, TypeVar

import aiohttp
from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

from domain.constants import Retry
from shared.config.logger_config import get_logger

logger = get_logger(child=True)

T = TypeVar('T')

_TIMEOUT_ERRORS = (asyncio.TimeoutError, TimeoutError, aiohttp.ServerTimeoutError)
_CONNECTION_ERRORS = (
    aiohttp.ClientConnectorError,
    aiohttp.ServerDisconnectedError,
    ConnectionResetError,
    socket.gaierror,
)


def _status_of(error: BaseException) -> Optional[int]:
    """Extrai status HTTP de status_code, status ou response.status"""
    for attr in ('status_code', 'status'):
        value = getattr(error, attr, None)
        if isinstance(value, int):
            return value
    response = getattr(error, 'response', None)
    value = getattr(response, 'status', None)
    return value if isinstance(value, int) else None


def _code_of(error: BaseException) -> Optional[str]:
    for attr in ('error_code', 'code'):
        value = getattr(error, attr, None)
        if isinstance(value, str):
            return value
    return None


def is_retryable_error(error: BaseException) -> bool:
    """
    Classificador padrão: falhas transitórias

    Retry em:
    - HTTP status >= 500
    - Timeout
    - Falha de DNS/conexão (ENOTFOUND, ECONNRESET, ECONNABORTED, ETIMEDOUT)

    Sem retry em 4xx e erros não classificados.
    """
    status = _status_of(error)
    if status is not None and status >= Retry.SERVER_ERROR_STATUS:
        return True

    if _code_of(error) in Retry.RETRYABLE_ERROR_CODES:
        return True

    return isinstance(error, _TIMEOUT_ERRORS + _CONNECTION_ERRORS)


@dataclass(frozen=True)
class RetryOptions:
    """Política de retry (delays em milissegundos)"""
    max_attempts: int = Retry.MAX_ATTEMPTS
    base_delay: float = Retry.BASE_DELAY_MS
    max_delay: float = Retry.MAX_DELAY_MS
    should_retry: Callable[[BaseException], bool] = field(default=is_retryable_error)

    def __post_init__(self):
        if self.max_attempts < 1:
            raise ValueError(f"max_attempts must be >= 1, got {self.max_attempts}")
        if self.base_delay < 0 or self.max_delay < 0:
            raise ValueError("base_delay and max_delay must be non-negative")

    def delay_for(self, attempt: int) -> float:
        """Delay (ms) após a falha da tentativa `attempt` (1-based)"""
        return min(self.base_delay * (2 ** (attempt - 1)), self.max_delay)


class RetryExecutor:
    """
    Executa operação assíncrona sem argumentos com exponential backoff

    - Sucesso retorna imediatamente
    - Erro não classificado como transitório propaga na hora
    - Esgotadas as tentativas, propaga o erro da ÚLTIMA tentativa (objeto original)
    - Delay entre tentativas: min(base_delay * 2^(attempt-1), max_delay)

    Cada chamada a run() tem estado próprio; o executor pode ser compartilhado.
    """

    def __init__(
        self,
        default_options: Optional[RetryOptions] = None,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep
    ):
        """
        Args:
            default_options: Política usada quando run() não recebe options
            sleep: Primitiva de espera em segundos (injetável em testes)
        """
        self.default_options = default_options or RetryOptions()
        self._sleep = sleep

    async def run(
        self,
        operation: Callable[[], Awaitable[T]],
        options: Optional[RetryOptions] = None
    ) -> T:
        """
        Executa a operação com retry

        Args:
            operation: Callable sem argumentos que retorna awaitable
            options: Política para esta chamada (default do executor se None)

        Returns:
            Resultado da primeira tentativa bem-sucedida

        Raises:
            Exception: Erro original da tentativa final
        """
        opts = options or self.default_options

        retrying = AsyncRetrying(
            stop=stop_after_attempt(opts.max_attempts),
            wait=wait_exponential(multiplier=opts.base_delay / 1000, max=opts.max_delay / 1000),
            retry=retry_if_exception(self._fail_closed(opts.should_retry)),
            before_sleep=self._log_retry,
            sleep=self._sleep,
            reraise=True
        )

        async def attempt():
            # AsyncRetrying só aguarda funções async; lambdas que retornam coroutine são aguardadas aqui
            result = operation()
            if inspect.isawaitable(result):
                return await result
            return result

        return await retrying(attempt)

    @staticmethod
    def _fail_closed(should_retry: Callable[[BaseException], bool]) -> Callable[[BaseException], bool]:
        """Classificador que lança exceção é tratado como "não fazer retry" """
        def predicate(error: BaseException) -> bool:
            try:
                return bool(should_retry(error))
            except Exception as classifier_error:
                logger.warning(
                    "Retry classifier raised, not retrying",
                    error=str(error),
                    classifier_error=str(classifier_error)
                )
                return False
        return predicate

    @staticmethod
    def _log_retry(retry_state: RetryCallState) -> None:
        error = retry_state.outcome.exception() if retry_state.outcome else None
        delay_ms = retry_state.next_action.sleep * 1000 if retry_state.next_action else 0
        logger.warning(
            f"Attempt {retry_state.attempt_number} failed, retrying in {delay_ms:.0f}ms",
            attempt=retry_state.attempt_number,
            delay_ms=delay_ms,
            error=str(error),
            error_type=type(error).__name__
        )
