"""
Aiohttp Session Manager - Singleton para gerenciar sessão HTTP global
Uma única ClientSession compartilhada pelos clientes de saída (ViaCEP, WeatherAPI, weather-service)
"""
import asyncio
from typing import Optional
import aiohttp
from aws_lambda_powertools import Logger

logger = Logger(child=True)


class AiohttpSessionManager:
    """
    Gerenciador singleton de sessão aiohttp

    - Reutiliza a sessão entre requisições no mesmo event loop
    - Recria a sessão quando o event loop muda
    - Timeouts e pool de conexões configurados uma única vez

    Uso:
        manager = AiohttpSessionManager.get_instance()
        session = await manager.get_session()
        async with session.get(url) as response:
            body = await response.read()
    """

    _instance: Optional['AiohttpSessionManager'] = None

    def __init__(
        self,
        total_timeout: float = 60,
        connect_timeout: float = 5,
        sock_read_timeout: float = 30,
        limit: int = 100,
        limit_per_host: int = 30,
        ttl_dns_cache: int = 300
    ):
        """
        Args:
            total_timeout: Timeout total em segundos
            connect_timeout: Timeout de conexão em segundos
            sock_read_timeout: Timeout de leitura em segundos
            limit: Limite total de conexões no pool
            limit_per_host: Limite de conexões por host
            ttl_dns_cache: TTL do cache DNS em segundos
        """
        self.total_timeout = total_timeout
        self.connect_timeout = connect_timeout
        self.sock_read_timeout = sock_read_timeout
        self.limit = limit
        self.limit_per_host = limit_per_host
        self.ttl_dns_cache = ttl_dns_cache

        self._session: Optional[aiohttp.ClientSession] = None
        self._session_loop_id: Optional[int] = None

    @classmethod
    def get_instance(cls, **kwargs) -> 'AiohttpSessionManager':
        """
        Retorna instância singleton do gerenciador
        (kwargs usados apenas na primeira criação)
        """
        if cls._instance is None:
            cls._instance = cls(**kwargs)
            logger.info(
                "AiohttpSessionManager singleton created",
                total_timeout=cls._instance.total_timeout,
                limit=cls._instance.limit
            )

        return cls._instance

    async def get_session(self) -> aiohttp.ClientSession:
        """
        Retorna sessão aiohttp (cria ou reutiliza)

        Returns:
            Sessão aiohttp vinculada ao event loop atual
        """
        current_loop_id = id(asyncio.get_running_loop())

        if (self._session is not None and
                not self._session.closed and
                self._session_loop_id == current_loop_id):
            return self._session

        if self._session is not None and not self._session.closed:
            logger.info(
                "Event loop changed - recreating session",
                old_loop_id=self._session_loop_id,
                new_loop_id=current_loop_id
            )
            await self._close_session()

        timeout = aiohttp.ClientTimeout(
            total=self.total_timeout,
            connect=self.connect_timeout,
            sock_read=self.sock_read_timeout
        )
        connector = aiohttp.TCPConnector(
            limit=self.limit,
            limit_per_host=self.limit_per_host,
            ttl_dns_cache=self.ttl_dns_cache
        )

        self._session = aiohttp.ClientSession(timeout=timeout, connector=connector)
        self._session_loop_id = current_loop_id

        logger.debug("Aiohttp session created", loop_id=current_loop_id)

        return self._session

    async def _close_session(self) -> None:
        if self._session is not None and not self._session.closed:
            try:
                await self._session.close()
            except aiohttp.ClientError as e:
                logger.warning(
                    "Error closing aiohttp session",
                    error=str(e),
                    loop_id=self._session_loop_id
                )
            finally:
                self._session = None
                self._session_loop_id = None

    async def cleanup(self) -> None:
        """Fecha sessão e libera recursos (shutdown do processo)"""
        await self._close_session()
        logger.info("AiohttpSessionManager cleanup completed")

    @classmethod
    def reset_instance(cls) -> None:
        """Reset singleton instance (útil para testes)"""
        cls._instance = None


def get_aiohttp_session_manager(**kwargs) -> AiohttpSessionManager:
    """
    Factory function para obter instância singleton do gerenciador

    Returns:
        Instância singleton do AiohttpSessionManager
    """
    return AiohttpSessionManager.get_instance(**kwargs)
