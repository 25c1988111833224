"""
Cliente HTTP para a página de resultados do Bac Bo
Busca o histórico da página e converte em Outcome, com erros explícitos
"""
from typing import List, Optional
import asyncio
import logging

import aiohttp

from config import CONFIG
from models.bacbo_models import Outcome
from services.errors import FetchFailure
from services.parser import parse_history_html

logger = logging.getLogger(__name__)

HEADERS = {
    "Accept": "text/html,application/xhtml+xml",
    "User-Agent": "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/124.0 Safari/537.36",
}


class BacBoClient:
    def __init__(self, url: str = None, limit: int = None, timeout_s: float = None):
        self.url = url or CONFIG.BACBO_URL
        self.limit = limit or CONFIG.HISTORY_WINDOW
        self.timeout = aiohttp.ClientTimeout(total=timeout_s or CONFIG.HTTP_TIMEOUT_S)
        self.session: Optional[aiohttp.ClientSession] = None

    async def _get_session(self) -> aiohttp.ClientSession:
        if self.session is None or self.session.closed:
            self.session = aiohttp.ClientSession(timeout=self.timeout, headers=HEADERS)
        return self.session

    async def fetch_html(self) -> str:
        session = await self._get_session()
        try:
            async with session.get(self.url) as resp:
                if resp.status != 200:
                    raise FetchFailure(f"status HTTP {resp.status}")
                return await resp.text()
        except asyncio.TimeoutError as e:
            # ServerTimeoutError também é ClientError
            raise FetchFailure("timeout ao buscar resultados") from e
        except aiohttp.ClientError as e:
            raise FetchFailure(f"erro de rede: {e}") from e
        except UnicodeDecodeError as e:
            raise FetchFailure(f"página com encoding inválido: {e.reason}") from e

    async def fetch_latest_outcomes(self) -> List[Outcome]:
        """Buscar os últimos resultados (mais antigo primeiro)"""
        html = await self.fetch_html()
        outcomes = parse_history_html(html, limit=self.limit)
        if not outcomes:
            raise FetchFailure("nenhum resultado reconhecido na página")
        logger.debug(f"[Feed] {len(outcomes)} resultados | último: {outcomes[-1].value}")
        return outcomes

    async def close(self):
        if self.session is not None:
            await self.session.close()
            self.session = None
