"""
Envio de mensagens para o Telegram (Bot API sendMessage)
"""
from dataclasses import dataclass
from typing import Optional
import asyncio
import logging

import aiohttp

from config import CONFIG
from services.errors import NotifyFailure

logger = logging.getLogger(__name__)

TELEGRAM_API = "https://api.telegram.org"


@dataclass(frozen=True)
class NotifyResult:
    ok: bool
    message_id: Optional[int] = None
    error: Optional[str] = None


class TelegramNotifier:
    def __init__(self, token: str = None, chat_id: str = None, timeout_s: float = None,
                 api_base: str = TELEGRAM_API):
        self.token = token if token is not None else CONFIG.BOT_TOKEN
        self.chat_id = chat_id if chat_id is not None else CONFIG.CHAT_ID
        self.timeout = aiohttp.ClientTimeout(total=timeout_s or CONFIG.HTTP_TIMEOUT_S)
        self.api_url = f"{api_base}/bot{self.token}/sendMessage" if self.token else None

    @property
    def configured(self) -> bool:
        return bool(self.token and self.chat_id)

    async def _post(self, text: str) -> int:
        payload = {
            "chat_id": self.chat_id,
            "text": text,
            "parse_mode": "Markdown",
        }
        try:
            async with aiohttp.ClientSession(timeout=self.timeout) as session:
                async with session.post(self.api_url, json=payload) as resp:
                    if resp.status != 200:
                        body = await resp.text()
                        raise NotifyFailure(f"Telegram API {resp.status}: {body[:200]}")
                    data = await resp.json(content_type=None)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise NotifyFailure(str(e) or e.__class__.__name__) from e
        except ValueError as e:
            # JSONDecodeError e UnicodeDecodeError
            raise NotifyFailure(f"resposta inválida do Telegram: {e}") from e
        if not isinstance(data, dict):
            raise NotifyFailure(f"resposta inesperada do Telegram: {str(data)[:200]}")
        result = data.get("result")
        return result.get("message_id") if isinstance(result, dict) else None

    async def send_message(self, text: str) -> NotifyResult:
        """Envia texto ao chat configurado; falhas viram NotifyResult(ok=False)"""
        if not self.configured:
            logger.warning("[Telegram] BOT_TOKEN/CHAT_ID não configurados. Mensagem ignorada.")
            return NotifyResult(ok=False, error="not configured")
        try:
            message_id = await self._post(text)
        except NotifyFailure as e:
            logger.error(f"[Telegram] Erro ao enviar mensagem: {e}")
            return NotifyResult(ok=False, error=str(e))
        return NotifyResult(ok=True, message_id=message_id)
