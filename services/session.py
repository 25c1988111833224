"""
Sessão do bot: histórico, sinal pendente e placar

Recebe cada snapshot do histórico, decide se houve rodada nova e sequencia
validação do sinal pendente, detecção de padrão e abertura de sinal.
"""
from typing import List, Optional, Sequence
import logging
import time

from config import CONFIG
from models.bacbo_models import Outcome, Resolution
from services import messages
from services.pattern_signals import detect_pattern
from services.signal_manager import Scoreboard, SignalManager
from services.telegram import NotifyResult

logger = logging.getLogger(__name__)


class SignalSession:
    def __init__(self, notifier, manager: SignalManager = None, window: int = None):
        self.notifier = notifier
        self.manager = manager or SignalManager()
        self.window = window or CONFIG.HISTORY_WINDOW
        self.history: List[Outcome] = []
        self.last_cold_message_id: Optional[int] = None
        self.last_update_ts: Optional[int] = None

    @property
    def scoreboard(self) -> Scoreboard:
        return self.manager.scoreboard

    def history_changed(self, new_history: Sequence[Outcome]) -> bool:
        """Houve rodada nova? (compara o resultado mais recente)"""
        if not new_history:
            return False
        if not self.history:
            return True
        return new_history[-1] != self.history[-1]

    async def notify(self, text: str) -> NotifyResult:
        result = await self.notifier.send_message(text)
        if not result.ok:
            logger.warning(f"[Sinal] Notificação não enviada: {result.error}")
        return result

    async def on_tick(self, new_history: Sequence[Outcome]) -> bool:
        """Processa um snapshot do histórico. Retorna True se havia rodada nova"""
        new_history = list(new_history)[-self.window:]
        if not self.history_changed(new_history):
            return False

        self.history = new_history
        self.last_update_ts = int(time.time() * 1000)

        if not self.manager.is_idle:
            resolution = self.manager.resolve(self.history[-1])
            await self._announce_resolution(resolution)

        match = detect_pattern(self.history)
        if match is not None and self.manager.is_idle:
            signal = self.manager.open_signal(match)
            await self.notify(messages.entry_message(signal))
        return True

    async def _announce_resolution(self, resolution: Resolution):
        await self.notify(messages.resolution_message(resolution))
        await self.notify(messages.scoreboard_message(self.scoreboard.snapshot()))

    async def on_idle_tick(self) -> bool:
        """Mensagem fria, apenas quando não há sinal pendente"""
        if not self.manager.is_idle:
            return False
        result = await self.notify(messages.cold_message())
        if result.ok:
            self.last_cold_message_id = result.message_id
        return True
