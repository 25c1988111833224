"""
Runner do bot: dois timers independentes (tick principal e mensagem fria)
com execução serializada
"""
import asyncio
import logging
import time
from typing import Optional

from config import CONFIG
from services import messages
from services.errors import FetchFailure
from services.session import SignalSession

logger = logging.getLogger(__name__)


class BotRunner:
    def __init__(self, session: SignalSession, feed,
                 tick_interval: float = None,
                 cold_interval: float = None,
                 send_startup: bool = None,
                 stop_grace: float = 5.0):
        self.session = session
        self.feed = feed
        self.tick_interval = tick_interval or CONFIG.TICK_INTERVAL_S
        self.cold_interval = cold_interval or CONFIG.COLD_INTERVAL_S
        self.send_startup = CONFIG.SEND_STARTUP_MESSAGE if send_startup is None else send_startup
        self.stop_grace = stop_grace

        self.running = False
        self.tasks = []
        self._inflight = set()
        self._lock = asyncio.Lock()

        # Estado para /status
        self.last_fetch_error: Optional[str] = None
        self.last_fetch_ts: Optional[int] = None
        self.skipped_ticks = 0

    async def tick(self) -> bool:
        """Tick principal: buscar histórico e processar. Ignorado se outro estiver em andamento"""
        if self._lock.locked():
            self.skipped_ticks += 1
            logger.debug("[Runner] Tick anterior ainda em andamento, pulando")
            return False
        async with self._lock:
            try:
                history = await self.feed.fetch_latest_outcomes()
            except FetchFailure as e:
                self.last_fetch_error = str(e)
                logger.warning(f"[Runner] Falha ao buscar histórico: {e}")
                return False
            self.last_fetch_error = None
            self.last_fetch_ts = int(time.time() * 1000)
            return await self.session.on_tick(history)

    async def idle_tick(self) -> bool:
        async with self._lock:
            return await self.session.on_idle_tick()

    async def _run(self, fn, name: str):
        try:
            await fn()
        except asyncio.CancelledError:
            raise
        except Exception:
            logger.exception(f"[Runner] Erro no {name}")

    async def _every(self, interval: float, fn, name: str):
        while self.running:
            await asyncio.sleep(interval)
            if not self.running:
                break
            task = asyncio.create_task(self._run(fn, name))
            self._inflight.add(task)
            task.add_done_callback(self._inflight.discard)

    async def start(self):
        """Iniciar timers"""
        if self.running:
            return
        self.running = True
        if self.send_startup:
            await self.session.notify(messages.startup_message())
        self.tasks = [
            asyncio.create_task(self._every(self.tick_interval, self.tick, "tick")),
            asyncio.create_task(self._every(self.cold_interval, self.idle_tick, "idle_tick")),
        ]
        logger.info(f"[Runner] Iniciado | tick={self.tick_interval}s | frio={self.cold_interval}s")

    async def stop(self):
        """Parar timers e fechar o cliente do feed"""
        self.running = False
        # ticks em andamento terminam (anúncios incluídos) antes do cancelamento
        if self._inflight:
            await asyncio.wait(list(self._inflight), timeout=self.stop_grace)
        pending = self.tasks + list(self._inflight)
        for task in pending:
            task.cancel()
        for task in pending:
            try:
                await task
            except asyncio.CancelledError:
                pass
        self.tasks = []
        close = getattr(self.feed, "close", None)
        if close is not None:
            await close()
        logger.info("[Runner] Finalizado")
