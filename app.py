"""
BBsignal - Servidor principal
API FastAPI de status; o runner do bot sobe junto com a aplicação
"""
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
import logging
import time

from config import CONFIG
from models.status_models import HistoryOut, PendingSignalOut, ScoreboardOut, StatusOut
from services.bacbo_client import BacBoClient
from services.parser import current_streak, summarize_outcomes
from services.runner import BotRunner
from services.session import SignalSession
from services.telegram import TelegramNotifier

logger = logging.getLogger(__name__)

app = FastAPI(title="BBsignal API", version="1.0.0")

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET"],
    allow_headers=["*"],
)

app.state.runner = None


def build_runner() -> BotRunner:
    notifier = TelegramNotifier()
    session = SignalSession(notifier)
    return BotRunner(session, BacBoClient())


def get_runner() -> BotRunner:
    runner = app.state.runner
    if runner is None:
        raise HTTPException(status_code=503, detail="runner não iniciado")
    return runner


@app.on_event("startup")
async def startup_runner():
    """Iniciar o runner do bot na inicialização do app"""
    if not CONFIG.RUNNER_AUTOSTART:
        logger.info("[startup] RUNNER_AUTOSTART desativado")
        return
    if app.state.runner is None:
        app.state.runner = build_runner()
    await app.state.runner.start()
    logger.info(f"[startup] Runner iniciado para {CONFIG.BACBO_URL}")


@app.on_event("shutdown")
async def shutdown_runner():
    runner = app.state.runner
    if runner is not None:
        await runner.stop()
        logger.info("[shutdown] Runner finalizado")


@app.get("/")
async def api_info():
    return {
        "name": "BBsignal API",
        "version": "1.0.0",
        "endpoints": ["/status", "/api/history", "/api/scoreboard", "/api/signal"],
    }


@app.get("/status", response_model=StatusOut)
async def status():
    """Estado do runner e da última busca"""
    runner = get_runner()
    session = runner.session
    return {
        "ok": runner.last_fetch_error is None,
        "running": runner.running,
        "pending": not session.manager.is_idle,
        "telegramConfigured": bool(getattr(session.notifier, "configured", False)),
        "lastFetchError": runner.last_fetch_error,
        "lastFetchTs": runner.last_fetch_ts,
        "lastUpdateTs": session.last_update_ts,
        "skippedTicks": runner.skipped_ticks,
        "timestamp": int(time.time() * 1000),
    }


@app.get("/api/history", response_model=HistoryOut)
async def api_history(limit: int = 20):
    """Últimos resultados (mais antigo primeiro)"""
    history = get_runner().session.history
    results = history[-limit:] if limit > 0 else []
    return {
        "ok": True,
        "count": len(results),
        "results": [o.value for o in results],
        "summary": summarize_outcomes(history),
        "streak": current_streak(history),
    }


@app.get("/api/scoreboard", response_model=ScoreboardOut)
async def api_scoreboard():
    return get_runner().session.scoreboard.snapshot()


@app.get("/api/signal", response_model=PendingSignalOut)
async def api_signal():
    pending = get_runner().session.manager.pending
    return {
        "ok": True,
        "pending": pending is not None,
        "signal": pending.to_dict() if pending else None,
    }
