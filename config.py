"""
Configurações do BBsignal
Valores lidos do ambiente (.env)
"""
import os
from dotenv import load_dotenv

# Carregar variáveis de ambiente do arquivo .env
load_dotenv()


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes")


class Config:
    # Telegram
    BOT_TOKEN = os.getenv("BOT_TOKEN", "")
    CHAT_ID = os.getenv("CHAT_ID", "")

    # Página de resultados do Bac Bo
    BACBO_URL = os.getenv("BACBO_URL", "https://casinoscores.com/es/bac-bo/")
    HTTP_TIMEOUT_S = float(os.getenv("HTTP_TIMEOUT_S", "15"))

    # Janela de histórico e mínimo para detectar padrões
    HISTORY_WINDOW = 20
    MIN_HISTORY = 4

    # Cadência (segundos)
    TICK_INTERVAL_S = float(os.getenv("TICK_INTERVAL_S", "6"))
    COLD_INTERVAL_S = float(os.getenv("COLD_INTERVAL_S", "30"))

    # Mensagem "Bot iniciado" ao subir o runner
    SEND_STARTUP_MESSAGE = _env_bool("SEND_STARTUP_MESSAGE", "true")
    # Iniciar o runner junto com a API
    RUNNER_AUTOSTART = _env_bool("RUNNER_AUTOSTART", "true")

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # Servidor HTTP
    PORT = int(os.getenv("PORT", "3001"))
    DEV = _env_bool("DEV", "false")

CONFIG = Config()
