"""
BBsignal - Projeto Python
Ponto de entrada principal da aplicação
"""
import logging
import uvicorn

from config import CONFIG

if __name__ == "__main__":
    logging.basicConfig(
        level=getattr(logging, CONFIG.LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    print("🚀 Iniciando BBsignal Server...")
    print(f"📡 Servidor rodando em http://0.0.0.0:{CONFIG.PORT}")
    print(f"🎲 Fonte: {CONFIG.BACBO_URL}")
    print(f"🔌 Status: http://0.0.0.0:{CONFIG.PORT}/status")
    uvicorn.run("app:app", host="0.0.0.0", port=CONFIG.PORT, reload=CONFIG.DEV, log_config=None)
