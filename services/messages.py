"""
Textos enviados ao Telegram (Markdown)
"""
from typing import Dict

from models.bacbo_models import Outcome, Resolution, ResolutionKind, Signal

EMOJI = {
    Outcome.AZUL: "🔵",
    Outcome.VERMELHO: "🔴",
    Outcome.TIE: "🟡",
}


def emoji(outcome: Outcome) -> str:
    return EMOJI.get(outcome, "❔")


def startup_message() -> str:
    return "🟡 Bot iniciado!\n⏳ Analisando padrões do *Bac Bo* ao vivo..."


def entry_message(signal: Signal) -> str:
    pattern = signal.pattern.value if signal.pattern else "-"
    return (
        "🎲 Novo sinal Bac Bo ao vivo:\n"
        f"Entrada: {emoji(signal.entry_color)} {signal.entry_color.value}\n"
        f"Padrão: {pattern}\n"
        "Protege o TIE🟡\n"
        "Fazer apenas 1 gale🎯\n"
        f"Confiança: {signal.confidence}%"
    )


def resolution_message(resolution: Resolution) -> str:
    entry = emoji(resolution.signal.entry_color)
    if resolution.kind is ResolutionKind.DIRECT_WIN:
        return f"QUEM NÃO ARRISCA, NÃO PETISCA DENTRO({entry})✅"
    if resolution.kind is ResolutionKind.RECOVERED_WIN:
        return f"QUEM NÃO ARRISCA, NÃO PETISCA DENTRO({entry} ➡️ {emoji(resolution.outcome)})✅"
    return "ESSA NÃO FOI NOSSA😔"


def scoreboard_message(placar: Dict[str, int]) -> str:
    return (
        "PLACAR ACTUAL🎯\n"
        f"SG: {placar['SG']}🔥\n"
        f"IG: {placar['IG']}✅\n"
        f"LS: {placar['LS']}❌"
    )


def cold_message() -> str:
    return "PREVENDO O GRÁFICO FICA FRIO 🥶"
