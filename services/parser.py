"""
Parser da página de resultados do Bac Bo
Converte os itens do histórico em Outcome
"""
from typing import Dict, List, Optional, Sequence

from bs4 import BeautifulSoup

from models.bacbo_models import Outcome

RESULT_SELECTOR = ".last-result-item"

# Ordem importa: azul, depois vermelho, depois empate
KEYWORDS = (
    (Outcome.AZUL, ("AZUL", "BLUE")),
    (Outcome.VERMELHO, ("ROJO", "VERMELHO", "RED")),
    (Outcome.TIE, ("TIE", "EMPATE")),
)


def parse_outcome(text: Optional[str]) -> Optional[Outcome]:
    """Mapeia o texto de um item (qualquer idioma da página) para Outcome"""
    if not text:
        return None
    txt = text.strip().upper()
    for outcome, words in KEYWORDS:
        if any(w in txt for w in words):
            return outcome
    return None


def parse_history_html(html: str, limit: int = 20) -> List[Outcome]:
    """
    Extrai o histórico da página.
    A página lista do mais recente para o mais antigo; o retorno vem em
    ordem cronológica (mais antigo primeiro)
    """
    soup = BeautifulSoup(html, "html.parser")
    outcomes = []
    for el in soup.select(RESULT_SELECTOR):
        outcome = parse_outcome(el.get_text(" ", strip=True))
        if outcome is not None:
            outcomes.append(outcome)
    return list(reversed(outcomes[:limit]))


def summarize_outcomes(history: Sequence[Outcome]) -> Dict[str, int]:
    """Resumir contagem por resultado"""
    stats = {o.value: 0 for o in Outcome}
    stats["total"] = 0
    for o in history:
        stats[o.value] += 1
        stats["total"] += 1
    return stats


def current_streak(history: Sequence[Outcome]) -> Dict:
    """Sequência atual (a partir do mais recente)"""
    if not history:
        return {"outcome": None, "length": 0}
    last = history[-1]
    length = 0
    for o in reversed(history):
        if o != last:
            break
        length += 1
    return {"outcome": last.value, "length": length}
