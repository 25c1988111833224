"""
Módulo de detecção de padrões do Bac Bo.

Representação: Outcome.AZUL, Outcome.VERMELHO, Outcome.TIE

`detect_pattern` recebe o histórico (mais antigo -> mais recente) e devolve
no máximo um padrão. Os detectores são avaliados em ordem fixa de
prioridade e o primeiro que casar vence, assim um surf (5 iguais) nunca é
reportado também como quebra.
"""

from typing import Callable, List, Optional, Sequence, Tuple

from config import CONFIG
from models.bacbo_models import Outcome, PatternKind, PatternMatch

COLORS = (Outcome.AZUL, Outcome.VERMELHO)


def last_n(historico: Sequence[Outcome], n: int) -> List[Outcome]:
    return list(historico[-n:]) if len(historico) >= n else list(historico)


def all_equal(seq: Sequence[Outcome]) -> bool:
    return len(seq) > 0 and all(x == seq[0] for x in seq)


def all_colors(seq: Sequence[Outcome]) -> bool:
    # TIE invalida a janela
    return all(x in COLORS for x in seq)


# --- Detectores ---
def detectar_surf(historico: Sequence[Outcome]) -> Optional[PatternMatch]:
    seq = last_n(historico, 5)
    if len(seq) == 5 and all_colors(seq) and all_equal(seq):
        return PatternMatch(PatternKind.SURF, seq[0], 5)
    return None


def detectar_quebra(historico: Sequence[Outcome]) -> Optional[PatternMatch]:
    seq = last_n(historico, 4)
    if len(seq) == 4 and all_colors(seq) and all_equal(seq):
        return PatternMatch(PatternKind.QUEBRA, seq[0], 4)
    return None


def detectar_alternancia(historico: Sequence[Outcome]) -> Optional[PatternMatch]:
    seq = last_n(historico, 4)
    if len(seq) == 4 and all_colors(seq):
        if seq[0] != seq[1] and seq[0] == seq[2] and seq[1] == seq[3]:
            return PatternMatch(PatternKind.ALTERNANCIA, seq[0], 4)
    return None


def detectar_v(historico: Sequence[Outcome]) -> Optional[PatternMatch]:
    seq = last_n(historico, 3)
    if len(seq) == 3 and all_colors(seq) and seq[0] == seq[2] and seq[0] != seq[1]:
        return PatternMatch(PatternKind.V, seq[0], 3)
    return None


def detectar_3x2(historico: Sequence[Outcome]) -> Optional[PatternMatch]:
    if len(historico) < 5:
        return None
    trinca = list(historico[-5:-2])
    dupla = list(historico[-2:])
    if all_colors(trinca + dupla) and all_equal(trinca) and all_equal(dupla):
        return PatternMatch(PatternKind.TRES_X_DOIS, trinca[0], 5)
    return None


def detectar_2x1(historico: Sequence[Outcome]) -> Optional[PatternMatch]:
    if len(historico) < 3:
        return None
    ultimo = historico[-1]
    if ultimo not in COLORS:
        return None
    if all(x == ultimo for x in historico[-3:-1]):
        return PatternMatch(PatternKind.DOIS_X_UM, ultimo, 3)
    return None


# Lista de detectores em ordem de prioridade (maior prioridade primeiro)
PADROES: Tuple[Callable[[Sequence[Outcome]], Optional[PatternMatch]], ...] = (
    detectar_surf,
    detectar_quebra,
    detectar_alternancia,
    detectar_v,
    detectar_3x2,
    detectar_2x1,
)


def detect_pattern(historico: Sequence[Outcome]) -> Optional[PatternMatch]:
    """Identifica um padrão e retorna tipo, cor de entrada e tamanho"""
    if len(historico) < CONFIG.MIN_HISTORY:
        return None
    for fn in PADROES:
        match = fn(historico)
        if match is not None:
            return match
    return None
