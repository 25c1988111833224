"""
Confiança por padrão (tabela fixa, sem olhar o histórico)
"""
from typing import Union

from models.bacbo_models import PatternKind

DEFAULT_CONFIDENCE = 75

CONFIDENCE_TABLE = {
    PatternKind.SURF: 95,
    PatternKind.ALTERNANCIA: 85,
    PatternKind.QUEBRA: 80,
    PatternKind.DOIS_X_DOIS: 78,
    PatternKind.TRES_X_DOIS: 82,
    PatternKind.TRES_X_UM: 80,
    PatternKind.DOIS_X_UM: 75,
    PatternKind.V: 88,
    PatternKind.TORRES: 90,
    PatternKind.PERNINHAS: 83,
    PatternKind.PARZINHO: 84,
    PatternKind.RAMPA_CURTA: 80,
    PatternKind.RAMPA_ALONGADA: 92,
    PatternKind.RAMPA_INVERTIDA: 92,
}


def calc_confidence(kind: Union[PatternKind, str]) -> int:
    """Confiança (%) do padrão; desconhecidos caem no default"""
    try:
        kind = PatternKind(kind)
    except ValueError:
        return DEFAULT_CONFIDENCE
    return CONFIDENCE_TABLE.get(kind, DEFAULT_CONFIDENCE)
