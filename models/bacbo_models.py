"""
Tipos do domínio Bac Bo: resultados, padrões e sinais
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional
import time


class Outcome(str, Enum):
    AZUL = "AZUL"
    VERMELHO = "VERMELHO"
    TIE = "TIE"

    @property
    def is_color(self) -> bool:
        return self is not Outcome.TIE


class PatternKind(str, Enum):
    SURF = "surf"
    QUEBRA = "quebra"
    ALTERNANCIA = "alternancia"
    V = "v"
    TRES_X_DOIS = "3x2"
    DOIS_X_UM = "2x1"
    # Reservados: só existem na tabela de confiança
    DOIS_X_DOIS = "2x2"
    TRES_X_UM = "3x1"
    TORRES = "torres"
    PERNINHAS = "perninhas"
    PARZINHO = "parzinho"
    RAMPA_CURTA = "rampaCurta"
    RAMPA_ALONGADA = "rampaAlongada"
    RAMPA_INVERTIDA = "rampaInvertida"


@dataclass(frozen=True)
class PatternMatch:
    kind: PatternKind
    trigger_color: Outcome
    length: int


@dataclass(frozen=True)
class Signal:
    entry_color: Outcome
    confidence: int
    pattern: Optional[PatternKind] = None
    created_at: int = field(default_factory=lambda: int(time.time() * 1000))

    def to_dict(self) -> dict:
        return {
            "entryColor": self.entry_color.value,
            "confidence": self.confidence,
            "pattern": self.pattern.value if self.pattern else None,
            "createdAt": self.created_at,
        }


class ResolutionKind(str, Enum):
    DIRECT_WIN = "direct_win"
    RECOVERED_WIN = "recovered_win"
    LOSS = "loss"


@dataclass(frozen=True)
class Resolution:
    kind: ResolutionKind
    signal: Signal
    outcome: Outcome
