"""
Ciclo de vida dos sinais (Idle <-> Pending) e placar
"""
from dataclasses import dataclass
from typing import Dict, Optional
import logging

from models.bacbo_models import Outcome, PatternMatch, Resolution, ResolutionKind, Signal
from services.confidence import calc_confidence
from services.errors import InvariantViolation

logger = logging.getLogger(__name__)


@dataclass
class Scoreboard:
    """Placar: SG (acerto direto), IG (acerto no gale), LS (perda)"""
    direct_wins: int = 0
    recovered_wins: int = 0
    losses: int = 0

    @property
    def total(self) -> int:
        return self.direct_wins + self.recovered_wins + self.losses

    def record(self, kind: ResolutionKind) -> None:
        if kind is ResolutionKind.DIRECT_WIN:
            self.direct_wins += 1
        elif kind is ResolutionKind.RECOVERED_WIN:
            self.recovered_wins += 1
        else:
            self.losses += 1

    def snapshot(self) -> Dict[str, int]:
        return {
            "SG": self.direct_wins,
            "IG": self.recovered_wins,
            "LS": self.losses,
            "total": self.total,
        }


class SignalManager:
    def __init__(self, scoreboard: Optional[Scoreboard] = None):
        self.scoreboard = scoreboard or Scoreboard()
        self.pending: Optional[Signal] = None

    @property
    def is_idle(self) -> bool:
        return self.pending is None

    def open_signal(self, match: PatternMatch) -> Signal:
        """Abre um sinal a partir do padrão detectado (Idle -> Pending)"""
        if self.pending is not None:
            raise InvariantViolation(
                f"sinal pendente em {self.pending.entry_color.value}, não é possível abrir outro"
            )
        signal = Signal(
            entry_color=match.trigger_color,
            confidence=calc_confidence(match.kind),
            pattern=match.kind,
        )
        self.pending = signal
        logger.info(f"[Sinal] Novo sinal {match.kind.value} | Entrada: {signal.entry_color.value} | Confiança: {signal.confidence}%")
        return signal

    def resolve(self, newest: Outcome) -> Optional[Resolution]:
        """Valida o sinal pendente contra o resultado mais recente.

        Sem sinal pendente não faz nada e devolve None. Com sinal, consome
        exatamente um resultado e volta para Idle:
        mesma cor -> acerto direto, outra cor -> acerto no gale, TIE -> perda.
        """
        signal = self.pending
        if signal is None:
            return None

        if newest == signal.entry_color:
            kind = ResolutionKind.DIRECT_WIN
        elif newest.is_color:
            # gale: qualquer cor diferente da entrada conta como recuperação
            kind = ResolutionKind.RECOVERED_WIN
        else:
            kind = ResolutionKind.LOSS

        self.scoreboard.record(kind)
        self.pending = None
        logger.info(f"[Sinal] Resolvido {kind.value} | Entrada: {signal.entry_color.value} | Saiu: {newest.value}")
        return Resolution(kind=kind, signal=signal, outcome=newest)
