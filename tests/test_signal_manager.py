import pytest

from models.bacbo_models import Outcome, PatternKind, PatternMatch, ResolutionKind
from services.errors import InvariantViolation
from services.signal_manager import Scoreboard, SignalManager

A = Outcome.AZUL
V = Outcome.VERMELHO
T = Outcome.TIE


def test_acerto_direto():
    manager = SignalManager()
    signal = manager.open_signal(PatternMatch(PatternKind.V, A, 3))
    assert signal.entry_color == A
    assert signal.confidence == 88
    assert not manager.is_idle

    res = manager.resolve(A)
    assert res.kind == ResolutionKind.DIRECT_WIN
    assert manager.scoreboard.snapshot() == {"SG": 1, "IG": 0, "LS": 0, "total": 1}
    assert manager.is_idle


def test_acerto_no_gale():
    manager = SignalManager()
    manager.open_signal(PatternMatch(PatternKind.SURF, A, 5))
    res = manager.resolve(V)
    assert res.kind == ResolutionKind.RECOVERED_WIN
    assert res.outcome == V
    assert manager.scoreboard.recovered_wins == 1
    assert manager.scoreboard.direct_wins == 0
    assert manager.scoreboard.losses == 0
    assert manager.is_idle


def test_perda_no_tie():
    manager = SignalManager()
    manager.open_signal(PatternMatch(PatternKind.SURF, A, 5))
    res = manager.resolve(T)
    assert res.kind == ResolutionKind.LOSS
    assert manager.scoreboard.losses == 1
    assert manager.is_idle


def test_resolver_sem_pendente_nao_faz_nada():
    manager = SignalManager()
    assert manager.resolve(A) is None
    manager.open_signal(PatternMatch(PatternKind.QUEBRA, V, 4))
    assert manager.resolve(V) is not None
    # segunda chamada com o mesmo resultado
    assert manager.resolve(V) is None
    assert manager.scoreboard.total == 1


def test_nao_abre_dois_sinais():
    manager = SignalManager()
    manager.open_signal(PatternMatch(PatternKind.QUEBRA, V, 4))
    with pytest.raises(InvariantViolation):
        manager.open_signal(PatternMatch(PatternKind.SURF, A, 5))
    assert manager.pending.entry_color == V


def test_placar_monotonico_e_soma():
    manager = SignalManager(Scoreboard())
    anterior = manager.scoreboard.snapshot()
    resultados = [A, V, T, T, A, V, V, A]
    for i, outcome in enumerate(resultados):
        manager.open_signal(PatternMatch(PatternKind.DOIS_X_UM, A, 3))
        manager.resolve(outcome)
        atual = manager.scoreboard.snapshot()
        for k in ("SG", "IG", "LS"):
            assert atual[k] >= anterior[k]
        assert atual["SG"] + atual["IG"] + atual["LS"] == i + 1
        anterior = atual
    assert anterior == {"SG": 3, "IG": 3, "LS": 2, "total": 8}
