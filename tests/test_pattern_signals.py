import services.pattern_signals as ps
from models.bacbo_models import Outcome, PatternKind, PatternMatch

A = Outcome.AZUL
V = Outcome.VERMELHO
T = Outcome.TIE


def test_historico_curto_sem_padrao():
    assert ps.detect_pattern([]) is None
    assert ps.detect_pattern([A, A, A]) is None
    assert ps.detect_pattern([A, V, A]) is None


def test_surf_cinco_iguais():
    out = ps.detect_pattern([T, V, V, V, V, V])
    assert out == PatternMatch(PatternKind.SURF, V, 5)


def test_surf_tem_prioridade_sobre_quebra():
    out = ps.detect_pattern([A, A, A, A, A])
    assert out.kind == PatternKind.SURF
    assert out.trigger_color == A


def test_quebra_quatro_iguais():
    assert ps.detect_pattern([A, A, A, A]) == PatternMatch(PatternKind.QUEBRA, A, 4)
    assert ps.detect_pattern([V, A, A, A, A]) == PatternMatch(PatternKind.QUEBRA, A, 4)


def test_alternancia():
    out = ps.detect_pattern([A, V, A, V])
    assert out == PatternMatch(PatternKind.ALTERNANCIA, A, 4)


def test_v():
    out = ps.detect_pattern([A, A, V, A])
    assert out == PatternMatch(PatternKind.V, A, 3)
    out = ps.detect_pattern([T, V, A, V])
    assert out == PatternMatch(PatternKind.V, V, 3)


def test_3x2():
    out = ps.detect_pattern([A, A, A, V, V])
    assert out == PatternMatch(PatternKind.TRES_X_DOIS, A, 5)


def test_2x1():
    assert ps.detect_pattern([V, A, A, A]) == PatternMatch(PatternKind.DOIS_X_UM, A, 3)
    assert ps.detect_pattern([V, V, A, V, V, V]) == PatternMatch(PatternKind.DOIS_X_UM, V, 3)


def test_sem_padrao():
    assert ps.detect_pattern([A, V, V, A]) is None


def test_tie_invalida_janela():
    assert ps.detect_pattern([A, A, A, A, T]) is None
    assert ps.detect_pattern([A, T, A, T]) is None
    assert ps.detect_pattern([T, T, T, T, T]) is None
    assert ps.detect_pattern([A, A, A, T, T]) is None


def test_cor_de_entrada_nunca_e_tie():
    seqs = [
        [T, T, T, T],
        [A, T, T, T],
        [T, A, T, A, T],
        [V, V, V, T, T, T],
    ]
    for seq in seqs:
        out = ps.detect_pattern(seq)
        assert out is None or out.trigger_color in (A, V)
