from models.bacbo_models import PatternKind
from services.confidence import CONFIDENCE_TABLE, DEFAULT_CONFIDENCE, calc_confidence


def test_valores_da_tabela():
    assert calc_confidence(PatternKind.SURF) == 95
    assert calc_confidence(PatternKind.ALTERNANCIA) == 85
    assert calc_confidence(PatternKind.QUEBRA) == 80
    assert calc_confidence(PatternKind.V) == 88
    assert calc_confidence(PatternKind.TRES_X_DOIS) == 82
    assert calc_confidence(PatternKind.DOIS_X_UM) == 75


def test_aceita_nome_do_padrao():
    assert calc_confidence("rampaAlongada") == 92
    assert calc_confidence("2x2") == 78


def test_desconhecido_usa_default():
    assert calc_confidence("nao_existe") == DEFAULT_CONFIDENCE == 75
    assert calc_confidence(None) == 75


def test_todos_os_padroes_tem_confianca():
    for kind in PatternKind:
        assert kind in CONFIDENCE_TABLE
        assert 1 <= calc_confidence(kind) <= 100
