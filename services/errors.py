"""
Erros do BBsignal
"""


class BBSignalError(Exception):
    """Base para todos os erros do projeto"""


class FetchFailure(BBSignalError):
    """Página de resultados inacessível ou sem resultados reconhecíveis"""


class NotifyFailure(BBSignalError):
    """Falha ao enviar mensagem para o Telegram"""


class InvariantViolation(BBSignalError):
    """Operação que quebraria o estado do ciclo de sinais (ex.: dois sinais pendentes)"""
