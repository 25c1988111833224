"""Script de simulação: roda a sessão sobre uma sequência de resultados e imprime as mensagens

Não acessa a página nem o Telegram. Uso:
    python scripts/simulate_session.py AVAVATVVVVA
(A = azul, V = vermelho, T = tie; sem argumento usa uma sequência aleatória)
"""
import asyncio
import os
import random
import sys

repo_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if repo_root not in sys.path:
    sys.path.insert(0, repo_root)

from models.bacbo_models import Outcome
from services.session import SignalSession
from services.telegram import NotifyResult

LETTERS = {"A": Outcome.AZUL, "V": Outcome.VERMELHO, "T": Outcome.TIE}


class PrintNotifier:
    def __init__(self):
        self.count = 0

    async def send_message(self, text):
        self.count += 1
        print("-" * 40)
        print(text)
        return NotifyResult(ok=True, message_id=self.count)


async def simulate(seq):
    session = SignalSession(PrintNotifier())
    history = []
    for outcome in seq:
        history.append(outcome)
        print(f"\n>> saiu {outcome.value}")
        await session.on_tick(history[-20:])
    print("\nPlacar final:", session.scoreboard.snapshot())


if __name__ == "__main__":
    if len(sys.argv) > 1:
        seq = [LETTERS[c] for c in sys.argv[1].upper() if c in LETTERS]
    else:
        seq = random.choices(list(Outcome), weights=[45, 45, 10], k=60)
    asyncio.run(simulate(seq))
