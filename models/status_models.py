from pydantic import BaseModel
from typing import Optional, List, Dict


class ScoreboardOut(BaseModel):
    SG: int = 0
    IG: int = 0
    LS: int = 0
    total: int = 0


class SignalOut(BaseModel):
    entryColor: str
    confidence: int
    pattern: Optional[str] = None
    createdAt: int


class PendingSignalOut(BaseModel):
    ok: bool = True
    pending: bool = False
    signal: Optional[SignalOut] = None


class StreakOut(BaseModel):
    outcome: Optional[str] = None
    length: int = 0


class HistoryOut(BaseModel):
    ok: bool = True
    count: int = 0
    results: List[str] = []
    summary: Dict[str, int] = {}
    streak: StreakOut = StreakOut()


class StatusOut(BaseModel):
    ok: bool = True
    running: bool = False
    pending: bool = False
    telegramConfigured: bool = False
    lastFetchError: Optional[str] = None
    lastFetchTs: Optional[int] = None
    lastUpdateTs: Optional[int] = None
    skippedTicks: int = 0
    timestamp: int
