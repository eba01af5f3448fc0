"""Operation identifiers and the per-operation result shapes."""
from enum import Enum
from typing import Literal, Optional, Union

from pydantic import BaseModel, Field


class OperationKind(str, Enum):
    """Closed set of analyses a client can request."""
    SENTIMENT = "sentiment"
    SUMMARY = "summary"
    KEYWORDS = "keywords"
    ENTITIES = "entities"
    CLASSIFY = "classify"
    CHAT = "chat"


class SentimentResult(BaseModel):
    """Lexicon-based polarity."""
    label: Literal["neutral", "positive", "negative"]
    score: int
    comparative: float
    positive: list[str] = []
    negative: list[str] = []
    explanation: str


class SummaryResult(BaseModel):
    summary: str
    note: Optional[str] = Field(None, description="Present only when the fallback summary was used")


class KeywordsResult(BaseModel):
    keywords: list[str] = []


class EntitiesResult(BaseModel):
    people: list[str] = []
    places: list[str] = []
    organizations: list[str] = []


class ClassifyResult(BaseModel):
    label: str
    reason: str = ""


class ChatResult(BaseModel):
    reply: str


AnalysisResult = Union[
    SentimentResult,
    SummaryResult,
    KeywordsResult,
    EntitiesResult,
    ClassifyResult,
    ChatResult,
]

RESULT_TYPES: dict[OperationKind, type[BaseModel]] = {
    OperationKind.SENTIMENT: SentimentResult,
    OperationKind.SUMMARY: SummaryResult,
    OperationKind.KEYWORDS: KeywordsResult,
    OperationKind.ENTITIES: EntitiesResult,
    OperationKind.CLASSIFY: ClassifyResult,
    OperationKind.CHAT: ChatResult,
}

_missing = set(OperationKind) - set(RESULT_TYPES)
if _missing:
    raise RuntimeError(f"No result type registered for: {sorted(op.value for op in _missing)}")
