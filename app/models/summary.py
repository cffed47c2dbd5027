from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, Field


class Provider(str, Enum):
    # values double as the "source" field of the HTTP response
    GEMINI = "Gemini"
    OPENAI = "OpenAI"


class SummaryRequest(BaseModel):
    file_bytes: bytes
    start_page: int
    stop_page: int
    book_title: Optional[str] = None
    book_author: Optional[str] = None
    book_subject: Optional[str] = None
    genre: Optional[str] = None


@dataclass(frozen=True)
class ProviderSummary:
    summary_text: str
    token_usage: Optional[int] = None


@dataclass(frozen=True)
class ProviderUnavailable:
    provider: Provider
    reason: str


# What an adapter hands back: a usable summary, or "try the next provider".
ProviderOutcome = Union[ProviderSummary, ProviderUnavailable]


class SummaryResult(BaseModel):
    summary_text: str
    source_provider: Provider
    token_usage: Optional[int] = None   # only set when the fallback provider answered


class SummaryResponse(BaseModel):
    message: str = "Summary generated"
    source: Provider
    summary: str
    tokens: Optional[int] = Field(None, description="Total tokens, reported by the fallback provider only.")

    @classmethod
    def from_result(cls, result: SummaryResult) -> "SummaryResponse":
        return cls(
            source=result.source_provider,
            summary=result.summary_text,
            tokens=result.token_usage,
        )
