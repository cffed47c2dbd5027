import asyncio
from typing import Awaitable, Callable, Optional

from app.errors import AllProvidersExhaustedError
from app.llm.setup import ProviderClients
from app.models.summary import (
    Provider,
    ProviderOutcome,
    ProviderUnavailable,
    SummaryRequest,
    SummaryResult,
)
from app.prompts.summarizer_prompt import build_summary_prompt
from app.tools.local.pdf_extractor import extract_page_range_async
from app.tools.remote.gemini_summarizer import summarize_with_gemini
from app.tools.remote.openai_summarizer import summarize_with_openai
from app.utils.logger import get_logger

logger = get_logger(__name__)


async def _attempt(provider: Provider, call: Callable[[], Awaitable[ProviderOutcome]],
                   timeout: Optional[float]) -> ProviderOutcome:
    if timeout is None:
        return await call()
    try:
        return await asyncio.wait_for(call(), timeout=timeout)
    except asyncio.TimeoutError:
        logger.error(f"{provider.value} did not answer within {timeout}s")
        return ProviderUnavailable(provider, f"timed out after {timeout}s")


async def orchestrate(request: SummaryRequest, providers: ProviderClients,
                      timeout: Optional[float] = None) -> SummaryResult:
    """
    Extract the page range, build the prompt, then try Gemini and, only if it
    is unavailable, OpenAI. Each provider is called at most once, never both
    at the same time.

    Raises ExtractionError (incl. InvalidRangeError) before any provider call,
    and AllProvidersExhaustedError when neither provider produced a summary.
    """
    logger.info(f"Extracting pages {request.start_page}-{request.stop_page}")
    extracted_text = await extract_page_range_async(request.file_bytes, request.start_page, request.stop_page)

    prompt = build_summary_prompt(
        request.book_title,
        request.book_author,
        request.book_subject,
        request.genre,
        request.start_page,
        request.stop_page,
        extracted_text,
    )

    primary = await _attempt(Provider.GEMINI, lambda: summarize_with_gemini(providers.primary, prompt), timeout)
    if not isinstance(primary, ProviderUnavailable):
        logger.info("Summary generation successful with Gemini.")
        return SummaryResult(summary_text=primary.summary_text, source_provider=Provider.GEMINI)

    logger.info(f"Gemini failed ({primary.reason}), trying OpenAI...")
    fallback = await _attempt(Provider.OPENAI, lambda: summarize_with_openai(providers.fallback, prompt), timeout)
    if not isinstance(fallback, ProviderUnavailable):
        logger.info("Summary generation successful with OpenAI.")
        return SummaryResult(
            summary_text=fallback.summary_text,
            source_provider=Provider.OPENAI,
            token_usage=fallback.token_usage,
        )

    raise AllProvidersExhaustedError([primary, fallback])
