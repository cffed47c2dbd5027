from app.models.summary import Provider, ProviderOutcome, ProviderSummary, ProviderUnavailable
from app.utils.logger import get_logger

logger = get_logger(__name__)


async def summarize_with_gemini(model, prompt: str) -> ProviderOutcome:
    """
    Ask Gemini for a summary. The reply text is passed through as-is; it is
    not checked for the JSON shape the prompt asks for.
    Never raises: any failure is reported as ProviderUnavailable.
    """
    if model is None:
        return ProviderUnavailable(Provider.GEMINI, "client not configured")

    try:
        response = await model.generate_content_async(prompt)
        # .text raises ValueError when the candidate was blocked or empty
        summary = response.text
    except Exception as e:
        logger.error(f"Error generating summary with Gemini API: {e}")
        return ProviderUnavailable(Provider.GEMINI, str(e) or type(e).__name__)

    return ProviderSummary(summary_text=summary)
