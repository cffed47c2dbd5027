import json
import re
from typing import Any, Dict, Optional

from app.models.summary import Provider, ProviderOutcome, ProviderSummary, ProviderUnavailable
from app.utils.logger import get_logger

logger = get_logger(__name__)

# First "{" up to the first "}" on the same line. Objects whose string values
# contain braces are cut short and then fail to parse.
JSON_OBJECT_RE = re.compile(r"\{.*?\}")

SUMMARY_KEY = "summary"


def extract_json_object(text: str) -> Optional[Any]:
    """
    Pull the first brace-delimited span out of free-form model output and
    parse it. Returns None when there is no span or it is not valid JSON.
    """
    match = JSON_OBJECT_RE.search(text or "")
    if not match:
        logger.error("No valid JSON found in OpenAI response")
        return None
    try:
        return json.loads(match.group(0))
    except json.JSONDecodeError as e:
        logger.error(f"Could not parse JSON from OpenAI response: {e}")
        return None


def _total_tokens(result) -> Optional[int]:
    usage: Dict[str, Any] = getattr(result, "usage_metadata", None) or {}
    if usage.get("total_tokens") is not None:
        return usage["total_tokens"]
    token_usage = (getattr(result, "response_metadata", None) or {}).get("token_usage") or {}
    return token_usage.get("total_tokens")


async def summarize_with_openai(llm, prompt: str) -> ProviderOutcome:
    """
    Ask OpenAI for a summary and recover the {"summary": ...} object from the
    reply. Returns the summary together with the total token count.
    Never raises: any failure is reported as ProviderUnavailable.
    """
    if llm is None:
        return ProviderUnavailable(Provider.OPENAI, "client not configured")

    messages = [{"role": "user", "content": prompt}]
    try:
        result = await llm.ainvoke(messages)
    except Exception as e:
        logger.error(f"Error generating summary with OpenAI: {e}")
        return ProviderUnavailable(Provider.OPENAI, str(e) or type(e).__name__)

    tokens = _total_tokens(result)
    completion_text = getattr(result, "content", result)
    if not isinstance(completion_text, str):
        completion_text = str(completion_text)

    parsed = extract_json_object(completion_text)
    if parsed is None:
        return ProviderUnavailable(Provider.OPENAI, "no parseable JSON object in reply")

    if not isinstance(parsed, dict) or SUMMARY_KEY not in parsed:
        logger.error(f"OpenAI JSON reply has no '{SUMMARY_KEY}' key")
        return ProviderUnavailable(Provider.OPENAI, f"reply JSON lacks '{SUMMARY_KEY}'")

    summary = parsed[SUMMARY_KEY]
    if not isinstance(summary, str):
        summary = json.dumps(summary)
    return ProviderSummary(summary_text=summary, token_usage=tokens)
