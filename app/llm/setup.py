from dataclasses import dataclass
from typing import Any, Optional

import google.generativeai as genai
from langchain_openai import ChatOpenAI

from app.config import Settings
from app.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class ProviderClients:
    """
    Provider clients built once at startup and shared by every request.
    A client is None when its credential was missing; the matching adapter
    then reports itself unavailable.
    """
    primary: Optional[Any] = None     # genai.GenerativeModel
    fallback: Optional[Any] = None    # ChatOpenAI


class LLMSetup:
    def __init__(self, settings: Settings, temperature: Optional[float] = None):
        self.settings = settings
        self.temperature = temperature

    def build_primary(self):
        if not self.settings.google_api_key:
            logger.warning("GOOGLE_API_KEY is not set; Gemini calls will be skipped.")
            return None
        genai.configure(api_key=self.settings.google_api_key)
        return genai.GenerativeModel(model_name=self.settings.primary_model)

    def build_fallback(self):
        if not self.settings.openai_api_key:
            logger.warning("OPENAI_API_KEY is not set; OpenAI calls will be skipped.")
            return None
        kwargs = {"model": self.settings.fallback_model, "api_key": self.settings.openai_api_key}
        if self.temperature is not None:
            kwargs["temperature"] = self.temperature
        return ChatOpenAI(**kwargs)

    def get_clients(self) -> ProviderClients:
        clients = ProviderClients(primary=self.build_primary(), fallback=self.build_fallback())
        logger.info(f"Providers ready: primary={self.settings.primary_model} "
                    f"({'on' if clients.primary else 'off'}), "
                    f"fallback={self.settings.fallback_model} "
                    f"({'on' if clients.fallback else 'off'})")
        return clients
