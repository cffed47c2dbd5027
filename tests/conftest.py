import asyncio
from types import SimpleNamespace

import fitz  # PyMuPDF
import pytest


def build_pdf(page_texts):
    doc = fitz.open()
    for text in page_texts:
        page = doc.new_page()
        if text:
            page.insert_text((72, 72), text)
    data = doc.tobytes()
    doc.close()
    return data


class FakeGeminiModel:
    """Stands in for genai.GenerativeModel."""

    def __init__(self, text="A Gemini summary.", error=None, delay=0.0):
        self.text = text
        self.error = error
        self.delay = delay
        self.prompts = []

    async def generate_content_async(self, prompt):
        self.prompts.append(prompt)
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error:
            raise self.error
        return SimpleNamespace(text=self.text)


class FakeChatOpenAI:
    """Stands in for langchain's ChatOpenAI."""

    def __init__(self, content='{"summary": "An OpenAI summary."}', total_tokens=512, error=None,
                 usage_metadata=None, response_metadata=None):
        self.content = content
        self.error = error
        self.usage_metadata = usage_metadata if usage_metadata is not None else {"total_tokens": total_tokens}
        self.response_metadata = response_metadata or {}
        self.calls = []

    async def ainvoke(self, messages):
        self.calls.append(messages)
        if self.error:
            raise self.error
        return SimpleNamespace(
            content=self.content,
            usage_metadata=self.usage_metadata,
            response_metadata=self.response_metadata,
        )


@pytest.fixture
def pdf_factory():
    return build_pdf


@pytest.fixture
def ten_page_pdf():
    return build_pdf([f"Page {i} text" for i in range(1, 11)])


@pytest.fixture
def gemini_factory():
    return FakeGeminiModel


@pytest.fixture
def openai_factory():
    return FakeChatOpenAI
