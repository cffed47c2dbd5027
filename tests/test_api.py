import pytest
from fastapi.testclient import TestClient

import app.orchestrator as orchestrator
from app.config import Settings
from app.llm.setup import ProviderClients
from app.main import app, get_providers, get_settings


@pytest.fixture
def client_with():
    def _make(primary=None, fallback=None, timeout=None):
        app.dependency_overrides[get_providers] = lambda: ProviderClients(primary=primary, fallback=fallback)
        app.dependency_overrides[get_settings] = lambda: Settings(provider_timeout=timeout)
        return TestClient(app)

    yield _make
    app.dependency_overrides.clear()


def _form(start="2", stop="4"):
    data = {"bookTitle": "Title", "bookAuthor": "Author", "bookSubject": "Subject", "genre": "Genre"}
    if start is not None:
        data["startPage"] = start
    if stop is not None:
        data["stopPage"] = stop
    return data


def _files(pdf_bytes):
    return {"document": ("book.pdf", pdf_bytes, "application/pdf")}


def test_primary_success(client_with, ten_page_pdf, gemini_factory, openai_factory):
    gemini, openai = gemini_factory(text="Gemini says hi"), openai_factory()
    client = client_with(gemini, openai)

    response = client.post("/", data=_form(), files=_files(ten_page_pdf))

    assert response.status_code == 200
    assert response.json() == {"message": "Summary generated", "source": "Gemini", "summary": "Gemini says hi"}
    assert openai.calls == []


def test_fallback_success_reports_tokens(client_with, ten_page_pdf, gemini_factory, openai_factory):
    gemini = gemini_factory(error=RuntimeError("503 unavailable"))
    openai = openai_factory(content='Here is it: {"summary":"Pages 2 to 4 cover..."} done', total_tokens=1234)
    client = client_with(gemini, openai)

    response = client.post("/", data=_form(), files=_files(ten_page_pdf))

    assert response.status_code == 200
    assert response.json() == {
        "message": "Summary generated",
        "source": "OpenAI",
        "summary": "Pages 2 to 4 cover...",
        "tokens": 1234,
    }


@pytest.mark.parametrize("start, stop", [(None, "4"), ("2", None), ("", "4")])
def test_missing_pages_is_bad_request(monkeypatch, client_with, ten_page_pdf, gemini_factory, start, stop):
    extraction_calls = []

    async def fake_extract(*args):
        extraction_calls.append(args)
        return ""

    monkeypatch.setattr(orchestrator, "extract_page_range_async", fake_extract)
    gemini = gemini_factory()
    client = client_with(gemini)

    response = client.post("/", data=_form(start=start, stop=stop), files=_files(ten_page_pdf))

    assert response.status_code == 400
    assert response.text == "Start page and end page are required."
    assert extraction_calls == []
    assert gemini.prompts == []


def test_reversed_range_is_server_error(client_with, ten_page_pdf, gemini_factory, openai_factory):
    gemini, openai = gemini_factory(), openai_factory()
    client = client_with(gemini, openai)

    response = client.post("/", data=_form(start="5", stop="3"), files=_files(ten_page_pdf))

    assert response.status_code == 500
    assert response.text == "Error processing request"
    assert gemini.prompts == []
    assert openai.calls == []


def test_non_numeric_page_is_server_error(client_with, ten_page_pdf, gemini_factory):
    client = client_with(gemini_factory())

    response = client.post("/", data=_form(start="two"), files=_files(ten_page_pdf))

    assert response.status_code == 500


def test_missing_document_is_server_error(client_with, gemini_factory):
    client = client_with(gemini_factory())

    response = client.post("/", data=_form())

    assert response.status_code == 500
    assert response.text == "Error processing request"


def test_both_providers_down(client_with, ten_page_pdf, gemini_factory, openai_factory):
    client = client_with(gemini_factory(error=RuntimeError("down")), openai_factory(error=RuntimeError("down")))

    response = client.post("/", data=_form(), files=_files(ten_page_pdf))

    assert response.status_code == 500
    assert response.text == "Error generating summary"


def test_docs_are_served(client_with):
    client = client_with()

    assert client.get("/api-docs").status_code == 200
    schema = client.get("/openapi.json").json()
    assert "/" in schema["paths"]
