from typing import Optional

from fastapi import Depends, FastAPI, File, Form, Request, UploadFile
from fastapi.responses import PlainTextResponse
from contextlib import asynccontextmanager

from app.config import Settings, load_settings
from app.errors import AllProvidersExhaustedError, ExtractionError
from app.llm.setup import LLMSetup, ProviderClients
from app.models.summary import SummaryRequest, SummaryResponse
from app.orchestrator import orchestrate
from app.tools.local.pdf_extractor import parse_page_number
from app.utils.logger import get_logger

logger = get_logger(__name__)

DOCS_URL = "/api-docs"


@asynccontextmanager
async def lifespan(fapp: FastAPI):
    settings = load_settings()
    fapp.state.settings = settings
    fapp.state.providers = LLMSetup(settings).get_clients()
    logger.info(f"Server is running on http://localhost:{settings.port}")
    logger.info(f"Swagger documentation available at http://localhost:{settings.port}{DOCS_URL}")
    yield
    logger.info("Shutting down...")


app = FastAPI(
    title="PDF Page-Range Summarizer",
    description="Upload a PDF and a page range; get a summary from Gemini, or OpenAI when Gemini fails.",
    version="1.0.0",
    lifespan=lifespan,
    docs_url=DOCS_URL,
    redoc_url=None,
)


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_providers(request: Request) -> ProviderClients:
    return request.app.state.providers


@app.post(
    "/",
    response_model=SummaryResponse,
    response_model_exclude_none=True,
    summary="Summarize a page range of an uploaded PDF",
    responses={
        400: {"description": "startPage or stopPage missing", "content": {"text/plain": {}}},
        500: {"description": "Extraction failed or no provider could summarize", "content": {"text/plain": {}}},
    },
)
async def summarize_pdf_range(
    document: Optional[UploadFile] = File(None, description="The PDF to summarize."),
    start_page: Optional[str] = Form(None, alias="startPage"),
    stop_page: Optional[str] = Form(None, alias="stopPage"),
    book_title: Optional[str] = Form(None, alias="bookTitle"),
    book_author: Optional[str] = Form(None, alias="bookAuthor"),
    book_subject: Optional[str] = Form(None, alias="bookSubject"),
    genre: Optional[str] = Form(None),
    settings: Settings = Depends(get_settings),
    providers: ProviderClients = Depends(get_providers),
):
    if not start_page or not stop_page:
        return PlainTextResponse("Start page and end page are required.", status_code=400)

    try:
        file_bytes = await document.read() if document is not None else b""
        request = SummaryRequest(
            file_bytes=file_bytes,
            start_page=parse_page_number(start_page),
            stop_page=parse_page_number(stop_page),
            book_title=book_title,
            book_author=book_author,
            book_subject=book_subject,
            genre=genre,
        )
        result = await orchestrate(request, providers, timeout=settings.provider_timeout)
    except AllProvidersExhaustedError as e:
        logger.error(f"Error generating summary with both APIs. {e}")
        return PlainTextResponse("Error generating summary", status_code=500)
    except ExtractionError as e:
        logger.error(f"Error processing request: {e}")
        return PlainTextResponse("Error processing request", status_code=500)

    return SummaryResponse.from_result(result)


if __name__ == "__main__":
    import uvicorn

    _settings = load_settings()
    uvicorn.run(app, host=_settings.host, port=_settings.port)
