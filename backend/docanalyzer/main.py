"""
Main FastAPI application and routing layer.
"""
from __future__ import annotations

import asyncio
import logging
import time
from functools import lru_cache
from typing import List

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from docanalyzer.config import settings
from docanalyzer.core.analyzer import TextAnalyzer
from docanalyzer.core.comparator import DocumentComparator
from docanalyzer.core.tokenizer import load_stopwords
from docanalyzer.schemas import (
    AnalysisResult,
    AnalyzeOptions,
    AnalyzeRequest,
    CompareRequest,
    Document,
    DocumentComparison,
)
from docanalyzer.models import Document as DocumentRecord
from docanalyzer.storage import MemStorage
from docanalyzer.utils import now_utc

# Configure logging
logging.basicConfig(level=settings.LOG_LEVEL, format=settings.LOG_FORMAT)
logger = logging.getLogger("uvicorn")


_storage = MemStorage(
    seed_samples=settings.SEED_SAMPLE_DOCUMENTS,
    default_user_id=settings.DEFAULT_USER_ID,
)


def get_storage() -> MemStorage:
    return _storage


@lru_cache(maxsize=1)
def get_text_analyzer() -> TextAnalyzer:
    return TextAnalyzer()


@lru_cache(maxsize=1)
def get_comparator() -> DocumentComparator:
    return DocumentComparator()


def run_analysis(
    analyzer: TextAnalyzer,
    storage: MemStorage,
    document: DocumentRecord,
) -> AnalysisResult:
    """
    Analyse a stored document with every option enabled and store the result.

    Args:
        analyzer: Text analysis engine
        storage: Storage backend
        document: Previously stored document

    Returns:
        The saved AnalysisResult carrying the document's id
    """
    result = analyzer.analyze(document.content, AnalyzeOptions())
    result.document_id = document.id
    return storage.save_analysis_result(result)


# Initialize FastAPI app
app = FastAPI(
    title="Document Analyzer API",
    version="0.1.0",
    description="API for text preprocessing, keyword extraction, sentiment analysis and document comparison"
)


@app.on_event("startup")
async def warm_startup():
    """Build the lexicon tables and stopword list before the first request."""
    start_time = time.perf_counter()
    try:
        loop = asyncio.get_running_loop()
        await loop.run_in_executor(None, get_text_analyzer)
        await loop.run_in_executor(None, load_stopwords)
        logger.info("Lexicon tables and stopwords loaded in %.2fs", time.perf_counter() - start_time)
    except Exception as e:
        logger.warning("Lexicon warm-up skipped: %s", e)


# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Report malformed requests as 400 with the validation details."""
    logger.warning("Invalid request to %s: %s", request.url.path, exc.errors())
    return JSONResponse(
        status_code=400,
        content={"detail": "Invalid request data", "errors": jsonable_encoder(exc.errors())},
    )


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "ok",
        "as_of": now_utc().isoformat(),
        "service": "document-analyzer-api"
    }


@app.get("/api/documents", response_model=List[Document])
async def list_documents(storage: MemStorage = Depends(get_storage)):
    """List stored documents, newest first."""
    return storage.get_all_documents()


@app.get("/api/documents/{document_id}", response_model=Document)
async def get_document(document_id: int, storage: MemStorage = Depends(get_storage)):
    """Fetch one stored document."""
    document = storage.get_document(document_id)
    if document is None:
        raise HTTPException(status_code=404, detail="Document not found")
    return document


@app.get(
    "/api/documents/{document_id}/analysis",
    response_model=AnalysisResult,
    response_model_exclude_none=True,
)
async def get_document_analysis(
    document_id: int,
    storage: MemStorage = Depends(get_storage),
    analyzer: TextAnalyzer = Depends(get_text_analyzer),
):
    """
    Return the stored analysis of a document.

    Documents that exist but were never analysed are analysed on demand
    with every option enabled.
    """
    try:
        result = storage.get_analysis_result(document_id)
        if result is not None:
            return result

        document = storage.get_document(document_id)
        if document is None:
            raise HTTPException(status_code=404, detail="Document not found")

        logger.info(f"Analysing stored document {document_id} on demand")
        return run_analysis(analyzer, storage, document)

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error fetching analysis for document {document_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch analysis result")


@app.post("/api/analyze", response_model=AnalysisResult, response_model_exclude_none=True)
async def analyze_document(
    request: AnalyzeRequest,
    storage: MemStorage = Depends(get_storage),
    analyzer: TextAnalyzer = Depends(get_text_analyzer),
):
    """
    Analyse a new text and store it as a document.

    Args:
        request: Text, optional title and analysis options

    Returns:
        AnalysisResult with the id of the newly stored document
    """
    try:
        result = analyzer.analyze(request.text, request.options)

        title = request.title or f"Document {int(time.time() * 1000)}"
        document = storage.create_document(title, request.text, word_count=result.word_count)

        result.document_id = document.id
        logger.info(f"Stored document {document.id} ({result.word_count} words)")
        return storage.save_analysis_result(result)

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error analyzing text: {e}")
        raise HTTPException(status_code=500, detail="Failed to analyze text")


@app.post("/api/compare", response_model=DocumentComparison)
async def compare(
    request: CompareRequest,
    storage: MemStorage = Depends(get_storage),
    comparator: DocumentComparator = Depends(get_comparator),
):
    """
    Compare two documents, given either inline or by stored id.

    Args:
        request: Two document ids and, optionally, the two texts to use instead

    Returns:
        DocumentComparison of the two texts
    """
    try:
        if request.texts:
            logger.info("Comparing two inline texts")
            doc1, doc2 = request.texts
        else:
            first = storage.get_document(request.document_ids[0])
            second = storage.get_document(request.document_ids[1])
            if first is None or second is None:
                raise HTTPException(status_code=404, detail="One or both documents not found")
            logger.info(f"Comparing documents {request.document_ids}")
            doc1, doc2 = first.content, second.content

        return comparator.compare(doc1, doc2)

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error comparing documents: {e}")
        raise HTTPException(status_code=500, detail="Failed to compare documents")


if __name__ == "__main__":
    # For development
    import uvicorn
    uvicorn.run("docanalyzer.main:app", host="0.0.0.0", port=settings.PORT, reload=True)
