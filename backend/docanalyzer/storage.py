"""
In-memory document and analysis storage.

Nothing here is persisted; the maps live as long as the process.
"""
from __future__ import annotations

import logging
import threading
from datetime import timedelta
from typing import Dict, List, Optional

from docanalyzer.models import Document
from docanalyzer.schemas import AnalysisResult
from docanalyzer.utils import normalize_text, now_utc

logger = logging.getLogger(__name__)

# (title, content, age in hours)
SAMPLE_DOCUMENTS = (
    (
        "NLP Research Paper",
        "Natural language processing (NLP) is a subfield of linguistics, computer science, "
        "and artificial intelligence concerned with the interactions between computers and "
        "human language. The goal is to enable computers to process and analyze large amounts "
        "of natural language data. Challenges in NLP frequently involve speech recognition, "
        "natural language understanding, and natural language generation.",
        2,
    ),
    (
        "Product Review Dataset",
        "This dataset contains customer reviews for various products. Each review includes a "
        "star rating, review text, and metadata about the product. The reviews can be analyzed "
        "for sentiment, feature extraction, and opinion mining. This type of analysis helps "
        "businesses understand customer satisfaction and product performance.",
        24,
    ),
    (
        "News Articles Comparison",
        "News articles from different sources often present varying perspectives on the same "
        "events. By comparing the language, sentiment, and focus of these articles, we can "
        "identify potential bias and understand how different outlets frame important issues. "
        "This comparative analysis uses TF-IDF and other NLP techniques to highlight "
        "differences in coverage.",
        48,
    ),
    (
        "Customer Feedback Analysis",
        "Customer feedback provides valuable insights for business improvement. By analyzing "
        "comments, reviews, and survey responses using NLP techniques, companies can extract "
        "actionable feedback, identify trends, and categorize issues. This helps prioritize "
        "improvements and track customer sentiment over time.",
        72,
    ),
)


class MemStorage:
    """Keyed maps from document id to Document and to AnalysisResult."""

    def __init__(self, seed_samples: bool = False, default_user_id: int = 1):
        self._documents: Dict[int, Document] = {}
        self._analyses: Dict[int, AnalysisResult] = {}
        self._next_id = 1
        self._lock = threading.Lock()
        self.default_user_id = default_user_id

        if seed_samples:
            self._seed()

    def _seed(self) -> None:
        now = now_utc()
        for title, content, age_hours in SAMPLE_DOCUMENTS:
            document = self.create_document(title, content)
            document.analyzed_at = now - timedelta(hours=age_hours)

    def get_all_documents(self) -> List[Document]:
        """
        List every stored document.

        Returns:
            Documents sorted by analysis time, newest first
        """
        with self._lock:
            documents = list(self._documents.values())
        return sorted(documents, key=lambda doc: doc.analyzed_at, reverse=True)

    def get_document(self, document_id: int) -> Optional[Document]:
        with self._lock:
            return self._documents.get(document_id)

    def create_document(
        self,
        title: str,
        content: str,
        word_count: Optional[int] = None,
        user_id: Optional[int] = None,
    ) -> Document:
        """
        Store a new document under the next free id.

        Args:
            title: Document title
            content: Full document text
            word_count: Known word count; whitespace-split count when omitted
            user_id: Owner, defaults to the configured default user

        Returns:
            The stored Document
        """
        if word_count is None:
            normalized = normalize_text(content)
            word_count = len(normalized.split(" ")) if normalized else 0

        with self._lock:
            document = Document(
                id=self._next_id,
                title=title,
                content=content,
                word_count=word_count,
                analyzed_at=now_utc(),
                user_id=user_id if user_id is not None else self.default_user_id,
            )
            self._documents[document.id] = document
            self._next_id += 1
        logger.debug("Stored document %d (%d words)", document.id, word_count)
        return document

    def save_analysis_result(self, result: AnalysisResult) -> AnalysisResult:
        with self._lock:
            self._analyses[result.document_id] = result
        return result

    def get_analysis_result(self, document_id: int) -> Optional[AnalysisResult]:
        with self._lock:
            return self._analyses.get(document_id)
