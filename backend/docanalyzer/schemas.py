# docanalyzer/schemas.py
from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from docanalyzer.config import settings

SentimentLabel = Literal["Positive", "Neutral", "Negative"]


class CamelModel(BaseModel):
    """Wire models are camelCase on the outside, snake_case in Python."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Keyword(CamelModel):
    term: str
    tfidf: float
    frequency: int = Field(ge=0)


class TfIdfResult(CamelModel):
    keywords: List[Keyword] = Field(default_factory=list)


class PreprocessingSteps(CamelModel):
    original_text: str
    tokenized: List[str]
    without_stopwords: List[str]
    lemmatized: List[str]


class SentimentResult(CamelModel):
    score: float = Field(ge=0.0, le=1.0)
    label: SentimentLabel
    explanation: str


class AnalysisResult(CamelModel):
    document_id: int = 0                      # assigned by storage, engine emits 0
    original_text: str
    word_count: int
    preprocessed_word_count: int
    unique_terms: int
    term_density: float
    processing_time: float
    server_load: str
    highlighted_text: str
    sentiment: SentimentResult
    preprocessing: Optional[PreprocessingSteps] = None
    tfidf: Optional[TfIdfResult] = None


class DocumentMetrics(CamelModel):
    nlp_terms: int = Field(ge=0, le=100)
    technical_content: int = Field(ge=0, le=100)
    academic_style: int = Field(ge=0, le=100)
    positive_sentiment: int = Field(ge=0, le=100)
    complexity: int = Field(ge=0, le=100)


class UniqueKeywords(CamelModel):
    doc1: List[str] = Field(default_factory=list)
    doc2: List[str] = Field(default_factory=list)


class DocumentComparison(CamelModel):
    similarity_score: int = Field(ge=0, le=100)
    similarity_explanation: str
    common_keywords: List[str]
    unique_keywords: UniqueKeywords
    doc1_metrics: DocumentMetrics
    doc2_metrics: DocumentMetrics


class Document(CamelModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True
    )

    id: int
    title: str
    content: str
    word_count: int
    analyzed_at: datetime
    user_id: Optional[int] = None


class AnalyzeOptions(CamelModel):
    preprocessing: bool = True
    tfidf: bool = True
    sentiment: bool = True
    keywords: bool = True


class AnalyzeRequest(CamelModel):
    text: str
    title: Optional[str] = None
    options: AnalyzeOptions = Field(default_factory=AnalyzeOptions)

    @field_validator("text")
    @classmethod
    def text_long_enough(cls, value: str) -> str:
        if len(value) < settings.MIN_TEXT_LENGTH:
            raise ValueError(
                f"Text must be at least {settings.MIN_TEXT_LENGTH} characters long"
            )
        return value


class CompareRequest(CamelModel):
    document_ids: List[int] = Field(min_length=2, max_length=2)
    texts: Optional[List[str]] = Field(default=None, min_length=2, max_length=2)
