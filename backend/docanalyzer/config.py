"""
Application configuration with environment variable support.
"""
from __future__ import annotations

from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    PORT: int = 8000
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    CORS_ALLOW_ORIGINS: List[str] = ["*"]
    MIN_TEXT_LENGTH: int = 10
    SEED_SAMPLE_DOCUMENTS: bool = True
    DEFAULT_USER_ID: int = 1


settings = Settings(_env_file=".env", _env_file_encoding="utf-8")


# Keyword Extraction Settings
MAX_KEYWORDS: int = 15
SENTIMENT_BOOST_FACTOR: float = 0.15
FREQUENCY_BOOST_FACTOR: float = 0.1
MIN_KEYWORD_LENGTH: int = 3
SCORE_PRECISION: int = 4

# Preprocessing trace
PREVIEW_LIMIT: int = 25
HIGHLIGHT_LIMIT: int = 5
SERVER_LOAD: str = "Low"

# Sentiment Analysis Settings
# Raw scores are mapped onto [0, 1] with (total + OFFSET) / RANGE
SENTIMENT_OFFSET: float = 15.0
SENTIMENT_RANGE: float = 30.0
POSITIVE_THRESHOLD: float = 0.6
NEGATIVE_THRESHOLD: float = 0.4
STRONG_POSITIVE_THRESHOLD: float = 0.8
STRONG_NEGATIVE_THRESHOLD: float = 0.2
NEGATION_PENALTY: float = 2.0
PHRASE_PENALTY: float = 3.0
PUNCTUATION_WEIGHT: float = 0.5

# Comparison Settings
COMPARISON_KEYWORD_LIMIT: int = 5
HIGH_SIMILARITY: int = 70
MODERATE_SIMILARITY: int = 40
NLP_TERM_WEIGHT: int = 5
