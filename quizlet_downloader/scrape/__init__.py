"""Quizlet set scraping: page access, extraction and the page agent."""

from .config import ScrapeConfig
from .dom import BrowserDocument, DomDocument, DomNode, SoupDocument
from .expander import AutoExpander
from .extractor import SetExtractor
from .fetcher import FetchResult, PageFetcher
from .agent import PageAgent, PageChannel, open_channel
from .models import ExtractionResult, QuizRecord, ScrapeRequest, SetInfo
from .selectors import DEFAULT_SELECTORS, SelectorTable

__all__ = [
    'ScrapeConfig',
    'DomDocument',
    'DomNode',
    'SoupDocument',
    'BrowserDocument',
    'AutoExpander',
    'SetExtractor',
    'FetchResult',
    'PageFetcher',
    'PageAgent',
    'PageChannel',
    'open_channel',
    'ExtractionResult',
    'QuizRecord',
    'ScrapeRequest',
    'SetInfo',
    'DEFAULT_SELECTORS',
    'SelectorTable',
]
