"""Pytest configuration and fixtures."""

import base64
from datetime import datetime

import pytest

from quizlet_downloader.scrape.dom import SoupDocument
from quizlet_downloader.scrape.models import DefinitionPart, ExtractionResult, QuizRecord, SetInfo

SET_URL = "https://quizlet.com/123456789/biology-flash-cards/"

# 1x1 transparent PNG
PNG_BYTES = base64.b64decode(
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNkYPhfDwAChwGA60e6kgAAAABJRU5ErkJggg=="
)


def make_row(term, definition="", image=None):
    """HTML for one term row in the layout the default selectors expect."""
    image_html = ""
    if image is not None:
        image_html = f'<div class="sumuxuf"><img class="SetPageTerm-image" src="{image}"></div>'
    return (
        '<div class="SetPageTermsList-term"><div class="se6rv9p">'
        f'<div class="s7ascy3"><span class="TermText">{term}</span></div>'
        '<div class="l1rpwius">'
        f'<div class="hdftvph"><span class="TermText">{definition}</span></div>'
        f"{image_html}"
        "</div></div></div>"
    )


def make_set_html(
    rows,
    expected=None,
    title="Biology Basics",
    creator="jdoe",
    creator_href="/jdoe/sets",
    show_more=None,
    canonical=None,
):
    """Build a Quizlet-like set page."""
    parts = ["<html><head>"]
    if canonical:
        parts.append(f'<link rel="canonical" href="{canonical}">')
    parts.append("</head><body>")
    if title is not None:
        parts.append(f'<h1 class="s1ygu81a">{title}</h1>')
    if expected is not None:
        parts.append(f'<div class="t1hzdbu9"><span class="t18rmeis">Terms in this set ({expected})</span></div>')
    if creator is not None:
        parts.append(
            '<div class="u1xtrgf5"><div class="UserLink-content">'
            f'<a class="UILink" href="{creator_href}"><span>{creator}</span></a>'
            "</div></div>"
        )
    parts.append('<section class="SetPageTerms-termsList">')
    parts.extend(rows)
    parts.append("</section>")
    if show_more:
        parts.append(f'<button class="a1qd8xfe a1q8vbq2">{show_more}</button>')
    parts.append("</body></html>")
    return "".join(parts)


@pytest.fixture
def make_document():
    """Factory for SoupDocument set pages."""

    def factory(rows, url=SET_URL, **kwargs):
        return SoupDocument(make_set_html(rows, **kwargs), url=url)

    return factory


@pytest.fixture
def sample_result():
    """Three-card result with a multi-line definition and one image."""
    return ExtractionResult(
        info=SetInfo(
            quizSetTitle="Biology Basics",
            quizSetURL=SET_URL,
            creatorName="jdoe",
            creatorURL="https://quizlet.com/jdoe/sets",
            dateScraped="2026-10-19T09:30:00.000Z",
            numberOfQuizzes=3,
            swapped=False,
        ),
        quizData={
            "1": QuizRecord(termPart="Cell", definitionPart=DefinitionPart(text="Basic unit of life")),
            "2": QuizRecord(
                termPart="Mitosis",
                definitionPart=DefinitionPart(text="Cell division\nproducing two cells"),
            ),
            "3": QuizRecord(
                termPart="Ribosome",
                definitionPart=DefinitionPart(text="Makes proteins", image="https://o.quizlet.com/ribosome.png"),
            ),
        },
    )


@pytest.fixture
def fixed_now():
    return datetime(2026, 10, 19, 9, 30, 5, 123000)


@pytest.fixture
def options_path(tmp_path, monkeypatch):
    """Point the options store at a temp file."""
    path = tmp_path / "options.json"
    monkeypatch.setenv("QDL_OPTIONS_PATH", str(path))
    return path
