"""Pytest configuration and shared fixtures."""

import json
from pathlib import Path

import pytest

from formatsig.placeholders import ConflictMode, FormatStringParser
from formatsig.placeholders import syntax


@pytest.fixture
def strict_parser() -> FormatStringParser:
    """Create a parser that raises on same-position type conflicts."""
    return FormatStringParser(ConflictMode.STRICT)


@pytest.fixture
def lenient_parser() -> FormatStringParser:
    """Create a parser that keeps the first type on same-position conflicts."""
    return FormatStringParser(ConflictMode.LENIENT)


@pytest.fixture
def fresh_pattern(monkeypatch):
    """Drop the cached specifier pattern so the next call compiles it again."""
    monkeypatch.setattr(syntax, "_format_pattern", None)


@pytest.fixture
def string_table() -> dict:
    """A small string table with one consistent and two inconsistent keys."""
    return {
        "apples.given": {
            "en": "I give %d apples to %@",
            "fr": "Je donne %d pommes à %@",
            "de": "Ich gebe %2$@ %1$d Äpfel",
        },
        "items.total": {
            "en": "Total items: %u",
            "fr": "Total : %u articles, %@",
        },
        "weight.label": {
            "en": "Weight: %.2f kg",
            "fr": "Poids : %d kg",
        },
    }


@pytest.fixture
def string_table_file(tmp_path: Path, string_table: dict) -> Path:
    """Write the string table to a JSON file."""
    path = tmp_path / "strings.json"
    path.write_text(json.dumps(string_table, ensure_ascii=False), encoding="utf-8")
    return path
