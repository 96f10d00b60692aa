"""
Shared pytest fixtures for the chat-codegen test suite.

This module provides fixtures that are automatically available to all test files:
- Small content documents (languages + chat messages)
- A helper that writes JSON documents into a temporary directory
- Root logger restoration around every test
"""

import json
import logging
from collections.abc import Callable, Generator
from pathlib import Path
from typing import Any

import pytest

# ============================================================================
# DOCUMENT FIXTURES
# ============================================================================


@pytest.fixture
def languages_section() -> list[dict]:
    """The ``languages`` array shared by most content documents."""
    return [
        {"id": "en", "name": "English"},
        {"id": "pl", "name": "Polish"},
        {"id": "de", "name": "German"},
    ]


@pytest.fixture
def content_document(languages_section: list[dict]) -> dict:
    """
    A content document with two real messages and two noise entries.

    The noise entries (a bare string and an object without ``content``) must
    be skipped by the generator.
    """
    return {
        "languages": languages_section,
        "chatMessages": [
            {
                "uniqueName": "Greeting",
                "content": {
                    "en": {"comment": "Player joins", "processed": "Hello, {}!"},
                    "pl": {"comment": "Gracz dołącza", "processed": "Witaj, {}!"},
                },
            },
            "--- combat messages ---",
            {"uniqueName": "Orphan"},
            {
                "uniqueName": "Farewell",
                "content": {
                    "de": {"comment": "Player leaves", "processed": "Tschüss"},
                },
            },
        ],
    }


# ============================================================================
# FILE FIXTURES
# ============================================================================


@pytest.fixture
def write_json(tmp_path: Path) -> Callable[[str, Any], Path]:
    """
    Return a helper that dumps a JSON value to ``tmp_path / name``.

    Usage:
        path = write_json("options.json", {"namespace": "chat_txt"})
    """

    def _write(name: str, value: Any) -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(value, ensure_ascii=False), encoding="utf-8")
        return path

    return _write


# ============================================================================
# LOGGING FIXTURES
# ============================================================================


@pytest.fixture(autouse=True)
def restore_root_logger() -> Generator[logging.Logger, None, None]:
    """
    Restore root logger handlers and level after each test.

    ``cli.main`` calls ``logging.basicConfig(force=True)``, which would
    otherwise leave handlers bound to a captured (and later closed) stream.
    """
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)
