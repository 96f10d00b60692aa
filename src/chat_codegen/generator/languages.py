"""Language table builder.

Reads the ``languages`` array of the content document into a read-only
mapping from language id to language name.  The name is what enum indexing
appends to ``languageEnum`` (``game::Languages`` + ``English``).
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from chat_codegen.generator.errors import FieldAccessError, MalformedDocumentError

logger = logging.getLogger(__name__)

LanguageTable = Mapping[str, str]


def build_language_table(document: Any) -> LanguageTable:
    """Build the language table from a decoded content document.

    Later entries with a duplicate ``id`` overwrite earlier ones.

    Args:
        document: The decoded content JSON document.

    Returns:
        Read-only mapping of language id to language name.

    Raises:
        MalformedDocumentError: If the root is not an object, ``languages`` is
                                missing or not an array, or an element is not
                                an object.
        FieldAccessError:       If an element lacks a string ``id``/``name``.
    """
    if not isinstance(document, dict):
        raise MalformedDocumentError("content", "root is not an object")

    entries = document.get("languages")
    if not isinstance(entries, list):
        raise MalformedDocumentError("content", '"languages" value is not an array')

    table: dict[str, str] = {}
    for entry in entries:
        if not isinstance(entry, dict):
            raise MalformedDocumentError("content", "language content is not an object")

        language_id = _require_string(entry, "id")
        name = _require_string(entry, "name")
        if language_id in table:
            logger.debug(
                "Language %r redeclared: %r replaces %r.", language_id, name, table[language_id]
            )
        table[language_id] = name

    return MappingProxyType(table)


def _require_string(entry: dict, key: str) -> str:
    if key not in entry:
        raise FieldAccessError(key, "is missing from a language entry")
    value = entry[key]
    if not isinstance(value, str):
        raise FieldAccessError(key, "of a language entry is not a string")
    return value
