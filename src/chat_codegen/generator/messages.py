"""Chat message model and content-entry filtering.

The ``chatMessages`` array may carry annotation-only entries alongside real
messages.  :func:`iter_message_entries` filters those out up front so that
:func:`parse_message` only ever sees objects carrying both ``uniqueName``
and ``content``.

Comment sourcing
----------------
A message's comment is the ``comment`` field of its *first* variant in
document order.  Later variants' ``comment`` fields are never read, so a
later variant may omit it entirely.  The first variant's comment is read
before its ``processed`` field, matching the order the fields are consumed
when the block is written.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from chat_codegen.generator.errors import FieldAccessError, MalformedDocumentError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Variant:
    """One language's text for a message.

    Attributes:
        language_id: Key of the variant inside the message's ``content``.
        text:        The ``processed`` string, emitted verbatim (no escaping).
    """

    language_id: str
    text: str


@dataclass(frozen=True)
class ChatMessage:
    """A single chat message ready for rendering.

    Attributes:
        unique_name: Identifier of the generated constant.  Uniqueness is not
                     checked; duplicates surface when the output is compiled.
        comment:     Comment of the first variant, ``""`` when there are none.
        variants:    Variants in document order.
    """

    unique_name: str
    comment: str
    variants: tuple[Variant, ...]


def is_message_entry(entry: Any) -> bool:
    """Return ``True`` if *entry* is an object with ``uniqueName`` and ``content``."""
    return isinstance(entry, dict) and "uniqueName" in entry and "content" in entry


def iter_message_entries(document: Any) -> Iterator[dict]:
    """Yield the message entries of a content document, in order.

    Entries failing :func:`is_message_entry` are skipped.

    Raises:
        MalformedDocumentError: If the root is not an object or
                                ``chatMessages`` is missing or not an array.
    """
    if not isinstance(document, dict):
        raise MalformedDocumentError("content", "root is not an object")

    entries = document.get("chatMessages")
    if not isinstance(entries, list):
        raise MalformedDocumentError("content", '"chatMessages" is missing or not an array')

    for position, entry in enumerate(entries):
        if not is_message_entry(entry):
            logger.debug("Skipping chatMessages[%d]: not a message entry.", position)
            continue
        yield entry


def parse_message(entry: dict) -> ChatMessage:
    """Build a :class:`ChatMessage` from a filtered message entry.

    Args:
        entry: An object accepted by :func:`is_message_entry`.

    Returns:
        The parsed message.

    Raises:
        FieldAccessError:       If ``uniqueName`` is not a string, or a
                                variant lacks a string ``processed`` (or, for
                                the first variant, ``comment``).
        MalformedDocumentError: If ``content`` is not an object.
    """
    unique_name = entry["uniqueName"]
    if not isinstance(unique_name, str):
        raise FieldAccessError("uniqueName", "is not a string")

    content = entry["content"]
    if not isinstance(content, dict):
        raise MalformedDocumentError(
            "content", f'"content" of message "{unique_name}" is not an object'
        )

    comment: str | None = None
    variants: list[Variant] = []
    for language_id, language_content in content.items():
        if not isinstance(language_content, dict):
            raise FieldAccessError(language_id, f'of message "{unique_name}" is not an object')
        if comment is None:
            comment = _read_string(language_content, "comment", unique_name, language_id)
        text = _read_string(language_content, "processed", unique_name, language_id)
        variants.append(Variant(language_id=language_id, text=text))

    return ChatMessage(unique_name=unique_name, comment=comment or "", variants=tuple(variants))


def _read_string(language_content: dict, key: str, unique_name: str, language_id: str) -> str:
    value = language_content.get(key)
    if not isinstance(value, str):
        raise FieldAccessError(
            key, f'is missing or not a string in message "{unique_name}" ({language_id})'
        )
    return value
