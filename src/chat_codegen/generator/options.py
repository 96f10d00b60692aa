"""Generator options.

``GeneratorOptions`` is a frozen dataclass that mirrors the options JSON
document.  It is loaded once per run and never mutated afterwards.

Recognised keys
---------------
``pch``, ``namespace``, ``languageEnum`` and ``chatMessageType`` are
strings, ``headerFiles`` is an array of strings, ``useCompileMacro`` and
``usePragmaOnce`` are booleans.  The attribute names are the snake_case
forms of the JSON keys.

Unknown keys are ignored.  A recognised key with the wrong JSON type aborts
the load with :class:`TypeMismatchError`; non-string items inside
``headerFiles`` are dropped without complaint.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from chat_codegen.generator.errors import MalformedDocumentError, TypeMismatchError

logger = logging.getLogger(__name__)

#: Value of ``chatMessageType`` when the options document omits it.
DEFAULT_CHAT_MESSAGE_TYPE = "constexpr auto"

# JSON key -> (attribute name, JSON type name, Python type).  ``bool`` is
# checked by identity because ``isinstance(True, int)`` would let integers
# through for boolean fields and vice versa.
_SCALAR_FIELDS: dict[str, tuple[str, str, type]] = {
    "useCompileMacro": ("use_compile_macro", "boolean", bool),
    "usePragmaOnce": ("use_pragma_once", "boolean", bool),
    "languageEnum": ("language_enum", "string", str),
    "pch": ("pch", "string", str),
    "namespace": ("namespace", "string", str),
    "chatMessageType": ("chat_message_type", "string", str),
}


@dataclass(frozen=True)
class GeneratorOptions:
    """Immutable rendering options for one generator run.

    Attributes:
        pch:               Precompiled header, emitted as ``#include <pch>``
                           when non-empty.  Quotes are the caller's job.
        namespace:         Enclosing namespace; empty means none.
        language_enum:     Qualified enum type (e.g. ``"game::Languages"``).
                           When set, array slots are indexed by enum member
                           instead of position.
        header_files:      Extra includes, emitted in order after the pch.
        chat_message_type: Declared type of each message.  Read and
                           validated but not used by the renderer yet.
        use_compile_macro: Wrap each literal in ``FMT_COMPILE(...)``.
        use_pragma_once:   Emit ``#pragma once`` as the first line.
    """

    pch: str = ""
    namespace: str = ""
    language_enum: str = ""
    header_files: tuple[str, ...] = ()
    chat_message_type: str = DEFAULT_CHAT_MESSAGE_TYPE
    use_compile_macro: bool = True
    use_pragma_once: bool = True


def load_options(document: Any) -> GeneratorOptions:
    """Build :class:`GeneratorOptions` from a decoded options document.

    Args:
        document: The decoded JSON value of the options file.

    Returns:
        A frozen ``GeneratorOptions`` with defaults for every absent key.

    Raises:
        MalformedDocumentError: If *document* is not a JSON object.
        TypeMismatchError:      If a recognised key has the wrong JSON type.
    """
    if not isinstance(document, dict):
        raise MalformedDocumentError("options", "root is not an object")

    overrides: dict[str, Any] = {}
    for json_key, (attribute, type_name, expected) in _SCALAR_FIELDS.items():
        if json_key not in document:
            continue
        value = document[json_key]
        if type(value) is not expected:
            raise TypeMismatchError(json_key, type_name)
        overrides[attribute] = value

    if "headerFiles" in document:
        overrides["header_files"] = _read_header_files(document["headerFiles"])

    return GeneratorOptions(**overrides)


def _read_header_files(value: Any) -> tuple[str, ...]:
    if not isinstance(value, list):
        raise TypeMismatchError("headerFiles", "array")

    headers = tuple(item for item in value if isinstance(item, str))
    skipped = len(value) - len(headers)
    if skipped:
        logger.debug("Ignoring %d non-string headerFiles item(s).", skipped)
    return headers
