"""Document assembler: frames the rendered message blocks into one header.

Output layout
-------------
1. ``#pragma once`` followed by a blank line (``usePragmaOnce``).
2. ``#include <pch>`` (non-empty ``pch``).
3. ``#include <file>`` per ``headerFiles`` entry, in order.
4. Two blank lines.
5. ``namespace <ns>`` and its opening brace (non-empty ``namespace``).
6. The ``internal::ChatMessageBase`` declaration, always.
7. One block per message entry, in document order.
8. The closing brace of the namespace, if one was opened.

The whole document is built in memory; inputs are small message tables.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator
from typing import Any

from chat_codegen.generator.errors import MalformedDocumentError
from chat_codegen.generator.languages import LanguageTable, build_language_table
from chat_codegen.generator.messages import iter_message_entries, parse_message
from chat_codegen.generator.options import GeneratorOptions, load_options
from chat_codegen.generator.renderer import MessageRenderer

logger = logging.getLogger(__name__)

_BASE_DECLARATION = "namespace internal {\nstruct ChatMessageBase {};\n}\n\n"


class DocumentAssembler:
    """Assemble the generated header for a content document.

    Attributes:
        _options:  Rendering options for this run.
        _renderer: Renderer shared by every message block.
    """

    def __init__(self, options: GeneratorOptions, languages: LanguageTable) -> None:
        self._options = options
        self._renderer = MessageRenderer(options, languages)

    def render_blocks(self, document: Any) -> Iterator[str]:
        """Yield one rendered block per message entry of *document*.

        Each message is parsed, rendered and dropped before the next entry is
        read.  Non-message entries are skipped by
        :func:`~chat_codegen.generator.messages.iter_message_entries`.
        """
        for entry in iter_message_entries(document):
            yield self._renderer.render(parse_message(entry))

    def assemble(self, document: Any) -> str:
        """Return the complete header text for *document*."""
        blocks = list(self.render_blocks(document))
        logger.info("Rendered %d chat message(s).", len(blocks))
        return self.preamble() + "".join(blocks) + self.postamble()

    def preamble(self) -> str:
        options = self._options
        lines: list[str] = []

        if options.use_pragma_once:
            lines.append("#pragma once\n\n")
        if options.pch:
            lines.append(f"#include {options.pch}\n")
        lines.extend(f"#include {header}\n" for header in options.header_files)
        lines.append("\n\n")
        if options.namespace:
            lines.append(f"namespace {options.namespace}\n{{\n\n")
        lines.append(_BASE_DECLARATION)

        return "".join(lines)

    def postamble(self) -> str:
        return "\n}\n" if self._options.namespace else ""


def generate(options_document: Any, content_document: Any) -> str:
    """Generate the header text from decoded options and content documents.

    Args:
        options_document: Decoded options JSON.
        content_document: Decoded content JSON.

    Returns:
        The generated C++ header.

    Raises:
        GeneratorError: Any subclass, on malformed input.  Nothing is
                        returned in that case.
    """
    return _generate(load_options(options_document), content_document)


def generate_from_text(options_text: str, content_text: str) -> str:
    """Decode the two JSON documents and :func:`generate` the header.

    The options document is decoded and validated before the content
    document is touched.

    Raises:
        MalformedDocumentError: If either text is not valid JSON or nests too
                                deeply to decode.
        GeneratorError:         Any other subclass, as for :func:`generate`.
    """
    options = load_options(_decode(options_text, "options"))
    return _generate(options, _decode(content_text, "content"))


def _generate(options: GeneratorOptions, content_document: Any) -> str:
    languages = build_language_table(content_document)
    logger.debug("Loaded %d language(s).", len(languages))
    return DocumentAssembler(options, languages).assemble(content_document)


def _decode(text: str, document: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise MalformedDocumentError(document, f"invalid JSON ({exc})", cause=exc) from exc
    except RecursionError as exc:
        raise MalformedDocumentError(document, "nesting too deep", cause=exc) from exc
