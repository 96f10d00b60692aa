"""Chat message → C++ header generator.

This package turns a multilingual chat message dataset into a C++ header of
``inline constexpr`` message objects, each holding a fixed-size
``std::array<std::string_view, N>`` of per-language literals.

Package structure
-----------------
errors.py     GeneratorError hierarchy: every fatal failure of a run.
options.py    GeneratorOptions: frozen options loaded from the options JSON.
languages.py  build_language_table: language id → enum member name.
messages.py   ChatMessage / Variant: the message model, plus filtering of
              non-message entries in ``chatMessages``.
renderer.py   MessageRenderer: one message → one C++ block, with the index
              and literal strategies chosen from the options.
assembler.py  DocumentAssembler / generate: preamble, blocks, postamble;
              generate_from_text also decodes the JSON text.

Typical call flow
-----------------
1. ``load_options(options_document)``
2. ``build_language_table(content_document)``
3. ``DocumentAssembler(options, languages).assemble(content_document)``

``generate()`` performs all three steps.
"""

from chat_codegen.generator.assembler import DocumentAssembler, generate, generate_from_text
from chat_codegen.generator.errors import (
    FieldAccessError,
    GeneratorError,
    MalformedDocumentError,
    TypeMismatchError,
    UnknownLanguageError,
)
from chat_codegen.generator.languages import build_language_table
from chat_codegen.generator.messages import ChatMessage, Variant, parse_message
from chat_codegen.generator.options import GeneratorOptions, load_options
from chat_codegen.generator.renderer import MessageRenderer

__all__ = [
    "ChatMessage",
    "DocumentAssembler",
    "FieldAccessError",
    "GeneratorError",
    "GeneratorOptions",
    "MalformedDocumentError",
    "MessageRenderer",
    "TypeMismatchError",
    "UnknownLanguageError",
    "Variant",
    "build_language_table",
    "generate",
    "generate_from_text",
    "load_options",
    "parse_message",
]
