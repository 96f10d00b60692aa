"""C++ block renderer for chat messages.

``MessageRenderer`` turns one :class:`~chat_codegen.generator.messages.ChatMessage`
into a block of C++ declaring an anonymous class derived from
``internal::ChatMessageBase`` plus an ``inline constexpr`` instance named
after the message.

Two independent choices shape each assignment line and are made once, when
the renderer is built:

Index strategy
    :class:`PositionalIndex` numbers the variants ``0..N-1``;
    :class:`EnumIndex` emits ``static_cast<int>(<languageEnum>::<name>)``
    using the language table.

Literal strategy
    :func:`quoted_literal` emits ``"text"``; :func:`compile_macro_literal`
    emits ``FMT_COMPILE("text")``.

Text is never escaped.  The content pipeline upstream is expected to hand
over ``processed`` strings that are already valid inside a C++ literal.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol

from chat_codegen.generator.errors import UnknownLanguageError
from chat_codegen.generator.languages import LanguageTable
from chat_codegen.generator.messages import ChatMessage, Variant
from chat_codegen.generator.options import GeneratorOptions

#: Marker wrapped around each literal when ``useCompileMacro`` is on.
COMPILE_MACRO = "FMT_COMPILE"

#: Base type every generated message class derives from.
BASE_TYPE = "internal::ChatMessageBase"

_BLOCK_TEMPLATE = (
    '// "{comment}"\n'
    "class \n\t: public {base}\n"
    "{{\n"
    "\tstatic constexpr auto generateContent = []\n\t{{\n"
    "\t\tstd::array<std::string_view, {size}> result;\n"
    "{assignments}"
    "\t\treturn result;\n"
    "\t}};\n"
    "public:\n"
    "\tstatic constexpr auto text = generateContent();\n"
    "}} inline constexpr {name};\n\n"
)

LiteralStrategy = Callable[[str], str]


class IndexStrategy(Protocol):
    def __call__(self, message: ChatMessage, ordinal: int, variant: Variant) -> str: ...


# ── Index strategies ──────────────────────────────────────────────────────────


class PositionalIndex:
    """Index each variant by its zero-based position in the message."""

    def __call__(self, message: ChatMessage, ordinal: int, variant: Variant) -> str:
        return str(ordinal)


class EnumIndex:
    """Index each variant by a member of the configured language enum.

    Attributes:
        _language_enum: Qualified enum type, e.g. ``"game::Languages"``.
        _languages:     Language id to enum member name.
    """

    def __init__(self, language_enum: str, languages: LanguageTable) -> None:
        self._language_enum = language_enum
        self._languages = languages

    def __call__(self, message: ChatMessage, ordinal: int, variant: Variant) -> str:
        name = self._languages.get(variant.language_id)
        if name is None:
            raise UnknownLanguageError(variant.language_id, message.unique_name)
        return f"static_cast<int>({self._language_enum}::{name})"


# ── Literal strategies ────────────────────────────────────────────────────────


def quoted_literal(text: str) -> str:
    return f'"{text}"'


def compile_macro_literal(text: str) -> str:
    return f'{COMPILE_MACRO}("{text}")'


# ── Renderer ──────────────────────────────────────────────────────────────────


class MessageRenderer:
    """Render chat messages as C++ blocks.

    One renderer is built per run from the options and language table and
    reused for every message.  It holds no per-message state.
    """

    def __init__(self, options: GeneratorOptions, languages: LanguageTable) -> None:
        self._index: IndexStrategy
        if options.language_enum:
            self._index = EnumIndex(options.language_enum, languages)
        else:
            self._index = PositionalIndex()

        self._literal: LiteralStrategy = (
            compile_macro_literal if options.use_compile_macro else quoted_literal
        )

    def render(self, message: ChatMessage) -> str:
        """Return the C++ block for *message*, ending with a blank line.

        Raises:
            UnknownLanguageError: If enum indexing is active and a variant's
                                  language is not in the language table.
        """
        assignments = "".join(
            self._render_assignment(message, ordinal, variant)
            for ordinal, variant in enumerate(message.variants)
        )
        return _BLOCK_TEMPLATE.format(
            comment=message.comment,
            base=BASE_TYPE,
            size=len(message.variants),
            assignments=assignments,
            name=message.unique_name,
        )

    def _render_assignment(self, message: ChatMessage, ordinal: int, variant: Variant) -> str:
        index = self._index(message, ordinal, variant)
        return f"\t\tresult[{index}] = {self._literal(variant.text)};\n"
