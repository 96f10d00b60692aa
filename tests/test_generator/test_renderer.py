"""Unit tests for MessageRenderer and its index/literal strategies."""

import re

import pytest

from chat_codegen.generator.errors import UnknownLanguageError
from chat_codegen.generator.messages import ChatMessage, Variant
from chat_codegen.generator.options import GeneratorOptions
from chat_codegen.generator.renderer import (
    EnumIndex,
    MessageRenderer,
    PositionalIndex,
    compile_macro_literal,
    quoted_literal,
)

LANGUAGES = {"en": "English", "pl": "Polish", "de": "German"}

GREETING = ChatMessage(
    unique_name="Greeting",
    comment="Player joins",
    variants=(Variant("en", "Hello"), Variant("pl", "Witaj"), Variant("de", "Hallo")),
)


def _assignments(block: str) -> list[str]:
    return [line for line in block.splitlines() if line.startswith("\t\tresult[")]


@pytest.fixture
def renderer():
    return MessageRenderer(GeneratorOptions(), LANGUAGES)


class TestLiteralStrategies:
    def test_quoted_literal(self):
        assert quoted_literal("Hi") == '"Hi"'

    def test_compile_macro_literal(self):
        assert compile_macro_literal("Hi") == 'FMT_COMPILE("Hi")'

    def test_no_escaping(self):
        assert quoted_literal('a "b" \\n') == '"a "b" \\n"'


class TestIndexStrategies:
    def test_positional_uses_ordinal(self):
        index = PositionalIndex()
        assert index(GREETING, 2, GREETING.variants[2]) == "2"

    def test_enum_uses_language_name(self):
        index = EnumIndex("game::Languages", LANGUAGES)
        assert (
            index(GREETING, 0, GREETING.variants[0]) == "static_cast<int>(game::Languages::English)"
        )

    def test_enum_unknown_language_raises(self):
        index = EnumIndex("game::Languages", {"en": "English"})
        with pytest.raises(UnknownLanguageError) as excinfo:
            index(GREETING, 1, GREETING.variants[1])
        assert excinfo.value.language_id == "pl"
        assert excinfo.value.unique_name == "Greeting"


class TestRenderBlock:
    def test_exact_single_variant_block(self, renderer):
        message = ChatMessage("Greeting", "c", (Variant("en", "Hi"),))
        assert renderer.render(message) == (
            '// "c"\n'
            "class \n"
            "\t: public internal::ChatMessageBase\n"
            "{\n"
            "\tstatic constexpr auto generateContent = []\n"
            "\t{\n"
            "\t\tstd::array<std::string_view, 1> result;\n"
            '\t\tresult[0] = FMT_COMPILE("Hi");\n'
            "\t\treturn result;\n"
            "\t};\n"
            "public:\n"
            "\tstatic constexpr auto text = generateContent();\n"
            "} inline constexpr Greeting;\n"
            "\n"
        )

    def test_positional_indices_cover_all_variants(self, renderer):
        block = renderer.render(GREETING)
        indices = [re.match(r"\t\tresult\[(\d+)\]", line).group(1) for line in _assignments(block)]
        assert indices == ["0", "1", "2"]

    def test_array_size_matches_variant_count(self, renderer):
        assert "std::array<std::string_view, 3> result;" in renderer.render(GREETING)

    def test_zero_variants(self, renderer):
        block = renderer.render(ChatMessage("Empty", "", ()))
        assert "std::array<std::string_view, 0> result;" in block
        assert _assignments(block) == []
        assert block.startswith('// ""\n')
        assert "} inline constexpr Empty;\n" in block

    def test_braces_in_comment_and_text_are_literal(self, renderer):
        message = ChatMessage("Fmt", "uses {} placeholders", (Variant("en", "{} joined"),))
        block = renderer.render(message)
        assert '// "uses {} placeholders"' in block
        assert 'result[0] = FMT_COMPILE("{} joined");' in block


class TestRenderStrategySelection:
    def test_compile_macro_wraps_every_literal(self, renderer):
        lines = _assignments(renderer.render(GREETING))
        assert all("FMT_COMPILE(" in line for line in lines)

    def test_plain_literals_without_compile_macro(self):
        plain = MessageRenderer(GeneratorOptions(use_compile_macro=False), LANGUAGES)
        block = plain.render(GREETING)
        assert "FMT_COMPILE" not in block
        assert '\t\tresult[1] = "Witaj";' in block

    def test_enum_indexing(self):
        options = GeneratorOptions(language_enum="game::Languages")
        enum_renderer = MessageRenderer(options, LANGUAGES)
        lines = _assignments(enum_renderer.render(GREETING))
        assert lines == [
            '\t\tresult[static_cast<int>(game::Languages::English)] = FMT_COMPILE("Hello");',
            '\t\tresult[static_cast<int>(game::Languages::Polish)] = FMT_COMPILE("Witaj");',
            '\t\tresult[static_cast<int>(game::Languages::German)] = FMT_COMPILE("Hallo");',
        ]

    def test_enum_indexing_unknown_language(self):
        enum_renderer = MessageRenderer(
            GeneratorOptions(language_enum="game::Languages"), {"en": "English"}
        )
        with pytest.raises(UnknownLanguageError):
            enum_renderer.render(GREETING)

    def test_positional_indexing_ignores_language_table(self):
        positional = MessageRenderer(GeneratorOptions(), {})
        assert len(_assignments(positional.render(GREETING))) == 3
