"""Tests for command templates with named slots."""

import pytest

from compbench.errors import TemplateError
from compbench.templates import COMPRESS_SLOTS, DECOMPRESS_SLOTS, CommandTemplate, is_shell_safe


class TestRendering:
    def test_named_slots(self):
        template = CommandTemplate("zstd {input} -o {output}.zst")
        assert template.render(input="corpora/a", output="output/a") == (
            "zstd corpora/a -o output/a.zst"
        )

    def test_positional_aliases(self):
        template = CommandTemplate("zstd $1 -o $2", COMPRESS_SLOTS)
        assert template.render(input="corpora/a.bin", output="output/a.bin") == (
            "zstd corpora/a.bin -o output/a.bin"
        )

    def test_decompress_positional_alias_is_output(self):
        template = CommandTemplate("brotli -d $1.br -o $1", DECOMPRESS_SLOTS)
        assert template.render(output="output/a") == "brotli -d output/a.br -o output/a"

    def test_every_occurrence_replaced(self):
        template = CommandTemplate("tool d {output}.pt {output}", DECOMPRESS_SLOTS)
        rendered = template.render(output="out/x")
        assert rendered == "tool d out/x.pt out/x"
        assert "{output}" not in rendered

    def test_mixed_named_and_positional(self):
        template = CommandTemplate("tool c $1 {output}.x")
        assert template.render(input="i", output="o") == "tool c i o.x"

    def test_shell_expansion_untouched(self):
        template = CommandTemplate("tool {input} ${HOME}/{output}")
        assert template.render(input="a", output="b") == "tool a ${HOME}/b"

    def test_single_pass_substitution(self):
        template = CommandTemplate("tool {input} {output}")
        assert template.render(input="{output}", output="x") == "tool {output} x"

    def test_missing_value(self):
        template = CommandTemplate("zstd {input} -o {output}")
        with pytest.raises(TemplateError):
            template.render(input="a")

    def test_unexpected_value(self):
        template = CommandTemplate("zstd -d {output}.zst -o {output}", DECOMPRESS_SLOTS)
        with pytest.raises(TemplateError):
            template.render(output="a", input="b")


class TestParsing:
    def test_program(self):
        assert CommandTemplate("build/packingtape c {input} {output}.pt").program == (
            "build/packingtape"
        )

    def test_markers(self):
        template = CommandTemplate("zstd $1 -o {output}.zst")
        assert list(template.markers()) == ["$1", "{output}"]

    def test_unknown_slot(self):
        with pytest.raises(TemplateError, match="Unknown slot"):
            CommandTemplate("zstd {input} -o {target}")

    def test_positional_out_of_range(self):
        with pytest.raises(TemplateError, match="out of range"):
            CommandTemplate("zstd $1 -o $3")

    def test_positional_zero(self):
        with pytest.raises(TemplateError):
            CommandTemplate("zstd $0 -o $2")

    def test_unused_slot(self):
        with pytest.raises(TemplateError, match="never uses"):
            CommandTemplate("zstd {input}")

    def test_duplicate_slot_names(self):
        with pytest.raises(TemplateError, match="Duplicate"):
            CommandTemplate("tool {path}", ("path", "path"))

    def test_empty_template(self):
        with pytest.raises(TemplateError):
            CommandTemplate("   ")

    def test_template_error_is_value_error(self):
        with pytest.raises(ValueError):
            CommandTemplate("")


class TestShellSafety:
    def test_plain_words(self):
        assert is_shell_safe("corpora")
        assert is_shell_safe("test/finnish-bank-utils.min.js")
        assert is_shell_safe(".fpaq0")

    def test_empty(self):
        assert not is_shell_safe("")

    def test_unsafe_characters(self):
        for value in ["a b", "a\tb", 'a"b', "a'b", "a`b", "a$b", "a\\b"]:
            assert not is_shell_safe(value), value
