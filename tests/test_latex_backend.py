"""
Tests for the LaTeX formatting backend.

Covers the helpers the builder delegates to and .tex file output.
"""

import logging

import pytest
from texbuilder.backends.latex import (
    environment_args,
    environment_keyword,
    format_options,
    keyword,
    optional_arg,
    render_environment,
    save_document,
)
from texbuilder.builder import ContentBuilder
from texbuilder.model import (
    ArrayParams,
    ColorModel,
    Custom,
    DocumentClass,
    Environment,
    MinipageParams,
    PictureParams,
    TableParams,
)


class TestKeyword:
    """Test keyword resolution."""

    def test_enum_member(self):
        assert keyword(DocumentClass.SLIDES) == "slides"
        assert keyword(ColorModel.RGB_FULL) == "RGB"

    def test_custom(self):
        assert keyword(Custom("scrartcl")) == "scrartcl"

    def test_plain_values(self):
        assert keyword("amsmath") == "amsmath"
        assert keyword(11) == "11"


class TestFormatOptions:
    """Test bracketed option lists."""

    @pytest.mark.parametrize("options", [None, [], ()])
    def test_empty(self, options):
        assert format_options(options) == ""

    def test_empty_generator(self):
        assert format_options(o for o in []) == ""

    def test_single(self):
        assert format_options(["fleqn"]) == "[fleqn]"

    def test_order_preserved(self):
        assert format_options(["b", Custom("a"), "c"]) == "[b,a,c]"


class TestOptionalArg:
    def test_present(self):
        assert optional_arg("t") == "[t]"
        assert optional_arg(ColorModel.GRAY) == "[gray]"

    def test_missing(self):
        assert optional_arg(None) == ""
        assert optional_arg(None, empty="[]") == "[]"


class TestEnvironmentRendering:
    """Test per-environment arguments and full blocks."""

    def test_parameterless_has_no_args(self):
        assert environment_args(Environment.QUOTE) == ""
        assert environment_args(Custom("align")) == ""

    def test_keyword_of_params(self):
        assert environment_keyword(ArrayParams("c")) == "array"
        assert environment_keyword(TableParams()) == "table"
        assert environment_keyword("tikzpicture") == "tikzpicture"

    def test_args(self):
        assert environment_args(ArrayParams("lcr", "b")) == "[b]{lcr}"
        assert environment_args(MinipageParams("1in", inner_pos="s")) == "[][][s]{1in}"
        assert environment_args(PictureParams((1, 2), (3, 4))) == "(1,2)(3,4)"

    def test_same_keyword_both_ends(self):
        block = render_environment(Environment.VERSE, "line")
        assert block.startswith("\\begin{verse}\n")
        assert block.endswith("\\end{verse}\n")

    def test_empty_body(self):
        assert render_environment(Environment.CENTER, "") == "\\begin{center}\n\n\\end{center}\n"


class TestSaveDocument:
    """Test writing .tex files."""

    def test_save_builder(self, tmp_path):
        builder = ContentBuilder()
        builder.begin_document()
        builder.end_document()
        path = tmp_path / "out.tex"
        save_document(builder, path)
        assert path.read_text(encoding="utf-8") == "\\begin{document}\n\\end{document}\n"

    def test_save_string(self, tmp_path):
        path = tmp_path / "plain.tex"
        save_document("\\section{Ünïcode}\n", str(path))
        assert path.read_text(encoding="utf-8") == "\\section{Ünïcode}\n"

    def test_save_logs_path(self, tmp_path, caplog):
        path = tmp_path / "logged.tex"
        with caplog.at_level(logging.INFO, logger="texbuilder.backends.latex"):
            save_document("x", path)
        assert "logged.tex" in caplog.text


class TestSingleOption:
    """A lone keyword is one option, not a sequence of characters."""

    def test_bare_string(self):
        assert format_options("fleqn") == "[fleqn]"

    def test_bare_enum_and_custom(self):
        assert format_options(ColorModel.CMYK) == "[cmyk]"
        assert format_options(Custom("11pt")) == "[11pt]"
