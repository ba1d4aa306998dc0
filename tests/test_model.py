"""
Tests for texbuilder model objects.

These tests verify:
    - Enum members map to the expected keywords
    - Custom keywords
    - Environment params are frozen and materialize nested content
    - Preamble defaults and lookup
"""

import dataclasses

import pytest
from texbuilder.model import (
    ArrayParams,
    ColorModel,
    Custom,
    DocumentClass,
    DocumentClassOption,
    Environment,
    FigureParams,
    FileContentsOption,
    FileContentsParams,
    MinipageParams,
    PackageSpec,
    PictureParams,
    Preamble,
    TableParams,
    TheBibliographyParams,
)


class TestKeywords:
    """Test enum keyword values."""

    def test_document_classes(self):
        assert [c.value for c in DocumentClass] == ["article", "book", "letter", "report", "slides"]

    def test_document_class_options(self):
        assert DocumentClassOption.A4_PAPER.value == "a4paper"
        assert DocumentClassOption.NOT_TITLE_PAGE.value == "notitlepage"
        assert DocumentClassOption.OPEN_ANY.value == "openany"
        assert len(DocumentClassOption) == 20

    def test_color_models_are_case_sensitive(self):
        """rgb and RGB are different models."""
        assert ColorModel.RGB.value == "rgb"
        assert ColorModel.RGB_FULL.value == "RGB"

    def test_file_contents_options(self):
        assert [o.value for o in FileContentsOption] == ["force", "overwrite", "noheader", "nosearch"]

    def test_environment_keywords(self):
        assert Environment.DISPLAY_MATH.value == "displaymath"
        assert Environment.THE_BIBLIOGRAPHY.value == "thebibliography"
        assert Environment.TRIV_LIST.value == "trivlist"
        assert len(Environment) == 29

    def test_custom_keyword(self):
        assert Custom("memoir").keyword == "memoir"
        assert Custom("memoir") == Custom("memoir")


class TestEnvironmentParams:
    """Test environment parameter objects."""

    def test_params_name_their_kind(self):
        assert ArrayParams("c").kind is Environment.ARRAY
        assert FigureParams("[h]").kind is Environment.FIGURE
        assert MinipageParams("3cm").kind is Environment.MINIPAGE
        assert TheBibliographyParams("9").kind is Environment.THE_BIBLIOGRAPHY

    def test_params_are_frozen(self):
        params = TableParams("h")
        with pytest.raises(dataclasses.FrozenInstanceError):
            params.placement = "t"

    def test_optional_fields_default_to_none(self):
        params = MinipageParams("0.5\\textwidth")
        assert params.position is None
        assert params.height is None
        assert params.inner_pos is None
        assert TableParams().placement is None

    def test_closure_fields_are_materialized(self):
        """Closures passed as fields become strings at construction."""
        params = ArrayParams(lambda b: b.add_literal("l|r"), pos=lambda b: b.add_literal("t"))
        assert params.cols == "l|r"
        assert params.pos == "t"

    def test_picture_pairs_are_materialized(self):
        params = PictureParams(size=("100", lambda b: b.add_literal("50")), offset=(10, 20))
        assert params.size == ("100", "50")
        assert params.offset == ("10", "20")

    def test_file_contents_option_kept_as_keyword(self):
        params = FileContentsParams("data.csv", FileContentsOption.FORCE)
        assert params.filename == "data.csv"
        assert params.option is FileContentsOption.FORCE


class TestPreamble:
    """Test Preamble objects."""

    def test_defaults(self):
        preamble = Preamble()
        assert preamble.document_class is DocumentClass.ARTICLE
        assert preamble.class_options == []
        assert preamble.packages == []

    def test_get_package(self):
        preamble = Preamble(packages=[PackageSpec("amsmath", ["fleqn"]), PackageSpec("graphicx")])
        assert preamble.get_package("amsmath").options == ["fleqn"]
        assert preamble.get_package("hyperref") is None

    def test_default_lists_not_shared(self):
        a = Preamble()
        b = Preamble()
        a.packages.append(PackageSpec("amsmath"))
        assert b.packages == []


class TestPreambleNormalization:
    """Plain strings in a Preamble become enum members or Custom."""

    def test_known_strings_become_members(self):
        preamble = Preamble(document_class="report", class_options=["twocolumn"])
        assert preamble.document_class is DocumentClass.REPORT
        assert preamble.class_options == [DocumentClassOption.TWO_COLUMN]

    def test_unknown_strings_become_custom(self):
        preamble = Preamble(document_class="memoir", class_options=["11pt"])
        assert preamble.document_class == Custom("memoir")
        assert preamble.class_options == [Custom("11pt")]

    def test_package_options_stay_strings(self):
        preamble = Preamble(packages=[PackageSpec("amsmath", ["fleqn"])])
        assert preamble.packages[0].options == ["fleqn"]


class TestParamsRenderWithFreshBuilder:
    """Closures in params run against their own builder at construction."""

    def test_closure_runs_once_on_fresh_builder(self):
        from texbuilder.builder import ContentBuilder

        seen = []

        def fill(b):
            seen.append(b)
            b.text_bold("w")

        params = MinipageParams(fill)
        assert params.width == "\\textbf{w}"
        assert len(seen) == 1
        assert isinstance(seen[0], ContentBuilder)
        assert seen[0].build_document() == "\\textbf{w}"
