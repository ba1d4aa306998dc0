"""
Example document builder.

Builds a short two-section article exercising nested content, a table
with a tabular body, a figure and a bibliography.
"""
from texbuilder.builder import ContentBuilder
from texbuilder.model import (
    ColorModel,
    DocumentClass,
    DocumentClassOption,
    Environment,
    FigureParams,
    PackageSpec,
    Preamble,
    TableParams,
    TabularParams,
    TheBibliographyParams,
)


def build_example_preamble() -> Preamble:
    return Preamble(
        document_class=DocumentClass.ARTICLE,
        class_options=[DocumentClassOption.A4_PAPER, "11pt"],
        packages=[
            PackageSpec(name="amsmath", options=["fleqn"]),
            PackageSpec(name="graphicx"),
            PackageSpec(name="xcolor"),
        ],
    )


def build_example_document(title: str = "Example Document", rows: int = 3) -> ContentBuilder:
    builder = ContentBuilder()
    builder.apply_preamble(build_example_preamble())
    builder.title(title)
    builder.author("Jane Doe")
    builder.begin_document()
    builder.maketitle()

    builder.env(Environment.ABSTRACT, "A short example built with texbuilder.")

    builder.section(lambda b: (b.add_literal("Introduction to "), b.text_italic("texbuilder")))
    builder.label("sec:intro")
    builder.add_literal("Some ")
    builder.text_bold("bold")
    builder.add_literal(" and ")
    builder.text_color("red", "red", ColorModel.NAMED)
    builder.add_literal(" text")
    builder.footnote("Footnotes take nested content too.")
    builder.add_literal(", as shown in ")
    builder.cite("knuth1984", "p. 42")
    builder.add_literal(".")
    builder.new_line()

    def table_rows(b: ContentBuilder) -> None:
        b.add_literal("Row & Value \\\\ \\hline")
        for i in range(1, rows + 1):
            b.add_literal(f"\n{i} & {i * i} \\\\")

    def table_body(b: ContentBuilder) -> None:
        b.centering()
        b.env(TabularParams("|l|r|"), table_rows)
        b.add_literal("\\caption{Squares}\n")
        b.label("tab:squares")

    builder.section("Results")
    builder.add_literal("See Table~")
    builder.ref_label("tab:squares")
    builder.add_literal(".\n")
    builder.env(TableParams("htbp"), table_body)
    builder.env(
        FigureParams("[h]"),
        lambda b: (b.centering(), b.add_literal("\\includegraphics{plot}")),
    )

    builder.env(
        Environment.ITEMIZE,
        lambda b: (b.item("first"), b.item(lambda inner: inner.text_bold("second"))),
    )

    builder.env(
        TheBibliographyParams("9"),
        "\\bibitem{knuth1984} D. Knuth, \\textit{The TeXbook}, 1984.",
    )
    builder.end_document()
    return builder
