"""
Sequential LaTeX content builder.

ContentBuilder owns a single append-only buffer. Each method appends one
fixed-format fragment, in call order, and build_document() returns the
accumulated text.

Every text argument is Content: either a literal string, or a closure that
receives a fresh ContentBuilder and whose output becomes the argument text.

    builder.section(lambda b: (b.add_literal("Results for "), b.text_italic("n=3")))

IMPORTANT:
    No method validates, escapes or balances anything. Unknown keywords,
    special characters and mismatched environments pass through unchanged.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

from texbuilder.backends.latex import (
    EnvironmentSpec,
    format_options,
    keyword,
    optional_arg,
    render_environment,
)
from texbuilder.model import ColorModel, Content, Keyword, Preamble


def render_content(content: Content) -> str:
    """
    Materialize Content into a string.

    A callable is run against a fresh ContentBuilder and that builder's
    output is returned. Anything else is stringified.
    """
    if callable(content):
        nested = ContentBuilder()
        content(nested)
        return nested.build_document()
    return str(content)


class ContentBuilder:
    """
    Builder for LaTeX documents.

    Example:
        builder = ContentBuilder()
        builder.set_document_class(DocumentClass.ARTICLE)
        builder.begin_document()
        builder.title("Example Document")
        builder.end_document()
        print(builder.build_document())
    """

    def __init__(self) -> None:
        self._parts: List[str] = []

    def _append(self, fragment: str) -> None:
        self._parts.append(fragment)

    def build_document(self) -> str:
        """Return everything appended so far."""
        return "".join(self._parts)

    # =========================================================================
    # DIRECTIVES
    # =========================================================================

    def set_document_class(self, document_class: Keyword, options: Iterable[Keyword] = ()) -> None:
        """Append \\documentclass[options]{class}."""
        self._append(f"\\documentclass{format_options(options)}{{{keyword(document_class)}}}\n")

    def use_package(self, package: str, options: Iterable[Keyword] = ()) -> None:
        """Append \\usepackage[options]{package}."""
        self._append(f"\\usepackage{format_options(options)}{{{keyword(package)}}}\n")

    def apply_preamble(self, preamble: Preamble) -> None:
        """Append the document class directive, then one \\usepackage per declared package."""
        self.set_document_class(preamble.document_class, preamble.class_options)
        for package in preamble.packages:
            self.use_package(package.name, package.options)

    def add_literal(self, text: str) -> None:
        self._append(text)

    # =========================================================================
    # FIXED MARKERS
    # =========================================================================

    def begin_document(self) -> None:
        self._append("\\begin{document}\n")

    def end_document(self) -> None:
        self._append("\\end{document}\n")

    def maketitle(self) -> None:
        self._append("\\maketitle\n")

    def new_line(self) -> None:
        self._append("\\\\\n")

    def clear_page(self) -> None:
        self._append("\\clearpage\n")

    def new_page(self) -> None:
        self._append("\\newpage\n")

    def line_break(self) -> None:
        self._append("\\linebreak\n")

    def page_break(self) -> None:
        self._append("\\pagebreak\n")

    def no_indent(self) -> None:
        self._append("\\noindent\n")

    def centering(self) -> None:
        self._append("\\centering\n")

    # =========================================================================
    # COMMANDS
    # =========================================================================

    def _command(self, name: str, content: Content, end: str = "") -> None:
        self._append(f"\\{name}{{{render_content(content)}}}{end}")

    def title(self, title: Content) -> None:
        self._command("title", title, end="\n")

    def author(self, author: Content) -> None:
        self._command("author", author, end="\n")

    def text_bold(self, text: Content) -> None:
        self._command("textbf", text)

    def text_italic(self, text: Content) -> None:
        self._command("textit", text)

    def text_underline(self, text: Content) -> None:
        self._command("underline", text)

    def label(self, label: Content) -> None:
        self._command("label", label, end="\n")

    def section(self, title: Content) -> None:
        self._command("section", title, end="\n")

    def subsection(self, title: Content) -> None:
        self._command("subsection", title, end="\n")

    def subsubsection(self, title: Content) -> None:
        self._command("subsubsection", title, end="\n")

    def paragraph(self, text: Content) -> None:
        self._command("paragraph", text, end="\n")

    def subparagraph(self, text: Content) -> None:
        self._command("subparagraph", text, end="\n")

    def footnote(self, text: Content) -> None:
        self._command("footnote", text)

    def cite(self, citation: Content, subcitation: Optional[Content] = None) -> None:
        """
        Append \\cite[subcitation]{citation}.

        Args:
            citation: Citation key(s)
            subcitation: Optional note such as a page ("p. 42")
        """
        sub = "" if subcitation is None else optional_arg(render_content(subcitation))
        self._append(f"\\cite{sub}{{{render_content(citation)}}}")

    def ref_label(self, label: Content) -> None:
        self._command("ref", label)

    def text_color(self, text: Content, color: Content, color_model: Optional[ColorModel] = None) -> None:
        """Append \\textcolor[model]{color}{text}; the model bracket is left out when not given."""
        self._append(
            f"\\textcolor{optional_arg(color_model)}"
            f"{{{render_content(color)}}}{{{render_content(text)}}}"
        )

    def hspace(self, length: Content) -> None:
        self._command("hspace", length)

    def vspace(self, length: Content) -> None:
        self._command("vspace", length)

    def include(self, filename: Content) -> None:
        self._command("include", filename, end="\n")

    def input(self, filename: Content) -> None:
        self._command("input", filename, end="\n")

    def item(self, content: Content) -> None:
        """Append a list item: \\item {content}."""
        self._append(f"\\item {{{render_content(content)}}}\n")

    # =========================================================================
    # ENVIRONMENTS
    # =========================================================================

    def env(self, environment: EnvironmentSpec, content: Content) -> None:
        """
        Append an environment block.

        Args:
            environment: An Environment member, an environment params object
                (ArrayParams, FigureParams, ...), or a Custom/str keyword
            content: Body of the environment

        The body is rendered completely before anything is appended.
        """
        body = render_content(content)
        self._append(render_environment(environment, body))

    def __str__(self) -> str:
        return self.build_document()
