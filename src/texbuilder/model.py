"""
Core Document Model Objects

Defines the typed values consumed by the content builder:
    - Enumerated keywords (document classes, class options, color models,
      filecontents options, environments)
    - Custom keywords (caller-supplied escape hatch)
    - Environment parameter objects (array, figure, minipage, ...)
    - Preamble description (document class + packages)

ARCHITECTURAL RULE:
    These objects:
        - Never write to a document; only the builder appends
        - Are immutable where they describe an environment
        - Hold already-rendered strings, never closures

    Environment params accept closures as field values and render each one
    once, at construction, against a fresh ContentBuilder. builder imports
    this module, so that import is deferred until a params object is built.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, ClassVar, List, Optional, Tuple, Type, Union


class DocumentClass(Enum):
    """Standard LaTeX document classes."""
    ARTICLE = "article"
    BOOK = "book"
    LETTER = "letter"
    REPORT = "report"
    SLIDES = "slides"


class DocumentClassOption(Enum):
    """
    Options accepted by the standard document classes.

    Paper sizes, draft/final, equation layout, title page handling,
    column and side layout.
    """

    # Paper size
    A4_PAPER = "a4paper"
    A5_PAPER = "a5paper"
    B5_PAPER = "b5paper"
    EXECUTIVE_PAPER = "executivepaper"
    LEGAL_PAPER = "legalpaper"
    LETTER_PAPER = "letterpaper"

    DRAFT = "draft"
    FINAL = "final"

    # Equations
    FLEQN = "fleqn"
    LEQNO = "leqno"

    LANDSCAPE = "landscape"
    OPEN_BIB = "openbib"
    TITLE_PAGE = "titlepage"
    NOT_TITLE_PAGE = "notitlepage"

    # Layout
    ONE_COLUMN = "onecolumn"
    TWO_COLUMN = "twocolumn"
    ONE_SIDE = "oneside"
    TWO_SIDE = "twoside"
    OPEN_RIGHT = "openright"
    OPEN_ANY = "openany"


class ColorModel(Enum):
    """Color models understood by \\textcolor (xcolor)."""
    CMYK = "cmyk"
    GRAY = "gray"
    RGB = "rgb"
    RGB_FULL = "RGB"  # 0-255 integer components
    NAMED = "named"


class FileContentsOption(Enum):
    """Options of the filecontents environment."""
    FORCE = "force"
    OVERWRITE = "overwrite"
    NO_HEADER = "noheader"
    NO_SEARCH = "nosearch"


class Environment(Enum):
    """
    Environment keywords.

    Members without parameters can be passed to ``ContentBuilder.env``
    directly. Parametrized environments (array, figure, ...) are passed as
    their params object, which names its kind here.
    """

    ABSTRACT = "abstract"
    ARRAY = "array"
    CENTER = "center"
    DESCRIPTION = "description"
    DISPLAY_MATH = "displaymath"
    DOCUMENT = "document"
    ENUMERATE = "enumerate"
    EQN_ARRAY = "eqnarray"
    EQUATION = "equation"
    FIGURE = "figure"
    FILE_CONTENTS = "filecontents"
    FLUSH_LEFT = "flushleft"
    FLUSH_RIGHT = "flushright"
    ITEMIZE = "itemize"
    LIST = "list"
    MATH = "math"
    MINIPAGE = "minipage"
    PICTURE = "picture"
    QUOTATION = "quotation"
    QUOTE = "quote"
    TABBING = "tabbing"
    TABLE = "table"
    TABULAR = "tabular"
    THE_BIBLIOGRAPHY = "thebibliography"
    THEOREM = "theorem"
    TITLE_PAGE = "titlepage"
    TRIV_LIST = "trivlist"
    VERBATIM = "verbatim"
    VERSE = "verse"


@dataclass(frozen=True)
class Custom:
    """
    A caller-supplied keyword, accepted wherever an enumerated keyword is.

    Examples:
        Custom("memoir")      as a document class
        Custom("11pt")        as a class option
        Custom("align*")      as an environment

    IMPORTANT:
        The keyword is emitted verbatim. Nothing checks that LaTeX knows it.
    """

    keyword: str


Keyword = Union[Enum, Custom, str]


def coerce_keyword(value: Keyword, enum_type: Type[Enum]) -> Keyword:
    """Map a plain string onto its enum member, or wrap it in Custom when unknown."""
    if not isinstance(value, str):
        return value
    try:
        return enum_type(value)
    except ValueError:
        return Custom(value)


# A literal string, or a closure filled in against a fresh ContentBuilder.
Content = Union[str, Callable[[Any], Any]]


def _materialize(content: Content) -> str:
    # Deferred import: builder imports this module.
    from .builder import render_content
    return render_content(content)


def _materialize_optional(content: Optional[Content]) -> Optional[str]:
    if content is None:
        return None
    return _materialize(content)


def _materialize_pair(pair: Optional[Tuple[Content, Content]]) -> Optional[Tuple[str, str]]:
    if pair is None:
        return None
    first, second = pair
    return (_materialize(first), _materialize(second))


class EnvironmentParams:
    """
    Base class for environment parameter objects.

    Subclasses set ``kind`` and are frozen dataclasses. Text fields accept
    Content and are rendered to strings in ``__post_init__``.
    """

    kind: ClassVar[Environment]

    def _render_fields(self, *names: str) -> None:
        for name in names:
            object.__setattr__(self, name, _materialize_optional(getattr(self, name)))


@dataclass(frozen=True)
class ArrayParams(EnvironmentParams):
    """
    Parameters of the array environment.

    Properties:
        cols: Column specification (e.g. "lcr")
        pos: Optional vertical alignment (t, b, c)
    """

    kind: ClassVar[Environment] = Environment.ARRAY

    cols: Content
    pos: Optional[Content] = None

    def __post_init__(self) -> None:
        self._render_fields("cols", "pos")


@dataclass(frozen=True)
class TabularParams(EnvironmentParams):
    """Parameters of the tabular environment (same shape as array)."""

    kind: ClassVar[Environment] = Environment.TABULAR

    cols: Content
    pos: Optional[Content] = None

    def __post_init__(self) -> None:
        self._render_fields("cols", "pos")


@dataclass(frozen=True)
class FigureParams(EnvironmentParams):
    """
    Parameters of the figure environment.

    The placement is written right after \\begin{figure} exactly as given,
    so callers include the brackets themselves: FigureParams("[htbp]").
    """

    kind: ClassVar[Environment] = Environment.FIGURE

    placement: Content

    def __post_init__(self) -> None:
        self._render_fields("placement")


@dataclass(frozen=True)
class FileContentsParams(EnvironmentParams):
    """Parameters of the filecontents environment."""

    kind: ClassVar[Environment] = Environment.FILE_CONTENTS

    filename: Content
    option: Optional[Keyword] = None

    def __post_init__(self) -> None:
        self._render_fields("filename")


@dataclass(frozen=True)
class ListParams(EnvironmentParams):
    """
    Parameters of the generic list environment.

    labeling and spacing are emitted verbatim, in that order, so they carry
    their own braces: ListParams("{$\\bullet$}", "{}").
    """

    kind: ClassVar[Environment] = Environment.LIST

    labeling: Content
    spacing: Content

    def __post_init__(self) -> None:
        self._render_fields("labeling", "spacing")


@dataclass(frozen=True)
class MinipageParams(EnvironmentParams):
    """
    Parameters of the minipage environment.

    Properties:
        width: Required box width (e.g. "0.5\\textwidth")
        position: Optional outer alignment (t, b, c)
        height: Optional box height
        inner_pos: Optional inner alignment (t, b, c, s)

    The three optional arguments are positional in LaTeX, so a missing one
    is written as an empty pair of brackets.
    """

    kind: ClassVar[Environment] = Environment.MINIPAGE

    width: Content
    position: Optional[Content] = None
    height: Optional[Content] = None
    inner_pos: Optional[Content] = None

    def __post_init__(self) -> None:
        self._render_fields("width", "position", "height", "inner_pos")


@dataclass(frozen=True)
class PictureParams(EnvironmentParams):
    """Parameters of the picture environment: (width,height) and optional (x,y) offset."""

    kind: ClassVar[Environment] = Environment.PICTURE

    size: Tuple[Content, Content]
    offset: Optional[Tuple[Content, Content]] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "size", _materialize_pair(self.size))
        object.__setattr__(self, "offset", _materialize_pair(self.offset))


@dataclass(frozen=True)
class TableParams(EnvironmentParams):
    """Parameters of the table float: optional placement specifier (e.g. "htbp")."""

    kind: ClassVar[Environment] = Environment.TABLE

    placement: Optional[Content] = None

    def __post_init__(self) -> None:
        self._render_fields("placement")


@dataclass(frozen=True)
class TheBibliographyParams(EnvironmentParams):
    """Parameters of thebibliography: the widest label, used to size the label column."""

    kind: ClassVar[Environment] = Environment.THE_BIBLIOGRAPHY

    widest_label: Content

    def __post_init__(self) -> None:
        self._render_fields("widest_label")


@dataclass
class PackageSpec:
    """
    A \\usepackage directive.

    Properties:
        name: Package name (e.g. "amsmath")
        options: Package options, emitted comma-joined in order
    """

    name: str
    options: List[Keyword] = field(default_factory=list)


@dataclass
class Preamble:
    """
    Declarative description of a document preamble.

    This is configuration, not markup. ContentBuilder.apply_preamble turns
    it into the \\documentclass directive followed by each \\usepackage
    directive, in list order.

    Plain strings given for the document class or its options are
    normalized on construction: known keywords become enum members, the
    rest become Custom. Package options stay free-form strings.
    """

    document_class: Keyword = DocumentClass.ARTICLE
    class_options: List[Keyword] = field(default_factory=list)
    packages: List[PackageSpec] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.document_class = coerce_keyword(self.document_class, DocumentClass)
        self.class_options = [coerce_keyword(o, DocumentClassOption) for o in self.class_options]

    def get_package(self, name: str) -> Optional[PackageSpec]:
        """
        Retrieve a package by name.

        Returns:
            PackageSpec or None if not declared
        """
        for package in self.packages:
            if package.name == name:
                return package
        return None
