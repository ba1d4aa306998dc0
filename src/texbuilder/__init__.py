"""
texbuilder: programmatic LaTeX document builder.

Typed constructors for document classes, packages, environments, text
formatting and references, appended in call order to a single buffer.

ARCHITECTURAL GUARANTEE:
------------------------
This package contains ZERO knowledge of:
    - Parsing existing documents
    - Validating or escaping markup
    - Compiling to PDF/DVI

It assembles text. The host program owns files and compilation.
"""

from texbuilder.builder import ContentBuilder, render_content
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
    ListParams,
    MinipageParams,
    PackageSpec,
    PictureParams,
    Preamble,
    TableParams,
    TabularParams,
    TheBibliographyParams,
)

__version__ = "0.1.0"

__all__ = [
    "ArrayParams",
    "ColorModel",
    "ContentBuilder",
    "Custom",
    "DocumentClass",
    "DocumentClassOption",
    "Environment",
    "FigureParams",
    "FileContentsOption",
    "FileContentsParams",
    "ListParams",
    "MinipageParams",
    "PackageSpec",
    "PictureParams",
    "Preamble",
    "TableParams",
    "TabularParams",
    "TheBibliographyParams",
    "render_content",
]
