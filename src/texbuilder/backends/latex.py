"""
LaTeX markup formatting for the content builder.

Maps model values onto literal markup fragments:
    - keywords (enum value, Custom keyword, or plain string)
    - bracketed option lists and optional arguments
    - per-environment opening arguments
    - complete \\begin ... \\end blocks

Nothing here escapes or validates. Text goes out exactly as it came in.
"""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path
from typing import Any, Iterable, Optional, Union

from texbuilder.model import (
    ArrayParams,
    Custom,
    Environment,
    EnvironmentParams,
    FigureParams,
    FileContentsParams,
    ListParams,
    MinipageParams,
    PictureParams,
    TableParams,
    TabularParams,
    TheBibliographyParams,
)

logger = logging.getLogger(__name__)

EnvironmentSpec = Union[Environment, EnvironmentParams, Custom, str]


def keyword(value: Any) -> str:
    """Return the markup keyword for an enum member, a Custom keyword or any other value."""
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, Custom):
        return value.keyword
    return str(value)


def format_options(options: Optional[Iterable[Any]]) -> str:
    """
    Format an option list as a single bracket pair.

    Returns:
        "[a,b,c]" in input order, or "" when there are no options

    A single keyword (str, Enum member or Custom) counts as a one-item list.
    """
    if not options:
        return ""
    if isinstance(options, (str, Enum, Custom)):
        options = [options]
    rendered = [keyword(option) for option in options]
    if not rendered:
        return ""
    return "[" + ",".join(rendered) + "]"


def optional_arg(value: Optional[Any], empty: str = "") -> str:
    """Bracket an optional argument, or return ``empty`` when it is missing."""
    if value is None:
        return empty
    return f"[{keyword(value)}]"


def environment_keyword(environment: EnvironmentSpec) -> str:
    if isinstance(environment, EnvironmentParams):
        return environment.kind.value
    return keyword(environment)


def environment_args(environment: EnvironmentSpec) -> str:
    """
    Render the arguments written right after \\begin{keyword}.

    Parameterless environments (Environment members, Custom and plain
    strings) have none.
    """
    if isinstance(environment, (ArrayParams, TabularParams)):
        return f"{optional_arg(environment.pos)}{{{environment.cols}}}"

    elif isinstance(environment, FigureParams):
        return environment.placement

    elif isinstance(environment, FileContentsParams):
        return f"{optional_arg(environment.option)}{{{environment.filename}}}"

    elif isinstance(environment, ListParams):
        return f"{environment.labeling}{environment.spacing}"

    elif isinstance(environment, MinipageParams):
        position = optional_arg(environment.position, empty="[]")
        height = optional_arg(environment.height, empty="[]")
        inner_pos = optional_arg(environment.inner_pos, empty="[]")
        return f"{position}{height}{inner_pos}{{{environment.width}}}"

    elif isinstance(environment, PictureParams):
        width, height = environment.size
        args = f"({width},{height})"
        if environment.offset is not None:
            x, y = environment.offset
            args += f"({x},{y})"
        return args

    elif isinstance(environment, TableParams):
        return optional_arg(environment.placement)

    elif isinstance(environment, TheBibliographyParams):
        return f"{{{environment.widest_label}}}"

    return ""


def render_environment(environment: EnvironmentSpec, body: str) -> str:
    """
    Render a complete environment block.

    Returns:
        "\\begin{kw}<args>\\n<body>\\n\\end{kw}\\n"
    """
    name = environment_keyword(environment)
    lines = [
        f"\\begin{{{name}}}{environment_args(environment)}",
        body,
        f"\\end{{{name}}}",
    ]
    return "\n".join(lines) + "\n"


def save_document(document: Any, filename: Union[str, Path]) -> None:
    """
    Write the document text to a .tex file.

    Args:
        document: A ContentBuilder (its build_document() is written) or a string
        filename: Output file path (.tex extension recommended)
    """
    build = getattr(document, "build_document", None)
    text = build() if callable(build) else str(document)
    path = Path(filename)
    path.write_text(text, encoding="utf-8")
    logger.info("Wrote %s (%d characters)", path, len(text))


__all__ = [
    "EnvironmentSpec",
    "environment_args",
    "environment_keyword",
    "format_options",
    "keyword",
    "optional_arg",
    "render_environment",
    "save_document",
]
