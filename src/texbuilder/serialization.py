"""
Serialization helpers for Preamble objects.

Lets a document preamble live in configuration (JSON/YAML) and be applied
to a ContentBuilder. Goes through an explicit intermediate dict so the
structure stays stable:

    document_class: article
    class_options: [a4paper, twocolumn]
    packages:
      - name: amsmath
        options: [fleqn]
      - graphicx

Round trips compare equal at the object level because Preamble normalizes
plain-string class keywords to enum members or Custom. A null document_class
falls back to article; null option entries are rejected.
"""
from __future__ import annotations

import json
import logging
from enum import Enum
from typing import Any, Dict, List, Type

import yaml

from texbuilder.backends.latex import keyword
from texbuilder.model import (
    DocumentClass,
    DocumentClassOption,
    Keyword,
    PackageSpec,
    Preamble,
    coerce_keyword,
)

logger = logging.getLogger(__name__)


class PreambleConfigError(ValueError):
    """Raised when a preamble document has the wrong shape."""
    pass


def keyword_from_str(value: Any, enum_type: Type[Enum]) -> Keyword:
    """Decode a keyword: a known enum value maps to its member, anything else becomes Custom."""
    return coerce_keyword(str(value), enum_type)


def _options_from_list(value: Any, where: str, enum_type: Type[Enum] | None = None) -> List[Keyword]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise PreambleConfigError(f"{where}: options must be a list, got {type(value).__name__}")
    if any(v is None for v in value):
        raise PreambleConfigError(f"{where}: options must not contain null entries")
    if enum_type is None:
        return [str(v) for v in value]
    return [keyword_from_str(v, enum_type) for v in value]


def package_to_dict(p: PackageSpec) -> Dict[str, Any]:
    return {"name": p.name, "options": [keyword(o) for o in p.options]}


def package_from_dict(d: Any) -> PackageSpec:
    if isinstance(d, str):
        return PackageSpec(name=d)
    if not isinstance(d, dict) or not d.get("name"):
        raise PreambleConfigError(f"Package entry needs a name: {d!r}")
    name = str(d["name"])
    return PackageSpec(name=name, options=_options_from_list(d.get("options"), f"package {name}"))


def preamble_to_dict(p: Preamble) -> Dict[str, Any]:
    return {
        "document_class": keyword(p.document_class),
        "class_options": [keyword(o) for o in p.class_options],
        "packages": [package_to_dict(pkg) for pkg in p.packages],
    }


def preamble_from_dict(d: Any) -> Preamble:
    if not isinstance(d, dict):
        raise PreambleConfigError(f"Preamble must be a mapping, got {type(d).__name__}")
    packages = d.get("packages") or []
    if not isinstance(packages, list):
        raise PreambleConfigError("packages must be a list")
    preamble = Preamble(
        document_class=keyword_from_str(d.get("document_class") or "article", DocumentClass),
        class_options=_options_from_list(d.get("class_options"), "class_options", DocumentClassOption),
        packages=[package_from_dict(pkg) for pkg in packages],
    )
    logger.debug(
        "Loaded preamble: class=%s, %d option(s), %d package(s)",
        keyword(preamble.document_class),
        len(preamble.class_options),
        len(preamble.packages),
    )
    return preamble


def preamble_to_json(p: Preamble) -> str:
    return json.dumps(preamble_to_dict(p), sort_keys=True)


def preamble_from_json(s: str) -> Preamble:
    d = json.loads(s)
    return preamble_from_dict(d)


def preamble_to_yaml(p: Preamble) -> str:
    return yaml.safe_dump(preamble_to_dict(p), sort_keys=False)


def preamble_from_yaml(s: str) -> Preamble:
    d = yaml.safe_load(s)
    return preamble_from_dict(d)
