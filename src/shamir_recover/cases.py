"""Case documents: a threshold plus base-encoded shares.

A case is a JSON (or YAML) mapping with a ``keys`` entry holding the declared
share count ``n`` and threshold ``k``; every other entry is keyed by the
share index and carries the ``base`` and the ``value`` digits::

    {
        "keys": {"n": 4, "k": 3},
        "1": {"base": "10", "value": "4"},
        "2": {"base": "2", "value": "111"}
    }
"""
from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Tuple

import structlog
import yaml
from pydantic import BaseModel, Field, PositiveInt, ValidationError, field_validator, model_validator

from .decoder import MAX_BASE, MIN_BASE, decode_share
from .errors import CaseFormatError
from .models import Share

logger = structlog.get_logger(__name__)


class CaseKeys(BaseModel):
    n: PositiveInt
    k: PositiveInt


class ShareEntry(BaseModel):
    base: int = Field(ge=MIN_BASE, le=MAX_BASE)
    value: str = Field(min_length=1)

    @field_validator("value", mode="before")
    @classmethod
    def _value_as_text(cls, value: Any) -> Any:
        # digits must arrive verbatim; a parsed number has lost its spelling
        if not isinstance(value, str):
            raise ValueError(f"share value must be a string of digits, not {type(value).__name__}")
        return value.strip()


class CaseDocument(BaseModel):
    keys: CaseKeys
    shares: Dict[PositiveInt, ShareEntry] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def _collect_shares(cls, data: Any) -> Any:
        if not isinstance(data, dict) or "shares" in data:
            return data
        shares = {key: value for key, value in data.items() if key != "keys"}
        return {"keys": data.get("keys"), "shares": shares}


@dataclass(frozen=True, slots=True)
class Case:
    name: str
    threshold: int
    declared_count: int
    shares: Tuple[Share, ...]


def case_from_document(document: CaseDocument, *, name: str = "<memory>") -> Case:
    shares = tuple(
        decode_share(index, entry.value, entry.base) for index, entry in sorted(document.shares.items())
    )
    if document.keys.n != len(shares):
        logger.warning("case.count_mismatch", case=name, declared=document.keys.n, found=len(shares))
    return Case(name=name, threshold=document.keys.k, declared_count=document.keys.n, shares=shares)


def case_from_mapping(raw: Any, *, name: str = "<memory>") -> Case:
    try:
        document = CaseDocument.model_validate(raw)
    except ValidationError as exc:
        raise CaseFormatError(f"Invalid case {name}: {exc}") from exc
    return case_from_document(document, name=name)


def case_from_path(path: Path) -> Case:
    try:
        with path.open("r", encoding="utf-8") as handle:
            if path.suffix.lower() in {".yaml", ".yml"}:
                raw = yaml.load(handle, Loader=yaml.BaseLoader)
            else:
                raw = json.load(handle)
    except OSError as exc:
        raise CaseFormatError(f"Could not open {path}: {exc.strerror or exc}") from exc
    except (UnicodeDecodeError, json.JSONDecodeError, yaml.YAMLError) as exc:
        raise CaseFormatError(f"Could not parse {path}: {exc}") from exc
    case = case_from_mapping(raw, name=str(path))
    logger.info("case.loaded", case=case.name, shares=len(case.shares), threshold=case.threshold)
    return case


__all__ = [
    "Case",
    "CaseDocument",
    "CaseKeys",
    "ShareEntry",
    "case_from_document",
    "case_from_mapping",
    "case_from_path",
]
