"""Canonical renderings of scientific names."""

from .constants import HYBRID_MARKER, NamePart, NameType, NomenclaturalCode, Rank
from .name_parts import NameParts
from .render import (
    CANONICAL_NAME,
    CANONICAL_NAME_COMPLETE,
    CANONICAL_NAME_WITH_MARKER,
    FULL_NAME,
    NameOptions,
    authorship_complete,
    build_name,
    canonical_name,
    canonical_name_complete,
    canonical_name_with_marker,
    full_name,
)

__all__ = [
    "CANONICAL_NAME",
    "CANONICAL_NAME_COMPLETE",
    "CANONICAL_NAME_WITH_MARKER",
    "FULL_NAME",
    "HYBRID_MARKER",
    "NameOptions",
    "NamePart",
    "NameParts",
    "NameType",
    "NomenclaturalCode",
    "Rank",
    "authorship_complete",
    "build_name",
    "canonical_name",
    "canonical_name_complete",
    "canonical_name_with_marker",
    "full_name",
]
