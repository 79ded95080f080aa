"""A scientific name split into its grammatical parts.

NameParts values are produced by a name parser (or written out by hand for
programmatic names) and rendered by the functions in sciname.render.

"""

import dataclasses
import logging
from dataclasses import dataclass, field

from .constants import HYBRID_MARKER, NamePart, NameType, Rank
from .helpers import (
    is_infrageneric_strictly,
    is_infraspecific,
    is_parsable,
    is_ranked,
    is_species_aggregate_or_below,
    parse_year,
)

logger = logging.getLogger(__name__)

# Fields that may carry a leading hybrid marker, from the top down.
_MARKED_FIELDS = [
    ("genus_or_above", NamePart.generic),
    ("infrageneric", NamePart.infrageneric),
    ("specific_epithet", NamePart.specific),
    ("infraspecific_epithet", NamePart.infraspecific),
]


@dataclass(frozen=True)
class NameParts:
    genus_or_above: str | None = None
    infrageneric: str | None = None
    specific_epithet: str | None = None
    infraspecific_epithet: str | None = None
    cultivar_epithet: str | None = None
    strain: str | None = None
    rank: Rank | None = None
    # Which part of the name is the hybrid, e.g. NamePart.generic for ×Heucherella.
    notho: NamePart | None = field(default=None, compare=False)
    authorship: str | None = None
    year: str | None = None
    # Author and year of the basionym, cited in parentheses.
    bracket_authorship: str | None = None
    bracket_year: str | None = None
    sensu: str | None = field(default=None, compare=False)
    nom_status: str | None = field(default=None, compare=False)
    remarks: str | None = field(default=None, compare=False)
    type: NameType | None = None
    key: int | None = None
    scientific_name: str | None = None
    parsed: bool = field(default=True, compare=False)
    parsed_partially: bool = field(default=False, compare=False)
    authors_parsed: bool = field(default=True, compare=False)

    def __post_init__(self) -> None:
        marked = []
        for attr, part in _MARKED_FIELDS:
            value = getattr(self, attr)
            if value is not None and value.startswith(HYBRID_MARKER):
                object.__setattr__(self, attr, value.lstrip(HYBRID_MARKER))
                marked.append(part)
        if not marked:
            return
        if len(marked) > 1:
            logger.warning(
                "hybrid markers on several parts (%s); treating %s as the hybrid",
                ", ".join(part.name for part in marked),
                marked[-1].name,
            )
        else:
            logger.debug("stripped hybrid marker from %s part", marked[-1].name)
        object.__setattr__(self, "notho", marked[-1])

    def replace(self, **changes: object) -> "NameParts":
        """Returns a copy with some fields changed, stripping hybrid markers again."""
        return dataclasses.replace(self, **changes)  # type: ignore[arg-type]

    def with_hybrid_formula(self, *, hybrid: bool) -> "NameParts":
        if hybrid:
            return self.replace(type=NameType.hybrid)
        elif self.type is NameType.hybrid:
            return self.replace(type=None)
        else:
            return self

    @property
    def terminal_epithet(self) -> str | None:
        if self.infraspecific_epithet is None:
            return self.specific_epithet
        return self.infraspecific_epithet

    @property
    def canonical_species_name(self) -> str | None:
        """The binomial without any infraspecific parts."""
        if self.genus_or_above is not None and self.specific_epithet is not None:
            return f"{self.genus_or_above} {self.specific_epithet}"
        return None

    @property
    def year_int(self) -> int | None:
        return parse_year(self.year)

    @property
    def bracket_year_int(self) -> int | None:
        return parse_year(self.bracket_year)

    def has_authorship(self) -> bool:
        return (
            self.authorship is not None
            or self.year is not None
            or self.bracket_authorship is not None
            or self.bracket_year is not None
        )

    def is_qualified(self) -> bool:
        return any(
            (self.authorship, self.year, self.bracket_authorship, self.bracket_year)
        )

    def is_recombination(self) -> bool:
        """Whether the name cites the author or year of its basionym."""
        return bool(
            (self.bracket_authorship and not self.bracket_authorship.isspace())
            or (self.bracket_year and not self.bracket_year.isspace())
        )

    def is_autonym(self) -> bool:
        return (
            self.specific_epithet is not None
            and self.specific_epithet == self.infraspecific_epithet
        )

    def is_binomial(self) -> bool:
        return self.genus_or_above is not None and self.specific_epithet is not None

    def is_hybrid_formula(self) -> bool:
        return self.type is NameType.hybrid

    def is_parsable_type(self) -> bool:
        return self.type is not None and is_parsable(self.type)

    def is_indetermined(self) -> bool:
        """Whether the name lacks the part its rank requires, like "Abies spec."."""
        if (
            self.rank is None
            or not self.parsed
            or not self.is_parsable_type()
            or not is_ranked(self.rank)
        ):
            return False
        return (
            (is_infrageneric_strictly(self.rank) and self.infrageneric is None)
            or (
                is_species_aggregate_or_below(self.rank)
                and self.specific_epithet is None
            )
            or (is_infraspecific(self.rank) and self.infraspecific_epithet is None)
        )

    def __str__(self) -> str:
        if self.is_hybrid_formula():
            return " [hybrid]"
        parts = [str(self.scientific_name)]
        if self.key is not None:
            parts.append(f"[{self.key}]")
        labelled = [
            ("G", self.genus_or_above),
            ("IG", self.infrageneric),
            ("S", self.specific_epithet),
            ("R", self.rank.name if self.rank is not None else None),
            ("IS", self.infraspecific_epithet),
            ("CV", self.cultivar_epithet),
            ("STR", self.strain),
            ("A", self.authorship),
            ("Y", self.year),
            ("BA", self.bracket_authorship),
            ("BY", self.bracket_year),
        ]
        parts += [f"{label}:{value}" for label, value in labelled if value is not None]
        if self.type is not None:
            parts.append(f"[{self.type.name}]")
        return " ".join(parts)
