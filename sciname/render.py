"""Rendering of NameParts as strings.

All renderings go through build_name(), which takes a NameOptions value saying
which pieces of the name to include. The standard renderings are:

- canonical_name: the bare name, ASCII only ("Abies alba alpina")
- canonical_name_with_marker: with rank and hybrid markers
  ("×Abies alba var. alpina")
- canonical_name_complete: with markers and authorship
  ("×Abies alba var. alpina (Carl.) Mill., 1887")
- full_name: everything, including sensu, nomenclatural status, and remarks
  ("×Abies alba var. alpina (Carl.) Mill., 1887 Döring, nom. illeg. [lost]")

"""

import re
from collections.abc import Callable
from dataclasses import dataclass

from .constants import HYBRID_MARKER, NamePart, NameType, Rank
from .helpers import (
    ascii_fold,
    decompose,
    is_infraspecific,
    is_parsable,
    is_uncomparable,
    marker_of_rank,
)
from .name_parts import NameParts

_EPITHET_SEPARATORS = re.compile(r"[ _-]+")


@dataclass(frozen=True)
class NameOptions:
    hybrid_marker: bool = False
    rank_marker: bool = False
    authorship: bool = False
    # Show the subgenus in parentheses in species names: "Abies (Bracteata) alba".
    infrageneric_in_brackets: bool = False
    # Show the genus for names whose terminal part is infrageneric.
    genus_for_infrageneric: bool = False
    abbreviate_genus: bool = False
    decompose_unicode: bool = False
    ascii_fold: bool = False
    # Add markers like "spec." to names lacking the part their rank requires.
    show_indet_marker: bool = False
    nom_note: bool = False
    remarks: bool = False
    sensu: bool = False
    cultivar: bool = False
    strain: bool = False


CANONICAL_NAME = NameOptions(
    decompose_unicode=True, ascii_fold=True, show_indet_marker=True
)
CANONICAL_NAME_WITH_MARKER = NameOptions(
    hybrid_marker=True,
    rank_marker=True,
    decompose_unicode=True,
    ascii_fold=True,
    show_indet_marker=True,
    cultivar=True,
    strain=True,
)
CANONICAL_NAME_COMPLETE = NameOptions(
    hybrid_marker=True,
    rank_marker=True,
    authorship=True,
    genus_for_infrageneric=True,
    decompose_unicode=True,
    show_indet_marker=True,
    cultivar=True,
    strain=True,
)
FULL_NAME = NameOptions(
    hybrid_marker=True,
    rank_marker=True,
    authorship=True,
    infrageneric_in_brackets=True,
    genus_for_infrageneric=True,
    show_indet_marker=True,
    nom_note=True,
    remarks=True,
    sensu=True,
    cultivar=True,
    strain=True,
)


def build_name(parts: NameParts, options: NameOptions) -> str | None:
    """Renders a name according to the options. Returns None for an empty name."""
    segments = [
        *candidatus_segments(parts),
        *genus_segments(parts, options),
    ]
    if parts.specific_epithet is None:
        segments += supraspecific_segments(parts, options)
    else:
        segments += species_segments(parts, options)
    segments += annotation_segments(parts, options)
    name = "".join(segments).strip()
    if options.decompose_unicode:
        name = decompose(name)
    if options.ascii_fold:
        name = ascii_fold(name)
    return name or None


def candidatus_segments(parts: NameParts) -> list[str]:
    if parts.type is NameType.candidatus:
        return ["Candidatus "]
    return []


def genus_segments(parts: NameParts, options: NameOptions) -> list[str]:
    genus = parts.genus_or_above
    if genus is None:
        return []
    if not (
        options.genus_for_infrageneric
        or parts.infrageneric is None
        or parts.specific_epithet is not None
        or _has_explicit_infrageneric_rank(parts, options)
    ):
        return []
    segments = []
    if options.hybrid_marker and parts.notho is NamePart.generic:
        segments.append(HYBRID_MARKER)
    if options.abbreviate_genus:
        segments.append(f"{genus[:1]}.")
    else:
        segments.append(genus)
    return segments


def supraspecific_segments(parts: NameParts, options: NameOptions) -> list[str]:
    """Segments after the genus for names without a specific epithet."""
    rank = parts.rank
    segments = []
    if rank is Rank.species:
        # "Puma spec.": a species that was not identified further
        if _show_indet(parts, options):
            segments.append(" spec.")
    elif rank is not None and is_infraspecific(rank):
        if _show_indet(parts, options):
            marker = marker_of_rank(rank)
            if marker is not None:
                segments.append(f" {marker}")
    elif parts.infrageneric is not None:
        segments += infrageneric_segments(parts, options)
    if options.authorship:
        segments += authorship_segments(parts)
    return segments


def infrageneric_segments(parts: NameParts, options: NameOptions) -> list[str]:
    """The infrageneric name when it is the terminal part of the name."""
    infrageneric = parts.infrageneric
    if infrageneric is None:
        return []
    if options.rank_marker and parts.rank is not None:
        # botanical style with an explicit rank: "Abies sect. Bracteata"
        return [" ", *rank_marker_segments(parts.rank), infrageneric]
    elif options.genus_for_infrageneric and parts.genus_or_above is not None:
        # rank unknown: the parentheses mark it as infrageneric
        return [f" ({infrageneric})"]
    else:
        return [infrageneric]


def species_segments(parts: NameParts, options: NameOptions) -> list[str]:
    """Segments for the specific epithet and anything below it."""
    assert parts.specific_epithet is not None
    segments = []
    if (
        options.infrageneric_in_brackets
        and parts.infrageneric is not None
        and (parts.rank is None or parts.rank is Rank.genus)
    ):
        segments.append(f" ({parts.infrageneric})")
    segments.append(" ")
    if options.hybrid_marker and parts.notho is NamePart.specific:
        segments.append(HYBRID_MARKER)
    segments.append(normalize_epithet(parts.specific_epithet))

    if parts.infraspecific_epithet is None:
        rank = parts.rank
        if (
            rank is not None
            and is_infraspecific(rank)
            and _show_indet(parts, options)
            and not (rank is Rank.cultivar and parts.cultivar_epithet is not None)
        ):
            # "Abies alba subsp.": a subspecies that was not identified further
            marker = marker_of_rank(rank)
            if marker is not None:
                segments.append(f" {marker}")
        if options.authorship:
            segments += authorship_segments(parts)
    else:
        segments += infraspecific_segments(parts, options)
    return segments


def infraspecific_segments(parts: NameParts, options: NameOptions) -> list[str]:
    assert parts.infraspecific_epithet is not None
    segments = [" "]
    rank_marker = (
        rank_marker_segments(parts.rank)
        if options.rank_marker and parts.rank is not None
        else []
    )
    if options.hybrid_marker and parts.notho is NamePart.infraspecific:
        # "nothosubsp." when rank markers are on, "×" otherwise
        segments.append("notho" if options.rank_marker else HYBRID_MARKER)
    segments += rank_marker
    segments.append(normalize_epithet(parts.infraspecific_epithet))
    # autonyms never repeat the authorship of the species
    if options.authorship and not parts.is_autonym():
        segments += authorship_segments(parts)
    return segments


def annotation_segments(parts: NameParts, options: NameOptions) -> list[str]:
    """Strain, cultivar, sensu, nomenclatural status, and remarks, in that order."""
    segments = []
    if options.strain and parts.strain is not None:
        segments.append(f" {parts.strain}")
    if options.cultivar and parts.cultivar_epithet is not None:
        segments.append(f" '{parts.cultivar_epithet}'")
    if options.sensu and parts.sensu is not None:
        segments.append(f" {parts.sensu}")
    if options.nom_note and parts.nom_status is not None:
        segments.append(f", {parts.nom_status}")
    if options.remarks and parts.remarks is not None:
        segments.append(f" [{parts.remarks}]")
    return segments


def rank_marker_segments(rank: Rank) -> list[str]:
    """The rank marker followed by a space, if the rank has a usable marker."""
    marker = marker_of_rank(rank)
    if marker is None or is_uncomparable(rank):
        return []
    return [marker, " "]


def authorship_segments(parts: NameParts) -> list[str]:
    """Authorship in the form " (Torr.) Gleason, 1991"."""
    segments = []
    if parts.bracket_authorship is None:
        if parts.bracket_year is not None:
            segments.append(f" ({parts.bracket_year})")
    elif parts.bracket_year is not None:
        segments.append(f" ({parts.bracket_authorship}, {parts.bracket_year})")
    else:
        segments.append(f" ({parts.bracket_authorship})")
    if parts.authorship is not None:
        segments.append(f" {parts.authorship}")
    if parts.year is not None:
        segments.append(f", {parts.year}")
    return segments


def normalize_epithet(epithet: str) -> str:
    return _EPITHET_SEPARATORS.sub("-", epithet)


def _has_explicit_infrageneric_rank(parts: NameParts, options: NameOptions) -> bool:
    # botanical infrageneric names include the genus: "Abies sect. Bracteata"
    rank = parts.rank
    return (
        options.rank_marker
        and rank is not None
        and rank is not Rank.species
        and not is_infraspecific(rank)
        and parts.specific_epithet is None
        and parts.infrageneric is not None
        and bool(rank_marker_segments(rank))
    )


def _show_indet(parts: NameParts, options: NameOptions) -> bool:
    return options.show_indet_marker and (
        parts.type is None or is_parsable(parts.type)
    )


def authorship_complete(parts: NameParts) -> str:
    return "".join(authorship_segments(parts)).strip()


def canonical_name(parts: NameParts) -> str | None:
    return build_name(parts, CANONICAL_NAME)


def canonical_name_with_marker(parts: NameParts) -> str | None:
    return build_name(parts, CANONICAL_NAME_WITH_MARKER)


def canonical_name_complete(parts: NameParts) -> str | None:
    return build_name(parts, CANONICAL_NAME_COMPLETE)


def full_name(parts: NameParts) -> str | None:
    return build_name(parts, FULL_NAME)


VIEWS: dict[str, Callable[[NameParts], str | None]] = {
    "canonical_name": canonical_name,
    "canonical_name_with_marker": canonical_name_with_marker,
    "canonical_name_complete": canonical_name_complete,
    "full_name": full_name,
    "authorship": lambda parts: authorship_complete(parts) or None,
}
