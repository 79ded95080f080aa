"""Helper functions"""

import logging
import re
import unicodedata

import unidecode

from .constants import RANK_MARKERS, NameType, NomenclaturalCode, Rank

logger = logging.getLogger(__name__)

# ASCII digits only, without the padding and underscores int() accepts
_YEAR_PATTERN = re.compile(r"[+-]?[0-9]+")

UNRANKED_RANKS = {Rank.other, Rank.unranked}
# Ranks that cover a range of other ranks, e.g. an infrageneric name may be a
# subgenus or a section.
UNCOMPARABLE_RANKS = {
    Rank.suprageneric_name,
    Rank.infrageneric_name,
    Rank.infraspecific_name,
    Rank.infrasubspecific_name,
    Rank.other,
    Rank.unranked,
}
LINNEAN_RANKS = [
    Rank.kingdom,
    Rank.phylum,
    Rank.class_,
    Rank.order,
    Rank.family,
    Rank.genus,
    Rank.species,
]
MICROBIAL_RANKS = {
    Rank.pathovar,
    Rank.biovar,
    Rank.chemovar,
    Rank.morphovar,
    Rank.phagovar,
    Rank.serovar,
    Rank.chemoform,
    Rank.forma_specialis,
}
RANK_TO_CODE = {
    Rank.superlegion: NomenclaturalCode.zoological,
    Rank.legion: NomenclaturalCode.zoological,
    Rank.sublegion: NomenclaturalCode.zoological,
    Rank.infralegion: NomenclaturalCode.zoological,
    Rank.magnorder: NomenclaturalCode.zoological,
    Rank.grandorder: NomenclaturalCode.zoological,
    Rank.proles: NomenclaturalCode.zoological,
    Rank.race: NomenclaturalCode.zoological,
    Rank.natio: NomenclaturalCode.zoological,
    Rank.aberration: NomenclaturalCode.zoological,
    Rank.morph: NomenclaturalCode.zoological,
    Rank.subvariety: NomenclaturalCode.botanical,
    Rank.subform: NomenclaturalCode.botanical,
    Rank.forma_specialis: NomenclaturalCode.botanical,
    Rank.pathovar: NomenclaturalCode.bacterial,
    Rank.biovar: NomenclaturalCode.bacterial,
    Rank.chemovar: NomenclaturalCode.bacterial,
    Rank.morphovar: NomenclaturalCode.bacterial,
    Rank.phagovar: NomenclaturalCode.bacterial,
    Rank.serovar: NomenclaturalCode.bacterial,
    Rank.chemoform: NomenclaturalCode.bacterial,
    Rank.strain: NomenclaturalCode.bacterial,
    Rank.grex: NomenclaturalCode.cultivars,
    Rank.convariety: NomenclaturalCode.cultivars,
    Rank.cultivar_group: NomenclaturalCode.cultivars,
    Rank.cultivar: NomenclaturalCode.cultivars,
}

# Suffixes of suprageneric names that reliably indicate the rank.
SUFFIXES = {
    "mycetidae": Rank.subclass,
    "phycidae": Rank.subclass,
    "mycotina": Rank.subphylum,
    "phytina": Rank.subphylum,
    "phyceae": Rank.class_,
    "mycetes": Rank.class_,
    "mycota": Rank.phylum,
    "opsida": Rank.class_,
    "oideae": Rank.subfamily,
    "aceae": Rank.family,
    "phyta": Rank.phylum,
    "oidea": Rank.superfamily,
    "ineae": Rank.suborder,
    "anae": Rank.superorder,
    "ales": Rank.order,
    "acea": Rank.superfamily,
    "idae": Rank.family,
    "inae": Rank.subfamily,
    "eae": Rank.tribe,
    "ini": Rank.tribe,
    "ina": Rank.subtribe,
}

_MARKERS = {
    # suprageneric
    "fam": Rank.family,
    "gen": Rank.genus,
    "ib": Rank.suprageneric_name,
    "supersubtrib": Rank.suprageneric_name,
    "supertrib": Rank.supertribe,
    "trib": Rank.tribe,
    # infrageneric
    "agg": Rank.species_aggregate,
    "aggr": Rank.species_aggregate,
    "sect": Rank.section,
    "section": Rank.section,
    "ser": Rank.series,
    "series": Rank.series,
    "sp": Rank.species,
    "spec": Rank.species,
    "species": Rank.species,
    "spp": Rank.species,
    "subg": Rank.subgenus,
    "subgen": Rank.subgenus,
    "subgenus": Rank.subgenus,
    "subsect": Rank.subsection,
    "subsection": Rank.subsection,
    "subser": Rank.subseries,
    "subseries": Rank.subseries,
    # infraspecific
    "ab": Rank.aberration,
    "aberration": Rank.aberration,
    "bv": Rank.biovar,
    "ct": Rank.chemoform,
    "cv": Rank.cultivar,
    "f": Rank.form,
    "fo": Rank.form,
    "form": Rank.form,
    "forma": Rank.form,
    "fsp": Rank.forma_specialis,
    "hort": Rank.cultivar,
    "m": Rank.morph,
    "morph": Rank.morph,
    "nat": Rank.natio,
    "prol": Rank.proles,
    "pv": Rank.pathovar,
    "sf": Rank.subform,
    "ssp": Rank.subspecies,
    "st": Rank.strain,
    "subf": Rank.subform,
    "subform": Rank.subform,
    "subsp": Rank.subspecies,
    "subv": Rank.subvariety,
    "subvar": Rank.subvariety,
    "sv": Rank.subvariety,
    "v": Rank.variety,
    "var": Rank.variety,
}
_NORMALIZE_MARKER = re.compile(r"[._ -]+")


def _normalize_marker(marker: str) -> str:
    return _NORMALIZE_MARKER.sub("", marker.lower())


for _rank, _marker in RANK_MARKERS.items():
    if _marker is not None:
        _MARKERS.setdefault(_normalize_marker(_marker), _rank)


def marker_of_rank(rank: Rank) -> str | None:
    return RANK_MARKERS.get(rank)


def is_ranked(rank: Rank) -> bool:
    return rank not in UNRANKED_RANKS


def is_suprageneric(rank: Rank) -> bool:
    return is_ranked(rank) and rank > Rank.genus


def is_infrageneric(rank: Rank) -> bool:
    """Any rank below genus, including species and infraspecific ranks."""
    return is_ranked(rank) and rank < Rank.genus


def is_infrageneric_strictly(rank: Rank) -> bool:
    """Ranks between genus and species aggregate, like subgenus or section."""
    return is_infrageneric(rank) and rank > Rank.species_aggregate


def is_species_or_below(rank: Rank) -> bool:
    return is_ranked(rank) and rank <= Rank.species


def is_species_aggregate_or_below(rank: Rank) -> bool:
    return is_ranked(rank) and rank <= Rank.species_aggregate


def is_infraspecific(rank: Rank) -> bool:
    return is_ranked(rank) and rank < Rank.species


def is_infrasubspecific(rank: Rank) -> bool:
    return is_ranked(rank) and rank < Rank.subspecies


def is_uncomparable(rank: Rank) -> bool:
    return rank in UNCOMPARABLE_RANKS


def is_linnean(rank: Rank) -> bool:
    return rank in LINNEAN_RANKS


def is_microbial(rank: Rank) -> bool:
    return rank in MICROBIAL_RANKS


def code_of_rank(rank: Rank) -> NomenclaturalCode | None:
    """Returns the nomenclatural code a rank is exclusively used in, if any."""
    return RANK_TO_CODE.get(rank)


def is_restricted_to_code(rank: Rank) -> bool:
    return rank in RANK_TO_CODE


def higher_than(rank: Rank, other: Rank) -> bool:
    return is_ranked(rank) and is_ranked(other) and rank > other


def infer_rank(marker: str | None) -> Rank | None:
    """Returns the rank indicated by a rank marker like "ssp." or "sect."."""
    if marker is None:
        return None
    normalized = _normalize_marker(marker)
    if normalized and set(normalized) == {"*"}:
        return Rank.infraspecific_name
    return _MARKERS.get(normalized)


def infer_rank_from_parts(
    genus_or_above: str | None,
    infrageneric: str | None,
    specific_epithet: str | None,
    rank_marker: str | None,
    infraspecific_epithet: str | None,
) -> Rank:
    """Guesses the rank of a name from its marker, or else from its structure."""
    marker_rank = infer_rank(rank_marker)
    if marker_rank is not None:
        return marker_rank
    if infraspecific_epithet is not None:
        return Rank.infraspecific_name
    elif specific_epithet is not None:
        return Rank.species
    elif infrageneric is not None:
        return Rank.infrageneric_name
    elif genus_or_above is not None:
        rank = rank_of_suffix(genus_or_above)
        if rank is not None:
            return rank
    return Rank.unranked


def rank_of_suffix(name: str) -> Rank | None:
    # longest suffix first, so that "-aceae" wins over "-eae"
    for suffix in sorted(SUFFIXES, key=lambda s: (-len(s), s)):
        if name.endswith(suffix):
            return SUFFIXES[suffix]
    return None


PARSABLE_TYPES = {
    NameType.scientific,
    NameType.informal,
    NameType.cultivar,
    NameType.candidatus,
    NameType.doubtful,
    NameType.blacklisted,
}
BACKBONE_TYPES = {NameType.scientific, NameType.virus, NameType.doubtful}


def is_parsable(name_type: NameType) -> bool:
    """Whether names of this type can be split into their parts."""
    return name_type in PARSABLE_TYPES


def is_backbone_type(name_type: NameType) -> bool:
    return name_type in BACKBONE_TYPES


def name_type_of_string(text: str | None) -> NameType | None:
    if not text:
        return None
    try:
        return NameType[text.strip().lower()]
    except KeyError:
        return None


def rank_of_string(text: str | None) -> Rank | None:
    """Looks up a rank by its name ("subspecies") or by its marker ("subsp.")."""
    if not text:
        return None
    key = text.strip().lower().replace(" ", "_")
    if key == "class":
        return Rank.class_
    try:
        return Rank[key]
    except KeyError:
        return infer_rank(text)


_LIGATURES = {
    "æ": "ae",
    "Æ": "Ae",
    "œ": "oe",
    "Œ": "Oe",
    "Ĳ": "Ij",
    "ĳ": "ij",
    "ǈ": "Lj",
    "ǉ": "lj",
    "ȸ": "db",
    "ȹ": "qp",
    "ß": "ss",
    "ﬆ": "st",
    "ﬅ": "ft",
    "ﬀ": "ff",
    "ﬁ": "fi",
    "ﬂ": "fl",
    "ﬃ": "ffi",
    "ﬄ": "ffl",
}
_LIGATURE_TABLE = str.maketrans(_LIGATURES)


def decompose(text: str) -> str:
    """Replaces ligatures with the letters they are made of."""
    return text.translate(_LIGATURE_TABLE)


def ascii_fold(text: str) -> str:
    """Removes diacritics and transliterates other non-ASCII letters.

    Symbols such as the hybrid marker are kept as they are.

    """
    chars = []
    for c in unicodedata.normalize("NFD", text):
        category = unicodedata.category(c)
        if category.startswith("M"):
            continue
        if not c.isascii() and category.startswith("L"):
            chars.append(unidecode.unidecode(c))
        else:
            chars.append(c)
    return "".join(chars)


def parse_year(text: str | None) -> int | None:
    """Parses a year field as an integer.

    Year fields are free text; values like "1850?" or "fl. 1850" return None,
    the same as a missing year.

    """
    if text is None:
        return None
    if not _YEAR_PATTERN.fullmatch(text):
        logger.debug("year %r is not an integer", text)
        return None
    return int(text)
