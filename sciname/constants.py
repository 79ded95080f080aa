"""Enums for the parts of a scientific name."""

import enum

HYBRID_MARKER = "×"


class NamePart(enum.IntEnum):
    generic = 1
    infrageneric = 2
    specific = 3
    infraspecific = 4


class NameType(enum.IntEnum):
    scientific = 1
    virus = 2
    hybrid = 3  # hybrid formula like "Abies alba × Pinus nigra"
    informal = 4  # e.g., "Abies spec." or "Abies sp. 3"
    cultivar = 5
    candidatus = 6  # bacterial names not yet validly published
    otu = 7  # operational taxonomic unit, e.g. a BOLD BIN
    doubtful = 8
    placeholder = 9  # e.g., "incertae sedis" or "? hostilis"
    no_name = 10
    blacklisted = 11  # surely not a scientific name


class NomenclaturalCode(enum.IntEnum):
    bacterial = 1
    botanical = 2
    biocode = 3
    cultivars = 4
    phylocode = 5
    phytosociology = 6
    virus = 7
    zoological = 8

    def get_acronym(self) -> str:
        return {
            self.bacterial: "ICNB",
            self.botanical: "ICBN",
            self.biocode: "BC",
            self.cultivars: "ICNCP",
            self.phylocode: "PC",
            self.phytosociology: "ICPN",
            self.virus: "ICVCN",
            self.zoological: "ICZN",
        }[self]

    def get_title(self) -> str:
        return {
            self.bacterial: "International Code of Nomenclature of Bacteria",
            self.botanical: "International Code of Botanical Nomenclature",
            self.biocode: "BioCode",
            self.cultivars: "International Code of Nomenclature for Cultivated Plants",
            self.phylocode: "Phylocode",
            self.phytosociology: "International Code of Phytosociological Nomenclature",
            self.virus: "International Code of Virus Classifications and Nomenclature",
            self.zoological: "International Code of Zoological Nomenclature",
        }[self]


class Rank(enum.IntEnum):
    # Ordered ranks: a higher value is a higher rank.
    strain = 1
    cultivar = 2
    forma_specialis = 3
    chemoform = 4
    serovar = 5
    phagovar = 6
    morphovar = 7
    chemovar = 8
    biovar = 9
    pathovar = 10
    subform = 11
    form = 12
    subvariety = 13
    variety = 14
    morph = 15
    aberration = 16
    natio = 17
    race = 18
    proles = 19
    infrasubspecific_name = 20
    convariety = 21
    cultivar_group = 22
    subspecies = 23
    grex = 24
    infraspecific_name = 25
    species = 30
    species_aggregate = 31
    infrageneric_name = 35
    subseries = 36
    series = 37
    subsection = 38
    section = 39
    infragenus = 40
    subgenus = 41
    genus = 45
    suprageneric_name = 50
    infratribe = 51
    subtribe = 52
    tribe = 53
    supertribe = 54
    infrafamily = 55
    subfamily = 56
    family = 57
    superfamily = 58
    parvorder = 60
    infraorder = 61
    suborder = 62
    order = 63
    grandorder = 64
    superorder = 65
    magnorder = 66
    infracohort = 70
    subcohort = 71
    cohort = 72
    supercohort = 73
    infralegion = 74
    sublegion = 75
    legion = 76
    superlegion = 77
    parvclass = 80
    infraclass = 81
    subclass = 82
    class_ = 83
    superclass = 84
    infraphylum = 90
    subphylum = 91
    phylum = 92
    superphylum = 93
    infrakingdom = 100
    subkingdom = 101
    kingdom = 102
    superkingdom = 103
    domain = 110
    # Not part of the ordering.
    other = 200
    unranked = 205


# Abbreviations used as rank markers in names, e.g. "Abies alba subsp. alpina".
RANK_MARKERS: dict[Rank, str | None] = {
    Rank.domain: "dom.",
    Rank.superkingdom: "superreg.",
    Rank.kingdom: "reg.",
    Rank.subkingdom: "subreg.",
    Rank.infrakingdom: "infrareg.",
    Rank.superphylum: "superphyl.",
    Rank.phylum: "phyl.",
    Rank.subphylum: "subphyl.",
    Rank.infraphylum: "infraphyl.",
    Rank.superclass: "supercl.",
    Rank.class_: "cl.",
    Rank.subclass: "subcl.",
    Rank.infraclass: "infracl.",
    Rank.parvclass: "parvcl.",
    Rank.superlegion: "superleg.",
    Rank.legion: "leg.",
    Rank.sublegion: "subleg.",
    Rank.infralegion: "infraleg.",
    Rank.supercohort: "supercohort",
    Rank.cohort: "cohort",
    Rank.subcohort: "subcohort",
    Rank.infracohort: "infracohort",
    Rank.magnorder: "magnord.",
    Rank.superorder: "superord.",
    Rank.grandorder: "grandord.",
    Rank.order: "ord.",
    Rank.suborder: "subord.",
    Rank.infraorder: "infraord.",
    Rank.parvorder: "parvord.",
    Rank.superfamily: "superfam.",
    Rank.family: "fam.",
    Rank.subfamily: "subfam.",
    Rank.infrafamily: "infrafam.",
    Rank.supertribe: "supertrib.",
    Rank.tribe: "trib.",
    Rank.subtribe: "subtrib.",
    Rank.infratribe: "infratrib.",
    Rank.suprageneric_name: "supragen.",
    Rank.genus: "gen.",
    Rank.subgenus: "subgen.",
    Rank.infragenus: "infrag.",
    Rank.section: "sect.",
    Rank.subsection: "subsect.",
    Rank.series: "ser.",
    Rank.subseries: "subser.",
    Rank.infrageneric_name: "infragen.",
    Rank.species_aggregate: "agg.",
    Rank.species: "sp.",
    Rank.infraspecific_name: "infrasp.",
    Rank.grex: "gx",
    Rank.subspecies: "subsp.",
    Rank.cultivar_group: None,
    Rank.convariety: "convar.",
    Rank.infrasubspecific_name: "infrasubsp.",
    Rank.proles: "prol.",
    Rank.race: "race",
    Rank.natio: "natio",
    Rank.aberration: "ab.",
    Rank.morph: "morph",
    Rank.variety: "var.",
    Rank.subvariety: "subvar.",
    Rank.form: "f.",
    Rank.subform: "subf.",
    Rank.pathovar: "pv.",
    Rank.biovar: "biovar",
    Rank.chemovar: "chemovar",
    Rank.morphovar: "morphovar",
    Rank.phagovar: "phagovar",
    Rank.serovar: "serovar",
    Rank.chemoform: "chemoform",
    Rank.forma_specialis: "f.sp.",
    Rank.cultivar: "cv.",
    Rank.strain: "strain",
    Rank.other: None,
    Rank.unranked: None,
}
