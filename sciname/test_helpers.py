from .constants import NameType, NomenclaturalCode, Rank
from .helpers import (
    ascii_fold,
    code_of_rank,
    decompose,
    higher_than,
    infer_rank,
    infer_rank_from_parts,
    is_backbone_type,
    is_infrageneric_strictly,
    is_infraspecific,
    is_linnean,
    is_parsable,
    is_species_aggregate_or_below,
    is_species_or_below,
    is_suprageneric,
    is_uncomparable,
    marker_of_rank,
    name_type_of_string,
    parse_year,
    rank_of_string,
)


def test_is_infraspecific() -> None:
    assert not is_infraspecific(Rank.superfamily)
    assert not is_infraspecific(Rank.kingdom)
    assert not is_infraspecific(Rank.infrageneric_name)
    assert not is_infraspecific(Rank.genus)
    assert not is_infraspecific(Rank.species)
    assert not is_infraspecific(Rank.unranked)
    assert not is_infraspecific(Rank.other)
    assert is_infraspecific(Rank.subform)
    assert is_infraspecific(Rank.variety)
    assert is_infraspecific(Rank.cultivar)
    assert is_infraspecific(Rank.strain)


def test_is_linnean() -> None:
    for rank in (
        Rank.kingdom,
        Rank.phylum,
        Rank.class_,
        Rank.order,
        Rank.family,
        Rank.genus,
        Rank.species,
    ):
        assert is_linnean(rank)
    assert not is_linnean(Rank.subsection)
    assert not is_linnean(Rank.subgenus)
    assert not is_linnean(Rank.superfamily)
    assert not is_linnean(Rank.infrageneric_name)


def test_is_species_or_below() -> None:
    assert not is_species_or_below(Rank.superfamily)
    assert not is_species_or_below(Rank.infrageneric_name)
    assert not is_species_or_below(Rank.genus)
    assert not is_species_or_below(Rank.species_aggregate)
    assert not is_species_or_below(Rank.unranked)
    assert is_species_or_below(Rank.species)
    assert is_species_or_below(Rank.subform)
    assert is_species_or_below(Rank.strain)
    assert is_species_or_below(Rank.cultivar)
    assert is_species_aggregate_or_below(Rank.species_aggregate)
    assert is_species_aggregate_or_below(Rank.species)
    assert not is_species_aggregate_or_below(Rank.series)


def test_is_infrageneric_strictly() -> None:
    assert is_infrageneric_strictly(Rank.subgenus)
    assert is_infrageneric_strictly(Rank.section)
    assert is_infrageneric_strictly(Rank.subseries)
    assert is_infrageneric_strictly(Rank.infrageneric_name)
    assert not is_infrageneric_strictly(Rank.genus)
    assert not is_infrageneric_strictly(Rank.species_aggregate)
    assert not is_infrageneric_strictly(Rank.species)
    assert not is_infrageneric_strictly(Rank.unranked)


def test_is_suprageneric() -> None:
    assert is_suprageneric(Rank.superfamily)
    assert is_suprageneric(Rank.kingdom)
    assert is_suprageneric(Rank.suprageneric_name)
    assert is_suprageneric(Rank.tribe)
    assert not is_suprageneric(Rank.infrageneric_name)
    assert not is_suprageneric(Rank.genus)
    assert not is_suprageneric(Rank.species)
    assert not is_suprageneric(Rank.cultivar)
    assert not is_suprageneric(Rank.unranked)


def test_is_uncomparable() -> None:
    for rank in (Rank.kingdom, Rank.family, Rank.genus, Rank.species, Rank.subgenus):
        assert not is_uncomparable(rank)
    assert is_uncomparable(Rank.infrageneric_name)
    assert is_uncomparable(Rank.infraspecific_name)
    assert is_uncomparable(Rank.unranked)


def test_higher_than() -> None:
    assert higher_than(Rank.genus, Rank.species)
    assert not higher_than(Rank.species, Rank.genus)
    assert not higher_than(Rank.unranked, Rank.species)


def test_marker_of_rank() -> None:
    assert marker_of_rank(Rank.subspecies) == "subsp."
    assert marker_of_rank(Rank.variety) == "var."
    assert marker_of_rank(Rank.section) == "sect."
    assert marker_of_rank(Rank.unranked) is None


def test_code_of_rank() -> None:
    assert code_of_rank(Rank.pathovar) is NomenclaturalCode.bacterial
    assert code_of_rank(Rank.cultivar) is NomenclaturalCode.cultivars
    assert code_of_rank(Rank.natio) is NomenclaturalCode.zoological
    assert code_of_rank(Rank.species) is None


def test_infer_rank() -> None:
    assert infer_rank("ssp.") is Rank.subspecies
    assert infer_rank("subsp.") is Rank.subspecies
    assert infer_rank("Var.") is Rank.variety
    assert infer_rank("f. sp.") is Rank.forma_specialis
    assert infer_rank("pv.") is Rank.pathovar
    assert infer_rank("***") is Rank.infraspecific_name
    assert infer_rank("nonsense") is None
    assert infer_rank(None) is None


def test_infer_rank_from_parts() -> None:
    names = {
        "Asteraceae": Rank.family,
        "Magnoliophyta": Rank.phylum,
        "Fabales": Rank.order,
        "Hominidae": Rank.family,
        "Drosophilinae": Rank.subfamily,
        "Agaricomycetes": Rank.class_,
    }
    for name, rank in names.items():
        assert infer_rank_from_parts(name, None, None, None, None) is rank, name

    assert infer_rank_from_parts("Abies", "Abies", "alba", None, None) is Rank.species
    assert infer_rank_from_parts("Abies", None, "alba", None, None) is Rank.species
    assert (
        infer_rank_from_parts(None, "Abies", None, None, None)
        is Rank.infrageneric_name
    )
    assert (
        infer_rank_from_parts("", "Abies", None, None, None) is Rank.infrageneric_name
    )
    rank = infer_rank_from_parts(None, "Abies", "alba", "var.", "alpina")
    assert rank is Rank.variety
    assert infer_rank_from_parts(None, "Abies", "alba", "ssp.", None) is Rank.subspecies
    assert infer_rank_from_parts(None, "Abies", None, "spec.", None) is Rank.species
    assert (
        infer_rank_from_parts("Neurolaenodinae", None, None, "ib.", None)
        is Rank.suprageneric_name
    )
    # no way to tell the rank of a name with an irregular suffix
    assert infer_rank_from_parts("Compositae", None, None, None, None) is Rank.unranked


def test_rank_of_string() -> None:
    assert rank_of_string("subspecies") is Rank.subspecies
    assert rank_of_string("SPECIES_AGGREGATE") is Rank.species_aggregate
    assert rank_of_string("class") is Rank.class_
    assert rank_of_string("sect.") is Rank.section
    assert rank_of_string("rank") is None
    assert rank_of_string("") is None


def test_name_types() -> None:
    assert is_parsable(NameType.scientific)
    assert is_parsable(NameType.informal)
    assert is_parsable(NameType.doubtful)
    assert not is_parsable(NameType.virus)
    assert not is_parsable(NameType.no_name)
    assert not is_parsable(NameType.hybrid)
    assert not is_parsable(NameType.placeholder)

    assert is_backbone_type(NameType.scientific)
    assert is_backbone_type(NameType.virus)
    assert is_backbone_type(NameType.doubtful)
    assert not is_backbone_type(NameType.placeholder)
    assert not is_backbone_type(NameType.hybrid)
    assert not is_backbone_type(NameType.cultivar)


def test_name_type_of_string() -> None:
    assert name_type_of_string("scientific") is NameType.scientific
    assert name_type_of_string(" CANDIDATUS ") is NameType.candidatus
    assert name_type_of_string("bogus") is None
    assert name_type_of_string("") is None
    assert name_type_of_string(None) is None


def test_decompose() -> None:
    assert decompose("CÃ¦salpinia") == "Caesalpinia"
    assert decompose("Ånothera") == "Oenothera"
    assert decompose("ï¬ava") == "flava"
    assert decompose("Abies alba") == "Abies alba"


def test_ascii_fold() -> None:
    assert ascii_fold("vÃ¼lgÃ¥rÃ®s") == "vulgaris"
    assert ascii_fold("DÃ¸ring") == "Doring"
    assert ascii_fold("Åomnicki") == "Lomnicki"
    assert ascii_fold("ÃHeucherella") == "ÃHeucherella"
    assert ascii_fold("Abies alba (L.) Mill., 1768") == "Abies alba (L.) Mill., 1768"


def test_parse_year() -> None:
    assert parse_year("1850") == 1850
    assert parse_year("-20") == -20
    assert parse_year(" 1850 ") is None
    assert parse_year("1_850") is None
    assert parse_year("١٨٥٠") is None
    assert parse_year("1850?") is None
    assert parse_year("fl. 1850") is None
    assert parse_year("") is None
    assert parse_year(None) is None
