import argparse
import logging
import sys
from collections.abc import Sequence

from .config import get_options
from .constants import NamePart, NameType, Rank
from .helpers import name_type_of_string, rank_of_string
from .name_parts import NameParts
from .render import VIEWS


def _rank(text: str) -> Rank:
    rank = rank_of_string(text)
    if rank is None:
        raise argparse.ArgumentTypeError(f"unknown rank: {text}")
    return rank


def _name_type(text: str) -> NameType:
    name_type = name_type_of_string(text)
    if name_type is None:
        raise argparse.ArgumentTypeError(f"unknown name type: {text}")
    return name_type


def make_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser("sciname")
    parser.add_argument("-g", "--genus", dest="genus_or_above")
    parser.add_argument("--infrageneric")
    parser.add_argument("-s", "--species", dest="specific_epithet")
    parser.add_argument("-i", "--infraspecies", dest="infraspecific_epithet")
    parser.add_argument("-r", "--rank", type=_rank)
    parser.add_argument("-t", "--type", type=_name_type)
    parser.add_argument(
        "--notho", choices=[part.name for part in NamePart], default=None
    )
    parser.add_argument("-a", "--authorship")
    parser.add_argument("-y", "--year")
    parser.add_argument("--bracket-authorship")
    parser.add_argument("--bracket-year")
    parser.add_argument("--cultivar", dest="cultivar_epithet")
    parser.add_argument("--strain")
    parser.add_argument("--sensu")
    parser.add_argument("--nom-status")
    parser.add_argument("--remarks")
    parser.add_argument("--view", choices=sorted(VIEWS))
    parser.add_argument(
        "--all", action="store_true", default=False, help="print every view"
    )
    parser.add_argument("-v", "--verbose", action="store_true", default=False)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = make_parser().parse_args(argv)
    options = get_options()
    logging.basicConfig(level=logging.DEBUG if args.verbose else options.log_level)

    parts = NameParts(
        genus_or_above=args.genus_or_above,
        infrageneric=args.infrageneric,
        specific_epithet=args.specific_epithet,
        infraspecific_epithet=args.infraspecific_epithet,
        cultivar_epithet=args.cultivar_epithet,
        strain=args.strain,
        rank=args.rank,
        notho=NamePart[args.notho] if args.notho else None,
        authorship=args.authorship,
        year=args.year,
        bracket_authorship=args.bracket_authorship,
        bracket_year=args.bracket_year,
        sensu=args.sensu,
        nom_status=args.nom_status,
        remarks=args.remarks,
        type=args.type,
    )
    if args.all:
        for view_name, view in sorted(VIEWS.items()):
            print(f"{view_name}: {view(parts) or ''}")
        return 0

    view_name = args.view or options.default_view
    try:
        view = VIEWS[view_name]
    except KeyError:
        print(f"unknown view: {view_name}", file=sys.stderr)
        return 1
    name = view(parts)
    if name is not None:
        print(name)
    return 0


if __name__ == "__main__":
    sys.exit(main())
