import configparser
import functools
import logging
import os
import sys
from pathlib import Path
from typing import NamedTuple


class Options(NamedTuple):
    default_view: str = "canonical_name_with_marker"
    log_level: str = "WARNING"


_DEFAULTS = Options()


def error(message: str) -> None:
    print(message, file=sys.stderr)


@functools.cache
def parse_config_file(filename: Path) -> Options:
    parser = configparser.ConfigParser()
    parser.read(filename)
    try:
        section = parser["sciname"]
    except KeyError:
        error(f'config file {filename} missing required section "sciname"')
        return Options()
    log_level = section.get("log_level", _DEFAULTS.log_level).upper()
    if log_level not in logging.getLevelNamesMapping():
        error(f"config file {filename} has unknown log_level {log_level!r}")
        log_level = _DEFAULTS.log_level
    return Options(
        default_view=section.get("default_view", _DEFAULTS.default_view),
        log_level=log_level,
    )


def get_options() -> Options:
    if "SCINAME_CONFIG_FILE" in os.environ:
        config_file = Path(os.environ["SCINAME_CONFIG_FILE"])
    else:
        config_file = Path(__file__).parent.parent / "sciname.ini"
    if not config_file.exists():
        return Options()
    return parse_config_file(config_file)
