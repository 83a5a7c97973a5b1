import argparse
import logging
import sys
import toml
from pathlib import Path

from .config import GenerationConfig, ConfigException, defaults, load_config
from .generate import PasswordGenerator
from .random_source import GeneratorException
from .spelling import spell_password

def init_config_if_missing(toml_fn) -> bool:
    """
    Writes the default configuration to toml_fn.

    Returns:
        False if the file already existed and was left untouched.
    """
    Path(toml_fn).parent.mkdir(parents=True, exist_ok=True)

    init_config = GenerationConfig.default().dict()
    try:
        with open(toml_fn, "x") as f:
            toml.dump(init_config, f)
    except FileExistsError:
        return False
    return True

def default_config_fn():
    fn = Path.home() / ".config/passdraw/config.toml"
    return str(fn)

# Maps argparse destinations to config keys.
arg_config_keys = {
    "algorithm": "algorithm",
    "fixed_length": "fixed_length",
    "min_length": "min_length",
    "max_length": "max_length",
    "min_lower": "min_lower_case",
    "min_upper": "min_upper_case",
    "min_numeric": "min_numeric",
    "min_special": "min_special",
    "count": "count",
}

def config_from_args(args) -> GenerationConfig:
    """
    Reads the config file (if any) and applies command line overrides.
    """
    if args.config:
        dict_data = load_config(args.config).dict()
    elif Path(default_config_fn()).exists():
        dict_data = load_config(default_config_fn()).dict()
    else:
        dict_data = {}

    for dest, key in arg_config_keys.items():
        value = getattr(args, dest)
        if value is not None:
            dict_data[key] = value

    if args.human_readable:
        dict_data["human_readable"] = True

    # Mode letters apply on top of the configured modes.
    if args.mode:
        dict_data["modes"] = dict_data.get("modes", defaults["modes"]) + args.mode

    return GenerationConfig(dict_data)

def main_generate(args):
    config = config_from_args(args)
    generator = PasswordGenerator(config)
    for pw in generator.generate_many(config.count):
        if args.spell:
            print(f"{pw} ({spell_password(pw)})")
        else:
            print(pw)

def main_init_config(args):
    if init_config_if_missing(args.config_toml):
        print(f"Default configuration written to {args.config_toml}.")
    else:
        print(f"{args.config_toml} already exists.")

def build_parser():
    ap = argparse.ArgumentParser(prog="passdraw",
        description="Generate cryptographically secure random passwords.")
    ap.set_defaults(action=main_generate)

    ap.add_argument("-c", "--config", help="Configuration file (TOML)")
    ap.add_argument("-a", "--algorithm", choices=["random", "coinflip"])
    ap.add_argument("-m", "--min-length", type=int, dest="min_length")
    ap.add_argument("-x", "--max-length", type=int, dest="max_length")
    ap.add_argument("-f", "--fixed-length", type=int, dest="fixed_length")
    ap.add_argument("-M", "--mode",
        help="Mode letters: L/U/N/S enable lowercase, uppercase, numeric, "
        "special characters, C enables all four, H selects human-readable "
        "character sets. Lowercase letters disable.")
    ap.add_argument("-H", "--human-readable", action="store_true",
        dest="human_readable")
    ap.add_argument("--min-lower", type=int, dest="min_lower")
    ap.add_argument("--min-upper", type=int, dest="min_upper")
    ap.add_argument("--min-numeric", type=int, dest="min_numeric")
    ap.add_argument("--min-special", type=int, dest="min_special")
    ap.add_argument("-n", "--count", type=int, help="Number of passwords")
    ap.add_argument("-l", "--spell", action="store_true",
        help="Spell out generated passwords")
    ap.add_argument("-v", "--verbose", action="store_true")

    subparsers = ap.add_subparsers(title="Commands")

    parser_init = subparsers.add_parser("init-config",
        help="Write default configuration file")
    parser_init.add_argument("config_toml", nargs="?",
        help="Configuration file",
        default=default_config_fn())
    parser_init.set_defaults(action=main_init_config)

    return ap

def main(argv=None):
    args = build_parser().parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s")

    try:
        args.action(args)
    except (GeneratorException, ConfigException, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)
