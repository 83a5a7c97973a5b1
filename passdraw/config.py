from dataclasses import dataclass
from enum import Enum
import jsonschema
import toml

from .charsets import (CharacterClass, default_modes, parse_mode_string,
    mode_string, ModeStringException)

class ConfigException(Exception):
    pass

class Algorithm(Enum):
    RANDOM_PASSWORD = "random"
    COIN_FLIP = "coinflip"
    UNSUPPORTED = "unsupported"

    @classmethod
    def from_name(cls, name: str):
        """
        Unknown names map to UNSUPPORTED, which fails only once generation
        is attempted.
        """
        try:
            return cls(name)
        except ValueError:
            return cls.UNSUPPORTED

defaults = {
    "algorithm": Algorithm.RANDOM_PASSWORD.value,
    "fixed_length": 0,
    "min_length": 12,
    "max_length": 20,
    "modes": mode_string(default_modes, False),
    "human_readable": False,
    "min_lower_case": 0,
    "min_upper_case": 0,
    "min_numeric": 0,
    "min_special": 0,
    "max_attempts": 10000,
    "count": 6,
}

def _non_negative_int():
    return {"type": "integer", "minimum": 0}

@dataclass(frozen=True)
class GenerationConfig:
    algorithm: Algorithm
    fixed_length: int
    min_length: int
    max_length: int
    modes: frozenset
    human_readable: bool
    min_lower_case: int
    min_upper_case: int
    min_numeric: int
    min_special: int
    max_attempts: int
    count: int

    json_schema = {
        "$schema": "http://json-schema.org/draft-07/schema",
        "title": "passdraw configuration schema",
        "type": "object",
        "properties": {
            "algorithm": {"type": "string"},
            "fixed_length": _non_negative_int(),
            "min_length": {"type": "integer"},
            "max_length": {"type": "integer"},
            "modes": {"type": "string"},
            "human_readable": {"type": "boolean"},
            "min_lower_case": _non_negative_int(),
            "min_upper_case": _non_negative_int(),
            "min_numeric": _non_negative_int(),
            "min_special": _non_negative_int(),
            "max_attempts": {"type": "integer", "minimum": 1},
            "count": {"type": "integer", "minimum": 1},
        },
        "additionalProperties": False,
    }

    @classmethod
    def default(cls):
        return cls({})

    def __init__(self, dict_data):
        """
        Args:
            dict_data: Dictionary as read from a config file. Missing keys
                take their default values. The "modes" mode string is applied
                with no classes enabled at start, so "LUN" means exactly
                lowercase, uppercase and numeric. It starts out from the
                human_readable key, which its H and h letters override.
                max_attempts caps the number of candidates drawn per
                password; running out raises ATTEMPTS_EXHAUSTED even when
                the minimums could be met in principle.
        """
        try:
            jsonschema.validate(instance=dict_data, schema=self.json_schema)
        except jsonschema.ValidationError as exc:
            raise ConfigException(f"Invalid configuration: {exc.message}") from exc

        data = dict(defaults)
        data.update(dict_data)

        try:
            modes, human_readable = parse_mode_string(data["modes"],
                human_readable=data["human_readable"])
        except ModeStringException as exc:
            raise ConfigException(str(exc)) from exc

        object.__setattr__(self, "algorithm", Algorithm.from_name(data["algorithm"]))
        object.__setattr__(self, "modes", modes)
        object.__setattr__(self, "human_readable", human_readable)
        for key in ("fixed_length", "min_length", "max_length",
                "min_lower_case", "min_upper_case", "min_numeric",
                "min_special", "max_attempts", "count"):
            object.__setattr__(self, key, data[key])

    def minimums(self):
        """
        Returns:
            Dictionary mapping each CharacterClass to its configured minimum
            number of occurrences.
        """
        return {
            CharacterClass.LOWER: self.min_lower_case,
            CharacterClass.UPPER: self.min_upper_case,
            CharacterClass.NUMERIC: self.min_numeric,
            CharacterClass.SPECIAL: self.min_special,
        }

    def dict(self):
        return {
            "algorithm": self.algorithm.value,
            "fixed_length": self.fixed_length,
            "min_length": self.min_length,
            "max_length": self.max_length,
            "modes": mode_string(self.modes, False),
            "human_readable": self.human_readable,
            "min_lower_case": self.min_lower_case,
            "min_upper_case": self.min_upper_case,
            "min_numeric": self.min_numeric,
            "min_special": self.min_special,
            "max_attempts": self.max_attempts,
            "count": self.count,
        }

def load_config(toml_fn) -> GenerationConfig:
    try:
        with open(toml_fn, "r") as f:
            config_dict = toml.load(f)
    except toml.TomlDecodeError as exc:
        raise ConfigException(f"Could not parse {toml_fn}: {exc}") from exc

    return GenerationConfig(config_dict)
