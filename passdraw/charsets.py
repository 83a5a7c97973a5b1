import string
from enum import Enum

class ModeStringException(Exception):
    pass

class CharacterClass(Enum):
    """
    Character classes a password can be composed of. Each class has a
    standard literal set and a human-readable one that leaves out visually
    ambiguous characters such as 0/O or 1/l.
    """
    LOWER = ("lower", string.ascii_lowercase, "abcdefghjkmnpqrstuvwxyz")
    UPPER = ("upper", string.ascii_uppercase, "ABCDEFGHJKMNPQRSTUVWXYZ")
    NUMERIC = ("numeric", string.digits, "23456789")
    SPECIAL = ("special", string.punctuation, "\"#%*+-/:;=\\_|~")

    def __init__(self, label, standard, human):
        self.label = label
        self.standard = standard
        self.human = human

    def chars(self, human_readable: bool) -> str:
        if human_readable:
            return self.human
        else:
            return self.standard

# Order in which the classes are concatenated to form the alphabet.
canonical_order = (
    CharacterClass.LOWER,
    CharacterClass.NUMERIC,
    CharacterClass.SPECIAL,
    CharacterClass.UPPER,
)

all_classes = frozenset(CharacterClass)

default_modes = frozenset([
    CharacterClass.LOWER,
    CharacterClass.UPPER,
    CharacterClass.NUMERIC,
])

def compose_char_range(modes, human_readable: bool) -> str:
    """
    Returns the alphabet for the enabled character classes. The result is
    empty if modes is empty.
    """
    return "".join(cls.chars(human_readable)
        for cls in canonical_order if cls in modes)

def count_class(candidate: str, cls: CharacterClass, human_readable: bool) -> int:
    members = cls.chars(human_readable)
    return sum(1 for c in candidate if c in members)

mode_letters = {
    "L": (CharacterClass.LOWER,),
    "U": (CharacterClass.UPPER,),
    "N": (CharacterClass.NUMERIC,),
    "S": (CharacterClass.SPECIAL,),
    "C": tuple(canonical_order),
}

def parse_mode_string(mode_str: str, modes=frozenset(), human_readable: bool = False):
    """
    Applies a mode string like "LUNH" or "Cs" on top of the given modes.

    Uppercase letters enable, lowercase letters disable a setting:
    L lowercase, U uppercase, N numeric, S special, C all four classes,
    H human-readable character sets. Letters are applied left to right.

    Returns:
        Tuple (modes, human_readable), modes being a frozenset of
        CharacterClass.
    """
    modes = set(modes)
    for letter in mode_str:
        key = letter.upper()
        enable = letter.isupper()
        if key == "H":
            human_readable = enable
        elif key in mode_letters:
            if enable:
                modes.update(mode_letters[key])
            else:
                modes.difference_update(mode_letters[key])
        else:
            raise ModeStringException(f"Unknown mode letter \"{letter}\".")
    return frozenset(modes), human_readable

def mode_string(modes, human_readable: bool) -> str:
    """
    Inverse of parse_mode_string for a start from no modes enabled.
    """
    letters = {
        CharacterClass.LOWER: "L",
        CharacterClass.UPPER: "U",
        CharacterClass.NUMERIC: "N",
        CharacterClass.SPECIAL: "S",
    }
    s = "".join(letters[cls] for cls in CharacterClass if cls in modes)
    if human_readable:
        s += "H"
    return s
