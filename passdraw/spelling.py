import string

nato_words = [
    "alfa", "bravo", "charlie", "delta", "echo", "foxtrot", "golf", "hotel",
    "india", "juliett", "kilo", "lima", "mike", "november", "oscar", "papa",
    "quebec", "romeo", "sierra", "tango", "uniform", "victor", "whiskey",
    "xray", "yankee", "zulu",
]

digit_words = [
    "ZERO", "ONE", "TWO", "THREE", "FOUR", "FIVE", "SIX", "SEVEN", "EIGHT",
    "NINE",
]

special_words = {
    "!": "Exclamation",
    "\"": "Double_Quote",
    "#": "Hash",
    "$": "Dollar",
    "%": "Percent",
    "&": "Ampersand",
    "'": "Single_Quote",
    "(": "Left_Parenthesis",
    ")": "Right_Parenthesis",
    "*": "Asterisk",
    "+": "Plus",
    ",": "Comma",
    "-": "Dash",
    ".": "Period",
    "/": "Slash",
    ":": "Colon",
    ";": "Semicolon",
    "<": "Less_Than",
    "=": "Equal",
    ">": "Greater_Than",
    "?": "Question",
    "@": "At",
    "[": "Left_Bracket",
    "\\": "Backslash",
    "]": "Right_Bracket",
    "^": "Caret",
    "_": "Underscore",
    "`": "Backtick",
    "{": "Left_Brace",
    "|": "Pipe",
    "}": "Right_Brace",
    "~": "Tilde",
}

spell_table = dict(special_words)
spell_table.update(zip(string.ascii_lowercase, nato_words))
spell_table.update(zip(string.ascii_uppercase, (w.upper() for w in nato_words)))
spell_table.update(zip(string.digits, digit_words))

def spell_char(c: str) -> str:
    return spell_table.get(c, c)

def spell_password(pw: str) -> str:
    """
    Spells out a password for dictation, e.g. "aB3!" becomes
    "alfa/BRAVO/THREE/Exclamation".
    """
    return "/".join(spell_char(c) for c in pw)
