"""
Spelling alternatives for spoken movie titles.

Speech recognition hands us "Rogue 1" or "Dr. Strange" while the movie
server may know the title as "Rogue One" or "Doctor Strange", so a lookup
is repeated for every spelling variant.
"""
from typing import Callable, List, Tuple

DIGIT_WORDS = {
    "0": "zero",
    "1": "one",
    "2": "two",
    "3": "three",
    "4": "four",
    "5": "five",
    "6": "six",
    "7": "seven",
    "8": "eight",
    "9": "nine",
}

HONORIFICS = {
    "Dr.": "Doctor",
}


def has_digit(name: str) -> bool:
    return any(ch in DIGIT_WORDS for ch in name)


def spell_digits(name: str) -> str:
    return "".join(DIGIT_WORDS.get(ch, ch) for ch in name)


def has_honorific(name: str) -> bool:
    return any(short in name for short in HONORIFICS)


def expand_honorifics(name: str) -> str:
    for short, full in HONORIFICS.items():
        name = name.replace(short, full)
    return name


Rule = Tuple[Callable[[str], bool], Callable[[str], str]]

# Order matters: earlier rules vary slowest in the output.
RULES: List[Rule] = [
    (has_digit, spell_digits),
    (has_honorific, expand_honorifics),
]


def _apply(rule: Rule, name: str) -> List[str]:
    applies, transform = rule
    if applies(name):
        return [name, transform(name)]
    return [name]


def alternatives(name: str) -> List[str]:
    """
    Expand a title into every combination of its spelling variants.

    Each rule contributes the unchanged string plus, when it applies, the
    transformed one; rules compose as a Cartesian product with the original
    title always first. Results are not deduplicated.

    >>> alternatives("Dr. No 2")
    ['Dr. No 2', 'Doctor No 2', 'Dr. No two', 'Doctor No two']
    """
    variants = [name]
    for rule in RULES:
        variants = [variant for current in variants for variant in _apply(rule, current)]
    return variants
