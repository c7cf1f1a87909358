"""
Klingon affix tables.

Every slot table starts with "" (no affix in that slot), so an index into a
table doubles as the recorded choice for that slot: 0 means absent.

Verb suffix slots are stored inner-to-outer:

    0      -Ha'          (undo, always right after the verb)
    1..8   type 1..8
    9      -Qo'          (refusal, last unless a type 9 follows)
    10     type 9

The analyzer walks them from index 10 down to 0.
"""

from __future__ import annotations


# ── Noun suffixes ────────────────────────────────────────────────────────

NOUN_TYPE_1: tuple[str, ...] = ("", "'a'", "Hom", "oy")
NOUN_TYPE_2: tuple[str, ...] = ("", "pu'", "Du'", "mey")
NOUN_TYPE_3: tuple[str, ...] = ("", "qoq", "Hey", "na'")
NOUN_TYPE_4: tuple[str, ...] = (
    "", "wIj", "wI'", "maj", "ma'", "lIj", "lI'", "raj", "ra'", "Daj", "chaj", "vam", "vetlh",
)
NOUN_TYPE_5: tuple[str, ...] = ("", "Daq", "vo'", "mo'", "vaD", "'e'")

NOUN_SUFFIXES: tuple[tuple[str, ...], ...] = (
    NOUN_TYPE_1, NOUN_TYPE_2, NOUN_TYPE_3, NOUN_TYPE_4, NOUN_TYPE_5,
)

# Index of the type 5 slot and of "oy" within type 1.
NOUN_TYPE_5_SLOT = 4
NOUN_OY_INDEX = NOUN_TYPE_1.index("oy")


# ── Verb prefixes ────────────────────────────────────────────────────────

VERB_PREFIXES: tuple[str, ...] = (
    "", "bI", "bo", "che", "cho", "Da", "DI", "Du", "gho", "HI", "jI", "ju", "lI", "lu", "ma",
    "mu", "nI", "nu", "pe", "pI", "qa", "re", "Sa", "Su", "tI", "tu", "vI", "wI", "yI",
)


# ── Verb suffixes ────────────────────────────────────────────────────────

VERB_UNDO: tuple[str, ...] = ("", "Ha'")
VERB_TYPE_1: tuple[str, ...] = ("", "'egh", "chuq")
VERB_TYPE_2: tuple[str, ...] = ("", "nIS", "qang", "rup", "beH", "vIp")
VERB_TYPE_3: tuple[str, ...] = ("", "choH", "qa'")
VERB_TYPE_4: tuple[str, ...] = ("", "moH")
VERB_TYPE_5: tuple[str, ...] = ("", "lu'", "laH", "luH", "la'")
VERB_TYPE_6: tuple[str, ...] = ("", "chu'", "bej", "ba'", "law'")
VERB_TYPE_7: tuple[str, ...] = ("", "pu'", "ta'", "taH", "lI'")
VERB_TYPE_8: tuple[str, ...] = ("", "neS")
VERB_REFUSAL: tuple[str, ...] = ("", "Qo'")
VERB_TYPE_9: tuple[str, ...] = (
    "", "DI'", "chugh", "pa'", "vIS", "mo'", "bogh", "meH", "'a'", "jaj", "wI'", "ghach",
)

VERB_SUFFIXES: tuple[tuple[str, ...], ...] = (
    VERB_UNDO,
    VERB_TYPE_1,
    VERB_TYPE_2,
    VERB_TYPE_3,
    VERB_TYPE_4,
    VERB_TYPE_5,
    VERB_TYPE_6,
    VERB_TYPE_7,
    VERB_TYPE_8,
    VERB_REFUSAL,
    VERB_TYPE_9,
)

VERB_UNDO_SLOT = 0
VERB_REFUSAL_SLOT = 9
VERB_TYPE_9_SLOT = 10

# Human-readable slot names, indexed like VERB_SUFFIXES / NOUN_SUFFIXES.
VERB_SLOT_NAMES: tuple[str, ...] = (
    "-Ha'", "type 1", "type 2", "type 3", "type 4", "type 5",
    "type 6", "type 7", "type 8", "-Qo'", "type 9",
)
NOUN_SLOT_NAMES: tuple[str, ...] = ("type 1", "type 2", "type 3", "type 4", "type 5")


# ── Rovers ───────────────────────────────────────────────────────────────

NEGATION_ROVER = "be'"
EMPHATIC_ROVER = "qu'"

# Markers an adjectival verb may carry in front of its type 5 noun suffix.
# {-Qo'} is deliberately absent.
ADJECTIVAL_MARKERS: tuple[str, ...] = (NEGATION_ROVER, EMPHATIC_ROVER, "Ha'")

# Suffixes which turn a verb into a noun; a noun stem ending in one of these
# is re-analysed as a verb.
NOMINALIZERS: tuple[str, ...] = ("ghach", "wI'")


# ── Numbers ──────────────────────────────────────────────────────────────

# {pagh} is left out: it does not normally combine with modifiers.
NUMBER_DIGITS: tuple[str, ...] = (
    "", "wa'", "cha'", "wej", "loS", "vagh", "jav", "Soch", "chorgh", "Hut",
)
NUMBER_MODIFIERS: tuple[str, ...] = (
    "", "maH", "vatlh", "SaD", "SanID", "netlh", "bIp", "'uy'", "Saghan",
)
NUMBER_SUFFIXES: tuple[str, ...] = ("DIch", "logh")

# Non-digit roots that still take {-DIch}/{-logh}, with their lookup annotation.
SPECIAL_NUMBER_ROOTS: dict[str, str] = {
    "pagh": "n:num",
    "Hoch": "n",     # a noun, but not a number
    "'ar": "ques",   # a question word
}
DIGIT_ANNOTATION = "n:num"

VOWELS = frozenset("aeIou")


def ends_in_vowel(s: str) -> bool:
    return bool(s) and s[-1] in VOWELS
