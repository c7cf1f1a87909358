"""
Dictionary entries and their part-of-speech metadata.

A dictionary record carries a part-of-speech field of the form
"base[:attr1,attr2,...]", e.g. "v:t_c" or "n:name,1h".  decode() turns it into
an immutable Entry; parse_query() does the same for a query or link string
such as "ghoS:v" or "tlhIngan Hol:n@@tlhIngan:n, Hol:n".

Usage:
    from tlh_morph.entry import decode, parse_query

    entry = decode("v:t_c", entry_name="legh", definition="see")
    entry.is_verb, entry.transitivity        # True, Transitivity.TRANSITIVE
    query = parse_query("legh:v")
    query.is_satisfied_by(entry)             # True

Unrecognised parts of speech and attributes are logged and otherwise
ignored; decoding never fails.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any

logger = logging.getLogger(__name__)

# Separates an entry query from its list of components.  It must not occur in
# a link (so not "//" or a single "@") nor need escaping in a regex.
COMPONENTS_MARKER = "@@"


class BasePartOfSpeech(Enum):
    NOUN = "n"
    VERB = "v"
    ADVERBIAL = "adv"
    CONJUNCTION = "conj"
    QUESTION = "ques"
    SENTENCE = "sen"
    EXCLAMATION = "excl"
    SOURCE = "src"
    URL = "url"
    UNKNOWN = "???"


class Transitivity(Enum):
    TRANSITIVE = "transitive"
    INTRANSITIVE = "intransitive"
    STATIVE = "stative"
    AMBITRANSITIVE = "ambitransitive"
    UNKNOWN = "unknown"
    # Only ever on a query: a verb acting adjectivally with a type 5 noun suffix.
    HAS_TYPE_5_NOUN_SUFFIX = "n5"


class NounType(Enum):
    GENERAL = "general"
    NUMBER = "number"
    NAME = "name"
    PRONOUN = "pronoun"


class SentenceType(Enum):
    PHRASE = "phr"
    EMPIRE_UNION_DAY = "eu"
    CURSE_WARFARE = "mv"
    IDIOM = "idiom"
    NENTAY = "nt"
    PROVERB = "prov"
    MILITARY_CELEBRATION = "Ql"
    REJECTION = "rej"
    REPLACEMENT_PROVERB = "rp"
    SECRECY_PROVERB = "sp"
    TOAST = "toast"
    LYRICS = "lyr"
    BEGINNERS_CONVERSATION = "bc"
    JOKE = "joke"


class Flag(Enum):
    # Affix and display markers
    PREFIX = "pref"
    SUFFIX = "suff"
    INDENTED = "indent"  # affixes attached to a word, verbs with prefixes
    # Nouns
    INHERENT_PLURAL = "inhpl"
    SINGULAR_OF_INHERENT_PLURAL = "inhps"
    PLURAL = "plural"  # already carries plural suffixes
    # Exclamations
    EPITHET = "epithet"
    # Categories
    ANIMAL = "anim"
    ARCHAIC = "archaic"
    BEING_CAPABLE_OF_LANGUAGE = "being"
    BODY_PART = "body"
    DERIVATIVE = "deriv"
    REGIONAL = "reg"
    FOOD = "food"
    INVECTIVE = "inv"
    PLACE_NAME = "place"
    SLANG = "slang"
    WEAPONS = "weap"
    # Additional metadata
    ALTERNATIVE_SPELLING = "alt"
    FICTIONAL = "fic"
    HYPOTHETICAL = "hyp"
    EXTENDED_CANON = "extcan"
    DO_NOT_LINK = "nolink"


# ── Attribute table ──────────────────────────────────────────────────────
# Each token maps to the Entry fields it sets.  "flags" adds to the flag set;
# every other key overwrites, so later tokens win.

_ATTRIBUTES: dict[str, dict[str, Any]] = {
    # Verbs.  Ambitransitive and stative verbs always count as confirmed.
    "ambi": {"transitivity": Transitivity.AMBITRANSITIVE, "transitivity_confirmed": True},
    "i": {"transitivity": Transitivity.INTRANSITIVE},
    "i_c": {"transitivity": Transitivity.INTRANSITIVE, "transitivity_confirmed": True},
    "is": {"transitivity": Transitivity.STATIVE, "transitivity_confirmed": True},
    "t": {"transitivity": Transitivity.TRANSITIVE},
    "t_c": {"transitivity": Transitivity.TRANSITIVE, "transitivity_confirmed": True},
    "n5": {"transitivity": Transitivity.HAS_TYPE_5_NOUN_SUFFIX},
    # Nouns
    "name": {"noun_type": NounType.NAME, "show_homophone_number": False},
    "num": {"noun_type": NounType.NUMBER},
    "pro": {"noun_type": NounType.PRONOUN},
    # Used only by the Anki export.
    "noanki": {},
    "klcp1": {},
}
_ATTRIBUTES.update({flag.value: {"flags": flag} for flag in Flag})
_ATTRIBUTES.update({st.value: {"sentence_type": st} for st in SentenceType})
for _n in range(1, 6):
    _ATTRIBUTES[str(_n)] = {"homophone_number": _n}
    _ATTRIBUTES[f"{_n}h"] = {"homophone_number": _n, "show_homophone_number": False}

_BASES: dict[str, BasePartOfSpeech] = {b.value: b for b in BasePartOfSpeech}


# ── Source links ─────────────────────────────────────────────────────────

_TKD_URL = "https://play.google.com/books/reader?id=dqOwxsg6XnwC"
_KGT_URL = "https://play.google.com/books/reader?id=B5AiSVBw7nMC"

_TKD_PAGE_RE = re.compile(r"TKD p.([0-9]+)")
_TKD_SECTION_RE = re.compile(r"TKD ([0-9]\.[0-9](?:\.[0-9])?)")
_TKDA_SECTION_RE = re.compile(r"TKDA ([0-9]\.[0-9](?:\.[0-9])?)")
_KGT_PAGE_RE = re.compile(r"KGT p.([0-9]+)")

# Printed page number for each TKD section.
_TKD_SECTION_PAGES: dict[str, int] = {
    "3.2.1": 19, "3.2.2": 19, "3.2.3": 20, "3.3.1": 21, "3.3.2": 21,
    "3.3.3": 24, "3.3.4": 25, "3.3.5": 26, "3.3.6": 29, "3.4": 30,
    "4.2.1": 35, "4.2.2": 36, "4.2.3": 37, "4.2.4": 38, "4.2.5": 38,
    "4.2.6": 39, "4.2.7": 40, "4.2.8": 43, "4.2.9": 43, "4.2.10": 44,
    "4.3": 46, "4.4": 49, "5.1": 51, "5.2": 52, "5.3": 55, "5.4": 55,
    "5.5": 57, "5.6": 58, "6.1": 59, "6.2.1": 61, "6.2.2": 62, "6.2.3": 63,
    "6.2.4": 64, "6.2.5": 65, "6.3": 67, "6.4": 68, "6.5": 70, "6.6": 70,
}
_TKDA_SECTION_PAGES: dict[str, int] = {
    "3.3.1": 174, "4.2.6": 175, "4.2.9": 175, "6.7": 179, "6.8": 179,
}
# The Google Play edition of KGT is offset from the printed one.
_KGT_PAGE_OFFSET = 9


def _source_url(name: str) -> str | None:
    if m := _TKD_PAGE_RE.search(name):
        return f"{_TKD_URL}&pg=GBS.PA{int(m.group(1))}"
    if m := _TKD_SECTION_RE.search(name):
        page = _TKD_SECTION_PAGES.get(m.group(1))
        return f"{_TKD_URL}&pg=GBS.PA{page}" if page else _TKD_URL
    if m := _TKDA_SECTION_RE.search(name):
        page = _TKDA_SECTION_PAGES.get(m.group(1))
        return f"{_TKD_URL}&pg=GBS.PA{page}" if page else _TKD_URL
    # TKW is not in Google Play Books.
    if m := _KGT_PAGE_RE.search(name):
        return f"{_KGT_URL}&pg=GBS.PT{int(m.group(1)) + _KGT_PAGE_OFFSET}"
    return None


# ── Entry ────────────────────────────────────────────────────────────────

@dataclass(frozen=True, slots=True)
class Entry:
    """A dictionary entry, or a query for one, with decoded metadata."""

    entry_name: str
    part_of_speech: str = ""  # raw field, e.g. "v:t_c"
    base: BasePartOfSpeech = BasePartOfSpeech.UNKNOWN
    noun_type: NounType = NounType.GENERAL
    transitivity: Transitivity = Transitivity.UNKNOWN
    transitivity_confirmed: bool = False
    sentence_type: SentenceType = SentenceType.PHRASE
    homophone_number: int = -1
    show_homophone_number: bool = True
    flags: frozenset[Flag] = frozenset()
    link_url: str = ""

    # Plain record fields, copied verbatim.
    id: int = -1
    definition: str = ""
    components: str = ""
    source: str = ""
    notes: str = ""

    def has(self, flag: Flag) -> bool:
        return flag in self.flags

    # ── Part of speech ───────────────────────────────────────────────────

    @property
    def is_unknown(self) -> bool:
        return self.base is BasePartOfSpeech.UNKNOWN

    @property
    def is_noun(self) -> bool:
        """Nouns, including noun suffixes."""
        return self.base is BasePartOfSpeech.NOUN

    @property
    def is_verb(self) -> bool:
        """Verbs, but not verb prefixes or suffixes."""
        return self.base is BasePartOfSpeech.VERB and not self.is_prefix and not self.is_suffix

    @property
    def is_prefix(self) -> bool:
        # Links (e.g. component lists) are not fully annotated, hence the "-".
        return self.base is BasePartOfSpeech.VERB and (
            self.has(Flag.PREFIX) or self.entry_name.endswith("-")
        )

    @property
    def is_suffix(self) -> bool:
        return self.has(Flag.SUFFIX) or self.entry_name.startswith("-")

    @property
    def is_pronoun(self) -> bool:
        return self.is_noun and self.noun_type is NounType.PRONOUN

    @property
    def is_name(self) -> bool:
        return self.is_noun and self.noun_type is NounType.NAME

    @property
    def is_number(self) -> bool:
        return self.is_noun and self.noun_type is NounType.NUMBER

    @property
    def is_sentence(self) -> bool:
        return self.base is BasePartOfSpeech.SENTENCE

    @property
    def is_source(self) -> bool:
        return self.base is BasePartOfSpeech.SOURCE

    @property
    def is_url(self) -> bool:
        return self.base is BasePartOfSpeech.URL

    @property
    def is_misc(self) -> bool:
        """Neither sentence, noun, verb nor affix, e.g. {chuvmey}."""
        return self.base in (
            BasePartOfSpeech.ADVERBIAL,
            BasePartOfSpeech.CONJUNCTION,
            BasePartOfSpeech.QUESTION,
        )

    # ── Flags ────────────────────────────────────────────────────────────

    @property
    def is_slang(self) -> bool:
        return self.has(Flag.SLANG)

    @property
    def is_regional(self) -> bool:
        return self.has(Flag.REGIONAL)

    @property
    def is_archaic(self) -> bool:
        return self.has(Flag.ARCHAIC)

    @property
    def is_epithet(self) -> bool:
        return self.has(Flag.EPITHET)

    @property
    def is_alternative_spelling(self) -> bool:
        return self.has(Flag.ALTERNATIVE_SPELLING)

    @property
    def is_hypothetical(self) -> bool:
        return self.has(Flag.HYPOTHETICAL)

    @property
    def is_extended_canon(self) -> bool:
        return self.has(Flag.EXTENDED_CANON)

    @property
    def do_not_link(self) -> bool:
        return self.has(Flag.DO_NOT_LINK)

    @property
    def is_indented(self) -> bool:
        return self.has(Flag.INDENTED)

    # ── Derived values ───────────────────────────────────────────────────

    @property
    def url(self) -> str:
        """Link target: derived from the name for sources, else the URL attribute."""
        if self.is_source:
            derived = _source_url(self.entry_name)
            if derived is not None:
                return derived
        return self.link_url

    def sentence_type_query(self) -> str:
        return f"*:sen:{self.sentence_type.value}"

    def components_as_entries(self) -> list[Entry]:
        """The components field, one query Entry per component.

        ", " separates components; a bare "," separates attributes within one.
        """
        if not self.components.strip():
            return []
        return [parse_query(q) for q in re.split(r"\s*, \s*", self.components)]

    def is_satisfied_by(self, candidate: Entry) -> bool:
        """Treat self as a query and test candidate against it."""
        from tlh_morph.matcher import satisfies

        return satisfies(self, candidate)

    def __repr__(self) -> str:
        pos = f":{self.part_of_speech}" if self.part_of_speech else ""
        return f"Entry({{{self.entry_name}{pos}}})"


# ── Decoding ─────────────────────────────────────────────────────────────

def decode(
    part_of_speech: str,
    *,
    entry_name: str = "",
    id: int = -1,
    definition: str = "",
    components: str = "",
    source: str = "",
    notes: str = "",
) -> Entry:
    """Decode a "base[:attr,...]" part-of-speech field into an Entry.

    The record fields (definition, components, ...) are copied onto the
    entry unchanged.
    """
    base_str, colon, attr_str = part_of_speech.partition(":")
    attributes = attr_str.split(",") if colon else []

    base = BasePartOfSpeech.UNKNOWN
    if base_str:
        found = _BASES.get(base_str)
        if found is None or found is BasePartOfSpeech.UNKNOWN:
            logger.warning(
                "{%s} has unrecognised part of speech: %r", entry_name, part_of_speech,
            )
        else:
            base = found

    values: dict[str, Any] = {}
    flags: set[Flag] = set()
    for attr in attributes:
        effect = _ATTRIBUTES.get(attr)
        if effect is None:
            if base is BasePartOfSpeech.URL:
                # For a URL entry, the attribute is the URL itself.
                values["link_url"] = attr
            else:
                logger.error("{%s} has unrecognised attribute: %r", entry_name, attr)
            continue
        for key, value in effect.items():
            if key == "flags":
                flags.add(value)
            else:
                values[key] = value

    return Entry(
        entry_name=entry_name,
        part_of_speech=part_of_speech,
        base=base,
        flags=frozenset(flags),
        id=id,
        definition=definition,
        components=components,
        source=source,
        notes=notes,
        **values,
    )


def parse_query(query: str, definition: str = "") -> Entry:
    """Build an Entry from a query or link like "entryName:base:attrs@@components".

    No dictionary is consulted.  A query with no part of speech, such as text
    typed into a search box, decodes to an unknown base.
    """
    name, _, components = query.partition(COMPONENTS_MARKER)
    name, _, part_of_speech = name.partition(":")
    return decode(
        part_of_speech,
        entry_name=name,
        definition=definition,
        components=components,
    )


def from_record(record: dict[str, Any]) -> Entry:
    """Decode a dictionary record (a dict with at least entry_name, part_of_speech)."""
    return decode(
        record.get("part_of_speech", "") or "",
        entry_name=record.get("entry_name", ""),
        id=record.get("id", -1),
        definition=record.get("definition", "") or "",
        components=record.get("components", "") or "",
        source=record.get("source", "") or "",
        notes=record.get("notes", "") or "",
    )
