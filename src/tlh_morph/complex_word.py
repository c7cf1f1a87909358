"""
Decompose a Klingon word into verb prefix, stem, suffixes and rovers.

A complex word is a noun or verb with affixes.  analyze() enumerates every
way a surface form can be split against the affix tables; each result is a
leaf ComplexWord whose lookup_key() can be sent to an exact-match dictionary.

Usage:
    from tlh_morph.complex_word import analyze, WordKind

    for word in analyze("bISoptaHqu'", WordKind.VERB):
        print(word.components_string(), word.lookup_key())
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import Enum

from tlh_morph.affixes import (
    ADJECTIVAL_MARKERS,
    DIGIT_ANNOTATION,
    EMPHATIC_ROVER,
    NEGATION_ROVER,
    NOMINALIZERS,
    NOUN_OY_INDEX,
    NOUN_SLOT_NAMES,
    NOUN_SUFFIXES,
    NOUN_TYPE_5,
    NOUN_TYPE_5_SLOT,
    NUMBER_DIGITS,
    NUMBER_MODIFIERS,
    NUMBER_SUFFIXES,
    SPECIAL_NUMBER_ROOTS,
    VERB_PREFIXES,
    VERB_SLOT_NAMES,
    VERB_SUFFIXES,
    VERB_UNDO_SLOT,
    ends_in_vowel,
)

logger = logging.getLogger(__name__)


class WordKind(Enum):
    NOUN = "n"
    VERB = "v"

    @classmethod
    def parse(cls, value: str | WordKind) -> WordKind:
        """Accept a WordKind, or one of "n", "noun", "v", "verb"."""
        if isinstance(value, cls):
            return value
        kind = _KIND_ALIASES.get(str(value).lower())
        if kind is None:
            raise ValueError(f"Unknown word kind: {value!r} (expected 'n' or 'v')")
        return kind


_KIND_ALIASES: dict[str, WordKind] = {
    "n": WordKind.NOUN, "noun": WordKind.NOUN,
    "v": WordKind.VERB, "verb": WordKind.VERB,
}


# ── Rovers ───────────────────────────────────────────────────────────────

class RoverStatus(Enum):
    UNRESOLVED = "unresolved"  # not looked for yet on this derivation
    ABSENT = "absent"          # passed over; never attach it on this derivation
    ATTACHED = "attached"


@dataclass(frozen=True, slots=True)
class Rover:
    """Where a rover ({-be'} or {-qu'}) sits in a verb.

    When attached, slot is the verb suffix slot it follows, so 0 means
    directly after the verb (or its {-Ha'}).
    """

    status: RoverStatus = RoverStatus.UNRESOLVED
    slot: int | None = None

    @classmethod
    def attached_at(cls, slot: int) -> Rover:
        return cls(RoverStatus.ATTACHED, slot)

    @property
    def is_unresolved(self) -> bool:
        return self.status is RoverStatus.UNRESOLVED

    @property
    def is_attached(self) -> bool:
        return self.status is RoverStatus.ATTACHED

    def is_at(self, slot: int) -> bool:
        return self.is_attached and self.slot == slot


UNRESOLVED = Rover()
ABSENT = Rover(RoverStatus.ABSENT)

_NO_NOUN_SUFFIXES: tuple[int, ...] = (0,) * len(NOUN_SUFFIXES)
_NO_VERB_SUFFIXES: tuple[int, ...] = (0,) * len(VERB_SUFFIXES)


def _set_slot(slots: tuple[int, ...], slot: int, index: int) -> tuple[int, ...]:
    return slots[:slot] + (index,) + slots[slot + 1:]


# ── ComplexWord ──────────────────────────────────────────────────────────

@dataclass(frozen=True, slots=True)
class ComplexWord:
    """One decomposition of a word.

    Slot choices are indexes into the tables in tlh_morph.affixes (0 = no
    affix).  Instances are never mutated; every branch of the analysis
    derives a new one with dataclasses.replace().
    """

    stem: str
    kind: WordKind
    prefix: int = 0
    noun_suffixes: tuple[int, ...] = _NO_NOUN_SUFFIXES
    verb_suffixes: tuple[int, ...] = _NO_VERB_SUFFIXES
    negation: Rover = UNRESOLVED
    emphatic: Rover = UNRESOLVED
    negation_before_emphatic: bool = False  # {-be'qu'} rather than {-qu'be'}
    is_adjectival_verb: bool = False  # verb acting adjectivally, hosting a type 5 noun suffix
    homophone_number: int = -1
    number_digit: int = 0
    number_modifier: int = 0
    number_suffix: str = ""
    number_like: bool = False

    # ── Predicates ───────────────────────────────────────────────────────

    @property
    def is_noun(self) -> bool:
        return self.kind is WordKind.NOUN

    @property
    def is_verb(self) -> bool:
        return self.kind is WordKind.VERB

    @property
    def has_noun_suffixes(self) -> bool:
        return any(self.noun_suffixes)

    @property
    def is_bare_word(self) -> bool:
        """True if no prefix, suffix or rover was found."""
        return (
            self.prefix == 0
            and not self.negation.is_attached
            and not self.emphatic.is_attached
            and not any(self.noun_suffixes)
            and not any(self.verb_suffixes)
        )

    @property
    def is_number_like(self) -> bool:
        return self.is_noun and self.number_like

    # ── Lookup ───────────────────────────────────────────────────────────

    def with_homophone_number(self, number: int) -> ComplexWord:
        return replace(self, homophone_number=number)

    def lookup_key(self, lenient: bool = False) -> str:
        """The dictionary query for this decomposition, e.g. "Sop:v".

        With lenient=True a bare word is returned without a part of speech,
        so that adverbials and other unaffixable entries match too.
        """
        if self.is_adjectival_verb:
            # Must be a non-transitive verb, and not a pronoun acting as a verb.
            return f"{self.stem}:v:n5"
        if lenient and self.is_bare_word:
            return self.stem
        key = f"{self.stem}:{self.kind.value}"
        if self.homophone_number != -1:
            key += f":{self.homophone_number}"
        return key

    # ── Affix names ──────────────────────────────────────────────────────

    @property
    def verb_prefix(self) -> str:
        """Entry name of the prefix, e.g. "bI-", or "" if there is none."""
        if self.prefix == 0:
            return ""
        return VERB_PREFIXES[self.prefix] + "-"

    def verb_suffix_names(self) -> list[str]:
        """Entry names per verb slot (inner to outer), "" for an empty slot."""
        return [
            "-" + table[i] if i else ""
            for table, i in zip(VERB_SUFFIXES, self.verb_suffixes)
        ]

    def noun_suffix_names(self) -> list[str]:
        return [
            "-" + table[i] if i else ""
            for table, i in zip(NOUN_SUFFIXES, self.noun_suffixes)
        ]

    def rovers_at(self, slot: int) -> list[str]:
        """Rovers following the given verb slot, in surface order."""
        negation = self.negation.is_at(slot)
        emphatic = self.emphatic.is_at(slot)
        if negation and emphatic:
            if self.negation_before_emphatic:
                return ["-" + NEGATION_ROVER, "-" + EMPHATIC_ROVER]
            return ["-" + EMPHATIC_ROVER, "-" + NEGATION_ROVER]
        if negation:
            return ["-" + NEGATION_ROVER]
        if emphatic:
            return ["-" + EMPHATIC_ROVER]
        return []

    def _affix_sequence(self) -> list[str]:
        # Verb suffixes go first, since some of them turn a verb into a noun.
        sequence = []
        for slot, name in enumerate(self.verb_suffix_names()):
            if name:
                sequence.append(name)
            sequence.extend(self.rovers_at(slot))
        sequence.extend(name for name in self.noun_suffix_names() if name)
        return sequence

    def surface(self) -> str:
        """Reassemble the surface form from the recorded pieces."""
        affixes = "".join(a[1:] for a in self._affix_sequence())
        return VERB_PREFIXES[self.prefix] + self.stem + affixes

    def components_string(self) -> str:
        """E.g. "bI- + Sop + -taH + -qu'"."""
        parts = [self.verb_prefix] if self.prefix else []
        parts.append(self.stem)
        parts.extend(self._affix_sequence())
        return " + ".join(parts)

    # ── Numbers ──────────────────────────────────────────────────────────

    @property
    def number_root(self) -> str:
        if self.number_digit:
            return NUMBER_DIGITS[self.number_digit]
        for root in SPECIAL_NUMBER_ROOTS:
            if self.stem.startswith(root):
                return root
        return ""

    @property
    def number_root_annotation(self) -> str:
        """Part of speech to look the number root up under, e.g. "n:num"."""
        if self.number_digit:
            return DIGIT_ANNOTATION
        for root, annotation in SPECIAL_NUMBER_ROOTS.items():
            if self.stem.startswith(root):
                return annotation
        logger.debug("No number root annotation for %r", self.stem)
        return ""

    @property
    def number_modifier_name(self) -> str:
        return NUMBER_MODIFIERS[self.number_modifier]

    # ── Assembly from components ─────────────────────────────────────────

    def attach_prefix(self, prefix: str) -> ComplexWord:
        """Record a prefix given as an entry name, e.g. "bI-"."""
        if self.is_noun:
            return self
        for i, p in enumerate(VERB_PREFIXES[1:], start=1):
            if prefix == p + "-":
                return replace(self, prefix=i)
        return self

    def attach_suffix(
        self, suffix: str, is_noun_suffix: bool, verb_level: int,
    ) -> tuple[ComplexWord, int]:
        """Record a suffix given as an entry name, e.g. "-taH".

        is_noun_suffix describes the suffix, not the stem: nominalised verbs
        and adjectival verbs carry noun suffixes.  Rovers attach after
        verb_level.  Returns the new word and the verb slot now reached.
        """
        if suffix.startswith("-") and suffix[1:] in NUMBER_SUFFIXES:
            return replace(self, number_like=True, number_suffix=suffix[1:]), verb_level

        name = suffix[1:] if suffix.startswith("-") else None
        if name and is_noun_suffix:
            for slot, table in enumerate(NOUN_SUFFIXES):
                if name in table[1:]:
                    indexes = _set_slot(self.noun_suffixes, slot, table.index(name))
                    return replace(self, noun_suffixes=indexes), verb_level
        elif name:
            if name == NEGATION_ROVER:
                word = replace(self, negation=Rover.attached_at(verb_level))
                if self.emphatic.is_at(verb_level):
                    word = replace(word, negation_before_emphatic=False)
                return word, verb_level
            if name == EMPHATIC_ROVER:
                word = replace(self, emphatic=Rover.attached_at(verb_level))
                if self.negation.is_at(verb_level):
                    word = replace(word, negation_before_emphatic=True)
                return word, verb_level
            for slot, table in enumerate(VERB_SUFFIXES):
                if name in table[1:]:
                    indexes = _set_slot(self.verb_suffixes, slot, table.index(name))
                    return replace(self, verb_suffixes=indexes), slot

        logger.error("Unrecognised suffix: %r", suffix)
        return self, verb_level

    def __str__(self) -> str:
        return f"{self.components_string()} ({self.kind.value})"


# ── Branching steps ──────────────────────────────────────────────────────

def _top_level(kind: WordKind) -> int:
    return len(NOUN_SUFFIXES) if kind is WordKind.NOUN else len(VERB_SUFFIXES)


def _strip_prefixes(word: ComplexWord) -> list[ComplexWord]:
    stripped = []
    for i, prefix in enumerate(VERB_PREFIXES[1:], start=1):
        rest = word.stem[len(prefix):]
        if word.stem.startswith(prefix) and rest:
            stripped.append(replace(word, stem=rest, prefix=i))
    return stripped


def _strip_rover(word: ComplexWord, level: int) -> tuple[ComplexWord, ComplexWord] | None:
    """Try to peel a rover off the end before the slot below `level`.

    Returns (word with the rover attached, word with the rover ruled out).
    Both continue at the same level, since a rover does not use up a slot.
    """
    # A few entries, like {motlhbe'} and {Say'qu'}, contain a rover already.
    boundary = level - 1
    stem = word.stem
    if (word.negation.is_unresolved
            and stem.endswith(NEGATION_ROVER) and stem != NEGATION_ROVER):
        stripped = replace(
            word,
            stem=stem[:-len(NEGATION_ROVER)],
            negation=Rover.attached_at(boundary),
        )
        if word.emphatic.is_at(boundary):
            # {-be'qu'}
            stripped = replace(stripped, negation_before_emphatic=True)
        logger.debug("found rover -%s at %s", NEGATION_ROVER, VERB_SLOT_NAMES[boundary])
        return stripped, replace(word, negation=ABSENT)

    if (word.emphatic.is_unresolved
            and stem.endswith(EMPHATIC_ROVER) and stem != EMPHATIC_ROVER):
        stripped = replace(
            word,
            stem=stem[:-len(EMPHATIC_ROVER)],
            emphatic=Rover.attached_at(boundary),
        )
        if word.negation.is_at(boundary):
            # {-qu'be'}
            stripped = replace(stripped, negation_before_emphatic=False)
        logger.debug("found rover -%s at %s", EMPHATIC_ROVER, VERB_SLOT_NAMES[boundary])
        return stripped, replace(word, emphatic=ABSENT)

    return None


def _strip_suffix(word: ComplexWord, slot: int) -> ComplexWord | None:
    tables = NOUN_SUFFIXES if word.is_noun else VERB_SUFFIXES
    for i, suffix in enumerate(tables[slot][1:], start=1):
        if not word.stem.endswith(suffix):
            continue
        rest = word.stem[:-len(suffix)]
        if not rest:
            continue
        # {-oy} after a vowel is spelled {-'oy}; see _strip_apostrophe_oy.
        if word.is_noun and slot == 0 and i == NOUN_OY_INDEX and ends_in_vowel(rest):
            continue
        if word.is_noun:
            return replace(word, stem=rest, noun_suffixes=_set_slot(word.noun_suffixes, slot, i))
        return replace(word, stem=rest, verb_suffixes=_set_slot(word.verb_suffixes, slot, i))
    return None


def _strip_apostrophe_oy(word: ComplexWord) -> ComplexWord | None:
    # {ghu'oy} may be {ghu} + {-'oy} as well as {ghu'} + {-oy}.
    if not word.stem.endswith("'oy"):
        return None
    rest = word.stem[:-3]
    if not ends_in_vowel(rest):
        return None
    return replace(word, stem=rest, noun_suffixes=_set_slot(word.noun_suffixes, 0, NOUN_OY_INDEX))


def _detect_number(word: ComplexWord) -> ComplexWord:
    """Fill in the number fields of a noun of the form digit[modifier][suffix]."""
    root = word.stem
    suffix = ""
    ordinal, times = NUMBER_SUFFIXES
    if root.endswith(ordinal) or (word.is_bare_word and root.endswith(times)):
        suffix = ordinal if root.endswith(ordinal) else times
        root = root[:-len(suffix)]

    modifier = 0
    for i, m in enumerate(NUMBER_MODIFIERS[1:], start=1):
        if root.endswith(m):
            modifier = i
            root = root[:-len(m)]
            break

    digit = 0
    number_like = False
    if root in NUMBER_DIGITS[1:]:
        digit = NUMBER_DIGITS.index(root)
        number_like = True

    # A bare digit is found as an ordinary noun anyway.
    if modifier == 0 and not suffix:
        digit = 0
        number_like = False

    # {'arlogh}, {paghlogh}, {Hochlogh}, {paghDIch}, {HochDIch}
    if suffix and root in SPECIAL_NUMBER_ROOTS:
        number_like = True

    return replace(
        word,
        number_digit=digit,
        number_modifier=modifier,
        number_suffix=suffix,
        number_like=number_like,
    )


def _verb_root_of_noun(word: ComplexWord) -> ComplexWord | None:
    # Only when there were noun suffixes: the bare noun gets a verb analysis anyway.
    if word.has_noun_suffixes and word.stem.endswith(NOMINALIZERS):
        return replace(word, kind=WordKind.VERB)
    return None


def _adjectival_verbs(word: ComplexWord) -> list[ComplexWord]:
    """Read a bare verb as an adjectival verb carrying a type 5 noun suffix.

    Any rover on such a verb sits under the noun suffix, which is why the
    word still looked bare.
    """
    # No type 5 suffix ends another, so the first match is the only one.
    # {-mo'} is also a type 9 verb suffix.
    for i, suffix in enumerate(NOUN_TYPE_5[1:], start=1):
        if not word.stem.endswith(suffix):
            continue
        verb = ComplexWord(
            stem=word.stem[:-len(suffix)],
            kind=WordKind.VERB,
            noun_suffixes=_set_slot(_NO_NOUN_SUFFIXES, NOUN_TYPE_5_SLOT, i),
            is_adjectival_verb=True,
        )
        unmarked = _strip_adjectival_marker(verb)
        return [unmarked, verb] if unmarked is not None else [verb]
    return []


def _strip_adjectival_marker(verb: ComplexWord) -> ComplexWord | None:
    marker = next((m for m in ADJECTIVAL_MARKERS if verb.stem.endswith(m)), None)
    if marker is None:
        return None
    rest = replace(verb, stem=verb.stem[:-len(marker)])
    if marker == NEGATION_ROVER:
        return replace(rest, negation=Rover.attached_at(0))
    if marker == EMPHATIC_ROVER:
        return replace(rest, emphatic=Rover.attached_at(0))
    return replace(rest, verb_suffixes=_set_slot(rest.verb_suffixes, VERB_UNDO_SLOT, 1))


def _branches(word: ComplexWord, level: int) -> list[tuple[ComplexWord, int]]:
    """Successor states of a word with `level` slots still open."""
    branches = []
    if word.is_noun and level == 1:
        oy = _strip_apostrophe_oy(word)
        if oy is not None:
            branches.append((oy, 0))

    if word.is_verb:
        rover = _strip_rover(word, level)
        if rover is not None:
            stripped, rest = rover
            branches.append((stripped, level))
            branches.append((rest, level))
            return branches

    slot = level - 1
    stripped = _strip_suffix(word, slot)
    if stripped is not None:
        slot_name = NOUN_SLOT_NAMES[slot] if word.is_noun else VERB_SLOT_NAMES[slot]
        logger.debug("found %s suffix, remainder: %s", slot_name, stripped.stem)
        branches.append((stripped, slot))
    # No suffix in this slot.
    branches.append((word, slot))
    return branches


def _finish(word: ComplexWord) -> tuple[ComplexWord, list[tuple[ComplexWord, int]]]:
    """Turn a word with no slots left into a leaf, plus any re-analyses of it."""
    if word.is_noun:
        leaf = _detect_number(word)
        verb = _verb_root_of_noun(leaf)
        return leaf, [(verb, len(VERB_SUFFIXES))] if verb is not None else []
    if word.is_bare_word:
        return word, [(adjectival, 0) for adjectival in _adjectival_verbs(word)]
    return word, []


# ── Public API ───────────────────────────────────────────────────────────

def analyze(
    surface: str,
    kind: WordKind | str,
    *,
    max_candidates: int | None = None,
) -> list[ComplexWord]:
    """Return every decomposition of `surface` as a noun or verb.

    The unanalysed word itself is always among the results.  Results are in
    depth-first order without duplicates.  max_candidates caps the number of
    results for pathological input.
    """
    kind = WordKind.parse(kind)
    logger.debug("parsing %r (%s)", surface, kind.value)

    if max_candidates is not None and max_candidates < 1:
        raise ValueError(f"max_candidates must be at least 1, not {max_candidates!r}")

    word = ComplexWord(stem=surface, kind=kind)
    # Kept even when the cap stops the search before reaching it.
    identity, _ = _finish(word)
    top = _top_level(kind)
    pending: list[tuple[ComplexWord, int]] = [(word, top)]
    if kind is WordKind.VERB:
        # Prefixed readings are explored first, but the plain one is kept too.
        pending.extend((w, top) for w in reversed(_strip_prefixes(word)))

    leaves: dict[ComplexWord, None] = {}
    has_identity = False
    while pending:
        word, level = pending.pop()
        if level > 0:
            pending.extend(reversed(_branches(word, level)))
            continue

        leaf, more = _finish(word)
        if max_candidates is not None and leaf not in leaves:
            reserved = 0 if _is_identity(leaf, surface) or has_identity else 1
            if len(leaves) + reserved >= max_candidates:
                logger.warning(
                    "Stopped analysing %r after %d candidates", surface, max_candidates,
                )
                if not has_identity:
                    leaves.setdefault(identity)
                break
        logger.debug("found: %s", leaf)
        leaves.setdefault(leaf)
        has_identity = has_identity or _is_identity(leaf, surface)
        pending.extend(reversed(more))

    return list(leaves)


def _is_identity(leaf: ComplexWord, surface: str) -> bool:
    return leaf.stem == surface and leaf.is_bare_word


def lookup_keys(words: list[ComplexWord], lenient: bool = False) -> list[str]:
    """Distinct lookup keys for a list of leaves, in order."""
    return list(dict.fromkeys(w.lookup_key(lenient) for w in words))
