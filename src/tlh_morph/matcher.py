"""
Decide whether a dictionary entry satisfies a query.

A query is itself an Entry, usually built by parse_query() from a link such
as "ghoS:v:2" or from ComplexWord.lookup_key().  The candidate must match
its name exactly, be compatible in part of speech and homophone number, and
carry every restricting flag (slang, regional, ...) the query carries.
"""

from __future__ import annotations

from tlh_morph.entry import BasePartOfSpeech, Entry, Transitivity

# Nouns that a noun query may also find, although they are question words.
_QUESTION_NOUNS = frozenset({"nuq", "'Iv"})


def _part_of_speech_compatible(query: Entry, candidate: Entry) -> bool:
    if query.base is candidate.base:
        return True
    # A pronoun can act as a verb (e.g. {jIH} "be me").
    if query.base is BasePartOfSpeech.VERB and candidate.is_pronoun:
        return True
    if query.is_noun and (candidate.entry_name in _QUESTION_NOUNS or candidate.is_epithet):
        return True
    return False


def _adjectival_compatible(candidate: Entry) -> bool:
    # Only a stative or intransitive verb can act adjectivally.
    if candidate.is_pronoun:
        return False
    if candidate.transitivity is Transitivity.TRANSITIVE:
        return False
    return not (
        candidate.transitivity is Transitivity.INTRANSITIVE and candidate.transitivity_confirmed
    )


def satisfies(query: Entry, candidate: Entry) -> bool:
    """True if candidate is an entry that query asks for."""
    # An unknown query (free text) places no constraint on name or part of speech.
    if not query.is_unknown:
        if query.entry_name != candidate.entry_name:
            return False
        if not _part_of_speech_compatible(query, candidate):
            return False
        if (query.base is BasePartOfSpeech.VERB
                and query.transitivity is Transitivity.HAS_TYPE_5_NOUN_SUFFIX):
            if not _adjectival_compatible(candidate):
                return False

    if query.homophone_number != -1 and query.homophone_number != candidate.homophone_number:
        return False

    # Flags on the query restrict; flags on the candidate alone do not.
    for restriction in ("is_slang", "is_regional", "is_archaic", "is_name", "is_number"):
        if getattr(query, restriction) and not getattr(candidate, restriction):
            return False
    return True
