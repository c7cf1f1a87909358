"""Tests for query matching (matcher.py)."""

import pytest
from tlh_morph.entry import decode, parse_query
from tlh_morph.matcher import satisfies


def _entry(name: str, pos: str):
    return decode(pos, entry_name=name)


# ── Name and part of speech ───────────────────────────────────────────────────

def test_exact_match():
    assert satisfies(parse_query("Sop:v"), _entry("Sop", "v:t_c"))


def test_name_must_match_exactly():
    assert not satisfies(parse_query("Sop:v"), _entry("sop", "v:t_c"))
    assert not satisfies(parse_query("Sop:v"), _entry("Soplu'", "v"))


def test_part_of_speech_must_match():
    assert not satisfies(parse_query("Sop:n"), _entry("Sop", "v:t_c"))
    assert not satisfies(parse_query("puq:v"), _entry("puq", "n"))


def test_verb_query_accepts_pronoun():
    assert satisfies(parse_query("jIH:v"), _entry("jIH", "n:pro"))


def test_verb_query_rejects_pronoun_with_other_name():
    assert not satisfies(parse_query("SoH:v"), _entry("jIH", "n:pro"))


@pytest.mark.parametrize("name", ["nuq", "'Iv"])
def test_noun_query_accepts_question_nouns(name):
    assert satisfies(parse_query(f"{name}:n"), _entry(name, "ques"))


def test_noun_query_rejects_other_question_words():
    assert not satisfies(parse_query("ghorgh:n"), _entry("ghorgh", "ques"))


def test_noun_query_accepts_epithet():
    assert satisfies(parse_query("petaQ:n"), _entry("petaQ", "excl:epithet"))
    assert not satisfies(parse_query("Qapla':n"), _entry("Qapla'", "excl"))


def test_noun_query_does_not_accept_verb():
    assert not satisfies(parse_query("jIH:n"), _entry("jIH", "v"))


# ── Unknown queries ───────────────────────────────────────────────────────────

def test_unknown_query_ignores_name_and_part_of_speech():
    q = parse_query("anything")
    assert satisfies(q, _entry("Sop", "v:t_c"))
    assert satisfies(q, _entry("puq", "n"))


def test_unknown_query_still_checks_homophone():
    q = parse_query(":???:2")
    assert q.is_unknown
    assert satisfies(q, _entry("ghoS", "v:i_c,2"))
    assert not satisfies(q, _entry("ghoS", "v:t_c,1"))


def test_unknown_query_still_checks_flags():
    q = decode("???:slang", entry_name="veQ")
    assert q.is_unknown
    assert q.is_slang
    assert not satisfies(q, _entry("veQ", "n"))
    assert satisfies(q, _entry("veQ", "n:slang"))


# ── Adjectival verbs ──────────────────────────────────────────────────────────

@pytest.mark.parametrize("pos,expected", [
    ("v:is", True),
    ("v:ambi", True),
    ("v:i", True),
    ("v", True),
    ("v:i_c", False),
    ("v:t", False),
    ("v:t_c", False),
])
def test_adjectival_query_needs_non_transitive_verb(pos, expected):
    assert satisfies(parse_query("tIn:v:n5"), _entry("tIn", pos)) is expected


def test_adjectival_query_rejects_pronoun():
    assert not satisfies(parse_query("jIH:v:n5"), _entry("jIH", "n:pro"))


# ── Homophones ────────────────────────────────────────────────────────────────

def test_homophone_number_must_match():
    q = parse_query("ghoS:v:2")
    assert satisfies(q, _entry("ghoS", "v:i_c,2"))
    assert not satisfies(q, _entry("ghoS", "v:t_c,1"))
    assert not satisfies(q, _entry("ghoS", "v"))


def test_query_without_homophone_matches_any():
    q = parse_query("ghoS:v")
    assert satisfies(q, _entry("ghoS", "v:t_c,1"))
    assert satisfies(q, _entry("ghoS", "v:i_c,2"))


def test_hidden_homophone_still_matches():
    assert satisfies(parse_query("ghoS:v:2"), _entry("ghoS", "v:2h"))


# ── Attribute subsumption ─────────────────────────────────────────────────────

@pytest.mark.parametrize("attr", ["slang", "reg", "archaic"])
def test_query_flag_must_be_on_candidate(attr):
    q = parse_query(f"veQ:n:{attr}")
    assert not satisfies(q, _entry("veQ", "n"))
    assert satisfies(q, _entry("veQ", f"n:{attr}"))


@pytest.mark.parametrize("attr", ["slang", "reg", "archaic", "name", "num"])
def test_candidate_flag_alone_does_not_restrict(attr):
    assert satisfies(parse_query("veQ:n"), _entry("veQ", f"n:{attr}"))


def test_name_query_needs_name():
    q = parse_query("qeylIS:n:name")
    assert satisfies(q, _entry("qeylIS", "n:name"))
    assert not satisfies(q, _entry("qeylIS", "n"))


def test_number_query_needs_number():
    q = parse_query("wa':n:num")
    assert satisfies(q, _entry("wa'", "n:num"))
    assert not satisfies(q, _entry("wa'", "n"))


def test_entry_is_satisfied_by():
    assert parse_query("Sop:v").is_satisfied_by(_entry("Sop", "v:t_c"))
