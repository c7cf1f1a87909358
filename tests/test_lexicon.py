"""Tests for the dictionary (lexicon.py)."""

import json

import pytest
from tlh_morph.entry import parse_query
from tlh_morph.lexicon import Lexicon


# ── Loading ───────────────────────────────────────────────────────────────────

def test_from_records(lexicon, sample_records):
    assert len(lexicon) == len(sample_records)


def test_from_dict(sample_records):
    lex = Lexicon.from_dict({"entries": sample_records})
    assert len(lex) == len(sample_records)


def test_from_dict_without_entries():
    assert len(Lexicon.from_dict({})) == 0


def test_from_file(lexicon_file, sample_records):
    lex = Lexicon.from_file(lexicon_file)
    assert len(lex) == len(sample_records)
    assert "Sop" in lex


def test_from_files_merges(tmp_path, lexicon_file):
    extra = tmp_path / "extra.json"
    extra.write_text(json.dumps({"entries": [
        {"id": 100, "entry_name": "Sop", "part_of_speech": "n", "definition": "(made up)"},
    ]}), encoding="utf-8")
    lex = Lexicon.from_files([lexicon_file, extra])
    assert [e.part_of_speech for e in lex.lookup("Sop")] == ["v:t_c", "n"]


def test_from_file_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        Lexicon.from_file(tmp_path / "nope.json")


def test_from_file_invalid_json(tmp_path):
    bad = tmp_path / "bad.json"
    bad.write_text("{not json", encoding="utf-8")
    with pytest.raises(json.JSONDecodeError):
        Lexicon.from_file(bad)


def test_records_are_decoded(lexicon):
    (sop,) = lexicon.lookup("Sop")
    assert sop.is_verb
    assert sop.transitivity_confirmed
    assert sop.definition == "eat"
    assert sop.id == 2


# ── Lookup ────────────────────────────────────────────────────────────────────

def test_lookup_is_exact_and_case_sensitive(lexicon):
    assert len(lexicon.lookup("ghoS")) == 2
    assert lexicon.lookup("ghos") == []
    assert lexicon.lookup("gho") == []


def test_find_by_query_string(lexicon):
    (entry,) = lexicon.find("ghoS:v:2")
    assert entry.definition == "go away"


def test_find_by_parsed_query(lexicon):
    assert len(lexicon.find(parse_query("ghoS:v"))) == 2


def test_find_respects_part_of_speech(lexicon):
    assert lexicon.find("puq:v") == []
    assert len(lexicon.find("jIH:v")) == 1  # pronoun as verb


def test_find_unknown_query_matches_name_only(lexicon):
    assert len(lexicon.find("ghoS")) == 2


def test_resolve_components(lexicon):
    (student,) = lexicon.lookup("ghojwI'")
    components = lexicon.resolve_components(student)
    assert [[e.entry_name for e in c] for c in components] == [["ghoj"], ["-wI'"]]


# ── Iteration / stats ─────────────────────────────────────────────────────────

def test_all_names(lexicon):
    names = list(lexicon.all_names())
    assert names.count("ghoS") == 1
    assert "puq" in names


def test_summary(lexicon):
    s = lexicon.summary()
    assert f"Entries:        {len(lexicon)}" in s
    assert "Part of speech breakdown:" in s
    assert "v " in s
