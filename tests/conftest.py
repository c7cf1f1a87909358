"""Shared test fixtures."""

import json
import logging
from pathlib import Path

import pytest

from tlh_morph.lexicon import Lexicon


# A handful of real dictionary entries, enough to exercise every lookup path.
SAMPLE_RECORDS = [
    {"id": 1, "entry_name": "puq", "part_of_speech": "n", "definition": "child"},
    {"id": 2, "entry_name": "Sop", "part_of_speech": "v:t_c", "definition": "eat"},
    {"id": 3, "entry_name": "bI-", "part_of_speech": "v:pref", "definition": "you (no object)"},
    {"id": 4, "entry_name": "-taH", "part_of_speech": "v:suff", "definition": "continuous"},
    {"id": 5, "entry_name": "-qu'", "part_of_speech": "v:suff", "definition": "emphatic"},
    {"id": 6, "entry_name": "ghoS", "part_of_speech": "v:t_c,1", "definition": "approach"},
    {"id": 7, "entry_name": "ghoS", "part_of_speech": "v:i_c,2", "definition": "go away"},
    {"id": 8, "entry_name": "jIH", "part_of_speech": "n:pro", "definition": "I, me"},
    {"id": 9, "entry_name": "tIn", "part_of_speech": "v:is", "definition": "be big"},
    {"id": 10, "entry_name": "wa'", "part_of_speech": "n:num", "definition": "one"},
    {"id": 11, "entry_name": "maH", "part_of_speech": "n:num", "definition": "ten"},
    {"id": 12, "entry_name": "vaj", "part_of_speech": "adv", "definition": "so, then"},
    {"id": 13, "entry_name": "ghoj", "part_of_speech": "v:t_c", "definition": "learn"},
    {"id": 14, "entry_name": "ghojwI'", "part_of_speech": "n", "definition": "student",
     "components": "ghoj:v:t_c, -wI':v"},
    {"id": 15, "entry_name": "-wI'", "part_of_speech": "v:suff", "definition": "one who does"},
    {"id": 16, "entry_name": "veS", "part_of_speech": "n", "definition": "war"},
    {"id": 17, "entry_name": "veQ", "part_of_speech": "n:slang", "definition": "garbage (slang)"},
    {"id": 18, "entry_name": "TKD p.39", "part_of_speech": "src", "definition": "The Klingon Dictionary"},
]


@pytest.fixture
def sample_records() -> list[dict]:
    return [dict(r) for r in SAMPLE_RECORDS]


@pytest.fixture
def lexicon(sample_records) -> Lexicon:
    return Lexicon.from_records(sample_records)


@pytest.fixture
def restore_logging():
    """Put the root logger back the way it was after a test that configures logging."""
    root = logging.getLogger()
    level = root.level
    yield root
    # pytest's own capture handlers are subclasses; only drop plain ones.
    for handler in list(root.handlers):
        if type(handler) in (logging.StreamHandler, logging.FileHandler):
            handler.close()
            root.removeHandler(handler)
    root.setLevel(level)


@pytest.fixture
def lexicon_file(tmp_path, sample_records) -> Path:
    """The sample dictionary written to a JSON file."""
    path = tmp_path / "data" / "sample.json"
    path.parent.mkdir()
    path.write_text(json.dumps({"entries": sample_records}), encoding="utf-8")
    return path
