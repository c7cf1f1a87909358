"""
Load a Klingon dictionary from JSON and look entries up by exact name.

Usage:
    from tlh_morph.lexicon import Lexicon

    lex = Lexicon.from_file("data/sample_dictionary.json")
    print(f"{len(lex)} entries")

    for entry in lex.lookup("Sop"):
        print(entry.entry_name, entry.part_of_speech, entry.definition)

    # Entries satisfying a query / link string
    lex.find("ghoS:v:2")

The JSON document has the shape

    {"entries": [{"id": 1, "entry_name": "Sop", "part_of_speech": "v:t_c",
                  "definition": "eat", "components": "", "source": "[1] TKD"}, ...]}
"""

from __future__ import annotations

import json
import logging
from collections import Counter
from pathlib import Path
from typing import Iterable, Iterator

from tlh_morph.entry import Entry, from_record, parse_query

logger = logging.getLogger(__name__)


class Lexicon:
    """
    Dictionary entries, decoded once and indexed by entry name.

    Lookup is case-sensitive: {Qob} and {qob} are different words.
    """

    def __init__(self):
        self.entries: list[Entry] = []
        self.name_index: dict[str, list[Entry]] = {}

    @classmethod
    def from_file(cls, path: str | Path) -> Lexicon:
        """Load from a dictionary JSON file."""
        path = Path(path)
        with path.open("r", encoding="utf-8") as f:
            raw = json.load(f)
        lex = cls.from_dict(raw)
        logger.info("Loaded %d entries from %s", len(lex), path)
        return lex

    @classmethod
    def from_files(cls, paths: Iterable[str | Path]) -> Lexicon:
        """Load and merge several dictionary files, in order."""
        lex = cls()
        for path in paths:
            lex.extend(cls.from_file(path).entries)
        return lex

    @classmethod
    def from_dict(cls, raw: dict) -> Lexicon:
        """Load from an already-parsed JSON dict."""
        return cls.from_records(raw.get("entries", []))

    @classmethod
    def from_records(cls, records: Iterable[dict]) -> Lexicon:
        lex = cls()
        lex.extend(from_record(r) for r in records)
        return lex

    def extend(self, entries: Iterable[Entry]) -> None:
        for entry in entries:
            self.entries.append(entry)
            self.name_index.setdefault(entry.entry_name, []).append(entry)

    # ── Lookup ───────────────────────────────────────────────────────────

    def lookup(self, entry_name: str) -> list[Entry]:
        """All entries whose name is exactly entry_name."""
        return self.name_index.get(entry_name, [])

    def find(self, query: str | Entry) -> list[Entry]:
        """Entries satisfying a query string like "ghoS:v:2" (or a parsed query)."""
        if isinstance(query, str):
            query = parse_query(query)
        return [e for e in self.lookup(query.entry_name) if query.is_satisfied_by(e)]

    def resolve_components(self, entry: Entry) -> list[list[Entry]]:
        """For each component of entry, the entries it links to."""
        return [self.find(q) for q in entry.components_as_entries()]

    # ── Iteration / stats ────────────────────────────────────────────────

    def __len__(self) -> int:
        return len(self.entries)

    def __contains__(self, entry_name: str) -> bool:
        return entry_name in self.name_index

    def all_names(self) -> Iterator[str]:
        yield from self.name_index.keys()

    def summary(self) -> str:
        lines = [
            f"Entries:        {len(self.entries)}",
            f"Unique names:   {len(self.name_index)}",
            "",
            "Part of speech breakdown:",
        ]
        base_counts = Counter(e.base.value for e in self.entries)
        for base, count in base_counts.most_common():
            lines.append(f"  {base:8s} {count:6d}")
        return "\n".join(lines)
