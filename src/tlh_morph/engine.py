"""
Dictionary-backed analysis of Klingon words, with TOML-based configuration.

Splits a word every way the affix grammar allows (as a noun and as a verb),
looks every resulting stem up in the dictionary and keeps the entries that
satisfy the stem's query.

Usage:
    from tlh_morph.engine import MorphEngine

    engine = MorphEngine.from_config()          # loads tlh_morph.toml
    for r in engine.analyze("bISoptaHqu'"):
        print(r.word.components_string(), r.entry.definition)

    # Or build manually:
    engine = MorphEngine()
    engine.add_lexicon("data/*.json")
"""

from __future__ import annotations

import glob
import logging
import tomllib
from dataclasses import dataclass
from pathlib import Path

from tlh_morph.complex_word import ComplexWord, WordKind, analyze
from tlh_morph.entry import Entry, parse_query
from tlh_morph.lexicon import Lexicon

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class AnalysisResult:
    """A decomposition of the input word together with the entry its stem matched."""

    word: ComplexWord
    entry: Entry

    @property
    def stem(self) -> str:
        return self.word.stem

    @property
    def definition(self) -> str:
        return self.entry.definition

    @property
    def part_of_speech(self) -> str:
        return self.entry.part_of_speech

    def __repr__(self) -> str:
        return f"AnalysisResult({self.word.components_string()} → {self.entry!r})"


class MorphEngine:
    """Ties the analyzer to a Lexicon.

    With lenient=True an unaffixed word is also looked up without a part of
    speech, which finds adverbials, conjunctions, sentences and the like.
    """

    def __init__(
        self,
        lexicon: Lexicon | None = None,
        *,
        lenient: bool = False,
        max_candidates: int | None = None,
    ):
        self.lexicon = lexicon if lexicon is not None else Lexicon()
        self.lenient = lenient
        self.max_candidates = max_candidates

    # ── Construction helpers ─────────────────────────────────────────────

    def add_lexicon(self, *paths: str | Path) -> None:
        """Load one or more dictionary JSON files (globs allowed) into the lexicon."""
        resolved = _expand_paths(paths)
        if not resolved:
            logger.warning("No dictionary files matched %s", [str(p) for p in paths])
            return
        self.lexicon.extend(Lexicon.from_files(resolved).entries)

    @classmethod
    def from_config(cls, config_path: str | Path = "tlh_morph.toml") -> MorphEngine:
        """Build a MorphEngine from a TOML config file.

        Paths in the config are resolved relative to the config file's
        directory.  Glob patterns in paths are expanded.
        """
        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config not found: {config_path}")

        with config_path.open("rb") as f:
            cfg = tomllib.load(f)

        base_dir = config_path.parent

        # Logging
        log_cfg = cfg.get("logging", {})
        if log_cfg:
            from tlh_morph.logging_config import setup_logging

            log_file = log_cfg.get("file")
            if log_file and not Path(log_file).is_absolute():
                log_file = base_dir / log_file
            setup_logging(
                level=log_cfg.get("level", "WARNING"),
                log_file=log_file,
                debug=log_cfg.get("debug", False),
            )

        # Analysis
        analysis_cfg = cfg.get("analysis", {})
        engine = cls(
            lenient=analysis_cfg.get("lenient", False),
            max_candidates=analysis_cfg.get("max_candidates"),
        )

        # Lexicon
        lex_cfg = cfg.get("lexicon", {})
        lex_paths = lex_cfg.get("paths", [])
        if lex_paths:
            resolved = _resolve_config_paths(lex_paths, base_dir)
            if resolved:
                engine.add_lexicon(*resolved)

        return engine

    # ── Analysis ─────────────────────────────────────────────────────────

    def parse(self, word: str, kind: WordKind | str | None = None) -> list[ComplexWord]:
        """Decompositions of word, without consulting the dictionary.

        With no kind, noun readings come first, then verb readings.
        """
        kinds = [WordKind.parse(kind)] if kind is not None else [WordKind.NOUN, WordKind.VERB]
        leaves: dict[ComplexWord, None] = {}
        for k in kinds:
            for leaf in analyze(word, k, max_candidates=self.max_candidates):
                leaves.setdefault(leaf)
        return list(leaves)

    def lookup_keys(self, word: ComplexWord) -> list[str]:
        """Dictionary queries for one decomposition.

        A number such as {wa'maH} or {cha'DIch} is also looked up by its root.
        """
        keys = [word.lookup_key(self.lenient)]
        if word.is_number_like and word.number_root:
            keys.append(f"{word.number_root}:{word.number_root_annotation}")
        return keys

    def analyze(self, word: str) -> list[AnalysisResult]:
        """Decompose word and return every (decomposition, entry) pair found."""
        return self._analyze(word, {})

    def analyze_batch(self, words: list[str]) -> dict[str, list[AnalysisResult]]:
        """Analyze several words, sharing dictionary lookups between them.

        Words with no results are left out.
        """
        cache: dict[str, list[Entry]] = {}
        results: dict[str, list[AnalysisResult]] = {}
        for word in words:
            if word in results:
                continue
            found = self._analyze(word, cache)
            if found:
                results[word] = found
        return results

    def _analyze(self, word: str, cache: dict[str, list[Entry]]) -> list[AnalysisResult]:
        results = []
        seen: set[tuple[ComplexWord, Entry]] = set()
        for leaf in self.parse(word):
            for key in self.lookup_keys(leaf):
                if key not in cache:
                    # One dictionary lookup per distinct key.
                    cache[key] = self.lexicon.find(parse_query(key))
                for entry in cache[key]:
                    if (leaf, entry) in seen:
                        continue
                    seen.add((leaf, entry))
                    results.append(AnalysisResult(word=leaf, entry=entry))
        logger.debug("%r: %d result(s)", word, len(results))
        return results

    # ── Introspection ────────────────────────────────────────────────────

    def summary(self) -> str:
        mode = "lenient" if self.lenient else "strict"
        lines = [f"MorphEngine ({mode}, max_candidates={self.max_candidates}):"]
        lines.append("  [lexicon]")
        for sub_line in self.lexicon.summary().split("\n"):
            lines.append(f"    {sub_line}")
        return "\n".join(lines)


# ── Path helpers ─────────────────────────────────────────────────────────

def _has_glob(p: str) -> bool:
    return "*" in p or "?" in p


def _expand_paths(paths: tuple[str | Path, ...]) -> list[Path]:
    """Expand globs and return a list of Paths."""
    result = []
    for p in paths:
        p_str = str(p)
        if _has_glob(p_str):
            result.extend(Path(m) for m in sorted(glob.glob(p_str)))
        else:
            result.append(Path(p))
    return result


def _resolve_config_paths(raw_paths: list[str], base_dir: Path) -> list[Path]:
    """Resolve config paths relative to base_dir, expanding globs."""
    return _expand_paths(tuple(
        Path(p) if Path(p).is_absolute() else base_dir / p for p in raw_paths
    ))
