"""tlh-morph: Klingon morphological analyzer, part-of-speech decoder and query matcher."""

from tlh_morph.complex_word import ComplexWord, WordKind, Rover, RoverStatus, analyze, lookup_keys
from tlh_morph.entry import Entry, decode, parse_query
from tlh_morph.matcher import satisfies
from tlh_morph.lexicon import Lexicon
from tlh_morph.engine import MorphEngine, AnalysisResult

__all__ = [
    "ComplexWord", "WordKind", "Rover", "RoverStatus",
    "analyze", "lookup_keys",
    "Entry", "decode", "parse_query",
    "satisfies",
    "Lexicon",
    "MorphEngine", "AnalysisResult",
]
