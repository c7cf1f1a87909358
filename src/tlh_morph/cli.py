#!/usr/bin/env python3
"""
Klingon morphological analyzer CLI.

--parse and --decode work without a dictionary.  --analyze and --find load
one from tlh_morph.toml by default, or from --lexicon:

    python -m tlh_morph.cli --parse "bISoptaHqu'" --kind v
    python -m tlh_morph.cli --decode "v:t_c,2"
    python -m tlh_morph.cli --analyze "puqpu'wIjDaq"
    python -m tlh_morph.cli --lexicon data/*.json --analyze "Qongbe'" --lenient
    python -m tlh_morph.cli --lexicon data/*.json --find "ghoS:v:2"
"""

import argparse
import sys
from pathlib import Path

from tlh_morph.logging_config import setup_logging


def _find_default_config() -> Path | None:
    """Look for tlh_morph.toml in CWD."""
    candidate = Path("tlh_morph.toml")
    if candidate.exists():
        return candidate
    return None


def _print_entry(entry, indent: str = "  ") -> None:
    print(f"{indent}{{{entry.entry_name}:{entry.part_of_speech}}} {entry.definition}")


def main(argv: list[str] | None = None):
    parser = argparse.ArgumentParser(
        description="Klingon morphological analyzer"
    )
    parser.add_argument(
        "--config",
        metavar="FILE",
        help="Path to TOML config file (default: auto-detect tlh_morph.toml)",
    )
    parser.add_argument(
        "--lexicon",
        nargs="+",
        help="Path(s) to dictionary JSON (overrides config)",
    )
    parser.add_argument(
        "--parse",
        metavar="WORD",
        help="List every decomposition of a word and its lookup key",
    )
    parser.add_argument(
        "--kind",
        choices=["n", "v"],
        help="Parse as noun or verb only (use with --parse)",
    )
    parser.add_argument(
        "--analyze",
        metavar="WORD",
        help="Decompose a word and look the stems up in the dictionary",
    )
    parser.add_argument(
        "--find",
        metavar="QUERY",
        help='Find entries satisfying a query such as "ghoS:v:2"',
    )
    parser.add_argument(
        "--decode",
        metavar="POS",
        help='Decode a part-of-speech field such as "v:t_c,2"',
    )
    parser.add_argument(
        "--lenient",
        action="store_true",
        help="Also look unaffixed words up without a part of speech",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Verbose logging",
    )
    args = parser.parse_args(argv)

    if not (args.parse or args.analyze or args.find or args.decode):
        parser.error("Nothing to do: give --parse, --analyze, --find or --decode.")

    setup_logging(debug=args.debug)

    # ── Decode ───────────────────────────────────────────────────────────

    if args.decode:
        from tlh_morph.entry import decode

        entry = decode(args.decode)
        print(f"═══ {args.decode} ═══")
        print(f"  base:           {entry.base.value}")
        if entry.is_noun:
            print(f"  noun type:      {entry.noun_type.value}")
        if entry.base.value == "v":
            confirmed = " (confirmed)" if entry.transitivity_confirmed else ""
            print(f"  transitivity:   {entry.transitivity.value}{confirmed}")
        if entry.is_sentence:
            print(f"  sentence type:  {entry.sentence_type.value}")
        if entry.homophone_number != -1:
            hidden = "" if entry.show_homophone_number else " (hidden)"
            print(f"  homophone:      {entry.homophone_number}{hidden}")
        if entry.flags:
            print(f"  flags:          {', '.join(sorted(f.value for f in entry.flags))}")
        if entry.url:
            print(f"  url:            {entry.url}")
        print()

    # ── Parse ────────────────────────────────────────────────────────────

    if args.parse:
        from tlh_morph.complex_word import WordKind, analyze

        kinds = [WordKind.parse(args.kind)] if args.kind else [WordKind.NOUN, WordKind.VERB]
        for kind in kinds:
            print(f"═══ '{args.parse}' as {kind.name.lower()} ═══")
            for word in analyze(args.parse, kind):
                print(f"  {word.lookup_key(args.lenient):30s}  {word.components_string()}")
        print()

    if not (args.analyze or args.find):
        return

    # ── Build engine ─────────────────────────────────────────────────────

    from tlh_morph.engine import MorphEngine

    if args.lexicon:
        # Explicit flags: build engine manually (flags override config)
        engine = MorphEngine(lenient=args.lenient)
        engine.add_lexicon(*args.lexicon)
    else:
        config_path = Path(args.config) if args.config else _find_default_config()
        if config_path is None:
            parser.error(
                "No tlh_morph.toml found and no --lexicon flag given.\n"
                "  Either create a config file or pass --lexicon explicitly."
            )
        engine = MorphEngine.from_config(config_path)
        if args.debug:
            # The config may have configured logging afresh.
            setup_logging(debug=True)
        if args.lenient:
            engine.lenient = True

    print(engine.summary())
    print()

    # ── Analyze ──────────────────────────────────────────────────────────

    if args.analyze:
        results = engine.analyze(args.analyze)
        if results:
            print(f"═══ Analysis of '{args.analyze}' ═══")
            for r in results:
                print(f"  {r.word.components_string()}")
                _print_entry(r.entry, indent="    ")
        else:
            print(f"'{args.analyze}' not found ({len(engine.lexicon)} entries loaded)")
        print()

    # ── Find ─────────────────────────────────────────────────────────────

    if args.find:
        entries = engine.lexicon.find(args.find)
        if entries:
            print(f"═══ Entries for '{args.find}' ═══")
            for entry in entries:
                _print_entry(entry)
                for component in engine.lexicon.resolve_components(entry):
                    for c in component:
                        _print_entry(c, indent="      ")
        else:
            print(f"No entries satisfy '{args.find}'.", file=sys.stderr)
        print()


if __name__ == "__main__":
    main()
