"""CLI entrypoint for the Romanian phrase generator."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Dict, List

from fraze.core.exceptions import DictionaryLoadError
from fraze.data.dictionary import WordDictionary
from fraze.data.parser import load_dictionary
from fraze.engine.service import PhraseService, PhraseServiceConfig, SentenceStyle
from fraze.io.word_source import load_remote_dictionary
from fraze.utils.logger import configure_logging, get_logger
from fraze.utils.pretty import print_dictionary_stats, print_sentences

LOGGER = get_logger(__name__)

ALL_STYLES = "all"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate Romanian haiku, couplets, tautograms and other short phrases",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--words",
        type=Path,
        default=Path("words.txt"),
        metavar="FILE",
        help="Word list with one '<word> <tag>' entry per line (default: words.txt)",
    )
    source.add_argument(
        "--words-url",
        type=str,
        metavar="URL",
        help="Fetch the word list over HTTP instead of reading a file",
    )
    parser.add_argument(
        "--style",
        type=str,
        choices=[style.value for style in SentenceStyle] + [ALL_STYLES],
        default=ALL_STYLES,
        help="Sentence style to generate (default: all)",
    )
    parser.add_argument("--count", type=int, default=1, help="Sentences to generate per style")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    parser.add_argument(
        "--max-attempts",
        type=int,
        default=None,
        help="Override the filter search budget of every constrained style",
    )
    parser.add_argument(
        "--html",
        action="store_true",
        help="Link every word to dexonline.ro and render verse breaks as <br/>",
    )
    parser.add_argument(
        "--format",
        type=str,
        choices=["text", "json"],
        default="text",
        help="Output format",
    )
    parser.add_argument("--output", type=Path, help="Optional path to write the output to")
    parser.add_argument(
        "--stats",
        action="store_true",
        help="Print word counts of the loaded dictionary to stderr",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def load_words(args: argparse.Namespace) -> WordDictionary:
    if args.words_url:
        return load_remote_dictionary(args.words_url)
    return load_dictionary(args.words)


def generate(service: PhraseService, styles: List[SentenceStyle], count: int) -> Dict[str, List[str]]:
    return {style.value: [service.generate(style) for _ in range(count)] for style in styles}


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = getattr(logging, args.log_level.upper(), logging.INFO)
    configure_logging(level)

    if args.count < 1:
        parser.error("--count must be at least 1")
    if args.max_attempts is not None and args.max_attempts < 0:
        parser.error("--max-attempts must not be negative")

    try:
        dictionary = load_words(args)
    except DictionaryLoadError as exc:
        LOGGER.error("%s", exc)
        return 1

    if args.stats:
        print_dictionary_stats(dictionary, stream=sys.stderr)

    styles = list(SentenceStyle) if args.style == ALL_STYLES else [SentenceStyle(args.style)]
    max_attempts = {style: args.max_attempts for style in styles} if args.max_attempts is not None else {}
    service = PhraseService(
        dictionary,
        PhraseServiceConfig(max_attempts=max_attempts, html=args.html, seed=args.seed),
    )
    results = generate(service, styles, args.count)

    if args.format == "json":
        output_text = json.dumps(results, ensure_ascii=False, indent=2)
        if args.output:
            args.output.write_text(output_text, encoding="utf-8")
        else:
            print(output_text)
        return 0

    flattened = {
        f"{style} {index}" if args.count > 1 else style: sentence
        for style, sentences in results.items()
        for index, sentence in enumerate(sentences, start=1)
    }
    if args.output:
        with args.output.open("w", encoding="utf-8") as handle:
            print_sentences(flattened, stream=handle)
    else:
        print_sentences(flattened)
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
