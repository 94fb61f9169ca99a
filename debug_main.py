"""Convenience entrypoint with predefined settings for debugging.

Usage in a Python console (Jupyter-style)::

    import debug_main
    state = debug_main.prepare_state(words_path="words.txt", seed=7)
    debug_main.step_stats(state)
    debug_main.step_generate(state, "haiku")
    results = debug_main.step_generate_concurrently(state, parallel_runs=4)

Call :func:`run_debug` for a one-liner. Concurrent runs share one base
dictionary while every provider works on its own copy, which makes this a
quick smoke test of the service's isolation.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import Any, Dict, List

from fraze.core.exceptions import PhraseError
from fraze.data.parser import load_dictionary
from fraze.engine.service import PhraseService, PhraseServiceConfig, SentenceStyle
from fraze.utils.logger import configure_logging
from fraze.utils.pretty import print_dictionary_stats, print_sentences

DEFAULT_DEBUG_ARGS: Dict[str, Any] = {
    "words_path": Path("words.txt"),
    "seed": None,
    "html": False,
    "max_attempts": None,
    "log_level": logging.DEBUG,
}

LOGGER = logging.getLogger(__name__)


def prepare_state(**overrides: Any) -> Dict[str, Any]:
    """Return a mutable state dictionary used by the step helpers.

    Pass ``dictionary`` to reuse an already loaded :class:`WordDictionary`
    instead of reading ``words_path``.
    """

    args = {**DEFAULT_DEBUG_ARGS, **overrides}
    configure_logging(int(args["log_level"]))
    dictionary = args.get("dictionary") or load_dictionary(Path(args["words_path"]))
    max_attempts = (
        {style: int(args["max_attempts"]) for style in SentenceStyle}
        if args.get("max_attempts") is not None
        else {}
    )
    config = PhraseServiceConfig(
        max_attempts=max_attempts,
        html=bool(args["html"]),
        seed=int(args["seed"]) if args.get("seed") is not None else None,
    )
    return {
        "config": config,
        "dictionary": dictionary,
        "service": PhraseService(dictionary, config),
        "results": {},
    }


def step_stats(state: Dict[str, Any]) -> None:
    print_dictionary_stats(state["dictionary"])


def step_generate(state: Dict[str, Any], style: str) -> str:
    sentence = state["service"].generate_strict(SentenceStyle(style))
    state["results"][style] = sentence
    return sentence


def step_reset(state: Dict[str, Any]) -> None:
    state["service"].reset()
    state["results"] = {}


def step_generate_concurrently(
    state: Dict[str, Any],
    *,
    parallel_runs: int = 4,
    rounds: int = 3,
) -> Dict[str, List[str]]:
    """Generate ``rounds`` sentences of every style from ``parallel_runs`` workers."""

    service: PhraseService = state["service"]
    jobs = [style for style in SentenceStyle for _ in range(rounds)]
    results: Dict[str, List[str]] = {style.value: [] for style in SentenceStyle}
    with ThreadPoolExecutor(max_workers=parallel_runs) as executor:
        futures = {executor.submit(service.generate_strict, style): style for style in jobs}
        for future in as_completed(futures):
            style = futures[future]
            try:
                results[style.value].append(future.result())
            except PhraseError as exc:
                LOGGER.warning("Style %s failed: %s", style.value, exc)
    state["results"] = results
    return results


def run_debug(**overrides: Any) -> Dict[str, List[str]]:
    """Load, print stats, then generate every style concurrently."""

    parallel_runs = int(overrides.pop("parallel_runs", 4))
    rounds = int(overrides.pop("rounds", 3))
    state = prepare_state(**overrides)
    step_stats(state)
    results = step_generate_concurrently(state, parallel_runs=parallel_runs, rounds=rounds)
    for style, sentences in results.items():
        print_sentences({f"{style} {index}": sentence for index, sentence in enumerate(sentences, 1)})
    return results


def main() -> None:  # pragma: no cover - manual helper
    results = run_debug()
    produced = sum(len(sentences) for sentences in results.values())
    print(f"Generated {produced} sentences across {len(results)} styles")


if __name__ == "__main__":
    main()
