import io
import json
import logging
import random
import tempfile
import threading
import unittest
from contextlib import redirect_stderr
from pathlib import Path
from unittest.mock import patch

import debug_main
import main as cli
from fraze.core.exceptions import ConstraintSearchError
from fraze.data.parser import parse_lines
from fraze.engine import service as service_module
from fraze.engine.providers import ComparisonProvider, HaikuProvider, TautogramProvider
from fraze.engine.service import PhraseService, PhraseServiceConfig, SentenceStyle
from fraze.utils.pretty import format_verses, print_dictionary_stats

# Satisfies every style: two rhyme groups, 3-syllable haiku words and
# several tautogram letters.
RICH = (
    "bibliotecă F",
    "videotecă F",
    "casă F",
    "masă F",
    "rasă F",
    "clasă F",
    "albastru A",
    "mare A",
    "verde A",
    "bun A",
    "calm A",
    "aleargă V",
    "mănâncă V",
    "merge V",
    "bea V",
    "cântă V",
    "vine V",
)


def rich_dictionary(seed: int = 11):
    return parse_lines(RICH, rng=random.Random(seed))


class PhraseServiceTests(unittest.TestCase):
    def test_generate_all_styles(self) -> None:
        service = PhraseService(rich_dictionary(), PhraseServiceConfig(seed=3))
        results = service.generate_all()
        self.assertEqual(set(results), {style.value for style in SentenceStyle})
        for style, sentence in results.items():
            with self.subTest(style=style):
                self.assertNotEqual(sentence, PhraseService.UNSATISFIABLE_PLACEHOLDER)
                self.assertTrue(sentence.endswith("."))
                self.assertTrue(sentence[0].isupper())

    def test_verse_styles_capitalize_every_line(self) -> None:
        service = PhraseService(rich_dictionary())
        for style in (SentenceStyle.HAIKU, SentenceStyle.COUPLET, SentenceStyle.MIRROR):
            for verse in service.generate(style).split(" / "):
                self.assertTrue(verse[0].isupper(), verse)

    def test_base_dictionary_is_never_filtered(self) -> None:
        base = rich_dictionary()
        service = PhraseService(base)
        service.generate_all()
        self.assertEqual(base.filters, ())
        self.assertEqual(base.total_refused_count(), 0)
        self.assertIsNot(service.provider(SentenceStyle.HAIKU).dictionary, base)

    def test_placeholder_when_lexicon_is_too_small(self) -> None:
        service = PhraseService(parse_lines(["macara F", "frumos A"]))
        self.assertEqual(
            service.generate(SentenceStyle.DEFINITION), PhraseService.UNSATISFIABLE_PLACEHOLDER
        )
        self.assertEqual(service.generate(SentenceStyle.MIRROR), PhraseService.UNSATISFIABLE_PLACEHOLDER)
        with self.assertRaises(ConstraintSearchError):
            service.generate_strict(SentenceStyle.MIRROR)

    def test_capitalization_and_html(self) -> None:
        lexicon = ["macara F", "frumos A", "merge VT"]
        plain = PhraseService(parse_lines(lexicon))
        self.assertEqual(
            plain.generate(SentenceStyle.COMPARISON), "Macaraua e mai frumoasă decât macaraua."
        )
        self.assertEqual(
            plain.generate(SentenceStyle.DEFINITION), "MACARA: macaraua frumoasă care merge."
        )

        html = PhraseService(parse_lines(lexicon), PhraseServiceConfig(html=True))
        sentence = html.generate(SentenceStyle.COMPARISON)
        self.assertTrue(
            sentence.startswith('<a href="https://dexonline.ro/definitie/macaraua" target="_blank"')
        )
        self.assertIn('data-word="macaraua">Macaraua</a>', sentence)
        self.assertTrue(sentence.endswith("</a>."))

    def test_html_verse_breaks(self) -> None:
        service = PhraseService(rich_dictionary(), PhraseServiceConfig(html=True))
        haiku = service.generate(SentenceStyle.HAIKU)
        self.assertEqual(haiku.count("<br/>"), 2)
        self.assertNotIn(" / ", haiku)

    def test_providers_are_cached_until_reset(self) -> None:
        service = PhraseService(rich_dictionary())
        provider = service.provider(SentenceStyle.COMPARISON)
        self.assertIsInstance(provider, ComparisonProvider)
        self.assertIs(service.provider("comparison"), provider)
        service.reset()
        self.assertIsNot(service.provider(SentenceStyle.COMPARISON), provider)

    def test_slow_build_does_not_block_other_styles(self) -> None:
        started = threading.Event()
        release = threading.Event()
        builds = []

        class SlowHaiku(HaikuProvider):
            def init_filters(self) -> None:
                builds.append(self)
                started.set()
                release.wait(5)
                super().init_filters()

        config = PhraseServiceConfig(max_attempts={SentenceStyle.HAIKU: 5})
        service = PhraseService(parse_lines(["macara F", "frumos A", "merge VT"]), config)
        haiku_results = []
        with patch.dict(service_module.PROVIDER_CLASSES, {SentenceStyle.HAIKU: SlowHaiku}):
            worker = threading.Thread(
                target=lambda: haiku_results.append(service.generate(SentenceStyle.HAIKU))
            )
            worker.start()
            try:
                self.assertTrue(started.wait(5))
                self.assertEqual(
                    service.generate(SentenceStyle.COMPARISON),
                    "Macaraua e mai frumoasă decât macaraua.",
                )
                self.assertTrue(worker.is_alive())
            finally:
                release.set()
                worker.join(5)

            self.assertEqual(haiku_results, [PhraseService.UNSATISFIABLE_PLACEHOLDER])
            with self.assertRaises(ConstraintSearchError):
                service.generate_strict(SentenceStyle.HAIKU)
            self.assertEqual(len(builds), 1)

            service.reset()
            self.assertEqual(
                service.generate(SentenceStyle.HAIKU), PhraseService.UNSATISFIABLE_PLACEHOLDER
            )
            self.assertEqual(len(builds), 2)

    def test_max_attempts_override(self) -> None:
        config = PhraseServiceConfig(max_attempts={SentenceStyle.TAUTOGRAM: 500})
        provider = PhraseService(rich_dictionary(), config).provider(SentenceStyle.TAUTOGRAM)
        self.assertIsInstance(provider, TautogramProvider)
        self.assertEqual(provider.max_attempts, 500)

    def test_seed_makes_output_reproducible(self) -> None:
        def run() -> list:
            service = PhraseService(rich_dictionary(), PhraseServiceConfig(seed=9))
            return [service.generate(style) for style in SentenceStyle for _ in range(3)]

        self.assertEqual(run(), run())


class PrettyTests(unittest.TestCase):
    def test_format_verses(self) -> None:
        self.assertEqual(format_verses("Ana / Are mere."), "  Ana\n  Are mere.")

    def test_dictionary_stats(self) -> None:
        stream = io.StringIO()
        print_dictionary_stats(rich_dictionary(), stream=stream)
        output = stream.getvalue()
        self.assertIn("--- Dictionary ---", output)
        self.assertIn("Rhymes with 2+ nouns: 2", output)


class CliTests(unittest.TestCase):
    def test_json_output(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            words = Path(tmpdir) / "words.txt"
            words.write_text("macara F\nfrumos A\nmerge VT\n", encoding="utf-8")
            output = Path(tmpdir) / "out.json"
            code = cli.main(
                [
                    "--words", str(words),
                    "--style", "comparison",
                    "--count", "2",
                    "--format", "json",
                    "--output", str(output),
                    "--log-level", "WARNING",
                ]
            )
            self.assertEqual(code, 0)
            results = json.loads(output.read_text(encoding="utf-8"))
        expected = "Macaraua e mai frumoasă decât macaraua."
        self.assertEqual(results, {"comparison": [expected, expected]})

    def test_text_output(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            words = Path(tmpdir) / "words.txt"
            words.write_text("\n".join(RICH), encoding="utf-8")
            output = Path(tmpdir) / "out.txt"
            code = cli.main(
                ["--words", str(words), "--seed", "4", "--output", str(output), "--log-level", "ERROR"]
            )
            self.assertEqual(code, 0)
            text = output.read_text(encoding="utf-8")
        for style in SentenceStyle:
            self.assertIn(f"[{style.value}]", text)

    def test_zero_max_attempts_is_honoured(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            words = Path(tmpdir) / "words.txt"
            words.write_text("\n".join(RICH), encoding="utf-8")
            output = Path(tmpdir) / "out.json"
            code = cli.main(
                [
                    "--words", str(words),
                    "--style", "haiku",
                    "--max-attempts", "0",
                    "--format", "json",
                    "--output", str(output),
                    "--log-level", "ERROR",
                ]
            )
            self.assertEqual(code, 0)
            results = json.loads(output.read_text(encoding="utf-8"))
        self.assertEqual(results, {"haiku": [PhraseService.UNSATISFIABLE_PLACEHOLDER]})

    def test_negative_max_attempts_is_rejected(self) -> None:
        with redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit) as caught:
                cli.main(["--max-attempts", "-1", "--log-level", "CRITICAL"])
        self.assertEqual(caught.exception.code, 2)

    def test_missing_word_list_exits_with_error(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            code = cli.main(["--words", str(Path(tmpdir) / "absent.txt"), "--log-level", "CRITICAL"])
        self.assertEqual(code, 1)


class DebugMainTests(unittest.TestCase):
    def test_concurrent_generation(self) -> None:
        state = debug_main.prepare_state(
            dictionary=rich_dictionary(), seed=1, log_level=logging.WARNING
        )
        results = debug_main.step_generate_concurrently(state, parallel_runs=3, rounds=2)
        self.assertEqual(set(results), {style.value for style in SentenceStyle})
        self.assertEqual(len(results["comparison"]), 2)
        self.assertEqual(state["dictionary"].filters, ())

        sentence = debug_main.step_generate(state, "definition")
        self.assertEqual(state["results"]["definition"], sentence)
        debug_main.step_reset(state)
        self.assertEqual(state["results"], {})


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
