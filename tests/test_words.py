import dataclasses
import unittest

from fraze.core.constants import NounGender, WordCategory
from fraze.core.models import Adjective, Noun, Verb, category_of


class NounTests(unittest.TestCase):
    def test_derived_attributes(self) -> None:
        noun = Noun("macara", NounGender.FEMININE)
        self.assertEqual(noun.syllables, 3)
        self.assertEqual(noun.rhyme, "ara")
        self.assertEqual(noun.articulated, "macaraua")
        self.assertEqual(noun.articulated_syllables, 4)
        self.assertTrue(noun.is_feminine)

    def test_is_immutable(self) -> None:
        noun = Noun("carte", NounGender.FEMININE)
        with self.assertRaises(dataclasses.FrozenInstanceError):
            noun.word = "altă"  # type: ignore[misc]

    def test_equality_uses_word_and_gender(self) -> None:
        self.assertEqual(Noun("pod", NounGender.NEUTRAL), Noun("pod", NounGender.NEUTRAL))
        self.assertNotEqual(Noun("pod", NounGender.NEUTRAL), Noun("pod", NounGender.MASCULINE))


class AdjectiveTests(unittest.TestCase):
    def test_derived_attributes(self) -> None:
        adjective = Adjective("frumos")
        self.assertEqual(adjective.syllables, 2)
        self.assertEqual(adjective.rhyme, "mos")
        self.assertEqual(adjective.feminine, "frumoasă")

    def test_form_for_gender(self) -> None:
        adjective = Adjective("alb")
        self.assertEqual(adjective.form_for(NounGender.FEMININE), "albă")
        self.assertEqual(adjective.form_for(NounGender.MASCULINE), "alb")
        self.assertEqual(adjective.form_for(NounGender.NEUTRAL), "alb")


class VerbTests(unittest.TestCase):
    def test_derived_attributes(self) -> None:
        verb = Verb("aleargă")
        self.assertEqual(verb.syllables, 3)
        self.assertEqual(verb.rhyme, "rgă")

        verb = Verb("merge")
        self.assertEqual(verb.syllables, 2)
        self.assertEqual(verb.rhyme, "rge")


class CategoryTests(unittest.TestCase):
    def test_category_of(self) -> None:
        self.assertEqual(category_of(Noun("pod", NounGender.NEUTRAL)), WordCategory.NOUN)
        self.assertEqual(category_of(Adjective("alb")), WordCategory.ADJECTIVE)
        self.assertEqual(category_of(Verb("merge")), WordCategory.VERB)
        with self.assertRaises(TypeError):
            category_of("pod")  # type: ignore[arg-type]


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
