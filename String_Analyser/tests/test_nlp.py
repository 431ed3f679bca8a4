from django.test import SimpleTestCase

from String_Analyser.exceptions import ConflictingFilters, ErrorKind, Untranslatable
from String_Analyser.filters import WordCountConstraint
from String_Analyser.nlp import parse_filters, translate


class TranslateTests(SimpleTestCase):
    def parsed(self, query):
        return translate(query).filters.as_dict()

    def test_single_word_palindromes(self):
        self.assertEqual(
            self.parsed("all single word palindromic strings"),
            {"is_palindrome": True, "word_count": 1},
        )

    def test_negative_palindrome_wins(self):
        self.assertEqual(self.parsed("strings that are not palindrome"), {"is_palindrome": False})
        self.assertEqual(self.parsed("non-palindrome strings"), {"is_palindrome": False})

    def test_word_counts(self):
        self.assertEqual(self.parsed("one word strings"), {"word_count": 1})
        self.assertEqual(self.parsed("double word strings"), {"word_count": 2})
        self.assertEqual(self.parsed("strings with two words"), {"word_count": 2})
        self.assertEqual(self.parsed("strings with 4 words"), {"word_count": 4})

    def test_length_phrases(self):
        self.assertEqual(self.parsed("strings longer than 10 characters"), {"min_length": 11})
        self.assertEqual(self.parsed("strings of at least 3 characters"), {"min_length": 3})
        self.assertEqual(self.parsed("strings shorter than 5 characters"), {"max_length": 4})
        self.assertEqual(self.parsed("strings of at most 8 characters"), {"max_length": 8})

    def test_longer_than_beats_at_least(self):
        self.assertEqual(
            self.parsed("longer than 5 and at least 3 characters"),
            {"min_length": 6},
        )

    def test_shorter_than_beats_at_most(self):
        self.assertEqual(
            self.parsed("shorter than 5 and at most 8 characters"),
            {"max_length": 4},
        )

    def test_length_phrase_without_numeral_is_ignored(self):
        with self.assertRaises(Untranslatable):
            translate("strings longer than ten characters")

    def test_length_phrase_falls_back_to_first_numeral(self):
        self.assertEqual(self.parsed("give me 7, or at least that many"), {"min_length": 7})

    def test_contains_letter(self):
        self.assertEqual(self.parsed("strings containing the letter Z"), {"contains_character": "z"})
        self.assertEqual(self.parsed("strings with the character 7"), {"contains_character": "7"})

    def test_vowel_overrides_explicit_letter(self):
        self.assertEqual(
            self.parsed("palindromic strings that contain the first vowel"),
            {"is_palindrome": True, "contains_character": "a"},
        )
        self.assertEqual(
            self.parsed("strings with the letter z and a vowel"),
            {"contains_character": "a"},
        )

    def test_empty_sets_min_length(self):
        self.assertEqual(self.parsed("blank strings"), {"min_length": 0})
        self.assertEqual(self.parsed("empty strings"), {"min_length": 0})

    def test_empty_overrides_length_bound(self):
        self.assertEqual(
            self.parsed("longer than 5 non-empty strings"),
            {"min_length": 0},
        )

    def test_multi_word_is_a_comparison(self):
        filters = translate("strings with spaces").filters
        self.assertEqual(filters.word_count, WordCountConstraint.more_than(1))
        self.assertEqual(filters.as_dict(), {"word_count": {"gt": 1}})

    def test_multi_word_overrides_exact_word_count(self):
        self.assertEqual(
            self.parsed("single word multi-word strings"),
            {"word_count": {"gt": 1}},
        )

    def test_conflicting_filters(self):
        with self.assertRaises(ConflictingFilters) as ctx:
            translate("strings shorter than 2 and at least 10 characters")
        self.assertEqual(ctx.exception.kind, ErrorKind.CONFLICTING_FILTERS)
        self.assertEqual(
            ctx.exception.context["parsed_filters"],
            {"min_length": 10, "max_length": 1},
        )

    def test_untranslatable(self):
        with self.assertRaises(Untranslatable) as ctx:
            translate("banana")
        self.assertEqual(ctx.exception.kind, ErrorKind.UNTRANSLATABLE)

    def test_original_query_is_kept(self):
        translated = translate("Palindromic Strings")
        self.assertEqual(translated.as_dict(), {
            "original": "Palindromic Strings",
            "parsed_filters": {"is_palindrome": True},
        })

    def test_parse_filters_is_pure(self):
        query = "single word palindromes longer than 3"
        self.assertEqual(parse_filters(query), parse_filters(query))
