from __future__ import annotations

import unittest

from nl_foundations.case_string import CaseStr
from nl_foundations.collocations import any_alphabetic
from nl_foundations.word_sequence import CharClass, WordSequence, char_class, tokenize


class CharClassTests(unittest.TestCase):
    def test_basic_classes(self) -> None:
        self.assertIs(char_class("a"), CharClass.ALPHABETIC)
        self.assertIs(char_class("1"), CharClass.NUMERIC)
        self.assertIs(char_class(" "), CharClass.WHITESPACE)
        self.assertIs(char_class(";"), CharClass.OTHER)

    def test_unicode_classes(self) -> None:
        self.assertIs(char_class("é"), CharClass.ALPHABETIC)
        self.assertIs(char_class("語"), CharClass.ALPHABETIC)
        self.assertIs(char_class("٣"), CharClass.NUMERIC)
        self.assertIs(char_class("\n"), CharClass.WHITESPACE)
        self.assertIs(char_class("\x00"), CharClass.CONTROL)
        self.assertIs(char_class("+"), CharClass.OTHER)


class WordSequenceTests(unittest.TestCase):
    def test_trailing_whitespace_is_dropped(self) -> None:
        ws = WordSequence("abc 123 ")
        self.assertEqual(ws.to_key(0), "abc")
        self.assertEqual(ws.to_key(1), "123")
        self.assertIsNone(ws.to_key(2))
        self.assertEqual(ws.words, [0, 1])

    def test_ids_follow_first_occurrence(self) -> None:
        ws = tokenize("this is a test; 1, 2, three")
        expected = ["this", "is", "a", "test", ";", "1", ",", "2", "three"]
        self.assertEqual([ws[word] for word in range(len(ws))], expected)
        self.assertEqual(len(ws), 9)
        self.assertEqual(ws.words, [0, 1, 2, 3, 4, 5, 6, 7, 6, 8])

    def test_character_classes_are_recorded(self) -> None:
        ws = tokenize("this is a test; 1, 2, three")
        self.assertIs(ws.class_of_word[0], CharClass.ALPHABETIC)
        self.assertIs(ws.class_of_word[4], CharClass.OTHER)
        self.assertIs(ws.class_of_word[5], CharClass.NUMERIC)
        self.assertIsNone(ws.class_of(99))

    def test_tokenizing_is_deterministic(self) -> None:
        text = "The cat sat. The dog ran! 42 cats?"
        first = tokenize(text)
        second = tokenize(text)
        self.assertEqual(first.words, second.words)
        self.assertEqual(first.fmap, second.fmap)
        self.assertEqual(first.class_of_word, second.class_of_word)

    def test_round_trip_identity(self) -> None:
        ws = tokenize("Round and round, the words go; round again.")
        for word in set(ws.words):
            key = ws.to_key(word)
            self.assertIsNotNone(key)
            self.assertEqual(ws.to_word(key), word)

    def test_unknown_lookups_are_explicit(self) -> None:
        ws = tokenize("one two")
        self.assertIsNone(ws.to_word("three"))
        self.assertIsNone(ws.to_key(7))
        with self.assertRaises(KeyError):
            _ = ws[7]

    def test_case_folding_key(self) -> None:
        ws = WordSequence("The the THE cat", CaseStr)
        self.assertEqual(ws.words, [0, 0, 0, 1])
        self.assertEqual(ws[0].as_str(), "The")
        self.assertEqual(ws.to_word(CaseStr("tHe")), 0)

    def test_accept_predicate_filters_tokens(self) -> None:
        ws = WordSequence("a 1, b", str, any_alphabetic)
        self.assertEqual([ws[word] for word in ws.words], ["a", "b"])
        self.assertEqual(len(ws), 2)

    def test_control_runs_are_skipped(self) -> None:
        ws = tokenize("a\x00\x01b\t\tc")
        self.assertEqual([key for _, key in ws.iter_tokens()], ["a", "b", "c"])

    def test_adjacent_punctuation_forms_one_token(self) -> None:
        ws = tokenize("end.+ Next")
        self.assertEqual([ws[word] for word in ws.words], ["end", ".+", "Next"])

    def test_empty_text(self) -> None:
        ws = tokenize("")
        self.assertEqual(ws.words, [])
        self.assertEqual(len(ws), 0)

    def test_insert_word_reuses_and_allocates(self) -> None:
        ws = tokenize("a . b")
        self.assertEqual(ws.insert_word(".", CharClass.OTHER), 1)
        new_word = ws.insert_word("!", CharClass.OTHER)
        self.assertEqual(new_word, 3)
        self.assertEqual(ws.to_word("!"), 3)
        self.assertIs(ws.class_of_word[3], CharClass.OTHER)
        self.assertEqual(ws.words, [0, 1, 2])


class CombiningMarkTests(unittest.TestCase):
    def test_decomposed_accent_stays_in_its_word(self) -> None:
        ws = tokenize("cafe\u0301 ok")
        self.assertEqual([key for _, key in ws.iter_tokens()], ["cafe\u0301", "ok"])
        self.assertIs(ws.class_of_word[0], CharClass.ALPHABETIC)

    def test_devanagari_word_is_one_token(self) -> None:
        ws = tokenize("\u0928\u092e\u0938\u094d\u0924\u0947")
        self.assertEqual(ws.words, [0])
        self.assertEqual(ws[0], "\u0928\u092e\u0938\u094d\u0924\u0947")

    def test_mark_after_punctuation_is_not_alphabetic(self) -> None:
        ws = tokenize(".\u0301")
        self.assertEqual(ws.words, [0])
        self.assertIs(ws.class_of_word[0], CharClass.OTHER)

    def test_letter_numbers_are_alphabetic(self) -> None:
        self.assertIs(char_class("\u216b"), CharClass.ALPHABETIC)
        self.assertTrue(any_alphabetic("\u216b"))
        self.assertFalse(any_alphabetic("\u0301"))


if __name__ == "__main__":
    unittest.main()
