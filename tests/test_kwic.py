from __future__ import annotations

import unittest

from nl_foundations.kwic import MISSING_WORD, KwicSegment, format_segments, get_segment, kwic_segments
from nl_foundations.word_sequence import WordSequence


class KwicTests(unittest.TestCase):
    def test_segments_around_each_occurrence(self) -> None:
        segments = kwic_segments("the cat sat on the mat", "the", 1)
        self.assertEqual(
            segments,
            [KwicSegment("", "the", "cat"), KwicSegment("on", "the", "mat")],
        )

    def test_window_clips_at_both_ends(self) -> None:
        segments = kwic_segments("a b c", "b", 5)
        self.assertEqual(segments, [KwicSegment("a", "b", "c")])

    def test_unknown_word_yields_nothing(self) -> None:
        self.assertEqual(kwic_segments("a b c", "z", 2), [])

    def test_negative_window_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            kwic_segments("a b c", "b", -1)

    def test_missing_ids_render_a_marker(self) -> None:
        ws = WordSequence("a b")
        ws.words.append(42)
        segment = get_segment(1, 1, ws)
        self.assertEqual(segment, KwicSegment("a", "b", MISSING_WORD))

    def test_format_right_justifies_left_context(self) -> None:
        lines = format_segments([KwicSegment("", "the", "cat"), KwicSegment("on", "the", "mat")])
        self.assertEqual(lines, ["    the  cat", "on  the  mat"])
        self.assertEqual(format_segments([]), [])


if __name__ == "__main__":
    unittest.main()
