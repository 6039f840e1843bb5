from __future__ import annotations

import math
import unittest

from nl_foundations.collocations import compute_t, format_bigram, significant_bigrams, t_statistic
from nl_foundations.sample import Sample


class SampleTests(unittest.TestCase):
    def test_counts_and_probability(self) -> None:
        sample = Sample.from_iterable(["a", "b", "a", "c"])
        self.assertEqual(sample.total, 4)
        self.assertEqual(sample.counts, {"a": 2, "b": 1, "c": 1})
        self.assertEqual(sample.p("a"), 0.5)
        self.assertEqual(sample.p("z"), 0.0)
        self.assertEqual(len(sample), 3)

    def test_empty_sample_probability_is_nan(self) -> None:
        self.assertTrue(math.isnan(Sample().p("a")))


class TStatisticTests(unittest.TestCase):
    def test_t_statistic(self) -> None:
        self.assertAlmostEqual(t_statistic(0.5, 0.25, 4.0, 0.25), 0.25 / math.sqrt(0.0625))

    def test_compute_t_scores_every_pair(self) -> None:
        words = Sample.from_iterable([0, 1, 0, 1])
        bigrams = Sample.from_iterable([(0, 1), (1, 0), (0, 1)])
        scored = dict((pair, t) for t, pair in compute_t(words, bigrams))
        self.assertEqual(set(scored), {(0, 1), (1, 0)})
        expected = (2 / 3 - 0.25) / math.sqrt(0.25 / 3)
        self.assertAlmostEqual(scored[(0, 1)], expected)


class SignificantBigramTests(unittest.TestCase):
    TEXT = "New York is big. new york is old."

    def test_ranked_by_descending_t(self) -> None:
        scores = significant_bigrams(self.TEXT)
        values = [score.t for score in scores]
        self.assertEqual(values, sorted(values, reverse=True))
        top = {(scores[0].first, scores[0].second), (scores[1].first, scores[1].second)}
        self.assertEqual(top, {("new", "york"), ("york", "is")})
        self.assertEqual(scores[0].observed, 2)

    def test_case_insensitive_by_default(self) -> None:
        pairs = {(score.first, score.second) for score in significant_bigrams(self.TEXT)}
        self.assertNotIn(("New", "York"), pairs)
        self.assertEqual(len(pairs), 5)

    def test_case_sensitive_keeps_spellings_apart(self) -> None:
        pairs = {(score.first, score.second) for score in significant_bigrams(self.TEXT, case_sensitive=True)}
        self.assertIn(("New", "York"), pairs)
        self.assertIn(("new", "york"), pairs)

    def test_tokens_without_letters_are_ignored(self) -> None:
        pairs = {(score.first, score.second) for score in significant_bigrams("a 1 b")}
        self.assertEqual(pairs, {("a", "b")})

    def test_format(self) -> None:
        score = significant_bigrams("alpha beta")[0]
        line = format_bigram(score)
        self.assertTrue(line.endswith("\talpha beta"))
        self.assertEqual(len(line.split("\t")), 5)


if __name__ == "__main__":
    unittest.main()
