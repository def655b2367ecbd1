"""Tests for KeywordVerdictAnalyzer."""

import pytest

from claimcheck.analyzer import KeywordVerdictAnalyzer
from claimcheck.data import Article, Verdict


@pytest.fixture
def analyzer() -> KeywordVerdictAnalyzer:
    return KeywordVerdictAnalyzer()


def _article(title: str = "", body: str = "", site: str = "example.com") -> Article:
    return Article(title=title, url=f"https://{site}/a", site=site, body=body)


class TestKeywordVerdictAnalyzer:
    """Tests for verdict classification and evidence selection."""

    def test_empty_articles(self, analyzer: KeywordVerdictAnalyzer) -> None:
        outcome = analyzer.analyze([], "any claim")
        assert outcome.verdict == Verdict.INSUFFICIENT_DATA
        assert outcome.supporting_articles == ()

    def test_two_positive_hits_is_true(self, analyzer: KeywordVerdictAnalyzer) -> None:
        article = _article(body="Scientists confirmed the result is accurate")
        outcome = analyzer.analyze([article], "claim")
        assert outcome.verdict == Verdict.TRUE
        assert outcome.supporting_articles == (article,)

    def test_two_negative_hits_outweigh_one_positive(
        self, analyzer: KeywordVerdictAnalyzer
    ) -> None:
        refuting = _article(title="Claim debunked", body="The statement is false")
        affirming = _article(body="Officials confirmed it")
        outcome = analyzer.analyze([refuting, affirming], "claim")
        # positive=1, negative=2: 2 > 1.5 * 1
        assert outcome.verdict == Verdict.FALSE
        assert outcome.supporting_articles == (refuting, affirming)

    def test_mixed_signals_is_partially_true(self, analyzer: KeywordVerdictAnalyzer) -> None:
        refuting = _article(title="Claim debunked", body="The statement is false")
        affirming = _article(body="Officials confirmed it")
        also_affirming = _article(body="Reporters verified it")
        outcome = analyzer.analyze([refuting, affirming, also_affirming], "claim")
        # positive=2, negative=2: neither side exceeds 1.5x the other
        assert outcome.verdict == Verdict.PARTIALLY_TRUE
        assert outcome.supporting_articles == (refuting, affirming, also_affirming)

    def test_negative_dominance_is_false(self, analyzer: KeywordVerdictAnalyzer) -> None:
        articles = [
            _article(body="This hoax was debunked"),
            _article(body="A fake story"),
        ]
        outcome = analyzer.analyze(articles, "claim")
        assert outcome.verdict == Verdict.FALSE
        assert len(outcome.supporting_articles) == 2

    def test_keyword_free_articles_fall_back_to_first_three(
        self, analyzer: KeywordVerdictAnalyzer
    ) -> None:
        articles = [_article(title=f"Story {i}", body="Nothing to see") for i in range(5)]
        outcome = analyzer.analyze(articles, "claim")
        assert outcome.verdict == Verdict.INSUFFICIENT_DATA
        assert outcome.supporting_articles == tuple(articles[:3])

    def test_keyword_free_fallback_with_fewer_than_three(
        self, analyzer: KeywordVerdictAnalyzer
    ) -> None:
        articles = [_article(title="Weather today")]
        outcome = analyzer.analyze(articles, "claim")
        assert outcome.verdict == Verdict.INSUFFICIENT_DATA
        assert outcome.supporting_articles == (articles[0],)

    def test_hits_counted_per_keyword_not_per_article(
        self, analyzer: KeywordVerdictAnalyzer
    ) -> None:
        # 3 positive hits in one article outweigh 2 negative hits spread over two
        articles = [
            _article(body="confirmed verified proven"),
            _article(body="a hoax"),
            _article(body="it is fake"),
        ]
        outcome = analyzer.analyze(articles, "claim")
        # 3 > 1.5 * 2 is False, 2 > 1.5 * 3 is False
        assert outcome.verdict == Verdict.PARTIALLY_TRUE
        assert len(outcome.supporting_articles) == 3

    def test_repeated_keyword_counts_once(self, analyzer: KeywordVerdictAnalyzer) -> None:
        articles = [
            _article(body="confirmed confirmed confirmed"),
            _article(body="a hoax"),
        ]
        outcome = analyzer.analyze(articles, "claim")
        # positive=1, negative=1
        assert outcome.verdict == Verdict.PARTIALLY_TRUE

    def test_balanced_article_is_not_evidence(self, analyzer: KeywordVerdictAnalyzer) -> None:
        balanced = _article(body="It was confirmed to be a hoax")
        leaning = _article(body="Experts verified it")
        outcome = analyzer.analyze([balanced, leaning], "claim")
        # positive=2, negative=1: 2 > 1.5 is TRUE
        assert outcome.verdict == Verdict.TRUE
        assert outcome.supporting_articles == (leaning,)

    def test_all_balanced_articles_yield_no_evidence(
        self, analyzer: KeywordVerdictAnalyzer
    ) -> None:
        articles = [_article(body="confirmed hoax")]
        outcome = analyzer.analyze(articles, "claim")
        assert outcome.verdict == Verdict.PARTIALLY_TRUE
        assert outcome.supporting_articles == ()

    def test_substring_matching(self, analyzer: KeywordVerdictAnalyzer) -> None:
        # "untrue" contains "true"; both lists hit
        outcome = analyzer.analyze([_article(body="That is untrue")], "claim")
        assert outcome.verdict == Verdict.PARTIALLY_TRUE

    def test_case_insensitive_title_match(self, analyzer: KeywordVerdictAnalyzer) -> None:
        outcome = analyzer.analyze([_article(title="CONFIRMED: Report VERIFIED")], "claim")
        assert outcome.verdict == Verdict.TRUE

    def test_query_is_not_used_for_scoring(self, analyzer: KeywordVerdictAnalyzer) -> None:
        articles = [_article(body="Nothing relevant here")]
        outcome = analyzer.analyze(articles, "confirmed verified true")
        assert outcome.verdict == Verdict.INSUFFICIENT_DATA

    def test_preserves_input_order(self, analyzer: KeywordVerdictAnalyzer) -> None:
        articles = [
            _article(body="proven", site="c.com"),
            _article(body="plain", site="b.com"),
            _article(body="accurate", site="a.com"),
        ]
        outcome = analyzer.analyze(articles, "claim")
        assert [a.site for a in outcome.supporting_articles] == ["c.com", "a.com"]

    def test_custom_ratio_and_keywords(self) -> None:
        analyzer = KeywordVerdictAnalyzer(
            positive_keywords=["Yes"],
            negative_keywords=["no"],
            dominance_ratio=1.0,
        )
        articles = [_article(body="yes"), _article(body="yes"), _article(body="no")]
        outcome = analyzer.analyze(articles, "claim")
        assert outcome.verdict == Verdict.TRUE

    def test_custom_fallback_evidence(self) -> None:
        analyzer = KeywordVerdictAnalyzer(fallback_evidence=1)
        articles = [_article(title="a"), _article(title="b")]
        outcome = analyzer.analyze(articles, "claim")
        assert outcome.supporting_articles == (articles[0],)
