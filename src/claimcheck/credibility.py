"""Static source credibility lookup."""

from __future__ import annotations

from collections.abc import Sequence

DEFAULT_CREDIBILITY = 3

# Ordered (substring, score) pairs. The first substring found in the
# lowercased site wins, so specific domains must precede generic tokens.
CREDIBILITY_TABLE: tuple[tuple[str, int], ...] = (
    ("reuters.com", 10),
    ("apnews.com", 10),
    ("bbc.com", 9),
    ("npr.org", 9),
    ("cnn.com", 8),
    ("nytimes.com", 8),
    ("washingtonpost.com", 8),
    ("wsj.com", 8),
    ("theguardian.com", 7),
    ("abcnews.go.com", 7),
    ("cbsnews.com", 7),
    ("nbcnews.com", 7),
    ("usatoday.com", 6),
    ("fox news", 5),
    ("breitbart.com", 2),
    ("infowars.com", 1),
)


class CredibilityResolver:
    """Resolve a site or domain string to a 0-10 trust score.

    Args:
        table: Ordered (substring, score) pairs, matched in order.
        default_score: Score for sites matching no entry.
    """

    def __init__(
        self,
        table: Sequence[tuple[str, int]] = CREDIBILITY_TABLE,
        *,
        default_score: int = DEFAULT_CREDIBILITY,
    ) -> None:
        self._table = tuple((pattern.lower(), score) for pattern, score in table)
        self._default_score = default_score

    @property
    def table(self) -> tuple[tuple[str, int], ...]:
        return self._table

    @property
    def default_score(self) -> int:
        return self._default_score

    def resolve(self, site: str | None) -> int:
        """Return the score of the first table entry contained in ``site``."""
        domain = (site or "").lower()
        for pattern, score in self._table:
            if pattern in domain:
                return score
        return self._default_score


_DEFAULT_RESOLVER = CredibilityResolver()


def resolve_credibility(site: str | None) -> int:
    """Resolve ``site`` against the built-in credibility table."""
    return _DEFAULT_RESOLVER.resolve(site)
