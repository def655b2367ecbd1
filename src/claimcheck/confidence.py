"""Credibility-weighted confidence aggregation."""

from collections.abc import Sequence

from claimcheck.data import EvidenceItem


def compute_confidence(evidence: Sequence[EvidenceItem]) -> int:
    """Percentage of evidence credibility that agrees with the verdict.

    Computes ``supporting / total * 100`` over credibility scores and rounds
    half up (so 62.5 becomes 63). Negative scores count as zero.

    Args:
        evidence: Evidence items to aggregate.

    Returns:
        Integer confidence in [0, 100]; 0 when the total credibility is 0.
    """
    total = 0
    supporting = 0
    for item in evidence:
        score = max(item.credibility_score, 0)
        total += score
        if item.supports_verdict:
            supporting += score

    if total == 0:
        return 0
    # Integer arithmetic so exact halves such as 23/40 = 57.5 round up.
    return (200 * supporting + total) // (2 * total)
