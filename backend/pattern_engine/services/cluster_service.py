"""Merchant clustering service.

Groups merchant name variants that likely denote the same business:
- folded-name edit similarity above a threshold, or
- enough shared words between the two folded names.

Names made only of entity words ("Gas Station", "Market Store") fold to the
empty string and therefore match each other.

Clustering is greedy and order dependent: each name seeds a cluster with the
not-yet-clustered names it matches, and is never reconsidered afterwards.
"""

from collections import Counter
from typing import Dict, Iterable, List
import logging

from pattern_engine.config import settings
from pattern_engine.schemas.transaction import Transaction
from pattern_engine.services.merchant_normalizer import extract_merchant_name, normalize_for_comparison
from pattern_engine.services.similarity import string_similarity

logger = logging.getLogger(__name__)


def word_overlap(a: str, b: str) -> float:
    """Shared significant words as a fraction of the wordier name."""
    min_len = settings.cluster_min_token_length
    words_a = {w for w in a.split() if len(w) >= min_len}
    words_b = {w for w in b.split() if len(w) >= min_len}
    larger = max(len(words_a), len(words_b))
    if larger == 0:
        return 0.0
    return len(words_a & words_b) / larger


def are_same_merchant(a: str, b: str) -> bool:
    folded_a = normalize_for_comparison(a)
    folded_b = normalize_for_comparison(b)
    if string_similarity(folded_a, folded_b) > settings.cluster_similarity_threshold:
        return True
    return word_overlap(folded_a, folded_b) > settings.cluster_word_overlap_threshold


def analyze_merchant_clusters(transactions: Iterable[Transaction]) -> Dict[str, List[str]]:
    """
    Map a representative merchant name to every variant clustered with it.

    The representative is the member with the most transactions (first
    member on ties). Singleton clusters are not returned.
    """
    counts: Counter = Counter()
    for t in transactions:
        name = extract_merchant_name(t.description)
        if name:
            counts[name] += 1

    names = list(counts)
    processed = set()
    clusters: Dict[str, List[str]] = {}

    for i, name in enumerate(names):
        if name in processed:
            continue
        processed.add(name)
        members = [name]

        for other in names[i + 1:]:
            if other in processed:
                continue
            if are_same_merchant(name, other):
                members.append(other)
                processed.add(other)

        if len(members) > 1:
            representative = max(members, key=lambda m: counts[m])
            clusters[representative] = members

    logger.debug(f"Merchant clustering: {len(names)} merchants, {len(clusters)} clusters")
    return clusters
