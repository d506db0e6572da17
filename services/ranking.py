"""Bag-of-words Jaccard ranking over whole-document text.

`SimilarityRanker` scores each (document_id, text) pair against a query and
returns the best matches. There is no index: every query scans the corpus.
"""
import logging
from typing import Iterable, List, Optional, Set, Tuple

logger = logging.getLogger(__name__)

RankedDocument = Tuple[str, float]


def tokenize(text: str) -> Set[str]:
    """Lower-case, whitespace-split word set."""
    if not text:
        return set()
    return set(text.lower().split())


def _jaccard(words1: Set[str], words2: Set[str]) -> float:
    union = words1 | words2
    if not union:
        return 0.0
    return len(words1 & words2) / len(union)


def calculate_similarity(text1: str, text2: str) -> float:
    """Jaccard similarity |A∩B| / |A∪B| of the two texts' word sets."""
    return _jaccard(tokenize(text1), tokenize(text2))


class SimilarityRanker:
    def __init__(self, top_k: int = 3):
        self.top_k = top_k

    def rank(self, query: str, documents: Iterable[Tuple[str, str]], top_k: Optional[int] = None) -> List[RankedDocument]:
        """Return the top_k documents by similarity, best first.

        sorted() is stable, so equal scores keep their input order. No
        threshold is applied.
        """
        limit = self.top_k if top_k is None else top_k
        if limit <= 0:
            return []

        query_words = tokenize(query)
        scored = [(document_id, _jaccard(query_words, tokenize(text))) for document_id, text in documents]
        ranked = sorted(scored, key=lambda item: item[1], reverse=True)[:limit]
        logger.debug(f"Ranked {len(scored)} documents, returning {len(ranked)}")
        return ranked
