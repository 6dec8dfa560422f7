# wikisearch/ranker.py
from collections import namedtuple
from concurrent.futures import ThreadPoolExecutor

from wikisearch.paths import SCORE_FLOOR

Result = namedtuple("Result", ["document", "score"])


def frequency_score(term_ids, query_id: int) -> int:
    """Number of times `query_id` occurs in a document's term id sequence."""
    return tuple(term_ids).count(query_id)


def normalize(scores, small_is_better: bool = False, floor: float = SCORE_FLOOR):
    """
    Scale raw scores into [0, 1] so the best document gets 1.0.

    - larger is better:  s / max(max(scores), floor)
    - smaller is better: min(scores) / max(s, floor)

    The floor keeps an all-zero list from dividing by zero; it stays all
    zeros instead of producing spurious non-zero scores.
    """
    if not scores:
        return []
    if small_is_better:
        min_val = min(scores)
        return [min_val / max(s, floor) for s in scores]
    max_val = max(max(scores), floor)
    return [s / max_val for s in scores]


class Ranker:
    """
    Term-frequency ranker over an Index.

    - every document gets a raw score: occurrences of the query term
    - raw scores are normalized against the best document
    - documents scoring 0 are dropped, the rest sorted by score descending

    Sorting is stable, so documents with equal scores stay in index order.
    """

    def __init__(self, index, workers: int = 1):
        self.index = index
        self.workers = workers

    def raw_scores(self, query_id: int) -> list[int]:
        docs = self.index.documents
        if self.workers > 1 and len(docs) > 1:
            # scoring is independent per document; map() keeps doc order
            with ThreadPoolExecutor(max_workers=self.workers) as ex:
                return list(ex.map(lambda d: frequency_score(d.term_ids, query_id), docs))
        return [frequency_score(d.term_ids, query_id) for d in docs]

    def query(self, term: str) -> list[Result]:
        """
        Rank all documents for a single (already lower-cased) term.

        An unseen term would get a fresh id that occurs in no document, so
        it returns [] without interning; a built index is never mutated by
        queries.

        Returns:
            list[Result] sorted by score descending
        """
        query_id = self.index.dictionary.map.get(term)
        if query_id is None:
            return []
        scores = normalize(self.raw_scores(query_id))

        result = [
            Result(doc, score)
            for doc, score in zip(self.index.documents, scores)
            if score > 0
        ]
        result.sort(key=lambda r: r.score, reverse=True)
        return result


if __name__ == "__main__":
    from wikisearch.indexer import build_index

    idx = build_index([("a", "cat dog cat"), ("b", "dog dog dog")])
    for q in ["dog", "cat", "fish"]:
        print(f"\nQuery: {q}")
        for doc, score in Ranker(idx).query(q):
            print(f"  {doc.url}\t{score:.3f}")
