# wikisearch/searcher.py
from wikisearch.cache import IndexCache
from wikisearch.indexer import build_index
from wikisearch.parser import load_corpus, corpus_fingerprint
from wikisearch.paths import CORPUS_DIR, CATEGORIES, NUM_WORKERS


class InvalidQuery(ValueError):
    """Query text that cannot be searched at all (not a string)."""


def search(index, query_text, topk=None, workers: int = 1):
    """
    Run a single-term query against a built Index.

    - "" returns None without scoring anything ("no search was made")
    - otherwise the text is lower-cased and looked up as one term

    Returns:
        None | list[{"url": str, "score": float}] sorted by score desc
    """
    if not isinstance(query_text, str):
        raise InvalidQuery(f"query must be a string, got {type(query_text).__name__}")
    if query_text == "":
        return None
    if topk is not None and topk < 0:
        raise ValueError(f"topk must be >= 0, got {topk}")

    results = index.query(query_text.lower(), workers=workers)
    if topk:
        results = results[:topk]
    return [{"url": doc.url, "score": score} for doc, score in results]


class Searcher:
    """
    Corpus-backed searcher.

    - Reads the corpus directory through CorpusReader.
    - Keeps built indexes in an IndexCache keyed by the corpus fingerprint,
      so queries reuse the index until a corpus file changes.
    - cache=False rebuilds from disk on every query.
    """

    def __init__(self, corpus_dir: str = CORPUS_DIR, categories=CATEGORIES,
                 fix_encoding: bool = False, workers: int = NUM_WORKERS, cache=True):
        self.corpus_dir = corpus_dir
        self.categories = tuple(categories)
        self.fix_encoding = fix_encoding
        self.workers = workers
        if cache is True:
            self.cache = IndexCache()
        elif cache is False or cache is None:
            self.cache = None
        elif isinstance(cache, IndexCache):
            self.cache = cache
        else:
            raise TypeError(f"cache must be bool | IndexCache | None, got {type(cache)}")

    def build(self):
        docs = load_corpus(self.corpus_dir, self.categories, fix_encoding=self.fix_encoding)
        return build_index(docs, workers=self.workers)

    def index(self):
        """Current Index for the corpus; IngestionError if it cannot be read."""
        if self.cache is None:
            return self.build()
        fp = corpus_fingerprint(self.corpus_dir, self.categories)
        # fix_encoding changes the tokens, so it is part of the key
        return self.cache.get_or_build(f"{fp}:{int(self.fix_encoding)}", self.build)

    def search(self, query_text, topk=None):
        if not isinstance(query_text, str):
            raise InvalidQuery(f"query must be a string, got {type(query_text).__name__}")
        # empty query never touches the corpus
        if query_text == "":
            return None
        return search(self.index(), query_text, topk=topk, workers=self.workers)


if __name__ == "__main__":
    # Run from project root:  python -m wikisearch.searcher minecraft --topk 5
    import argparse

    ap = argparse.ArgumentParser(description="Single-term search over a word-dump corpus.")
    ap.add_argument("query", help="search term (lower-cased before lookup)")
    ap.add_argument("--corpus", default=CORPUS_DIR, help="corpus root with one sub-directory per category")
    ap.add_argument("--categories", nargs="+", default=list(CATEGORIES), help="category sub-directories to index")
    ap.add_argument("--topk", type=int, default=10, help="number of results to print; 0 = all")
    ap.add_argument("--workers", type=int, default=NUM_WORKERS, help="threads used to build the index")
    ap.add_argument("--fix-text", action="store_true", help="repair mojibake with ftfy before indexing")
    args = ap.parse_args()

    s = Searcher(args.corpus, args.categories, fix_encoding=args.fix_text, workers=args.workers, cache=False)
    res = s.search(args.query, topk=args.topk or None)
    if not res:
        print("No results found")
    else:
        for i, r in enumerate(res, 1):
            print(f"{i:>3}  {r['score']:.3f}  {r['url']}")
