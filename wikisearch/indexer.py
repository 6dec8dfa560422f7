"""
wikisearch/indexer.py

Builds the in-memory index the ranker scores against.

An Index is an ordered list of Documents plus the TermDictionary used to
turn their words into ids:

    Document(url="https://wikipedia.com/wiki/Cat", term_ids=(0, 1, 0))

Term id sequences keep every occurrence in text order; the ranker only
counts them today, but nothing here collapses them into a bag of words.
"""

from collections import namedtuple
from concurrent.futures import ThreadPoolExecutor

from wikisearch.lexicon import TermDictionary
from wikisearch.paths import NUM_WORKERS
from wikisearch.ranker import Ranker

Document = namedtuple("Document", ["url", "term_ids"])


def tokenize(text: str) -> list[str]:
    """
    Lower-case and split on whitespace. Tokens are kept verbatim otherwise:
    "Hello, world" -> ["hello,", "world"].
    """
    return text.lower().split()


class Index:
    """
    Ordered collection of documents sharing one TermDictionary.

    Documents are appended once and never updated or removed. Once built,
    an Index is only read, so one instance can serve many queries.
    """

    def __init__(self, dictionary: TermDictionary | None = None):
        self.dictionary = dictionary if dictionary is not None else TermDictionary()
        self.documents = []

    def add_document(self, url: str, text: str) -> Document:
        doc = self._make_document(url, text)
        self.documents.append(doc)
        return doc

    def _make_document(self, url: str, text: str) -> Document:
        intern = self.dictionary.intern_term
        return Document(url, tuple(intern(t) for t in tokenize(text)))

    def query(self, term: str, workers: int = 1):
        """Rank every document against a single term. See Ranker.query()."""
        return Ranker(self, workers=workers).query(term)

    def __len__(self):
        return len(self.documents)


def _as_pair(item):
    """Accept RawDocument / (url, text) tuples / {"url", "text"} dicts."""
    if isinstance(item, dict):
        try:
            return item["url"], item["text"]
        except KeyError as e:
            raise TypeError(f"document dict is missing {e}") from e
    if isinstance(item, tuple) and len(item) == 2:
        return item[0], item[1]
    raise TypeError(f"document must be (url, text) or dict, got {type(item)}")


def build_index(documents, workers: int | None = None) -> Index:
    """
    Construct a fresh Index from raw documents, in the order given.

    Args:
        documents: iterable of (url, text) pairs (RawDocument works too)
        workers: >1 tokenizes and interns documents on a thread pool;
                 the resulting document order still follows the input.

    Returns:
        Index
    """
    if workers is None:
        workers = NUM_WORKERS
    if workers < 1:
        raise ValueError(f"workers must be >= 1, got {workers}")

    pairs = [_as_pair(d) for d in documents]
    index = Index()

    if workers == 1 or len(pairs) < 2:
        for url, text in pairs:
            index.add_document(url, text)
    else:
        # executor.map yields in submission order, so appending its output
        # keeps insertion order; only interning runs concurrently
        with ThreadPoolExecutor(max_workers=workers) as ex:
            for doc in ex.map(lambda p: index._make_document(*p), pairs):
                index.documents.append(doc)

    print(f"[Indexer] Indexed {len(index)} docs, {index.dictionary.size()} terms")
    return index


# -------------------------------
# Optional manual test / smoke run
# -------------------------------
if __name__ == "__main__":
    idx = build_index([("a", "cat dog cat"), ("b", "dog dog dog")])
    for doc in idx.documents:
        print(doc.url, doc.term_ids)
