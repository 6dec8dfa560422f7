import os
import hashlib
from collections import namedtuple

from ftfy import fix_text

from wikisearch.paths import CORPUS_DIR, CATEGORIES, URL_PREFIX

RawDocument = namedtuple("RawDocument", ["url", "text"])


class IngestionError(Exception):
    """A document's text could not be read; the whole build is aborted."""


class CorpusReader:
    """
    Reads a word-dump corpus laid out as one directory per category:

        wikipedia/Words/Games/Minecraft
        wikipedia/Words/Programming/Python_(programming_language)

    Every file becomes one RawDocument:
    - url  = URL_PREFIX + file name
    - text = file contents, lower-cased, newlines replaced by spaces

    With fix_encoding=True the text is first passed through ftfy to repair
    mojibake (e.g. "cafÃ©" -> "café"). Off by default so tokens match the
    files byte for byte.

    Methods:
        iter_docs(): stream RawDocuments category by category
        load(): the same, as a list
    """

    def __init__(self, root: str = CORPUS_DIR, categories=CATEGORIES, fix_encoding: bool = False):
        self.root = root
        self.categories = tuple(categories)
        self.fix_encoding = fix_encoding

    def category_files(self, category: str) -> list[str]:
        """Sorted file paths of one category. Raises IngestionError if unreadable."""
        folder = os.path.join(self.root, category)
        try:
            names = sorted(os.listdir(folder))
        except OSError as e:
            raise IngestionError(f"cannot list category {category!r} at {folder}: {e}") from e
        return [os.path.join(folder, n) for n in names if os.path.isfile(os.path.join(folder, n))]

    def read_doc(self, path: str) -> RawDocument:
        try:
            with open(path, "r", encoding="utf-8") as f:
                text = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise IngestionError(f"cannot read {path}: {e}") from e

        if self.fix_encoding:
            text = fix_text(text)
        text = text.lower().replace("\n", " ")
        return RawDocument(URL_PREFIX + os.path.basename(path), text)

    def iter_docs(self):
        """
        Yields:
            RawDocument, categories in the configured order, files sorted by name
        """
        for category in self.categories:
            for path in self.category_files(category):
                yield self.read_doc(path)

    def load(self) -> list[RawDocument]:
        docs = list(self.iter_docs())
        print(f"[Corpus] Loaded {len(docs)} docs from {self.root} {list(self.categories)}")
        return docs


def load_corpus(root: str = CORPUS_DIR, categories=CATEGORIES, fix_encoding: bool = False):
    return CorpusReader(root, categories, fix_encoding=fix_encoding).load()


def corpus_fingerprint(root: str = CORPUS_DIR, categories=CATEGORIES) -> str:
    """
    SHA-1 over (relative path, size, mtime_ns) of every corpus file.
    Any added, removed, resized or touched file changes the fingerprint.
    """
    reader = CorpusReader(root, categories)
    h = hashlib.sha1()
    for category in reader.categories:
        for path in reader.category_files(category):
            try:
                st = os.stat(path)
            except OSError as e:
                raise IngestionError(f"cannot stat {path}: {e}") from e
            rel = os.path.relpath(path, root)
            h.update(f"{rel}\t{st.st_size}\t{st.st_mtime_ns}\n".encode("utf-8"))
    return h.hexdigest()


if __name__ == "__main__":
    for doc in CorpusReader().iter_docs():
        print(doc.url, doc.text[:60])
