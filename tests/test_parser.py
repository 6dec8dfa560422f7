# tests/test_parser.py
import os
import pytest

from wikisearch.parser import CorpusReader, IngestionError, RawDocument, load_corpus, corpus_fingerprint
from wikisearch.paths import URL_PREFIX
from conftest import write_corpus


def test_load_corpus_order_and_urls(corpus_dir):
    docs = load_corpus(corpus_dir)
    # categories in configured order, files sorted by name within each
    assert [d.url for d in docs] == [
        URL_PREFIX + "Chess",
        URL_PREFIX + "Minecraft",
        URL_PREFIX + "Java",
        URL_PREFIX + "Python",
    ]
    assert all(isinstance(d, RawDocument) for d in docs)


def test_text_is_lowercased_and_flattened(corpus_dir):
    docs = {d.url: d.text for d in load_corpus(corpus_dir)}
    text = docs[URL_PREFIX + "Minecraft"]
    assert text == "minecraft is a sandbox game players build with blocks in minecraft"
    assert "\n" not in text


def test_categories_subset(corpus_dir):
    docs = load_corpus(corpus_dir, categories=["Programming"])
    assert [d.url for d in docs] == [URL_PREFIX + "Java", URL_PREFIX + "Python"]


def test_missing_category_raises(corpus_dir):
    with pytest.raises(IngestionError):
        load_corpus(corpus_dir, categories=["Games", "Movies"])


def test_undecodable_file_raises(tmp_path):
    root = write_corpus(tmp_path, {"Games": {"ok": "fine"}})
    with open(os.path.join(root, "Games", "broken"), "wb") as f:
        f.write(b"\xff\xfe\xfa not utf-8")
    with pytest.raises(IngestionError) as exc:
        load_corpus(root, categories=["Games"])
    assert isinstance(exc.value.__cause__, UnicodeDecodeError)


def test_fix_encoding_repairs_mojibake(tmp_path):
    root = write_corpus(tmp_path, {"Games": {"Cafe": "CafÃ© Racer"}})
    raw = CorpusReader(root, ["Games"]).load()
    fixed = CorpusReader(root, ["Games"], fix_encoding=True).load()
    assert raw[0].text == "cafÃ© racer".lower()
    assert fixed[0].text == "café racer"


def test_fingerprint_stable_until_corpus_changes(corpus_dir):
    fp1 = corpus_fingerprint(corpus_dir)
    assert corpus_fingerprint(corpus_dir) == fp1

    with open(os.path.join(corpus_dir, "Games", "Tetris"), "w", encoding="utf-8") as f:
        f.write("tetris falling blocks")
    assert corpus_fingerprint(corpus_dir) != fp1
