"""
bench_search.py

Quick-and-dirty benchmark for single-term queries over the word-dump corpus.
Compares rebuilding the index from disk on every query with reusing a
cached index (IndexCache, keyed by corpus fingerprint).

By default, queries are sampled from the dictionary of a freshly built index.
You can also pass a file with one query per line.

Run examples:
  python bench_search.py
  python bench_search.py --queries queries.txt --mode rebuild --num-queries 20
"""

import argparse
import random
import time
import statistics

from wikisearch.paths import CORPUS_DIR, NUM_WORKERS
from wikisearch.searcher import Searcher


def load_queries(path):
    with open(path, "r", encoding="utf-8") as f:
        return [line.strip() for line in f if line.strip()]


def sample_queries(index, n=100):
    terms = list(index.dictionary.terms)
    random.seed(1234)
    return [random.choice(terms) for _ in range(n)]


def bench(searcher, queries):
    times = []
    for q in queries:
        t0 = time.perf_counter()
        _ = searcher.search(q)
        times.append((time.perf_counter() - t0) * 1000)  # ms
    return {
        "n": len(times),
        "avg_ms": statistics.mean(times),
        "p50_ms": statistics.median(times),
        "p95_ms": statistics.quantiles(times, n=20)[18] if len(times) >= 20 else max(times),
        "max_ms": max(times),
    }


def main(args):
    s = Searcher(args.corpus, workers=args.workers, cache=(args.mode == "cached"))
    if args.queries:
        queries = load_queries(args.queries)
    else:
        queries = sample_queries(s.build(), n=args.num_queries)

    stats = bench(s, queries)
    print(f"Mode={args.mode.upper()}  Queries={stats['n']}  "
          f"avg={stats['avg_ms']:.2f}ms  p50={stats['p50_ms']:.2f}ms  "
          f"p95={stats['p95_ms']:.2f}ms  max={stats['max_ms']:.2f}ms")


if __name__ == "__main__":
    ap = argparse.ArgumentParser()
    ap.add_argument("--corpus", default=CORPUS_DIR, help="corpus root with one sub-directory per category")
    ap.add_argument("--queries", type=str, default=None, help="file with one query per line")
    ap.add_argument("--mode", type=str, default="cached", choices=["cached", "rebuild"], help="benchmark mode")
    ap.add_argument("--num-queries", type=int, default=200, help="number of sampled queries if --queries not provided")
    ap.add_argument("--workers", type=int, default=NUM_WORKERS, help="threads used to build the index")
    args = ap.parse_args()
    main(args)
