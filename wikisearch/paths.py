# wikisearch/paths.py

import os

# --- Base data paths ---
DATA_DIR = os.getenv("WIKISEARCH_DATA_DIR", "wikipedia")

# --- Source corpus: one sub-directory of plain text files per category ---
CORPUS_DIR = os.path.join(DATA_DIR, "Words")
CATEGORIES = ("Games", "Programming")

# --- Document URLs are the file name under this prefix ---
URL_PREFIX = "https://wikipedia.com/wiki/"

# --- Ranking ---
SCORE_FLOOR = 0.00001   # lower bound of the normalization divisor

# --- Ingestion / serving ---
NUM_WORKERS = 1         # threads used by build_index; 1 = sequential
CACHE_CAPACITY = 4      # indexes kept by IndexCache (one per corpus fingerprint)
