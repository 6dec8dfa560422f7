#!/usr/bin/env python3
"""
Flask web application for the search engine frontend.
"""

import time
from flask import Flask, request, jsonify, send_from_directory
from wikisearch.parser import IngestionError
from wikisearch.searcher import Searcher, InvalidQuery
from wikisearch.paths import CORPUS_DIR, CATEGORIES, NUM_WORKERS

app = Flask(__name__)

# Global searcher instance; indexes are cached per corpus fingerprint
searcher = Searcher(CORPUS_DIR, CATEGORIES, workers=NUM_WORKERS)


@app.route('/')
def index():
    """Serve the main search page."""
    return send_from_directory('frontend', 'index.html')


@app.route('/search', methods=['POST'])
def search():
    """Handle search requests."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({'error': 'Request body must be a JSON object'}), 400
    query = data.get('searchQuery')

    if query == '':
        return jsonify({'searchResults': None})

    try:
        start_time = time.perf_counter()
        results = searcher.search(query)
        search_time = (time.perf_counter() - start_time) * 1000  # ms
    except InvalidQuery as e:
        return jsonify({'error': str(e)}), 400
    except IngestionError as e:
        print(f"[App] Index build failed: {e}")
        return jsonify({'error': 'Search index could not be built'}), 500

    return jsonify({
        'searchResults': results,
        'totalResults': len(results),
        'searchTime': search_time,
        'query': query,
    })


@app.route('/health')
def health():
    """Health check endpoint."""
    cache = searcher.cache
    return jsonify({
        'status': 'healthy',
        'cachedIndexes': len(cache) if cache is not None else 0,
        'cacheHits': cache.hits if cache is not None else 0,
        'cacheMisses': cache.misses if cache is not None else 0,
    })


if __name__ == '__main__':
    app.run(debug=True, host='0.0.0.0', port=5001)
