"""
wikisearch/lexicon.py

TermDictionary interns terms to dense integer ids.

Ids are handed out in first-seen order starting at 0, so the id of a new
term is always the dictionary size at the time it is seen:

    d = TermDictionary()
    d.intern_term("cat")   # 0
    d.intern_term("dog")   # 1
    d.intern_term("cat")   # 0 again

Nothing is ever removed; an id stays bound to its term for the lifetime
of the dictionary.
"""

import threading


class TermDictionary:
    """
    Bidirectional term <-> id mapping shared by every document of an index.

    intern_term() is guarded by a lock so documents can be ingested from
    several threads at once.
    """

    def __init__(self):
        self.map = {}     # term -> id
        self.terms = []   # id -> term
        self._lock = threading.Lock()

    def intern_term(self, term: str) -> int:
        """Return the id for `term`, assigning the next one on first sight."""
        # fast path, no lock needed for a term that is already there
        tid = self.map.get(term)
        if tid is not None:
            return tid
        with self._lock:
            tid = self.map.get(term)
            if tid is None:
                tid = len(self.terms)
                self.terms.append(term)
                self.map[term] = tid
            return tid

    def size(self) -> int:
        return len(self.terms)

    def term_for(self, term_id: int) -> str:
        if term_id < 0 or term_id >= len(self.terms):
            raise KeyError(term_id)
        return self.terms[term_id]

    def __len__(self):
        return len(self.terms)

    def __contains__(self, term):
        return term in self.map
