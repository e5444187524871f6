"""In-memory stand-ins for the external services used by the tests."""

import copy
import threading
from types import SimpleNamespace

from bson import ObjectId
from pymongo import DESCENDING
from pymongo.errors import DuplicateKeyError


class FakeCursor:
    def __init__(self, docs):
        self._docs = docs

    def sort(self, key, direction):
        self._docs.sort(key=lambda d: d[key], reverse=direction == DESCENDING)
        return self

    def __iter__(self):
        return iter(self._docs)


class FakeCollection:
    """Tiny subset of a pymongo collection with a unique ``eventId`` index."""

    def __init__(self):
        self.docs = []
        self._lock = threading.Lock()

    @staticmethod
    def _matches(doc, query):
        return all(doc.get(key) == value for key, value in query.items())

    def create_index(self, keys, **kwargs):
        return "_".join(f"{key}_{direction}" for key, direction in keys)

    def find_one(self, query):
        with self._lock:
            for doc in self.docs:
                if self._matches(doc, query):
                    return copy.deepcopy(doc)
        return None

    def insert_one(self, doc):
        with self._lock:
            if any(d["eventId"] == doc["eventId"] for d in self.docs):
                raise DuplicateKeyError("E11000 duplicate key error collection: reports", 11000)
            doc["_id"] = ObjectId()
            self.docs.append(copy.deepcopy(doc))
        return SimpleNamespace(inserted_id=doc["_id"])

    def find(self, query):
        with self._lock:
            return FakeCursor([copy.deepcopy(d) for d in self.docs if self._matches(d, query)])

    def delete_one(self, query):
        with self._lock:
            for idx, doc in enumerate(self.docs):
                if self._matches(doc, query):
                    del self.docs[idx]
                    return SimpleNamespace(deleted_count=1)
        return SimpleNamespace(deleted_count=0)

    def delete_many(self, query):
        with self._lock:
            kept = [d for d in self.docs if not self._matches(d, query)]
            deleted = len(self.docs) - len(kept)
            self.docs = kept
        return SimpleNamespace(deleted_count=deleted)


class FakeSearch:
    """Records queries and returns canned Tavily-style hits."""

    def __init__(self, results=None, error=None):
        self.results = results if results is not None else [
            {"title": "Result", "content": "Some content", "url": "https://example.com"}
        ]
        self.error = error
        self.calls = []

    def search(self, query, max_results):
        self.calls.append((query, max_results))
        if self.error is not None:
            raise self.error
        return list(self.results)


class FakeLLM:
    """Answers prompts via *responder(prompt) -> str* and records them."""

    def __init__(self, responder):
        self.responder = responder
        self.prompts = []

    def complete(self, prompt, *, temperature):
        self.prompts.append(prompt)
        return self.responder(prompt)
