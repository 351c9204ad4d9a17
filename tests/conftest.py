"""Pytest fixtures for cidshell tests."""
from collections import deque

import pytest

from cidshell.core.exceptions import StoreLookupError
from cidshell.core.store.models import AddedEntry, ListEntry


def child(parent, name, cid=None, kind="file"):
    """Listing entry for a child of parent."""
    return ListEntry(name=name, path=f"{parent}/{name}", cid=cid or name, type=kind)


def self_entry(cid):
    """Listing a file CID produces: one entry describing itself."""
    return ListEntry(name=cid, path=cid, cid=cid, type="file")


class FakeStore:
    """
    In-memory ContentStore.

    Listings, contents and add results are canned; every call is recorded.
    """

    def __init__(self, listings=None, contents=None, archives=None,
                 added=None, progress=None, failing=None, add_error=None):
        self.listings = listings or {}
        self.contents = contents or {}
        self.archives = archives or {}
        self.added = added or []
        self.progress = progress or []
        self.failing = set(failing or ())
        self.add_error = add_error
        self.ls_calls = []
        self.add_calls = []
        self.add_all_calls = []

    def _check(self, cid):
        if cid in self.failing:
            raise StoreLookupError(f"could not resolve {cid}", cid=cid)

    async def ls(self, cid):
        self.ls_calls.append(cid)
        self._check(cid)
        return list(self.listings.get(cid, []))

    async def cat(self, cid):
        self._check(cid)
        for chunk in self.contents.get(cid, []):
            yield chunk

    async def get(self, cid):
        self._check(cid)
        for chunk in self.archives.get(cid, []):
            yield chunk

    def _emit_progress(self, options):
        for count, unit in self.progress:
            options.progress(count, unit)

    async def add_all(self, entries, options=None):
        self.add_all_calls.append((list(entries), options))
        self._emit_progress(options)
        for result in self.added:
            yield result
        if self.add_error is not None:
            raise self.add_error

    async def add(self, entry, options=None):
        self.add_calls.append((entry, options))
        self._emit_progress(options)
        if self.add_error is not None:
            raise self.add_error
        return self.added[-1] if self.added else AddedEntry(path=entry.path, cid="bafyfile")


class ScriptedOperator:
    """
    Operator answering from a script.

    choose() answers match a choice's value, or the cid of a ContentNode
    value; ask_text() answers are checked with the validator, and rejected
    answers are recorded in warnings before the next one is used.
    """

    def __init__(self, answers):
        self.answers = deque(answers)
        self.offered = []
        self.warnings = []
        self.shown = []
        self.listings = []
        self.reports = []

    def choose(self, message, choices):
        self.offered.append((message, [c.value for c in choices]))
        answer = self.answers.popleft()
        for choice in choices:
            if choice.value == answer or getattr(choice.value, "cid", None) == answer:
                return choice.value
        raise AssertionError(f"{answer!r} not offered in {[c.label for c in choices]}")

    def ask_text(self, message, validate=None):
        while True:
            answer = self.answers.popleft()
            error = validate(answer) if validate else None
            if error is None:
                return answer.strip()
            self.warnings.append(error)

    def show_text(self, text):
        self.shown.append(text)

    def show_listing(self, entries):
        self.listings.append(list(entries))

    def report(self, message):
        self.reports.append(message)


@pytest.fixture
def directory_tree():
    """A -> (B dir -> C file), D file, E empty dir."""
    return {
        "A": [child("A", "B", kind="dir"), child("A", "D"), child("A", "E", kind="dir")],
        "B": [child("B", "C")],
        "C": [self_entry("C")],
        "D": [self_entry("D")],
        "E": [],
    }


@pytest.fixture
def make_store():
    """Factory for FakeStore instances."""
    return FakeStore


@pytest.fixture
def make_operator():
    """Factory for ScriptedOperator instances."""
    return ScriptedOperator


@pytest.fixture
def entry_of():
    """Helpers building listing entries: entry_of.child(...), entry_of.file(...)."""
    class EntryHelpers:
        child = staticmethod(child)
        file = staticmethod(self_entry)
    return EntryHelpers
