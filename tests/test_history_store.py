"""Tests for the in-memory analysis history."""

from datetime import datetime, timezone

import pytest

from nlp_studio.analyzers.results import OperationKind
from nlp_studio.db.history_store import AnalysisStore
from nlp_studio.errors import NotFound

SENTIMENT = {"label": "positive", "score": 3, "comparative": 0.75,
             "positive": ["love"], "negative": [], "explanation": "..."}


def test_append_assigns_increasing_ids(store):
    first = store.append("I love this product", OperationKind.SENTIMENT, SENTIMENT)
    second = store.append("Summarize me", OperationKind.SUMMARY, {"summary": "short"})

    assert first.id == 1
    assert second.id == 2
    assert store.list() == [first, second]


def test_append_sets_created_at(store):
    before = datetime.now(timezone.utc)
    record = store.append("text", OperationKind.CHAT, {"reply": "hi"})
    assert before <= record.createdAt <= datetime.now(timezone.utc)


def test_ids_keep_growing_after_delete_and_clear(store):
    a = store.append("a", OperationKind.CHAT, {"reply": "1"})
    store.delete(a.id)
    b = store.append("b", OperationKind.CHAT, {"reply": "2"})
    store.clear()
    c = store.append("c", OperationKind.CHAT, {"reply": "3"})

    assert a.id < b.id < c.id
    assert [r.id for r in store.list()] == [c.id]


def test_list_is_a_snapshot(store):
    store.append("a", OperationKind.CHAT, {"reply": "1"})
    snapshot = store.list()
    store.append("b", OperationKind.CHAT, {"reply": "2"})

    assert len(snapshot) == 1
    assert len(store.list()) == 2


def test_update_merges_given_fields(store):
    record = store.append("old text", OperationKind.CHAT, {"reply": "hi"})

    merged = store.update(record.id, {"inputText": "new text"})

    assert merged.inputText == "new text"
    assert merged.result == {"reply": "hi"}
    assert merged.createdAt == record.createdAt
    assert store.get(record.id) == merged


def test_update_never_changes_id_and_ignores_unknown_fields(store):
    record = store.append("text", OperationKind.CHAT, {"reply": "hi"})

    merged = store.update(record.id, {"id": 999, "owner": "someone"})

    assert merged.id == record.id
    assert not hasattr(merged, "owner")


def test_update_does_not_cross_check_result_and_operation(store):
    record = store.append("text", OperationKind.CHAT, {"reply": "hi"})
    merged = store.update(record.id, {"result": {"summary": "not a chat reply"}})
    assert merged.operation is OperationKind.CHAT
    assert merged.result == {"summary": "not a chat reply"}


def test_update_unknown_id_raises_not_found(store):
    with pytest.raises(NotFound):
        store.update(42, {"inputText": "x"})


def test_delete_is_idempotent(store):
    keep = store.append("keep", OperationKind.CHAT, {"reply": "1"})
    drop = store.append("drop", OperationKind.CHAT, {"reply": "2"})

    store.delete(drop.id)
    after_first = store.list()
    store.delete(drop.id)
    store.delete(12345)

    assert store.list() == after_first == [keep]


def test_get_unknown_id_raises_not_found(store):
    with pytest.raises(NotFound):
        store.get(1)
