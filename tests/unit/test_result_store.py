"""Tests for the durable result store."""

import uuid

import pytest

from sleaze_bot.services.errors import ImageNotFound


def test_store_then_retrieve_returns_same_bytes(result_store):
    payload = b"\x89PNG\r\n\x1a\nsome-bytes"

    stored = result_store.store(payload)

    assert stored.path.exists()
    assert stored.path.name == f"{stored.image_id}.png"
    assert result_store.retrieve(stored.image_id) == payload


def test_identifiers_are_unique(result_store):
    ids = {result_store.store(b"x").image_id for _ in range(20)}
    assert len(ids) == 20


def test_retrieve_unknown_id(result_store):
    with pytest.raises(ImageNotFound):
        result_store.retrieve(str(uuid.uuid4()))


@pytest.mark.parametrize("image_id", ["../secret", "not-a-uuid", "", str(uuid.uuid4()).upper()])
def test_retrieve_rejects_non_canonical_ids(result_store, image_id):
    with pytest.raises(ImageNotFound):
        result_store.retrieve(image_id)


def test_retrieve_has_no_side_effects(result_store, results_dir):
    stored = result_store.store(b"abc")
    before = sorted(results_dir.iterdir())
    result_store.retrieve(stored.image_id)
    result_store.retrieve(stored.image_id)
    assert sorted(results_dir.iterdir()) == before


def test_ensure_creates_directory(tmp_path):
    from sleaze_bot.services.result_store import ResultStore

    store = ResultStore(tmp_path / "nested" / "results")
    store.ensure()
    assert (tmp_path / "nested" / "results").is_dir()
