import json

import pytest

from slidetree.errors import DocumentError
from slidetree.snapshot_store import PresentationSnapshotStore, load_presentation_json

from tests.presentation_fixtures import sample_presentation


def test_save_and_load_snapshot(tmp_path):
    store = PresentationSnapshotStore(tmp_path / "snapshots" / "deck.json")
    presentation = sample_presentation()

    assert store.exists() is False
    store.save(presentation)

    assert store.exists() is True
    assert store.load() == presentation
    saved = json.loads(store.path.read_text(encoding="utf-8"))
    assert saved["presentationId"] == "deck-1"


def test_load_missing_snapshot_raises(tmp_path):
    store = PresentationSnapshotStore(tmp_path / "missing.json")

    with pytest.raises(FileNotFoundError):
        store.load()


def test_invalid_json_is_a_document_error():
    with pytest.raises(DocumentError, match="invalid JSON"):
        load_presentation_json("{not json")


def test_non_ascii_text_is_written_verbatim(tmp_path):
    presentation = sample_presentation()
    presentation.title = "四半期レビュー"
    store = PresentationSnapshotStore(tmp_path / "deck.json")

    store.save(presentation)

    assert "四半期レビュー" in store.path.read_text(encoding="utf-8")
