import json

import pytest
from fastapi.testclient import TestClient

from app.bootstrap import create_app
from app.core.config import settings
from app.core.exceptions import SeedDataError
from app.dependencies import build_stores
from app.lifecycle import register_lifecycle
from app.services.seed_data_loader import load_seed_file, seed_stores

SEED = {
    "lawcase": [{"id": 1, "name": "Kettleman"}, {"id": 2, "name": "Sandpiper"}],
    "lawyer": [{"id": 1, "name": "Saul", "caseList": [{"id": 1, "name": "Kettleman"}]}],
}


@pytest.fixture
def seed_path(tmp_path):
    path = tmp_path / "seed.json"
    path.write_text(json.dumps(SEED), encoding="utf-8")
    return path


def test_seed_stores_adds_rows_in_order(seed_path):
    stores = build_stores()

    summary = seed_stores(stores, load_seed_file(str(seed_path)))

    assert summary == {"lawcase": 2, "lawyer": 1}
    assert [c.name for c in stores["lawcase"].get_all()] == ["Kettleman", "Sandpiper"]
    assert stores["lawyer"].get_by_id(1).case_list[0].name == "Kettleman"
    assert stores["lawclient"].count() == 0


def test_missing_seed_file(tmp_path):
    with pytest.raises(SeedDataError):
        load_seed_file(str(tmp_path / "nope.json"))


def test_invalid_json(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(SeedDataError):
        load_seed_file(str(path))


def test_seed_path_is_a_directory(tmp_path):
    with pytest.raises(SeedDataError):
        load_seed_file(str(tmp_path))


def test_seed_file_not_utf8(tmp_path):
    path = tmp_path / "latin.json"
    path.write_bytes(b'{"lawcase": [{"id": 1, "name": "\xff"}]}')

    with pytest.raises(SeedDataError):
        load_seed_file(str(path))


def test_non_object_document(tmp_path):
    path = tmp_path / "list.json"
    path.write_text("[]", encoding="utf-8")

    with pytest.raises(SeedDataError):
        load_seed_file(str(path))


def test_unknown_kind_rejected():
    with pytest.raises(SeedDataError):
        seed_stores(build_stores(), {"judge": []})


def test_invalid_row_rejected():
    with pytest.raises(SeedDataError):
        seed_stores(build_stores(), {"lawcase": [{"id": "x"}]})


def test_startup_seeds_from_settings(seed_path, monkeypatch):
    monkeypatch.setattr(settings, "seed_file", str(seed_path))
    app = create_app()
    register_lifecycle(app)

    with TestClient(app) as client:
        cases = client.get("/api/lawcase/").json()

    assert [c["id"] for c in cases] == [1, 2]
