"""Tests for the JSON file and in-memory doctor stores."""

import json

import pytest

from conftest import make_doctor
from services.errors import StoreReadFailure, StoreWriteFailure
from utils.storage import DoctorStore, InMemoryDoctorStore, JsonFileDoctorStore, read_json_file, write_json_file


def test_missing_file_loads_as_empty(file_store):
    assert not file_store.path.exists()
    assert file_store.load_all() == []


def test_save_then_load(file_store):
    docs = [make_doctor(id="a"), make_doctor(id="b", name="Dr. B")]
    file_store.save_all(docs)
    assert file_store.load_all() == docs
    on_disk = json.loads(file_store.path.read_text())
    assert on_disk == {"doctors": docs}


def test_save_creates_parent_directory(tmp_path):
    store = JsonFileDoctorStore(tmp_path / "nested" / "data" / "doctors.json")
    store.save_all([make_doctor()])
    assert store.load_all() == [make_doctor()]


def test_bare_list_layout_is_accepted(file_store):
    file_store.path.write_text(json.dumps([make_doctor(id="x")]))
    assert [d["id"] for d in file_store.load_all()] == ["x"]


@pytest.mark.parametrize("content", ["", "{not json", '{"doctors": 5}', '"just a string"', "[1, 2]"])
def test_corrupt_file_raises_read_failure(file_store, content):
    file_store.path.write_text(content)
    with pytest.raises(StoreReadFailure):
        file_store.load_all()


def test_write_failure_keeps_previous_content(tmp_path):
    store = JsonFileDoctorStore(tmp_path / "doctors.json")
    store.save_all([make_doctor(id="keep")])
    with pytest.raises(StoreWriteFailure):
        # sets are not JSON serializable
        store.save_all([make_doctor(id="bad", languages={"English"})])
    assert [d["id"] for d in store.load_all()] == ["keep"]
    assert list(tmp_path.iterdir()) == [tmp_path / "doctors.json"]


def test_unwritable_target_raises_write_failure(tmp_path):
    # target path is an existing directory, so the replace fails
    (tmp_path / "doctors.json").mkdir()
    store = JsonFileDoctorStore(tmp_path / "doctors.json")
    with pytest.raises(StoreWriteFailure):
        store.save_all([make_doctor()])


def test_directory_as_file_raises_read_failure(tmp_path):
    (tmp_path / "doctors.json").mkdir()
    with pytest.raises(StoreReadFailure):
        JsonFileDoctorStore(tmp_path / "doctors.json").load_all()


def test_in_memory_store_returns_copies():
    store = InMemoryDoctorStore([make_doctor(id="a")])
    loaded = store.load_all()
    loaded.append(make_doctor(id="b"))
    loaded[0]["name"] = "changed"
    assert store.load_all() == [make_doctor(id="a")]


def test_json_helpers(tmp_path):
    path = tmp_path / "x.json"
    assert read_json_file(path, default=[]) == []
    write_json_file(path, {"a": 1})
    assert read_json_file(path) == {"a": 1}


def test_incomplete_store_cannot_be_instantiated():
    class LoadOnlyStore(DoctorStore):
        def load_all(self):
            return []

    with pytest.raises(TypeError):
        LoadOnlyStore()
