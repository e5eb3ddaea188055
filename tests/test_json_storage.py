"""
File-backed storage: on-disk layout, reloading and failed writes
"""

import json

import pytest

from app.core.exceptions import StorageError
from app.services.records import RecordsStore
from app.storage import JsonFileStorage
from app.utils.fs_atomic import atomic_write_json
from helpers import seed_course, student_fields, teacher_fields


@pytest.mark.asyncio
async def test_collections_are_written_as_pretty_printed_camel_case_arrays(tmp_path):
    storage = JsonFileStorage(tmp_path)
    store = RecordsStore(storage)
    await store.init()

    teacher, course = await seed_course(store, schedule="Mon 9:00")

    teachers_file = storage.path_for("teachers")
    assert json.loads(teachers_file.read_text(encoding="utf-8")) == [{
        "id": teacher["id"],
        "firstName": "Ada",
        "lastName": "Lovelace",
        "email": "ada@school.test",
        "department": "Mathematics",
    }]
    assert teachers_file.read_text(encoding="utf-8").startswith("[\n  {\n")

    courses = json.loads(storage.path_for("courses").read_text(encoding="utf-8"))
    assert courses[0]["teacherId"] == teacher["id"]
    assert courses[0]["schedule"] == "Mon 9:00"


@pytest.mark.asyncio
async def test_records_survive_reload_and_ids_continue(tmp_path):
    store = RecordsStore(JsonFileStorage(tmp_path))
    await store.init()
    first = await store.students.create(student_fields())
    await store.close()

    reloaded = RecordsStore(JsonFileStorage(tmp_path))
    await reloaded.init()

    assert await reloaded.students.list() == [first]
    second = await reloaded.students.create(student_fields(student_number="S-2002"))
    assert second["id"] == first["id"] + 1


@pytest.mark.asyncio
async def test_existing_files_with_camel_case_keys_are_loaded(tmp_path):
    (tmp_path / "students.json").write_text(json.dumps([
        {"id": 4, "firstName": "Grace", "lastName": "Hopper", "grade": 12, "studentNumber": "S-4", "homeroom": None},
    ]), encoding="utf-8")
    store = RecordsStore(JsonFileStorage(tmp_path))
    await store.init()

    student = await store.students.get(4)

    assert student["first_name"] == "Grace"
    assert student["student_number"] == "S-4"
    assert (await store.students.create(student_fields()))["id"] == 5


@pytest.mark.asyncio
async def test_unparsable_file_is_treated_as_empty(tmp_path):
    (tmp_path / "teachers.json").write_text("{not json", encoding="utf-8")
    (tmp_path / "students.json").write_bytes(b"\xff\xfe[not]")
    store = RecordsStore(JsonFileStorage(tmp_path))
    await store.init()

    assert await store.teachers.list() == []
    assert await store.students.list() == []


@pytest.mark.asyncio
async def test_failed_write_leaves_collection_unchanged(tmp_path, monkeypatch):
    store = RecordsStore(JsonFileStorage(tmp_path))
    await store.init()
    teacher = await store.teachers.create(teacher_fields())

    def broken_write(path, payload):
        raise OSError("disk full")

    monkeypatch.setattr("app.storage.json_file.atomic_write_json", broken_write)

    with pytest.raises(StorageError):
        await store.teachers.create(teacher_fields(email="grace@school.test"))
    with pytest.raises(StorageError):
        await store.teachers.update(teacher["id"], {"room": "A1"})

    assert await store.teachers.list() == [teacher]


def test_atomic_write_replaces_file_without_leftovers(tmp_path):
    target = tmp_path / "nested" / "courses.json"
    atomic_write_json(target, [{"id": 1, "name": "Алгебра"}])
    atomic_write_json(target, [{"id": 2, "name": "Geometry"}])

    assert json.loads(target.read_text(encoding="utf-8")) == [{"id": 2, "name": "Geometry"}]
    assert [p.name for p in target.parent.iterdir()] == ["courses.json"]
