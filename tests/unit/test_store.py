"""TaskStore: whole-file load/save."""

import json

from tasklist.models import LoadStatus, Task
from tasklist.store import TaskStore


def test_load_missing_file_is_empty(store):
    assert store.load() == []


def test_save_then_load_round_trip(store):
    tasks = [Task("buy milk"), Task(""), Task("café ☕"), Task("buy milk")]
    store.save(tasks)
    assert store.load() == tasks


def test_save_writes_two_space_array(store, tasks_path):
    store.save([Task("a"), Task("b")])
    text = tasks_path.read_text(encoding="utf-8")
    assert text == '[\n  {\n    "task": "a"\n  },\n  {\n    "task": "b"\n  }\n]'


def test_save_keeps_non_ascii(store, tasks_path):
    store.save([Task("café")])
    assert "café" in tasks_path.read_text(encoding="utf-8")


def test_save_overwrites_whole_file(store, tasks_path):
    store.save([Task("a"), Task("b"), Task("c")])
    store.save([Task("z")])
    assert json.loads(tasks_path.read_text(encoding="utf-8")) == [{"task": "z"}]


def test_save_empty_list(store, tasks_path):
    store.save([])
    assert tasks_path.read_text(encoding="utf-8") == "[]"
    assert store.read().status == LoadStatus.OK


def test_read_missing(store):
    result = store.read()
    assert result.status == LoadStatus.MISSING
    assert result.tasks == []
    assert not result.ok


def test_read_invalid_json_is_corrupt(store, tasks_path):
    tasks_path.write_text("[{\"task\": \"half", encoding="utf-8")
    result = store.read()
    assert result.status == LoadStatus.CORRUPT
    assert store.load() == []


def test_read_non_array_is_corrupt(store, tasks_path):
    tasks_path.write_text('{"task": "a"}', encoding="utf-8")
    assert store.read().status == LoadStatus.CORRUPT
    assert store.load() == []


def test_read_non_object_entry_is_corrupt(store, tasks_path):
    tasks_path.write_text('[{"task": "a"}, "b"]', encoding="utf-8")
    assert store.read().status == LoadStatus.CORRUPT


def test_read_coerces_missing_and_non_string_task(store, tasks_path):
    tasks_path.write_text('[{}, {"task": 42}, {"task": null}]', encoding="utf-8")
    result = store.read()
    assert result.ok
    assert result.tasks == [Task(""), Task("42"), Task("")]


def test_read_directory_path_is_corrupt(tmp_path):
    assert TaskStore(tmp_path).read().status == LoadStatus.CORRUPT


def test_save_after_corrupt_load_resets(store, tasks_path):
    tasks_path.write_text("not json", encoding="utf-8")
    tasks = store.load()
    tasks.append(Task("fresh"))
    store.save(tasks)
    assert store.load() == [Task("fresh")]
