# tests/test_database.py

import sqlite3

import pytest

from domain.errors import NotFoundError, StorageError
from infrastructure.database import Database


def test_get_after_create_returns_same_task(database: Database) -> None:
    created = database.create_task("Write report", "Quarterly numbers")

    fetched = database.get_task(created.id)

    assert fetched == created
    assert fetched.title == "Write report"
    assert fetched.description == "Quarterly numbers"


def test_list_returns_every_created_task_in_insertion_order(database: Database) -> None:
    ids = [database.create_task(f"task {i}", "").id for i in range(5)]

    tasks = database.list_tasks()

    assert [t.id for t in tasks] == ids
    assert len(set(ids)) == 5


def test_list_on_empty_table(database: Database) -> None:
    assert database.list_tasks() == []


def test_get_missing_task_raises_not_found(database: Database) -> None:
    with pytest.raises(NotFoundError):
        database.get_task(42)


def test_update_replaces_title_and_description(database: Database) -> None:
    task = database.create_task("old", "old description")

    database.update_task(task.id, "new", "new description")

    updated = database.get_task(task.id)
    assert (updated.title, updated.description) == ("new", "new description")


def test_update_missing_task_is_silent_noop(database: Database) -> None:
    database.update_task(999, "ghost", "nothing")

    assert database.list_tasks() == []


def test_delete_removes_row_and_missing_delete_is_noop(database: Database) -> None:
    task = database.create_task("short lived", "")

    database.delete_task(task.id)
    database.delete_task(task.id)

    with pytest.raises(NotFoundError):
        database.get_task(task.id)


def test_ids_are_not_reused_after_delete(database: Database) -> None:
    first = database.create_task("a", "")
    database.delete_task(first.id)

    second = database.create_task("b", "")

    assert second.id > first.id


def test_schema_creation_is_idempotent(settings) -> None:
    Database(settings.database_path).create_task("kept", "")

    reopened = Database(settings.database_path)

    assert [t.title for t in reopened.list_tasks()] == ["kept"]


def test_null_columns_read_back_as_empty_strings(database: Database) -> None:
    with sqlite3.connect(database.db_name) as conn:
        conn.execute("INSERT INTO tasks (title, description) VALUES (NULL, NULL)")
        conn.commit()

    [task] = database.list_tasks()

    assert task.title == ""
    assert task.description == ""


def test_storage_failure_is_wrapped(database: Database) -> None:
    with sqlite3.connect(database.db_name) as conn:
        conn.execute("DROP TABLE tasks")
        conn.commit()

    with pytest.raises(StorageError):
        database.list_tasks()
    with pytest.raises(StorageError):
        database.create_task("x", "y")


def test_ids_outside_sqlite_integer_range(database: Database) -> None:
    task = database.create_task("kept", "")
    huge = 2**64

    with pytest.raises(NotFoundError):
        database.get_task(huge)
    with pytest.raises(NotFoundError):
        database.get_task(-huge)
    database.update_task(huge, "x", "y")
    database.delete_task(huge)

    assert database.list_tasks() == [task]
