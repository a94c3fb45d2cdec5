"""Tests for the lesson repositories that run without a database server."""

import pytest

from db.connection import get_connection
from db.init_db import create_tables
from exceptions import StoreError
from models.lesson import DoneStatus


class TestUpsert:

    def test_creates_lesson_with_id(self, repo):
        lesson = repo.upsert("Piano", 3)
        assert lesson.id is not None
        assert lesson.title == "Piano"
        assert lesson.counter == 3

    def test_overwrites_counter_instead_of_incrementing(self, repo):
        first = repo.upsert("Piano", 3)
        second = repo.upsert("Piano", 7)
        assert second.id == first.id
        assert repo.find_by_title("Piano").counter == 7

    def test_no_duplicate_records_for_same_title(self, repo):
        repo.upsert("Piano", 3)
        repo.upsert("Piano", 5)
        repo.upsert("Guitar", 2)
        titles = sorted(l.title for l in repo.list_active())
        assert titles == ["Guitar", "Piano"]

    def test_title_with_spaces(self, repo):
        repo.upsert("Music theory", 4)
        assert repo.find_by_title("Music theory").counter == 4


class TestFindAndList:

    def test_find_missing_returns_none(self, repo):
        assert repo.find_by_title("Nothing") is None

    def test_find_is_exact_match(self, repo):
        repo.upsert("Piano", 3)
        assert repo.find_by_title("piano") is None
        assert repo.find_by_title("Pian") is None

    def test_list_empty(self, repo):
        assert repo.list_active() == []

    def test_list_skips_zero_counters(self, repo):
        lesson = repo.upsert("Piano", 1)
        repo.upsert("Guitar", 2)
        repo.set_counter(lesson, 0)
        assert [l.title for l in repo.list_active()] == ["Guitar"]


class TestDecrementOrDelete:

    def test_not_found(self, repo):
        repo.upsert("Piano", 2)
        outcome = repo.decrement_or_delete("Violin")
        assert outcome.status is DoneStatus.NOT_FOUND
        assert outcome.title == "Violin"
        assert repo.find_by_title("Piano").counter == 2

    def test_updates_counter(self, repo):
        repo.upsert("Piano", 3)
        outcome = repo.decrement_or_delete("Piano")
        assert outcome.status is DoneStatus.UPDATED
        assert outcome.counter == 2
        assert repo.find_by_title("Piano").counter == 2

    def test_deletes_when_last_occurrence(self, repo):
        repo.upsert("Piano", 1)
        outcome = repo.decrement_or_delete("Piano")
        assert outcome.status is DoneStatus.COMPLETED
        assert outcome.counter is None
        assert repo.find_by_title("Piano") is None
        assert repo.list_active() == []

    def test_deletes_leftover_zero_counter(self, repo):
        lesson = repo.upsert("Piano", 1)
        repo.set_counter(lesson, 0)
        assert repo.decrement_or_delete("Piano").status is DoneStatus.COMPLETED
        assert repo.find_by_title("Piano") is None

    def test_countdown_to_completion(self, repo):
        repo.upsert("Piano", 3)
        statuses = [repo.decrement_or_delete("Piano").status for _ in range(4)]
        assert statuses == [
            DoneStatus.UPDATED,
            DoneStatus.UPDATED,
            DoneStatus.COMPLETED,
            DoneStatus.NOT_FOUND,
        ]


class TestSqliteSpecifics:

    def test_create_tables_is_idempotent(self, sqlite_repo):
        sqlite_repo.upsert("Piano", 3)
        create_tables()
        assert sqlite_repo.find_by_title("Piano").counter == 3

    def test_ids_are_integers(self, sqlite_repo):
        assert isinstance(sqlite_repo.upsert("Piano", 3).id, int)

    def test_data_persists_in_shared_connection(self, sqlite_repo):
        sqlite_repo.upsert("Piano", 3)
        row = get_connection().execute(
            "SELECT title, counter FROM lessons"
        ).fetchone()
        assert (row["title"], row["counter"]) == ("Piano", 3)

    @pytest.mark.parametrize("call, operation", [
        (lambda r: r.list_active(), "list"),
        (lambda r: r.find_by_title("Piano"), "find"),
        (lambda r: r.upsert("Piano", 1), "upsert"),
    ])
    def test_driver_errors_are_wrapped(self, sqlite_repo, call, operation):
        sqlite_repo.conn.execute("DROP TABLE lessons")
        with pytest.raises(StoreError) as exc_info:
            call(sqlite_repo)
        assert exc_info.value.operation == operation
        assert exc_info.value.cause is not None

    @pytest.mark.parametrize("counter, operation", [(1, "delete"), (3, "update")])
    def test_write_errors_during_done_are_wrapped(self, sqlite_repo, monkeypatch, counter, operation):
        lesson = sqlite_repo.upsert("Piano", counter)
        # the lookup succeeds, then the table disappears before the write
        monkeypatch.setattr(sqlite_repo, "find_by_title", lambda title: lesson)
        sqlite_repo.conn.execute("DROP TABLE lessons")

        with pytest.raises(StoreError) as exc_info:
            sqlite_repo.decrement_or_delete("Piano")

        assert exc_info.value.operation == operation
        monkeypatch.undo()
        create_tables()
        sqlite_repo.upsert("Guitar", 2)
        assert sqlite_repo.find_by_title("Guitar").counter == 2
