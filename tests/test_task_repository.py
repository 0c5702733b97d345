# tests/test_task_repository.py

from datetime import date, datetime

import pytest

from taskapi.errors import TaskNotFoundError


def test_get_all_tasks_without_filters(repo, make_task) -> None:
    for i in range(3):
        make_task(title=f"Task {i}")

    assert len(repo.get_all_tasks({})) == 3
    assert len(repo.get_all_tasks()) == 3


def test_filter_by_status(repo, make_task) -> None:
    make_task(status="pending")
    make_task(status="pending")
    make_task(status="completed")

    tasks = repo.get_all_tasks({"status": "pending"})
    assert len(tasks) == 2
    assert all(t.status == "pending" for t in tasks)


def test_filter_by_due_date_range_is_inclusive(repo, make_task) -> None:
    make_task(title="Early", due_date=date(2025, 10, 10))
    make_task(title="Start", due_date=date(2025, 10, 12))
    make_task(title="Middle", due_date=date(2025, 10, 15))
    make_task(title="End", due_date=date(2025, 10, 18))
    make_task(title="Late", due_date=date(2025, 10, 20))
    make_task(title="Undated")

    tasks = repo.get_all_tasks({"due_date_from": date(2025, 10, 12), "due_date_to": date(2025, 10, 18)})
    assert [t.title for t in tasks] == ["Start", "Middle", "End"]


def test_filter_by_title_substring(repo, make_task) -> None:
    make_task(title="Important Task 1")
    make_task(title="Regular Task")
    make_task(title="Another Important Task")

    tasks = repo.get_all_tasks({"title": "Important"})
    assert len(tasks) == 2
    assert all("Important" in t.title for t in tasks)


def test_title_filter_treats_wildcards_literally(repo, make_task) -> None:
    make_task(title="100% done")
    make_task(title="1000 things")

    tasks = repo.get_all_tasks({"title": "0%"})
    assert [t.title for t in tasks] == ["100% done"]


def test_orders_by_due_date_then_newest_first(repo, make_task) -> None:
    older = make_task(title="Older", due_date=date(2025, 10, 15), created_at=datetime(2025, 1, 1, 9))
    earliest = make_task(title="Earliest", due_date=date(2025, 10, 10), created_at=datetime(2025, 1, 1, 8))
    newer = make_task(title="Newer", due_date=date(2025, 10, 15), created_at=datetime(2025, 1, 1, 10))
    undated = make_task(title="Undated", created_at=datetime(2025, 1, 1, 11))

    tasks = repo.get_all_tasks({})
    assert [t.id for t in tasks] == [earliest, newer, older, undated]


def test_empty_and_null_filters_are_ignored(repo, make_task) -> None:
    make_task(status="pending", due_date=date(2025, 10, 10))
    make_task(status="completed")

    empty = {"status": "", "due_date_from": "", "due_date_to": "", "title": ""}
    null = {"status": None, "due_date_from": None, "due_date_to": None, "title": None}
    assert len(repo.get_all_tasks(empty)) == 2
    assert len(repo.get_all_tasks(null)) == 2


def test_combined_filters_are_conjunctive(repo, make_task) -> None:
    make_task(title="Important Pending Task", status="pending", due_date=date(2025, 10, 15))
    make_task(title="Important Completed Task", status="completed", due_date=date(2025, 10, 15))
    make_task(title="Regular Pending Task", status="pending", due_date=date(2025, 10, 15))
    make_task(title="Important Late Task", status="pending", due_date=date(2025, 11, 30))

    tasks = repo.get_all_tasks(
        {
            "status": "pending",
            "title": "Important",
            "due_date_from": date(2025, 10, 1),
            "due_date_to": date(2025, 10, 31),
        }
    )
    assert [t.title for t in tasks] == ["Important Pending Task"]


def test_get_task_by_id(repo, make_task) -> None:
    task_id = make_task(title="Test Task")

    task = repo.get_task_by_id(task_id)
    assert task.id == task_id
    assert task.title == "Test Task"


def test_get_task_by_id_missing_raises(repo) -> None:
    with pytest.raises(TaskNotFoundError):
        repo.get_task_by_id(999)


def test_create_task(repo, fetch_task) -> None:
    task = repo.create_task(
        {"title": "New Task", "description": "Task description", "due_date": date(2030, 1, 1), "status": "pending"}
    )

    stored = fetch_task(task.id)
    assert stored.title == "New Task"
    assert stored.description == "Task description"
    assert stored.due_date == date(2030, 1, 1)
    assert stored.status == "pending"


def test_create_task_defaults_status(repo) -> None:
    task = repo.create_task({"title": "Defaulted"})
    assert task.status == "pending"


def test_update_task_replaces_fields_and_keeps_status(repo, make_task, fetch_task) -> None:
    task_id = make_task(title="Old", description="old text", due_date=date(2030, 1, 1), status="completed")

    repo.update_task(task_id, {"title": "New", "description": None, "due_date": None, "status": None})

    task = fetch_task(task_id)
    assert task.title == "New"
    assert task.description is None
    assert task.due_date is None
    assert task.status == "completed"


def test_update_task_status(repo, make_task, fetch_task) -> None:
    task_id = make_task(status="pending")

    updated = repo.update_task_status(task_id, "completed")
    assert updated.id == task_id
    assert updated.status == "completed"
    assert fetch_task(task_id).status == "completed"


def test_update_status_of_missing_task_raises(repo) -> None:
    with pytest.raises(TaskNotFoundError):
        repo.update_task_status(999, "completed")


def test_delete_task(repo, make_task, fetch_task) -> None:
    task_id = make_task()

    assert repo.delete_task(task_id) is True
    assert fetch_task(task_id) is None


def test_delete_missing_task_raises(repo) -> None:
    with pytest.raises(TaskNotFoundError):
        repo.delete_task(999)


def test_id_beyond_integer_range_is_not_found(repo) -> None:
    with pytest.raises(TaskNotFoundError):
        repo.get_task_by_id(10**22)
