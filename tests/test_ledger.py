"""TaskLedger tests"""

from concurrent.futures import ThreadPoolExecutor
from datetime import date

import pytest

from doer.todo import (
    InvalidArgumentError,
    InvalidTaskIdError,
    TaskIdOutOfBoundsError,
    TaskInfo,
    TaskLedger,
    parse_task_id,
)


@pytest.fixture
def ledger() -> TaskLedger:
    return TaskLedger()


def test_add_and_list_round_trip(ledger: TaskLedger) -> None:
    task_id = ledger.add_task("buy milk", "home", "2024-01-01")

    assert task_id == 0
    assert ledger.list_tasks() == [
        TaskInfo(description="buy milk", project="home", due="2024-01-01")
    ]


def test_ids_follow_insertion_order(ledger: TaskLedger) -> None:
    ids = [ledger.add_task(f"task {i}", "p", date(2024, 1, i + 1)) for i in range(5)]

    assert ids == [0, 1, 2, 3, 4]
    assert [info.description for info in ledger.list_tasks()] == [
        f"task {i}" for i in range(5)
    ]


def test_add_invalid_due_date_does_not_store(ledger: TaskLedger) -> None:
    with pytest.raises(InvalidArgumentError):
        ledger.add_task("buy milk", "home", "2024-02-30")
    with pytest.raises(InvalidArgumentError):
        ledger.add_task("buy milk", "home", "next week")

    assert len(ledger) == 0
    # the failed calls do not consume ids
    assert ledger.add_task("buy milk", "home", "2024-01-01") == 0


def test_add_stores_what_it_is_given(ledger: TaskLedger) -> None:
    task_id = ledger.add_task("", "", "2024-01-01")
    task = ledger.get_task(task_id)
    assert task.description == ""
    assert task.project == ""


def test_done_marks_completed(ledger: TaskLedger) -> None:
    task_id = ledger.add_task("buy milk", "home", "2024-01-01")
    assert ledger.get_task(task_id).completed is False

    ledger.done_task(task_id)
    assert ledger.get_task(task_id).completed is True


def test_done_is_idempotent(ledger: TaskLedger) -> None:
    task_id = ledger.add_task("buy milk", "home", "2024-01-01")
    ledger.done_task(task_id)
    ledger.done_task(task_id)
    assert ledger.get_task(task_id).completed is True


@pytest.mark.parametrize("task_id", [-1, 1, 100])
def test_done_out_of_bounds(ledger: TaskLedger, task_id: int) -> None:
    ledger.add_task("buy milk", "home", "2024-01-01")

    with pytest.raises(TaskIdOutOfBoundsError):
        ledger.done_task(task_id)
    assert ledger.get_task(0).completed is False
    assert len(ledger) == 1


def test_completed_tasks_are_still_listed(ledger: TaskLedger) -> None:
    ledger.add_task("a", "p", "2024-01-01")
    ledger.add_task("b", "p", "2024-01-02")
    ledger.done_task(0)

    assert [info.description for info in ledger.list_tasks()] == ["a", "b"]


def test_get_task_returns_copy(ledger: TaskLedger) -> None:
    task_id = ledger.add_task("buy milk", "home", "2024-01-01")
    copy = ledger.get_task(task_id)
    copy.completed = True
    assert ledger.get_task(task_id).completed is False


def test_concurrent_adds_are_gap_free(ledger: TaskLedger) -> None:
    count = 200
    with ThreadPoolExecutor(max_workers=8) as pool:
        ids = list(
            pool.map(
                lambda i: ledger.add_task(f"task {i}", "load", "2024-01-01"),
                range(count),
            )
        )

    assert sorted(ids) == list(range(count))
    assert len(ledger.list_tasks()) == count


def test_concurrent_done_and_list(ledger: TaskLedger) -> None:
    for i in range(50):
        ledger.add_task(f"task {i}", "load", "2024-01-01")

    with ThreadPoolExecutor(max_workers=8) as pool:
        list(pool.map(ledger.done_task, range(50)))
        snapshots = list(pool.map(lambda _: ledger.list_tasks(), range(20)))

    assert all(len(snapshot) == 50 for snapshot in snapshots)
    assert all(ledger.get_task(i).completed for i in range(50))


def test_parse_task_id() -> None:
    assert parse_task_id("3") == 3
    assert parse_task_id(" 7 ") == 7
    assert parse_task_id(5) == 5
    for value in ["x", "3.5", "", "1_0", "\u0661", "\uff13"]:
        with pytest.raises(InvalidTaskIdError):
            parse_task_id(value)
