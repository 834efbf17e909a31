import pytest

from minijuegos.scheduler import (
    ACTIVE,
    INACTIVE,
    PriorityQueue,
    Process,
    ProcessingUnit,
    main,
    run_schedule,
)


def _demo_processes():
    return [
        Process(111, 1, ACTIVE, 50),
        Process(134, 5, ACTIVE, 40),
        Process(234, 8, ACTIVE, 60),
        Process(464, 9, ACTIVE, 30),
        Process(987, 30, ACTIVE, 90),
    ]


def test_describe_is_tab_separated():
    assert Process(111, 1, "activo", 50).describe() == "111\tactivo\t50\t1"


def test_reduce_time():
    process = Process(1, 1, ACTIVE, 50)
    process.reduce_time(20)
    assert process.time == 30


def test_push_into_empty_queue():
    queue = PriorityQueue()
    assert queue.push(Process(1, 3, ACTIVE, 10)) is True
    assert [p.pid for p in queue] == [1]


def test_higher_priority_goes_in_front():
    queue = PriorityQueue()
    for pid, priority in [(1, 1), (2, 5), (3, 8)]:
        queue.push(Process(pid, priority, ACTIVE, 10))
    assert [p.pid for p in queue] == [3, 2, 1]
    assert queue.peek().pid == 3


def test_push_goes_before_first_lower_priority():
    queue = PriorityQueue()
    queue.push(Process(1, 2, ACTIVE, 10))
    queue.push(Process(2, 9, ACTIVE, 10))
    queue.push(Process(3, 5, ACTIVE, 10))
    assert [p.priority for p in queue] == [9, 5, 2]


def test_push_without_lower_priority_is_refused():
    queue = PriorityQueue()
    queue.push(Process(1, 5, ACTIVE, 10))
    assert queue.push(Process(2, 5, ACTIVE, 10)) is False
    assert queue.push(Process(3, 1, ACTIVE, 10)) is False
    assert len(queue) == 1


def test_pop_and_peek_on_empty_raise():
    queue = PriorityQueue()
    with pytest.raises(IndexError):
        queue.pop()
    with pytest.raises(IndexError):
        queue.peek()


def test_pop_removes_front():
    queue = PriorityQueue()
    queue.push(Process(1, 1, ACTIVE, 10))
    queue.push(Process(2, 4, ACTIVE, 10))
    assert queue.pop().pid == 2
    assert [p.pid for p in queue] == [1]


def test_render_lists_each_process():
    queue = PriorityQueue()
    first = Process(1, 1, ACTIVE, 10)
    second = Process(2, 4, ACTIVE, 20)
    queue.push(first)
    queue.push(second)
    assert queue.render().splitlines() == [second.describe(), first.describe()]


def test_unit_rejects_bad_settings():
    with pytest.raises(ValueError):
        ProcessingUnit(0, 0)
    with pytest.raises(ValueError):
        ProcessingUnit(10, -1)


def test_unit_processes_one_slice(capsys):
    process = Process(1, 1, ACTIVE, 50)
    ProcessingUnit(10, 0).process(process)
    out = capsys.readouterr().out
    assert process.time == 40
    assert process.state == ACTIVE
    assert out.count("procesando tiempo:") == 10
    assert "procesando tiempo: 10" in out


def test_unit_marks_finished_process_inactive():
    process = Process(1, 1, ACTIVE, 10)
    ProcessingUnit(10, 0).process(process)
    assert process.time == 0
    assert process.state == INACTIVE


def test_run_schedule_finishes_every_process():
    processes = _demo_processes()
    served = run_schedule(processes, ProcessingUnit(10, 0))
    assert all(p.state == INACTIVE for p in processes)
    for process in _demo_processes():
        assert served.count(process.pid) == process.time // 10


def test_run_schedule_serves_by_priority():
    processes = _demo_processes()
    priority = {p.pid: p.priority for p in processes}
    served = run_schedule(processes, ProcessingUnit(10, 0))
    assert served[0] == 987
    priorities = [priority[pid] for pid in served]
    assert priorities == sorted(priorities, reverse=True)


def test_main_runs_demo(capsys):
    assert main(["--delay", "0"]) == 0
    out = capsys.readouterr().out
    assert "987\tactivo\t90\t30" in out
    assert out.count("se inserto") == 5