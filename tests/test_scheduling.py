from graphalgos.scheduling import Job, Schedule, schedule_jobs

EXAMPLE = [
    Job("A", 2, 100),
    Job("B", 1, 19),
    Job("C", 2, 27),
    Job("D", 1, 25),
    Job("E", 3, 15),
]


def test_example_schedule():
    schedule = schedule_jobs(EXAMPLE)
    assert [slot for slot, _ in schedule.slots] == [1, 2, 3]
    assert [job.id for job in schedule.jobs] == ["C", "A", "E"]
    assert schedule.job_count == 3
    assert schedule.total_profit == 142
    assert schedule.max_deadline == 3


def test_empty_input():
    schedule = schedule_jobs([])
    assert schedule == Schedule(slots=(), max_deadline=0)
    assert schedule.job_count == 0
    assert schedule.total_profit == 0


def test_jobs_finish_by_their_deadline_and_are_distinct():
    schedule = schedule_jobs(EXAMPLE)
    for slot, job in schedule.slots:
        assert 1 <= slot <= job.deadline
    assert len(set(schedule.jobs)) == schedule.job_count
    assert schedule.job_count <= schedule.max_deadline


def test_higher_profit_wins_a_shared_slot():
    schedule = schedule_jobs([Job("X", 1, 5), Job("Y", 1, 9)])
    assert schedule.jobs == [Job("Y", 1, 9)]
    assert schedule.total_profit == 9


def test_job_with_non_positive_deadline_is_never_scheduled():
    schedule = schedule_jobs([Job("late", 0, 50), Job("ok", 1, 1)])
    assert [job.id for job in schedule.jobs] == ["ok"]


def test_equal_profits_keep_input_order():
    schedule = schedule_jobs([Job("first", 1, 10), Job("second", 1, 10)])
    assert [job.id for job in schedule.jobs] == ["first"]