import pytest

from dsakit.greedy import Job, fractional_knapsack, job_sequencing

PROFITS = [10, 5, 15, 7, 6, 18, 3]
WEIGHTS = [2, 3, 5, 7, 1, 4, 1]


def test_fractional_knapsack_worked_example():
    assert fractional_knapsack(15, PROFITS, WEIGHTS) == pytest.approx(55 + 1 / 3)


def test_everything_fits():
    assert fractional_knapsack(sum(WEIGHTS), PROFITS, WEIGHTS) == pytest.approx(
        sum(PROFITS)
    )
    assert fractional_knapsack(1000, PROFITS, WEIGHTS) == pytest.approx(sum(PROFITS))


def test_zero_capacity():
    assert fractional_knapsack(0, PROFITS, WEIGHTS) == 0


def test_fraction_of_single_item():
    assert fractional_knapsack(2, [10], [4]) == pytest.approx(10 * 2 / 4)


def test_profit_grows_with_capacity():
    values = [fractional_knapsack(c, PROFITS, WEIGHTS) for c in range(0, 25)]
    assert values == sorted(values)


def test_knapsack_rejects_bad_input():
    with pytest.raises(ValueError):
        fractional_knapsack(5, [1, 2], [1])
    with pytest.raises(ValueError):
        fractional_knapsack(5, [1], [0])
    with pytest.raises(ValueError):
        fractional_knapsack(-1, [1], [1])


def _sample_jobs():
    ids = ["A", "B", "C", "D", "E", "F", "G"]
    deadlines = [1, 3, 4, 3, 2, 1, 2]
    profits = [3, 5, 20, 18, 1, 6, 30]
    return [Job(i, d, p) for i, d, p in zip(ids, deadlines, profits)]


def test_job_sequencing_worked_example():
    schedule = job_sequencing(_sample_jobs())
    assert [job.id for job in schedule] == ["F", "G", "D", "C"]
    assert sum(job.profit for job in schedule) == 74


def test_schedule_respects_deadlines():
    schedule = job_sequencing(_sample_jobs())
    for slot, job in enumerate(schedule, start=1):
        assert job.deadline >= slot


def test_all_jobs_fit_when_deadlines_allow():
    jobs = [Job("x", 1, 5), Job("y", 2, 7), Job("z", 3, 1)]
    schedule = job_sequencing(jobs)
    assert schedule == jobs


def test_job_sequencing_empty():
    assert job_sequencing([]) == []