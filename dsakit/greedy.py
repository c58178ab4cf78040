"""Greedy algorithms: fractional knapsack and job sequencing with deadlines."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Optional


def fractional_knapsack(
    capacity: float, profits: Sequence[float], weights: Sequence[float]
) -> float:
    """Return the best profit when items may be taken in fractions.

    Items are taken whole in decreasing order of profit per unit weight; the
    first item that does not fit is taken in the fraction that fills the bag.
    """
    if len(profits) != len(weights):
        raise ValueError("profits and weights must have the same length")
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    if any(weight <= 0 for weight in weights):
        raise ValueError("weights must be positive")

    items = sorted(
        zip(profits, weights), key=lambda item: item[0] / item[1], reverse=True
    )
    current_weight = 0.0
    total = 0.0
    for profit, weight in items:
        if current_weight + weight <= capacity:
            current_weight += weight
            total += profit
        else:
            total += profit / weight * (capacity - current_weight)
            break
    return total


@dataclass(frozen=True)
class Job:
    """A unit-time job that earns ``profit`` if done by ``deadline``."""

    id: str
    deadline: int
    profit: int


def job_sequencing(jobs: Iterable[Job]) -> list[Job]:
    """Choose jobs to maximise profit and return them in slot order.

    Jobs are considered from the most profitable down; each is placed in the
    latest free slot on or before its deadline, or dropped if none is free.
    """
    jobs = list(jobs)
    if not jobs:
        return []
    max_deadline = max(job.deadline for job in jobs)
    slots: list[Optional[Job]] = [None] * (max_deadline + 1)
    for job in sorted(jobs, key=lambda job: job.profit, reverse=True):
        for slot in range(job.deadline, 0, -1):
            if slots[slot] is None:
                slots[slot] = job
                break
    return [job for job in slots[1:] if job is not None]