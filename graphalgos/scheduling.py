"""Greedy job sequencing with deadlines to maximise profit."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class Job:
    """A unit-time job that must finish by ``deadline`` to earn ``profit``."""

    id: str
    deadline: int
    profit: int


@dataclass(frozen=True)
class Schedule:
    """Jobs placed into 1-based time slots, ordered by slot."""

    slots: tuple[tuple[int, Job], ...]
    max_deadline: int

    @property
    def jobs(self) -> list[Job]:
        return [job for _, job in self.slots]

    @property
    def job_count(self) -> int:
        return len(self.slots)

    @property
    def total_profit(self) -> int:
        return sum(job.profit for _, job in self.slots)


def schedule_jobs(jobs: Iterable[Job]) -> Schedule:
    """Place the most profitable jobs in the latest free slot before their deadline."""
    jobs = list(jobs)
    if not jobs:
        return Schedule(slots=(), max_deadline=0)

    max_deadline = max(job.deadline for job in jobs)
    ranked = sorted(jobs, key=lambda job: job.profit, reverse=True)
    taken: dict[int, Job] = {}
    for job in ranked:
        for slot in range(job.deadline - 1, -1, -1):
            if slot not in taken:
                taken[slot] = job
                break

    return Schedule(
        slots=tuple((slot + 1, taken[slot]) for slot in sorted(taken)),
        max_deadline=max_deadline,
    )