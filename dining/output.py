"""Formatting of status lines and the final outcome."""

from __future__ import annotations

from enum import IntEnum
from typing import Optional

NC = "\x1b[0m"
RED = "\x1b[31m"
GREEN = "\x1b[32m"
PURPLE = "\x1b[35m"
CYAN = "\x1b[36m"


class Status(IntEnum):
    """What a philosopher is doing."""

    DIED = 0
    EATING = 1
    SLEEPING = 2
    THINKING = 3
    GOT_FORK_1 = 4
    GOT_FORK_2 = 5

    @property
    def label(self) -> str:
        return _LABELS[self]

    @property
    def color(self) -> str:
        return _COLORS[self]


_LABELS = {
    Status.DIED: "died",
    Status.EATING: "is eating",
    Status.SLEEPING: "is sleeping",
    Status.THINKING: "is thinking",
    Status.GOT_FORK_1: "has taken a fork",
    Status.GOT_FORK_2: "has taken a fork",
}

_COLORS = {
    Status.DIED: RED,
    Status.EATING: GREEN,
    Status.SLEEPING: CYAN,
    Status.THINKING: CYAN,
    Status.GOT_FORK_1: PURPLE,
    Status.GOT_FORK_2: PURPLE,
}


def format_status(
    elapsed: int,
    philo_id: int,
    status: Status,
    fork: Optional[int] = None,
    pretty: bool = False,
) -> str:
    """Format one status line; ``philo_id`` is zero-based, shown one-based.

    In pretty mode, fork statuses also show ``fork``, the fork index taken.
    """
    number = philo_id + 1
    if not pretty:
        return f"{elapsed} {number} {status.label}"
    line = f"[{elapsed:10d}]\t{status.color}{number:03d}\t{status.label}{NC}"
    if status in (Status.GOT_FORK_1, Status.GOT_FORK_2):
        line += f": fork [{fork}]"
    return line


def format_outcome(full_count: int, nb_philos: int, must_eat_count: int) -> str:
    """Format the summary of how many philosophers ate enough."""
    return (
        f"{full_count}/{nb_philos} philosophers had at least "
        f"{must_eat_count} meals."
    )