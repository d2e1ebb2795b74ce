"""Shared table state: forks, philosophers, stop flag and the reaper."""

from __future__ import annotations

import sys
import threading
import time
from dataclasses import dataclass, field
from typing import Optional, TextIO

from .output import Status, format_outcome, format_status
from .parsing import Settings
from .timing import now_ms, sleep_ms, wait_until


def assign_forks(philo_id: int, nb_philos: int) -> tuple[int, int]:
    """Return the (first, second) fork indices a philosopher picks up.

    Even philosophers take their own fork first, odd ones their neighbour's.
    """
    own = philo_id
    neighbour = (philo_id + 1) % nb_philos
    if philo_id % 2:
        return neighbour, own
    return own, neighbour


@dataclass(eq=False)
class Philosopher:
    """One diner; ``meal_lock`` guards ``last_meal`` and ``times_ate``."""

    id: int
    forks: tuple[int, int]
    times_ate: int = 0
    last_meal: int = 0
    meal_lock: threading.Lock = field(
        default_factory=threading.Lock, repr=False
    )


class Table:
    """Everything the philosophers and the reaper share."""

    def __init__(
        self,
        settings: Settings,
        out: Optional[TextIO] = None,
        pretty: bool = False,
    ) -> None:
        self.settings = settings
        self.out = out if out is not None else sys.stdout
        self.pretty = pretty
        self.start_time = 0
        self.fork_locks = [threading.Lock() for _ in range(settings.nb_philos)]
        self.philos = [
            Philosopher(i, assign_forks(i, settings.nb_philos))
            for i in range(settings.nb_philos)
        ]
        self._sim_stop = False
        self._stop_lock = threading.Lock()
        self._write_lock = threading.Lock()

    def stopped(self) -> bool:
        """Return True once the simulation has been stopped."""
        with self._stop_lock:
            return self._sim_stop

    def stop(self) -> None:
        """Raise the stop flag."""
        with self._stop_lock:
            self._sim_stop = True

    def sleep(self, duration: int) -> None:
        """Sleep ``duration`` ms, waking early if the simulation stops."""
        sleep_ms(duration, self.stopped)

    def write_status(
        self, philo: Philosopher, status: Status, reaper_report: bool = False
    ) -> bool:
        """Print a status line; return False if it was suppressed.

        After the stop, only the reaper's report gets through.
        """
        with self._write_lock:
            if self.stopped() and not reaper_report:
                return False
            fork = None
            if status is Status.GOT_FORK_1:
                fork = philo.forks[0]
            elif status is Status.GOT_FORK_2:
                fork = philo.forks[1]
            line = format_status(
                now_ms() - self.start_time, philo.id, status, fork, self.pretty
            )
            self.out.write(line + "\n")
            self.out.flush()
            return True

    def end_condition_reached(self) -> bool:
        """Check for a starved philosopher or everyone having eaten enough."""
        must_eat = self.settings.must_eat_count
        all_ate_enough = True
        for philo in self.philos:
            with philo.meal_lock:
                if now_ms() - philo.last_meal >= self.settings.time_to_die:
                    self.stop()
                    self.write_status(philo, Status.DIED, reaper_report=True)
                    return True
                if must_eat != -1 and philo.times_ate < must_eat:
                    all_ate_enough = False
        if must_eat != -1 and all_ate_enough:
            self.stop()
            return True
        return False

    def reap(self) -> None:
        """Watch the table from the start time until an end condition holds."""
        if self.settings.must_eat_count == 0:
            return
        wait_until(self.start_time)
        while not self.end_condition_reached():
            time.sleep(0.001)

    def outcome(self) -> str:
        """Print and return how many philosophers ate the required meals."""
        must_eat = self.settings.must_eat_count
        full_count = sum(1 for philo in self.philos if philo.times_ate >= must_eat)
        line = format_outcome(full_count, self.settings.nb_philos, must_eat)
        with self._write_lock:
            self.out.write(line + "\n")
            self.out.flush()
        return line