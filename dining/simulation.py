"""Philosopher threads, the simulation driver and the command entry point."""

from __future__ import annotations

import os
import sys
import threading
from typing import Optional, Sequence, TextIO

from .output import Status
from .parsing import InputError, PROG_NAME, Settings, parse_settings
from .table import Philosopher, Table
from .timing import now_ms, wait_until

_MAX_THINK = 600
_CAPPED_THINK = 200


def _eat_sleep(table: Table, philo: Philosopher) -> None:
    first, second = philo.forks
    with table.fork_locks[first]:
        table.write_status(philo, Status.GOT_FORK_1)
        with table.fork_locks[second]:
            table.write_status(philo, Status.GOT_FORK_2)
            table.write_status(philo, Status.EATING)
            with philo.meal_lock:
                philo.last_meal = now_ms()
            table.sleep(table.settings.time_to_eat)
            if not table.stopped():
                with philo.meal_lock:
                    philo.times_ate += 1
            table.write_status(philo, Status.SLEEPING)
    table.sleep(table.settings.time_to_sleep)


def _think(table: Table, philo: Philosopher, silent: bool) -> None:
    settings = table.settings
    with philo.meal_lock:
        remaining = settings.time_to_die - (now_ms() - philo.last_meal)
        time_to_think = int((remaining - settings.time_to_eat) / 2)
    time_to_think = max(time_to_think, 0)
    if time_to_think == 0 and silent:
        time_to_think = 1
    if time_to_think > _MAX_THINK:
        time_to_think = _CAPPED_THINK
    if not silent:
        table.write_status(philo, Status.THINKING)
    table.sleep(time_to_think)


def _lone_philosopher(table: Table, philo: Philosopher) -> None:
    with table.fork_locks[philo.forks[0]]:
        table.write_status(philo, Status.GOT_FORK_1)
        table.sleep(table.settings.time_to_die)
        table.write_status(philo, Status.DIED)


def philosopher_routine(table: Table, philo: Philosopher) -> None:
    """Run one philosopher's life until the simulation stops."""
    settings = table.settings
    if settings.must_eat_count == 0:
        return
    with philo.meal_lock:
        philo.last_meal = table.start_time
    wait_until(table.start_time)
    if settings.time_to_die == 0:
        return
    if settings.nb_philos == 1:
        _lone_philosopher(table, philo)
        return
    if philo.id % 2:
        _think(table, philo, silent=True)
    while not table.stopped():
        _eat_sleep(table, philo)
        _think(table, philo, silent=False)


def run(
    settings: Settings, out: Optional[TextIO] = None, pretty: bool = False
) -> Table:
    """Run a full simulation and return the table once every thread ended."""
    table = Table(settings, out, pretty)
    table.start_time = now_ms() + settings.nb_philos * 2 * 10
    threads = [
        threading.Thread(
            target=philosopher_routine, args=(table, philo), daemon=True
        )
        for philo in table.philos
    ]
    if settings.nb_philos > 1:
        threads.append(threading.Thread(target=table.reap, daemon=True))
    started = []
    try:
        for thread in threads:
            thread.start()
            started.append(thread)
    except RuntimeError:
        table.stop()
        for thread in started:
            thread.join()
        raise
    for thread in threads:
        thread.join()
    if pretty and settings.must_eat_count != -1:
        table.outcome()
    return table


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command entry point; returns the process exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        settings = parse_settings(args)
    except InputError as error:
        print(error)
        return 1
    pretty = os.environ.get("DINING_PRETTY") == "1"
    try:
        run(settings, pretty=pretty)
    except RuntimeError:
        print(f"{PROG_NAME} error: Could not create thread.")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())