# dining

A simulation of the dining philosophers problem. Each philosopher runs in its
own thread at a round table and shares one fork with each neighbour. When there
is more than one philosopher, a monitor thread watches the table. It stops the
simulation when a philosopher starves. If a meal count was given, it also stops
the simulation once every philosopher has eaten that many meals.

## Installation

```
pip install .
```

For the tests:

```
pip install .[test]
pytest
```

## Usage

```
dining <number_of_philosophers> <time_to_die> <time_to_eat> <time_to_sleep> [number_of_times_each_philosopher_must_eat]
```

Every argument must consist of digits only and be no greater than 2147483647.
The number of philosophers must be between 1 and 250. All times are in
milliseconds.

Example:

```
dining 5 800 200 200 7
```

Each event is written as one line with three fields. The first is the
milliseconds elapsed since the start. The second is the philosopher's number,
counted from 1. The third is what happened.

```
0 1 has taken a fork
0 1 has taken a fork
0 1 is eating
200 1 is sleeping
...
```

The possible events are `has taken a fork`, `is eating`, `is sleeping`,
`is thinking` and `died`. Once the simulation has stopped, only the monitor's
death report is written. No further lines follow it.

The simulation starts a short delay after launch: 20 ms per philosopher. A meal
count of `0` ends the run at once with no output.

Set the environment variable `DINING_PRETTY=1` to get coloured output that
also shows fork numbers. In that mode, when a meal count is given, a final line
such as `5/5 philosophers had at least 7 meals.` is added.

Invalid arguments make the command print an error message and exit with
status 1. The command also exits with status 1 if a thread cannot be started.
Otherwise it exits with status 0.

## Library use

The simulation can also be driven from Python:

```python
import io
from dining.parsing import parse_settings
from dining.simulation import run

settings = parse_settings(["4", "410", "200", "200", "3"])
buffer = io.StringIO()
table = run(settings, buffer, pretty=False)
print(buffer.getvalue())
print([philo.times_ate for philo in table.philos])
```

`run` returns the `dining.table.Table` once every thread has finished.
`parse_settings` takes the arguments without the program name. It raises
`dining.parsing.InputError` when the arguments are invalid. A
`dining.parsing.Settings` can also be built directly.

The modules:

- `dining.parsing`: argument checking (`validate_arguments`, `integer_atoi`,
  `contains_only_digits`, `usage`) and `Settings`.
- `dining.timing`: the millisecond clock (`now_ms`), `sleep_ms` and
  `wait_until`.
- `dining.output`: the `Status` enum, `format_status` and `format_outcome`.
- `dining.table`: `Table`, `Philosopher` and `assign_forks`.
- `dining.simulation`: `philosopher_routine`, `run` and `main`.