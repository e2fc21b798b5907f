# philo

A simulation of the dining philosophers problem. Each philosopher runs in its
own thread. The philosophers sit around a table with one fork between each
pair of neighbours. They take forks, eat, sleep and think. A monitor stops the
simulation when a philosopher starves or when everyone has eaten enough.

## Installation

```
pip install .
```

## Usage

```
philo number_of_philosophers time_to_die time_to_eat time_to_sleep [times_each_must_eat]
```

All times are in milliseconds. Every argument must be a positive integer,
written with digits only, that fits in a signed 32-bit int. If the arguments
are not valid, the program prints `ERROR` and `Please enter 4 or 5 positive
integers` on the next line, and exits with a non-zero status.

Example:

```
philo 5 800 200 200 7
```

Each event is printed as one line, tab-separated. The line gives the time in
milliseconds since the start (padded to four digits), the philosopher's number
and what happened:

```
0000	1	has taken a fork
0000	1	has taken a fork
0000	1	is eating
0200	1	is slepping
...
```

Even-numbered philosophers wait for one `time_to_eat` before they first reach
for their forks. With a single philosopher there is only one fork, so that
philosopher takes it and can never eat.

The simulation ends in one of two ways:

- A philosopher goes longer than `time_to_die` without starting a meal. The
  program prints `died` for that philosopher and logs nothing more.
- Every philosopher has eaten `times_each_must_eat` times. The program prints
  `everyone finished eating`.

## Library use

```python
from philo.args import parse_args
from philo.table import Table

settings = parse_args(["4", "410", "200", "200", "3"])
table = Table(settings)
someone_died = table.run()
```

The argument vector passed to `parse_args` holds only the numbers, without a
program name.

- `philo.args.valid_args(argv)` checks an argument vector and returns `True`
  or `False`.
- `philo.args.parse_args(argv)` returns a `Settings` object (`num_philo`,
  `t_die`, `t_eat`, `t_sleep`, `eat_times`, where `eat_times` is `-1` when not
  given), or raises `ArgumentError` (a `ValueError`) if the vector is not
  valid.
- `philo.args.is_digits(text)` and `philo.args.parse_long(text)` are the
  helpers behind the validation; `parse_long` reads a leading signed integer
  and ignores what follows it.
- `philo.table.Table(settings, out=None)` writes its log to `out`, or to
  standard output by default. `Table.run()` starts the threads, watches them
  until one dies or all are done, waits for every thread and returns `True`
  if a philosopher died.
- `philo.cli.main(argv=None)` is the command; it returns `0` after a run and
  `-1` for bad arguments.

## Running the tests

```
pip install ".[test]"
pytest
```