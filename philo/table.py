"""The dining table: philosophers, forks and the monitor that watches them."""

from __future__ import annotations

import sys
import threading
import time
from dataclasses import dataclass, field
from typing import TextIO

from .args import Settings

TAKEN_FORK = "has taken a fork"
EATING = "is eating"
SLEEPING = "is slepping"
THINKING = "is thinking"
DIED = "died"
FINISHED = "everyone finished eating"

_POLL_SECONDS = 0.0002


def now_ms() -> int:
    """Current wall-clock time in whole milliseconds."""
    return time.time_ns() // 1_000_000


@dataclass(eq=False)
class Philosopher:
    """One seat at the table and the state of whoever sits there."""

    num: int
    left_fork: int
    right_fork: int
    last_ate: int
    ate_count: int = 0
    done: bool = False
    dead: bool = False
    thread: threading.Thread | None = field(default=None, repr=False)


class Table:
    """Runs the dining philosophers simulation and writes its log."""

    def __init__(self, settings: Settings, out: TextIO | None = None) -> None:
        self.settings = settings
        self.out = out if out is not None else sys.stdout
        self.any_dead = False
        self._print_lock = threading.Lock()
        self._update_lock = threading.Lock()
        self._done_lock = threading.Lock()
        self.start_time = now_ms()
        count = settings.num_philo
        self.forks = [threading.Lock() for _ in range(count)]
        self.philosophers = [
            Philosopher(
                num=seat + 1,
                left_fork=seat,
                right_fork=(seat + 1) % count,
                last_ate=now_ms(),
            )
            for seat in range(count)
        ]

    def start(self) -> None:
        """Launch one thread per philosopher."""
        with self._update_lock:
            for philo in self.philosophers:
                philo.thread = threading.Thread(
                    target=self.live,
                    args=(philo,),
                    name=f"philosopher-{philo.num}",
                    daemon=True,
                )
                philo.thread.start()

    def run(self) -> bool:
        """Run the whole simulation; return True if a philosopher died."""
        self.start()
        return self.monitor()

    def monitor(self) -> bool:
        """Watch for deaths or completion, then wait for every thread."""
        while not self.any_dead:
            if any(self.check_dead(philo, True) for philo in self.philosophers):
                with self._done_lock:
                    self.any_dead = True
            if self.all_finished():
                with self._print_lock:
                    print(FINISHED, file=self.out)
                break
            time.sleep(_POLL_SECONDS)
        for philo in self.philosophers:
            if philo.thread is not None:
                philo.thread.join()
        return self.any_dead

    def check_dead(self, philo: Philosopher, announce: bool) -> bool:
        """Mark ``philo`` dead if it starved; optionally log the death."""
        with self._update_lock:
            if now_ms() - philo.last_ate > self.settings.t_die:
                with self._done_lock:
                    philo.dead = True
                if announce:
                    self.print_status(philo, DIED)
                return True
        return False

    def all_finished(self) -> bool:
        """True when every philosopher has eaten the required number of meals."""
        for philo in self.philosophers:
            with self._done_lock:
                if not philo.done:
                    return False
        return True

    def print_status(self, philo: Philosopher, message: str) -> None:
        """Log a timestamped line for ``philo`` unless someone already died."""
        with self._print_lock, self._done_lock:
            if not self.any_dead:
                elapsed = now_ms() - self.start_time
                print(f"{elapsed:04d}\t{philo.num}\t{message}", file=self.out)

    def live(self, philo: Philosopher) -> None:
        """The life cycle of one philosopher: eat, sleep, think, repeat."""
        if philo.num % 2 == 0:
            time.sleep(self.settings.t_eat / 1000)
        while not self.check_dead(philo, True):
            if self.eat(philo):
                break
            if philo.ate_count == self.settings.eat_times:
                with self._done_lock:
                    philo.done = True
                break
            if not self.check_dead(philo, False):
                self.sleep_and_think(philo)
            with self._done_lock:
                if self.any_dead:
                    break

    def eat(self, philo: Philosopher) -> bool:
        """Take both forks and eat; return True if there is only one fork."""
        right = self.forks[philo.right_fork]
        right.acquire()
        self.print_status(philo, TAKEN_FORK)
        if philo.left_fork == philo.right_fork:
            right.release()
            return True
        left = self.forks[philo.left_fork]
        left.acquire()
        self.print_status(philo, TAKEN_FORK)
        with self._update_lock:
            self.print_status(philo, EATING)
            end = now_ms() + self.settings.t_eat
            philo.last_ate = now_ms()
        self._wait_until(philo, end)
        philo.ate_count += 1
        right.release()
        left.release()
        return False

    def sleep_and_think(self, philo: Philosopher) -> None:
        """Sleep for the configured time, then start thinking if still alive."""
        self.print_status(philo, SLEEPING)
        self._wait_until(philo, now_ms() + self.settings.t_sleep)
        if not self.check_dead(philo, False):
            self.print_status(philo, THINKING)

    def _wait_until(self, philo: Philosopher, end: int) -> None:
        while now_ms() <= end and not self.check_dead(philo, False):
            time.sleep(_POLL_SECONDS)