"""
Task Scheduler

Tick-driven repeating tasks. The host calls tick() once per server tick
from its game thread; tasks run inline on that thread.
"""

import logging
from typing import Callable, List

logger = logging.getLogger(__name__)


class ScheduledTask:
    """A repeating task registered with a TaskScheduler"""

    def __init__(self, callback: Callable[[], None], next_tick: int, period: int):
        self.callback = callback
        self.next_tick = next_tick
        self.period = period
        self.cancelled = False

    def cancel(self):
        self.cancelled = True


class TaskScheduler:
    """Runs repeating tasks as the host advances ticks"""

    def __init__(self):
        self.current_tick = 0
        self.tasks: List[ScheduledTask] = []

    def run_task_timer(self, callback: Callable[[], None], delay: int, period: int) -> ScheduledTask:
        """
        Schedule callback to run after delay ticks, then every period ticks

        Args:
            callback: Function to run
            delay: Ticks before the first run
            period: Ticks between runs (at least 1)

        Returns:
            The scheduled task, cancellable with task.cancel()
        """
        if period < 1:
            raise ValueError("period must be at least 1 tick")
        task = ScheduledTask(callback, self.current_tick + max(delay, 0), period)
        self.tasks.append(task)
        return task

    def tick(self):
        """Advance one tick and run every task that is due"""
        self.current_tick += 1
        self.tasks = [task for task in self.tasks if not task.cancelled]

        for task in list(self.tasks):
            if task.cancelled or task.next_tick > self.current_tick:
                continue
            task.next_tick = self.current_tick + task.period
            try:
                task.callback()
            except Exception as e:
                logger.exception(f"Scheduled task failed: {e}")

    def cancel_all(self):
        for task in self.tasks:
            task.cancel()
        self.tasks.clear()
