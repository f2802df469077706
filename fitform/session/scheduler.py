"""
Midnight scheduler.

Arms a one-shot timer for the next local midnight.  When it fires the
callback runs, the next deadline is computed from the clock and the timer
is armed again.  Only one timer is ever armed: ``start()`` replaces the
current one and ``cancel()`` disarms it.
"""

import datetime
import logging
import threading
from typing import Callable, Optional

logger = logging.getLogger(__name__)

TimerFactory = Callable[[float, Callable[[], None]], threading.Timer]


def seconds_until_next_midnight(now: datetime.datetime) -> float:
    """Seconds from *now* to the start of the following calendar day."""
    tomorrow = datetime.datetime.combine(now.date() + datetime.timedelta(days=1), datetime.time.min, tzinfo=now.tzinfo)
    return max(0.0, (tomorrow - now).total_seconds())


def _daemon_timer(interval: float, function: Callable[[], None]) -> threading.Timer:
    timer = threading.Timer(interval, function)
    timer.daemon = True
    return timer


class MidnightScheduler:
    """Cancellable, self-rearming midnight trigger."""

    def __init__(
        self,
        callback: Callable[[], None],
        clock: Optional[Callable[[], datetime.datetime]] = None,
        timer_factory: Optional[TimerFactory] = None,
    ):
        self.callback = callback
        self._clock = clock or datetime.datetime.now
        self._timer_factory = timer_factory or _daemon_timer
        self._lock = threading.Lock()
        self._timer: Optional[threading.Timer] = None
        self._running = False

    @property
    def running(self) -> bool:
        return self._running

    def start(self) -> None:
        """Arm the timer for the next midnight, replacing any armed timer."""
        with self._lock:
            self._running = True
            self._arm_locked()

    def cancel(self) -> None:
        with self._lock:
            self._running = False
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None
        logger.debug("Midnight scheduler cancelled")

    def fire(self) -> None:
        """Run the callback, then arm the next deadline."""
        logger.debug("Midnight scheduler fired")
        try:
            self.callback()
        except Exception:
            logger.exception("Midnight callback failed")
        with self._lock:
            if self._running:
                self._arm_locked()

    def _arm_locked(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
        delay = seconds_until_next_midnight(self._clock())
        self._timer = self._timer_factory(delay, self.fire)
        self._timer.start()
        logger.debug("Midnight scheduler armed for %.0f seconds", delay)
