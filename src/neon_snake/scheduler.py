# scheduler.py
from __future__ import annotations
from typing import Callable, Optional

import pygame  # type: ignore

TICK_EVENT = pygame.USEREVENT + 1


class Scheduler:
    """
    Periodic tick source. At most one timer is live: `arm` replaces whatever
    was running, `cancel` stops it.
    """

    def __init__(self) -> None:
        self._callback: Optional[Callable[[], None]] = None
        self.interval_ms: Optional[int] = None

    def bind(self, callback: Callable[[], None]) -> None:
        self._callback = callback

    @property
    def armed(self) -> bool:
        return self.interval_ms is not None

    def arm(self, interval_ms: int) -> None:
        raise NotImplementedError

    def cancel(self) -> None:
        raise NotImplementedError

    def _fire(self) -> None:
        if self._callback is not None:
            self._callback()


class PygameScheduler(Scheduler):
    """Drives ticks from a pygame timer event; feed events through `dispatch`."""

    def __init__(self, event_type: int = TICK_EVENT) -> None:
        super().__init__()
        self.event_type = event_type

    def arm(self, interval_ms: int) -> None:
        # set_timer replaces an existing timer for the same event type
        pygame.time.set_timer(self.event_type, interval_ms)
        self.interval_ms = interval_ms

    def cancel(self) -> None:
        pygame.time.set_timer(self.event_type, 0)
        self.interval_ms = None

    def dispatch(self, event) -> bool:
        """Run a tick for our timer event. Returns True if the event was ours."""
        if event.type != self.event_type:
            return False
        # a stale event may still be queued after cancel()
        if self.armed:
            self._fire()
        return True


class ManualScheduler(Scheduler):
    """Virtual clock for tests and headless runs; time moves only via `advance`."""

    def __init__(self) -> None:
        super().__init__()
        self.elapsed_ms = 0
        self.arm_count = 0

    def arm(self, interval_ms: int) -> None:
        self.interval_ms = interval_ms
        self.elapsed_ms = 0
        self.arm_count += 1

    def cancel(self) -> None:
        self.interval_ms = None
        self.elapsed_ms = 0

    def advance(self, ms: int) -> int:
        """Move the clock forward, firing every due tick. Returns ticks fired."""
        fired = 0
        while self.interval_ms is not None and self.elapsed_ms + ms >= self.interval_ms:
            ms -= self.interval_ms - self.elapsed_ms
            self.elapsed_ms = 0
            fired += 1
            self._fire()  # may re-arm or cancel
        if self.interval_ms is not None:
            self.elapsed_ms += ms
        return fired
