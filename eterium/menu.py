"""The main menu's simulated loading bar shown before the game opens."""

from __future__ import annotations

from collections.abc import Callable

LOADING_MESSAGE = "Cargando partida..."


class LoadingBar:
    """A progress bar that fills by a fixed step on every timer tick.

    While it runs the play button is disabled; when it reaches the maximum
    the bar stops, ``on_complete`` is called (it opens the game), and the
    play button is enabled again.
    """

    def __init__(
        self,
        on_complete: Callable[[], None] | None = None,
        *,
        step: int = 2,
        interval: int = 100,
        maximum: int = 100,
    ) -> None:
        if step <= 0 or interval <= 0 or maximum <= 0:
            raise ValueError("step, interval and maximum must be positive")
        self.on_complete = on_complete
        self.step = step
        self.interval = interval
        self.maximum = maximum
        self.message = LOADING_MESSAGE
        self.value = 0
        self.running = False
        self.play_enabled = True
        self._pending_ms = 0

    def start(self) -> None:
        """Begin loading from zero; the play button is disabled meanwhile."""
        if self.running:
            raise RuntimeError("loading is already in progress")
        self.value = 0
        self._pending_ms = 0
        self.running = True
        self.play_enabled = False

    def tick(self) -> bool:
        """Advance the bar by one step; return whether loading goes on."""
        if not self.running:
            return False
        self.value = min(self.value + self.step, self.maximum)
        if self.value >= self.maximum:
            self.running = False
            self._pending_ms = 0
            if self.on_complete is not None:
                self.on_complete()
            self.play_enabled = True
        return self.running

    def elapse(self, ms: int) -> int:
        """Let ``ms`` milliseconds pass and return how many ticks fired."""
        if ms < 0:
            raise ValueError("elapsed time cannot be negative")
        if not self.running:
            return 0
        self._pending_ms += ms
        fired = 0
        while self.running and self._pending_ms >= self.interval:
            self._pending_ms -= self.interval
            self.tick()
            fired += 1
        return fired