# compscore/apps/leaderboard/services/refresh.py
from __future__ import annotations

import logging
import threading
from typing import Callable, Optional

logger = logging.getLogger(__name__)


def _always() -> bool:
    return True


class PeriodicRefresh:
    """
    Disparador periódico cancelable.

    Cada `interval` segundos invoca `callback` si `is_active()` es verdadero
    (p. ej. sólo mientras la vista de pantalla está abierta). Corre en un hilo
    daemon; `cancel()` lo detiene sin esperar al próximo ciclo.
    """

    def __init__(
        self,
        callback: Callable[[], None],
        interval: float,
        is_active: Callable[[], bool] = _always,
        name: str = "periodic-refresh",
    ) -> None:
        if interval <= 0:
            raise ValueError("interval debe ser > 0")
        self.callback = callback
        self.interval = float(interval)
        self.is_active = is_active
        self.name = name
        self.ticks = 0
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def tick(self) -> bool:
        """Un ciclo sincrónico. Devuelve True si se llamó al callback."""
        if not self.is_active():
            return False
        self.callback()
        self.ticks += 1
        return True

    def _run(self) -> None:
        while not self._stop.wait(self.interval):
            try:
                self.tick()
            except Exception:
                # el próximo ciclo reintenta
                logger.exception("Fallo en refresco periódico %s", self.name)

    def start(self) -> "PeriodicRefresh":
        if self.running:
            return self
        self._stop.clear()
        self._thread = threading.Thread(target=self._run, name=self.name, daemon=True)
        self._thread.start()
        logger.debug("Refresco %s iniciado (cada %ss)", self.name, self.interval)
        return self

    def cancel(self, timeout: Optional[float] = None) -> None:
        self._stop.set()
        if self._thread is not None:
            self._thread.join(timeout)
            self._thread = None
        logger.debug("Refresco %s cancelado", self.name)

    @property
    def cancelled(self) -> bool:
        return self._stop.is_set()

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Bloquea hasta cancel() o timeout; True si fue cancelado."""
        return self._stop.wait(timeout)
