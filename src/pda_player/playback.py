import logging
from enum import Enum
from typing import Optional, Sequence, Tuple

from PyQt6.QtCore import QObject, QTimer, pyqtSignal

from .config import AUTOPLAY_INTERVAL_MS
from .engine import Configuration, RunResult, Verdict

logger = logging.getLogger(__name__)


class Mode(Enum):
    AUTO = "auto"
    MANUAL = "manual"


class PlaybackController(QObject):
    """
    Replays a finished trace one configuration at a time.

    The cursor runs from 0 to len(trace); at len(trace) the verdict is shown
    instead of a configuration. In AUTO mode a single-shot timer advances the
    cursor; it is stopped before every reschedule so at most one tick is ever
    pending.
    """
    changed = pyqtSignal()
    configurationShown = pyqtSignal(object)
    verdictShown = pyqtSignal(object)
    modeChanged = pyqtSignal(object)

    def __init__(self, interval_ms: int = AUTOPLAY_INTERVAL_MS, mode: Mode = Mode.AUTO, parent=None):
        super().__init__(parent)
        self.trace: Tuple[Configuration, ...] = ()
        self.verdict: Optional[Verdict] = None
        self.cursor = 0
        self.mode = mode

        self.timer = QTimer(self)
        self.timer.setSingleShot(True)
        self.timer.setInterval(interval_ms)
        self.timer.timeout.connect(self._on_tick)

    # ----------------------------- timer -----------------------------

    def _disarm(self):
        self.timer.stop()

    def _arm(self):
        self.timer.stop()
        if self.mode is Mode.AUTO and self.trace and not self.is_finished():
            self.timer.start()

    def _on_tick(self):
        if self.mode is not Mode.AUTO:
            return
        self.step_forward()

    def is_running(self) -> bool:
        return self.timer.isActive()

    # ----------------------------- commands -----------------------------

    def load(self, result: RunResult):
        self.load_trace(result.trace, result.verdict)

    def load_trace(self, trace: Sequence[Configuration], verdict: Optional[Verdict] = None):
        self._disarm()
        self.trace = tuple(trace)
        self.verdict = verdict
        self.cursor = 0
        logger.debug("loaded trace of %d configurations", len(self.trace))
        self._publish()
        self._arm()

    def clear(self):
        self.load_trace((), None)

    def step_forward(self):
        if self.cursor < len(self.trace):
            self.cursor += 1
            self._publish()
        self._arm()

    def step_backward(self):
        if self.cursor > 0:
            self.cursor -= 1
            self._publish()
        self._arm()

    def set_mode(self, mode: Mode):
        changed = mode is not self.mode
        self.mode = mode
        if mode is Mode.MANUAL:
            self._disarm()
        else:
            self._arm()
        if changed:
            logger.debug("playback mode -> %s", mode.value)
            self.modeChanged.emit(mode)
            self.changed.emit()

    def toggle_mode(self):
        self.set_mode(Mode.MANUAL if self.mode is Mode.AUTO else Mode.AUTO)

    def shutdown(self):
        self._disarm()

    # ----------------------------- display -----------------------------

    def is_finished(self) -> bool:
        return self.cursor >= len(self.trace)

    def current_configuration(self) -> Optional[Configuration]:
        if self.cursor < len(self.trace):
            return self.trace[self.cursor]
        return None

    def current_verdict(self) -> Optional[Verdict]:
        if self.trace and self.is_finished():
            return self.verdict
        return None

    def step_label(self) -> str:
        if not self.trace or self.is_finished():
            return ""
        return f"Step {self.cursor + 1} of {len(self.trace)}"

    def _publish(self):
        cfg = self.current_configuration()
        if cfg is not None:
            self.configurationShown.emit(cfg)
        else:
            verdict = self.current_verdict()
            if verdict is not None:
                self.verdictShown.emit(verdict)
        self.changed.emit()
