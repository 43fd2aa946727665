"""Trace capture — turns a polled pointer position into finished traces.

The recorder is fed by any position source: a callable returning the current
pointer position, or None when the device could not be read (treated as the
origin). Samples are appended only when the position changes; a running
recording finishes after ``end_figure_timeout`` consecutive unchanged polls.
"""

from __future__ import annotations

import enum
import logging
import time
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Callable

from movement.engine.classifier import Classifier
from movement.engine.result import ClassificationResult, ShapeName
from movement.utils.point import Point

logger = logging.getLogger(__name__)

PositionSource = Callable[[], "Point | None"]

_ORIGIN = Point(0, 0)


@dataclass(frozen=True)
class CaptureConfig:
    """Polling cadence and end-of-figure detection."""

    # Unchanged polls that end a running recording
    end_figure_timeout: int = 5
    framerate_fps: int = 20

    def __post_init__(self) -> None:
        if self.end_figure_timeout < 1:
            raise ValueError("end_figure_timeout must be at least 1")
        if self.framerate_fps < 1:
            raise ValueError("framerate_fps must be at least 1")

    @property
    def poll_interval(self) -> float:
        """Seconds between polls."""
        return 1.0 / self.framerate_fps


class RecordingStatus(enum.Enum):
    WAITING = "waiting"
    RUNNING = "running"
    FINISHED = "finished"


class TraceRecorder:
    """Polling state machine: WAITING -> RUNNING -> FINISHED."""

    def __init__(self, source: PositionSource, config: CaptureConfig | None = None) -> None:
        self.source = source
        self.config = config or CaptureConfig()
        self.reset()

    def reset(self) -> None:
        self._points: list[Point] = []
        self._initialized = False
        self._running = False
        self._stop_position = _ORIGIN
        self._unchanged_cycles = 0

    @property
    def points(self) -> tuple[Point, ...]:
        return tuple(self._points)

    def _read(self) -> Point:
        position = self.source()
        if position is None:
            logger.debug("Position source returned no reading; using origin")
            return _ORIGIN
        return position

    def _init(self) -> None:
        self._initialized = True
        self._running = False
        self._stop_position = self._read()
        self._unchanged_cycles = 0
        logger.debug("Initialized recording at %s", self._stop_position)

    def update(self) -> RecordingStatus:
        """Poll the source once and advance the state machine."""
        if not self._initialized:
            self._init()

        current = self._read()
        if current != self._stop_position:
            if not self._points:
                logger.info("Recording started")
            self._running = True
            self._unchanged_cycles = 0
            self._points.append(current)
            self._stop_position = current
            return RecordingStatus.RUNNING

        if not self._running:
            return RecordingStatus.WAITING

        self._unchanged_cycles += 1
        if self._unchanged_cycles >= self.config.end_figure_timeout:
            self._initialized = False
            logger.info("Recording finished with %d samples", len(self._points))
            return RecordingStatus.FINISHED
        return RecordingStatus.RUNNING


def record_trace(
    recorder: TraceRecorder,
    sleep: Callable[[float], None] = time.sleep,
    max_polls: int | None = None,
) -> tuple[Point, ...]:
    """Poll until the recorder finishes and return the captured trace.

    Raises TimeoutError if ``max_polls`` polls pass without a finished trace.
    """
    recorder.reset()
    polls = 0
    while recorder.update() is not RecordingStatus.FINISHED:
        polls += 1
        if max_polls is not None and polls >= max_polls:
            raise TimeoutError(f"No finished trace after {polls} polls")
        sleep(recorder.config.poll_interval)
    return recorder.points


@dataclass
class RecordedShape:
    """A captured trace and its label; UNDEFINED until classified."""

    points: tuple[Point, ...]
    shape_type: ShapeName = ShapeName.UNDEFINED
    result: ClassificationResult | None = field(default=None, compare=False)


def classify_pending(shapes: Iterable[RecordedShape], classifier: Classifier) -> int:
    """Classify every shape still marked UNDEFINED. Returns how many were classified."""
    classified = 0
    for shape in shapes:
        if shape.shape_type is not ShapeName.UNDEFINED:
            continue
        shape.result = classifier.classify(shape.points)
        shape.shape_type = shape.result.shape
        classified += 1
    return classified
