"""Drag-to-rotate with inertial coasting.

The controller is a small state machine::

    IDLE --down--> DRAGGING --move--> DRAGGING --up/leave--> COASTING --tick--> ...
                      ^                                          |
                      +------------------down--------------------+
    COASTING --|velocity| < threshold--> IDLE

It only talks to its host through RotationHost, so the same logic drives a real
view or the headless host used by the CLI and tests.
"""

import logging
import math
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Protocol

from .config import WheelConfig

logger = logging.getLogger(__name__)


class Mode(Enum):
    """Rotation state machine modes."""

    IDLE = "idle"
    DRAGGING = "dragging"
    COASTING = "coasting"


@dataclass
class RotationState:
    mode: Mode = Mode.IDLE
    rotation: float = 0.0  # Absolute rotation applied to the drawable, degrees
    previous_angle: float | None = None  # Pointer angle, only while dragging
    velocity: float = 0.0  # Degrees per tick; zero when idle


class RotationHost(Protocol):
    """What the controller needs from the view it rotates."""

    def center(self) -> tuple[float, float]:
        """Centre of the drawable's bounding box, in pointer coordinates."""
        ...

    def apply_rotation(self, degrees: float) -> None: ...

    def request_frame(self, callback: Callable[[], None]) -> Any:
        """Run ``callback`` on the next animation frame and return a handle."""
        ...

    def cancel_frame(self, handle: Any) -> None: ...

    def add_listener(self, event_type: str, handler: Callable[[Any], None]) -> None: ...

    def remove_listener(self, event_type: str, handler: Callable[[Any], None]) -> None: ...


class FrameTask:
    """Handle for one scheduled coasting tick.

    Cancelling is idempotent, and a cancelled task never runs its callback even if
    the host delivers the frame anyway.
    """

    def __init__(self, host: RotationHost, callback: Callable[[], None]):
        self._host = host
        self._callback = callback
        self.pending = True
        self._handle = host.request_frame(self._run)

    def _run(self) -> None:
        if not self.pending:
            return
        self.pending = False
        self._callback()

    def cancel(self) -> None:
        if not self.pending:
            return
        self.pending = False
        self._host.cancel_frame(self._handle)


def _field(obj: Any, name: str) -> Any:
    if isinstance(obj, Mapping):
        return obj.get(name)
    return getattr(obj, name, None)


def read_pointer(event: Any) -> tuple[float, float] | None:
    """Client position of a mouse or touch event.

    Touch events use their first touch point. Returns None when the event carries
    no usable position (e.g. a touch end with no remaining touches).
    """
    touches = _field(event, "touches")
    if touches is not None:
        try:
            event = touches[0]
        except (IndexError, KeyError, TypeError):
            return None
    x = _field(event, "clientX")
    y = _field(event, "clientY")
    if isinstance(x, bool) or isinstance(y, bool):
        return None
    if not isinstance(x, (int, float)) or not isinstance(y, (int, float)):
        return None
    if not (math.isfinite(x) and math.isfinite(y)):
        return None
    return (float(x), float(y))


def pointer_angle(center: tuple[float, float], point: tuple[float, float]) -> float:
    """Angle of ``point`` around ``center`` in degrees, as given by atan2."""
    return math.degrees(math.atan2(point[1] - center[1], point[0] - center[0]))


def wrap_degrees(delta: float) -> float:
    """Map an angle difference into [-180, 180)."""
    return (delta + 180) % 360 - 180


# DOM event type -> controller method
EVENT_HANDLERS = {
    "mousedown": "pointer_down",
    "mousemove": "pointer_move",
    "mouseup": "pointer_up",
    "mouseleave": "pointer_up",
    "touchstart": "pointer_down",
    "touchmove": "pointer_move",
    "touchend": "pointer_up",
    "touchcancel": "pointer_up",
}


class RotationController:
    """Rotates a drawable by dragging and lets it coast after release.

    Args:
        host: The view being rotated.
        config: Supplies the decay factor and stop threshold.
    """

    def __init__(self, host: RotationHost, config: WheelConfig | None = None):
        config = config or WheelConfig()
        self.host = host
        self.decay = config.decay
        self.stop_threshold = config.stop_threshold
        self.state = RotationState()
        self._task: FrameTask | None = None
        self._listeners: list[tuple[str, Callable[[Any], None]]] = []

    @property
    def tick_pending(self) -> bool:
        return self._task is not None and self._task.pending

    def attach(self) -> None:
        """Register pointer and touch listeners on the host's input region."""
        if self._listeners:
            return
        for event_type, method in EVENT_HANDLERS.items():
            handler = getattr(self, method)
            self.host.add_listener(event_type, handler)
            self._listeners.append((event_type, handler))

    def detach(self) -> None:
        """Remove listeners and stop any coasting. The rotation is kept."""
        for event_type, handler in self._listeners:
            self.host.remove_listener(event_type, handler)
        self._listeners.clear()
        self._stop()

    def pointer_down(self, event: Any) -> None:
        point = read_pointer(event)
        if point is None:
            logger.debug("Ignoring pointer down without a position: %r", event)
            return
        self._cancel_tick()
        self.state.mode = Mode.DRAGGING
        self.state.previous_angle = pointer_angle(self.host.center(), point)
        self.state.velocity = 0.0

    def pointer_move(self, event: Any) -> None:
        """Turn the wheel by the pointer's angular step around the centre.

        Steps are wrapped into [-180, 180) so crossing the atan2 seam is a small turn.
        """
        state = self.state
        if state.mode is not Mode.DRAGGING:
            return
        point = read_pointer(event)
        if point is None:
            return
        angle = pointer_angle(self.host.center(), point)
        delta = wrap_degrees(angle - state.previous_angle)
        state.previous_angle = angle
        state.rotation += delta
        self.host.apply_rotation(state.rotation)
        state.velocity = delta

    def pointer_up(self, event: Any = None) -> None:
        if self.state.mode is not Mode.DRAGGING:
            return
        self.state.previous_angle = None
        self._start_coasting()

    def fling(self, velocity: float) -> None:
        """Start coasting at ``velocity`` degrees per tick, as if just released.

        A non-finite velocity stops the wheel.
        """
        self._cancel_tick()
        self.state.previous_angle = None
        if not math.isfinite(velocity):
            self._stop()
            return
        self.state.velocity = velocity
        self._start_coasting()

    def _start_coasting(self) -> None:
        if abs(self.state.velocity) < self.stop_threshold:
            self._stop()
            return
        self.state.mode = Mode.COASTING
        self._schedule()

    def _tick(self) -> None:
        self._task = None
        state = self.state
        if state.mode is not Mode.COASTING:
            return
        state.rotation += state.velocity
        self.host.apply_rotation(state.rotation)
        state.velocity *= self.decay
        if abs(state.velocity) < self.stop_threshold:
            self._stop()
        else:
            self._schedule()

    def _schedule(self) -> None:
        self._cancel_tick()
        self._task = FrameTask(self.host, self._tick)

    def _cancel_tick(self) -> None:
        if self._task is not None:
            self._task.cancel()
            self._task = None

    def _stop(self) -> None:
        self._cancel_tick()
        self.state.mode = Mode.IDLE
        self.state.velocity = 0.0
        self.state.previous_angle = None


class ManualFrameScheduler:
    """Frame scheduler that only advances when told to."""

    def __init__(self):
        self._callbacks: dict[int, Callable[[], None]] = {}
        self._next_handle = 1
        self.frames = 0

    def request_frame(self, callback: Callable[[], None]) -> int:
        handle = self._next_handle
        self._next_handle += 1
        self._callbacks[handle] = callback
        return handle

    def cancel_frame(self, handle: int) -> None:
        self._callbacks.pop(handle, None)

    @property
    def pending(self) -> int:
        return len(self._callbacks)

    def run_frame(self) -> int:
        """Run callbacks requested before this frame. Returns how many ran."""
        callbacks, self._callbacks = self._callbacks, {}
        self.frames += 1
        for callback in callbacks.values():
            callback()
        return len(callbacks)

    def run_until_idle(self, max_frames: int = 10_000) -> int:
        """Run frames until nothing is scheduled. Returns the number of frames run.

        Raises:
            RuntimeError: If callbacks are still scheduled after ``max_frames``.
        """
        count = 0
        while self._callbacks:
            if count >= max_frames:
                raise RuntimeError(f"Still animating after {max_frames} frames")
            self.run_frame()
            count += 1
        return count


class HeadlessHost(ManualFrameScheduler):
    """RotationHost without a display: records rotations and dispatches events by hand.

    Args:
        center: Centre of the rotated drawable in pointer coordinates.
    """

    def __init__(self, center: tuple[float, float] = (0.0, 0.0)):
        super().__init__()
        self._center = center
        self.rotations: list[float] = []
        self.listeners: dict[str, list[Callable[[Any], None]]] = {}

    def center(self) -> tuple[float, float]:
        return self._center

    def apply_rotation(self, degrees: float) -> None:
        self.rotations.append(degrees)

    def add_listener(self, event_type: str, handler: Callable[[Any], None]) -> None:
        self.listeners.setdefault(event_type, []).append(handler)

    def remove_listener(self, event_type: str, handler: Callable[[Any], None]) -> None:
        handlers = self.listeners.get(event_type, [])
        if handler in handlers:
            handlers.remove(handler)

    def dispatch(self, event_type: str, event: Any = None) -> None:
        """Deliver ``event`` to every listener registered for ``event_type``."""
        for handler in list(self.listeners.get(event_type, [])):
            handler(event)
