# interaction/engine.py
"""
Drag state machine for direct manipulation of the Smith chart point.

The engine is driven by explicit events (``pointer_down``, ``pointer_move``,
``pointer_up``, ``pointer_leave``, ``step``) from whatever UI binding hosts
it. It owns the ``DragSession`` of the current gesture and reports changes
through three callbacks:

* ``on_drag_change(is_dragging)``
* ``on_direct_drag(impedance)``
* ``on_hover_change(is_hovering)``

For one gesture ``on_drag_change(True)`` precedes every ``on_direct_drag``,
which all precede ``on_drag_change(False)``.
"""
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from core.impedance import Impedance
from inout.config import EngineConfig, apply_log_level
from interaction.mapping import CanvasGeometry, screen_to_impedance, screen_to_raw_impedance
from interaction.smoothing import PointSmoother
from interaction.snapping import SnapTracker
from interaction.states import DragState
from utils.logging_config import get_logger

logger = get_logger(__name__)

Position = Tuple[float, float]


@dataclass
class DragSession:
    """Short-lived state of one gesture, discarded on pointer-up / leave."""
    pointer_position: Position
    is_dragging: bool = False
    is_snapped: bool = False
    last_snap_label: Optional[str] = None


class InteractionEngine:
    def __init__(self, config: EngineConfig = None,
                 on_direct_drag: Callable[[Impedance], None] = None,
                 on_hover_change: Callable[[bool], None] = None,
                 on_drag_change: Callable[[bool], None] = None) -> None:
        self.config = config or EngineConfig()
        apply_log_level(self.config)
        self.on_direct_drag = on_direct_drag
        self.on_hover_change = on_hover_change
        self.on_drag_change = on_drag_change

        self.canvas: Optional[CanvasGeometry] = None
        self.session: Optional[DragSession] = None
        self.impedance: Optional[Impedance] = None
        self.is_hovering = False
        self.allow_direct_drag = self.config.allow_direct_drag

        self._phase = DragState.IDLE
        self._target: Optional[Position] = None
        self._snapper = SnapTracker(self.config.snap_threshold, self.config.snap_hysteresis)
        self._smoother = PointSmoother(self.config.smoothing_time_constant,
                                       self.config.reduced_motion)

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------
    @property
    def state(self) -> DragState:
        if self._phase is not DragState.IDLE and self.session and self.session.is_snapped:
            return DragState.SNAPPED
        return self._phase

    @property
    def is_dragging(self) -> bool:
        return self._phase is not DragState.IDLE

    @property
    def displayed_position(self) -> Optional[Position]:
        return self._smoother.position

    @property
    def target_position(self) -> Optional[Position]:
        return self._target

    # ------------------------------------------------------------------
    # Collaborator inputs
    # ------------------------------------------------------------------
    def set_canvas(self, center: Position, radius: float) -> None:
        """Called on resize; keeps the current impedance at the same place on the chart."""
        self.canvas = CanvasGeometry(center, radius)
        if self.impedance is not None and radius > 0:
            position = self.canvas.impedance_to_screen(self.impedance)
            self._target = position
            self._smoother.jump(position)

    def screen_to_impedance(self, x: float, y: float) -> Optional[Impedance]:
        """Stateless mapping of a canvas point, snapped without hysteresis."""
        if self.canvas is None:
            return None
        return screen_to_impedance(x, y, self.canvas.center, self.canvas.radius,
                                   self.config.snap_threshold)

    def set_reduced_motion(self, reduced_motion: bool) -> None:
        self._smoother.reduced_motion = reduced_motion

    def set_impedance(self, z: Impedance) -> None:
        """Seed the point from outside (preset, slider). Ignored mid-gesture."""
        if self.is_dragging:
            return
        self.impedance = z
        if self.canvas is not None and self.canvas.radius > 0:
            position = self.canvas.impedance_to_screen(z)
            self._target = position
            self._smoother.jump(position)

    # ------------------------------------------------------------------
    # Pointer events
    # ------------------------------------------------------------------
    def pointer_down(self, x: float, y: float) -> bool:
        """Start a gesture when the pointer lands inside the chart. Returns True if armed."""
        if not self.allow_direct_drag or self.canvas is None or self.is_dragging:
            return False
        if not self.canvas.contains(x, y):
            return False

        self.session = DragSession(pointer_position=(x, y))
        self._snapper.reset()
        self._phase = DragState.ARMED
        logger.debug(f"Armed at ({x:.1f}, {y:.1f})")
        self._emit(self.on_drag_change, True)
        self._track(x, y, jump=True)
        return True

    def pointer_move(self, x: float, y: float) -> None:
        if self.is_dragging:
            if self._phase is DragState.ARMED:
                self._phase = DragState.DRAGGING
                self.session.is_dragging = True
                logger.debug("Dragging")
            self.session.pointer_position = (x, y)
            self._track(x, y)
            return
        self._update_hover(x, y)

    def pointer_up(self) -> None:
        self._end_gesture()

    def pointer_leave(self) -> None:
        self._set_hover(False)
        self._end_gesture()

    def step(self, dt: float) -> Optional[Position]:
        """Advance smoothing by ``dt`` seconds; returns the displayed position."""
        if self._target is None:
            return self._smoother.position
        return self._smoother.step(self._target, dt)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    def _track(self, x: float, y: float, jump: bool = False) -> None:
        raw = screen_to_raw_impedance(x, y, self.canvas.center, self.canvas.radius)
        if raw is None:
            return
        z = self._snapper.update(raw)
        self.session.is_snapped = self._snapper.is_snapped
        if self._snapper.active is not None:
            self.session.last_snap_label = self._snapper.active.label
        # Follows the clamped, possibly snapped, impedance rather than the raw pointer.
        self._target = self.canvas.impedance_to_screen(z)
        if jump:
            self._smoother.jump(self._target)
        self.impedance = z
        self._emit(self.on_direct_drag, z)

    def _end_gesture(self) -> None:
        if not self.is_dragging:
            return
        logger.debug("Gesture ended")
        self._phase = DragState.IDLE
        self.session = None
        self._snapper.reset()
        self._emit(self.on_drag_change, False)

    def _update_hover(self, x: float, y: float) -> None:
        position = self._smoother.position
        if position is None:
            self._set_hover(False)
            return
        dx = x - position[0]
        dy = y - position[1]
        self._set_hover(dx * dx + dy * dy < self.config.hover_radius_px ** 2)

    def _set_hover(self, hovering: bool) -> None:
        if hovering != self.is_hovering:
            self.is_hovering = hovering
            self._emit(self.on_hover_change, hovering)

    def _emit(self, callback, value) -> None:
        if callback is None:
            return
        try:
            callback(value)
        except Exception as e:
            # A failing UI callback must not leave the gesture half-finished.
            logger.error(f"Interaction callback {getattr(callback, '__name__', callback)} failed: {e}")
