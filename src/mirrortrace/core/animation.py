"""Frame loop driving scene animation and presentation.

Each frame the loop reads the time source, rotates the spheres by the elapsed
time (one radian per second) about the pivot, renders the frame and hands it
to a frame sink. Update and render never interleave.

Components:
    TimeSource: Anything with a now() -> seconds method
    FrameSink: Anything with a present(frame) method
    MonotonicClock: Default time source backed by time.perf_counter()
    AnimationLoop: The update -> render -> present cycle

Example:
    >>> from mirrortrace.core.animation import AnimationLoop
    >>> from mirrortrace.preview.export import PngSequenceSink
    >>> from mirrortrace.scene.reference import create_reference_scene
    >>>
    >>> scene = create_reference_scene()
    >>> loop = AnimationLoop(scene, PngSequenceSink("frames"))
    >>> loop.run(num_frames=24)
"""

from __future__ import annotations

import time
from collections.abc import Callable
from typing import TYPE_CHECKING, Protocol

import numpy as np
import numpy.typing as npt
from loguru import logger

from mirrortrace.core.framebuffer import render_frame
from mirrortrace.scene.reference import ANIMATION_PIVOT

if TYPE_CHECKING:
    from mirrortrace.core.parallel import ParallelRenderer
    from mirrortrace.core.vector import Vector3
    from mirrortrace.scene.scene import Scene


class TimeSource(Protocol):
    """Supplies the current time in seconds."""

    def now(self) -> float: ...


class FrameSink(Protocol):
    """Receives finished frames of shape (height, width, 3), dtype uint8."""

    def present(self, frame: npt.NDArray[np.uint8]) -> None: ...


class MonotonicClock:
    """Time source backed by time.perf_counter()."""

    def now(self) -> float:
        return time.perf_counter()


class AnimationLoop:
    """Run the update -> render -> present cycle.

    Attributes:
        scene: The animated scene.
        sink: Receiver of rendered frames.
        pivot: Point the vertical rotation axis passes through.
        frame_count: Number of frames presented so far.
    """

    def __init__(
        self,
        scene: Scene,
        sink: FrameSink,
        *,
        clock: TimeSource | None = None,
        pivot: Vector3 = ANIMATION_PIVOT,
        renderer: ParallelRenderer | None = None,
    ) -> None:
        """Initialize the loop.

        Args:
            scene: The scene to animate and render.
            sink: Receiver of rendered frames.
            clock: Time source (default MonotonicClock()).
            pivot: Rotation pivot (default ANIMATION_PIVOT).
            renderer: Optional ParallelRenderer built for scene. If None,
                frames are rendered sequentially.
        """
        self.scene = scene
        self.sink = sink
        self.pivot = pivot
        self.frame_count = 0
        self._clock = clock if clock is not None else MonotonicClock()
        self._renderer = renderer
        self._last_time: float | None = None

    def _render(self) -> npt.NDArray[np.uint8]:
        if self._renderer is not None:
            return self._renderer.render_frame()
        return render_frame(self.scene)

    def step(self) -> npt.NDArray[np.uint8]:
        """Advance the animation by one frame.

        The elapsed time since the previous step is used as the rotation
        angle in radians; the first step does not move the scene.

        Returns:
            The presented frame.
        """
        now = self._clock.now()
        dt = 0.0 if self._last_time is None else now - self._last_time
        self._last_time = now

        self.scene.update(dt, self.pivot)
        frame = self._render()
        self.sink.present(frame)
        self.frame_count += 1
        logger.debug("Frame {} presented (dt={:.4f}s)", self.frame_count, dt)
        return frame

    def run(
        self,
        num_frames: int | None = None,
        should_continue: Callable[[], bool] | None = None,
    ) -> int:
        """Step until a frame limit or stop condition is reached.

        Args:
            num_frames: Maximum number of frames to present. None for no limit.
            should_continue: Checked before every frame; the loop stops when
                it returns False. None to rely on num_frames only.

        Returns:
            The number of frames presented by this call.

        Raises:
            ValueError: If neither num_frames nor should_continue is given.
        """
        if num_frames is None and should_continue is None:
            raise ValueError("run() needs num_frames or should_continue to terminate")

        presented = 0
        while num_frames is None or presented < num_frames:
            if should_continue is not None and not should_continue():
                break
            self.step()
            presented += 1
        return presented
