#!/usr/bin/env python3
"""
Frame driver sitting between the viewer and the UniverseModel.

The controller owns the user-adjustable time scale, the pause flag and the
anchor body the camera follows. It turns a frame's wall-clock duration into
one or more model steps, none longer than max_delta_time and
no more than max_substeps per frame.
"""
import logging
from typing import Optional

from .constants import (
    DEFAULT_TIME_SCALE,
    MAX_DELTA_TIME,
    MAX_SUBSTEPS,
    MAX_TIME_SCALE,
    MIN_TIME_SCALE,
    TIME_FACTOR,
)
from .data_models import Body
from .physics import UniverseModel
from .vector import clamp

logger = logging.getLogger(__name__)


class SimulationController:
    """
    Advances a UniverseModel in real time and tracks the view anchor.
    """

    def __init__(self, model: UniverseModel, time_scale: float = DEFAULT_TIME_SCALE,
                 max_delta_time: float = MAX_DELTA_TIME, max_substeps: int = MAX_SUBSTEPS):
        if max_delta_time <= 0:
            raise ValueError(f"max_delta_time must be positive, got {max_delta_time}")
        if max_substeps < 1:
            raise ValueError(f"max_substeps must be at least 1, got {max_substeps}")
        self.model = model
        self.time_scale = clamp(float(time_scale), MIN_TIME_SCALE, MAX_TIME_SCALE)
        self.max_delta_time = float(max_delta_time)
        self.max_substeps = int(max_substeps)
        self.paused = False
        self.anchor_index = -1
        self.next_anchor()

    @property
    def bodies(self):
        return self.model.bodies

    @property
    def anchor(self) -> Optional[Body]:
        if self.anchor_index == -1 or self.anchor_index >= len(self.bodies):
            return None
        return self.bodies[self.anchor_index]

    def advance(self, frame_seconds: float) -> int:
        """
        Advance the model by frame_seconds of wall time, scaled by time_scale.

        The simulated interval is split into steps of at most max_delta_time.
        Frames asking for more than max_substeps steps are clamped, so the
        simulation falls behind real time instead of stalling the caller.
        Returns the number of model steps taken.
        """
        if self.paused or frame_seconds <= 0:
            return 0

        scaled_time = frame_seconds * self.time_scale
        budget = self.max_substeps * self.max_delta_time
        if scaled_time > budget:
            logger.debug("frame clamped from %.0f s to %.0f s of simulated time", scaled_time, budget)
            scaled_time = budget
        elapsed = 0.0
        steps = 0

        while elapsed + self.max_delta_time < scaled_time:
            self.model.step(self.max_delta_time)
            elapsed += self.max_delta_time
            steps += 1

        self.model.step(scaled_time - elapsed)
        return steps + 1

    def speed_up(self) -> None:
        self.time_scale = min(MAX_TIME_SCALE, self.time_scale * TIME_FACTOR)
        logger.info("time scale: %.0fx", self.time_scale)

    def slow_down(self) -> None:
        self.time_scale = max(MIN_TIME_SCALE, self.time_scale / TIME_FACTOR)
        logger.info("time scale: %.0fx", self.time_scale)

    def toggle_pause(self) -> None:
        self.paused = not self.paused
        logger.info("simulation %s", "paused" if self.paused else "resumed")

    def change_anchor(self, forward: bool) -> None:
        if forward:
            self.next_anchor()
        else:
            self.previous_anchor()

    def next_anchor(self) -> None:
        self.anchor_index = min(self.anchor_index + 1, len(self.bodies) - 1)
        logger.debug("anchor: %s", self.anchor)

    def previous_anchor(self) -> None:
        body_count = len(self.bodies)
        minimum_index = -1 if body_count == 0 else 0
        self.anchor_index = clamp(self.anchor_index - 1, minimum_index, body_count - 1)
        logger.debug("anchor: %s", self.anchor)
