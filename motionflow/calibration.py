"""The operator-driven pose sequence for calibrating an IMU costume."""

from __future__ import annotations

from enum import Enum

START_MESSAGE = "Stand straight, look forward.\nOperator should press BIND pose when ready."
BIND_MESSAGE = "Bow, look down.\nOperator should press BOW pose when ready."
FINISHED_MESSAGE = "Callibration finished.\nWindow will dissapear automatically."


class CalibrationStage(Enum):
    """Stages of the calibration sequence, in order."""

    START = 0
    BIND_POSE = 1
    BOW_POSE = 2


class CalibrationSequence:
    """Tracks the calibration stage, the prompt shown and which actions are available."""

    def __init__(self) -> None:
        self.stage = CalibrationStage.START
        self.message = START_MESSAGE
        self.bind_enabled = True
        self.bow_enabled = False

    def bind(self) -> bool:
        """Advance from START to BIND_POSE; returns whether the stage changed."""
        if self.stage is not CalibrationStage.START:
            return False
        self.stage = CalibrationStage.BIND_POSE
        self.message = BIND_MESSAGE
        self.bind_enabled = False
        self.bow_enabled = False
        return True

    def bow(self) -> bool:
        """Advance from BIND_POSE to BOW_POSE; returns whether the stage changed."""
        if self.stage is not CalibrationStage.BIND_POSE:
            return False
        self.stage = CalibrationStage.BOW_POSE
        self.message = FINISHED_MESSAGE
        self.bind_enabled = False
        self.bow_enabled = False
        return True