from motionflow.calibration import (
    BIND_MESSAGE,
    FINISHED_MESSAGE,
    START_MESSAGE,
    CalibrationSequence,
    CalibrationStage,
)


def test_initial_state():
    seq = CalibrationSequence()
    assert seq.stage is CalibrationStage.START
    assert seq.message == START_MESSAGE
    assert seq.bind_enabled is True
    assert seq.bow_enabled is False


def test_bow_before_bind_does_nothing():
    seq = CalibrationSequence()
    assert seq.bow() is False
    assert seq.stage is CalibrationStage.START
    assert seq.message == START_MESSAGE


def test_bind_advances_and_disables_buttons():
    seq = CalibrationSequence()
    assert seq.bind() is True
    assert seq.stage is CalibrationStage.BIND_POSE
    assert seq.message == BIND_MESSAGE
    assert (seq.bind_enabled, seq.bow_enabled) == (False, False)


def test_second_bind_is_ignored():
    seq = CalibrationSequence()
    seq.bind()
    assert seq.bind() is False
    assert seq.stage is CalibrationStage.BIND_POSE


def test_full_sequence_finishes():
    seq = CalibrationSequence()
    seq.bind()
    assert seq.bow() is True
    assert seq.stage is CalibrationStage.BOW_POSE
    assert seq.message == FINISHED_MESSAGE
    assert seq.bind() is False
    assert seq.bow() is False
    assert seq.stage is CalibrationStage.BOW_POSE