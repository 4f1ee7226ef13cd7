import pytest

from reptrack.core.commands import CommandDispatcher
from reptrack.core.engine import MotionAnalysisEngine, SessionStatus


@pytest.fixture
def dispatcher(frame, clock, announcer):
    engine = MotionAnalysisEngine(frame, announcer=announcer, clock=clock, verbose=False)
    return CommandDispatcher(engine)


def test_start_pause_end(dispatcher):
    assert dispatcher.handle("Start") == "start"
    assert dispatcher.engine.status == SessionStatus.RUNNING
    assert dispatcher.handle("please stop") == "pause"
    assert dispatcher.engine.status == SessionStatus.PAUSED
    assert dispatcher.handle("finish workout") == "end"
    assert dispatcher.engine.status == SessionStatus.ENDED


def test_repeated_commands_are_harmless(dispatcher):
    dispatcher.handle("start")
    dispatcher.handle("start")
    dispatcher.handle("end")
    dispatcher.handle("end")
    assert dispatcher.engine.status == SessionStatus.ENDED


def test_rep_count_query(dispatcher, announcer, squat_pose):
    dispatcher.handle("start")
    for a in (90, 160):
        dispatcher.engine.process_pose(squat_pose(a))
    assert dispatcher.handle("How many have I done") == "count"
    assert announcer.messages[-1] == "You've done 1 reps"


def test_encouragement(dispatcher, announcer):
    assert dispatcher.handle("I can't do this") == "encourage"
    assert announcer.messages[-1] == CommandDispatcher.ENCOURAGEMENT_MESSAGE


def test_unrecognized(dispatcher):
    assert dispatcher.handle("hello there") is None
    assert dispatcher.engine.status == SessionStatus.NOT_STARTED
