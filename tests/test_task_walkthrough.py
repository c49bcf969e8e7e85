"""End-to-end walkthrough of one task, restart included."""

from colour_task.core.click_log_exporter import save_click_log
from colour_task.core.click_log_importer import load_click_log
from colour_task.core.models import EventKind, SlidePhase
from colour_task.core.slide_state_machine import SlideStateMachine

from conftest import FakeClock, ScriptedRandom


def test_full_task_and_restart(tmp_path):
    clock = FakeClock()
    rng = ScriptedRandom(fallback=0.2)
    auto_saved: list[str] = []

    def sink(entries):
        auto_saved.append(str(save_click_log(tmp_path / "clickLog.json", entries)))

    machine = SlideStateMachine(time_source=clock, rng=rng, log_sink=sink)

    # 1. Start screen
    assert machine.phase is SlidePhase.NOT_STARTED
    machine.start()

    # 2. Slides: pick colour N on slide N, except slide 3 which times out
    for slide in range(8):
        assert machine.state.prompt_index == slide
        if slide == 3:
            clock.advance_seconds(15)
        else:
            clock.advance_seconds(2)
            machine.select(slide)
            machine.confirm()
        machine.tick()
        clock.advance(100)
        machine.tick()

    # 3. End screen
    assert machine.phase is SlidePhase.ENDED
    assert machine.summary.answered == 7
    assert machine.summary.percentage == 100
    assert machine.get_remaining_option_count() == 1
    assert len(auto_saved) == 1

    records = load_click_log(tmp_path / "clickLog.json")
    assert records[0].event is EventKind.START_GAME
    assert sum(1 for record in records if record.event is EventKind.TIMER_EXPIRED) == 1
    assert sum(1 for record in records if record.event is EventKind.ALL_AGREE) == 7

    # 4. Restart
    machine.reset()
    assert machine.phase is SlidePhase.AWAITING_SELECTION
    assert machine.get_remaining_option_count() == 8
    assert machine.get_event_log()[-1].event is EventKind.RESTART
    assert len(machine.get_event_log()) == len(records) + 1
