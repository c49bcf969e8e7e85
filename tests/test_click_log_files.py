import json

import pytest

from colour_task.core.click_log_exporter import save_click_log
from colour_task.core.click_log_importer import ClickLogError, count_events, load_click_log
from colour_task.core.models import EventKind
from colour_task.core.slide_state_machine import SlideStateMachine

from conftest import ScriptedRandom, finish_transition


@pytest.fixture
def played(clock) -> SlideStateMachine:
    machine = SlideStateMachine(["Art", "Music"], time_source=clock, rng=ScriptedRandom())
    machine.start()
    clock.advance(400)
    machine.select(2)
    machine.confirm()
    finish_transition(machine, clock)
    clock.advance_seconds(15)
    machine.tick()
    return machine


def test_saved_file_uses_click_log_field_names(played, tmp_path):
    target = tmp_path / "logs" / "clickLog.json"

    written = save_click_log(target, played.get_event_log())

    assert written == target.resolve()
    data = json.loads(target.read_text(encoding="utf-8"))
    assert [item["event"] for item in data] == [
        "START_GAME",
        "COLOUR_CLICK",
        "ALL_AGREE",
        "TIMER_EXPIRED",
    ]
    assert data[0] == {"event": "START_GAME", "timeMs": 0.0, "slideIndex": 0, "selectedIndex": -1}
    assert data[1] == {
        "event": "COLOUR_CLICK",
        "timeMs": 400.0,
        "slideIndex": 0,
        "selectedIndex": 2,
        "colourIndex": 2,
        "colourName": "Colour 3",
    }
    assert data[2]["hadSelection"] is True
    assert data[2]["chosenColourName"] == "Colour 3"
    assert data[3]["slideIndex"] == 1
    assert data[3]["hadSelection"] is False
    assert data[3]["chosenColourIndex"] == -1
    assert data[3]["chosenColourName"] is None


def test_load_returns_validated_records(played, tmp_path):
    target = tmp_path / "clickLog.json"
    save_click_log(target, played.get_event_log())

    records = load_click_log(target)

    assert [record.event for record in records] == [
        EventKind.START_GAME,
        EventKind.COLOUR_CLICK,
        EventKind.ALL_AGREE,
        EventKind.TIMER_EXPIRED,
    ]
    assert records[1].selected_index == 2
    assert records[1].model_extra["colourName"] == "Colour 3"


def test_empty_log_is_not_saved(tmp_path):
    target = tmp_path / "clickLog.json"

    with pytest.raises(ValueError):
        save_click_log(target, [])
    assert not target.exists()


@pytest.mark.parametrize(
    "content",
    [
        "not json",
        "[]",
        '[{"event": "DANCE", "timeMs": 1, "slideIndex": 0, "selectedIndex": -1}]',
        '[{"event": "RESTART", "timeMs": 1, "slideIndex": -3, "selectedIndex": -1}]',
    ],
)
def test_malformed_files_are_rejected(tmp_path, content):
    target = tmp_path / "broken.json"
    target.write_text(content, encoding="utf-8")

    with pytest.raises(ClickLogError):
        load_click_log(target)


def test_non_utf8_file_is_rejected(tmp_path):
    target = tmp_path / "binary.json"
    target.write_bytes(b"\xff\xfe[\x00")

    with pytest.raises(ClickLogError):
        load_click_log(target)


def test_event_counts_follow_first_appearance(played, clock, tmp_path):
    target = tmp_path / "clickLog.json"
    finish_transition(played, clock)
    assert played.reset()
    save_click_log(target, played.get_event_log())

    counts = count_events(load_click_log(target))

    assert counts == {
        "START_GAME": 1,
        "COLOUR_CLICK": 1,
        "ALL_AGREE": 1,
        "TIMER_EXPIRED": 1,
        "RESTART": 1,
    }
    assert list(counts) == ["START_GAME", "COLOUR_CLICK", "ALL_AGREE", "TIMER_EXPIRED", "RESTART"]
