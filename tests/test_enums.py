import pytest

from slugrace.enums import AxisDirection, GameEvent, GameState


def test_game_state_members_in_order():
    looked_up = [GameState(state.value) for state in GameState]
    assert [state.name for state in looked_up] == ["IN_RACE", "WIN"]


def test_game_event_members_in_order():
    looked_up = [GameEvent(event.value) for event in GameEvent]
    assert [event.name for event in looked_up] == ["NONE", "RACE_WON", "UNLEASH_SLUGCATS"]


def test_axis_direction_members_in_order():
    looked_up = [AxisDirection(axis.value) for axis in AxisDirection]
    assert [axis.name for axis in looked_up] == ["X", "Y"]


@pytest.mark.parametrize("enum_cls", [GameState, GameEvent, AxisDirection])
def test_lookup_round_trips(enum_cls):
    for member in enum_cls:
        assert enum_cls[member.name] is member
        assert enum_cls(member.value) is member


def test_states_compare_by_identity():
    in_race = GameState(GameState.IN_RACE.value)
    none_event = GameEvent(GameEvent.NONE.value)
    assert in_race is GameState.IN_RACE
    assert in_race != GameState.WIN
    assert none_event is GameEvent.NONE
    assert none_event != GameEvent.RACE_WON


def test_unknown_value_raises():
    with pytest.raises(ValueError):
        GameState(object())