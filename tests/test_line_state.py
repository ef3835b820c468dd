from game_logic.line_state import LineBuildState
from game_logic.ownership import OwnershipTracker


def test_endpoints_toggle():
    state = LineBuildState(1, start_station_id=0)
    assert state.is_empty and state.visited == {0}

    state.add_segment(0, 1)
    assert state.endpoints == {0, 1}
    state.add_segment(1, 2)
    assert state.endpoints == {0, 2}
    assert state.visited == {0, 1, 2}
    assert state.has_segment(2, 1)
    assert not state.has_segment(0, 2)


def test_extend_from_start_side():
    state = LineBuildState(1, start_station_id=0)
    state.add_segment(0, 1)
    state.add_segment(0, 4)
    assert state.endpoints == {1, 4}


def test_first_claim_wins():
    owners = OwnershipTracker(transfer_station_id=5)
    owners.claim(1, line_id=1, start_station_id=0)
    owners.claim(1, line_id=2, start_station_id=4)
    assert owners.get_owner(1) == 1
    assert owners.is_owned_by_other(1, line_id=2, start_station_id=4)
    assert not owners.is_owned_by_other(1, line_id=1, start_station_id=0)


def test_transfer_station_is_never_owned():
    owners = OwnershipTracker(transfer_station_id=5)
    owners.claim(5, line_id=1, start_station_id=0)
    assert not owners.is_owned(5)
    assert not owners.is_owned_by_other(5, line_id=2, start_station_id=4)


def test_start_station_is_reclaimed():
    owners = OwnershipTracker(transfer_station_id=5)
    owners.claim(4, line_id=1, start_station_id=0)
    assert not owners.is_owned_by_other(4, line_id=2, start_station_id=4)
    owners.claim(4, line_id=2, start_station_id=4)
    assert owners.get_owner(4) == 2
    owners.clear()
    assert len(owners) == 0
