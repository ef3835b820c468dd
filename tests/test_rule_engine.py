from game_logic.enums import PlatformType
from game_logic.station import Card
from conftest import play_line, give_card, build


def check(game, a, b):
    return game.rule_engine.check_connection_validity(game, a, b)


def test_valid_first_segment(game):
    play_line(game, 1)
    give_card(game, "B")
    assert check(game, 0, 1) == (True, "Connection is valid.")
    # Checking never creates state
    assert game.get_line_state(1) is None
    assert game.get_owner(1) is None


def test_unknown_station(game):
    play_line(game, 1)
    give_card(game, "A")
    ok, reason = check(game, 0, 99)
    assert not ok and reason == "Unknown station."


def test_self_connection(game):
    play_line(game, 1)
    give_card(game, "A")
    ok, reason = check(game, 0, 0)
    assert not ok and "itself" in reason


def test_station_owned_by_other_line(game):
    build(game, 2, 4, 1)
    play_line(game, 1)
    give_card(game, "B")
    ok, reason = check(game, 0, 1)
    assert not ok and "another line" in reason


def test_not_aligned(game):
    play_line(game, 1)
    give_card(game, "C")
    ok, reason = check(game, 0, 7)
    assert not ok and "straight" in reason


def test_first_segment_must_leave_start(game):
    play_line(game, 1)
    give_card(game, "C")
    ok, reason = check(game, 1, 2)
    assert not ok and "must start at station 0" in reason


def test_origin_must_be_open_end(game):
    build(game, 1, 0, 1)
    build(game, 1, 1, 5)
    give_card(game, "Joker")
    ok, reason = check(game, 1, 2)
    assert not ok and "not an open end" in reason


def test_card_mismatch(game):
    play_line(game, 1)
    give_card(game, "A")
    ok, reason = check(game, 0, 1)
    assert not ok and "does not match" in reason


def test_joker_and_wildcard_match(game):
    play_line(game, 1)
    give_card(game, "Joker")
    assert game.rule_engine.can_connect(game, 0, 1)
    give_card(game, "D")
    # The wildcard transfer station accepts any symbol
    assert game.rule_engine.can_connect(game, 0, 5)


def test_no_card_means_no_match(game, station_index):
    assert not game.rule_engine.station_matches_card(game, station_index.get_station(1), None)
    assert game.rule_engine.station_matches_card(game, station_index.get_station(1), Card(PlatformType.SIDE, "B"))


def test_path_through_station(game):
    play_line(game, 1)
    give_card(game, "C")
    ok, reason = check(game, 0, 2)
    assert not ok and "passes through" in reason


def test_duplicate_segment(game):
    build(game, 1, 0, 1)
    give_card(game, "A")
    ok, reason = check(game, 1, 0)
    assert not ok and "already connected" in reason


def test_crossing_segment(game):
    build(game, 1, 0, 5)
    play_line(game, 2)
    give_card(game, "B")
    ok, reason = check(game, 4, 1)
    assert not ok and "crosses 0-5" in reason


def test_touching_at_transfer_station_is_allowed(game):
    build(game, 1, 0, 5)
    build(game, 2, 4, 5)
    assert game.get_owner(5) is None
    assert game.get_line_state(2).endpoints == {4, 5}


def test_revisit_rejected(game):
    build(game, 1, 0, 1)
    build(game, 1, 1, 5)
    give_card(game, "A")
    ok, reason = check(game, 5, 0)
    assert not ok and "already on this line" in reason


def test_start_station_exemption(game):
    build(game, 1, 0, 4)
    assert game.get_owner(4) == 1
    build(game, 2, 4, 5)
    assert game.get_owner(4) == 2


def test_find_legal_targets(game):
    play_line(game, 1)
    give_card(game, "B")
    # 5 is the wildcard transfer station
    assert game.rule_engine.find_legal_targets(game, 0) == [1, 4, 5]
    give_card(game, "Joker")
    assert game.rule_engine.find_legal_targets(game, 1) == []


def test_legal_origin(game):
    play_line(game, 1)
    assert game.rule_engine.is_legal_origin(game, 0)
    assert not game.rule_engine.is_legal_origin(game, 1)
    build(game, 1, 0, 1)
    assert game.rule_engine.is_legal_origin(game, 0)
    assert game.rule_engine.is_legal_origin(game, 1)


def test_rejected_attempt_changes_nothing(game):
    play_line(game, 1)
    give_card(game, "A")
    assert not game.attempt_connection(0, 1)
    assert game.get_line_state(1) is None
    assert not game.round_state.build_used_for_card


def test_one_build_per_card(game):
    build(game, 1, 0, 1)
    assert not game.attempt_connection(1, 5)


def test_duplicate_segment_across_lines(game):
    # Line 1 runs through line 2's start station into the transfer station
    build(game, 1, 0, 4)
    build(game, 1, 4, 5)
    play_line(game, 2)
    give_card(game, "Joker")
    ok, reason = check(game, 4, 5)
    assert not ok and reason == "These stations are already connected."
