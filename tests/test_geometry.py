from game_logic.station import Station
from game_logic.geometry import is_straight_or_diagonal, path_passes_through_station, segments_intersect


def p(x, y):
    return Station(-1, x, y, "A")


def test_alignment():
    assert is_straight_or_diagonal(p(0, 0), p(0, 5))
    assert is_straight_or_diagonal(p(0, 0), p(7, 0))
    assert is_straight_or_diagonal(p(1, 1), p(4, 4))
    assert is_straight_or_diagonal(p(4, 0), p(0, 4))
    assert not is_straight_or_diagonal(p(0, 0), p(1, 2))


def test_path_through_station(station_index):
    a, c = station_index.get_station(0), station_index.get_station(2)
    assert path_passes_through_station(a, c, station_index)
    b = station_index.get_station(1)
    assert not path_passes_through_station(a, b, station_index)
    # Diagonal (0,0)-(2,2) has an empty cell at (1,1)
    assert not path_passes_through_station(a, station_index.get_station(5), station_index)


def test_proper_crossing():
    assert segments_intersect(p(0, 0), p(2, 2), p(0, 2), p(2, 0))


def test_disjoint_segments():
    assert not segments_intersect(p(0, 0), p(2, 0), p(0, 2), p(2, 2))
    assert not segments_intersect(p(0, 0), p(1, 1), p(3, 3), p(4, 4))


def test_shared_endpoint_is_not_a_crossing():
    assert not segments_intersect(p(0, 0), p(2, 2), p(2, 2), p(4, 0))


def test_collinear_overlap_counts():
    assert segments_intersect(p(0, 0), p(4, 0), p(2, 0), p(6, 0))
    # Sharing an endpoint but running back over the other segment
    assert segments_intersect(p(0, 0), p(4, 0), p(0, 0), p(2, 0))
    assert segments_intersect(p(0, 0), p(4, 0), p(4, 0), p(0, 0))


def test_collinear_touching_end_to_end():
    assert not segments_intersect(p(0, 0), p(2, 0), p(2, 0), p(4, 0))


def test_t_junction_counts():
    assert segments_intersect(p(0, 0), p(4, 0), p(2, 0), p(2, 3))
