import pytest

from drillbox.expand_vector import ExpandVector, main


def test_iteration_and_length_follow_initial_values():
    values = [4, 8, 15, 16, 23]
    vector = ExpandVector(values)
    assert list(vector) == values
    assert len(vector) == len(values)


@pytest.mark.parametrize("place", [1, 2, 3])
def test_insert_places_value_at_position(place):
    vector = ExpandVector([10, 20, 30])
    vector.insert_at(place, 99)
    assert vector.get_at(place) == 99
    assert len(vector) == 4


def test_insert_at_first_position_shifts_rest():
    vector = ExpandVector([10, 20, 30])
    vector.insert_at(1, 5)
    assert list(vector) == [5, 10, 20, 30]


@pytest.mark.parametrize("place", [0, -1, 4])
def test_insert_out_of_range_raises(place):
    vector = ExpandVector([10, 20, 30])
    with pytest.raises(IndexError):
        vector.insert_at(place, 1)
    assert list(vector) == [10, 20, 30]


def test_insert_into_empty_vector_raises():
    with pytest.raises(IndexError):
        ExpandVector().insert_at(1, 7)


def test_erase_at_returns_removed_element():
    vector = ExpandVector([10, 20, 30])
    assert vector.erase_at(2) == 20
    assert list(vector) == [10, 30]


def test_erase_at_last_position():
    vector = ExpandVector([10, 20, 30])
    assert vector.erase_at(3) == 30
    assert len(vector) == 2


@pytest.mark.parametrize("place", [0, 4])
def test_erase_at_out_of_range_raises(place):
    vector = ExpandVector([10, 20, 30])
    with pytest.raises(IndexError):
        vector.erase_at(place)


def test_erase_value_removes_every_occurrence():
    vector = ExpandVector([3, 1, 3, 2, 3])
    assert vector.erase_value(3) == 3
    assert 3 not in list(vector)
    assert list(vector) == [1, 2]


def test_erase_value_missing_leaves_vector_alone():
    vector = ExpandVector([1, 2])
    assert vector.erase_value(9) == 0
    assert list(vector) == [1, 2]


@pytest.mark.parametrize("place", [1, 2, 3])
def test_change_replaces_without_changing_length(place):
    vector = ExpandVector([10, 20, 30])
    vector.change(place, 77)
    assert vector.get_at(place) == 77
    assert len(vector) == 3


def test_change_out_of_range_raises():
    vector = ExpandVector([10])
    with pytest.raises(IndexError):
        vector.change(2, 5)


def test_get_at_out_of_range_raises():
    vector = ExpandVector([10, 20])
    with pytest.raises(IndexError):
        vector.get_at(3)


def test_main_runs_demonstration(capsys):
    assert main(["1", "2", "3", "4", "5", "6", "7"]) == 0
    out = capsys.readouterr().out
    assert "The 5th number erase succeeded" in out
    assert "insert 666 at 5th succeeded" in out
    assert "The 4th number change succeeded" in out
    assert "The 6th number this 6" in out
    assert "value of v = 888" in out


def test_main_rejects_non_integers(capsys):
    assert main(["1", "x"]) == 2
    assert "invalid value" in capsys.readouterr().err