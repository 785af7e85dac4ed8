from filmorate_api.services.identity import next_id


def test_next_id_for_empty_collection_is_one():
    assert next_id([]) == 1


def test_next_id_is_max_plus_one_not_count_plus_one():
    # ids посеяны снаружи с дырами
    assert next_id({3: "a", 10: "b"}) == 11


def test_next_id_ignores_order():
    assert next_id([5, 2, 9, 1]) == 10
