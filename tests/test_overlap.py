from datetime import datetime, timedelta

import pytest

from casarubia.dates import parse_timestamp
from casarubia.models.reservation import overlaps, list_reservations, create_reservation

BASE = datetime(2024, 6, 1)


def day(n):
    return BASE + timedelta(days=n)


@pytest.mark.parametrize('a, b, expected', [
    ((0, 2), (1, 3), True),
    ((0, 2), (2, 4), False),   # back-to-back stays
    ((2, 4), (0, 2), False),
    ((0, 5), (1, 2), True),    # containment
    ((1, 2), (0, 5), True),
    ((0, 1), (3, 4), False),
])
def test_overlaps(a, b, expected):
    assert overlaps(day(a[0]), day(a[1]), day(b[0]), day(b[1])) is expected


def test_query_matches_predicate_for_every_range(app):
    stays = [(0, 2), (1, 4), (3, 5), (5, 6), (2, 3), (6, 9)]
    with app.app_context():
        stored = {}
        for room_id, (start, end) in enumerate(stays, start=1):
            reservation_id = create_reservation(
                room_id=room_id, name='Sofía', email='sofia@example.com', phone='1',
                check_in=day(start), check_out=day(end)
            )
            stored[reservation_id] = (day(start), day(end))

        for a in range(-1, 10):
            for b in range(a + 1, 11):
                expected = [
                    reservation_id for reservation_id, (start, end) in stored.items()
                    if not (end <= day(a) or start >= day(b))
                ]
                found = [reservation.id for reservation in list_reservations(day(a), day(b))]
                assert found == expected, (a, b)


def test_list_without_bounds_returns_everything(app):
    with app.app_context():
        create_reservation(1, 'Sofía', 'sofia@example.com', '1', day(0), day(1))
        create_reservation(2, 'Samuel', 'samuel@example.com', '2', day(10), day(11))
        assert len(list_reservations()) == 2
        assert len(list_reservations(day(0), None)) == 2


def test_parse_timestamp_out_of_range():
    with pytest.raises(ValueError):
        parse_timestamp('0001-01-01T00:00:00+01:00')
    assert parse_timestamp('2024-06-01T00:00:00.000Z') == datetime(2024, 6, 1)
