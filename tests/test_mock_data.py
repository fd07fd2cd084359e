import random
from datetime import datetime

from casarubia.mock_data import create_mock_data
from casarubia.models.reservation import Reservation
from casarubia.models.room import get_room


def test_create_mock_data(app):
    summary = create_mock_data(app, count=5, start=datetime(2024, 6, 1), rng=random.Random(7))
    assert summary == {'created': 5, 'reservations': 5, 'rooms': 12}

    with app.app_context():
        for reservation in Reservation.query.all():
            assert get_room(reservation.room_id) is not None
            assert reservation.check_out > reservation.check_in
            assert reservation.email.endswith('@example.com')


def test_mock_data_appends(app):
    create_mock_data(app, count=2)
    summary = create_mock_data(app, count=3)
    assert summary['reservations'] == 5
