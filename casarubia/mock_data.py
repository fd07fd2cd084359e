import random
import unicodedata
from datetime import datetime, time, timedelta

from casarubia.models.reservation import db, Reservation, create_reservation
from casarubia.models.room import ROOMS

guest_names = [
    "Valentina Gómez", "Santiago Rodríguez", "Camila Martínez", "Mateo López",
    "Isabella García", "Sebastián Hernández", "Mariana Díaz", "Nicolás Torres",
    "Sofía Ramírez", "Samuel Castro", "Luciana Vargas", "Daniel Rojas"
]

phone_numbers = [
    "3001234567", "3109876543", "3204567890", "3012345678",
    "3157654321", "3186543210", "3023456789", "3145678901",
    "3176543210", "3198765432", "3051234567", "3168765432"
]


def create_mock_data(app, count=10, start=None, rng=None):
    """
    Insert `count` demo reservations spread over the next 60 days and
    return a summary. Existing rows are kept.
    """
    rng = rng or random.Random()
    start = start or datetime.combine(datetime.utcnow().date(), time())

    with app.app_context():
        db.create_all()

        created = []
        for i in range(count):
            room = rng.choice(ROOMS)
            check_in = start + timedelta(days=rng.randint(1, 60))
            check_out = check_in + timedelta(days=rng.randint(1, 5))
            name = guest_names[i % len(guest_names)]
            first_name = unicodedata.normalize("NFKD", name.split()[0]).encode("ascii", "ignore").decode()
            email = first_name.lower() + "@example.com"

            created.append(create_reservation(
                room_id=room.id,
                name=name,
                email=email,
                phone=phone_numbers[i % len(phone_numbers)],
                check_in=check_in,
                check_out=check_out
            ))

        app.logger.info("Mock data created successfully!")

        return {
            "created": len(created),
            "reservations": Reservation.query.count(),
            "rooms": len(ROOMS)
        }
