from dataclasses import dataclass, asdict

FAN = 'Con ventilador'
AIR_CONDITIONED = 'Con aire acondicionado'


@dataclass(frozen=True)
class Room:
    id: int
    name: str
    type: str
    ac: bool
    price: int     # COP per night
    capacity: int

    def to_dict(self):
        return asdict(self)


def _build_catalog():
    rooms = []
    for room_id in range(1, 13):
        ac = room_id > 6
        rooms.append(Room(
            id=room_id,
            name=f'Habitación {room_id}',
            type=AIR_CONDITIONED if ac else FAN,
            ac=ac,
            price=60000 if ac else 30000,
            capacity=2
        ))
    return tuple(rooms)


# Six rooms with a fan, six with air conditioning.
ROOMS = _build_catalog()


def get_room(room_id):
    for room in ROOMS:
        if room.id == room_id:
            return room
    return None
