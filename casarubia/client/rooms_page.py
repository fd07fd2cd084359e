"""
Headless controller for the rooms page.

Holds the state the browser page keeps in its DOM: the selected dates,
one availability cell per room and the reservation modal. Rendering is
left to the caller (see ``casarubia.cli``), which reads ``rows`` and
``modal`` after each action. User-facing messages go through the
``alert`` callable.
"""
import logging
import threading
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Callable, Optional

from casarubia.client.api import ApiError
from casarubia.client.formatting import format_cop
from casarubia.dates import parse_timestamp

logger = logging.getLogger(__name__)

LOADING = 'loading'
AVAILABLE = 'available'
UNAVAILABLE = 'unavailable'
INVALID = 'invalid'
ERROR = 'error'

LABELS = {
    LOADING: '...',
    AVAILABLE: 'Disponible',
    UNAVAILABLE: 'No disponible',
    INVALID: 'Fechas no válidas',
    ERROR: 'Error',
}

MSG_INVALID_RANGE = 'Por favor seleccione una fecha de entrada y salida válida antes de reservar.'
MSG_INCOMPLETE_FORM = 'Por favor complete todos los campos del formulario.'
MSG_BOOKED = '¡Gracias! Su solicitud de reserva ha sido registrada. Nos pondremos en contacto a la brevedad.'
MSG_BOOKING_FAILED = ('Lo sentimos, ocurrió un error al registrar la reserva. '
                      'Por favor inténtelo de nuevo más tarde.')
MSG_ROOMS_FAILED = 'No fue posible cargar las habitaciones.'


def conflicting_room_ids(reservations):
    """Ids of the rooms referenced by any of the given reservations."""
    return {reservation.get('roomId') for reservation in reservations}


@dataclass
class RoomRow:
    room: dict
    status: str = LOADING

    @property
    def label(self):
        return LABELS[self.status]

    @property
    def price_label(self):
        return format_cop(self.room['price'])


@dataclass
class ReservationForm:
    room_id: int
    room_name: str
    room_type: str
    room_price: str
    check_in: str
    check_out: str
    name: str = ''
    email: str = ''
    phone: str = ''


@dataclass
class RoomsPage:
    api: object
    alert: Optional[Callable[[str], None]] = None
    today: Optional[date] = None
    check_in: str = ''
    check_out: str = ''
    rows: dict = field(default_factory=dict)
    modal: Optional[ReservationForm] = None

    def __post_init__(self):
        if self.alert is None:
            self.alert = lambda message: logger.warning(message)
        today = self.today or date.today()
        # Default stay: one night starting tomorrow
        if not self.check_in:
            self.check_in = (today + timedelta(days=1)).isoformat()
        if not self.check_out:
            self.check_out = (today + timedelta(days=2)).isoformat()
        self._sequence = 0
        self._lock = threading.Lock()

    def render(self):
        try:
            rooms = self.api.get_rooms()
        except ApiError as e:
            logger.error("Error al cargar las habitaciones: %s", e)
            self.rows = {}
            self.alert(MSG_ROOMS_FAILED)
            return
        self.rows = {room['id']: RoomRow(room) for room in rooms}
        self.refresh_availability()

    def set_dates(self, check_in=None, check_out=None):
        if check_in is not None:
            self.check_in = check_in
        if check_out is not None:
            self.check_out = check_out
        self.refresh_availability()

    def selected_range(self):
        """The (check_in, check_out) datetimes, or None if either is unparseable."""
        try:
            return parse_timestamp(self.check_in), parse_timestamp(self.check_out)
        except ValueError:
            return None

    def has_valid_range(self):
        selected = self.selected_range()
        return selected is not None and selected[1] > selected[0]

    def _next_sequence(self):
        with self._lock:
            self._sequence += 1
            return self._sequence

    def _paint(self, sequence, status_for):
        # Drop the update if a newer refresh has started meanwhile
        with self._lock:
            if sequence != self._sequence:
                logger.debug("Discarding stale availability response %s", sequence)
                return False
            for room_id, row in self.rows.items():
                row.status = status_for(room_id)
            return True

    def refresh_availability(self):
        selected = self.selected_range()
        if selected is None:
            return
        check_in, check_out = selected
        sequence = self._next_sequence()

        if check_out <= check_in:
            self._paint(sequence, lambda room_id: INVALID)
            return

        self._paint(sequence, lambda room_id: LOADING)
        try:
            reservations = self.api.get_reservations(check_in, check_out)
        except ApiError as e:
            logger.error("Error al consultar la disponibilidad: %s", e)
            self._paint(sequence, lambda room_id: ERROR)
            return

        conflicts = conflicting_room_ids(reservations)
        self._paint(sequence, lambda room_id: UNAVAILABLE if room_id in conflicts else AVAILABLE)

    def open_reservation(self, room_id):
        if not self.check_in or not self.check_out or not self.has_valid_range():
            self.alert(MSG_INVALID_RANGE)
            return None
        room = self.rows[room_id].room
        self.modal = ReservationForm(
            room_id=room['id'],
            room_name=room['name'],
            room_type=room['type'],
            room_price=format_cop(room['price']),
            check_in=self.check_in,
            check_out=self.check_out
        )
        return self.modal

    def close_reservation(self):
        self.modal = None

    def submit_reservation(self, name, email, phone):
        """
        Submit the open reservation form. Returns the new reservation id,
        or None when the form is incomplete or the request failed; the
        modal stays open in both cases.
        """
        if self.modal is None:
            raise RuntimeError('No reservation form is open')

        form = self.modal
        form.name, form.email, form.phone = name.strip(), email.strip(), phone.strip()
        if not form.name or not form.email or not form.phone:
            self.alert(MSG_INCOMPLETE_FORM)
            return None

        try:
            reservation_id = self.api.create_reservation(
                form.room_id, form.name, form.email, form.phone, form.check_in, form.check_out
            )
        except ApiError as e:
            logger.error("Error al registrar la reserva: %s", e)
            self.alert(MSG_BOOKING_FAILED)
            return None

        self.alert(MSG_BOOKED)
        self.close_reservation()
        self.refresh_availability()
        return reservation_id
