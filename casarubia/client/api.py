import os
import logging

import requests

logger = logging.getLogger(__name__)

DEFAULT_API_URL = 'http://localhost:3000'


class ApiError(Exception):
    """Raised when the booking API cannot be reached or answers with an error."""

    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.status_code = status_code


class BookingApiClient:
    """Thin wrapper over the Casa Rubia HTTP API."""

    def __init__(self, base_url=None, session=None, timeout=None):
        self.base_url = (base_url or os.getenv('CASARUBIA_API_URL', DEFAULT_API_URL)).rstrip('/')
        self.session = session or requests.Session()
        # None means wait indefinitely, like the browser fetch it replaces
        self.timeout = timeout

    def _request(self, method, path, **kwargs):
        url = f"{self.base_url}{path}"
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            raise ApiError(f"Request to {url} failed: {e}") from e

        if not response.ok:
            try:
                message = response.json().get('error')
            except (ValueError, AttributeError):
                message = None
            raise ApiError(message or f"HTTP {response.status_code}", status_code=response.status_code)

        try:
            return response.json()
        except ValueError as e:
            raise ApiError(f"Invalid JSON from {url}") from e

    def get_rooms(self):
        return self._request('GET', '/api/rooms')

    def get_reservations(self, check_in=None, check_out=None):
        """
        Reservations overlapping [check_in, check_out); all of them when a
        bound is missing. Bounds are datetimes or ISO 8601 strings.
        """
        params = {}
        if check_in and check_out:
            params = {
                'checkIn': _iso(check_in),
                'checkOut': _iso(check_out)
            }
        return self._request('GET', '/api/reservations', params=params)

    def create_reservation(self, room_id, name, email, phone, check_in, check_out):
        payload = {
            'roomId': room_id,
            'name': name,
            'email': email,
            'phone': phone,
            'checkIn': _iso(check_in),
            'checkOut': _iso(check_out)
        }
        data = self._request('POST', '/api/reservations', json=payload)
        logger.debug("Reservation %s stored for room %s", data.get('id'), room_id)
        return data.get('id')


def _iso(value):
    return value if isinstance(value, str) else value.isoformat()
