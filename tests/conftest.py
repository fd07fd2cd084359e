import pytest

from casarubia.main import create_app
from casarubia.models.reservation import db


@pytest.fixture
def app(tmp_path):
    app = create_app({
        'TESTING': True,
        'SQLALCHEMY_DATABASE_URI': f"sqlite:///{tmp_path / 'reservas.db'}",
    })
    yield app
    with app.app_context():
        db.session.remove()
        db.engine.dispose()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def make_reservation(client):
    def _make(room_id=1, check_in='2024-06-01', check_out='2024-06-03', **overrides):
        payload = {
            'roomId': room_id,
            'name': 'Valentina Gómez',
            'email': 'valentina@example.com',
            'phone': '3001234567',
            'checkIn': check_in,
            'checkOut': check_out,
        }
        payload.update(overrides)
        resp = client.post('/api/reservations', json=payload)
        assert resp.status_code == 200, resp.get_json()
        return resp.get_json()['id']
    return _make


class FlaskResponse:
    def __init__(self, response):
        self.status_code = response.status_code
        self.ok = response.status_code < 400
        self._response = response

    def json(self):
        data = self._response.get_json(silent=True)
        if data is None:
            raise ValueError('Response is not JSON')
        return data


class FlaskSession:
    """Stands in for requests.Session, routing calls to the Flask test client."""

    def __init__(self, client):
        self.client = client

    def request(self, method, url, params=None, json=None, timeout=None):
        path = '/' + url.split('://', 1)[-1].split('/', 1)[-1]
        kwargs = {'method': method, 'query_string': params or {}}
        if json is not None:
            kwargs['json'] = json
        return FlaskResponse(self.client.open(path, **kwargs))


@pytest.fixture
def api_session(client):
    return FlaskSession(client)
