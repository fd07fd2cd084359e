from casarubia.models.room import ROOMS, get_room


def test_list_rooms(client):
    resp = client.get('/api/rooms')
    assert resp.status_code == 200
    rooms = resp.get_json()
    assert len(rooms) == 12
    assert [room['id'] for room in rooms] == list(range(1, 13))
    for key in ('id', 'name', 'type', 'ac', 'price', 'capacity'):
        assert key in rooms[0]


def test_fan_and_air_conditioned_rooms(client):
    rooms = client.get('/api/rooms').get_json()
    fan = [room for room in rooms if not room['ac']]
    ac = [room for room in rooms if room['ac']]
    assert [room['id'] for room in fan] == [1, 2, 3, 4, 5, 6]
    assert all(room['price'] == 30000 and room['type'] == 'Con ventilador' for room in fan)
    assert all(room['price'] == 60000 and room['type'] == 'Con aire acondicionado' for room in ac)
    assert rooms[0]['name'] == 'Habitación 1'


def test_catalog_unchanged_by_reservations(client, make_reservation):
    before = client.get('/api/rooms').get_json()
    make_reservation(room_id=1)
    make_reservation(room_id=7, check_in='2024-07-01', check_out='2024-07-05')
    after = client.get('/api/rooms').get_json()
    assert before == after


def test_get_room():
    assert get_room(7) is ROOMS[6]
    assert get_room(13) is None


def test_cors_header(client):
    resp = client.get('/api/rooms', headers={'Origin': 'http://example.com'})
    assert resp.headers.get('Access-Control-Allow-Origin') == '*'


def test_unknown_route_returns_json(client):
    resp = client.get('/api/nothing-here')
    assert resp.status_code == 404
    assert 'error' in resp.get_json()
