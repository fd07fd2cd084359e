from flask import Blueprint, request, jsonify, current_app
from sqlalchemy.exc import SQLAlchemyError
from casarubia.models.reservation import list_reservations, create_reservation
from casarubia.dates import parse_timestamp

reservation_bp = Blueprint('reservation', __name__)

REQUIRED_FIELDS = ['roomId', 'name', 'email', 'phone', 'checkIn', 'checkOut']
TEXT_FIELDS = ['name', 'email', 'phone']


def parse_room_id(value):
    """Whole-number room id from an int or a digit string; bools and fractions are rejected."""
    if isinstance(value, bool):
        raise ValueError(f"Invalid room id: {value!r}")
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"Invalid room id: {value!r}")
        return int(value)
    if isinstance(value, (int, str)):
        return int(value)
    raise ValueError(f"Invalid room id: {value!r}")

@reservation_bp.route('/reservations', methods=['GET'])
def get_reservations():
    # Both bounds are needed for the overlap filter; otherwise list everything
    check_in = request.args.get('checkIn')
    check_out = request.args.get('checkOut')

    if check_in and check_out:
        try:
            check_in = parse_timestamp(check_in)
            check_out = parse_timestamp(check_out)
        except ValueError:
            return jsonify({'error': 'Fechas no válidas'}), 400
    else:
        check_in = check_out = None

    try:
        reservations = list_reservations(check_in, check_out)
    except SQLAlchemyError:
        current_app.logger.exception('Failed to query reservations')
        return jsonify({'error': 'Database error'}), 500

    return jsonify([reservation.to_dict() for reservation in reservations]), 200

@reservation_bp.route('/reservations', methods=['POST'])
def post_reservation():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}

    for field in REQUIRED_FIELDS:
        if not data.get(field):
            return jsonify({'error': 'Datos incompletos'}), 400
    for field in TEXT_FIELDS:
        if not isinstance(data.get(field), str) or not data.get(field).strip():
            return jsonify({'error': 'Datos incompletos'}), 400

    try:
        room_id = parse_room_id(data.get('roomId'))
    except ValueError:
        return jsonify({'error': 'Datos incompletos'}), 400

    try:
        check_in = parse_timestamp(data.get('checkIn'))
        check_out = parse_timestamp(data.get('checkOut'))
    except ValueError:
        return jsonify({'error': 'Fechas no válidas'}), 400

    try:
        reservation_id = create_reservation(
            room_id=room_id,
            name=data.get('name'),
            email=data.get('email'),
            phone=data.get('phone'),
            check_in=check_in,
            check_out=check_out
        )
    except SQLAlchemyError:
        current_app.logger.exception('Failed to save reservation')
        return jsonify({'error': 'Error al guardar la reserva'}), 500

    return jsonify({'id': reservation_id}), 200
