from flask import Blueprint, jsonify
from casarubia.models.room import ROOMS

room_bp = Blueprint('room', __name__)

@room_bp.route('/rooms', methods=['GET'])
def get_rooms():
    return jsonify([room.to_dict() for room in ROOMS]), 200
