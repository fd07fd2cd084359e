from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import not_, or_
from datetime import datetime

from casarubia.dates import format_timestamp

db = SQLAlchemy()


def overlaps(a_start, a_end, b_start, b_end):
    """Half-open interval test: [a_start, a_end) intersects [b_start, b_end)."""
    return not (b_end <= a_start or b_start >= a_end)


class Reservation(db.Model):
    __tablename__ = 'reservations'
    __table_args__ = {'sqlite_autoincrement': True}

    id = db.Column(db.Integer, primary_key=True)
    room_id = db.Column('roomId', db.Integer, nullable=False, index=True)
    name = db.Column(db.Text, nullable=False)
    email = db.Column(db.Text, nullable=False)
    phone = db.Column(db.Text, nullable=False)
    check_in = db.Column('checkIn', db.DateTime, nullable=False)
    check_out = db.Column('checkOut', db.DateTime, nullable=False)
    created = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    @classmethod
    def overlapping(cls, check_in, check_out):
        """Criterion matching rows whose stay intersects [check_in, check_out)."""
        return not_(or_(cls.check_out <= check_in, cls.check_in >= check_out))

    def to_dict(self):
        return {
            'id': self.id,
            'roomId': self.room_id,
            'name': self.name,
            'email': self.email,
            'phone': self.phone,
            'checkIn': format_timestamp(self.check_in),
            'checkOut': format_timestamp(self.check_out),
            'created': format_timestamp(self.created)
        }


def list_reservations(check_in=None, check_out=None):
    """
    Return reservations ordered by id, restricted to those overlapping
    [check_in, check_out) when both bounds are given.
    """
    query = Reservation.query
    if check_in is not None and check_out is not None:
        query = query.filter(Reservation.overlapping(check_in, check_out))
    return query.order_by(Reservation.id).all()


def create_reservation(room_id, name, email, phone, check_in, check_out):
    """
    Insert a reservation and return its id.

    No availability check is made here: two overlapping requests for the
    same room are both stored. The session is rolled back and the error
    re-raised if the commit fails.
    """
    reservation = Reservation(
        room_id=room_id,
        name=name,
        email=email,
        phone=phone,
        check_in=check_in,
        check_out=check_out
    )
    db.session.add(reservation)
    try:
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise
    return reservation.id

