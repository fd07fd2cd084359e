"""Command-line front-end for the Casa Rubia booking API."""
import argparse
import json
import logging
import sys

from casarubia.client.api import BookingApiClient
from casarubia.client.contact import ContactFormError, compose_mailto, MSG_SENT
from casarubia.client.rooms_page import RoomsPage

COLUMNS = ('Habitación', 'Tipo', 'Capacidad', 'Precio', 'Disponibilidad')


def format_rooms_table(page):
    lines = [' | '.join(COLUMNS)]
    for row in page.rows.values():
        room = row.room
        lines.append(' | '.join([
            f"{room['id']:>2}. {room['name']}",
            room['type'],
            str(room['capacity']),
            row.price_label,
            row.label
        ]))
    return '\n'.join(lines)


def _page(args, out):
    page = RoomsPage(
        api=BookingApiClient(args.api_url, timeout=args.timeout),
        alert=lambda message: print(message, file=out),
        check_in=args.check_in or '',
        check_out=args.check_out or ''
    )
    page.render()
    return page


def cmd_serve(args, out):
    from casarubia.main import run
    run(host=args.host, port=args.port, debug=args.debug)
    return 0


def cmd_rooms(args, out):
    page = _page(args, out)
    print(f"Entrada: {page.check_in}  Salida: {page.check_out}", file=out)
    print(format_rooms_table(page), file=out)
    return 0


def cmd_book(args, out):
    page = _page(args, out)
    if args.room not in page.rows:
        print(f"Habitación {args.room} no encontrada", file=out)
        return 1
    if page.open_reservation(args.room) is None:
        return 1
    reservation_id = page.submit_reservation(args.name, args.email, args.phone)
    if reservation_id is None:
        return 1
    print(f"Reserva #{reservation_id}", file=out)
    return 0


def cmd_contact(args, out):
    try:
        link = compose_mailto(args.name, args.email, args.phone, args.message)
    except ContactFormError as e:
        print(e, file=out)
        return 1
    print(link, file=out)
    print(MSG_SENT, file=out)
    return 0


def cmd_seed(args, out):
    from casarubia.main import create_app
    from casarubia.mock_data import create_mock_data
    summary = create_mock_data(create_app(), count=args.count)
    print(json.dumps(summary, indent=2), file=out)
    return 0


def build_parser():
    parser = argparse.ArgumentParser(prog='casarubia', description='Casa Rubia room booking')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')
    subparsers = parser.add_subparsers(dest='command', required=True)

    serve = subparsers.add_parser('serve', help='Run the booking API server')
    serve.add_argument('--host', default=None)
    serve.add_argument('--port', type=int, default=None)
    serve.add_argument('--debug', action='store_true')
    serve.set_defaults(func=cmd_serve)

    def add_client_args(sub):
        sub.add_argument('--api-url', default=None, help='Booking API base URL')
        sub.add_argument('--timeout', type=float, default=None, help='Request timeout in seconds')
        sub.add_argument('--check-in', default=None, help='YYYY-MM-DD (default: tomorrow)')
        sub.add_argument('--check-out', default=None, help='YYYY-MM-DD (default: day after tomorrow)')

    rooms = subparsers.add_parser('rooms', help='List rooms and their availability')
    add_client_args(rooms)
    rooms.set_defaults(func=cmd_rooms)

    book = subparsers.add_parser('book', help='Request a reservation')
    add_client_args(book)
    book.add_argument('--room', type=int, required=True)
    book.add_argument('--name', required=True)
    book.add_argument('--email', required=True)
    book.add_argument('--phone', required=True)
    book.set_defaults(func=cmd_book)

    contact = subparsers.add_parser('contact', help='Compose a contact e-mail link')
    contact.add_argument('--name', default='')
    contact.add_argument('--email', default='')
    contact.add_argument('--phone', default='')
    contact.add_argument('--message', default='')
    contact.set_defaults(func=cmd_contact)

    seed = subparsers.add_parser('seed', help='Insert demo reservations')
    seed.add_argument('--count', type=int, default=10)
    seed.set_defaults(func=cmd_seed)

    return parser


def main(argv=None, out=None):
    out = out or sys.stdout
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s'
    )
    return args.func(args, out)


if __name__ == '__main__':
    sys.exit(main())
