import os
from urllib.parse import quote

DEFAULT_CONTACT_EMAIL = 'casarubiataganga@gmail.com'
SUBJECT = 'Consulta desde el sitio web'

MSG_INCOMPLETE = 'Por favor complete su nombre, correo y mensaje.'
MSG_SENT = 'Gracias por contactarnos. Se abrirá su cliente de correo para enviar el mensaje.'


class ContactFormError(ValueError):
    pass


def compose_mailto(name, email, phone, message, recipient=None):
    """
    Build the mailto: link for the contact form.

    Name, email and message are required; phone may be empty. Raises
    ContactFormError with the user-facing message when a field is missing.
    """
    name, email, phone, message = (
        (value or '').strip() for value in (name, email, phone, message)
    )
    if not name or not email or not message:
        raise ContactFormError(MSG_INCOMPLETE)

    recipient = recipient or os.getenv('CASARUBIA_CONTACT_EMAIL', DEFAULT_CONTACT_EMAIL)
    body = (
        f"Nombre: {name}\n"
        f"Correo: {email}\n"
        f"Teléfono: {phone}\n"
        f"\n"
        f"Mensaje:\n{message}"
    )
    return f"mailto:{recipient}?subject={quote(SUBJECT, safe='')}&body={quote(body, safe='')}"
