"""
Contact Module - Contact form validation, processing and client-side form state

Submissions are validated, logged and acknowledged. They are forwarded to the
site owner only when Telegram notifications are configured.

The form side mirrors what a browser does with the contact page:

    Idle -> Sending -> (Success | Failed)

ContactForm drives that state machine with any sender callable that takes the
payload dict and returns ``(ok, message)``. ContactClient.send talks to the
JSON endpoint over HTTP; submit_locally runs the same pipeline in-process for
the no-JavaScript form post.
"""

import time
from dataclasses import dataclass
from enum import Enum

import requests
from flask import current_app

from .notifications import (
    notifications_enabled,
    send_admin_notification,
    format_contact_notification
)


REQUIRED_FIELDS = ('name', 'email', 'message')

REQUIRED_FIELDS_MESSAGE = 'All fields are required.'
RECEIVED_MESSAGE = 'Message received successfully!'

SENDING_STATUS = 'Sending...'
SUCCESS_STATUS = 'Message sent successfully! I will get back to you soon.'
FAILED_STATUS = 'Failed to send message: {reason}'
TRANSPORT_STATUS = 'An error occurred while sending the message.'


class ValidationError(Exception):
    """A submission is missing a required field"""


class TransportError(Exception):
    """The submission request itself failed before a usable reply came back"""


@dataclass(frozen=True)
class ContactSubmission:
    name: str
    email: str
    message: str


def validate_submission(payload):
    """
    Check that name, email and message are all present and non-empty strings

    Args:
        payload: decoded JSON body or form mapping (may be None)

    Returns:
        ContactSubmission: stripped field values

    Raises:
        ValidationError: if any field is missing, empty or not a string
    """
    if not isinstance(payload, dict):
        raise ValidationError(REQUIRED_FIELDS_MESSAGE)

    values = {}
    for field in REQUIRED_FIELDS:
        value = payload.get(field)
        if not isinstance(value, str) or not value:
            raise ValidationError(REQUIRED_FIELDS_MESSAGE)
        values[field] = value.strip()

    return ContactSubmission(**values)


def process_submission(submission, client_ip=None):
    """Log the submission, wait out the simulated delay and forward it if configured"""
    delay = current_app.config.get('CONTACT_SIMULATED_DELAY', 0)
    if delay:
        time.sleep(delay)

    current_app.logger.info(
        f"Contact form submission received from {client_ip or 'unknown'}:\n"
        f"Name: {submission.name}\n"
        f"Email: {submission.email}\n"
        f"Message: {submission.message}"
    )

    if notifications_enabled():
        if not send_admin_notification('New Contact Message', format_contact_notification(submission)):
            current_app.logger.warning("Contact message acknowledged but not forwarded")


def submit_locally(payload, client_ip=None):
    """In-process sender for ContactForm: same contract as the JSON endpoint"""
    try:
        submission = validate_submission(payload)
    except ValidationError as e:
        return False, str(e)

    process_submission(submission, client_ip=client_ip)
    return True, RECEIVED_MESSAGE


class ContactClient:
    """
    HTTP client for the contact endpoint

    Args:
        base_url (str): Site root, e.g. ``https://example.dev``
        session (requests.Session, optional): Session to reuse
        timeout (float): Request timeout in seconds
    """

    endpoint = '/api/contact'

    def __init__(self, base_url, session=None, timeout=10):
        self.url = base_url.rstrip('/') + self.endpoint
        self.session = session or requests.Session()
        self.timeout = timeout

    def send(self, payload):
        try:
            response = self.session.post(self.url, json=payload, timeout=self.timeout)
        except requests.RequestException as e:
            raise TransportError(str(e)) from e

        try:
            body = response.json()
        except ValueError as e:
            raise TransportError(f"Invalid response from {self.url}") from e

        message = body.get('message') if isinstance(body, dict) else None
        return response.ok, message


class FormStatus(str, Enum):
    IDLE = 'idle'
    SENDING = 'sending'
    SUCCESS = 'success'
    FAILED = 'failed'


class ContactForm:
    """Field values and submission status of one contact form"""

    def __init__(self, name='', email='', message=''):
        self.name = name
        self.email = email
        self.message = message
        self.status = FormStatus.IDLE
        self.status_message = ''

    @classmethod
    def from_mapping(cls, data):
        return cls(**{field: (data.get(field) or '') for field in REQUIRED_FIELDS})

    def update(self, field, value):
        if field not in REQUIRED_FIELDS:
            raise KeyError(field)
        setattr(self, field, value)

    def payload(self):
        return {field: getattr(self, field) for field in REQUIRED_FIELDS}

    def reset(self):
        for field in REQUIRED_FIELDS:
            setattr(self, field, '')

    def submit(self, send):
        if self.status is FormStatus.SENDING:
            raise RuntimeError('Submission already in progress')

        self.status = FormStatus.SENDING
        self.status_message = SENDING_STATUS

        try:
            ok, message = send(self.payload())
        except TransportError:
            self.status = FormStatus.FAILED
            self.status_message = TRANSPORT_STATUS
            return self.status

        if ok:
            self.status = FormStatus.SUCCESS
            self.status_message = SUCCESS_STATUS
            self.reset()
        else:
            self.status = FormStatus.FAILED
            self.status_message = FAILED_STATUS.format(reason=message or 'Unknown error')
        return self.status

    @property
    def succeeded(self):
        return self.status is FormStatus.SUCCESS


__all__ = [
    'REQUIRED_FIELDS',
    'REQUIRED_FIELDS_MESSAGE',
    'RECEIVED_MESSAGE',
    'ValidationError',
    'TransportError',
    'ContactSubmission',
    'validate_submission',
    'process_submission',
    'submit_locally',
    'ContactClient',
    'FormStatus',
    'ContactForm'
]
