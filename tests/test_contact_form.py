"""Tests for the ContactForm state machine, ContactClient and the form fallback page."""

from unittest import mock

import pytest
import requests

from utils.contact import (
    ContactClient,
    ContactForm,
    FormStatus,
    TransportError,
    ValidationError,
    validate_submission,
)


def _filled_form():
    return ContactForm(name='A', email='a@x.com', message='hi')


class TestValidateSubmission:
    def test_strips_values(self):
        submission = validate_submission({'name': ' A ', 'email': 'a@x.com', 'message': 'hi\n'})
        assert submission.name == 'A'
        assert submission.message == 'hi'

    def test_none_payload(self):
        with pytest.raises(ValidationError, match='All fields are required.'):
            validate_submission(None)


class TestContactForm:
    def test_starts_idle(self):
        form = ContactForm()
        assert form.status is FormStatus.IDLE
        assert form.status_message == ''

    def test_success_clears_fields(self):
        form = _filled_form()
        status = form.submit(lambda payload: (True, 'Message received successfully!'))
        assert status is FormStatus.SUCCESS
        assert form.status_message == 'Message sent successfully! I will get back to you soon.'
        assert form.payload() == {'name': '', 'email': '', 'message': ''}

    def test_rejection_keeps_fields(self):
        form = _filled_form()
        form.submit(lambda payload: (False, 'All fields are required.'))
        assert form.status is FormStatus.FAILED
        assert form.status_message == 'Failed to send message: All fields are required.'
        assert form.name == 'A'

    def test_rejection_without_message(self):
        form = _filled_form()
        form.submit(lambda payload: (False, None))
        assert form.status_message == 'Failed to send message: Unknown error'

    def test_transport_error(self):
        def broken(payload):
            raise TransportError('connection refused')

        form = _filled_form()
        form.submit(broken)
        assert form.status is FormStatus.FAILED
        assert form.status_message == 'An error occurred while sending the message.'

    def test_sending_state_seen_by_sender(self):
        form = _filled_form()
        seen = []
        form.submit(lambda payload: (seen.append(form.status), (True, 'ok'))[1])
        assert seen == [FormStatus.SENDING]

    def test_cannot_submit_while_sending(self):
        form = _filled_form()

        def reentrant(payload):
            form.submit(lambda p: (True, 'ok'))

        with pytest.raises(RuntimeError):
            form.submit(reentrant)

    def test_can_resubmit_after_failure(self):
        form = _filled_form()
        form.submit(lambda payload: (False, 'nope'))
        form.submit(lambda payload: (True, 'ok'))
        assert form.succeeded

    def test_update_rejects_unknown_field(self):
        with pytest.raises(KeyError):
            ContactForm().update('phone', '123')

    def test_update_and_payload(self):
        form = ContactForm()
        form.update('name', 'B')
        assert form.payload()['name'] == 'B'


class TestContactClient:
    def _session(self, ok=True, body=None, json_error=None, post_error=None):
        session = mock.Mock()
        if post_error is not None:
            session.post.side_effect = post_error
            return session
        response = mock.Mock(ok=ok)
        if json_error is not None:
            response.json.side_effect = json_error
        else:
            response.json.return_value = body
        session.post.return_value = response
        return session

    def test_posts_json_to_endpoint(self):
        session = self._session(body={'message': 'Message received successfully!'})
        client = ContactClient('https://site.example/', session=session, timeout=5)

        ok, message = client.send({'name': 'A', 'email': 'a@x.com', 'message': 'hi'})

        assert ok is True
        assert message == 'Message received successfully!'
        session.post.assert_called_once_with(
            'https://site.example/api/contact',
            json={'name': 'A', 'email': 'a@x.com', 'message': 'hi'},
            timeout=5,
        )

    def test_client_error_reply(self):
        session = self._session(ok=False, body={'message': 'All fields are required.'})
        ok, message = ContactClient('https://site.example', session=session).send({})
        assert ok is False
        assert message == 'All fields are required.'

    def test_network_failure_raises_transport_error(self):
        session = self._session(post_error=requests.ConnectionError('refused'))
        with pytest.raises(TransportError):
            ContactClient('https://site.example', session=session).send({})

    def test_non_json_reply_raises_transport_error(self):
        session = self._session(json_error=ValueError('not json'))
        with pytest.raises(TransportError):
            ContactClient('https://site.example', session=session).send({})

    def test_drives_form_to_failed_on_transport_error(self):
        session = self._session(post_error=requests.Timeout('slow'))
        form = _filled_form()
        form.submit(ContactClient('https://site.example', session=session).send)
        assert form.status is FormStatus.FAILED
        assert form.status_message == 'An error occurred while sending the message.'


class TestContactPage:
    def test_get_shows_empty_form(self, client):
        html = client.get('/contact').get_data(as_text=True)
        assert 'id="contact-form"' in html
        assert 'data-endpoint="/api/contact"' in html
        assert 'id="form-status" class="status status-idle" hidden' in html

    def test_form_post_success(self, client):
        response = client.post('/contact', data={'name': 'A', 'email': 'a@x.com', 'message': 'hi'})
        assert response.status_code == 200
        html = response.get_data(as_text=True)
        assert 'Message sent successfully! I will get back to you soon.' in html
        assert 'value="a@x.com"' not in html

    def test_form_post_missing_field(self, client):
        response = client.post('/contact', data={'name': 'A', 'email': 'a@x.com', 'message': ''})
        assert response.status_code == 400
        html = response.get_data(as_text=True)
        assert 'Failed to send message: All fields are required.' in html
        assert 'value="a@x.com"' in html

    def test_echoed_input_is_escaped(self, client):
        response = client.post('/contact', data={'name': '"><script>alert(1)</script>', 'email': '', 'message': ''})
        html = response.get_data(as_text=True)
        assert '<script>alert(1)</script>' not in html
        assert '&lt;script&gt;' in html
