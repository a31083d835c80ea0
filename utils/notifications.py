"""
Notifications Module - Optional Telegram forwarding of contact messages
"""

import requests
from flask import current_app
from markupsafe import escape


TELEGRAM_API_URL = 'https://api.telegram.org/bot{token}/sendMessage'


def get_admin_notifications_config():
    """Load the site owner's notification settings from app config"""
    return {
        'telegram': {
            'bot_token': current_app.config.get('ADMIN_TELEGRAM_BOT_TOKEN') or '',
            'chat_id': current_app.config.get('ADMIN_TELEGRAM_CHAT_ID') or ''
        }
    }


def notifications_enabled():
    telegram = get_admin_notifications_config()['telegram']
    return bool(telegram['bot_token'] and telegram['chat_id'])


def send_admin_notification(subject, message_text):
    """
    Send a notification to the site owner via Telegram

    Args:
        subject (str): Notification subject
        message_text (str): Notification body, escaped before sending

    Returns:
        bool: True if Telegram accepted the message, False otherwise
    """
    telegram = get_admin_notifications_config()['telegram']
    if not (telegram['bot_token'] and telegram['chat_id']):
        current_app.logger.debug("Admin Telegram credentials not configured")
        return False

    url = TELEGRAM_API_URL.format(token=telegram['bot_token'])
    payload = {
        'chat_id': telegram['chat_id'],
        'text': f"📌 <b>{escape(subject)}</b>\n\n{escape(message_text)}",
        'parse_mode': 'HTML'
    }
    try:
        response = requests.post(url, json=payload, timeout=10)
    except requests.RequestException as e:
        current_app.logger.error(f"Admin Telegram Error: {str(e)}")
        return False

    if response.status_code != 200:
        current_app.logger.error(f"Telegram API error: {response.status_code}")
        return False

    current_app.logger.info("Admin Telegram notification sent")
    return True


def format_contact_notification(submission):
    """Plain-text summary of a contact submission, trimmed to 300 chars"""
    message = submission.message
    preview = message[:300] + ('...' if len(message) > 300 else '')
    return (
        f"👤 From: {submission.name}\n"
        f"📧 Email: {submission.email}\n"
        f"💬 Message:\n{preview}"
    )


__all__ = [
    'get_admin_notifications_config',
    'notifications_enabled',
    'send_admin_notification',
    'format_contact_notification'
]
