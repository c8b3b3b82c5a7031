"""
Notifications Module - Telegram notifications to the site owner
"""

import html
import threading
import requests
from flask import current_app


TELEGRAM_API_URL = "https://api.telegram.org/bot{token}/sendMessage"
PREVIEW_LENGTH = 200


def get_telegram_credentials():
    """Load owner Telegram credentials from app config"""
    return (current_app.config.get('OWNER_TELEGRAM_BOT_TOKEN'),
            current_app.config.get('OWNER_TELEGRAM_CHAT_ID'))


def _post_telegram(app, url, payload):
    try:
        response = requests.post(url, json=payload, timeout=10)
        response.raise_for_status()
        app.logger.info("Owner Telegram notification sent")
    except requests.RequestException as e:
        app.logger.error(f"Owner Telegram Error: {str(e)}")


def send_telegram_notification(message_text, background=True):
    """
    Send a notification to the site owner via Telegram

    Args:
        message_text (str): HTML-formatted message body
        background (bool): Post from a worker thread instead of blocking

    Returns:
        bool: True if a notification was dispatched
    """
    token, chat_id = get_telegram_credentials()
    if not token or not chat_id:
        current_app.logger.debug("Owner Telegram credentials not configured")
        return False

    url = TELEGRAM_API_URL.format(token=token)
    payload = {
        'chat_id': chat_id,
        'text': message_text,
        'parse_mode': 'HTML'
    }
    app = current_app._get_current_object()
    if background:
        threading.Thread(target=_post_telegram, args=(app, url, payload), daemon=True).start()
    else:
        _post_telegram(app, url, payload)
    return True


def format_contact_notification(record):
    """Build the owner-facing summary of a new contact message"""
    preview = record.message[:PREVIEW_LENGTH]
    if len(record.message) > PREVIEW_LENGTH:
        preview += '...'
    lines = [
        "📧 <b>New Portfolio Message</b>",
        "",
        f"👤 <b>From:</b> {html.escape(record.name)}",
        f"📧 <b>Email:</b> {html.escape(record.email)}",
    ]
    if record.company:
        lines.append(f"🏢 <b>Company:</b> {html.escape(record.company)}")
    lines.append(f"💬 <b>Message:</b>\n{html.escape(preview)}")
    return "\n".join(lines)


def notify_new_contact(record):
    """Best-effort owner notification; never raises"""
    try:
        return send_telegram_notification(format_contact_notification(record))
    except Exception as e:
        current_app.logger.error(f"Could not dispatch contact notification: {str(e)}")
        return False


__all__ = [
    'get_telegram_credentials',
    'send_telegram_notification',
    'format_contact_notification',
    'notify_new_contact',
]
