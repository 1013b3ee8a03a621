"""
Expiry date parsing and formatting.

Dates use the US English medium format ("Jul 1, 2012"). Month names are resolved
through a pinned `QLocale` so parsing does not depend on the host's locale, and a
calendar date maps to midnight UTC of that day.
"""

import time
from datetime import datetime, timezone

from PyQt6.QtCore import QDate, QLocale

from buildconfig import constants


def _expiry_locale() -> QLocale:
    return QLocale(constants.config.defaults.EXPIRY_DATE_LOCALE)


def parse_expiry_date(text: str) -> int:
    """
    Parse an expiry date such as "Jul 1, 2012" into epoch milliseconds.

    Surrounding whitespace is ignored.

    Raises:
        ValueError: If the text is blank or not a valid date in the expected format.
    """
    if text is None or not text.strip():
        raise ValueError("Expiry date is empty")

    qdate: QDate = _expiry_locale().toDate(text.strip(), constants.config.defaults.EXPIRY_DATE_FORMAT)
    if not qdate.isValid():
        raise ValueError(f"Expiry date '{text}' does not match '{constants.config.defaults.EXPIRY_DATE_FORMAT}'")

    midnight = datetime(qdate.year(), qdate.month(), qdate.day(), tzinfo=timezone.utc)
    return int(midnight.timestamp()) * 1000


def format_expiry_date(timestamp: int) -> str:
    """Format epoch milliseconds back into the expiry date format. Returns "" for the never-expires sentinel."""
    if timestamp >= constants.config.defaults.NEVER_EXPIRES_MS:
        return ""
    moment = datetime.fromtimestamp(timestamp / 1000, tz=timezone.utc)
    qdate = QDate(moment.year, moment.month, moment.day)
    return _expiry_locale().toString(qdate, constants.config.defaults.EXPIRY_DATE_FORMAT)


def now_ms() -> int:
    """Current wall-clock time in epoch milliseconds."""
    return int(time.time() * 1000)
