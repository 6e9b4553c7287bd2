"""Various tools that don't belong some place specific."""
from datetime import datetime
from typing import Optional

import bleach
import pytz


def utcnow() -> datetime:
    """Return a new aware datetime with current date and time, in UTC TZ."""
    return datetime.now(pytz.utc)


def utc_dt(dt: datetime) -> datetime:
    """Set UTC timezone on a datetime object.

    A naive datetime is assumed to be in UTC TZ.
    """
    if not dt.tzinfo:
        return pytz.utc.localize(dt)
    return dt.astimezone(pytz.utc)


def timestamp(dt: Optional[datetime]) -> int:
    """Unix timestamp of `dt`, 0 when `dt` is not set."""
    if dt is None:
        return 0
    return int(utc_dt(dt).timestamp())


def html_to_text(html: Optional[str]) -> str:
    """Strip all tags from `html`, return plain text."""
    if not html:
        return ""
    text = bleach.clean(html, tags=[], attributes={}, strip=True)
    # bleach escapes what remains; we want plain text back
    return (
        text.replace("&nbsp;", " ")
        .replace("&lt;", "<")
        .replace("&gt;", ">")
        .replace("&quot;", '"')
        .replace("&amp;", "&")
    )


def shorten_text(text: str, length: int) -> str:
    """Shorten `text` to at most `length` characters, cutting on a word
    boundary when possible."""
    if len(text) <= length:
        return text
    cut = text[:length]
    if " " in cut:
        cut = cut.rsplit(" ", 1)[0]
    return cut.rstrip() + "..."
