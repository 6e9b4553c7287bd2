from datetime import datetime

import pytz

from studentquiz.core.util import html_to_text, shorten_text, timestamp, \
    utc_dt


def test_html_to_text():
    assert html_to_text("<p>Hello <b>world</b></p>") == "Hello world"
    assert html_to_text("fish &amp; chips") == "fish & chips"
    assert html_to_text("a < b") == "a < b"
    assert html_to_text(None) == ""
    assert html_to_text("<p>&nbsp;</p>").strip() == ""


def test_shorten_text():
    assert shorten_text("short", 10) == "short"
    assert shorten_text("this is a long sentence", 12) == "this is a..."


def test_timestamp():
    assert timestamp(None) == 0
    dt = datetime(2020, 1, 1, tzinfo=pytz.utc)
    assert timestamp(dt) == 1577836800
    # naive datetimes are UTC
    assert timestamp(datetime(2020, 1, 1)) == 1577836800


def test_utc_dt():
    dt = utc_dt(datetime(2020, 1, 1, 12))
    assert dt.tzinfo is pytz.utc
