from datetime import datetime, timedelta, timezone

from ballotbox import lifecycle

START = datetime(2030, 1, 1, 12, 0, tzinfo=timezone.utc)
END = START + timedelta(hours=2)


def test_before_start_is_upcoming():
    now = START - timedelta(seconds=1)
    assert lifecycle.is_upcoming(START, now)
    assert not lifecycle.is_active(START, END, True, now)
    assert not lifecycle.has_ended(END, now)
    assert lifecycle.election_status(START, END, True, now) == lifecycle.UPCOMING


def test_start_instant_is_active():
    assert lifecycle.is_active(START, END, True, START)
    assert not lifecycle.is_upcoming(START, START)


def test_end_instant_is_active_and_not_ended():
    assert lifecycle.is_active(START, END, True, END)
    assert not lifecycle.has_ended(END, END)
    assert lifecycle.election_status(START, END, True, END) == lifecycle.ACTIVE


def test_after_end_is_ended():
    now = END + timedelta(milliseconds=1)
    assert lifecycle.has_ended(END, now)
    assert not lifecycle.is_active(START, END, True, now)
    assert lifecycle.election_status(START, END, True, now) == lifecycle.ENDED


def test_disabled_flag_inside_window():
    now = START + timedelta(minutes=30)
    assert not lifecycle.is_active(START, END, False, now)
    assert lifecycle.election_status(START, END, False, now) == lifecycle.INACTIVE


def test_naive_datetimes_are_treated_as_utc():
    naive_start = START.replace(tzinfo=None)
    assert lifecycle.is_active(naive_start, END, True, START)


def test_time_remaining():
    assert lifecycle.time_remaining(START, END, START - timedelta(minutes=5)) == timedelta(minutes=5)
    assert lifecycle.time_remaining(START, END, START + timedelta(minutes=30)) == timedelta(minutes=90)
    assert lifecycle.time_remaining(START, END, END + timedelta(minutes=1)) is None


def test_status_of_document_defaults_flag_to_active():
    doc = {"start_date": START, "end_date": END}
    assert lifecycle.status_of(doc, START) == lifecycle.ACTIVE
