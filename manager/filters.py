"""
Search box filtering for the manager tabs.

Matching is a case-insensitive substring test on already loaded records;
an empty search term keeps everything.
"""


def _contains(value, term):
    return term in (value or '').lower()


def filter_turfs(turfs, term):
    """Turfs whose name or location contains `term`"""
    term = (term or '').strip().lower()
    if not term:
        return list(turfs)
    return [t for t in turfs if _contains(t.name, term) or _contains(t.location, term)]


def filter_users(profiles, term):
    """Profiles whose username (the sign-up email) contains `term`"""
    term = (term or '').strip().lower()
    if not term:
        return list(profiles)
    return [p for p in profiles if _contains(p.username, term)]


def filter_bookings(rows, term):
    """Booking rows matching on turf name, status or the YYYY-MM-DD date"""
    term = (term or '').strip().lower()
    if not term:
        return list(rows)
    return [
        row for row in rows
        if _contains(row.turf_name, term)
        or _contains(row.status, term)
        or term in row.booking_date.isoformat()
    ]
