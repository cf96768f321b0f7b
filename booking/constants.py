"""
Constants for the booking app
"""

# Booking statuses
STATUS_CONFIRMED = 'confirmed'
STATUS_PENDING = 'pending'
STATUS_CANCELLED = 'cancelled'

# Slots are one hour long and priced at the turf's hourly rate
SLOT_DURATION_HOURS = 1

# Cancellation is allowed up to this many hours before the start
MIN_CANCEL_HOURS = 7

# Number of bookings shown in the dashboard summary
RECENT_BOOKINGS_LIMIT = 5

# Defaults for joined turf fields that may be missing
UNKNOWN_TURF_NAME = 'Unknown Turf'
UNKNOWN_TURF_LOCATION = 'Unknown location'
