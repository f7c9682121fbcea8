# Path: pod_verifier/engine/constants/display.py
"""
Display Constants for Entry Formatting

Field-name heuristics used to present verified entries:
important fields, category rules, glyph prefixes and length caps.
All lookups are by lower-cased substring of the entry name.
"""

from enum import Enum


class EntryCategory(str, Enum):
    """Display category of an entry, assigned from its name."""

    PERSONAL = 'personal'
    EVENT = 'event'
    TIMESTAMP = 'timestamp'
    TECHNICAL = 'technical'
    OTHER = 'other'


# Sort rank, lowest first
CATEGORY_ORDER = [
    EntryCategory.PERSONAL,
    EntryCategory.EVENT,
    EntryCategory.TIMESTAMP,
    EntryCategory.TECHNICAL,
    EntryCategory.OTHER,
]

# ==============================================================================
# CATEGORY RULES
# ==============================================================================
# Format: (category, substrings). First rule with a matching substring wins.
# Names containing both "event" and "name" skip the personal rule.

CATEGORY_RULES = [
    (EntryCategory.PERSONAL, ('name', 'email', 'attendee')),
    (EntryCategory.EVENT, ('event', 'ticket', 'product')),
    (EntryCategory.TIMESTAMP, ('timestamp', 'date', 'time')),
    (EntryCategory.TECHNICAL, ('id', 'secret', 'key', 'consumed', 'revoked', 'addon')),
]

CATEGORY_INFO = {
    EntryCategory.PERSONAL: ('👤', 'Personal'),
    EntryCategory.EVENT: ('🎫', 'Event'),
    EntryCategory.TIMESTAMP: ('⏰', 'Timestamp'),
    EntryCategory.TECHNICAL: ('⚙️', 'Technical'),
    EntryCategory.OTHER: ('📄', 'Other'),
}

# ==============================================================================
# IMPORTANT FIELDS
# ==============================================================================
IMPORTANT_FIELDS = frozenset([
    'attendeeName',
    'attendeeEmail',
    'eventName',
    'ticketName',
    'eventLocation',
])

# ==============================================================================
# FORMATTED VALUE PREFIXES
# ==============================================================================
PREFIX_EMAIL = '📧'
PREFIX_PERSON = '👤'
PREFIX_EVENT = '🎫'
PREFIX_LOCATION = '📍'
PREFIX_URL = '🔗'
PREFIX_SECRET = '🔐'
PREFIX_ID = '🆔'

BOOLEAN_YES = '✅ Yes'
BOOLEAN_NO = '❌ No'

CATEGORY_NUMBER_LABEL = 'Category'

# ==============================================================================
# LENGTH CAPS
# ==============================================================================
SECRET_DISPLAY_LENGTH = 20
ID_DISPLAY_LENGTH = 30
ELLIPSIS = '...'

# Report prefixes shortened to this many characters
SUMMARY_PREFIX_LENGTH = 16

# ==============================================================================
# DATE FORMATS
# ==============================================================================
# Timestamps are epoch milliseconds, rendered in UTC
TIMESTAMP_FORMAT = '{month} {day}, {year}, {clock} UTC'
TIMESTAMP_CLOCK = '%I:%M:%S %p'
DATE_CLOCK = '%I:%M %p'
