"""
Attendees App - Who is coming and who pays

Attendees belong to exactly one event. Anyone holding the event link can add,
rename or remove them; there is no organizer/guest distinction. An attendee
flagged ``exclude_from_split`` does not take part in the equal split (kids,
the host who already paid for the venue, ...).

Bank info (holder, bank, CLABE) is kept per attendee for display and copy on
the settle-up screen only. Nothing here moves money.
"""
