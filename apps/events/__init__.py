"""
Events App - Carne asada gatherings

An event is the root of everything else: attendees, the shopping list,
expenses and payments all hang off it. Events are addressed publicly by a
short 10-character id (``nano_id``) so they can be shared by link; the UUID
primary key never leaves the server in URLs.

Key Features:
- Event creation with a future date and a collision-checked public id
- Partial updates from the settings screen
- Soft delete ("cancel") that leaves every child row intact
- Hard delete that cascades
- Countdown to the event for the landing page
"""
