"""Name-day calendar queries.

The package parses the bundled Czech name-day calendar into immutable records and exposes small,
composable query functions over it (`namedays.calendar.queries`).
"""
