"""Notary Ally: record keeping for a working notary.

Appointments, a mileage log, a notarization journal with captured
signatures, and county / distance lookups backed by an LLM.
"""

__version__ = "0.1.0"
