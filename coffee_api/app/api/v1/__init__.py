"""
Version 1 of the API.

Bundles the coffee collection endpoints together with the
configuration echo endpoints (``/droid`` and ``/greeting``).
"""
