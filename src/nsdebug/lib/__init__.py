"""Reusable libraries bundled with nsdebug."""
