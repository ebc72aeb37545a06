"""Utility helpers shared by the booking core and the API."""
