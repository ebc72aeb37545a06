"""HTTP middleware for the booking API."""
