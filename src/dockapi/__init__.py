"""REST API exposing the dock slip booking core."""
