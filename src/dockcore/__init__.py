"""Dock slip booking core: availability, pricing and cancellation refunds."""

__version__ = "0.1.0"
