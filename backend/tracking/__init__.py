"""Customer Tracking API: owner-scoped customer records behind token authentication."""

__version__ = "1.0.0"
