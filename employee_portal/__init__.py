"""Employee Management Portal: screen state for listing, creating, editing and deleting employees."""

__version__ = "1.0.0"
