"""Flask web UI and API for Tailspin Toys."""
