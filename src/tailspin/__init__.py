"""Tailspin Toys - crowdfunding campaign listing."""

__version__ = "1.0.0"
