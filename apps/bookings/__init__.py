"""Offer requests: booking, lifecycle handling and the timeout sweep."""
