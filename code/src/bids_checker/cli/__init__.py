"""Command line interface for bids-checker."""
