"""Command line interface for MBTA route search."""
