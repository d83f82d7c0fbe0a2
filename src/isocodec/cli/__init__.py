"""Command-line interface for isocodec."""
