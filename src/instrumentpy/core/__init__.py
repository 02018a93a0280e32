"""Measurement core: gauge time series and span snapshots."""
