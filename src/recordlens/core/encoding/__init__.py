"""Encoders for records and analysis results."""
