"""Telemetry-to-chart core for Beyond The Apex."""
