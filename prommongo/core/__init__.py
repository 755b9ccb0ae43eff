"""Core infrastructure: settings, logging, protocols and the metrics facade."""
