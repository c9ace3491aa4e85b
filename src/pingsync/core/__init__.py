"""Core infrastructure: settings, logging, errors, config loading."""
