"""Packaged speaker-label configurations."""
