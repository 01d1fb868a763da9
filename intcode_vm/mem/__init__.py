"""Intcode VM - memory."""
