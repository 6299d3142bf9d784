"""Offline maintenance scripts."""
