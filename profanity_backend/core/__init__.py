"""Core classification logic and domain exceptions."""
