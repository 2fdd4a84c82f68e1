"""Concrete Surface backends (Pillow image buffer, pygame surface)."""
