"""Surfaces and scene composition."""
