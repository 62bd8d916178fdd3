"""Verb registry, execution and launch services."""
