"""Routing — pattern compilation and first-registered-wins URL matching.

Patterns are compiled once at registration and matched in registration
order against split URLs.
"""
