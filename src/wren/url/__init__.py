"""URL handling — scheme normalization, splitting, and query parameters.

Pure functions over strings. Nothing here raises on malformed input;
bad URLs degrade to empty segments or an empty query map.
"""
