"""
Utility functions module.

Time handling for history entries. History timestamps are wall-clock
local time, rendered once when an entry is appended and never re-parsed.
"""
