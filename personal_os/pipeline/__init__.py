"""
pipeline package
----------------
Derived data built from parsed records (dashboard chart aggregation).
"""
