"""
core package
------------
Cross-cutting infrastructure: exceptions, logging, paths and validation.
"""
