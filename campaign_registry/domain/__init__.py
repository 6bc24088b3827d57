"""Domain layer for the campaign registry.

Pure models, errors and validation rules. Nothing here performs I/O.
"""
