"""Infrastructure Layer — file access and cross-cutting concerns.

Invariants:
    - All file IO lives here; core/ receives bytes, never paths
    - OS errors mapped to SourceReadError (core/errors.py)
"""
