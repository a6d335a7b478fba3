"""Infrastructure Layer: dataset loading and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from services/ or api/
    - Loader failures mapped to DatasetLoadError (core/errors.py)

Design Decisions:
    - Loader hands the store plain Person values; parsing stays out of core
"""
