"""
RestoOPS package

This package provides a small in-memory management system for a single
restaurant: menu catalog, table booking, order capture and payment
settlement.  The domain objects, the management facade, seed data and
the console user interface live in distinct subpackages.
"""

__all__ = ["core", "domain", "data", "ui"]
