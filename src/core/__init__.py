"""
Core constants, domain models, integer math primitives, and invariants.

This module contains the zCurve pricing engine, which is independent
of external systems (wallets, indexers, UI).
"""
