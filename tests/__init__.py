"""
Test suite for the zCurve pricing engine

Contains:
- tests/unit/          : Unit tests for cost, calibration, quotes, contracts and sale flow
"""
