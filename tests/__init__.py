"""
Test suite for the BigInt arithmetic engine

Contains:
- tests/unit/          : Unit tests for individual modules
- tests/property/      : Hypothesis property-based tests against Python int
"""
