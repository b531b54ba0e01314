"""
Test suite for verlib

Contains:
- tests/unit/          : Unit tests for versions, constraints, contradictions and contracts
"""
