"""
Test suite for cbor-number-kinds

Contains:
- tests/unit/          : Unit tests for math helpers, domain models, kinds and contracts
"""
