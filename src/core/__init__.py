"""
Core numeric primitives of the CBOR codec.

This module contains the value models, exact-fit math, errors and contracts
that every numeric kind is built on. It does not depend on the byte-level
reader/writer of the codec.
"""
