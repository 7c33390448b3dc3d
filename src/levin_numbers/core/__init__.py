"""
Core numeric primitives, JSON contracts, and invariants.

This package contains the arbitrary-precision engines and the contracts
describing their canonical representations. It has no I/O of its own.
"""
