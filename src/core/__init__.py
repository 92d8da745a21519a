"""
Core domain models, arithmetic primitives, and invariants.

This module contains the arbitrary-precision integer engine: the BigInt
entity, decimal parsing, limb-wise addition and decimal rendering.
"""
