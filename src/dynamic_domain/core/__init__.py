"""
Core domain models, mathematical primitives, and invariants.

This module contains the interval-set algebra and the data contract used to
exchange domains with downstream consumers.
"""
