"""
Conformance Test Suite

This suite defines the NORMATIVE behavior of the simulator.

The tests are organized by invariant:
1. test_point_invariants.py - Per-point formulas and sequence shape
2. test_determinism.py - Identical inputs give identical results

These tests use hypothesis for property-based testing.
"""
