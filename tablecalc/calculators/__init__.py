"""
Allocation rules and calculators.

A rule is a factory: create_calculator() returns a fresh calculator.
A calculator reads a Table and returns a CalculationResult.
"""
