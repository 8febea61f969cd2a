"""
Deterministic calculation engine for plate work and light structures.

Pure Python math. Each shape is one function taking its dimension record
and a material id and returning a CalculationResult: flat-pattern geometry,
cut templates, weights and step-by-step fabrication instructions.
"""
