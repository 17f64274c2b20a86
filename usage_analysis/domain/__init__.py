"""Domain layer for device usage analysis.

This package contains the core logic for cleaning usage records,
partitioning them and evaluating classifiers, following Domain-Driven
Design (DDD) principles.

Value objects, interfaces and exceptions are plain Python. Services use
numpy, pandas and scikit-learn for splitting, encoding, scoring and
statistics; model backends, file I/O and configuration live in
infrastructure.
"""
