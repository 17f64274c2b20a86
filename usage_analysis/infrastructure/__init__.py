"""Infrastructure layer for device usage analysis.

This package contains implementations of domain interfaces
that interact with external systems (pandas, scikit-learn, XGBoost,
file storage) and the command entry point.
"""
