"""Application layer for device usage analysis."""
