"""Computational models."""
