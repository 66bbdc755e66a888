"""Duplicate removal and reference repair for structural building models."""

__version__ = "0.1.0"
