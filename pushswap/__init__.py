"""Stacks, push-swap operations, sorting routines and benchmark reports."""

__version__ = "0.1.0"