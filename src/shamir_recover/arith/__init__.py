"""Exact arithmetic exports."""
from .rational import ZERO, ExactRational

__all__ = ["ExactRational", "ZERO"]
