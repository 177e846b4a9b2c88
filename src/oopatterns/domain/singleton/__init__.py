"""Singleton pattern demonstration."""
from .identity import IdentityReport, check_singleton_identity
from .singleton import Singleton

__all__ = ["IdentityReport", "Singleton", "check_singleton_identity"]
