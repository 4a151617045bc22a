"""
Infrastructure for activating interaction types.
"""

from .communication import CommunicationInfrastructure

__all__ = [
    "CommunicationInfrastructure"
]
