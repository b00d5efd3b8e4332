"""
Port interfaces for the stresscraft system.

This module contains the interface definitions using Python Protocols
to define contracts between the application layer and adapters.
"""

from .introspection_port import IntrospectionPort

__all__ = ["IntrospectionPort"]
