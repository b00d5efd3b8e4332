"""
Introspection adapters for stresscraft.

This package contains the decorators that mark test classes and the
reflection-based introspector that describes them.
"""

from .class_introspector import ClassIntrospector
from .decorators import Param, op_group_config, operation, param

__all__ = ["ClassIntrospector", "Param", "operation", "param", "op_group_config"]
