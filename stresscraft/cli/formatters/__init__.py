"""Output formatters for CLI commands."""

from .structure import StructureFormatter, structure_to_dict

__all__ = ["StructureFormatter", "structure_to_dict"]
