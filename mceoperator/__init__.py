"""MultiClusterEngine resource model, component overrides and legacy monitoring lookups."""

__version__ = "0.1.0"
__all__ = ["components", "types"]