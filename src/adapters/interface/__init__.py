"""Interface adapters."""

__all__ = []
