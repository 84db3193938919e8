"""Graph adapters - Implementations of graph-related ports.

Available implementations:
- DelimitedGraphRepository: Loads a graph from vertex and edge record files
"""

from .record_repository import DelimitedGraphRepository

__all__ = ["DelimitedGraphRepository"]
