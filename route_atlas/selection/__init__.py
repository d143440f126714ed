"""
Route selection: which routes to draw for the current airport and filters.
"""

from .state import SelectionState
from .resolver import SelectionResolver, ResolvedSelection, ResolvedRoute

__all__ = [
    'SelectionState',
    'SelectionResolver',
    'ResolvedSelection',
    'ResolvedRoute',
]
