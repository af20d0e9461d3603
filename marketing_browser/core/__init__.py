"""
Core domain layer: the record dataset, the filter/sort/paginate pipeline
and the view coordinator that owns the interaction state
"""

from .dataset import ALL, Dataset, Record
from .state import FilterSelection, PageState, SortSelection, ViewState
from .view_coordinator import ViewCoordinator, ViewSnapshot

__all__ = [
    "ALL",
    "Dataset",
    "Record",
    "FilterSelection",
    "SortSelection",
    "PageState",
    "ViewState",
    "ViewCoordinator",
    "ViewSnapshot",
]
