"""strslicer - carve strings into non-owning views by delimiter search.

A parsing primitive: a forward-only cursor over an immutable source string
that consumes text up to or past delimiters and returns views of it.

Public API:
    StrSlicer - Cursor over a source string
    as_slicer - Construct a StrSlicer (optionally with a tracker)
    StrView - Non-owning [start, end) span of a source
    Tracker - Protocol for position observers
    LineTracker - Tracker counting lines passed

Exceptions:
    SlicerError - Base exception class
    SlicerPositionError - Invalid jump target

Submodules:
    strslicer.patterns - Delimiter and predicate matching
    strslicer.position - Line/column helpers
    strslicer.diagnostics - Error codes, diagnostics and formatting
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .diagnostics import SlicerError, SlicerPositionError
from .slicer import StrSlicer, as_slicer
from .trackers import LineTracker, Tracker
from .view import StrView

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    __version__ = _get_version("strslicer")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "LineTracker",
    "SlicerError",
    "SlicerPositionError",
    "StrSlicer",
    "StrView",
    "Tracker",
    "__version__",
    "as_slicer",
]
