"""line_audit: TODO, line-length and pattern scanner for C source trees."""

__all__ = [
    "__version__",
    "ScanConfig",
    "VARIANT_A",
    "VARIANT_B",
    "TreeWalker",
    "run_scan",
    "AnalyzingStrategy",
    "SearchingStrategy",
]
__version__ = "0.1.0"

from line_audit.core.config import ScanConfig, VARIANT_A, VARIANT_B  # noqa: E402, F401
from line_audit.core.runner import TreeWalker, run_scan  # noqa: E402, F401
from line_audit.strategies.analyzing import AnalyzingStrategy  # noqa: E402, F401
from line_audit.strategies.searching import SearchingStrategy  # noqa: E402, F401
