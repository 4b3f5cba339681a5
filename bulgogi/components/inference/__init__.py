"""
Inference package.
"""

from .usage_inference_comp import find_entry_conflicts, infer_usages, resolve

__all__ = [
    "find_entry_conflicts",
    "infer_usages",
    "resolve",
]
