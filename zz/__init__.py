"""zz package."""

__all__ = [
    "errors",
    "listing",
    "store",
    "utils",
]
