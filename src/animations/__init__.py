"""
Animation authoring

- builder: immutable fluent builder producing Interrupt/Queue actions
- properties: property constructors and color channel helpers
"""

__all__ = [
    "builder",
    "properties",
]
