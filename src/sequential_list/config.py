"""Configuration for SequentialList.

Defines the tunable parameters for rendering a list.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ListConfig:
    """Configuration parameters for SequentialList.

    Attributes:
        repr_max_items: Number of values shown by repr() before truncating
        repr_separator: Separator placed between rendered values
    """

    repr_max_items: int = 10
    repr_separator: str = " -> "
