"""
Scouted services.

Linking and the end-to-end data pipeline.
"""

from scouted.services.linker import (
    builds_into,
    index_items,
    link_champions_to_traits,
    resolve_recipe,
)
from scouted.services.pipeline import (
    PayloadShapeError,
    build_scouted_data,
    fetch_all_data,
)

__all__ = [
    "PayloadShapeError",
    "build_scouted_data",
    "builds_into",
    "fetch_all_data",
    "index_items",
    "link_champions_to_traits",
    "resolve_recipe",
]
