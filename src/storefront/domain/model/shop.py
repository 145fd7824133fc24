"""Shop entity.

Shops are owned by the marketplace admin; order calculations only ever
look them up by id to show their name.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Shop:
    id: str
    name: str
