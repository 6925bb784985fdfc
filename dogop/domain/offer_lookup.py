"""Outcome of looking up a single offer by identifier."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from dogop.schemas.offer import Offer


@dataclass(frozen=True, slots=True)
class Found:
    offer: Offer


@dataclass(frozen=True, slots=True)
class NotFound:
    """No offer is stored under the requested identifier.

    Distinct from StorageFailure: the query ran and returned no row.
    """


@dataclass(frozen=True, slots=True)
class StorageFailure:
    detail: str


OfferLookup = Union[Found, NotFound, StorageFailure]
