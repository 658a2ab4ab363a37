"""Campus code ↔ campus id lookup used for virtual records.

Virtual records (records hosted by another campus of a shared consortium)
carry a textual campus code in every form except the database id, which
carries a numeric campus id instead. Translating between the two needs an
outside source of truth, so the lookup is the one asynchronous boundary of
the package.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Protocol, runtime_checkable

from sierra_record_id.models.database_id import MAX_CAMPUS_ID

__all__ = ["Resolver", "StaticResolver"]


@runtime_checkable
class Resolver(Protocol):
    """Structural protocol for campus lookups."""

    async def resolve_campus_id_from_code(self, campus_code: str) -> int:
        """Return the numeric campus id for a campus code."""
        ...

    async def resolve_campus_code_from_id(self, campus_id: int) -> str:
        """Return the campus code for a numeric campus id."""
        ...


class StaticResolver:
    """Resolver backed by a fixed in-memory mapping.

    Attributes
    ----------
    campus_ids : dict[str, int]
        Campus code to campus id.
    campus_codes : dict[int, str]
        Campus id to campus code.
    """

    def __init__(self, campus_ids: Mapping[str, int]) -> None:
        """Initialize resolver.

        Parameters
        ----------
        campus_ids : Mapping[str, int]
            Campus code to campus id. Ids must be unique and in 1..65535.

        Raises
        ------
        ValueError
            If an id is out of range or used by two codes.
        """
        self.campus_ids: dict[str, int] = dict(campus_ids)
        self.campus_codes: dict[int, str] = {}
        for code, campus_id in self.campus_ids.items():
            if not 1 <= campus_id <= MAX_CAMPUS_ID:
                raise ValueError(f"campus id for {code!r} must be in [1, {MAX_CAMPUS_ID}], got {campus_id}")
            if campus_id in self.campus_codes:
                raise ValueError(
                    f"campus id {campus_id} is used by both "
                    f"{self.campus_codes[campus_id]!r} and {code!r}"
                )
            self.campus_codes[campus_id] = code

    async def resolve_campus_id_from_code(self, campus_code: str) -> int:
        try:
            return self.campus_ids[campus_code]
        except KeyError:
            raise LookupError(f"Unknown campus code: {campus_code}") from None

    async def resolve_campus_code_from_id(self, campus_id: int) -> str:
        try:
            return self.campus_codes[campus_id]
        except KeyError:
            raise LookupError(f"Unknown campus id: {campus_id}") from None
