"""Load and reload plumbing shared by the screen view-models.

A screen loads its collections as independent fetches and waits for all
of them. If one fails the rest are cancelled; ``load_or_empty`` then
logs the failure and hands back an empty, degraded snapshot so the
screen renders its empty state instead of erroring.

Mutations are awaited first; the owning view is re-queried only when the
mutation succeeded.
"""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Awaitable, Callable, Generic, Optional, TypeVar

from app.core.errors import RecordStoreError
from app.repositories.records import Repositories

logger = logging.getLogger(__name__)

R = TypeVar("R")
S = TypeVar("S")


@dataclass
class Snapshot:
    """Collections loaded for one screen. Unloaded collections stay empty."""
    businesses: list = field(default_factory=list)
    leads: list = field(default_factory=list)
    campaigns: list = field(default_factory=list)
    appointments: list = field(default_factory=list)
    interactions: list = field(default_factory=list)
    degraded: bool = False


async def load_collections(**loads: Awaitable[list]) -> dict[str, list]:
    """Run the named loads concurrently and return their results by name."""
    tasks = {name: asyncio.ensure_future(load) for name, load in loads.items()}
    try:
        await asyncio.gather(*tasks.values())
    except BaseException:
        pending = [task for task in tasks.values() if not task.done()]
        for task in pending:
            task.cancel()
        if pending:
            logger.debug("Cancelled %d in-flight loads", len(pending))
        await asyncio.gather(*tasks.values(), return_exceptions=True)
        raise
    return {name: task.result() for name, task in tasks.items()}


@dataclass
class MutationResult(Generic[R, S]):
    record: Optional[R]
    view: S


async def mutate_and_reload(
    mutation: Awaitable[R],
    reload: Callable[[], Awaitable[S]],
) -> MutationResult[R, S]:
    """Await ``mutation``; on success re-query the view with ``reload``."""
    record = await mutation
    view = await reload()
    return MutationResult(record=record, view=view)


class ScreenStore:
    """Base for the per-screen view-models.

    Subclasses name the collections they need in ``loads`` and the sort
    order each one is fetched with.
    """

    name = "screen"
    loads: dict[str, Optional[dict[str, str]]] = {}

    def __init__(self, repos: Repositories):
        self.repos = repos

    async def load(self, user_id: str) -> Snapshot:
        results = await load_collections(**{
            collection: getattr(self.repos, collection).list(user_id, order_by=order_by)
            for collection, order_by in self.loads.items()
        })
        return Snapshot(**results)

    async def load_or_empty(self, user_id: str) -> Snapshot:
        try:
            return await self.load(user_id)
        except (RecordStoreError, OSError):
            logger.exception("Error loading %s data for user %s", self.name, user_id)
            return Snapshot(degraded=True)

    async def _check_references(self, user_id: str, **refs: Optional[str]) -> None:
        """Make sure every referenced id is one of the user's own records.

        ``refs`` maps a repository name to an id; ``None`` ids are skipped.
        Raises RecordNotFoundError for an id the user does not own.
        """
        for collection, record_id in refs.items():
            if record_id is not None:
                await getattr(self.repos, collection).get(user_id, record_id)

    async def _then_reload(self, user_id: str, mutation: Awaitable[R]) -> MutationResult[R, Snapshot]:
        return await mutate_and_reload(mutation, lambda: self.load_or_empty(user_id))
