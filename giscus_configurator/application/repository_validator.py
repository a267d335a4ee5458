import asyncio
import logging
from typing import Awaitable, Callable, List, Set

from giscus_configurator.domain.exceptions import UnknownCategoryException
from giscus_configurator.domain.models import (
    Category,
    Error,
    Idle,
    Pending,
    RepositoryLookup,
    Success,
    ValidationResult,
    ValidatorSnapshot,
)

logger = logging.getLogger(__name__)

Lookup = Callable[[str], Awaitable[RepositoryLookup]]
Listener = Callable[[ValidationResult], None]


class RepositoryValidator:
    """
    Tracks whether the settled repository identifier can host giscus.

    States move Idle -> Pending -> Success | Error, and any state goes back to
    Idle on an empty identifier or to a fresh Pending on a new one. Each
    submission bumps an epoch; a lookup result is applied only if the epoch it
    was issued under is still the current one, so a slow answer for an old
    identifier never overwrites the state of a newer one.

    The selected category lives here too and is cleared on every transition,
    since an id chosen for one repository means nothing for the next.
    """

    def __init__(self, lookup: Lookup):
        self._lookup = lookup
        self._epoch = 0
        self._state: ValidationResult = Idle()
        self._category_id = ""
        self._listeners: List[Listener] = []
        self._tasks: Set[asyncio.Task] = set()

    @property
    def state(self) -> ValidationResult:
        return self._state

    @property
    def epoch(self) -> int:
        return self._epoch

    @property
    def repository_id(self) -> str:
        return self._state.repository_id if isinstance(self._state, Success) else ""

    @property
    def categories(self) -> List[Category]:
        return list(self._state.categories) if isinstance(self._state, Success) else []

    @property
    def category_id(self) -> str:
        return self._category_id

    def snapshot(self) -> ValidatorSnapshot:
        return ValidatorSnapshot(
            repository_id=self.repository_id,
            category_id=self._category_id,
            categories=self.categories,
        )

    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def submit(self, identifier: str) -> None:
        """
        Starts validating a newly settled identifier, superseding any earlier one.
        Settling on the identifier already being tracked changes nothing.
        """
        if identifier == getattr(self._state, "repository", ""):
            logger.debug(f"Identifier {identifier!r} unchanged; keeping {self._state.status} state.")
            return

        self._epoch += 1
        epoch = self._epoch

        if not identifier:
            self._transition(Idle())
            return

        self._transition(Pending(repository=identifier))
        task = asyncio.create_task(self._run_lookup(identifier, epoch))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    async def _run_lookup(self, identifier: str, epoch: int) -> None:
        try:
            result = await self._lookup(identifier)
        except Exception as e:
            if epoch != self._epoch:
                logger.debug(f"Discarding stale lookup failure for {identifier} (epoch {epoch}).")
                return
            logger.warning(f"Lookup for {identifier} failed: {e}")
            self._transition(Error(repository=identifier, reason=str(e)))
            return

        if epoch != self._epoch:
            logger.debug(f"Discarding stale lookup result for {identifier} (epoch {epoch}).")
            return

        if not result.categories:
            self._transition(Error(repository=identifier, reason="repository has no discussion categories"))
            return

        self._transition(Success(
            repository=identifier,
            repository_id=result.repository_id,
            categories=result.categories,
        ))

    def _transition(self, state: ValidationResult) -> None:
        logger.debug(f"Validator {self._state.status} -> {state.status} (epoch {self._epoch}).")
        self._state = state
        self._category_id = ""
        for listener in list(self._listeners):
            listener(state)

    def select_category(self, category_id: str) -> None:
        if category_id and category_id not in {category.id for category in self.categories}:
            raise UnknownCategoryException(category_id)
        self._category_id = category_id

    async def wait(self) -> None:
        """Waits for every outstanding lookup to finish."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks))

    async def aclose(self) -> None:
        for task in list(self._tasks):
            task.cancel()
        await asyncio.gather(*list(self._tasks), return_exceptions=True)
        self._listeners.clear()
