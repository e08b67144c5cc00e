"""Rotating "<guest> in <host>" header.

``RotationScheduler`` is a plain state machine: a shuffled, immutable entry
sequence plus a cursor advanced by ``tick()``. It knows nothing about time.
``RotationTimer`` owns the asyncio task that ticks it periodically and must
be stopped explicitly when the display session ends.
"""

from __future__ import annotations

import asyncio
import contextlib
import random
from typing import TYPE_CHECKING

import structlog

from rust_interop.errors import ErrorCode, RustInteropError
from rust_interop.models.rotation import RotationEntry
from rust_interop.slugs import slugify

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from rust_interop.config import RotationSettings
    from rust_interop.models.library import LibraryRecord

    Shuffle = Callable[[list[LibraryRecord]], list[LibraryRecord]]
    OnTick = Callable[[RotationEntry], object]

log = structlog.get_logger()

DEFAULT_INTERVAL_MS = 3000


def random_shuffle(records: list[LibraryRecord]) -> list[LibraryRecord]:
    """Uniform random permutation, freshly drawn on every call."""
    return random.sample(records, k=len(records))


def build_entries(records: Sequence[LibraryRecord]) -> list[RotationEntry]:
    """Map records to rotation entries, skipping records without both languages."""
    entries: list[RotationEntry] = []
    for record in records:
        label = record.pair_label
        if label is None:
            log.debug("rotation_record_skipped", title=record.title)
            continue
        entries.append(RotationEntry(label=label, anchor=slugify(label)))
    return entries


class RotationScheduler:
    """Cyclic cursor over a shuffled sequence of rotation entries."""

    def __init__(self, records: Sequence[LibraryRecord], shuffle: Shuffle | None = None) -> None:
        shuffle = shuffle or random_shuffle
        entries = build_entries(shuffle(list(records)))
        if not entries:
            raise RustInteropError(
                ErrorCode.EMPTY_ROTATION,
                "Cannot rotate over an empty record collection",
            )
        self._entries: tuple[RotationEntry, ...] = tuple(entries)
        self._cursor = 0

    @property
    def entries(self) -> tuple[RotationEntry, ...]:
        return self._entries

    @property
    def cursor(self) -> int:
        return self._cursor

    def current_entry(self) -> RotationEntry:
        return self._entries[self._cursor % len(self._entries)]

    def tick(self) -> None:
        # Wrapped here as well as on read so the counter stays bounded.
        self._cursor = (self._cursor + 1) % len(self._entries)


class RotationTimer:
    """Cancellable periodic task driving a ``RotationScheduler``.

    ``start()`` always cancels a previously scheduled task before scheduling
    a new one, so restarting a session never stacks up timers. ``restart()``
    begins a new session with a freshly shuffled scheduler. Must be used
    from within a running event loop.
    """

    def __init__(
        self,
        scheduler: RotationScheduler,
        interval_ms: int = DEFAULT_INTERVAL_MS,
        on_tick: OnTick | None = None,
    ) -> None:
        if interval_ms <= 0:
            raise RustInteropError(
                ErrorCode.INVALID_CONFIG,
                f"Rotation interval must be positive, got {interval_ms} ms",
            )
        self._scheduler = scheduler
        self._interval = interval_ms / 1000
        self._on_tick = on_tick
        self._task: asyncio.Task[None] | None = None

    @classmethod
    def from_settings(
        cls,
        scheduler: RotationScheduler,
        settings: RotationSettings,
        on_tick: OnTick | None = None,
    ) -> RotationTimer:
        return cls(scheduler, interval_ms=settings.interval_ms, on_tick=on_tick)

    @property
    def scheduler(self) -> RotationScheduler:
        return self._scheduler

    @property
    def interval_ms(self) -> int:
        return round(self._interval * 1000)

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self, scheduler: RotationScheduler | None = None) -> None:
        """Schedule the tick loop, replacing any running one.

        Passing ``scheduler`` swaps in a new entry sequence for the new session.
        """
        if self._task is not None:
            self._task.cancel()
        if scheduler is not None:
            self._scheduler = scheduler
        self._task = asyncio.get_running_loop().create_task(self._run(self._scheduler))
        log.info("rotation_started", interval_ms=self.interval_ms)

    def restart(
        self, records: Sequence[LibraryRecord], shuffle: Shuffle | None = None
    ) -> RotationScheduler:
        """Start a new session over ``records`` with a fresh permutation."""
        # Build first: an empty collection must not cancel the running session.
        scheduler = RotationScheduler(records, shuffle=shuffle)
        self.start(scheduler)
        return scheduler

    async def stop(self) -> None:
        """Cancel the task and wait for it to finish. No-op when not running."""
        task, self._task = self._task, None
        if task is None:
            return
        task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await task
        log.info("rotation_stopped", cursor=self._scheduler.cursor)

    async def _run(self, scheduler: RotationScheduler) -> None:
        while True:
            await asyncio.sleep(self._interval)
            scheduler.tick()
            if self._on_tick is None:
                continue
            try:
                self._on_tick(scheduler.current_entry())
            except Exception:
                log.warning("rotation_callback_error", exc_info=True)

    async def __aenter__(self) -> RotationTimer:
        self.start()
        return self

    async def __aexit__(self, *exc: object) -> None:
        await self.stop()
