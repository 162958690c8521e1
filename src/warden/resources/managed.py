"""Named handle with a deterministic open/closed lifecycle."""

from __future__ import annotations

from contextlib import contextmanager
from types import TracebackType
from typing import Callable, Iterator, List, Optional, Tuple, Type

from rich.console import Console

from warden.config.settings import DEFAULT_DIAGNOSTIC_PREFIX, FaultSettings, Settings
from warden.errors import ResourceCloseError, ResourceClosedError, ResourceError, ResourceFaultyError
from warden.utils.events import LifecycleEvent, LifecycleEventKind, format_event

EventHandler = Callable[[LifecycleEvent], None]


class ManagedResource:
    """Exclusively owned resource that is open from construction until release.

    Construction acquires the handle and never fails. ``release`` closes it
    exactly once; later calls are no-ops. Used as a context manager the
    resource is released on every exit path, and release failures raised at
    that point are written to the diagnostic console instead of propagating.

    Instances cannot be copied. ``transfer`` moves ownership to a new instance
    and leaves this one inert.

    Configuration is resolved by the caller and only read here. Without
    ``settings`` the built-in fault sentinels and diagnostic prefix apply, so
    the environment is never consulted during acquisition.
    """

    def __init__(
        self,
        name: str,
        *,
        console: Optional[Console] = None,
        diagnostics: Optional[Console] = None,
        settings: Optional[Settings] = None,
        faults: Optional[FaultSettings] = None,
        on_event: Optional[EventHandler] = None,
    ) -> None:
        if faults is None:
            faults = settings.faults if settings is not None else FaultSettings()
        self._faults = faults
        self._diagnostic_prefix = settings.diagnostic_prefix if settings is not None else DEFAULT_DIAGNOSTIC_PREFIX
        self._console = console or Console(highlight=False)
        self._diagnostics = diagnostics or Console(stderr=True, highlight=False)
        self._on_event = on_event
        self._name = name
        self._is_open = True
        self._moved = False
        self._events: List[LifecycleEvent] = []
        self._emit(LifecycleEventKind.OPENED)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    @property
    def name(self) -> str:
        return self._name

    @property
    def is_open(self) -> bool:
        return self._is_open

    @property
    def moved(self) -> bool:
        """Whether ownership has been transferred away from this instance."""

        return self._moved

    @property
    def events(self) -> Tuple[LifecycleEvent, ...]:
        """Ordered lifecycle events recorded by this handle."""

        return tuple(self._events)

    def perform_operation(self) -> None:
        """Use the resource. Requires it to be open and not faulty."""

        if not self._is_open:
            raise ResourceClosedError(f"Resource {self._name} is closed")
        if self._faults.is_faulty(self._name):
            raise ResourceFaultyError(f"Resource {self._name} is faulty")
        self._emit(LifecycleEventKind.OPERATION)

    def release(self) -> None:
        """Close the resource.

        The handle is marked closed before teardown can fail, so a
        ``ResourceCloseError`` still leaves ``is_open`` false.
        """

        if not self._is_open:
            return

        self._is_open = False
        self._emit(LifecycleEventKind.CLOSED)
        if self._faults.is_failing(self._name):
            raise ResourceCloseError(f"Failed to close resource {self._name}")

    def transfer(self) -> "ManagedResource":
        """Move ownership to a new instance without releasing anything."""

        target = type(self).__new__(type(self))
        target._diagnostic_prefix = self._diagnostic_prefix
        target._faults = self._faults
        target._console = self._console
        target._diagnostics = self._diagnostics
        target._on_event = self._on_event
        target._name = self._name
        target._is_open = self._is_open
        target._moved = False
        target._events = self._events

        self._is_open = False
        self._moved = True
        self._events = []
        return target

    # ------------------------------------------------------------------
    # Scope management
    # ------------------------------------------------------------------
    def __enter__(self) -> "ManagedResource":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        traceback: Optional[TracebackType],
    ) -> None:
        self.release_on_exit()

    def release_on_exit(self) -> None:
        """Release for a cleanup path where nothing can receive the error."""

        try:
            self.release()
        except ResourceError as error:
            self._emit(
                LifecycleEventKind.DIAGNOSTIC,
                detail=f"{self._diagnostic_prefix}: {error.message}",
            )

    def __copy__(self) -> "ManagedResource":
        raise TypeError(f"{type(self).__name__} cannot be copied; use transfer()")

    def __deepcopy__(self, memo: dict) -> "ManagedResource":
        raise TypeError(f"{type(self).__name__} cannot be copied; use transfer()")

    def __reduce_ex__(self, protocol: object) -> object:
        raise TypeError(f"{type(self).__name__} cannot be pickled")

    def __repr__(self) -> str:
        state = "moved" if self._moved else ("open" if self._is_open else "closed")
        return f"<{type(self).__name__} {self._name!r} {state}>"

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _emit(self, kind: LifecycleEventKind, *, detail: str = "") -> None:
        line = format_event(kind, self._name, detail=detail)
        event = LifecycleEvent(kind=kind, resource_name=self._name, message=line)
        self._events.append(event)
        if self._on_event is not None:
            self._on_event(event)
        if kind is LifecycleEventKind.DIAGNOSTIC:
            self._diagnostics.print(line, style="yellow", markup=False, highlight=False)
        else:
            self._console.print(line, markup=False, highlight=False)


@contextmanager
def scoped(
    name: str,
    *,
    console: Optional[Console] = None,
    diagnostics: Optional[Console] = None,
    settings: Optional[Settings] = None,
    faults: Optional[FaultSettings] = None,
    on_event: Optional[EventHandler] = None,
) -> Iterator[ManagedResource]:
    """Acquire a resource for the duration of a ``with`` block."""

    with ManagedResource(
        name,
        console=console,
        diagnostics=diagnostics,
        settings=settings,
        faults=faults,
        on_event=on_event,
    ) as resource:
        yield resource


__all__ = ["EventHandler", "ManagedResource", "scoped"]
