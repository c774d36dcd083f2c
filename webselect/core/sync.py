"""
Blocking wrappers for webselect's async API.

Coroutines run on one background event loop per process, so selections can
be driven from plain scripts and REPL sessions. Each call blocks until its
coroutine finishes or the timeout expires.
"""

import asyncio
import atexit
import functools
import os
import threading
from typing import (
    TYPE_CHECKING,
    Any,
    Awaitable,
    Callable,
    ClassVar,
    Optional,
    TypeVar,
    Union,
)

from webselect.config.defaults import DEFAULT_SYNC_TIMEOUT
from webselect.selection.base import MultiSelection, Selection

if TYPE_CHECKING:
    from webselect.config.options import ClientOptions
    from webselect.page import Page

T = TypeVar("T")


def _inside_event_loop() -> bool:
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        return False
    return True


class EventLoopManager:
    """Owns the background thread that runs webselect's event loop.

    One manager is shared per process. ``get_instance`` creates it on first
    use and ``reset`` stops and discards it.
    """

    _instance: ClassVar[Optional["EventLoopManager"]] = None
    _instance_lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(self) -> None:
        self._loop: Optional[asyncio.AbstractEventLoop] = None
        self._thread: Optional[threading.Thread] = None
        self._start_lock = threading.Lock()

    @classmethod
    def get_instance(cls) -> "EventLoopManager":
        with cls._instance_lock:
            if cls._instance is None:
                cls._instance = cls()
            return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Stop and discard the shared manager."""
        with cls._instance_lock:
            instance, cls._instance = cls._instance, None
        if instance is not None:
            instance.shutdown()

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def ensure_started(self) -> asyncio.AbstractEventLoop:
        """Start the loop thread if needed and return its loop."""
        with self._start_lock:
            if self._loop is None or not self.running:
                loop = asyncio.new_event_loop()
                ready = threading.Event()
                thread = threading.Thread(
                    target=self._serve,
                    args=(loop, ready),
                    name="webselect-event-loop",
                    daemon=True,
                )
                thread.start()
                ready.wait()
                self._loop, self._thread = loop, thread
            return self._loop

    @staticmethod
    def _serve(loop: asyncio.AbstractEventLoop, ready: threading.Event) -> None:
        asyncio.set_event_loop(loop)
        loop.call_soon(ready.set)
        try:
            loop.run_forever()
        finally:
            leftovers = asyncio.all_tasks(loop)
            for task in leftovers:
                task.cancel()
            loop.run_until_complete(asyncio.gather(*leftovers, return_exceptions=True))
            loop.run_until_complete(loop.shutdown_asyncgens())
            loop.close()

    def run_coroutine(
        self,
        coro: Awaitable[T],
        timeout: Optional[float] = None,
    ) -> T:
        """Block until ``coro`` has run on the background loop.

        Args:
            coro: Coroutine to run.
            timeout: Seconds to wait, None waits forever.

        Raises:
            RuntimeError: If called while an event loop is running in this
                thread.
            TimeoutError: If the coroutine does not finish in time. The
                coroutine is cancelled.
        """
        if _inside_event_loop():
            if asyncio.iscoroutine(coro):
                coro.close()
            raise RuntimeError(
                "blocking webselect calls cannot run inside a running event loop, "
                "await the async API instead"
            )

        future = asyncio.run_coroutine_threadsafe(coro, self.ensure_started())
        try:
            return future.result(timeout)
        except TimeoutError:
            if future.done():
                raise
            future.cancel()
            raise TimeoutError(f"webselect call did not finish within {timeout} seconds") from None

    def shutdown(self, timeout: float = 5.0) -> None:
        """Stop the loop and join its thread."""
        loop, thread = self._loop, self._thread
        self._loop = self._thread = None
        if loop is not None and thread is not None and thread.is_alive():
            loop.call_soon_threadsafe(loop.stop)
            thread.join(timeout)


atexit.register(EventLoopManager.reset)


def run_sync(
    coro: Awaitable[T],
    timeout: Optional[float] = DEFAULT_SYNC_TIMEOUT,
) -> T:
    """Run a coroutine to completion from synchronous code.

    Example:
        run_sync(page.find("#submit").click())
    """
    return EventLoopManager.get_instance().run_coroutine(coro, timeout)


def make_sync(
    async_func: Callable[..., Awaitable[T]],
    timeout: Optional[float] = DEFAULT_SYNC_TIMEOUT,
) -> Callable[..., T]:
    """Turn a coroutine function into a blocking function."""

    @functools.wraps(async_func)
    def blocking(*args: Any, **kwargs: Any) -> T:
        return run_sync(async_func(*args, **kwargs), timeout=timeout)

    return blocking


class _SyncSelectable:
    """Chaining shared by SyncSelection and SyncPage.

    Any ``find*``, ``first*`` or ``all*`` method of the wrapped object is
    available and returns a wrapped selection.
    """

    _CHAIN_PREFIXES = ("find", "first", "all")

    def __init__(self, wrapped: Any, timeout: Optional[float]) -> None:
        self._async = wrapped
        self._timeout = timeout

    def _wrap(self, selection: Selection) -> "SyncSelection":
        return SyncSelection(selection, self._timeout)

    def __getattr__(self, name: str) -> Any:
        if not name.startswith(self._CHAIN_PREFIXES):
            raise AttributeError(name)
        method = getattr(self._async, name)

        @functools.wraps(method)
        def chain(*args: Any, **kwargs: Any) -> "SyncSelection":
            return self._wrap(method(*args, **kwargs))

        return chain


class SyncSelection(_SyncSelectable):
    """Blocking wrapper around a Selection.

    Example:
        checkboxes = SyncPage.open().all("input[type=checkbox]")
        checkboxes.check()
    """

    def __init__(
        self,
        selection: Selection,
        timeout: Optional[float] = DEFAULT_SYNC_TIMEOUT,
    ) -> None:
        super().__init__(selection, timeout)

    @property
    def selection(self) -> Selection:
        """Get the wrapped async selection."""
        return self._async

    def _run(self, coro: Awaitable[T]) -> T:
        return run_sync(coro, self._timeout)

    def at(self, index: int) -> "SyncSelection":
        if not isinstance(self._async, MultiSelection):
            raise AttributeError("at() is only available on multi-selections")
        return self._wrap(self._async.at(index))

    # Actions

    def click(self) -> None:
        self._run(self._async.click())

    def double_click(self) -> None:
        self._run(self._async.double_click())

    def fill(self, text: str) -> None:
        self._run(self._async.fill(text))

    def upload_file(self, path: Union[str, "os.PathLike[str]"]) -> None:
        self._run(self._async.upload_file(path))

    def check(self) -> None:
        self._run(self._async.check())

    def uncheck(self) -> None:
        self._run(self._async.uncheck())

    def select(self, text: str) -> None:
        self._run(self._async.select(text))

    def submit(self) -> None:
        self._run(self._async.submit())

    def mouse_to_element(self) -> None:
        self._run(self._async.mouse_to_element())

    # Properties

    def count(self) -> int:
        return self._run(self._async.count())

    def text(self) -> str:
        return self._run(self._async.text())

    def attribute(self, name: str) -> Optional[str]:
        return self._run(self._async.attribute(name))

    def css(self, property_name: str) -> str:
        return self._run(self._async.css(property_name))

    def selected(self) -> bool:
        return self._run(self._async.selected())

    def visible(self) -> bool:
        return self._run(self._async.visible())

    def enabled(self) -> bool:
        return self._run(self._async.enabled())

    def equals_element(self, other: "SyncSelection") -> bool:
        return self._run(self._async.equals_element(other.selection))

    def __str__(self) -> str:
        return str(self._async)

    def __repr__(self) -> str:
        return f"<SyncSelection {self._async.description!r}>"


class SyncPage(_SyncSelectable):
    """Blocking wrapper around a Page."""

    def __init__(
        self,
        page: "Page",
        timeout: Optional[float] = DEFAULT_SYNC_TIMEOUT,
    ) -> None:
        super().__init__(page, timeout)

    @classmethod
    def open(
        cls,
        url: Optional[str] = None,
        capabilities: Optional[dict[str, Any]] = None,
        *,
        options: Optional["ClientOptions"] = None,
    ) -> "SyncPage":
        """Create a new remote session and return its blocking page."""
        from webselect.page import Page

        timeout = options.sync_timeout if options is not None else DEFAULT_SYNC_TIMEOUT
        page = run_sync(Page.open(url, capabilities, options=options), timeout)
        return cls(page, timeout)

    @property
    def page(self) -> "Page":
        return self._async

    def close(self) -> None:
        run_sync(self._async.close(), self._timeout)

    def __enter__(self) -> "SyncPage":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()


__all__ = [
    "EventLoopManager",
    "run_sync",
    "make_sync",
    "SyncSelection",
    "SyncPage",
]
