"""Debounce rapidly changing values on the asyncio event loop."""

import asyncio
from typing import Any, Callable, Generic, Optional, TypeVar

T = TypeVar("T")


class DebounceScheduler(Generic[T]):
    """Emit only the latest value once input has been quiet for a delay.
    
    Every `schedule` call cancels the pending emission before arming a new
    timer, so at most one timer is outstanding. `close` cancels whatever is
    pending and makes further `schedule` calls no-ops.
    """
    
    def __init__(self, callback: Callable[[T], Any], delay_ms: int = 300) -> None:
        if delay_ms < 0:
            raise ValueError("Delay cannot be negative")
        self.callback = callback
        self.delay_ms = delay_ms
        self._handle: Optional[asyncio.TimerHandle] = None
        self._closed = False
    
    @property
    def pending(self) -> bool:
        """True while an emission is waiting to fire."""
        return self._handle is not None
    
    @property
    def closed(self) -> bool:
        return self._closed
    
    def schedule(self, value: T, delay_ms: Optional[int] = None) -> None:
        """Schedule `value` for emission, superseding any pending one.
        
        Must be called from a running event loop.
        """
        if self._closed:
            return
        
        delay = self.delay_ms if delay_ms is None else delay_ms
        loop = asyncio.get_running_loop()
        
        self.cancel()
        self._handle = loop.call_later(delay / 1000, self._fire, value)
    
    def cancel(self) -> None:
        """Drop the pending emission, if any."""
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
    
    def close(self) -> None:
        """Tear down: cancel pending emission and refuse new ones."""
        self.cancel()
        self._closed = True
    
    def _fire(self, value: T) -> None:
        self._handle = None
        self.callback(value)
    
    def __enter__(self) -> "DebounceScheduler[T]":
        return self
    
    def __exit__(self, *exc_info: object) -> None:
        self.close()
