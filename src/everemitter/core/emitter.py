from __future__ import annotations

import logging
import threading

from types import TracebackType
from typing import Any, Callable, ParamSpec, overload

from .listener import Callback, Listener
from .names import EventName
from .options import EmitterOptions, OnError

_LOG = logging.getLogger(__name__)

_P = ParamSpec("_P")


class EventEmitter:
    """Synchronous, thread-safe event emitter.

    • Listeners run in registration order (``emit``) or in reverse
      (``emit_reversed``), on the caller's thread.
    • A listener returning ``False`` stops the current dispatch.
    • What happens when a listener raises is decided by :class:`EmitterOptions`:
      ignore it, hand it to ``on_error``, or let it **propagate**.

    Every dispatch works on a copy of the listener list taken when ``emit`` is
    called, so listeners may freely call ``on`` / ``once`` / ``off`` / ``emit``
    on the same emitter.
    """

    def __init__(
        self,
        options: EmitterOptions | None = None,
        *,
        ignore_errors: bool | None = None,
        on_error: OnError | None = None,
    ) -> None:
        if options is None:
            options = EmitterOptions(
                ignore_errors=bool(ignore_errors), on_error=on_error
            )
        elif ignore_errors is not None or on_error is not None:
            raise TypeError("pass either options or ignore_errors/on_error, not both")

        self._options = options
        self._events: dict[str, list[Listener]] = {}
        self._lock = threading.RLock()

    @property
    def options(self) -> EmitterOptions:
        return self._options

    # ------------------------------------------------------------------ registration
    @overload
    def on(self, name: EventName[_P], callback: Callable[_P, object]) -> "EventEmitter": ...

    @overload
    def on(self, name: str, callback: Callback) -> "EventEmitter": ...

    def on(self, name: str, callback: Callback) -> "EventEmitter":
        """Call *callback* every time *name* is emitted."""
        self._add(name, Listener(callback))
        return self

    @overload
    def once(self, name: EventName[_P], callback: Callable[_P, object]) -> "EventEmitter": ...

    @overload
    def once(self, name: str, callback: Callback) -> "EventEmitter": ...

    def once(self, name: str, callback: Callback) -> "EventEmitter":
        """Call *callback* the next time *name* is emitted, then forget it."""
        self._add(name, Listener(callback, once=True))
        return self

    @overload
    def off(self) -> "EventEmitter": ...

    @overload
    def off(self, name: EventName[_P], callback: Callable[_P, object] | None = None) -> "EventEmitter": ...

    @overload
    def off(self, name: str, callback: Callback | None = None) -> "EventEmitter": ...

    def off(self, name: str | None = None, callback: Callback | None = None) -> "EventEmitter":
        """Remove listeners.

        * ``off()`` removes **every** listener of every event.
        * ``off(name)`` removes all listeners of *name*.
        * ``off(name, callback)`` removes the listeners registered with that
          exact *callback* object and keeps the others in order.

        Unknown names are ignored.
        """
        if name is None:
            if callback is not None:
                raise TypeError("off() needs an event name when a callback is given")
            with self._lock:
                self._events.clear()
            _LOG.debug("Removed all listeners")
            return self

        with self._lock:
            listeners = self._events.get(name)
            if listeners is None:
                return self
            if callback is None:
                del self._events[name]
            else:
                self._update(
                    name, [entry for entry in listeners if entry.callback is not callback]
                )

        _LOG.debug("Removed listeners of %r", name)
        return self

    # ------------------------------------------------------------------ dispatch
    @overload
    def emit(self, name: EventName[_P], *args: _P.args, **kwargs: _P.kwargs) -> None: ...

    @overload
    def emit(self, name: str, *args: Any, **kwargs: Any) -> None: ...

    def emit(self, name: str, *args: Any, **kwargs: Any) -> None:
        """Call the listeners of *name* in registration order."""
        with self._lock:
            listeners = self._events.get(name)
            if listeners is None:
                return
            snapshot = list(listeners)
        self._run(name, snapshot, args, kwargs)

    @overload
    def emit_reversed(self, name: EventName[_P], *args: _P.args, **kwargs: _P.kwargs) -> None: ...

    @overload
    def emit_reversed(self, name: str, *args: Any, **kwargs: Any) -> None: ...

    def emit_reversed(self, name: str, *args: Any, **kwargs: Any) -> None:
        """Like :meth:`emit`, last registered listener first."""
        with self._lock:
            listeners = self._events.get(name)
            if listeners is None:
                return
            snapshot = listeners[::-1]
        self._run(name, snapshot, args, kwargs)

    def _run(
        self,
        name: str,
        listeners: list[Listener],
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> None:
        for listener in listeners:
            if listener.once and not self._claim(name, listener):
                # already fired by a nested emit
                continue

            try:
                result = listener.callback(*args, **kwargs)
            except Exception as error:
                if self._options.ignore_errors:
                    _LOG.debug(
                        "Ignoring error raised by %r on %r", listener, name, exc_info=True
                    )
                    continue
                if self._options.on_error is None:
                    raise
                if self._options.on_error(error, name, *args, **kwargs) is False:
                    _LOG.debug("on_error stopped dispatch of %r", name)
                    return
                continue

            if result is False:
                _LOG.debug("%r stopped dispatch of %r", listener, name)
                return

    # ------------------------------------------------------------------ introspection
    def listener_count(self, name: str | None = None) -> int:
        """Number of listeners for *name*, or for all events when omitted."""
        with self._lock:
            if name is not None:
                return len(self._events.get(name, ()))
            return sum(len(listeners) for listeners in self._events.values())

    def event_names(self) -> list[str]:
        """Names that currently have at least one listener."""
        with self._lock:
            return list(self._events)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._events

    def __repr__(self) -> str:
        return (
            f"<EventEmitter events={len(self._events)} "
            f"listeners={self.listener_count()}>"
        )

    def __enter__(self) -> "EventEmitter":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        self.off()
        return False

    # ------------------------------------------------------------------ registry helpers
    def _add(self, name: str, listener: Listener) -> None:
        if not callable(listener.callback):
            raise TypeError(f"listener for {name!r} must be callable, got {listener.callback!r}")
        with self._lock:
            self._events.setdefault(name, []).append(listener)
        _LOG.debug("Registered %r on %r", listener, name)

    def _claim(self, name: str, listener: Listener) -> bool:
        """Mark a one-shot *listener* as fired and unregister it.

        Returns ``False`` when it had already fired.
        """
        with self._lock:
            if listener.fired:
                return False
            listener.fired = True
            listeners = self._events.get(name)
            if listeners is not None:
                self._update(name, [entry for entry in listeners if entry is not listener])
        return True

    def _update(self, name: str, listeners: list[Listener]) -> None:
        # caller holds the lock; empty lists never stay in the registry
        if listeners:
            self._events[name] = listeners
        else:
            del self._events[name]
