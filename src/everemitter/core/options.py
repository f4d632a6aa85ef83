from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

# (error, event name, *args, **kwargs) -> False stops dispatch
OnError = Callable[..., Any]


@dataclass(frozen=True, slots=True)
class EmitterOptions:
    """Error policy of an :class:`~everemitter.core.emitter.EventEmitter`.

    Attributes
    ----------
    ignore_errors
        Swallow exceptions raised by listeners and keep dispatching.  Takes
        precedence over *on_error*.
    on_error
        Called as ``on_error(error, name, *args, **kwargs)`` when a listener
        raises.  Returning ``False`` stops the current dispatch; anything else
        lets it continue.  When neither option is set the error propagates
        out of ``emit``.
    """

    ignore_errors: bool = False
    on_error: OnError | None = None

    def __post_init__(self) -> None:
        if self.on_error is not None and not callable(self.on_error):
            raise TypeError(f"on_error must be callable, got {self.on_error!r}")
