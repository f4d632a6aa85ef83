from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable

Callback = Callable[..., Any]


@dataclass(eq=False, slots=True)
class Listener:
    """One registration of *callback* on an emitter.

    Compared by identity: registering the same callback twice yields two
    listeners, and removing one of them never touches the other.
    """

    callback: Callback
    once: bool = False
    fired: bool = field(default=False, init=False)

    def __repr__(self) -> str:
        name = getattr(self.callback, "__qualname__", repr(self.callback))
        return f"<Listener {name}{' once' if self.once else ''}>"
