from __future__ import annotations

from typing import Generic, ParamSpec

P = ParamSpec("P")


class EventName(str, Generic[P]):
    """Event name that carries the signature of its listeners.

    At runtime this *is* the string::

        >>> SAVED: EventName[[str, int]] = EventName("saved")
        >>> SAVED == "saved"
        True

    Type checkers use ``P`` to match the callbacks passed to ``on`` / ``once``
    and the arguments passed to ``emit`` / ``emit_reversed``.
    """

    __slots__ = ()

    def __repr__(self) -> str:
        return f"EventName({str.__repr__(self)})"
