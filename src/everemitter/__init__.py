from .core.emitter import EventEmitter
from .core.listener import Callback
from .core.names import EventName
from .core.options import EmitterOptions, OnError

__version__ = "0.2.0"

__all__: list[str] = [
    "EventEmitter",
    "EmitterOptions",
    "EventName",
    "Callback",
    "OnError",
]
