from .emitter import EventEmitter
from .listener import Callback, Listener
from .names import EventName
from .options import EmitterOptions, OnError

__all__ = ["EventEmitter", "EmitterOptions", "EventName", "Listener", "Callback", "OnError"]
