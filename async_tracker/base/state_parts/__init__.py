"""One-class-per-file parts for the `AsyncState` tagged union."""

from .status import Status
from .idle import Idle
from .pending import Pending
from .succeeded import Succeeded
from .reloading import Reloading
from .failed import Failed

__all__ = [
    "Status",
    "Idle",
    "Pending",
    "Succeeded",
    "Reloading",
    "Failed",
]
