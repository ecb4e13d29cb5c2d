from vercheck.core.time.abc import Time
from vercheck.core.time.fake import FakeTime
from vercheck.core.time.real import RealTime

__all__ = [
    "FakeTime",
    "RealTime",
    "Time",
]
