from enum import Enum

from milestone.util import DAY, HOUR, MINUTE, SECOND, WEEK


class TimeUnit(Enum):
    """Units a milestone can be counted in.

    Every unit except MONTH has a fixed length in seconds; months vary
    in length and are handled with calendar arithmetic.
    """

    SECOND = "second"
    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"
    WEEK = "week"
    MONTH = "month"

    @property
    def seconds(self) -> int | None:
        return _SECONDS.get(self)

    def label(self, count: int) -> str:
        return self.value if count == 1 else f"{self.value}s"

    @classmethod
    def coerce(cls, value: "TimeUnit | str") -> "TimeUnit":
        if isinstance(value, TimeUnit):
            return value
        if isinstance(value, str):
            key = value.strip().lower().removesuffix("s")
            if key in {u.value for u in cls}:
                return cls(key)
        valid = ", ".join(u.value for u in cls)
        raise ValueError(f"Invalid time unit: {value!r}\n" f"Valid units: {valid}")


_SECONDS = {
    TimeUnit.SECOND: SECOND,
    TimeUnit.MINUTE: MINUTE,
    TimeUnit.HOUR: HOUR,
    TimeUnit.DAY: DAY,
    TimeUnit.WEEK: WEEK,
}
