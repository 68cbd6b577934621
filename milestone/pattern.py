from dataclasses import dataclass
from enum import IntEnum

from milestone.util import U64_MAX


class Base(IntEnum):
    DECIMAL = 10
    HEXADECIMAL = 16

    @classmethod
    def coerce(cls, value: "Base | int | str") -> "Base":
        """Accept a Base, a radix (10, 16) or a name ("dec", "hex")."""
        if isinstance(value, str):
            key = value.strip().lower()
            if key in _BASE_NAMES:
                return _BASE_NAMES[key]
            if key.isdigit():
                value = int(key)
        try:
            return cls(value)
        except ValueError:
            valid = ", ".join(str(int(b)) for b in cls)
            raise ValueError(
                f"Unsupported base: {value!r}\n" f"Supported bases: {valid}"
            ) from None


_BASE_NAMES = {
    "dec": Base.DECIMAL,
    "decimal": Base.DECIMAL,
    "hex": Base.HEXADECIMAL,
    "hexadecimal": Base.HEXADECIMAL,
}

SUPPORTED_BASES: tuple[Base, ...] = tuple(Base)


@dataclass(frozen=True, kw_only=True)
class Pattern:
    value: int
    base: Base

    def __post_init__(self) -> None:
        object.__setattr__(self, "base", Base.coerce(self.base))
        if not 1 <= self.value <= U64_MAX:
            raise ValueError(
                f"Pattern value ({self.value}) must be between 1 and {U64_MAX}"
            )

    def __str__(self) -> str:
        """Render in the pattern's own base."""
        if self.base is Base.HEXADECIMAL:
            return f"{self.value:#x}"
        return str(self.value)
