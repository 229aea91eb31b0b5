from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class GuestName:
    """宿泊者名"""

    MIN_LENGTH: ClassVar[int] = 2
    MAX_LENGTH: ClassVar[int] = 50

    value: str

    def __post_init__(self) -> None:
        stripped = self.value.strip()
        if len(stripped) < self.MIN_LENGTH:
            raise ValueError("Name must be at least 2 characters")
        if len(stripped) > self.MAX_LENGTH:
            raise ValueError("Name too long")
        object.__setattr__(self, "value", stripped)

    def __str__(self) -> str:
        return self.value

    def contains(self, fragment: str) -> bool:
        """部分一致（大文字小文字を区別しない）"""
        return fragment.casefold() in self.value.casefold()
