from enum import Enum


class RoomType(str, Enum):
    """客室タイプ"""

    SINGLE = "Single"
    DOUBLE = "Double"
    DELUXE = "Deluxe"
    SUITE = "Suite"

    def __str__(self) -> str:
        return self.value
