from __future__ import annotations

import uuid
from dataclasses import dataclass


@dataclass(frozen=True)
class BookingId:
    """予約ID"""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise ValueError(f"BookingId must be a string: {self.value!r}")
        if not self.value:
            raise ValueError("BookingId cannot be empty")

    def __str__(self) -> str:
        return self.value

    @classmethod
    def generate(cls) -> BookingId:
        """新しい一意な予約IDを生成する

        同じ入力内容の予約でも毎回異なる ID になる。
        """
        return cls(value=str(uuid.uuid4()))
