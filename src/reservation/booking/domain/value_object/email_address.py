import re
from dataclasses import dataclass

_PATTERN = re.compile(r"[^@\s]+@[^@\s]+\.[^@\s]+")


@dataclass(frozen=True)
class EmailAddress:
    """メールアドレス

    厳密な書式チェックは入力境界（EmailStr）で行い、ここでは最低限の形だけ確認する。
    """

    value: str

    def __post_init__(self) -> None:
        if not _PATTERN.fullmatch(self.value):
            raise ValueError("Invalid email address")

    def __str__(self) -> str:
        return self.value

    def matches(self, other: str) -> bool:
        """大文字小文字を区別せずに一致判定する"""
        return self.value.casefold() == other.strip().casefold()
