import re
from dataclasses import dataclass

_PATTERN = re.compile(r"[0-9]{10}")


@dataclass(frozen=True)
class ContactNumber:
    """連絡先電話番号（10桁の数字）"""

    value: str

    def __post_init__(self) -> None:
        if not _PATTERN.fullmatch(self.value):
            raise ValueError("Contact number must be 10 digits")

    def __str__(self) -> str:
        return self.value
