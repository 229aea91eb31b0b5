from datetime import date
from typing import Annotated

from pydantic import (
    BaseModel,
    ConfigDict,
    EmailStr,
    Field,
    StringConstraints,
    ValidationInfo,
    field_validator,
)
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

from reservation.booking.domain.enum import RoomType
from reservation.booking.domain.factory import BookingDetails

# フォームに表示するエラーメッセージ（フォームキー -> エラー種別 -> メッセージ、"*" は既定）
FORM_MESSAGES: dict[str, dict[str, str]] = {
    "guestName": {
        "string_too_long": "Name too long",
        "*": "Name must be at least 2 characters",
    },
    "roomType": {"*": "Please select a room type"},
    "checkInDate": {
        "missing": "Check-in date is required",
        "*": "Check-in date must be a valid date",
    },
    "checkOutDate": {
        "missing": "Check-out date is required",
        "date_order": "Check-out date must be after check-in date",
        "*": "Check-out date must be a valid date",
    },
    "contactNumber": {"*": "Contact number must be 10 digits"},
    "email": {"*": "Invalid email address"},
}


class BookingRequest(BaseModel):
    """予約フォームのリクエストモデル

    フォームのキー（guestName 等）とフィールド名（guest_name 等）の両方を受け付ける。
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

    guest_name: Annotated[str, StringConstraints(min_length=2, max_length=50)] = Field(
        ..., description="宿泊者名"
    )
    room_type: RoomType = Field(..., description="客室タイプ")
    check_in_date: date = Field(
        ...,
        description="チェックイン日（YYYY-MM-DD形式）",
        examples=["2025-06-01"],
    )
    check_out_date: date = Field(
        ...,
        description="チェックアウト日（YYYY-MM-DD形式）",
        examples=["2025-06-05"],
    )
    contact_number: str = Field(
        ...,
        pattern=r"^[0-9]{10}$",
        description="連絡先電話番号（10桁）",
    )
    email: EmailStr = Field(..., description="メールアドレス")
    id_proof: str | None = Field(default=None, description="身分証明書の番号・参照")

    @field_validator("guest_name", mode="before")
    @classmethod
    def strip_guest_name(cls, v: object) -> object:
        # GuestName と同じ str.strip() で前後の空白を除去する
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator("check_out_date")
    @classmethod
    def check_out_after_check_in(cls, v: date, info: ValidationInfo) -> date:
        # check_in_date の検証に失敗している場合は info.data に含まれない
        check_in = info.data.get("check_in_date")
        if check_in is not None and v <= check_in:
            raise PydanticCustomError(
                "date_order", "Check-out date must be after check-in date"
            )
        return v

    def to_details(self) -> BookingDetails:
        """ファクトリへの入力データに変換する"""
        return {
            "guest_name": self.guest_name,
            "room_type": self.room_type,
            "check_in_date": self.check_in_date,
            "check_out_date": self.check_out_date,
            "contact_number": self.contact_number,
            "email": str(self.email),
            "id_proof": self.id_proof,
        }
