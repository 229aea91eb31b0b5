import os
from typing import Any, Iterable

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from reservation.booking.domain.entity import Booking
from reservation.booking.domain.repository import DEFAULT_SLOT, BookingRepository
from reservation.booking.infrastructure import booking_mapper
from reservation.shared.domain.exception import PersistenceException
from reservation.shared.utils.logger import get_logger

logger = get_logger("booking-repository")

# DynamoDB の1アイテムあたりの上限サイズ
MAX_ITEM_BYTES = 400 * 1024


class DynamoDBBookingRepository(BookingRepository):
    """DynamoDBを使用したBookingRepository の具象実装

    全予約を JSON 文字列として1アイテム（PK=SLOT#<slot>, SK=BOOKINGS）に保存する。
    """

    def __init__(
        self,
        table_name: str | None = None,
        slot: str | None = None,
        table: Any = None,
        max_item_bytes: int = MAX_ITEM_BYTES,
    ) -> None:
        self.table_name = table_name or os.getenv("TABLE_NAME")
        self.slot = slot or os.getenv("BOOKING_STORAGE_SLOT", DEFAULT_SLOT)
        if table is None:
            if not self.table_name:
                raise ValueError("TABLE_NAME is not configured")
            table = boto3.resource("dynamodb").Table(self.table_name)
        self.table = table
        self.max_item_bytes = max_item_bytes

    def _key(self) -> dict:
        return {"PK": f"SLOT#{self.slot}", "SK": "BOOKINGS"}

    def load_all(self) -> list[Booking] | None:
        """スロットのアイテムから全予約を読み込む"""
        try:
            response = self.table.get_item(Key=self._key(), ConsistentRead=True)
        except (ClientError, BotoCoreError) as e:
            raise PersistenceException(f"Cannot read bookings slot {self.slot}: {e}") from e
        item = response.get("Item")
        if not item:
            return None
        payload = item.get("bookings")
        if not isinstance(payload, str):
            raise PersistenceException(f"Bookings slot {self.slot} has no payload")
        return booking_mapper.loads(payload)

    def save_all(self, bookings: Iterable[Booking]) -> None:
        """スロットのアイテムを全予約で上書きする

        アイテムの上限サイズを超える場合は書き込まずに PersistenceException を送出する。
        """
        payload = booking_mapper.dumps(bookings)
        size = len(payload.encode("utf-8"))
        if size > self.max_item_bytes:
            logger.warning(
                "Bookings slot exceeds the DynamoDB item size limit",
                extra={"slot": self.slot, "size": size, "limit": self.max_item_bytes},
            )
            raise PersistenceException(
                f"Bookings slot {self.slot} is too large: {size} bytes "
                f"(limit {self.max_item_bytes})"
            )

        item = {
            **self._key(),
            "entity_type": "BOOKING_SLOT",
            "bookings": payload,
        }
        try:
            self.table.put_item(Item=item)
        except (ClientError, BotoCoreError) as e:
            raise PersistenceException(f"Cannot write bookings slot {self.slot}: {e}") from e
