from __future__ import annotations

import copy
import threading
from typing import Any, Mapping

from reservation.booking.applications.booking_filter import BookingFilter, BookingOrder
from reservation.booking.applications.request_models import BookingRequest
from reservation.booking.applications.validate_booking import validate
from reservation.booking.domain.entity import Booking
from reservation.booking.domain.enum import BookingStatus
from reservation.booking.domain.factory import BookingFactory
from reservation.booking.domain.repository import BookingRepository
from reservation.booking.domain.value_object import BookingId
from reservation.shared.applications import Result
from reservation.shared.domain.exception import (
    DuplicateResourceException,
    InvalidTransitionException,
    PersistenceException,
    ResourceNotFoundException,
    ValidationException,
)
from reservation.shared.utils.logger import get_logger

logger = get_logger("booking-store")


class BookingStore:
    """宿泊予約ストア

    全予約の唯一の正とする状態（id -> Booking）を保持し、
    変更のたびにリポジトリへ同期的に書き込む（write-through）。

    - 書き込み（create / transition）はロックで直列化する
    - マップはコピーオンライトで、永続化に成功してから差し替える
    - 読み取りはロックを取らず、その時点のスナップショットを返す
    - 想定内の失敗は例外ではなく Result として返す
    """

    def __init__(
        self,
        repository: BookingRepository,
        factory: BookingFactory | None = None,
    ) -> None:
        self._repository = repository
        self._factory = factory or BookingFactory()
        self._bookings: dict[BookingId, Booking] = {}
        self._write_lock = threading.Lock()
        self.load_result: Result[int] | None = None

    @classmethod
    def open(
        cls,
        repository: BookingRepository,
        factory: BookingFactory | None = None,
    ) -> BookingStore:
        """ストアを生成し、永続化済みの予約を読み込む"""
        store = cls(repository=repository, factory=factory)
        store.load()
        return store

    def load(self) -> Result[int]:
        """スロットから予約を読み込む

        読み込めない場合は起動を止めず、空の状態で開始して失敗を返す。
        """
        with self._write_lock:
            try:
                loaded = self._repository.load_all()
            except PersistenceException as e:
                logger.warning(
                    "Failed to load bookings, starting with an empty store",
                    extra={"error": str(e)},
                )
                self._bookings = {}
                self.load_result = Result.failure(e)
                return self.load_result

            self._bookings = {booking.id: booking for booking in loaded or []}
            self.load_result = Result.success(len(self._bookings))

        logger.info("Loaded bookings", extra={"count": len(self._bookings)})
        return self.load_result

    def create(self, candidate: Mapping[str, Any] | BookingRequest) -> Result[Booking]:
        """予約を作成する

        入力は常に再検証する。検証に失敗した場合はストアを変更しない。
        """
        validated = validate(candidate)
        if validated.error is not None:
            logger.info(
                "Booking request rejected", extra={"errors": str(validated.error)}
            )
            return Result.failure(validated.error)

        request = validated.unwrap()
        with self._write_lock:
            try:
                booking = self._factory.create(request.to_details())
            except ValidationException as e:
                logger.info("Booking request rejected", extra={"errors": str(e)})
                return Result.failure(e)
            if booking.id in self._bookings:
                return Result.failure(
                    DuplicateResourceException(f"Booking already exists: {booking.id}")
                )

            bookings = dict(self._bookings)
            bookings[booking.id] = booking
            try:
                self._repository.save_all(bookings.values())
            except PersistenceException as e:
                logger.exception(
                    "Failed to persist new booking", extra={"booking_id": str(booking.id)}
                )
                return Result.failure(e)
            self._bookings = bookings

        logger.info(
            "Booking created",
            extra={"booking_id": str(booking.id), "status": booking.status.value},
        )
        return Result.success(booking)

    def list_bookings(
        self,
        criteria: BookingFilter | None = None,
        order_by: BookingOrder | None = None,
    ) -> tuple[Booking, ...]:
        """予約一覧を返す

        並び順の指定がなければ登録順。
        """
        bookings = list(self._bookings.values())
        if criteria is not None:
            bookings = [booking for booking in bookings if criteria.matches(booking)]
        if order_by is not None:
            bookings = order_by.sort(bookings)
        return tuple(bookings)

    def find_by_id(self, booking_id: BookingId | str) -> Booking | None:
        """予約IDで検索する"""
        key = _to_booking_id(booking_id)
        if key is None:
            return None
        return self._bookings.get(key)

    def find_by_contact(self, email_or_contact_number: str) -> tuple[Booking, ...]:
        """メールアドレスまたは電話番号で検索する（宿泊者による状況確認用）"""
        if not email_or_contact_number or not email_or_contact_number.strip():
            return ()
        return tuple(
            booking
            for booking in self._bookings.values()
            if booking.matches_contact(email_or_contact_number)
        )

    def count_by_status(self) -> dict[BookingStatus, int]:
        """ステータスごとの予約件数"""
        counts = {status: 0 for status in BookingStatus}
        for booking in self._bookings.values():
            counts[booking.status] += 1
        return counts

    def transition(
        self, booking_id: BookingId | str, target_status: BookingStatus | str
    ) -> Result[Booking]:
        """予約ステータスを遷移させる"""
        key = _to_booking_id(booking_id)
        with self._write_lock:
            current = self._bookings.get(key) if key is not None else None
            if current is None:
                return Result.failure(
                    ResourceNotFoundException(f"Booking not found: {booking_id}")
                )

            # 公開済みのエンティティは変更せず、コピーに遷移を適用する
            updated = copy.copy(current)
            try:
                updated.transition_to(BookingStatus(target_status), self._factory.now())
            except ValueError:
                error = InvalidTransitionException(current.status, target_status)
                logger.info("Booking transition rejected", extra={"error": str(error)})
                return Result.failure(error)
            except InvalidTransitionException as e:
                logger.info("Booking transition rejected", extra={"error": str(e)})
                return Result.failure(e)

            bookings = dict(self._bookings)
            bookings[key] = updated
            try:
                self._repository.save_all(bookings.values())
            except PersistenceException as e:
                logger.exception(
                    "Failed to persist booking transition",
                    extra={"booking_id": str(key)},
                )
                return Result.failure(e)
            self._bookings = bookings

        logger.info(
            "Booking status changed",
            extra={
                "booking_id": str(key),
                "from_status": current.status.value,
                "to_status": updated.status.value,
            },
        )
        return Result.success(updated)

    def confirm(self, booking_id: BookingId | str) -> Result[Booking]:
        return self.transition(booking_id, BookingStatus.CONFIRMED)

    def check_in(self, booking_id: BookingId | str) -> Result[Booking]:
        return self.transition(booking_id, BookingStatus.CHECKED_IN)

    def check_out(self, booking_id: BookingId | str) -> Result[Booking]:
        return self.transition(booking_id, BookingStatus.CHECKED_OUT)

    def cancel(self, booking_id: BookingId | str) -> Result[Booking]:
        return self.transition(booking_id, BookingStatus.CANCELLED)


def _to_booking_id(value: BookingId | str) -> BookingId | None:
    if isinstance(value, BookingId):
        return value
    if not value:
        return None
    return BookingId(value=str(value))
