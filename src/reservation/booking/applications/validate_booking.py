from typing import Any, Mapping

from pydantic import ValidationError

from reservation.booking.applications.request_models import FORM_MESSAGES, BookingRequest
from reservation.shared.applications import Result
from reservation.shared.domain.exception import FieldError, ValidationException


def _form_keys() -> dict[str, str]:
    # フィールド名・フォームキーのどちらで報告されてもフォームキーに揃える
    keys: dict[str, str] = {}
    for name, field in BookingRequest.model_fields.items():
        alias = field.alias or name
        keys[name] = alias
        keys[alias] = alias
    return keys


_FORM_KEYS = _form_keys()
_FIELD_ORDER = list(dict.fromkeys(_FORM_KEYS.values()))


def validate(candidate: Mapping[str, Any] | BookingRequest) -> Result[BookingRequest]:
    """予約候補を検証する

    副作用はなく、何度呼んでも同じ結果になる。
    失敗時は最初のエラーで止めず、失敗したフィールドごとに1件ずつ
    FieldError を集めて ValidationException として返す。
    """
    if isinstance(candidate, BookingRequest):
        candidate = candidate.model_dump(by_alias=True)
    try:
        request = BookingRequest.model_validate(candidate)
    except ValidationError as e:
        return Result.failure(ValidationException(_to_field_errors(e)))
    return Result.success(request)


def _to_field_errors(error: ValidationError) -> list[FieldError]:
    messages: dict[str, str] = {}
    for detail in error.errors():
        loc = detail["loc"]
        key = str(loc[0]) if loc else "__root__"
        field = _FORM_KEYS.get(key, key)
        messages.setdefault(field, _form_message(field, detail))
    return [
        FieldError(field=field, message=messages[field])
        for field in sorted(messages, key=_field_position)
    ]


def _form_message(field: str, detail: Any) -> str:
    error_type = detail["type"]
    if error_type != "missing" and detail.get("input") in ("", None):
        error_type = "missing"
    table = FORM_MESSAGES.get(field)
    if table is None:
        return detail["msg"]
    return table.get(error_type, table["*"])


def _field_position(field: str) -> int:
    if field in _FIELD_ORDER:
        return _FIELD_ORDER.index(field)
    return len(_FIELD_ORDER)
