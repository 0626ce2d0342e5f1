"""Final normalization applied to every extracted field."""

from typing import Any, Mapping, TypeVar, Union

from patra.models.record import StructuredRecord

from .text import collapse_whitespace

RecordT = TypeVar("RecordT", bound=Union[StructuredRecord, Mapping[str, Any]])


def clean_field(value: Any) -> str:
    """None becomes "", strings get whitespace collapsed, anything else is stringified."""
    if value is None:
        return ""
    if not isinstance(value, str):
        value = str(value)
    return collapse_whitespace(value)


def clean_record(record: RecordT) -> RecordT:
    """Apply `clean_field` to every field of a record.

    Accepts a `StructuredRecord` or a plain mapping and returns the same
    kind of object. Idempotent: cleaning a cleaned record changes nothing.
    """
    if isinstance(record, StructuredRecord):
        cleaned = {key: clean_field(value) for key, value in record.to_dict().items()}
        return StructuredRecord.model_validate(cleaned)
    return {key: clean_field(value) for key, value in record.items()}
