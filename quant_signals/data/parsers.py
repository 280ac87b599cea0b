"""
Parsers turning raw records into core model values.

Only record shape and numeric types are checked. Observation values are
otherwise accepted as given, so negative or decreasing values pass through.
"""

import math
from collections.abc import Mapping, Sequence
from typing import Any, Union

from ..errors import MalformedDataError, MissingDataError
from ..models.observation import Observation, RiskLevel

OBSERVATION_FIELDS = ("price", "volume", "timestamp")


def parse_observation(record: Union[Mapping, Sequence, Observation]) -> Observation:
    """
    Build an Observation from a raw record.

    Args:
        record: Mapping with price/volume/timestamp keys, a
            [price, volume, timestamp] sequence, or an Observation

    Returns:
        Parsed Observation

    Raises:
        MissingDataError: A required field is absent
        MalformedDataError: The record shape or a field value is invalid
    """
    if isinstance(record, Observation):
        return record

    if isinstance(record, Mapping):
        for field in OBSERVATION_FIELDS:
            if field not in record:
                raise MissingDataError(
                    f"Observation record missing '{field}'",
                    data_type=field,
                    context={"record": dict(record)}
                )
        price, volume, timestamp = (record[field] for field in OBSERVATION_FIELDS)
    elif isinstance(record, Sequence) and not isinstance(record, (str, bytes)):
        if len(record) != len(OBSERVATION_FIELDS):
            raise MalformedDataError(
                f"Observation sequence must have {len(OBSERVATION_FIELDS)} items, got {len(record)}",
                raw_data=str(record),
                expected_format="[price, volume, timestamp]"
            )
        price, volume, timestamp = record
    else:
        raise MalformedDataError(
            f"Unsupported observation record type: {type(record).__name__}",
            raw_data=str(record),
            expected_format="mapping or [price, volume, timestamp]"
        )

    return Observation(
        price=_parse_float(price, "price"),
        volume=_parse_float(volume, "volume"),
        timestamp=_parse_int(timestamp, "timestamp"),
    )


def parse_risk_level(value: Any) -> RiskLevel:
    """
    Resolve a RiskLevel member or a case-insensitive level name.

    Raises:
        MalformedDataError: value names no known risk level
    """
    if isinstance(value, RiskLevel):
        return value

    if isinstance(value, str):
        try:
            return RiskLevel[value.strip().upper()]
        except KeyError:
            pass

    raise MalformedDataError(
        f"Unknown risk level: {value!r}",
        raw_data=str(value),
        expected_format=" | ".join(level.name for level in RiskLevel)
    )


def _parse_float(value: Any, field: str) -> float:
    if isinstance(value, bool):
        raise MalformedDataError(
            f"Field '{field}' must be numeric, got bool",
            raw_data=str(value),
            expected_format="float"
        )
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise MalformedDataError(
            f"Field '{field}' is not a number: {value!r}",
            raw_data=str(value),
            expected_format="float"
        ) from e


def _parse_int(value: Any, field: str) -> int:
    if isinstance(value, bool):
        raise MalformedDataError(
            f"Field '{field}' must be an integer, got bool",
            raw_data=str(value),
            expected_format="int"
        )
    if isinstance(value, int):
        return value

    number = _parse_float(value, field)
    if not math.isfinite(number) or not number.is_integer():
        raise MalformedDataError(
            f"Field '{field}' is not an integer: {value!r}",
            raw_data=str(value),
            expected_format="int"
        )
    return int(number)
