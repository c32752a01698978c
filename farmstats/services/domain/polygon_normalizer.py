"""
Domain service: Normalization of raw detection polygons.

Turns the heterogeneous records served by the data source into
NormalizedPolygon instances with ordered (latitude, longitude) pairs.
Malformed records are dropped so that callers always get something
renderable.
"""
import logging
from collections.abc import Mapping
from numbers import Real
from typing import Any

from farmstats.domain.models import NormalizedPolygon

logger = logging.getLogger(__name__)


class MalformedInput(ValueError):
    """Raised for a raw record that cannot be normalized."""
    pass


def _coerce_number(value: Any, field: str) -> float:
    # bool is a Real subclass but never a valid coordinate
    if isinstance(value, bool) or not isinstance(value, Real):
        raise MalformedInput(f"Coordinate field '{field}' is not a number: {value!r}")
    try:
        return float(value)
    except OverflowError as e:
        raise MalformedInput(f"Coordinate field '{field}' does not fit a float") from e


def _normalize_record(record: Any) -> NormalizedPolygon:
    """
    Normalize a single raw record.

    Args:
        record: Raw polygon record ({"nome": ..., "coordenadas": [...]})

    Returns:
        NormalizedPolygon instance

    Raises:
        MalformedInput: If the record has no usable coordinate list
    """
    if not isinstance(record, Mapping):
        raise MalformedInput(f"Record is not an object: {type(record).__name__}")

    raw_coords = record.get("coordenadas")
    if not isinstance(raw_coords, (list, tuple)) or len(raw_coords) == 0:
        raise MalformedInput("Record has no coordinate list")

    coordinates = []
    for coord in raw_coords:
        if not isinstance(coord, Mapping):
            raise MalformedInput(f"Coordinate is not an object: {coord!r}")
        coordinates.append((
            _coerce_number(coord.get("latitude"), "latitude"),
            _coerce_number(coord.get("longitude"), "longitude"),
        ))

    name = record.get("nome")
    return NormalizedPolygon(
        name=name if isinstance(name, str) else "",
        coordinates=coordinates,
    )


def normalize(raw: Any) -> list[NormalizedPolygon]:
    """
    Normalize a raw polygon payload.

    Preserves input order and does not deduplicate or validate rings.

    Args:
        raw: Decoded JSON payload, expected to be a list of records

    Returns:
        List of NormalizedPolygon; empty if the payload is not a list
    """
    if not isinstance(raw, (list, tuple)):
        logger.warning(f"Polygon payload is not a list ({type(raw).__name__}), ignoring it")
        return []

    polygons = []
    dropped = 0

    for index, record in enumerate(raw):
        try:
            polygons.append(_normalize_record(record))
        except MalformedInput as e:
            dropped += 1
            logger.debug(f"Dropping record {index}: {e}")

    if dropped:
        logger.info(f"Dropped {dropped} malformed records out of {len(raw)}")

    return polygons
