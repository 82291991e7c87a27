# -*- coding: utf-8 -*-
"""Normalization of object and tuple coordinate inputs.

Objects may spell their keys ``lat``/``latitude`` and ``lon``/``longitude``
in any case; when both spellings are present the short one wins. Tuples are
read strictly in the order the caller declares.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any

from geocoord_lib.constants import LAT_KEYS
from geocoord_lib.constants import LAT_LIMIT
from geocoord_lib.constants import LON_KEYS
from geocoord_lib.constants import LON_LIMIT
from geocoord_lib.enums import Format


def _is_real(value: Any) -> bool:
    return isinstance(value, int | float) and not isinstance(value, bool)


def _lowercase_keys(obj: Mapping) -> dict[str, Any]:
    return {str(key).lower(): value for key, value in obj.items()}


def is_coordinate_object(obj: Any) -> bool:
    """True for a mapping with a latitude key and a longitude key."""
    if not isinstance(obj, Mapping):
        return False
    keys = _lowercase_keys(obj)
    return any(key in keys for key in LAT_KEYS) and any(key in keys for key in LON_KEYS)


def is_coordinate_tuple(obj: Any) -> bool:
    """True for a 2-item list or tuple of real numbers."""
    return (
        isinstance(obj, list | tuple)
        and len(obj) == 2
        and all(_is_real(value) for value in obj)
    )


def normalize_object_to_latlon(obj: Mapping) -> dict[str, float] | None:
    """Reduce a loosely keyed mapping to ``{"lat": ..., "lon": ...}``.

    Args:
        obj: Mapping such as ``{"LATITUDE": 40.7, "Lon": -74.0}``

    Returns:
        The normalized dict, or None when a key is missing or a value is not
        a number

    Example:
        >>> normalize_object_to_latlon({"Latitude": 40.7128, "LON": -74.006})
        {'lat': 40.7128, 'lon': -74.006}
    """
    if not isinstance(obj, Mapping):
        return None

    keys = _lowercase_keys(obj)
    lat_key = next((key for key in LAT_KEYS if key in keys), None)
    lon_key = next((key for key in LON_KEYS if key in keys), None)
    if lat_key is None or lon_key is None:
        return None

    lat = keys[lat_key]
    lon = keys[lon_key]
    if not (_is_real(lat) and _is_real(lon)):
        return None

    return {"lat": lat, "lon": lon}


def tuple_to_latlon(
    order: Format | str,
    coordinates: tuple[float, float] | list[float],
) -> dict[str, float]:
    """Read a pair strictly in the declared order.

    Example:
        >>> tuple_to_latlon(Format.LONLAT, (-74.006, 40.7128))
        {'lat': 40.7128, 'lon': -74.006}
    """
    first, second = coordinates
    if Format.normalize(order) is Format.LONLAT:
        return {"lat": second, "lon": first}
    return {"lat": first, "lon": second}


def _check_signed_range(label: str, value: float, limit: float) -> str | None:
    if not _is_real(value) or not math.isfinite(value):
        return f"Invalid {label.lower()} value ({value}); expected a finite number."
    if not -limit <= value <= limit:
        return (
            f"{label} value ({value:g}) is outside valid range "
            f"(-{limit:g} to {limit:g})."
        )
    return None


def validate_numeric_coordinate(lat: float, lon: float) -> list[str]:
    """Describe every problem with a numeric latitude/longitude pair.

    Returns:
        A list of messages, empty when the pair is valid

    Example:
        >>> validate_numeric_coordinate(95, 0)
        ['Latitude value (95) is outside valid range (-90 to 90).']
    """
    errors = [
        _check_signed_range("Latitude", lat, LAT_LIMIT),
        _check_signed_range("Longitude", lon, LON_LIMIT),
    ]
    return [error for error in errors if error is not None]
