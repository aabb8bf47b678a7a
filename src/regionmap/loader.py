"""Decode GeoJSON region collections using stdlib json.

Turns raw bytes into a list of FeatureRecord entries. Whole-document
problems raise GeoJSONParseError / GeoJSONReadError; per-feature problems
raise MalformedFeatureError, which the catalog logs and skips.
"""

from __future__ import annotations

import json
import math
from dataclasses import dataclass
from pathlib import Path

from loguru import logger

from regionmap.errors import GeoJSONParseError, GeoJSONReadError, MalformedFeatureError
from regionmap.geometry.bounds import feature_coordinates

ID_PROPERTY = "hc-key"
NAME_PROPERTY = "name"
POSTAL_CODE_PROPERTY = "postal-code"


@dataclass
class FeatureRecord:
    """The parts of one GeoJSON feature the catalog cares about."""

    region_id: str
    name: str
    postal_code: str
    coordinates: list


def _property_text(properties: dict, key: str) -> str:
    """Property as text. Numbers are accepted; whole floats print as integers."""
    value = properties.get(key)
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return ""
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float) and math.isfinite(value):
        return str(int(value)) if value.is_integer() else repr(value)
    return ""


def decode_geojson(data: bytes | str) -> list:
    """Decode a FeatureCollection and return its ``features`` array.

    Raises:
        GeoJSONParseError: Invalid JSON, a non-object top level, or a
            missing/non-array ``features`` member.
    """
    try:
        doc = json.loads(data)
    except (ValueError, TypeError, RecursionError) as e:
        raise GeoJSONParseError(f"Invalid GeoJSON document: {e}") from e

    if not isinstance(doc, dict):
        raise GeoJSONParseError(
            f"Expected a GeoJSON object at top level, got {type(doc).__name__}"
        )

    features = doc.get("features")
    if not isinstance(features, list):
        raise GeoJSONParseError("GeoJSON document has no 'features' array")

    return features


def parse_feature(raw, idx: int) -> FeatureRecord:
    """Extract id, name, postal code and coordinates from one feature.

    The name falls back to the id; a missing postal code becomes "".

    Raises:
        MalformedFeatureError: Not an object, no ``hc-key``, or no
            coordinate array.
    """
    if not isinstance(raw, dict):
        raise MalformedFeatureError(f"Feature #{idx} is not an object")

    properties = raw.get("properties")
    if not isinstance(properties, dict):
        properties = {}

    region_id = _property_text(properties, ID_PROPERTY)
    name = _property_text(properties, NAME_PROPERTY) or region_id
    postal_code = _property_text(properties, POSTAL_CODE_PROPERTY)

    if not region_id:
        raise MalformedFeatureError(
            f"Feature #{idx} has no '{ID_PROPERTY}' (name: {name!r})"
        )

    coordinates = feature_coordinates(raw)
    if coordinates is None:
        raise MalformedFeatureError(
            f"Feature #{idx} ({region_id}) has no geometry coordinates"
        )

    return FeatureRecord(
        region_id=region_id,
        name=name,
        postal_code=postal_code,
        coordinates=coordinates,
    )


def read_source(path: str | Path, data_dir: str | Path | None = None) -> bytes:
    """Read GeoJSON bytes from ``path``, falling back to ``data_dir / path``.

    Raises:
        GeoJSONReadError: Neither location could be read.
    """
    candidates = [Path(path)]
    if data_dir is not None:
        candidates.append(Path(data_dir) / path)

    errors = []
    for candidate in candidates:
        try:
            data = candidate.read_bytes()
        except OSError as e:
            logger.debug(f"Could not read {candidate}: {e}")
            errors.append(f"{candidate}: {e.strerror or e}")
            continue
        logger.debug(f"Read {len(data)} bytes from {candidate}")
        return data

    raise GeoJSONReadError(f"Could not read GeoJSON source ({'; '.join(errors)})")
