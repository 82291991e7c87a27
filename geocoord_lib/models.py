# -*- coding: utf-8 -*-
"""Core data models for coordinates.

This module contains the Pydantic value models shared by the parsers,
the projection helpers and the conversion facade.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import field_validator
from pydantic import model_validator
from pydantic_extra_types.coordinate import Latitude  # noqa: TC002
from pydantic_extra_types.coordinate import Longitude  # noqa: TC002

from geocoord_lib.constants import DEFAULT_SEPARATOR
from geocoord_lib.constants import MGRS_MAX_DIGITS
from geocoord_lib.enums import Format
from geocoord_lib.enums import Hemisphere


class LatLon(BaseModel):
    """Canonical geographic coordinate, the shape every parser converges on."""

    model_config = ConfigDict(frozen=True)

    lat: Latitude
    lon: Longitude

    def as_tuple(self, order: Format = Format.LATLON) -> tuple[float, float]:
        """Return the pair in the requested axis order."""
        if order is Format.LONLAT:
            return (self.lon, self.lat)
        return (self.lat, self.lon)


class MGRSValue(BaseModel):
    """Parsed MGRS reference.

    ``easting`` and ``northing`` are the digits as written, i.e. at the stated
    precision (``48251`` at 5 digits is 48,251 m into the square, ``48`` at
    2 digits is 4,800 m).

    Attributes:
        zone_number: UTM zone (1-60)
        zone_letter: Latitude band (C-X, no I/O)
        grid_col: 100 km column letter
        grid_row: 100 km row letter
        easting: Easting digits within the square
        northing: Northing digits within the square
        precision_digits: Total digit count (0, 2, 4, 6, 8 or 10)
    """

    model_config = ConfigDict(frozen=True)

    zone_number: Annotated[int, Field(ge=1, le=60)]
    zone_letter: Annotated[str, Field(pattern="^[C-HJ-NP-X]$")]
    grid_col: Annotated[str, Field(pattern="^[A-HJ-NP-Z]$")]
    grid_row: Annotated[str, Field(pattern="^[A-HJ-NP-V]$")]
    easting: Annotated[int, Field(default=0, ge=0)]
    northing: Annotated[int, Field(default=0, ge=0)]
    precision_digits: Annotated[int, Field(default=0, ge=0, le=2 * MGRS_MAX_DIGITS)]

    # -----------------------------
    # Validators
    # -----------------------------

    @field_validator("precision_digits")
    @classmethod
    def validate_precision_digits(cls, v: int) -> int:
        if v % 2:
            raise ValueError(f"Precision must be an even digit count, got {v}")
        return v

    @model_validator(mode="after")
    def validate_digits_fit(self) -> MGRSValue:
        limit = 10**self.digits
        if self.easting >= limit or self.northing >= limit:
            raise ValueError(
                f"Easting/northing ({self.easting}, {self.northing}) do not fit "
                f"in {self.digits} digits"
            )
        return self

    # -----------------------------
    # Derived values
    # -----------------------------

    @property
    def digits(self) -> int:
        """Digits per axis (0-5)."""
        return self.precision_digits // 2

    @property
    def grid_zone(self) -> str:
        """Zero padded grid zone designator, e.g. ``04Q``."""
        return f"{self.zone_number:02d}{self.zone_letter}"

    @property
    def resolution_meters(self) -> int:
        """Size of the cell described by the digits."""
        return 10 ** (MGRS_MAX_DIGITS - self.digits)

    @property
    def easting_offset(self) -> int:
        """Meters from the square's west edge to the cell's west edge."""
        return self.easting * self.resolution_meters

    @property
    def northing_offset(self) -> int:
        """Meters from the square's south edge to the cell's south edge."""
        return self.northing * self.resolution_meters

    def to_string(self, spaced: bool = False) -> str:
        square = f"{self.grid_col}{self.grid_row}"
        if not self.digits:
            return f"{self.grid_zone} {square}" if spaced else f"{self.grid_zone}{square}"

        east = f"{self.easting:0{self.digits}d}"
        north = f"{self.northing:0{self.digits}d}"
        if spaced:
            return f"{self.grid_zone} {square} {east} {north}"
        return f"{self.grid_zone}{square}{east}{north}"

    def __str__(self) -> str:
        return self.to_string()


class UTMValue(BaseModel):
    """Represents a UTM coordinate."""

    model_config = ConfigDict(frozen=True)

    zone_number: Annotated[int, Field(ge=1, le=60)]
    zone_letter: Annotated[str, Field(pattern="^[C-HJ-NP-X]$")]
    easting: Annotated[float, Field(ge=0, description="Easting in meters")]
    northing: Annotated[
        float, Field(ge=0, le=10_000_000, description="Northing in meters")
    ]

    @property
    def hemisphere(self) -> Hemisphere:
        return Hemisphere.from_zone_letter(self.zone_letter)

    @property
    def is_northern(self) -> bool:
        return self.hemisphere is Hemisphere.NORTH

    def to_string(self) -> str:
        """Format as ``31U 448252 5411954`` (whole meters)."""
        return (
            f"{self.zone_number}{self.zone_letter} "
            f"{round(self.easting):d} {round(self.northing):d}"
        )

    def __str__(self) -> str:
        return self.to_string()


class AngleParts(BaseModel):
    """A single angle split into sexagesimal parts.

    ``degrees`` carries the sign; ``minutes`` and ``seconds`` are absolute and
    are None when the format does not use them.
    """

    model_config = ConfigDict(frozen=True)

    degrees: float
    minutes: float | None = None
    seconds: float | None = None


class FormatOptions(BaseModel):
    """Decoration applied by a pair formatter.

    Attributes:
        prefix: Text placed before the pair
        suffix: Text placed after the pair
        separator: Text between the two axes
        with_ordinal: Append N/S/E/W and format absolute values
        order: Output axis order
    """

    model_config = ConfigDict(frozen=True)

    prefix: str = ""
    suffix: str = ""
    separator: str = DEFAULT_SEPARATOR
    with_ordinal: bool = False
    order: Format = Format.LATLON
