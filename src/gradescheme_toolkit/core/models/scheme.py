"""
Module: scheme

Purpose:
    Provides the stored (persisted) representation of a grading scheme:
    rows of (name, fractional lower bound), a scaling factor and the
    points/percentage flag. These are the snapshots that enter the editor
    at initialization and leave it at commit.

Key Classes:
    - GradingSchemeDataRow: One tier, lower bound as a fraction
    - GradingSchemeData: The whole stored scheme
    - InitialFormData: The percentage and points snapshots, side by side

Dependencies:
    - dataclasses (std)
    - typing (std)
    - core.utils.numbers

Used By:
    - editor.editor.GradingSchemeEditor
    - core.schemas.validator
    - core.utils.serialization

Wire Format:
    Dictionaries use the camelCase keys exchanged with the host UI:
    {"title", "data": [{"name", "value"}], "scalingFactor", "pointsBased"}
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

from ..utils.numbers import round_to_four_decimal_places


RepresentationKind = Literal["percentage", "points"]
REPRESENTATION_KINDS: tuple[RepresentationKind, ...] = ("percentage", "points")


@dataclass(frozen=True, slots=True)
class GradingSchemeDataRow:
    """
    One stored tier of a grading scheme.

    Attributes:
        name: Letter grade label ("A", "B-")
        value: Lower bound as a fraction of the scaling factor. May be NaN
            when produced from unparsable editor input; the validator
            rejects such rows.
    """

    name: str
    value: float

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "value": self.value}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GradingSchemeDataRow:
        return cls(name=data["name"], value=data["value"])


@dataclass(frozen=True, slots=True)
class GradingSchemeData:
    """
    Stored grading scheme snapshot (immutable).

    Structural rules (strict ordering, final zero bound, positive scaling
    factor) live in `core.schemas.validator`, not here: the editor builds
    invalid snapshots for the validator to report on.

    Attributes:
        title: Scheme name
        data: Tiers ordered from highest to lowest
        scaling_factor: Stored scaling factor (1.0 for a plain percentage
            scheme, the maximum points for a points-based scheme)
        points_based: Whether display values are points rather than percentages

    Example:
        >>> scheme = GradingSchemeData(
        ...     title="Default",
        ...     data=(GradingSchemeDataRow("A", 0.9), GradingSchemeDataRow("F", 0.0)),
        ...     scaling_factor=1.0,
        ...     points_based=False,
        ... )
        >>> scheme.grade_for(0.95)
        'A'
    """

    title: str
    data: tuple[GradingSchemeDataRow, ...]
    scaling_factor: float
    points_based: bool

    def __post_init__(self) -> None:
        """Normalize row sequence to a tuple."""
        if not isinstance(self.data, tuple):
            object.__setattr__(self, "data", tuple(self.data))

    # ─────────────────────────────────────────────────────────────────────────
    # Properties
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def kind(self) -> RepresentationKind:
        """Representation this snapshot belongs to."""
        return "points" if self.points_based else "percentage"

    @property
    def names(self) -> list[str]:
        """Tier names, top to bottom."""
        return [row.name for row in self.data]

    # ─────────────────────────────────────────────────────────────────────────
    # Query Methods
    # ─────────────────────────────────────────────────────────────────────────

    def grade_for(self, fraction: float) -> str:
        """
        Look up the tier a score falls into.

        Tiers span [lower, upper), so a score exactly on a boundary gets
        the higher tier. Scores below every lower bound fall into the
        last tier.

        Args:
            fraction: Score as a fraction of the scaling factor

        Returns:
            Name of the matching tier

        Raises:
            ValueError: If the scheme has no rows
        """
        if not self.data:
            raise ValueError("Cannot grade against a scheme with no rows")
        score = round_to_four_decimal_places(fraction)
        for row in self.data:
            if score >= row.value:
                return row.name
        return self.data[-1].name

    # ─────────────────────────────────────────────────────────────────────────
    # Serialization
    # ─────────────────────────────────────────────────────────────────────────

    def with_title(self, title: str) -> GradingSchemeData:
        """Copy of this snapshot with a different title."""
        return GradingSchemeData(
            title=title,
            data=self.data,
            scaling_factor=self.scaling_factor,
            points_based=self.points_based,
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize using the camelCase wire keys."""
        return {
            "title": self.title,
            "data": [row.to_dict() for row in self.data],
            "scalingFactor": self.scaling_factor,
            "pointsBased": self.points_based,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GradingSchemeData:
        """
        Deserialize from the wire format.

        scalingFactor defaults to 1.0 and pointsBased to False, matching
        schemes saved before points-based grading existed.
        """
        return cls(
            title=data["title"],
            data=tuple(GradingSchemeDataRow.from_dict(row) for row in data["data"]),
            scaling_factor=data.get("scalingFactor", 1.0),
            points_based=bool(data.get("pointsBased", False)),
        )

    def __repr__(self) -> str:
        """Concise representation for debugging."""
        return f"GradingSchemeData({self.title!r}, {len(self.data)} rows, {self.kind})"


@dataclass(frozen=True, slots=True)
class InitialFormData:
    """
    The two independent snapshots an editor is mounted with.

    Attributes:
        percentage: Snapshot used while grading by percentage
        points: Snapshot used while grading by points
    """

    percentage: GradingSchemeData
    points: GradingSchemeData

    def for_kind(self, kind: RepresentationKind) -> GradingSchemeData:
        """Snapshot for a representation kind."""
        if kind == "percentage":
            return self.percentage
        if kind == "points":
            return self.points
        raise ValueError(f"Invalid representation kind: {kind!r}")

    def to_dict(self) -> dict[str, Any]:
        return {"percentage": self.percentage.to_dict(), "points": self.points.to_dict()}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> InitialFormData:
        return cls(
            percentage=GradingSchemeData.from_dict(data["percentage"]),
            points=GradingSchemeData.from_dict(data["points"]),
        )
