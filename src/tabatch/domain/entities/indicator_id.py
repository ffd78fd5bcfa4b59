from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class IndicatorId:
    """
    Stable catalog identifier of an indicator (`sma`, `bbands`, `cdl_doji`).

    Related: .indicator_def, ...application.ports.registry.indicator_catalog
    """

    value: str

    def __post_init__(self) -> None:
        """
        Normalize and validate the identifier.

        Args:
            None.
        Returns:
            None.
        Assumptions:
            The identifier is provided as text and is stable once created.
        Raises:
            ValueError: If the normalized identifier is empty or contains unsupported symbols.
        Side Effects:
            Normalizes `value` by stripping spaces and converting to lowercase.
        """
        if not isinstance(self.value, str):
            raise ValueError("IndicatorId requires a string value")
        normalized = self.value.strip().lower()
        object.__setattr__(self, "value", normalized)
        if not normalized:
            raise ValueError("IndicatorId must be non-empty")

        compact = normalized.replace("_", "")
        if not compact.isalnum() or not compact.isascii():
            raise ValueError("IndicatorId may contain only ASCII letters, digits, and underscore")

    @classmethod
    def of(cls, value: IndicatorId | str) -> IndicatorId:
        """
        Coerce caller input into an `IndicatorId`.

        Args:
            value: Existing identifier or raw text.
        Returns:
            IndicatorId: Normalized identifier.
        Assumptions:
            None.
        Raises:
            ValueError: If raw text fails identifier validation.
        Side Effects:
            None.
        """
        if isinstance(value, IndicatorId):
            return value
        return cls(value)

    def __str__(self) -> str:
        return self.value
