"""Configuration classes for roadnet input parsing and reporting."""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal


@dataclass(frozen=True)
class AnalysisConfig:
    """Settings shared by the loader and the report writer."""

    # Field separator of the input description and report road lines
    delimiter: str = "\t"

    # Text encoding for input and output files
    encoding: str = "utf-8"

    # Unit label printed next to route distances
    distance_unit: str = "KM"

    # Decimal digits for the two ratios
    ratio_precision: int = 2

    def __post_init__(self) -> None:
        if not self.delimiter:
            raise ValueError("delimiter must be a non-empty string")
        if self.ratio_precision < 0:
            raise ValueError(
                f"ratio_precision must be non-negative, got {self.ratio_precision}"
            )

    def format_ratio(self, value: float) -> str:
        """Render ``value`` with ``ratio_precision`` decimals, locale independent.

        Rounds the shortest decimal form of ``value`` half-up, so ``0.125``
        renders as ``0.13`` at two decimals.
        """
        exponent = Decimal(1).scaleb(-self.ratio_precision)
        rounded = Decimal(repr(value)).quantize(exponent, rounding=ROUND_HALF_UP)
        return format(rounded, "f")


# Global configuration instance
DEFAULT_CONFIG = AnalysisConfig()
