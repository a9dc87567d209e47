"""Runtime configuration read from the environment."""

import logging
from dataclasses import dataclass, field
from os import getenv


def _parse_int(value: str, default: int) -> int:
    """Parse int from environment variable."""
    try:
        return int(value) if value else default
    except ValueError:
        return default


@dataclass(slots=True, frozen=True)
class Config:
    # ==================== Logging ====================
    log_level: str = field(default_factory=lambda: getenv("SWISSQR_LOG_LEVEL", "WARNING").upper())

    # ==================== Display widths ====================
    # Characters per line in the payment part and in the receipt
    payment_line_width: int = field(
        default_factory=lambda: _parse_int(getenv("SWISSQR_PAYMENT_LINE_WIDTH", ""), 72)
    )
    receipt_line_width: int = field(
        default_factory=lambda: _parse_int(getenv("SWISSQR_RECEIPT_LINE_WIDTH", ""), 38)
    )

    def get_line_widths(self) -> dict[str, int]:
        """Get display widths keyed by bill section."""
        return {
            "payment": self.payment_line_width,
            "receipt": self.receipt_line_width,
        }


def configure_logging(level: str | None = None) -> None:
    """Attach a basic stderr handler. Meant for scripts, never called on import."""
    logging.basicConfig(
        level=getattr(logging, (level or cfg.log_level).upper(), logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


cfg = Config()
