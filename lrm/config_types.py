"""Typed configuration dataclasses for list-reconcile-matcher.

Provides strongly-typed configuration objects that can be used throughout
the application for better type safety and IDE support.
"""
from __future__ import annotations
from dataclasses import dataclass, field, asdict
from typing import List, Dict, Any, TYPE_CHECKING

if TYPE_CHECKING:
    from .match.models import MatchOptions


@dataclass
class MatchingConfig:
    """List matching configuration (aligned with _DEFAULTS)."""
    algorithm: str = "exact"
    ignore_case: bool = True
    threshold: float = 80.0  # 0-100 scale, scored algorithms only
    show_unmatched: int = 20  # Max leftovers listed per side in CLI output

    def to_options(self) -> MatchOptions:
        """Build validated MatchOptions.

        Raises:
            ConfigurationError: If algorithm or threshold is invalid
        """
        from .match.models import MatchOptions
        threshold = self.threshold
        # Env coercion turns "0"/"1" into booleans
        if isinstance(threshold, bool):
            threshold = float(threshold)
        elif isinstance(threshold, str):
            from .errors import ConfigurationError
            try:
                threshold = float(threshold)
            except ValueError:
                raise ConfigurationError(f"Threshold must be a number, got {threshold!r}") from None
        return MatchOptions(algorithm=self.algorithm, ignore_case=bool(self.ignore_case), threshold=threshold)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for backward compatibility."""
        return asdict(self)


@dataclass
class IngestConfig:
    """Document extraction configuration."""
    deduplicate: bool = False
    extensions: List[str] = field(default_factory=lambda: [".txt", ".xlsx", ".docx"])

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for backward compatibility."""
        return asdict(self)


@dataclass
class ReportsConfig:
    """Reporting configuration."""
    directory: str = "data/reports"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for backward compatibility."""
        return asdict(self)


@dataclass
class AppConfig:
    """Root application configuration with all subsections."""
    log_level: str = "INFO"
    matching: MatchingConfig = field(default_factory=MatchingConfig)
    ingest: IngestConfig = field(default_factory=IngestConfig)
    reports: ReportsConfig = field(default_factory=ReportsConfig)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to nested dictionary.

        Returns:
            Nested dict structure matching config format
        """
        return {
            "log_level": self.log_level,
            "matching": self.matching.to_dict(),
            "ingest": self.ingest.to_dict(),
            "reports": self.reports.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> AppConfig:
        """Create typed config from dictionary.

        Args:
            data: Dictionary config (from load_config)

        Returns:
            Typed AppConfig instance
        """
        return cls(
            log_level=data.get("log_level", "INFO"),
            matching=MatchingConfig(**data.get("matching", {})),
            ingest=IngestConfig(**data.get("ingest", {})),
            reports=ReportsConfig(**data.get("reports", {})),
        )


__all__ = [
    "AppConfig",
    "MatchingConfig",
    "IngestConfig",
    "ReportsConfig",
]
