"""
Settings validation system for mcdatapack.
"""

import logging
from typing import List, TYPE_CHECKING

from .types import ValidationResult

if TYPE_CHECKING:
    from .core import AppSettings

logger = logging.getLogger(__name__)


class SettingsValidator:
    """Validates configuration settings."""

    def __init__(self, settings: "AppSettings"):
        self.settings = settings

    def validate(self) -> ValidationResult:
        """Validate current configuration."""
        errors: List[str] = []
        warnings: List[str] = []

        output_path = self.settings.output_path
        if output_path:
            if not output_path.exists():
                warnings.append(
                    f"Output path does not exist yet and will be created: {output_path}"
                )
            elif not output_path.is_dir():
                errors.append(f"Output path is not a directory: {output_path}")
        else:
            warnings.append("Output path not set, compile() needs an explicit destination")

        if self.settings.pack_format < 1:
            errors.append(f"Invalid pack format: {self.settings.pack_format}")

        result = ValidationResult(
            is_valid=len(errors) == 0, errors=errors, warnings=warnings
        )
        logger.debug(
            f"Settings validated: {len(errors)} errors, {len(warnings)} warnings"
        )
        return result
