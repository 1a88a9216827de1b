"""Pipeline configuration shared across requests.

A PipelineConfig is built once (from code or a settings file) and then
passed, read-only, into every pipeline call.
"""

from dataclasses import dataclass
from typing import Optional

from level1_ingestion.loader import SourceFormat
from level2_validation.checks import RecordCheck
from level4_layout.layouts import LayoutDefinition
from utils import DEFAULT_CSV_DELIMITER


class ConfigurationError(Exception):
    """Raised when the pipeline is configured incorrectly for an operation."""

    pass


def check_layouts(layouts: tuple[LayoutDefinition, ...]) -> None:
    """Reject layout lists with repeated names.

    Raises:
        ConfigurationError: If two layouts share a name
    """
    names = [layout.name for layout in layouts]
    duplicates = sorted({name for name in names if names.count(name) > 1})
    if duplicates:
        raise ConfigurationError(f"Layout names must be unique, repeated: {duplicates}")


@dataclass(frozen=True)
class PipelineConfig:
    """Immutable pipeline configuration.

    Args:
        check: Optional record check applied during validation
        layouts: Output layouts used by transform_to_layout
        csv_delimiter: Field delimiter for delimited text input
        source_format: Force an input format instead of detecting it
    """

    check: Optional[RecordCheck] = None
    layouts: tuple[LayoutDefinition, ...] = ()
    csv_delimiter: str = DEFAULT_CSV_DELIMITER
    source_format: SourceFormat = SourceFormat.AUTO

    def __post_init__(self) -> None:
        object.__setattr__(self, "layouts", tuple(self.layouts))
        if len(self.csv_delimiter) != 1:
            raise ConfigurationError(
                f"csv_delimiter must be a single character, got {self.csv_delimiter!r}"
            )
        check_layouts(self.layouts)
