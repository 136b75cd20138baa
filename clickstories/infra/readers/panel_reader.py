"""
Read panel records from CSV or Excel files.
"""

from pathlib import Path
from typing import List, Mapping, Optional, Union

import pandas as pd

from clickstories.application.ports import ColumnMappingResolverPort
from clickstories.domain_core.entities.panel import Panel
from clickstories.domain_core.exceptions import PanelSourceError
from clickstories.domain_core.validators.panel_validators import PanelValidators
from clickstories.infra.config.logging_config import get_logger
from clickstories.infra.readers.column_mapping import StaticMappingResolver

REQUIRED_FIELDS = ("name", "takeaway", "vizType", "viz")
OPTIONAL_FIELDS = ("text", "alt", "vizSpace")

SUPPORTED_EXTENSIONS = (".csv", ".xlsx", ".xls")

logger = get_logger(__name__)


def load_table(data_file: Union[str, Path]) -> pd.DataFrame:
    """Load a panel table with every cell as a string and empty cells as ''."""
    path = Path(data_file).expanduser()
    extension = path.suffix.lower()
    if extension not in SUPPORTED_EXTENSIONS:
        raise PanelSourceError(
            f"unsupported file type '{extension or path.name}'. "
            "Please provide a CSV or XLSX file."
        )

    try:
        if extension == ".csv":
            frame = pd.read_csv(path, dtype=str, keep_default_na=False)
        else:
            frame = pd.read_excel(path, dtype=str)
    except (OSError, ValueError) as e:
        raise PanelSourceError(f"{path}: {e}") from e

    frame.columns = [str(column).strip() for column in frame.columns]
    return frame.fillna("")


def read_panels(
    data_file: Union[str, Path],
    col_mapping: Optional[Mapping[str, str]] = None,
    resolver: Optional[ColumnMappingResolverPort] = None,
) -> List[Panel]:
    """Read panels from a CSV/XLSX file.

    Args:
        data_file: Path to the panel table.
        col_mapping: Field name to column name overrides, e.g.
            ``{"name": "panel_id", "vizType": "vis_type"}``.
        resolver: Column mapping strategy; defaults to header matching
            without prompting.

    Returns:
        List[Panel]: One panel per row, in file order.

    Raises:
        PanelSourceError: Unsupported or unreadable file, unmapped columns.
        PanelValidationError: A row is missing a required value.
    """
    frame = load_table(data_file)
    resolver = resolver or StaticMappingResolver()
    mapping = resolver.resolve_mapping(
        REQUIRED_FIELDS,
        list(frame.columns),
        col_mapping,
        optional_fields=OPTIONAL_FIELDS,
    )
    logger.debug("panels.mapping", file=str(data_file), mapping=mapping)

    panels = []
    for position, row in enumerate(frame.to_dict(orient="records"), start=1):
        record = {field: row[column] for field, column in mapping.items()}
        panels.append(PanelValidators.coerce_panel(record, position))

    logger.info("panels.loaded", file=str(data_file), count=len(panels))
    return panels
