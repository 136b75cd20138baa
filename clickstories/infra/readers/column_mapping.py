"""
Column mapping resolvers.

Spreadsheet headers rarely match field names exactly, so every resolver
first tries an explicit mapping, then a loose match that ignores case,
spaces, underscores and hyphens ("Viz Type" finds ``vizType``).
"""

import re
from typing import Callable, Dict, List, Mapping, Optional, Sequence, Tuple

from clickstories.application.ports import ColumnMappingResolverPort
from clickstories.domain_core.exceptions import PanelSourceError
from clickstories.infra.config.logging_config import get_logger

logger = get_logger(__name__)


def normalize_header(name: object) -> str:
    return re.sub(r"[\s_\-]+", "", str(name)).lower()


class StaticMappingResolver(ColumnMappingResolverPort):
    """Resolves from explicit mappings and header matching only."""

    def resolve_mapping(
        self,
        required_fields: Sequence[str],
        available_columns: List[str],
        mapping: Optional[Mapping[str, str]] = None,
        optional_fields: Sequence[str] = (),
    ) -> Dict[str, str]:
        resolved, unresolved = self.match_columns(
            list(required_fields) + list(optional_fields), available_columns, mapping
        )
        missing = [field for field in required_fields if field in unresolved]
        if missing:
            missing = self.resolve_missing(missing, available_columns, resolved)
        if missing:
            raise PanelSourceError(
                "no column found for required fields: "
                + ", ".join(missing)
                + f" (available columns: {', '.join(map(str, available_columns))})"
            )
        return resolved

    def resolve_missing(
        self, fields: List[str], available_columns: List[str], resolved: Dict[str, str]
    ) -> List[str]:
        """Hook for resolvers that can recover unmatched fields; returns what is still missing."""
        return fields

    @staticmethod
    def match_columns(
        fields: Sequence[str],
        available_columns: List[str],
        mapping: Optional[Mapping[str, str]] = None,
    ) -> Tuple[Dict[str, str], List[str]]:
        mapping = dict(mapping or {})
        by_normalized = {normalize_header(column): column for column in available_columns}
        resolved: Dict[str, str] = {}
        unresolved: List[str] = []

        for field in fields:
            candidate = mapping.get(field)
            if candidate is not None and candidate in available_columns:
                resolved[field] = candidate
                continue
            for name in (candidate, field):
                if name and normalize_header(name) in by_normalized:
                    resolved[field] = by_normalized[normalize_header(name)]
                    break
            else:
                unresolved.append(field)

        return resolved, unresolved


class PromptMappingResolver(StaticMappingResolver):
    """Asks the user for any required field that could not be matched."""

    def __init__(self, prompt: Callable[[str], str] = input, max_attempts: int = 3):
        self.prompt = prompt
        self.max_attempts = max_attempts

    def resolve_missing(
        self, fields: List[str], available_columns: List[str], resolved: Dict[str, str]
    ) -> List[str]:
        still_missing = []
        for field in fields:
            logger.info(
                "mapping.column_not_found",
                field=field,
                available=list(map(str, available_columns)),
            )
            for _ in range(self.max_attempts):
                answer = self.prompt(
                    f"Please provide the column name for '{field}': "
                ).strip()
                if answer in available_columns:
                    resolved[field] = answer
                    break
                logger.warning("mapping.unknown_column", field=field, answer=answer)
            else:
                still_missing.append(field)
        return still_missing
