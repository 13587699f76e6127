"""Advisory data quality checks on the cleaned activity table."""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

import pandas as pd

from fitbit_activity import config
from fitbit_activity.combine import find_duplicates, find_inconsistent_groups
from fitbit_activity.errors import DataQualityWarning

logger = logging.getLogger(__name__)


@dataclass
class QualityReport:
    has_duplicate_keys: bool
    missing_values: pd.Series
    duplicate_rows: int = 0
    inconsistent_keys: pd.DataFrame = field(default_factory=pd.DataFrame)
    warnings: List[DataQualityWarning] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.warnings

    def summary(self) -> str:
        lines = [
            f"Duplicate keys after cleaning: {'yes' if self.has_duplicate_keys else 'no'}",
            f"Raw rows sharing a key: {self.duplicate_rows}",
            f"Missing values: {int(self.missing_values.sum())}",
        ]
        lines.extend(f"  {col}: {n}" for col, n in self.missing_values.items() if n)
        lines.extend(f"WARNING {w}" for w in self.warnings)
        return '\n'.join(lines)


def check_quality(cleaned: pd.DataFrame, raw: Optional[pd.DataFrame] = None) -> QualityReport:
    """
    Report on the cleaned table without changing it.

    `raw` is the date-parsed concatenation before aggregation; when given, the
    report also counts the duplicate rows and lists keys whose non-numeric
    values disagreed. Findings are collected as DataQualityWarning instances
    and logged, never raised.
    """
    key = list(config.KEY_COLUMNS)
    findings = []

    dup_mask = cleaned.duplicated(subset=key, keep=False)
    has_duplicate_keys = bool(dup_mask.any())
    if has_duplicate_keys:
        n_keys = len(cleaned.loc[dup_mask, key].drop_duplicates())
        findings.append(DataQualityWarning('duplicate_keys', f"{n_keys} keys appear more than once after cleaning"))

    missing = cleaned.isna().sum()
    for col, n in missing[missing > 0].items():
        findings.append(DataQualityWarning('missing_values', f"{col} has {n} missing values"))

    duplicate_rows = 0
    inconsistent = pd.DataFrame(columns=key + ['column', 'values'])
    if raw is not None:
        duplicate_rows = len(find_duplicates(raw))
        inconsistent = find_inconsistent_groups(raw)
        for rec in inconsistent.to_dict('records'):
            findings.append(DataQualityWarning(
                'inconsistent_values',
                f"user {rec[config.ID_COLUMN]} on {rec[config.DATE_COLUMN]:%Y-%m-%d}: "
                f"{rec['column']} differs between duplicate rows ({', '.join(rec['values'])})"))

    for finding in findings:
        logger.warning("%s", finding)

    return QualityReport(
        has_duplicate_keys=has_duplicate_keys,
        missing_values=missing,
        duplicate_rows=duplicate_rows,
        inconsistent_keys=inconsistent,
        warnings=findings,
    )
