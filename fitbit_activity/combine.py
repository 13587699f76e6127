"""
Combining the two export periods and merging duplicate syncs.

A key is (user_id, date). Rows sharing a key are merged by summing every
numeric column; non-numeric columns keep the first non-null value and any
disagreement is left for the quality checker to report.
"""

import logging

import pandas as pd
from pandas.api.types import is_numeric_dtype

from fitbit_activity import config

logger = logging.getLogger(__name__)


def _split_columns(frame, key):
    numeric = [c for c in frame.columns if c not in key and is_numeric_dtype(frame[c])]
    other = [c for c in frame.columns if c not in key and c not in numeric]
    return numeric, other


def concat_sources(*frames: pd.DataFrame) -> pd.DataFrame:
    columns = list(frames[0].columns)
    for frame in frames[1:]:
        if list(frame.columns) != columns:
            raise ValueError("cannot combine tables with different columns")
    combined = pd.concat(frames, ignore_index=True)
    logger.info("Combined %d tables into %d rows", len(frames), len(combined))
    return combined


def find_duplicates(frame: pd.DataFrame, key=config.KEY_COLUMNS) -> pd.DataFrame:
    """Rows whose key appears more than once, sorted by key."""
    key = list(key)
    dups = frame[frame.duplicated(subset=key, keep=False)]
    return dups.sort_values(key, kind='stable')


def aggregate_duplicates(frame: pd.DataFrame, key=config.KEY_COLUMNS) -> pd.DataFrame:
    """
    Collapse each key to one row.

    Numeric columns are summed (a group with only missing values stays
    missing); other columns keep the first non-null value. A group of one row
    passes through unchanged, so running this on its own output is a no-op.
    """
    key = list(key)
    numeric, other = _split_columns(frame, key)
    grouped = frame.groupby(key, sort=True)

    parts = []
    if other:
        parts.append(grouped[other].first())
    if numeric:
        parts.append(grouped[numeric].sum(min_count=1))
    if parts:
        merged = pd.concat(parts, axis=1)
    else:
        merged = grouped.size().to_frame()[[]]

    merged = merged.reset_index()[list(frame.columns)]
    if len(merged) < len(frame):
        logger.info("Merged %d duplicate rows into %d keys", len(frame) - len(merged), len(merged))
    return merged


def find_inconsistent_groups(frame: pd.DataFrame, key=config.KEY_COLUMNS) -> pd.DataFrame:
    """Keys whose rows disagree on a non-numeric column, one row per key and column."""
    key = list(key)
    _, other = _split_columns(frame, key)
    dups = find_duplicates(frame, key)

    records = []
    for keys, group in dups.groupby(key, sort=True):
        for col in other:
            values = group[col].dropna().unique()
            if len(values) > 1:
                record = dict(zip(key, keys))
                record['column'] = col
                record['values'] = sorted(str(v) for v in values)
                records.append(record)
    return pd.DataFrame(records, columns=key + ['column', 'values'])
