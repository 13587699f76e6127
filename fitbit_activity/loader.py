"""
Reading the daily activity exports.

Both exports share one fixed schema (see config.COLUMN_MAP). Anything that
breaks it is a DataSourceError: the aggregation downstream relies on fixed
column identities.
"""

import logging
import os

import pandas as pd

from fitbit_activity import config
from fitbit_activity.errors import DataSourceError

logger = logging.getLogger(__name__)


def _read_csv(path):
    if not os.path.exists(path):
        raise DataSourceError(path, "file not found")
    try:
        # header=None makes the header line fix the field count, so a data row
        # with surplus fields is a tokenizing error instead of an index
        table = pd.read_csv(path, header=None, dtype=str)
    except pd.errors.EmptyDataError:
        raise DataSourceError(path, "file is empty")
    except pd.errors.ParserError as e:
        raise DataSourceError(path, f"malformed CSV: {e}")
    except (OSError, UnicodeDecodeError) as e:
        raise DataSourceError(path, f"cannot read file: {e}")

    df = table.iloc[1:].reset_index(drop=True)
    df.columns = table.iloc[0].astype(str)
    if df.empty:
        raise DataSourceError(path, "no data rows")
    return df


def _check_schema(df, path):
    # Clean heading names the same way for every export
    df.columns = df.columns.str.strip()

    missing = [col for col in config.COLUMN_MAP if col not in df.columns]
    if missing:
        raise DataSourceError(path, f"missing columns: {', '.join(missing)}")

    extra = [col for col in df.columns if col not in config.COLUMN_MAP]
    if extra:
        logger.info("Dropping unexpected columns from %s: %s", path, ', '.join(extra))


def _coerce_numeric(df, path):
    for col in config.NUMERIC_COLUMNS:
        values = pd.to_numeric(df[col], errors='coerce')
        bad = df[col].notna() & values.isna()
        if bad.any():
            sample = df.loc[bad, col].astype(str).unique()[:3]
            raise DataSourceError(path, f"non-numeric values in {col}: {', '.join(sample)}")
        if (values < 0).any():
            raise DataSourceError(path, f"negative values in {col}")
        df[col] = values
    return df


def load_activity_csv(path) -> pd.DataFrame:
    """Load one daily activity export into a frame with the cleaned column names."""
    df = _read_csv(path)
    _check_schema(df, path)

    # Specify columns that we want to keep, in schema order
    df = df.reindex(columns=list(config.COLUMN_MAP)).rename(columns=config.COLUMN_MAP)

    if df[config.ID_COLUMN].isna().any():
        raise DataSourceError(path, f"{df[config.ID_COLUMN].isna().sum()} rows without a user id")
    # Ids are opaque; compare them as text so both exports agree
    df[config.ID_COLUMN] = df[config.ID_COLUMN].astype(str).str.strip()
    dates = df[config.DATE_STRING_COLUMN]
    df[config.DATE_STRING_COLUMN] = dates.where(dates.isna(), dates.astype(str).str.strip())

    df = _coerce_numeric(df, path)
    logger.info("Loaded %d rows for %d users from %s", len(df), df[config.ID_COLUMN].nunique(), path)
    return df


def load_sources(first_path=config.FIRST_EXPORT, second_path=config.SECOND_EXPORT):
    """Load both export periods. Returns two frames with identical schemas."""
    return load_activity_csv(first_path), load_activity_csv(second_path)
