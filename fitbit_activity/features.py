"""Calendar date parsing and derived activity columns."""

import logging

import pandas as pd

from fitbit_activity import config
from fitbit_activity.errors import DateParseError

logger = logging.getLogger(__name__)


def parse_activity_dates(frame: pd.DataFrame, date_format: str = config.DATE_FORMAT) -> pd.DataFrame:
    """
    Add a `date` column parsed from the ActivityDate strings.

    Unparseable (or missing) strings raise DateParseError; they are never
    replaced with a default date.
    """
    df = frame.copy()
    raw = df[config.DATE_STRING_COLUMN]
    parsed = pd.to_datetime(raw, format=date_format, errors='coerce')

    bad = parsed.isna()
    if bad.any():
        raise DateParseError(raw[bad].astype(str).unique(), date_format)

    df[config.DATE_COLUMN] = parsed.dt.normalize()
    return df


def add_weekday(frame: pd.DataFrame) -> pd.DataFrame:
    df = frame.copy()
    # day_name() without a locale always gives English names
    df[config.WEEKDAY_COLUMN] = df[config.DATE_COLUMN].dt.day_name()
    return df


def add_activity_totals(frame: pd.DataFrame) -> pd.DataFrame:
    """(Re)compute total_active_distance and total_active_minutes from their parts."""
    df = frame.copy()
    # A missing component leaves the total missing rather than understated
    df[config.TOTAL_ACTIVE_DISTANCE] = df[config.ACTIVE_DISTANCE_COLUMNS].sum(
        axis=1, min_count=len(config.ACTIVE_DISTANCE_COLUMNS))
    df[config.TOTAL_ACTIVE_MINUTES] = df[config.ACTIVE_MINUTES_COLUMNS].sum(
        axis=1, min_count=len(config.ACTIVE_MINUTES_COLUMNS))
    return df


def derive_features(frame: pd.DataFrame) -> pd.DataFrame:
    df = add_activity_totals(add_weekday(frame))
    logger.debug("Derived weekday and activity totals for %d rows", len(df))
    return df
