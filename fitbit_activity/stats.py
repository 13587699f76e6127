"""
Grouped summary statistics for the report.

Every function reads the cleaned table and returns a new object; the table
itself is never modified.
"""

import numpy as np
import pandas as pd

from fitbit_activity import config


def standard_error(values) -> float:
    """Sample standard deviation over sqrt(n). NaN with fewer than two values."""
    s = pd.Series(values, dtype=float).dropna()
    if len(s) < 2:
        return np.nan
    return s.std(ddof=1) / np.sqrt(len(s))


def confidence_interval(mean, se, z=config.CI_Z):
    return mean - z * se, mean + z * se


def summarize(frame: pd.DataFrame, by, column: str, z=config.CI_Z) -> pd.DataFrame:
    """Per-group n, mean, sd, standard error and normal confidence interval."""
    out = frame.groupby(by, sort=True)[column].agg(n='count', mean='mean', sd='std', se=standard_error)
    out['ci_lower'], out['ci_upper'] = confidence_interval(out['mean'], out['se'], z)
    return out


def summary_by_weekday(frame: pd.DataFrame, column: str) -> pd.DataFrame:
    out = summarize(frame, config.WEEKDAY_COLUMN, column)
    # Sunday -> Saturday rather than alphabetical
    order = [day for day in config.WEEKDAY_ORDER if day in out.index]
    return out.reindex(pd.Index(order, name=config.WEEKDAY_COLUMN))


def summary_by_user(frame: pd.DataFrame, column: str) -> pd.DataFrame:
    return summarize(frame, config.ID_COLUMN, column)


def summary_by_date(frame: pd.DataFrame, column: str) -> pd.DataFrame:
    return summarize(frame, config.DATE_COLUMN, column)


def rolling_mean(series: pd.Series, window: int) -> pd.Series:
    # Calculate rolling means to identify trends
    return series.rolling(window=window).mean()


def linear_trend(frame: pd.DataFrame, x: str, y: str):
    """Least squares slope and intercept of y on x, with Pearson r."""
    data = frame[[x, y]].dropna()
    if len(data) < 2:
        return np.nan, np.nan, np.nan
    slope, intercept = np.polyfit(data[x], data[y], 1)
    r = np.corrcoef(data[x], data[y])[0, 1]
    return slope, intercept, r


def intensity_minutes_share(frame: pd.DataFrame) -> pd.DataFrame:
    """Mean daily minutes at each intensity level and the share of the day it takes."""
    means = frame[config.INTENSITY_MINUTES_COLUMNS].mean()
    return pd.DataFrame({'mean_minutes': means, 'share': means / means.sum()})


def describe_metrics(frame: pd.DataFrame) -> pd.DataFrame:
    columns = config.NUMERIC_COLUMNS + [config.TOTAL_ACTIVE_DISTANCE, config.TOTAL_ACTIVE_MINUTES]
    return frame[[c for c in columns if c in frame.columns]].describe().T
