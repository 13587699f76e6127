"""Load -> combine -> clean -> check, each step fully materialised before the next."""

import logging
from dataclasses import dataclass

import pandas as pd

from fitbit_activity import config
from fitbit_activity.combine import aggregate_duplicates, concat_sources, find_duplicates
from fitbit_activity.features import derive_features, parse_activity_dates
from fitbit_activity.loader import load_sources
from fitbit_activity.quality import QualityReport, check_quality

logger = logging.getLogger(__name__)


@dataclass
class PipelineResult:
    raw: pd.DataFrame          # date-parsed concatenation, before aggregation
    duplicates: pd.DataFrame   # raw rows sharing a key
    cleaned: pd.DataFrame      # one row per (user_id, date)
    quality: QualityReport


def combine_raw(*frames: pd.DataFrame) -> pd.DataFrame:
    """Stack loaded exports and parse their dates, before any merging."""
    return parse_activity_dates(concat_sources(*frames))


def clean_raw(raw: pd.DataFrame) -> pd.DataFrame:
    """Merge duplicate keys of a combined table and derive the report columns."""
    return derive_features(aggregate_duplicates(raw))


def clean_activity(*frames: pd.DataFrame) -> pd.DataFrame:
    """Combine loaded exports into the cleaned activity table."""
    return clean_raw(combine_raw(*frames))


def run_pipeline(first_path=config.FIRST_EXPORT, second_path=config.SECOND_EXPORT) -> PipelineResult:
    """
    Run the cleaning pipeline against the two exports.

    DataSourceError and DateParseError propagate and abort the run; quality
    findings are returned in the result instead.
    """
    first, second = load_sources(first_path, second_path)
    raw = combine_raw(first, second)
    duplicates = find_duplicates(raw)
    cleaned = clean_raw(raw)
    quality = check_quality(cleaned, raw)

    logger.info("Cleaned table: %d rows, %d users, %s to %s", len(cleaned),
                cleaned[config.ID_COLUMN].nunique(),
                cleaned[config.DATE_COLUMN].min(), cleaned[config.DATE_COLUMN].max())
    return PipelineResult(raw=raw, duplicates=duplicates, cleaned=cleaned, quality=quality)
