from fitbit_activity.combine import aggregate_duplicates, concat_sources, find_duplicates, find_inconsistent_groups
from fitbit_activity.errors import DataQualityWarning, DataSourceError, DateParseError, FitbitActivityError
from fitbit_activity.features import add_activity_totals, add_weekday, derive_features, parse_activity_dates
from fitbit_activity.loader import load_activity_csv, load_sources
from fitbit_activity.pipeline import PipelineResult, clean_activity, clean_raw, combine_raw, run_pipeline
from fitbit_activity.quality import QualityReport, check_quality
