"""Fixed inputs and constants for the daily activity analysis."""

import os

# Default locations of the two Fitbit export periods
DATA_DIR = 'data'
FIRST_EXPORT = os.path.join(DATA_DIR, 'Fitabase Data 3.12.16-4.11.16', 'dailyActivity_merged.csv')
SECOND_EXPORT = os.path.join(DATA_DIR, 'Fitabase Data 4.12.16-5.12.16', 'dailyActivity_merged.csv')

OUTPUT_DIR = os.path.join('files', 'activity_report')

# ActivityDate is written as month/day/year, e.g. 4/12/2016
DATE_FORMAT = '%m/%d/%Y'

# CSV header -> cleaned column name, in schema order
COLUMN_MAP = {
    'Id': 'user_id',
    'ActivityDate': 'activity_date',
    'TotalSteps': 'total_steps',
    'TotalDistance': 'total_distance',
    'TrackerDistance': 'tracker_distance',
    'LoggedActivitiesDistance': 'logged_activities_distance',
    'VeryActiveDistance': 'very_active_distance',
    'ModeratelyActiveDistance': 'moderately_active_distance',
    'LightActiveDistance': 'light_active_distance',
    'SedentaryActiveDistance': 'sedentary_active_distance',
    'VeryActiveMinutes': 'very_active_minutes',
    'FairlyActiveMinutes': 'fairly_active_minutes',
    'LightlyActiveMinutes': 'lightly_active_minutes',
    'SedentaryMinutes': 'sedentary_minutes',
    'Calories': 'calories',
}

ID_COLUMN = 'user_id'
DATE_STRING_COLUMN = 'activity_date'
DATE_COLUMN = 'date'
WEEKDAY_COLUMN = 'weekday'
KEY_COLUMNS = (ID_COLUMN, DATE_COLUMN)

NUMERIC_COLUMNS = [c for c in COLUMN_MAP.values() if c not in (ID_COLUMN, DATE_STRING_COLUMN)]

ACTIVE_DISTANCE_COLUMNS = ['very_active_distance', 'moderately_active_distance', 'light_active_distance']
ACTIVE_MINUTES_COLUMNS = ['very_active_minutes', 'fairly_active_minutes', 'lightly_active_minutes']
INTENSITY_MINUTES_COLUMNS = ACTIVE_MINUTES_COLUMNS + ['sedentary_minutes']

TOTAL_ACTIVE_DISTANCE = 'total_active_distance'
TOTAL_ACTIVE_MINUTES = 'total_active_minutes'

# Presentation order, not alphabetical
WEEKDAY_ORDER = ['Sunday', 'Monday', 'Tuesday', 'Wednesday', 'Thursday', 'Friday', 'Saturday']

# 95% normal interval
CI_Z = 1.96

ROLLING_WINDOWS = (3, 7)
