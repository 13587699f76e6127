"""
Shared fixtures: small daily activity exports written to tmp_path.

Rows are built with the CSV header names so the files look like the real
dailyActivity_merged.csv exports.
"""

import matplotlib
matplotlib.use("Agg")

import pandas as pd
import pytest

from fitbit_activity import config

HEADER = list(config.COLUMN_MAP)


def make_row(user_id=1, date="3/4/2024", **metrics):
    row = {col: 0 for col in HEADER}
    row['Id'] = user_id
    row['ActivityDate'] = date
    row.update(metrics)
    return row


def write_export(path, rows, columns=None):
    pd.DataFrame(rows, columns=columns or HEADER).to_csv(path, index=False)
    return path


# The two rows of the duplicate-sync scenario
ROW_A = dict(TotalSteps=1000, VeryActiveDistance=1.0, ModeratelyActiveDistance=0.5, LightActiveDistance=0.5,
             VeryActiveMinutes=10, FairlyActiveMinutes=5, LightlyActiveMinutes=20, SedentaryMinutes=900,
             Calories=200)
ROW_B = dict(TotalSteps=500, VeryActiveDistance=0.5, ModeratelyActiveDistance=0.25, LightActiveDistance=0.25,
             VeryActiveMinutes=5, FairlyActiveMinutes=5, LightlyActiveMinutes=10, SedentaryMinutes=300,
             Calories=100)


def _day(user_id, day, scale):
    steps = 4000 + 900 * day + 2500 * scale
    return make_row(
        user_id, f"3/{day}/2024",
        TotalSteps=steps,
        TotalDistance=round(steps * 0.0007, 2),
        TrackerDistance=round(steps * 0.0007, 2),
        VeryActiveDistance=round(0.5 * scale + 0.1 * day, 2),
        ModeratelyActiveDistance=0.4,
        LightActiveDistance=round(2.0 + 0.2 * day, 2),
        VeryActiveMinutes=5 * scale + day,
        FairlyActiveMinutes=10,
        LightlyActiveMinutes=150 + 4 * day,
        SedentaryMinutes=1000 - 10 * day,
        Calories=1600 + steps // 20,
    )


@pytest.fixture
def scenario_rows():
    return make_row(1, "3/4/2024", **ROW_A), make_row(1, "3/4/2024", **ROW_B)


@pytest.fixture
def sample_exports(tmp_path):
    """
    Two exports for users 1 and 2. The first covers 3/3-3/9/2024, the second
    3/9-3/12/2024, so 3/9 is synced in both for each user.
    """
    first = [_day(user, day, user) for user in (1, 2) for day in range(3, 10)]
    second = [_day(user, day, user) for user in (1, 2) for day in range(9, 13)]
    return (write_export(tmp_path / "first.csv", first),
            write_export(tmp_path / "second.csv", second))
