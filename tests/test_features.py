import pandas as pd
import pytest

from fitbit_activity.errors import DateParseError
from fitbit_activity.features import add_activity_totals, add_weekday, derive_features, parse_activity_dates


def _frame(**columns):
    base = {
        'user_id': ['1'],
        'activity_date': ['3/4/2024'],
        'very_active_distance': [1.0],
        'moderately_active_distance': [0.5],
        'light_active_distance': [0.5],
        'very_active_minutes': [10],
        'fairly_active_minutes': [5],
        'lightly_active_minutes': [20],
    }
    base.update(columns)
    return pd.DataFrame(base)


def test_parse_activity_dates():
    df = parse_activity_dates(_frame(activity_date=['3/4/2024']))
    assert df.loc[0, 'date'] == pd.Timestamp(2024, 3, 4)
    assert df.loc[0, 'activity_date'] == '3/4/2024'


def test_parse_zero_padded_dates():
    df = parse_activity_dates(_frame(activity_date=['03/04/2024']))
    assert df.loc[0, 'date'] == pd.Timestamp(2024, 3, 4)


def test_unparseable_date_raises():
    df = pd.DataFrame({'activity_date': ['3/4/2024', '2024-03-05']})
    with pytest.raises(DateParseError) as excinfo:
        parse_activity_dates(df)
    assert excinfo.value.values == ['2024-03-05']


def test_missing_date_raises():
    with pytest.raises(DateParseError):
        parse_activity_dates(_frame(activity_date=[None]))


def test_weekday_known_date():
    df = add_weekday(parse_activity_dates(_frame()))
    assert df.loc[0, 'weekday'] == 'Monday'


def test_weekday_full_week():
    dates = [f"3/{day}/2024" for day in range(3, 10)]
    df = add_weekday(parse_activity_dates(pd.DataFrame({'activity_date': dates})))
    assert list(df['weekday']) == ['Sunday', 'Monday', 'Tuesday', 'Wednesday', 'Thursday', 'Friday', 'Saturday']


def test_activity_totals():
    df = add_activity_totals(_frame())
    assert df.loc[0, 'total_active_distance'] == 2.0
    assert df.loc[0, 'total_active_minutes'] == 35


def test_activity_totals_zero_row():
    df = add_activity_totals(_frame(very_active_distance=[0.0], moderately_active_distance=[0.0],
                                    light_active_distance=[0.0], very_active_minutes=[0],
                                    fairly_active_minutes=[0], lightly_active_minutes=[0]))
    assert df.loc[0, 'total_active_distance'] == 0
    assert df.loc[0, 'total_active_minutes'] == 0


def test_activity_totals_are_recomputed():
    df = add_activity_totals(_frame())
    df['very_active_minutes'] = 40
    df = add_activity_totals(df)
    assert df.loc[0, 'total_active_minutes'] == 65


def test_missing_component_leaves_total_missing():
    df = add_activity_totals(_frame(light_active_distance=[float('nan')]))
    assert pd.isna(df.loc[0, 'total_active_distance'])
    assert df.loc[0, 'total_active_minutes'] == 35


def test_derive_features_does_not_modify_input():
    raw = parse_activity_dates(_frame())
    before = raw.copy()
    derived = derive_features(raw)
    pd.testing.assert_frame_equal(raw, before)
    assert {'weekday', 'total_active_distance', 'total_active_minutes'} <= set(derived.columns)
