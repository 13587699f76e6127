"""
Run the activity report from the command line.

    python -m fitbit_activity FIRST.csv SECOND.csv --output-dir files/activity_report
"""

import argparse
import logging
import os
import sys

from fitbit_activity import config, plots, stats
from fitbit_activity.errors import DataSourceError, DateParseError
from fitbit_activity.logging_config import setup_logging
from fitbit_activity.pipeline import run_pipeline

logger = logging.getLogger('fitbit_activity')

REPORT_METRICS = ['total_steps', 'calories', config.TOTAL_ACTIVE_MINUTES, config.TOTAL_ACTIVE_DISTANCE,
                  'sedentary_minutes']


def write_outputs(result, output_dir):
    os.makedirs(output_dir, exist_ok=True)
    cleaned = result.cleaned

    def save_csv(obj, name, index=False):
        path = os.path.join(output_dir, name)
        obj.to_csv(path, index=index, encoding="utf-8")
        logger.info("Saved: %s", path)

    save_csv(cleaned, 'clean_daily_activity.csv')
    save_csv(result.duplicates, 'duplicate_rows.csv')
    save_csv(stats.describe_metrics(cleaned), 'describe_metrics.csv', index=True)
    save_csv(stats.intensity_minutes_share(cleaned), 'intensity_minutes.csv', index=True)

    plot_dir = os.path.join(output_dir, 'plots')
    for metric in REPORT_METRICS:
        save_csv(stats.summary_by_weekday(cleaned, metric), f'{metric}_by_weekday.csv', index=True)
        save_csv(stats.summary_by_user(cleaned, metric), f'{metric}_by_user.csv', index=True)
        save_csv(stats.summary_by_date(cleaned, metric), f'{metric}_by_date.csv', index=True)

        plots.save_figure(plots.plot_histogram(cleaned, metric), plot_dir, f'{metric}_histogram.png')
        plots.save_figure(plots.plot_weekday_boxplot(cleaned, metric), plot_dir, f'{metric}_weekday_box.png')
        plots.save_figure(plots.plot_weekday_means(cleaned, metric), plot_dir, f'{metric}_weekday_means.png')
        plots.save_figure(plots.plot_daily_trend(cleaned, metric), plot_dir, f'{metric}_daily_trend.png')

    plots.save_figure(plots.plot_metric_trend(cleaned), plot_dir, 'calories_vs_steps.png')
    plots.save_figure(plots.plot_intensity_minutes(cleaned), plot_dir, 'intensity_minutes.png')


def main(argv=None):
    parser = argparse.ArgumentParser(description="Clean and summarise two Fitbit daily activity exports.")
    parser.add_argument('first', nargs='?', default=config.FIRST_EXPORT)
    parser.add_argument('second', nargs='?', default=config.SECOND_EXPORT)
    parser.add_argument('--output-dir', default=config.OUTPUT_DIR)
    parser.add_argument('--log-level', default='INFO')
    args = parser.parse_args(argv)

    setup_logging(args.log_level)
    try:
        result = run_pipeline(args.first, args.second)
    except (DataSourceError, DateParseError) as e:
        logger.error("Aborting: %s", e)
        return 1

    logger.info("Data quality:\n%s", result.quality.summary())
    write_outputs(result, args.output_dir)
    logger.info("Done. Outputs in: %s", args.output_dir)
    return 0


if __name__ == '__main__':
    sys.exit(main())
