"""Charts for the activity report. Every function returns the matplotlib Figure."""

import logging
import os

import matplotlib
matplotlib.use("Agg")  # headless save
import matplotlib.pyplot as plt
import numpy as np
import seaborn as sns

from fitbit_activity import config, stats

logger = logging.getLogger(__name__)

sns.set_theme(style="whitegrid", context="notebook")


def _label(column):
    return column.replace('_', ' ').capitalize()


def plot_histogram(frame, column, bins=30):
    fig, ax = plt.subplots(figsize=(10, 5))
    sns.histplot(frame[column].dropna(), bins=bins, kde=True, color='darkorchid', ax=ax)
    ax.axvline(frame[column].mean(), color='orange', linestyle='-.', label='Mean')
    ax.set_title(f"Distribution of {_label(column)}", loc='left', fontdict={'fontsize': 16})
    ax.set(xlabel=_label(column), ylabel="Days")
    ax.legend(loc='upper right')
    return fig


def plot_weekday_boxplot(frame, column):
    order = [day for day in config.WEEKDAY_ORDER if day in set(frame[config.WEEKDAY_COLUMN])]
    fig, ax = plt.subplots(figsize=(12, 6))
    sns.boxplot(data=frame, x=config.WEEKDAY_COLUMN, y=column, order=order, color='silver', ax=ax)
    ax.set_title(f"{_label(column)} by Weekday", loc='left', fontdict={'fontsize': 16})
    ax.set(xlabel="Weekday", ylabel=_label(column))
    return fig


def plot_weekday_means(frame, column):
    """Weekday means with 95% confidence interval error bars."""
    summary = stats.summary_by_weekday(frame, column)
    fig, ax = plt.subplots(figsize=(12, 6))
    ax.bar(summary.index, summary['mean'], yerr=summary['mean'] - summary['ci_lower'],
           capsize=6, color='silver', ecolor='darkorchid')
    ax.set_title(f"Average {_label(column)} by Weekday (95% CI)", loc='left', fontdict={'fontsize': 16})
    ax.set(xlabel="Weekday", ylabel=_label(column))
    return fig


def plot_daily_trend(frame, column):
    """Daily mean across users with its confidence band and rolling averages."""
    summary = stats.summary_by_date(frame, column)
    colors = ['orange', 'darkorchid']

    fig, ax = plt.subplots(figsize=(20, 6))
    ax.plot(summary.index, summary['mean'], color='silver', marker='.', label='Daily mean')
    ax.fill_between(summary.index, summary['ci_lower'], summary['ci_upper'], color='silver', alpha=0.3,
                    label='95% CI')
    for window, color in zip(config.ROLLING_WINDOWS, colors):
        ax.plot(summary.index, stats.rolling_mean(summary['mean'], window), color=color, lw=3,
                label=f'{window}-Day Rolling Average')

    ax.set_title(f"Daily {_label(column)}", loc='left', fontdict={'fontsize': 20})
    ax.set(xlabel="Date", ylabel=_label(column))
    ax.xaxis.grid()
    ax.legend(loc='upper right')
    return fig


def plot_metric_trend(frame, x='total_steps', y='calories'):
    """Scatter of two metrics with a fitted trend line."""
    slope, intercept, r = stats.linear_trend(frame, x, y)
    fig, ax = plt.subplots(figsize=(8, 6))
    sns.regplot(data=frame, x=x, y=y, scatter_kws={'alpha': 0.25, 's': 12}, line_kws={'color': 'red'}, ax=ax)
    ax.set_title(f"{_label(y)} vs {_label(x)} (r = {r:.2f})", loc='left', fontdict={'fontsize': 16})
    ax.set(xlabel=_label(x), ylabel=_label(y))
    logger.debug("Trend %s ~ %s: slope=%.4f intercept=%.2f r=%.3f", y, x, slope, intercept, r)
    return fig


def plot_intensity_minutes(frame):
    share = stats.intensity_minutes_share(frame)
    minutes = share['mean_minutes'].fillna(0)
    fig, ax = plt.subplots(figsize=(8, 8))
    total = minutes.sum()
    if not np.isfinite(total) or total <= 0:
        # Nothing to split into wedges
        ax.text(0.5, 0.5, "No activity minutes recorded", ha='center', va='center', transform=ax.transAxes)
        ax.axis('off')
        logger.warning("Skipping intensity pie chart: no activity minutes recorded")
    else:
        ax.pie(minutes, labels=[_label(c) for c in share.index], autopct='%1.1f%%',
               startangle=-45, colors=plt.cm.tab20c.colors[:len(share)])
    ax.set_title("Share of the Day by Activity Intensity", fontdict={'fontsize': 16})
    return fig


def save_figure(fig, directory, name):
    os.makedirs(directory, exist_ok=True)
    path = os.path.join(directory, name)
    fig.tight_layout()
    fig.savefig(path, dpi=150)
    plt.close(fig)
    logger.info("Saved plot: %s", path)
    return path
