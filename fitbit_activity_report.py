#!/usr/bin/env python
# coding: utf-8

# ## Importing Fitbit Daily Activity Data
#

# In[1]:


# Reading both export periods. Each one is a dailyActivity_merged.csv file with the same columns.
import matplotlib.pyplot as plt

from fitbit_activity import config, plots, stats
from fitbit_activity.combine import aggregate_duplicates, concat_sources, find_duplicates
from fitbit_activity.features import derive_features, parse_activity_dates
from fitbit_activity.loader import load_sources
from fitbit_activity.quality import check_quality

first_path = config.FIRST_EXPORT
second_path = config.SECOND_EXPORT

df_first, df_second = load_sources(first_path, second_path)


# The Fitbit data comes as two exports, one per month of collection. Both have the same header, so they can be stacked on top of each other, but the day the second export starts on was also captured at the end of the first one. Those overlapping days show up as two rows for the same user and date.

# In[2]:


df_first.head()


# In[3]:


df_first.info()


# In[4]:


df_second.isna().sum()


# ## EDA and Cleaning
#
# Stack the two exports and parse the dates. ActivityDate is written month/day/year, and anything that doesn't match that is an error rather than a guess.

# In[5]:


df_raw = parse_activity_dates(concat_sources(df_first, df_second))

# Rows where the same user has more than one record on a day
df_duplicates = find_duplicates(df_raw)
df_duplicates.head(10)


# In[6]:


print(f"{len(df_raw)} rows in total, {len(df_duplicates)} of them share a user and date with another row")


# The duplicates are partial syncs of the same day, so the values need to be added together. Keeping only the first or last row would lose steps and minutes. Once merged, the weekday and two totals get added: total active distance (very + moderately + light) and total active minutes (very + fairly + lightly).

# In[7]:


df_activity = derive_features(aggregate_duplicates(df_raw))
df_activity.head()


# In[8]:


quality = check_quality(df_activity, df_raw)
print(quality.summary())


# In[9]:


stats.describe_metrics(df_activity)


# ## Analysis
#
# The first thing I wanted to look at was how many steps people take on a day. The usual target is 10,000.

# In[10]:


fig = plots.plot_histogram(df_activity, 'total_steps')
ax = fig.axes[0]
ax.axvline(10000, color='k', linestyle='-.')


# There's a big spike at zero. Those are most likely days the tracker wasn't worn at all rather than days nobody moved, and it drags the mean down. Apart from that, most days sit under the 10k mark.

# In[11]:


plots.plot_histogram(df_activity, 'calories')


# Next I'm interested in whether activity changes over the week. I expected weekends to be different, either a lot more or a lot less active.

# In[12]:


steps_weekday = stats.summary_by_weekday(df_activity, 'total_steps')
steps_weekday


# In[13]:


plots.plot_weekday_boxplot(df_activity, 'total_steps')
plots.plot_weekday_means(df_activity, 'total_steps')


# Saturday is the most active day on average and Sunday the least, but the confidence intervals overlap for most of the week, so the difference isn't as big as the boxplots make it look.

# In[14]:


plots.plot_weekday_means(df_activity, config.TOTAL_ACTIVE_MINUTES)
plots.plot_weekday_boxplot(df_activity, 'sedentary_minutes')


# Then the trend over the collection period. Each day is the average across users, with the 3-day and 7-day rolling averages on top.

# In[15]:


plots.plot_daily_trend(df_activity, 'total_steps')
plots.plot_daily_trend(df_activity, config.TOTAL_ACTIVE_MINUTES)


# The last few days drop off sharply. Fewer users were still syncing by the end of the second export, and the wider confidence band shows it.

# In[16]:


steps_user = stats.summary_by_user(df_activity, 'total_steps')
steps_user.sort_values('mean', ascending=False).head(10)


# Calories should go up with steps. Plotting one against the other, with a fitted line:

# In[17]:


slope, intercept, r = stats.linear_trend(df_activity, 'total_steps', 'calories')
print(f"Each extra 1,000 steps: {slope * 1000:.1f} kcal (r = {r:.2f})")
plots.plot_metric_trend(df_activity, 'total_steps', 'calories')


# The relationship is there but it's loose. Calories also depend on body size, which this data doesn't have.

# In[18]:


intensity = stats.intensity_minutes_share(df_activity)
intensity


# In[19]:


plots.plot_intensity_minutes(df_activity)
plt.show()


# In[20]:


print("Fitbit Daily Activity Statistics")
print(f"{df_activity[config.ID_COLUMN].nunique()} users, {len(df_activity)} user-days")
print(f"{df_activity[config.DATE_COLUMN].min():%Y-%m-%d} to {df_activity[config.DATE_COLUMN].max():%Y-%m-%d}")

print("\nAverage per day")
print(f"Steps: {df_activity.total_steps.mean():.0f}")
print(f"Calories burned: {df_activity.calories.mean():.0f} kcal")
print(f"Active minutes: {df_activity.total_active_minutes.mean():.1f} minutes")
print(f"Sedentary time: {df_activity.sedentary_minutes.mean() / 60:.1f} hours")


# Most of the day is spent sedentary, and the very active share is small compared to lightly active minutes. If there's one place to nudge people, it's turning some of the sedentary time into light activity rather than pushing for more intense workouts.

# In[ ]:
