"""Analysis over fetched observations.

Modules here are pure: they take already-fetched data and return results,
with no network access.

- rain_streak.py - consecutive dry days counted back from the latest date
"""
