"""External data source integrations.

Each subdirectory is one data source with a consistent structure:

    datasources/{name}/
    ├── __init__.py       # Public API re-exports
    ├── client.py         # API URLs, constants
    ├── models.py         # Containers built from API responses (optional)
    └── {feature}.py      # Fetch functions (one per endpoint/concept)

Fetch functions take an optional ``requests.Session`` (defaulting to
``water_reminder.services.http.session``) and let HTTP errors propagate.
"""
