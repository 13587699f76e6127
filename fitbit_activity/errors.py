"""Exceptions and warnings raised while preparing the activity table."""


class FitbitActivityError(Exception):
    """Base class for pipeline failures."""


class DataSourceError(FitbitActivityError):
    """An input file is missing, unreadable or does not match the export schema."""

    def __init__(self, path, reason):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"{self.path}: {reason}")


class DateParseError(FitbitActivityError, ValueError):
    """One or more date strings do not match the expected format."""

    def __init__(self, values, date_format):
        self.values = list(values)
        self.date_format = date_format
        preview = ', '.join(repr(v) for v in self.values[:5])
        more = f" (+{len(self.values) - 5} more)" if len(self.values) > 5 else ''
        super().__init__(f"cannot parse dates with format {date_format!r}: {preview}{more}")


class DataQualityWarning(UserWarning):
    """Advisory finding about the cleaned table. Collected, never raised."""

    def __init__(self, kind, message):
        self.kind = kind
        self.message = message
        super().__init__(f"[{kind}] {message}")
