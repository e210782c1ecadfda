""" Time helpers... """

# Python Packages
from datetime import datetime, timedelta, timezone


def utcnow() -> datetime:
    """ Timezone-aware current UTC time... """
    return datetime.now(timezone.utc)


def days_ago(days: int) -> datetime:
    return utcnow() - timedelta(days = days)
