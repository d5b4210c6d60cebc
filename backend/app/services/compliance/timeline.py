"""
Filing Timeline

Reminder schedule and filing status for a concrete annual report due date.
Due-date rules in the rules table are display text, so the caller supplies
the resolved due date.

Schedule:
- 90, 30 and 7 days before the due date
- on the due date
- the day after the due date (overdue reminder)
- end of the grace period, reported separately
"""
from datetime import date, timedelta
from typing import Optional

from ...models.compliance import FilingStatus, FilingTimeline, ReminderSchedule


# =============================================================================
# TIMELINE CONFIGURATION
# =============================================================================

ADVANCE_REMINDER_DAYS = (90, 30, 7)
DUE_SOON_WINDOW = 30        # Days before due date that count as "due soon"
OVERDUE_REMINDER_DELAY = 1  # Days after due date for the overdue reminder
DEFAULT_GRACE_PERIOD = 30   # Days after due date before the grace period ends


def reminder_schedule(due_date: date, grace_period_days: int = DEFAULT_GRACE_PERIOD) -> ReminderSchedule:
    if grace_period_days < 0:
        raise ValueError("grace_period_days must not be negative")

    advance_90, advance_30, advance_7 = (
        due_date - timedelta(days=days) for days in ADVANCE_REMINDER_DAYS
    )
    return ReminderSchedule(
        advance_90_days=advance_90,
        advance_30_days=advance_30,
        advance_7_days=advance_7,
        due_date_reminder=due_date,
        overdue_reminder=due_date + timedelta(days=OVERDUE_REMINDER_DELAY),
        grace_period_end=due_date + timedelta(days=grace_period_days),
    )


def filing_status(due_date: date, today: Optional[date] = None) -> FilingStatus:
    today = today or date.today()
    days_until_due = (due_date - today).days

    if days_until_due < 0:
        return FilingStatus.OVERDUE
    if days_until_due <= DUE_SOON_WINDOW:
        return FilingStatus.DUE_SOON
    return FilingStatus.NOT_DUE


def build_timeline(
    due_date: date,
    today: Optional[date] = None,
    grace_period_days: int = DEFAULT_GRACE_PERIOD,
) -> FilingTimeline:
    today = today or date.today()
    return FilingTimeline(
        due_date=due_date,
        status=filing_status(due_date, today),
        days_until_due=(due_date - today).days,
        reminders=reminder_schedule(due_date, grace_period_days),
    )
