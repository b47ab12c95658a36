from typing import Optional

from classroom_reports.schemas.report import Metrics, StatusCode, StatusDescriptor
from classroom_reports.schemas.submission import Submission


def new_metrics(total_assigned: int) -> Metrics:
    return Metrics(total_assigned=total_assigned)


def accumulate(metrics: Metrics, status: StatusDescriptor, submission: Optional[Submission]) -> Metrics:
    """Fold one activity's status into the report counters (totalAssigned is untouched)."""
    if status.code == StatusCode.TURNED_IN:
        metrics.turned_in += 1
    elif status.code == StatusCode.RETURNED:
        metrics.returned += 1
    elif status.code == StatusCode.MISSING:
        metrics.missing += 1

    if status.late:
        metrics.late += 1

    # draft grades are not counted as graded
    if submission is not None and submission.assigned_grade is not None:
        metrics.graded += 1

    return metrics
