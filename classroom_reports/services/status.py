from datetime import datetime
from typing import Optional

from classroom_reports.schemas.coursework import CourseworkItem
from classroom_reports.schemas.report import StatusCode, StatusDescriptor
from classroom_reports.schemas.submission import Submission, SubmissionState
from classroom_reports.services.dates import due_instant

# Submission exists but nothing is turned in; treated like having no submission.
NOT_TURNED_IN_STATES = {
    SubmissionState.RECLAIMED_BY_STUDENT.value,
    SubmissionState.CREATED.value,
    SubmissionState.NEW.value,
    SubmissionState.DRAFT.value,
}


def humanize_state(state: str) -> str:
    """RECLAIMED_BY_STUDENT -> 'Reclaimed By Student'."""
    return " ".join(word.capitalize() for word in state.lower().split("_") if word)


def _open_status(due_has_passed: bool) -> tuple[str, str]:
    if due_has_passed:
        return StatusCode.MISSING.value, "Missing"
    return StatusCode.ASSIGNED.value, "Assigned"


def derive_status(
    item: CourseworkItem,
    submission: Optional[Submission],
    effective_end: datetime,
) -> StatusDescriptor:
    due = due_instant(item)
    due_has_passed = due is not None and due <= effective_end

    if submission is None:
        code, label = _open_status(due_has_passed)
        return StatusDescriptor(code=code, label=label, late=False)

    code = submission.state
    label = humanize_state(submission.state)
    late = submission.late is True

    if submission.state == SubmissionState.RETURNED:
        code = StatusCode.RETURNED.value
        label = "Returned (late)" if late else "Returned"
    elif submission.state == SubmissionState.TURNED_IN:
        code = StatusCode.TURNED_IN.value
        label = "Turned in (late)" if late else "Turned in"
    elif submission.state in NOT_TURNED_IN_STATES:
        # late is left as reported: a reclaimed late submission stays flagged
        code, label = _open_status(due_has_passed)

    return StatusDescriptor(code=code, label=label, late=late)
