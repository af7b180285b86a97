"""Review layer — report models and the per-example state machine.

Quick start::

    from chesstrainer.review import ReviewController, load_report

    report = load_report("report.json")
    ctrl = ReviewController(report.recurring_themes[0].examples[0])
    ctrl.show_mistake()
    print(ctrl.status_text)
"""

from chesstrainer.review.controller import ReviewController, ReviewEvents
from chesstrainer.review.models import (
    MistakeExample,
    MultiGameAnalysisReport,
    RecurringTheme,
)
from chesstrainer.review.report import load_report, parse_report
from chesstrainer.review.session import ReviewSession
from chesstrainer.review.state import (
    ClickOutcome,
    ReviewAction,
    ReviewState,
    ReviewView,
)

__all__ = [
    # State machine
    "ClickOutcome",
    "ReviewAction",
    "ReviewController",
    "ReviewEvents",
    "ReviewState",
    "ReviewView",
    "ReviewSession",
    # Report
    "MistakeExample",
    "MultiGameAnalysisReport",
    "RecurringTheme",
    "load_report",
    "parse_report",
]
