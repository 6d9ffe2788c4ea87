"""Service layer: scoring pipeline and reports."""

from .charts import action_type_chart, event_count_chart, participation_chart
from .division_report import generate_division_report
from .graduation import GraduationReport, generate_graduation_report
from .periods import enumerate_periods
from .scoring import MemberScore, score_member

__all__ = [
    "GraduationReport",
    "MemberScore",
    "action_type_chart",
    "enumerate_periods",
    "event_count_chart",
    "generate_division_report",
    "generate_graduation_report",
    "participation_chart",
    "score_member",
]
