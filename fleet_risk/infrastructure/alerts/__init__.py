"""Security alert rules, most-severe event selection and narratives."""

from .detector import SecurityAlertDetector, detect
from .messages import NO_ALERTS_MESSAGE, describe_event_risk
from .worst_event import pick_worst_event

__all__ = [
    "NO_ALERTS_MESSAGE",
    "SecurityAlertDetector",
    "describe_event_risk",
    "detect",
    "pick_worst_event",
]
