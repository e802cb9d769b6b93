"""Questions and consequences."""

from screenplay.questions.base import Question
from screenplay.questions.consequence import Consequence, see_that
from screenplay.questions.web import Count, Enabled, Presence, Text, Visibility

__all__ = [
    "Consequence",
    "Count",
    "Enabled",
    "Presence",
    "Question",
    "Text",
    "Visibility",
    "see_that",
]
