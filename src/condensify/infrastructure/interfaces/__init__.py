"""Infrastructure interface exports."""

from condensify.infrastructure.interfaces.mailer import Mailer
from condensify.infrastructure.interfaces.summarizer import SummarizerService

__all__ = [
    "Mailer",
    "SummarizerService",
]
