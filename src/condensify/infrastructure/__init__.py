"""Concrete implementations of infrastructure interfaces."""

from condensify.infrastructure.huggingface_summarizer import HuggingFaceSummarizer
from condensify.infrastructure.smtp_mailer import SmtpMailer

__all__ = ["HuggingFaceSummarizer", "SmtpMailer"]
