"""Abstract interface for sending summaries by email."""

from abc import ABC, abstractmethod


class Mailer(ABC):
    """Abstract base class for mail transports."""

    @abstractmethod
    def send(self, text: str, recipient: str) -> None:
        """
        Sends a summary to a recipient.

        Args:
            text: The plain-text summary body.
            recipient: Destination email address.

        Raises:
            EmailDeliveryError: If the message could not be delivered.
        """
        pass
