from abc import ABC, abstractmethod

from ....domain.value_objects import NotificationOutcome


class EmailNotifier(ABC):
    @abstractmethod
    async def send_consultation_notice(
        self,
        name: str,
        contact: str,
        click_source: str | None = None,
    ) -> NotificationOutcome:
        """Send a single consultation notice email.

        Raises:
            NotificationError: On missing credentials or a rejected send
        """
        pass


class ChatNotifier(ABC):
    @abstractmethod
    async def send(self, text: str) -> NotificationOutcome:
        """Post ``text`` to the team chat. Never raises."""
        pass
