"""Collaborator interfaces consumed by the query router."""

from abc import ABC, abstractmethod


class Responder(ABC):
    """Produces conversational text for queries no capability handles.

    Implementations must not raise and must always return non-empty text,
    substituting a canned answer when their backend is unavailable.
    """

    @abstractmethod
    def respond(self, text: str) -> str:
        pass


class CapabilityProvider(ABC):
    """Produces capability text for a resolved location.

    Output must be deterministic for a fixed location and non-empty for any
    input, including an empty or missing location.
    """

    @abstractmethod
    def get_weather(self, location: str) -> str:
        pass

    @abstractmethod
    def get_temperature(self, location: str) -> str:
        pass

    @abstractmethod
    def is_raining(self, location: str) -> str:
        pass
