"""Query handler pattern for weather queries."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Callable, Dict, List, Optional

from utils.logger import agent_logger
from weather_agent.capability_matcher import CapabilityLabel, CapabilityResult, classify_capability
from weather_agent.interfaces import CapabilityProvider, Responder
from weather_agent.location_extractor import extract_location


UNKNOWN_LOCATION = "unknown location"

APOLOGY_MESSAGE = (
    "I apologize, but I encountered an error while processing your request. Please try again."
)

CLARIFICATIONS: Dict[CapabilityLabel, str] = {
    "weather": (
        "I'd be happy to check the weather for you! "
        "Please specify which location you're interested in."
    ),
    "temperature": (
        "I can check the temperature for you! "
        "Please let me know which location you're interested in."
    ),
    "rain": (
        "I can check if it's raining for you! "
        "Please specify which location you'd like me to check."
    ),
}


class QueryContext:
    """Context object passed to all handlers. Lives for one route() call."""
    def __init__(
        self,
        query: str,
        capability: CapabilityResult,
        location: Optional[str] = None
    ):
        self.query = query
        self.capability = capability
        self.location = location


class QueryHandler(ABC):
    """Base class for query handlers."""

    @abstractmethod
    def can_handle(self, context: QueryContext) -> bool:
        """Check if this handler can process the query."""
        pass

    @abstractmethod
    def handle(self, context: QueryContext) -> str:
        """Process the query and return the response text."""
        pass

    def get_name(self) -> str:
        return self.__class__.__name__


class CapabilityHandler(QueryHandler):
    """
    Shared behaviour for the weather, temperature and rain handlers.

    Without a resolved location the handler asks the user for one instead of
    calling the provider with a meaningless argument.
    """

    capability: CapabilityLabel

    def __init__(self, provider: CapabilityProvider):
        self.provider = provider

    def can_handle(self, context: QueryContext) -> bool:
        return context.capability.label == self.capability

    def handle(self, context: QueryContext) -> str:
        location = context.location or UNKNOWN_LOCATION
        if location == UNKNOWN_LOCATION:
            return CLARIFICATIONS[self.capability]
        return self.lookup(location)

    @abstractmethod
    def lookup(self, location: str) -> str:
        pass


class WeatherHandler(CapabilityHandler):
    capability = "weather"

    def lookup(self, location: str) -> str:
        return self.provider.get_weather(location)


class TemperatureHandler(CapabilityHandler):
    capability = "temperature"

    def lookup(self, location: str) -> str:
        return self.provider.get_temperature(location)


class RainHandler(CapabilityHandler):
    capability = "rain"

    def lookup(self, location: str) -> str:
        return self.provider.is_raining(location)


class FallbackHandler(QueryHandler):
    """
    Catch-all for queries no capability matched.

    The responder answers conversationally. This should always be the last
    handler in the router.
    """

    def __init__(self, responder: Responder):
        self.responder = responder

    def can_handle(self, context: QueryContext) -> bool:
        return True

    def handle(self, context: QueryContext) -> str:
        return self.responder.respond(context.query)


class QueryRouter:
    """
    Routes a query to the weather, temperature or rain handler, or to the
    conversational responder when no capability applies.

    The router keeps no state between calls, so one instance can serve
    concurrent callers.
    """

    def __init__(
        self,
        provider: CapabilityProvider,
        responder: Responder,
        logger: Optional[logging.Logger] = None,
        classifier: Callable[[Optional[str]], CapabilityResult] = classify_capability,
        extractor: Callable[[Optional[str]], Optional[str]] = extract_location,
    ):
        self.logger = logger or agent_logger
        self.classifier = classifier
        self.extractor = extractor
        self.handlers: List[QueryHandler] = [
            WeatherHandler(provider),
            TemperatureHandler(provider),
            RainHandler(provider),

            # Conversational catch-all for everything else
            FallbackHandler(responder),
        ]

    def route(self, query: Optional[str]) -> str:
        """Route query to appropriate handler. Never raises."""
        text = query or ""
        self.logger.info(f"Processing query: {text[:100]}")

        try:
            response = self._dispatch(text)
        except Exception as e:
            self.logger.error(f"Error processing query: {e}", exc_info=True)
            return APOLOGY_MESSAGE

        if not response:
            self.logger.error("Handler returned empty response")
            return APOLOGY_MESSAGE
        return response

    def _dispatch(self, text: str) -> Optional[str]:
        capability = self.classifier(text)
        self.logger.debug(f"Capability classified as {capability.label} ({capability.reason})")

        location = None
        if capability.label != "none":
            location = self.extractor(text) or UNKNOWN_LOCATION
            self.logger.debug(f"Resolved location: {location}")

        context = QueryContext(query=text, capability=capability, location=location)

        for handler in self.handlers:
            if handler.can_handle(context):
                self.logger.info(f"Query routed to {handler.get_name()}")
                return handler.handle(context)

        # FallbackHandler accepts everything
        return None
