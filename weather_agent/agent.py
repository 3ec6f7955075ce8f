"""
WeatherAgent: wires the router to its collaborators and exposes the
helpers the CLI and the chat page share.
"""

from typing import List, Optional, Tuple

from config import config
from weather_agent.handlers import QueryRouter
from weather_agent.interfaces import CapabilityProvider, Responder
from weather_agent.responder import BedrockResponder
from weather_agent.weather_tool import MockWeatherProvider
from utils.logger import agent_logger as logger


TOOLS = [
    ("get_weather", "Get comprehensive weather information for a location"),
    ("get_temperature", "Get current temperature for a location"),
    ("check_rain", "Check if it's currently raining in a location"),
]

EXAMPLE_QUERIES = [
    "Hello! What can you help me with?",
    "What's the weather in London?",
    "What's the temperature in New York?",
    "Is it raining in Tokyo?",
    "Tell me about the weather in Paris",
]


class WeatherAgent:
    """Weather assistant answering free-text queries."""

    def __init__(
        self,
        provider: Optional[CapabilityProvider] = None,
        responder: Optional[Responder] = None,
        use_bedrock: Optional[bool] = None,
    ):
        self.use_bedrock = config.bedrock.enabled if use_bedrock is None else use_bedrock
        self.provider = provider or MockWeatherProvider()
        self.responder = responder or BedrockResponder(enabled=self.use_bedrock)
        self.router = QueryRouter(self.provider, self.responder)
        logger.info(f"WeatherAgent initialized (bedrock={'on' if self.use_bedrock else 'off'})")

    @property
    def demo_mode(self) -> bool:
        return not self.use_bedrock

    def process_query(self, query: Optional[str]) -> str:
        return self.router.route(query)

    def available_tools(self) -> str:
        """Describe the tools and give a few example queries."""
        lines = ["Available tools:"]
        lines.extend(f"- {name}: {description}" for name, description in TOOLS)
        lines.append("")
        lines.append("Example queries:")
        lines.extend(f"- '{query}'" for query in EXAMPLE_QUERIES[1:4])
        return "\n".join(lines)

    def run_examples(self) -> List[Tuple[str, str]]:
        return [(query, self.process_query(query)) for query in EXAMPLE_QUERIES]
