"""Tests for the WeatherAgent facade in demo mode."""

import re
from unittest.mock import MagicMock

import pytest

from weather_agent import WeatherAgent
from weather_agent.agent import EXAMPLE_QUERIES
from weather_agent.interfaces import CapabilityProvider, Responder


@pytest.fixture
def agent():
    return WeatherAgent(use_bedrock=False)


def test_demo_mode(agent):
    assert agent.demo_mode
    assert not agent.responder.enabled


def test_basic_greeting(agent):
    response = agent.process_query("Hello")
    assert "hello" in response.lower()
    assert "weather" in response.lower()


def test_general_assistant_query(agent):
    response = agent.process_query("How can you help me?")
    assert "weather" in response.lower()
    assert "assistant" in response.lower()


def test_weather_query(agent):
    response = agent.process_query("What's the weather in London?")
    assert "london" in response.lower()
    assert re.search(r"\d+°C", response)


def test_temperature_query_with_two_word_city(agent):
    response = agent.process_query("What's the temperature in New York?")
    assert "new york" in response.lower()
    assert "temperature" in response.lower()


@pytest.mark.parametrize("query", [None, ""])
def test_null_and_empty_queries(agent, query):
    assert agent.process_query(query)


def test_available_tools(agent):
    tools = agent.available_tools()
    for name in ("get_weather", "get_temperature", "check_rain"):
        assert name in tools
    assert "Example queries" in tools
    assert "'What's the weather in London?'" in tools


def test_run_examples(agent):
    results = agent.run_examples()
    assert [query for query, _ in results] == EXAMPLE_QUERIES
    assert all(response for _, response in results)
    assert "Paris" in dict(results)["Tell me about the weather in Paris"]


def test_custom_collaborators_are_used():
    provider = MagicMock(spec=CapabilityProvider)
    provider.is_raining.return_value = "dry"
    responder = MagicMock(spec=Responder)
    responder.respond.return_value = "hi"

    agent = WeatherAgent(provider=provider, responder=responder, use_bedrock=True)

    assert agent.process_query("Is it raining in Tokyo?") == "dry"
    assert agent.process_query("Good morning") == "hi"
    assert not agent.demo_mode
