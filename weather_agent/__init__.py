"""
weather_agent package

Routes free-text weather questions to the weather, temperature and rain
handlers, and everything else to a conversational responder.
"""

from weather_agent.agent import WeatherAgent
from weather_agent.handlers import QueryRouter, QueryContext

__all__ = ['WeatherAgent', 'QueryRouter', 'QueryContext']
