"""
Conversational responder for queries no weather capability handles.

Calls an Anthropic model on Bedrock when enabled. Whenever Bedrock is
disabled, misconfigured or failing, a canned answer is returned instead, so
callers always receive usable text and never an exception.
"""

from __future__ import annotations

import json
import re
import time
from typing import Any, Optional

from botocore.exceptions import BotoCoreError, ClientError

from config import config
from weather_agent.bedrock_client import get_bedrock_client
from weather_agent.interfaces import Responder
from utils.logger import agent_logger as logger, log_performance


SYSTEM_PROMPT = (
    "You are a friendly weather assistant. You can check the weather, the current "
    "temperature and whether it is raining for any location. Answer briefly, and "
    "steer the user towards asking about a specific location."
)

UNPARSABLE_RESPONSE = "Sorry, I couldn't understand the response from the AI service."

MOCK_RESPONSES = {
    "weather_and_temperature": (
        "I can help you check the weather and temperature for any location. "
        "What city would you like to know about?"
    ),
    "weather": (
        "I can provide weather information for any location. "
        "Please specify which city you'd like to know about."
    ),
    "temperature": "I can check the current temperature for you. Which location are you interested in?",
    "rain": "I can check if it's raining in a specific location. Where would you like me to check?",
    "greeting": (
        "Hello! I'm a weather assistant. I can help you check the weather, temperature, "
        "and rain status for any location."
    ),
    "default": (
        "I'm a weather assistant. I can help you with weather information, temperature checks, "
        "and rain status for any location. How can I assist you today?"
    ),
}

NON_RETRYABLE_ERRORS = {
    "ValidationException",
    "AccessDeniedException",
    "InvalidParameterException",
    "ResourceNotFoundException",
    "UnrecognizedClientException",
}

RETRYABLE_ERRORS = {
    "ThrottlingException",
    "Throttling",
    "ServiceException",
    "ServiceUnavailableException",
    "InternalServerError",
    "InternalServerException",
    "ModelNotReadyException",
    "TooManyRequestsException",
}


def generate_mock_response(message: Optional[str]) -> str:
    """Pick a canned answer from the keywords in the message."""
    lower = (message or "").lower()

    if "weather" in lower and "temperature" in lower:
        return MOCK_RESPONSES["weather_and_temperature"]
    if "weather" in lower:
        return MOCK_RESPONSES["weather"]
    if "temperature" in lower:
        return MOCK_RESPONSES["temperature"]
    if "rain" in lower:
        return MOCK_RESPONSES["rain"]
    if re.search(r"\b(hello|hi|hey)\b", lower):
        return MOCK_RESPONSES["greeting"]
    return MOCK_RESPONSES["default"]


class BedrockResponder(Responder):
    """Responder backed by Bedrock ``invoke_model`` with a canned fallback."""

    def __init__(
        self,
        enabled: Optional[bool] = None,
        client: Any = None,
        model_id: Optional[str] = None,
        max_tokens: Optional[int] = None,
        temperature: Optional[float] = None,
        max_retries: Optional[int] = None,
        base_delay: float = 1.0,
    ):
        self.enabled = config.bedrock.enabled if enabled is None else enabled
        self._client = client
        self.model_id = model_id or config.bedrock.model_id
        self.max_tokens = max_tokens or config.bedrock.max_tokens
        self.temperature = config.bedrock.temperature if temperature is None else temperature
        self.max_retries = max(1, config.bedrock.max_retries if max_retries is None else max_retries)
        self.base_delay = base_delay

    @property
    def client(self):
        if self._client is None:
            self._client = get_bedrock_client()
        return self._client

    def respond(self, text: str) -> str:
        logger.info(f"Sending message to AI: {(text or '')[:100]}")

        if not text or not text.strip():
            return generate_mock_response(text)

        if not self.enabled:
            logger.debug("Bedrock disabled, returning mock response")
            return generate_mock_response(text)

        try:
            reply = self._call_bedrock(text)
        except Exception as e:
            logger.warning(f"Failed to call Bedrock, falling back to mock response: {e}")
            return generate_mock_response(text)

        if not reply:
            logger.warning("Bedrock returned no text, falling back to mock response")
            return generate_mock_response(text)
        return reply

    def _call_bedrock(self, text: str) -> Optional[str]:
        """
        Call Bedrock with retry logic and exponential backoff.

        Retries on transient errors (throttling, service errors) but not on client errors
        (bad requests, access denied, etc.). Returns None when retries are exhausted.
        """
        body = {
            "anthropic_version": "bedrock-2023-05-31",
            "max_tokens": self.max_tokens,
            "temperature": self.temperature,
            "system": SYSTEM_PROMPT,
            "messages": [{"role": "user", "content": [{"type": "text", "text": text}]}],
        }

        for attempt in range(self.max_retries):
            start = time.time()
            try:
                response = self.client.invoke_model(
                    modelId=self.model_id,
                    contentType="application/json",
                    accept="application/json",
                    body=json.dumps(body),
                )
            except ClientError as e:
                error_code = e.response.get("Error", {}).get("Code", "")
                if error_code in NON_RETRYABLE_ERRORS:
                    logger.error(f"Non-retryable Bedrock API error ({error_code}): {e}")
                    return None

                is_retryable = error_code in RETRYABLE_ERRORS or "throttl" in str(e).lower()
                if not is_retryable or attempt == self.max_retries - 1:
                    logger.error(f"Bedrock API error after {attempt + 1} attempts ({error_code}): {e}")
                    return None

                delay = self.base_delay * (2 ** attempt)
                logger.warning(f"Bedrock API error ({error_code}), retrying in {delay}s "
                               f"(attempt {attempt + 1}/{self.max_retries})")
                time.sleep(delay)
                continue
            except BotoCoreError as e:
                # Connection failures and timeouts
                if attempt == self.max_retries - 1:
                    logger.error(f"Bedrock connection failed after {attempt + 1} attempts: {e}")
                    return None
                delay = self.base_delay * (2 ** attempt)
                logger.warning(f"Bedrock connection error, retrying in {delay}s: {e}")
                time.sleep(delay)
                continue

            log_performance(logger, "bedrock_invoke", (time.time() - start) * 1000)
            if attempt > 0:
                logger.info(f"Bedrock call succeeded after {attempt + 1} attempts")
            return self._parse_response(response)

        return None

    @staticmethod
    def _parse_response(response) -> str:
        try:
            response_body = json.loads(response["body"].read())
            return response_body["content"][0]["text"].strip()
        except (KeyError, IndexError, TypeError, AttributeError, json.JSONDecodeError) as e:
            logger.error(f"Failed to parse AI response: {e}")
            return UNPARSABLE_RESPONSE
