"""
Shared Bedrock client for LLM API calls.

Reuses a single boto3 client across responders to avoid recreation overhead.
Connect/read timeouts come from config so every call is bounded in time.
"""

import boto3
from botocore.config import Config as BotoConfig
from typing import Optional
from config import config
from utils.logger import agent_logger as logger

# Singleton Bedrock client
_bedrock_client: Optional[boto3.client] = None


def get_bedrock_client() -> boto3.client:
    """
    Get or create singleton Bedrock client.

    Returns:
        Reusable boto3 Bedrock client
    """
    global _bedrock_client

    if _bedrock_client is None:
        try:
            _bedrock_client = boto3.client(
                service_name="bedrock-runtime",
                region_name=config.bedrock.region,
                config=BotoConfig(
                    connect_timeout=config.bedrock.connect_timeout,
                    read_timeout=config.bedrock.read_timeout,
                    # Retries are handled by the responder
                    retries={"max_attempts": 0},
                ),
            )
            logger.debug(f"Created singleton Bedrock client for region: {config.bedrock.region}")
        except Exception as e:
            logger.error(f"Failed to create Bedrock client: {e}")
            raise

    return _bedrock_client


def reset_bedrock_client():
    """Reset the singleton client (useful for testing or reconnection)."""
    global _bedrock_client
    _bedrock_client = None
