"""
Configuration Management for the Weather Agent

Centralized configuration with environment variable support.
Load from .env file or use defaults.
"""
import os
from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class BedrockConfig:
    """Bedrock LLM settings used by the conversational responder"""
    enabled: bool = False
    region: str = "us-east-1"
    model_id: str = "anthropic.claude-3-haiku-20240307-v1:0"
    max_tokens: int = 512
    temperature: float = 0.7

    # Bounded network time for every call
    connect_timeout: int = 30
    read_timeout: int = 60
    max_retries: int = 3

    @classmethod
    def from_env(cls):
        return cls(
            enabled=os.getenv("USE_BEDROCK", "false").lower() == "true",
            region=os.getenv("AWS_REGION", "us-east-1"),
            model_id=os.getenv("BEDROCK_MODEL_ID", "anthropic.claude-3-haiku-20240307-v1:0"),
            max_tokens=int(os.getenv("BEDROCK_MAX_TOKENS", "512")),
            temperature=float(os.getenv("BEDROCK_TEMPERATURE", "0.7")),
            connect_timeout=int(os.getenv("BEDROCK_CONNECT_TIMEOUT", "30")),
            read_timeout=int(os.getenv("BEDROCK_READ_TIMEOUT", "60")),
            max_retries=int(os.getenv("BEDROCK_MAX_RETRIES", "3"))
        )


@dataclass
class UIConfig:
    """Chat page settings"""
    page_title: str = "Weather Agent"
    page_icon: str = "🌦️"
    layout: str = "centered"

    @classmethod
    def from_env(cls):
        return cls(
            page_title=os.getenv("PAGE_TITLE", "Weather Agent"),
            page_icon=os.getenv("PAGE_ICON", "🌦️")
        )


@dataclass
class Config:
    """Main configuration class combining all config sections"""
    bedrock: BedrockConfig = field(default_factory=BedrockConfig)
    ui: UIConfig = field(default_factory=UIConfig)

    # Environment
    environment: str = "development"
    debug: bool = False

    @classmethod
    def from_env(cls):
        """Load configuration from environment variables"""
        return cls(
            bedrock=BedrockConfig.from_env(),
            ui=UIConfig.from_env(),
            environment=os.getenv("ENVIRONMENT", "development"),
            debug=os.getenv("DEBUG", "false").lower() == "true"
        )


# Load environment variables from .env file if it exists
def load_env_file(env_file: str = ".env"):
    """Load environment variables from .env file without overriding the real environment"""
    env_path = Path(env_file)
    if env_path.exists():
        with open(env_path, 'r', encoding='utf-8') as f:
            for line in f:
                line = line.strip()
                if line and not line.startswith('#'):
                    key, _, value = line.partition('=')
                    key = key.strip()
                    value = value.strip().strip('"').strip("'")
                    if key and value:
                        os.environ.setdefault(key, value)


# Initialize global config
load_env_file()
config = Config.from_env()

