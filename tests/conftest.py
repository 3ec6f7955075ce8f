"""Pytest configuration: ensure env vars and import path are set early.

This runs before any tests, so config and logger modules see demo-mode
settings at import time.
"""
from __future__ import annotations

import os
import sys
from pathlib import Path

# Ensure repository root is on sys.path for local package imports
sys.path.append(str(Path(__file__).resolve().parents[1]))

# Demo mode, no log files written by the test run
os.environ["USE_BEDROCK"] = "false"
os.environ["LOG_TO_FILE"] = "false"
os.environ.setdefault("AWS_REGION", "us-east-1")
