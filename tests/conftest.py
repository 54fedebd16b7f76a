"""Shared test fixtures and configuration for mamba-memory tests."""

from __future__ import annotations

import pytest
from helpers import RecordingStore, StubEstimator


@pytest.fixture
def estimator() -> StubEstimator:
    """Provide a deterministic cost estimator."""
    return StubEstimator()


@pytest.fixture
def recording_store() -> RecordingStore:
    """Provide a store that counts writes."""
    return RecordingStore()


@pytest.fixture
def sample_messages() -> list[dict]:
    """Provide sample OpenAI-style message history."""
    return [
        {"role": "system", "content": "You are a helpful assistant."},
        {"role": "user", "content": "I need to read a file."},
        {
            "role": "assistant",
            "content": "I'll help you read the file.",
            "tool_calls": [
                {
                    "id": "call_123",
                    "type": "function",
                    "function": {"name": "read_file", "arguments": '{"path": "test.txt"}'},
                }
            ],
        },
        {
            "role": "tool",
            "tool_call_id": "call_123",
            "content": "File contents here",
        },
        {"role": "assistant", "content": "The file contains: File contents here"},
    ]
