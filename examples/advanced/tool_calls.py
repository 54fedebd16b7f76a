#!/usr/bin/env python3
"""Tool call eviction example.

This example demonstrates:
- Evicting an assistant tool call together with its tool results
- Sharing one store between several conversations
- Loading settings from MAMBA_MEMORY_* environment variables
"""

import logging

from mamba_memory import InMemoryMessageStore, MemorySettings, WindowedMessageBuffer, setup_logging
from mamba_memory.messages import ToolCall, assistant_message, tool_result_message, user_message


def main():
    settings = MemorySettings()
    settings.logging.level = "DEBUG"
    setup_logging(settings.logging)

    store = InMemoryMessageStore()
    config = settings.window.model_copy(update={"capacity": 80, "identity": "alice"})
    memory = WindowedMessageBuffer.from_config(config, store=store)

    memory.add(user_message("What's the weather in Paris and Rome?"))
    memory.add(
        assistant_message(
            tool_calls=[
                ToolCall(id="call_1", name="get_weather", arguments='{"city": "Paris"}'),
                ToolCall(id="call_2", name="get_weather", arguments='{"city": "Rome"}'),
            ]
        )
    )
    memory.add(tool_result_message("call_1", "Sunny, 24C"))
    memory.add(tool_result_message("call_2", "Cloudy, 19C"))
    memory.add(assistant_message("Paris is sunny at 24C; Rome is cloudy at 19C."))
    memory.add(user_message("Thanks! Could you also summarise tomorrow's forecast for both?"))

    logging.getLogger(__name__).info("Stored identities: %s", store.identities())
    for message in memory.messages():
        print(message.to_dict())


if __name__ == "__main__":
    main()
