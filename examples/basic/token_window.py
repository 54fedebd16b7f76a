#!/usr/bin/env python3
"""Token window example.

This example demonstrates:
- Keeping a conversation within a token budget
- System message retention and replacement
- Inspecting window state with rich

Prerequisites:
- tiktoken downloads its encoding on first use
"""

from rich import print as rprint

from mamba_memory import TokenCounter, WindowedMessageBuffer
from mamba_memory.messages import assistant_message, system_message, user_message


def main():
    memory = WindowedMessageBuffer(capacity=60, estimator=TokenCounter())

    memory.add(system_message("You are a concise assistant."))
    for i in range(5):
        memory.add(user_message(f"Question number {i}: what is {i} squared?"))
        memory.add(assistant_message(f"{i} squared is {i * i}."))

    print("Retained messages:")
    for message in memory.messages():
        print(f"  {message.role:>9}: {message.content}")

    # Same content: ignored. Different content: replaces the old one.
    memory.add(system_message("You are a concise assistant."))
    memory.add(system_message("You answer in French."))

    print()
    rprint(memory.get_state())


if __name__ == "__main__":
    main()
