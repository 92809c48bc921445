"""03 — Async Client.

Run several independent one-shot questions concurrently.
"""

import asyncio

from ai_chat_cli import AsyncChatClient, Conversation


async def ask(client: AsyncChatClient, question: str) -> str:
    conversation = Conversation.initialize(initial_user_message=question)
    result = await client.complete("gpt-3.5-turbo", list(conversation))
    return result.reply.content


async def main() -> None:
    client = AsyncChatClient.from_env()
    answers = await asyncio.gather(
        ask(client, "Name a prime number."),
        ask(client, "Name a noble gas."),
    )
    for answer in answers:
        print("-", answer)


asyncio.run(main())
