"""01 — Hello World.

Send a single question and print the assistant's reply.
"""

from ai_chat_cli import ChatClient, Conversation

client = ChatClient.from_env()
conversation = Conversation.initialize(initial_user_message="What is the capital of France?")

result = client.complete("gpt-3.5-turbo", list(conversation))
print(result.reply.content)
print(f"Tokens used: {result.usage.total_tokens}")
