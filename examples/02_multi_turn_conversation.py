"""02 — Multi-turn Conversation.

Keep appending turns to one Conversation; every request carries the whole
history, so the model can refer back to earlier messages.
"""

from ai_chat_cli import ChatClient, Conversation, Message

client = ChatClient.from_env()

conversation = Conversation.initialize(
    "You are a friendly science tutor.",
    "My name is Alice. What's a fun fact about space?",
)

# First turn
reply = client.complete("gpt-3.5-turbo", list(conversation)).reply
print("Assistant:", reply.content)

# Continue the conversation — append the assistant reply, then a follow-up
conversation.append(reply)
conversation.append(Message.user("Can you remind me of my name?"))

reply2 = client.complete("gpt-3.5-turbo", list(conversation)).reply
print("\nAssistant:", reply2.content)
