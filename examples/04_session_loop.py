"""04 — Session Loop.

Drive the same turn-taking loop the ``ai-chat`` command uses, with canned
questions instead of the keyboard.
"""

from ai_chat_cli import ChatClient, Conversation, Session

questions = ["Tell me a joke.", "Explain it."]


def read_input(prompt: str) -> str:
    if not questions:
        raise EOFError  # ends the session like Ctrl-D would
    question = questions.pop(0)
    print(prompt + question)
    return question


session = Session(
    ChatClient.from_env(),
    Conversation.initialize(),
    model="gpt-3.5-turbo",
    interactive=True,
    read_input=read_input,
)
conversation = session.run()
print(f"{len(conversation)} messages exchanged")
