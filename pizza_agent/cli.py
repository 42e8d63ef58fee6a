from contextlib import contextmanager

from pizza_agent.agent import PizzaAgent, connect
from pizza_agent.config import load_settings
from pizza_agent.logger import logger
from pizza_agent.speech import RETRY_PROMPT, Outcome, SpeechIO


def is_exit(text):
    return text.strip().lower() == "exit"


def chat_loop(agent, read=input, write=print):
    """Read lines until 'exit' or end of input, printing the agent's reply to each."""
    while True:
        try:
            user_input = read("\nYou: ")
        except EOFError:
            break
        if is_exit(user_input):
            break
        if not user_input.strip():
            continue
        write(f"Agent: {agent.send(user_input)}")


def voice_loop(agent, speech_io, write=print):
    """Same as chat_loop, but the user speaks and the agent answers aloud."""
    write("Listening... say 'exit' to stop.")
    while True:
        transcript = speech_io.listen()
        if transcript.outcome is Outcome.NO_MATCH or (
            transcript.outcome is Outcome.RECOGNIZED and not transcript.text.strip()
        ):
            write(RETRY_PROMPT)
            speech_io.speak(RETRY_PROMPT)
            continue
        if transcript.outcome is Outcome.ERROR:
            write("Speech recognition failed, ending the session.")
            break
        text = transcript.text.strip().rstrip(".!?")
        write(f"\nYou: {transcript.text}")
        if is_exit(text):
            break
        reply = agent.send(transcript.text)
        write(f"Agent: {reply}")
        speech_io.speak(reply)


@contextmanager
def session(settings):
    """Create the agent and a conversation; clients close when the block exits."""
    logger.info("Calling MCP tools as %s", settings.user_id)
    with connect(settings) as (project_client, openai_client):
        agent = PizzaAgent(project_client, openai_client, settings)
        agent.create()
        agent.start_conversation()
        yield agent


def main():
    settings = load_settings()
    with session(settings) as agent:
        chat_loop(agent)


def voice_main():
    settings = load_settings()
    speech_io = SpeechIO(settings)
    with session(settings) as agent:
        voice_loop(agent, speech_io)


if __name__ == "__main__":  # pragma: no cover
    main()
