class PizzaAgentError(Exception):
    """Base exception for the pizza agent."""


class ConfigurationError(PizzaAgentError):
    """A required setting is missing or invalid."""


class SpeechError(PizzaAgentError):
    """The speech service could not be set up."""
