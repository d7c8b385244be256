"""
Exception types shared across agents.

Transport problems are fatal and travel up to the coordinator; parse
problems are always absorbed at the agent boundary.
"""


class ModelClientError(Exception):
    """Raised when the model provider cannot produce a completion."""

    pass


class ParseError(Exception):
    """Raised when a model response cannot be shaped into the expected document."""

    pass


class ItineraryGenerationError(Exception):
    """Raised by the coordinator when the pipeline cannot produce an itinerary."""

    pass
