"""Domain error types."""


class AssistantError(Exception):
    """Base class for every failure the chat session turns into a transcript entry."""


class ConfigurationError(AssistantError):
    """Raised when the provider configuration cannot be resolved (e.g. unknown type)."""


class CredentialError(AssistantError):
    """Raised when a cloud provider is selected but no API key is resolvable."""


class PromptBuildError(AssistantError):
    """Raised when the system prompt cannot be built from the cluster context."""


class RequestError(AssistantError):
    """Raised when the outbound request cannot be constructed."""


class TransportError(AssistantError):
    """Raised on connection, DNS or timeout failures."""


class ProtocolError(AssistantError):
    """Raised when the provider answers with a non-success status."""

    def __init__(self, message: str, status_code: int = 0) -> None:
        super().__init__(message)
        self.status_code = status_code


class DecodeError(AssistantError):
    """Raised when a success response body cannot be parsed."""
