"""Error taxonomy for a chat session.

Only MissingCredentialError ends a session; the stream errors are reported
and the loop moves on to the next prompt.
"""


class ChatError(Exception):
    """Base class for errors surfaced to the user during a chat session."""


class MissingCredentialError(ChatError):
    def __init__(self, variable: str):
        super().__init__(f"Error: {variable} environment variable not set")
        self.variable = variable


class StreamCreationError(ChatError):
    """The completion request could not be opened (network, auth, bad model)."""


class StreamReceiveError(ChatError):
    """The stream broke after it was opened; partial output is still usable."""
