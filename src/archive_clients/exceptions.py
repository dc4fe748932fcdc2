"""Unified exception hierarchy for archive-clients."""


class ArchiveClientError(Exception):
    """Base exception for all archive-client errors."""


# Messenger
class MessengerError(ArchiveClientError):
    """Base exception for Messenger archive operations."""


class MessengerReadError(MessengerError):
    """Failed to read files from a Messenger archive."""


class MissingInboxError(MessengerError):
    """The selected folder does not contain a Messenger inbox."""


class MalformedArchiveError(MessengerError):
    """A conversation folder holds JSON that cannot be merged or grouped."""


class EmptyConversationError(MalformedArchiveError):
    """A conversation folder has no message_N.json parts."""
