class TyperaceError(Exception):
    """Base class for every fatal error the game reports."""


class TerminalError(TyperaceError):
    """Raw mode could not be entered or restored, or the terminal could not be read."""


class ChannelClosedError(TyperaceError):
    """The input producer stopped delivering events."""


class WordSupplyError(TyperaceError):
    """The word supplier could not produce the requested words."""
