class NotFoundError(Exception):
    """Raised when a task list or task id does not exist."""


class InvalidArgumentError(Exception):
    """Raised when a name or title is blank after trimming whitespace."""
