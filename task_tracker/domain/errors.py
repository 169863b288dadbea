from __future__ import annotations


class TaskError(Exception):
    pass


class TaskValidationError(TaskError):
    """
    Input is missing a required field or carries a value the task cannot hold.
    """


class TaskStorageError(TaskError):
    """
    The task document could not be read from or written to disk.
    """


class TaskDecodeError(TaskError):
    """
    The task document exists but is not a well-formed task collection.
    """
