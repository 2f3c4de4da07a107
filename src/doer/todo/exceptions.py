"""Exceptions raised by the grammar parser and the task services.

Parse errors are user-correctable and never fatal. Service errors cover
both the ledger validation failures and the transport failures seen by
the RPC client.
"""

from typing import Optional


class DoerError(Exception):
    """Base exception for doer"""

    pass


class ParseError(DoerError):
    """A command line could not be turned into a command"""

    pass


class MissingProjectError(ParseError):
    """An add command without a project: attribute"""

    def __init__(self, message: str = "Error: missing project") -> None:
        super().__init__(message)


class MissingDueDateError(ParseError):
    """An add command without a due: attribute"""

    def __init__(self, message: str = "Error: missing due date") -> None:
        super().__init__(message)


class InvalidDueDateError(MissingDueDateError):
    """A due: attribute whose value is not a calendar date"""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"Error: invalid due date: {value}")


class MissingDescriptionError(ParseError):
    """An add command with nothing left once attributes are removed"""

    def __init__(self, message: str = "Error: missing description") -> None:
        super().__init__(message)


class UnknownCommandError(ParseError):
    """No grammar rule matched the line"""

    def __init__(
        self,
        message: str = "Fatal Error: Unknown command. Type 'help' for more information",
    ) -> None:
        super().__init__(message)


class ServiceError(DoerError):
    """A task service call failed"""

    pass


class InvalidArgumentError(ServiceError):
    """The ledger rejected an argument; nothing was modified"""

    pass


class InvalidTaskIdError(InvalidArgumentError):
    """A task id that is not an integer"""

    pass


class TaskIdOutOfBoundsError(InvalidArgumentError):
    """A task id that does not name a stored task"""

    def __init__(self, task_id: int) -> None:
        self.task_id = task_id
        super().__init__(f"task id out of bounds: {task_id}")


class TransportError(ServiceError):
    """The server could not be reached or did not answer in time"""

    pass


class RemoteCallError(ServiceError):
    """The server answered with an unexpected failure"""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        self.status_code = status_code
        super().__init__(message)
