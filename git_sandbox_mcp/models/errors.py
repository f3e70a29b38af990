"""Error taxonomy for sandbox operations. Each error's message is shown to the learner as command output."""

NOT_A_REPOSITORY_MESSAGE = "fatal: not a git repository (or any of the parent directories): .git"
NOT_ALLOWED_MESSAGE = "This command is not allowed in this exercise."


class CommandError(Exception):
    """Raised to report a failure; becomes the command's output."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message: str = message


class NotARepository(CommandError):
    def __init__(self) -> None:
        super().__init__(NOT_A_REPOSITORY_MESSAGE)


class PathNotFound(CommandError):
    pass


class WrongNodeKind(CommandError):
    """A directory was given where a file is required, or the other way round."""


class AlreadyExists(CommandError):
    pass


class NothingToStage(CommandError):
    pass


class NothingToCommit(CommandError):
    pass


class MissingCommitMessage(CommandError):
    pass


class MissingOperand(CommandError):
    pass


class CommandNotAllowed(CommandError):
    def __init__(self) -> None:
        super().__init__(NOT_ALLOWED_MESSAGE)


class UnknownCommand(CommandError):
    def __init__(self, command_key: str) -> None:
        super().__init__(f"Unknown command: {command_key}")
        self.command_key = command_key
