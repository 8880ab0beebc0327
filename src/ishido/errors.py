class SessionNotStartedError(RuntimeError):
    """Raised when session state is queried before the first new game."""

    def __init__(self, message: str = "No game has been started; call new_game() first") -> None:
        super().__init__(message)
