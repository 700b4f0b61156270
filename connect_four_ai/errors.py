class Error(Exception):
    """A base error class for the connect_four_ai package."""
    def __init__(self, message="ConnectFour: Unknown Exception occurred.") -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message

class OutOfBoundsError(Error):
    """A column outside of the game board was referenced."""
    pass

class InvalidInsertError(Error):
    """The player tried to insert a piece into a full column."""
    pass

class BoardFullError(Error):
    """A move was requested on a board with no available columns."""
    pass

class InvalidChoiceError(Error):
    """A menu selection did not match any of the offered options."""
    pass

class TooManyAttemptsError(Error):
    """The user failed to provide valid input too many times in a row."""
    pass
