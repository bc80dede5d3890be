"""Exception hierarchy for the Martian Robots simulation."""


class MartianRobotsError(Exception):
    """Base class for every error raised by the simulation core."""


class InvalidArgumentError(MartianRobotsError, ValueError):
    """A constructor or call received an argument it cannot accept."""


class MissingWorldError(InvalidArgumentError):
    pass


class NegativeCoordinatesError(InvalidArgumentError):
    pass


class OutOfBoundsError(InvalidArgumentError):
    pass


class BoundsExceededError(InvalidArgumentError):
    pass


class InstructionLengthError(InvalidArgumentError):
    pass


class InvalidInstructionError(MartianRobotsError, ValueError):
    """An instruction symbol could not be executed."""


class UnknownCommandError(InvalidInstructionError):

    def __init__(self, symbol: str):
        super().__init__(f"Unknown command: '{symbol}'")
        self.symbol = symbol
