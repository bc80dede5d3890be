"""Lookup table from instruction symbols to commands."""

from typing import Dict, Iterable, Optional, Tuple

from .commands import Command, TurnLeftCommand, TurnRightCommand, MoveForwardCommand
from .errors import UnknownCommandError


class CommandRegistry:
    """
    Maps one-character instruction symbols to Command instances.

    Registering a command for a symbol that is already taken replaces the
    previous command. New symbols can be added without touching Robot or
    World.
    """

    def __init__(self, commands: Optional[Iterable[Command]] = None):
        self._commands: Dict[str, Command] = {}
        for command in commands or ():
            self.register(command)

    @classmethod
    def with_defaults(cls) -> "CommandRegistry":
        """Registry with turn-left, turn-right and move-forward."""
        return cls([TurnLeftCommand(), TurnRightCommand(), MoveForwardCommand()])

    def register(self, command: Command) -> None:
        self._commands[command.symbol] = command

    def get_command(self, symbol: str) -> Command:
        try:
            return self._commands[symbol]
        except KeyError:
            raise UnknownCommandError(symbol) from None

    @property
    def symbols(self) -> Tuple[str, ...]:
        return tuple(sorted(self._commands))

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._commands

    def __len__(self) -> int:
        return len(self._commands)

    def __repr__(self) -> str:
        return f"CommandRegistry(symbols={''.join(self.symbols)!r})"


def default_registry() -> CommandRegistry:
    return CommandRegistry.with_defaults()
