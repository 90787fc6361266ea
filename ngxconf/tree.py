"""
Parsed configuration tree.

A Block is an ordered, immutable sequence of Commands. A Command is a
sequence of words optionally followed by a nested Block:

    worker_processes 4;            -> Command(("worker_processes", "4"))
    events { use epoll; }          -> Command(("events",), Block((Command(("use", "epoll")),)))

Line numbers are kept for diagnostics but do not take part in equality,
so adding or removing comment lines never changes how trees compare.
"""

from dataclasses import dataclass, field
from typing import Iterator


@dataclass(frozen=True)
class Command:
    """A single directive: its words and, for block directives, the nested block."""

    words: tuple[str, ...]
    block: "Block | None" = None
    line: int = field(default=0, compare=False)

    def __repr__(self) -> str:
        if self.block is None:
            return f"Command({list(self.words)})"
        return f"Command({list(self.words)}, block={len(self.block)})"

    @property
    def name(self) -> str | None:
        """First word of the command (the directive name), or None."""
        return self.words[0] if self.words else None

    @property
    def args(self) -> tuple[str, ...]:
        """Words following the directive name."""
        return self.words[1:]

    @property
    def has_block(self) -> bool:
        return self.block is not None

    def get(self, index: int = 0, default: str | None = None) -> str | None:
        """Get argument at index (not counting the name) with default."""
        args = self.args
        if 0 <= index < len(args):
            return args[index]
        return default


@dataclass(frozen=True)
class Block:
    """An ordered group of commands; the whole document is itself a Block."""

    commands: tuple[Command, ...] = ()

    def __repr__(self) -> str:
        return f"Block({list(self.commands)})"

    def __len__(self) -> int:
        return len(self.commands)

    def __iter__(self) -> Iterator[Command]:
        return iter(self.commands)

    def __getitem__(self, index: int) -> Command:
        return self.commands[index]

    def __bool__(self) -> bool:
        return bool(self.commands)

    def get_command(self, name: str) -> Command | None:
        """Get first command with given name."""
        for command in self.commands:
            if command.name == name:
                return command
        return None

    def get_commands(self, name: str) -> list[Command]:
        """Get all commands with given name."""
        return [c for c in self.commands if c.name == name]

    def get_block(self, name: str) -> "Block | None":
        """Get the nested block of the first block command with given name."""
        for command in self.commands:
            if command.name == name and command.block is not None:
                return command.block
        return None

    def walk(self) -> Iterator[tuple[int, Command]]:
        """
        Iterate over all commands depth-first in source order.

        Yields (depth, command) pairs; top-level commands have depth 0.
        """
        pending = [iter(self.commands)]
        while pending:
            command = next(pending[-1], None)
            if command is None:
                pending.pop()
                continue
            yield len(pending) - 1, command
            if command.block is not None:
                pending.append(iter(command.block.commands))
