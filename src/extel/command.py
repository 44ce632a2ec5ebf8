#
# src/extel/command.py
#
"""
Turns a shell-like command template into a structured invocation.

Arguments wrapped in single or double quotes are kept together as one
argument, so `echo -n "hello world"` runs `echo` with `-n` and `hello world`.
No other shell semantics apply.
"""
from typing import TYPE_CHECKING

import structlog
from attrs import define, field

from extel.exceptions import InvalidCommandError

if TYPE_CHECKING:
    from extel.process import CommandOutput

log = structlog.get_logger("command")

QUOTE_CHARS = ('"', "'")


@define(frozen=True, slots=True)
class Invocation:
    """
    A program and its resolved arguments, ready to hand to a process spawner.
    """

    program: str
    arguments: tuple[str, ...] = field(factory=tuple, converter=tuple)

    @property
    def argv(self) -> list[str]:
        return [self.program, *self.arguments]

    def output(self, **kwargs) -> "CommandOutput":
        """Run the invocation and capture its output. See `extel.process.spawn`."""
        from extel.process import spawn

        return spawn(self, **kwargs)

    def status(self, **kwargs) -> int | None:
        """Run the invocation and return only its exit code."""
        return self.output(**kwargs).exit_code


def tokenize(template: str) -> tuple[str, list[str]]:
    """
    Split a fully substituted template into `(program, arguments)`.

    Splitting happens on single ASCII spaces. A raw token opening with `"` or
    `'` starts a quoted run that ends at the first later token whose last
    character is the same quote; the run is re-joined with single spaces and
    emitted as one argument. An unterminated run is emitted fragment by
    fragment instead.

    Raises:
        InvalidCommandError: If the template holds no program name.
    """
    raw_tokens = template.strip().split(" ")
    program = raw_tokens[0]
    if not program:
        raise InvalidCommandError(template)

    arguments: list[str] = []
    tokens = iter(raw_tokens[1:])
    for token in tokens:
        if not token:
            # Runs of spaces outside quotes separate nothing.
            continue

        quote = token[0]
        if quote not in QUOTE_CHARS or len(token) == 1:
            arguments.append(token)
            continue

        if token[-1] == quote:
            arguments.append(token[1:-1])
            continue

        pending = [token[1:]]
        for token in tokens:
            if token.endswith(quote):
                pending.append(token[:-1])
                arguments.append(" ".join(pending))
                break
            pending.append(token)
        else:
            log.debug("Unterminated quote in command template", template=template, quote=quote)
            arguments.extend(fragment for fragment in pending if fragment)

    return program, arguments


def build_invocation(template: str) -> Invocation:
    program, arguments = tokenize(template)
    return Invocation(program=program, arguments=arguments)


def cmd(template: str, *args, **kwargs) -> Invocation:
    """
    Build an invocation from a command template.

    When positional or keyword arguments are given, `{}` placeholders in the
    template are substituted with `str.format` before tokenizing.

    Example:
        >>> cmd('echo -n "{}"', "viva las vegas").argv
        ['echo', '-n', 'viva las vegas']
    """
    if args or kwargs:
        template = template.format(*args, **kwargs)
    return build_invocation(template)

# 🔼⚙️
