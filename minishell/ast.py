"""Building command nodes from lexer tokens."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from typing import Protocol, Union

from minishell.envdict import EnvDict


class _Lookup(Protocol):
    def get(self, key: str) -> str | None: ...


Env = Union[EnvDict, Mapping[str, str], _Lookup]

NO_SUCH_FILE = "no such file or directory"


class TokenType(enum.Enum):
    EXEC = enum.auto()
    FLAG = enum.auto()
    ARGUMENT = enum.auto()
    REDIRECT = enum.auto()
    PIPE = enum.auto()


@dataclass(frozen=True)
class Token:
    type: TokenType
    text: str


class RedirType(enum.Enum):
    INPUT_REDIR = enum.auto()
    OUTPUT_REDIR = enum.auto()
    OUTPUT_REDIR_APPEND = enum.auto()
    HERE_DOC = enum.auto()


@dataclass
class Redirect:
    type: RedirType
    file: str


@dataclass
class CommandNode:
    """One simple command between pipes."""

    command: str | None = None
    flag: str | None = None
    arguments: list[str] = field(default_factory=list)
    redirects: list[Redirect] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)


@dataclass
class ParseResult:
    """A pipeline of command nodes."""

    commands: list[CommandNode] = field(default_factory=list)

    @property
    def pipe_count(self) -> int:
        return max(len(self.commands) - 1, 0)

    @property
    def errors(self) -> list[str]:
        return [error for node in self.commands for error in node.errors]

    @property
    def syntax_error(self) -> bool:
        return any(node.errors for node in self.commands)


def redirect_type(text: str) -> RedirType:
    """Classify a redirect token by its leading operator."""
    if text.startswith(">>"):
        return RedirType.OUTPUT_REDIR_APPEND
    if text.startswith("<<"):
        return RedirType.HERE_DOC
    if text.startswith(">"):
        return RedirType.OUTPUT_REDIR
    if text.startswith("<"):
        return RedirType.INPUT_REDIR
    raise ValueError(f"not a redirect: {text!r}")


def _variable_name(text: str) -> str:
    end = 0
    for ch in text:
        if not (ch.isascii() and (ch.isalnum() or ch == "_")):
            break
        end += 1
    return text[:end]


def redirect_file(text: str, env: Env) -> str:
    """Return the target of a redirect token.

    Leading operators and whitespace are dropped. A target starting with "$"
    is replaced by the value of that variable; an unset variable raises
    LookupError.
    """
    target = text.lstrip("><\t\n\v\f\r ")
    if target.startswith("$"):
        key = _variable_name(target[1:])
        value = env.get(key)
        if value is None:
            raise LookupError(NO_SUCH_FILE)
        return value
    return target


def build_command(tokens: Iterable[Token], env: Env) -> CommandNode:
    """Build one command node from tokens, stopping at the first pipe."""
    node = CommandNode()
    for token in tokens:
        if token.type is TokenType.PIPE:
            break
        if token.type is TokenType.ARGUMENT:
            node.arguments.append(token.text)
        elif token.type is TokenType.REDIRECT:
            kind = redirect_type(token.text)
            try:
                target = redirect_file(token.text, env)
            except LookupError as exc:
                node.errors.append(str(exc))
                target = token.text.lstrip("><\t\n\v\f\r ")
            node.redirects.append(Redirect(kind, target))
        elif token.type is TokenType.FLAG:
            node.flag = token.text
        elif token.type is TokenType.EXEC:
            node.command = token.text
    return node


def _segments(tokens: Iterable[Token]) -> Iterator[list[Token]]:
    current: list[Token] = []
    for token in tokens:
        if token.type is TokenType.PIPE:
            yield current
            current = []
        else:
            current.append(token)
    yield current


def build_commands(tokens: Iterable[Token], env: Env) -> ParseResult:
    """Build the pipeline of command nodes for a whole token stream."""
    return ParseResult([build_command(segment, env) for segment in _segments(tokens)])