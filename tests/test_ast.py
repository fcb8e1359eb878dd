import pytest

from minishell.ast import (
    CommandNode,
    ParseResult,
    RedirType,
    Redirect,
    Token,
    TokenType,
    build_command,
    build_commands,
    redirect_file,
    redirect_type,
)
from minishell.envdict import EnvDict


def tok(kind, text):
    return Token(TokenType[kind], text)


@pytest.mark.parametrize(
    "text, expected",
    [
        (">> out", RedirType.OUTPUT_REDIR_APPEND),
        ("<< EOF", RedirType.HERE_DOC),
        ("> out", RedirType.OUTPUT_REDIR),
        ("< in", RedirType.INPUT_REDIR),
    ],
)
def test_redirect_type(text, expected):
    assert redirect_type(text) is expected


def test_redirect_type_rejects_other_text():
    with pytest.raises(ValueError):
        redirect_type("out")


def test_redirect_file_strips_operators():
    assert redirect_file(">>  out.txt", {}) == "out.txt"
    assert redirect_file("<in.txt", {}) == "in.txt"


def test_redirect_file_expands_variable():
    env = EnvDict.from_list(["TARGET=/tmp/log"])
    assert redirect_file("> $TARGET", env) == "/tmp/log"
    assert redirect_file("> $TARGET", {"TARGET": "x.txt"}) == "x.txt"


def test_redirect_file_unset_variable():
    with pytest.raises(LookupError):
        redirect_file("> $NOPE", {})


def test_build_command_collects_parts():
    tokens = [
        tok("EXEC", "ls"),
        tok("FLAG", "-l"),
        tok("ARGUMENT", "dir"),
        tok("REDIRECT", "> out"),
        tok("ARGUMENT", "other"),
        tok("PIPE", "|"),
        tok("ARGUMENT", "ignored"),
    ]
    node = build_command(tokens, {})
    assert node == CommandNode(
        command="ls",
        flag="-l",
        arguments=["dir", "other"],
        redirects=[Redirect(RedirType.OUTPUT_REDIR, "out")],
    )


def test_build_command_records_unset_variable():
    node = build_command([tok("EXEC", "cat"), tok("REDIRECT", "< $NOPE")], {})
    assert node.errors
    assert node.redirects == [Redirect(RedirType.INPUT_REDIR, "$NOPE")]


def test_build_commands_splits_on_pipes():
    tokens = [
        tok("EXEC", "cat"),
        tok("ARGUMENT", "file"),
        tok("PIPE", "|"),
        tok("EXEC", "grep"),
        tok("ARGUMENT", "x"),
        tok("PIPE", "|"),
        tok("EXEC", "wc"),
    ]
    result = build_commands(tokens, {})
    assert [node.command for node in result.commands] == ["cat", "grep", "wc"]
    assert result.pipe_count == len(result.commands) - 1
    assert result.syntax_error is False
    assert result.errors == []


def test_build_commands_propagates_errors():
    tokens = [tok("EXEC", "echo"), tok("PIPE", "|"), tok("REDIRECT", "> $MISSING")]
    result = build_commands(tokens, EnvDict())
    assert result.syntax_error is True
    assert len(result.errors) == 1


def test_empty_parse_result():
    result = ParseResult()
    assert result.pipe_count == 0
    assert result.syntax_error is False