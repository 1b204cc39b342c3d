import pytest

from minish.commands import Command, Redirection
from minish.env import Environment
from minish.expand import (
    AmbiguousRedirectError,
    check_redirect_target,
    expand_arguments,
    expand_commands,
    expand_part,
    expand_redirections,
    expand_token,
    split_vars,
    strip_quotes,
    var_value,
)


@pytest.fixture
def env():
    return Environment.from_mapping({"HOME": "/home/user", "NAME": "bob"})


def test_split_vars_plain_word():
    assert split_vars("abc") == ["abc"]


@pytest.mark.parametrize(
    "token",
    ["abc", "$HOME", '"a $HOME b"', "'$HOME'", "x$NAME$HOME", '"$HOME"', "a'b'\"c\""],
)
def test_split_vars_parts_join_back(token):
    parts = split_vars(token)
    assert "".join(parts) == token
    assert all(parts)


def test_split_vars_double_quotes_separate_variable():
    parts = split_vars('"a $HOME b"')
    assert len(parts) == 3
    assert parts[1] == "$HOME"


def test_split_vars_single_quotes_keep_variable():
    assert split_vars("'$HOME'") == ["'$HOME'"]


def test_split_vars_empty():
    assert split_vars("") == []


def test_var_value_lookup(env):
    assert var_value(env, 0, "NAME") == "bob"


def test_var_value_status(env):
    assert var_value(env, 42, "?") == str(42)


def test_var_value_unset_is_empty(env):
    assert var_value(env, 0, "MISSING") == ""


def test_var_value_empty_key(env):
    with pytest.raises(ValueError):
        var_value(env, 0, "")


def test_strip_quotes():
    assert strip_quotes('"hi"') == "hi"
    assert strip_quotes("'hi'") == "hi"
    assert strip_quotes("plain") == "plain"


def test_expand_part(env):
    assert expand_part(env, 0, "$HOME") == "/home/user"
    assert expand_part(env, 0, "'x'") == "x"


def test_expand_token_variable(env):
    assert expand_token(env, 0, "$HOME") == "/home/user"


def test_expand_token_inside_double_quotes(env):
    assert expand_token(env, 0, '"a $HOME b"') == "a /home/user b"


def test_expand_token_single_quotes_no_expansion(env):
    assert expand_token(env, 0, "'$HOME'") == "$HOME"


def test_expand_token_concatenation(env):
    assert expand_token(env, 0, "$NAME$HOME") == "bob" + "/home/user"


def test_expand_token_status(env):
    assert expand_token(env, 3, "$?") == str(3)


def test_expand_token_bare_dollar_fails(env):
    with pytest.raises(ValueError):
        expand_token(env, 0, "$")


def test_expand_token_empty_fails(env):
    with pytest.raises(ValueError):
        expand_token(env, 0, "")


def test_check_redirect_target_ok():
    assert check_redirect_target("$F", "file") == "file"


@pytest.mark.parametrize("new_target", ["", "a b"])
def test_check_redirect_target_ambiguous(new_target):
    with pytest.raises(AmbiguousRedirectError) as info:
        check_redirect_target("$F", new_target)
    assert info.value.target == "$F"
    assert "ambiguous redirect" in str(info.value)


def test_expand_redirections_skips_heredoc(env):
    redirs = [Redirection("<<", "$HOME"), Redirection(">", "$NAME")]
    result = expand_redirections(env, 0, redirs)
    assert result[0].target == "$HOME"
    assert result[1].target == "bob"
    assert redirs[1].target == "$NAME"


def test_expand_redirections_unset_is_ambiguous(env):
    with pytest.raises(AmbiguousRedirectError) as info:
        expand_redirections(env, 0, [Redirection("<", "$NOPE")])
    assert info.value.target == "$NOPE"


def test_expand_arguments(env):
    assert expand_arguments(env, 0, ["echo", "$NAME"]) == ["echo", "bob"]


def test_expand_commands_leaves_originals(env):
    command = Command(arguments=["echo", "$NAME"], redirections=[Redirection(">", "$NAME")])
    result = expand_commands(env, 0, [command])
    assert result[0].arguments == ["echo", "bob"]
    assert result[0].redirections[0].target == "bob"
    assert command.arguments == ["echo", "$NAME"]
    assert len(result) == 1