import pytest

from kssh.lexer import tokenize
from kssh.syntax import (
    build_syntax,
    has_command,
    is_redirection,
    merge_redirection_targets,
    next_pipe,
    only_whitespace,
    pipeline_count,
)
from kssh.tokens import Token, TokenList, TokenType

T = TokenType


def test_single_word_becomes_command():
    tokens = build_syntax(tokenize("ls"))
    assert tokens.types() == [T.CMD]
    assert tokens.texts() == ["ls"]


def test_command_in_second_segment():
    tokens = build_syntax(tokenize("cat|wc"))
    assert tokens.types()[-1] == T.CMD
    assert tokens.texts() == ["cat", "|", "wc"]


def test_redirection_target_takes_operator_type():
    tokens = build_syntax(tokenize("cat > out"))
    assert tokens.texts() == ["cat", " ", ">", " ", "out"]
    assert tokens.types() == [T.WORD, T.WHITESPACE, T.RIGHT_REDIRECT, T.WHITESPACE, T.RIGHT_REDIRECT]


def test_heredoc_target_marked():
    tokens = build_syntax(tokenize("cat << EOF"))
    last = tokens.last()
    assert last.text == "EOF"
    assert last.type == T.HEREDOC


def test_glued_target_pieces_are_merged():
    tokens = build_syntax(tokenize('cat >a"b"c'))
    assert tokens.texts() == ["cat", " ", ">", "abc", '"', '"']
    assert tokens.types()[3] == T.RIGHT_REDIRECT


def test_empty_quotes_argument_become_words():
    tokens = build_syntax(tokenize('echo "" x'))
    assert tokens.texts() == ["echo", " ", '"', '"', " ", "x"]
    assert tokens.types()[2:4] == [T.WORD, T.WORD]


def test_leading_empty_quotes_become_command():
    tokens = build_syntax(tokenize('"" ls'))
    assert tokens.types()[:2] == [T.CMD, T.CMD]


def test_quotes_after_command_untouched():
    tokens = build_syntax(tokenize('a""'))
    assert tokens.types() == [T.CMD, T.DOUBLE_QUOTE, T.DOUBLE_QUOTE]


@pytest.mark.parametrize("line", ["ls -l", "a | b", "echo 'x' y", "x|y|z", "   "])
def test_texts_unchanged_without_redirections(line):
    original = tokenize(line).texts()
    assert build_syntax(tokenize(line)).texts() == original


def test_empty_list():
    tokens = build_syntax(TokenList())
    assert len(tokens) == 0


def test_pipeline_count():
    assert pipeline_count(tokenize("a | b | c")) == 3
    assert pipeline_count(tokenize("abc")) == 1


def test_next_pipe():
    tokens = tokenize("a | b")
    pipe = next_pipe(tokens.head)
    assert pipe is list(tokens)[2]
    assert pipe.type == T.PIPE
    assert next_pipe(pipe) is None
    assert next_pipe(None) is None


@pytest.mark.parametrize("token_type", list(TokenType))
def test_is_redirection(token_type):
    expected = token_type in {T.HEREDOC, T.LEFT_REDIRECT, T.RIGHT_REDIRECT, T.APPEND}
    assert is_redirection(token_type) is expected


def test_has_command():
    tokens = build_syntax(tokenize("ls"))
    assert has_command(tokens.head) is True
    assert has_command(tokenize("ls -l").head) is False
    assert has_command(None) is False


def test_only_whitespace():
    assert only_whitespace(tokenize("   ")) is True
    assert only_whitespace(TokenList()) is True
    assert only_whitespace(tokenize(" a ")) is False


def test_merge_redirection_targets_stops_at_whitespace():
    tokens = TokenList(
        [
            Token(">", T.RIGHT_REDIRECT),
            Token("a", T.RIGHT_REDIRECT),
            Token("b", T.WORD),
            Token(" ", T.WHITESPACE),
            Token("c", T.WORD),
        ]
    )
    merge_redirection_targets(tokens, tokens.head)
    assert tokens.texts() == [">", "ab", " ", "c"]
    assert tokens.types() == [T.RIGHT_REDIRECT, T.RIGHT_REDIRECT, T.WHITESPACE, T.WORD]


def test_merge_redirection_targets_without_target_is_noop():
    tokens = TokenList([Token("<", T.LEFT_REDIRECT), Token(" ", T.WHITESPACE), Token("x", T.WORD)])
    merge_redirection_targets(tokens, tokens.head)
    assert tokens.texts() == ["<", " ", "x"]