import json

from ftskit.run_tokenize import main


def test_prints_one_token_per_line(engine, capsys):
    assert main(["Hello, World!"]) == 0
    assert capsys.readouterr().out.splitlines() == ["hello", "world"]


def test_json_and_statement(engine, capsys):
    code = main(
        [
            "foo-bar Économie",
            "--tokenizer",
            "unicode61",
            "--token-characters",
            "-",
            "--show-statement",
            "--json",
        ]
    )

    assert code == 0
    statement, tokens = capsys.readouterr().out.splitlines()
    assert statement == (
        "CREATE VIRTUAL TABLE __fts3tokens "
        'USING fts3tokenize(unicode61, "tokenchars=-")'
    )
    assert json.loads(tokens) == ["foo-bar", "economie"]


def test_raw_arguments(engine, capsys):
    assert main(["a;b", "--tokenizer", "unicode61", "--argument", "tokenchars=;"]) == 0
    assert capsys.readouterr().out.splitlines() == ["a;b"]


def test_rejected_tokenizer_exits_non_zero(engine, capsys):
    assert main(["foo", "--tokenizer", "no_such_tokenizer"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "ERROR" in captured.err
    assert "no_such_tokenizer" in captured.err
