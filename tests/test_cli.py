"""Tests for the command line (cli.py)."""

import pytest
from tlh_morph.cli import main


@pytest.fixture(autouse=True)
def _logging(restore_logging):
    yield


def test_nothing_to_do_is_an_error(capsys):
    with pytest.raises(SystemExit) as exc:
        main([])
    assert exc.value.code == 2
    assert "Nothing to do" in capsys.readouterr().err


def test_parse_noun(capsys):
    main(["--parse", "puqpu'", "--kind", "n"])
    out = capsys.readouterr().out
    assert "'puqpu'' as noun" in out
    assert "puq:n" in out
    assert "puq + -pu'" in out
    assert "as verb" not in out


def test_parse_both_kinds(capsys):
    main(["--parse", "Sop"])
    out = capsys.readouterr().out
    assert "as noun" in out
    assert "as verb" in out


def test_parse_lenient_key(capsys):
    main(["--parse", "vaj", "--kind", "v", "--lenient"])
    out = capsys.readouterr().out
    assert "vaj:v" not in out


def test_decode(capsys):
    main(["--decode", "v:t_c,2h"])
    out = capsys.readouterr().out
    assert "base:           v" in out
    assert "transitive (confirmed)" in out
    assert "homophone:      2 (hidden)" in out


def test_decode_flags_and_url(capsys):
    main(["--decode", "n:slang,reg"])
    out = capsys.readouterr().out
    assert "flags:          reg, slang" in out
    assert "noun type:      general" in out


def test_analyze_with_lexicon(lexicon_file, capsys):
    main(["--lexicon", str(lexicon_file), "--analyze", "bISoptaHqu'"])
    out = capsys.readouterr().out
    assert "bI- + Sop + -taH + -qu'" in out
    assert "{Sop:v:t_c} eat" in out


def test_analyze_not_found(lexicon_file, capsys):
    main(["--lexicon", str(lexicon_file), "--analyze", "xyzzy"])
    assert "'xyzzy' not found" in capsys.readouterr().out


def test_analyze_lenient(lexicon_file, capsys):
    main(["--lexicon", str(lexicon_file), "--analyze", "vaj", "--lenient"])
    assert "{vaj:adv} so, then" in capsys.readouterr().out


def test_find_with_components(lexicon_file, capsys):
    main(["--lexicon", str(lexicon_file), "--find", "ghojwI':n"])
    out = capsys.readouterr().out
    assert "{ghojwI':n} student" in out
    assert "{ghoj:v:t_c} learn" in out


def test_find_nothing(lexicon_file, capsys):
    main(["--lexicon", str(lexicon_file), "--find", "ghoS:v:3"])
    assert "No entries satisfy 'ghoS:v:3'" in capsys.readouterr().err


def test_analyze_with_config(tmp_path, lexicon_file, capsys):
    config = tmp_path / "tlh_morph.toml"
    config.write_text('[lexicon]\npaths = ["data/*.json"]\n', encoding="utf-8")
    main(["--config", str(config), "--analyze", "puqpu'"])
    assert "{puq:n} child" in capsys.readouterr().out


def test_default_config_in_cwd(tmp_path, lexicon_file, monkeypatch, capsys):
    (tmp_path / "tlh_morph.toml").write_text('[lexicon]\npaths = ["data/*.json"]\n', encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    main(["--analyze", "Sop"])
    assert "{Sop:v:t_c} eat" in capsys.readouterr().out


def test_analyze_without_dictionary_is_an_error(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(SystemExit) as exc:
        main(["--analyze", "Sop"])
    assert exc.value.code == 2
