"""Tests for command-line argument handling."""

import pytest

import buf_cycle.cli as cli
import buf_cycle.config as config_mod


@pytest.fixture
def wrapper_calls(tmp_path, monkeypatch):
    monkeypatch.setattr(config_mod, "_get_user_data_dir", lambda: tmp_path / "home")
    monkeypatch.chdir(tmp_path)
    calls = []
    monkeypatch.setattr(cli.curses, "wrapper", lambda *a, **kw: calls.append((a, kw)))
    return calls


def run_main(monkeypatch, *argv):
    monkeypatch.setattr("sys.argv", ["buf-cycle", *argv])
    cli.main()


class TestMain:
    def test_defaults(self, wrapper_calls, monkeypatch):
        run_main(monkeypatch)
        (args, kw), = wrapper_calls
        func, config, names = args
        assert func is cli.run_editor
        assert config.timeout == 3.0
        assert names == []
        assert kw == {"debug": False}

    def test_names_timeout_and_debug(self, wrapper_calls, monkeypatch):
        run_main(monkeypatch, "-d", "-t", "1.5", "notes", "todo")
        (args, kw), = wrapper_calls
        assert args[1].timeout == 1.5
        assert args[2] == ["notes", "todo"]
        assert kw == {"debug": True}

    def test_config_file(self, wrapper_calls, monkeypatch, tmp_path):
        path = tmp_path / "keys.yml"
        path.write_text("forward_keys: [C-n]\nbackward_keys: [C-p]\n", encoding="utf-8")
        run_main(monkeypatch, "-c", str(path))
        (args, _), = wrapper_calls
        assert args[1].forward_keys == ["C-n"]

    @pytest.mark.parametrize(
        "argv",
        [
            ["-t", "0"],
            ["-c", "missing"],
        ],
    )
    def test_errors_exit_before_curses(self, wrapper_calls, monkeypatch, argv):
        with pytest.raises(SystemExit):
            run_main(monkeypatch, *argv)
        assert wrapper_calls == []

    def test_bad_key_spec(self, wrapper_calls, monkeypatch, tmp_path):
        path = tmp_path / "bad.yml"
        path.write_text("forward_keys: [nope]\n", encoding="utf-8")
        with pytest.raises(SystemExit):
            run_main(monkeypatch, "-c", str(path))
        assert wrapper_calls == []
