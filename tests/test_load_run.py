import pytest

from loom import errors
from loom.types.sentinel import Nil


@pytest.fixture
def scene(tmp_path):
    path = tmp_path / "scene.loom"
    path.write_text('(let hp 10)\n(let name "Ann")\n(+ hp 5)\n', encoding="utf-8")
    return path


def test_load_evaluates_into_current_env(run, scene):
    assert run(f'(load "{scene}")') == 15.0
    assert run("hp") == 10.0
    assert run("name") == "Ann"


def test_load_sees_existing_bindings(run, tmp_path):
    path = tmp_path / "uses.loom"
    path.write_text("(+ base 1)", encoding="utf-8")
    run("(let base 41)")
    assert run(f'(load "{path}")') == 42.0


def test_load_path_is_evaluated(run, scene):
    run(f'(let where "{scene}")')
    assert run("(load where)") == 15.0


def test_load_empty_file(run, tmp_path):
    path = tmp_path / "empty.loom"
    path.write_text("; nothing here\n", encoding="utf-8")
    assert run(f'(load "{path}")') is Nil


def test_load_relative_to_working_directory(run, scene, monkeypatch):
    monkeypatch.chdir(scene.parent)
    assert run('(load "scene.loom")') == 15.0


def test_load_searches_loom_path(run, tmp_path, monkeypatch):
    lib = tmp_path / "lib"
    lib.mkdir()
    (lib / "common.loom").write_text("(let shared 7)", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("LOOM_PATH", str(lib))
    run('(load "common.loom")')
    assert run("shared") == 7.0


def test_load_missing_file(run, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("LOOM_PATH", raising=False)
    with pytest.raises(errors.LoomIOError):
        run('(load "nowhere.loom")')


def test_load_requires_string(run):
    with pytest.raises(errors.LoomTypeError):
        run("(load 5)")


def test_load_propagates_errors(run, tmp_path):
    path = tmp_path / "broken.loom"
    path.write_text("(let before 1)\n(missing)\n(let after 2)", encoding="utf-8")
    with pytest.raises(errors.LoomUnboundSymbol):
        run(f'(load "{path}")')
    assert run("before") == 1.0
    with pytest.raises(errors.LoomUnboundSymbol):
        run("after")


def test_load_dialogue_file(run, tmp_path, capsys):
    path = tmp_path / "talk.loom"
    path.write_text('(let Guard "Guard")\nGuard: Halt!\n', encoding="utf-8")
    run(f'(load "{path}")')
    assert capsys.readouterr().out == "Guard: Halt!\n"


# ------------------ run ------------------

def test_run_with_bare_name(run, tmp_path, monkeypatch):
    (tmp_path / "intro").write_text("(let chapter 1)", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    run("(run intro)")
    assert run("chapter") == 1.0


def test_run_with_dotted_name(run, scene, monkeypatch):
    monkeypatch.chdir(scene.parent)
    assert run("(run scene.loom)") == 15.0


def test_run_with_string(run, scene):
    assert run(f'(run "{scene}")') == 15.0


def test_run_does_not_evaluate_operand(run, tmp_path, monkeypatch):
    (tmp_path / "target").write_text("(let loaded true)", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    run('(let target "elsewhere")')
    run("(run target)")
    assert run("loaded") is not Nil


def test_run_rejects_other_operands(run):
    with pytest.raises(errors.LoomTypeError):
        run("(run 5)")
    with pytest.raises(errors.LoomTypeError):
        run("(run (f x))")


def test_run_missing_file(run, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(errors.LoomIOError):
        run("(run absent)")


def test_save_then_load(run, tmp_path):
    path = tmp_path / "state.loom"
    run(f'(save {{#hp 3}} "{path}")')
    assert run(f'(load "{path}")') == {"hp": 3.0}


def test_run_with_numeric_dotted_name(run, tmp_path, monkeypatch):
    (tmp_path / "chapter.1").write_text("(let reached 1)", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    run("(run chapter.1)")
    assert run("reached") == 1.0
