from pathlib import Path

import pytest

from elysp.errors import ElyspTypeError, ElyspUnboundSymbol, ElyspUserError
from elysp.modules.package_loader import load_module, resolve_module
from elysp.types.nil import Nil


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """An empty working directory with ELYSP_PATH unset."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("ELYSP_PATH", raising=False)
    return tmp_path


def test_import_copies_definitions(run, workdir):
    (workdir / "lib.lisp").write_text("(defn double (x) (* 2 x))\n(define k 10)\n")
    assert run('(import "lib.lisp")') is Nil
    assert run("(double 4)") == 8
    assert run("k") == 10


def test_latest_module_definition_wins(run, workdir):
    (workdir / "lib.lisp").write_text("(define k 1)\n(define k 2)\n")
    run('(import "lib.lisp")')
    assert run("k") == 2


def test_import_shadows_existing_bindings(run, workdir):
    (workdir / "lib.lisp").write_text("(define k 2)")
    run("(define k 1)")
    run('(import "lib.lisp")')
    assert run("k") == 2


def test_module_sees_prelude_but_does_not_export_it(run, workdir):
    # `run` evaluates without the prelude
    (workdir / "lib.lisp").write_text("(defn count (xs) (length xs))")
    run('(import "lib.lisp")')
    assert run("(count '(1 2 3))") == 3
    with pytest.raises(ElyspUnboundSymbol):
        run("length")


def test_module_does_not_see_importer(run, workdir):
    (workdir / "lib.lisp").write_text("(define seen secret)")
    run("(define secret 1)")
    with pytest.raises(ElyspUnboundSymbol):
        run('(import "lib.lisp")')


def test_symbols_are_shared_with_module(run, workdir):
    (workdir / "lib.lisp").write_text("(define greeting 'hello)")
    run('(import "lib.lisp")')
    assert run("(if (= greeting 'hello) 1 2)") == 1


def test_import_from_module_path(run, workdir, monkeypatch):
    libdir = workdir / "libs"
    libdir.mkdir()
    (libdir / "mod.lisp").write_text("(define from-path 7)")
    monkeypatch.setenv("ELYSP_PATH", str(libdir))
    run('(import "mod.lisp")')
    assert run("from-path") == 7


def test_current_directory_is_searched_first(workdir, monkeypatch):
    libdir = workdir / "libs"
    libdir.mkdir()
    (libdir / "mod.lisp").write_text("")
    (workdir / "mod.lisp").write_text("")
    monkeypatch.setenv("ELYSP_PATH", str(libdir))
    assert resolve_module("mod.lisp") == Path("mod.lisp")
    (workdir / "mod.lisp").unlink()
    assert resolve_module("mod.lisp") == libdir / "mod.lisp"


def test_missing_module(run, workdir):
    with pytest.raises(FileNotFoundError):
        run('(import "nowhere.lisp")')
    assert resolve_module("nowhere.lisp") is None


def test_import_needs_a_string(run):
    with pytest.raises(ElyspTypeError):
        run("(import 'lib)")


def test_errors_in_module_propagate(run, workdir):
    (workdir / "bad.lisp").write_text('(error "bad module")')
    with pytest.raises(ElyspUserError):
        run('(import "bad.lisp")')


def test_load_module_returns_module_frame(symbols, workdir):
    (workdir / "lib.lisp").write_text("(define a 1) (define b 2)")
    frame = load_module("lib.lisp", symbols)
    assert [(s.name, v) for s, v in frame.bindings()] == [("b", 2), ("a", 1)]


# -------------------------
# slurp
# -------------------------

def test_slurp_reads_file(run, workdir):
    (workdir / "notes.txt").write_text("hello\nworld\n")
    assert run('(slurp "notes.txt")') == "hello\nworld\n"


def test_slurp_missing_file(run, workdir):
    with pytest.raises(FileNotFoundError):
        run('(slurp "missing.txt")')


def test_slurp_needs_a_string(run):
    with pytest.raises(ElyspTypeError):
        run("(slurp 1)")
