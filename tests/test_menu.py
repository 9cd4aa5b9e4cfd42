import io

import pytest

from indexedfile.archive import IndexedFile
from indexedfile.menu import SAMPLE_RECORDS, insert_sample_records, main, run_menu


def _run(archive, text):
    out = io.StringIO()
    run_menu(archive, io.StringIO(text), out)
    return out.getvalue()


def test_insert_sample_records_are_retrievable():
    archive = IndexedFile(4, 16, 24)
    insert_sample_records(archive)
    for key, data in SAMPLE_RECORDS:
        assert archive.lookup(key) == data


def test_menu_insert_then_lookup():
    archive = IndexedFile(4, 16, 24)
    output = _run(archive, "1\n2\nhello\n2\n2\n4\n")
    assert "Termino insercion." in output
    assert "DATO ES:hello" in output
    assert archive.lookup(2) == "hello"


def test_menu_lookup_missing():
    output = _run(IndexedFile(4, 16, 24), "2\n99\n4\n")
    assert "no se encontro" in output


def test_menu_show_areas():
    archive = IndexedFile(4, 16, 24)
    insert_sample_records(archive)
    output = _run(archive, "3\n4\n")
    assert str(archive) in output


def test_menu_stops_at_option_four():
    archive = IndexedFile(4, 16, 24)
    output = _run(archive, "4\n1\n3\nx\n")
    assert archive.lookup(3) is None
    assert output.count("4. Salir") == 1


def test_menu_stops_at_end_of_input():
    output = _run(IndexedFile(4, 16, 24), "9\n")
    assert output.count("4. Salir") == 2


def test_menu_reports_warning():
    archive = IndexedFile(2, 4, 8)
    output = _run(archive, "1 10 a 1 20 b 1 30 c 4")
    assert "Ultimo bloque del area primaria colocado" in output
    assert archive.lookup(30) is None


def test_menu_invalid_key_inserts_nothing():
    archive = IndexedFile(4, 16, 24)
    output = _run(archive, "1\nabc\n2\n0\n4\n")
    assert "Clave invalida: abc" in output
    assert "Termino insercion." not in output


def test_main_runs_menu(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n5\nvalue\n2\n5\n4\n"))
    assert main([]) == 0
    assert "DATO ES:value" in capsys.readouterr().out


def test_main_with_sample(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n7\n4\n"))
    assert main(["--sample"]) == 0
    assert "DATO ES:test8" in capsys.readouterr().out


def test_main_rejects_bad_geometry(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("4\n"))
    with pytest.raises(SystemExit):
        main(["--primary-size", "16", "--total-size", "8"])