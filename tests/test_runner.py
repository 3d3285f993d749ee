"""Tests para el bucle interactivo y la exportación JSON."""

import io
import json

from rich.console import Console

from tuiform import Form, FormResult
from tuiform.export import write_json
from tuiform.runner import build_display, form_height, run_form


def key_source(keys):
    """Fuente de teclas a partir de una lista."""
    it = iter(keys)
    return lambda: next(it)


def quiet_console():
    return Console(file=io.StringIO(), width=60)


class TestRunForm:
    """Tests para run_form con teclas simuladas."""

    def test_submit(self):
        form = Form.builder().text("name", "Name").required().done().build()
        keys = ["A", "n", "a", "tab", "enter"]
        result = run_form(form, console=quiet_console(), get_key=key_source(keys), width=40)
        assert result == FormResult.SUBMITTED
        assert form.to_value_tree() == {"name": "Ana"}

    def test_cancel(self):
        form = Form.builder().text("name", "Name").done().build()
        result = run_form(form, console=quiet_console(), get_key=key_source(["x", "esc"]), width=40)
        assert result == FormResult.CANCELLED

    def test_failed_submit_keeps_running(self):
        form = Form.builder().text("name", "Name").required().done().build()
        keys = ["tab", "enter", "B", "o", "tab", "enter"]
        result = run_form(form, console=quiet_console(), get_key=key_source(keys), width=40)
        assert result == FormResult.SUBMITTED
        assert form.to_value_tree() == {"name": "Bo"}

    def test_empty_keys_skipped(self):
        form = Form.builder().text("name", "Name").done().build()
        result = run_form(form, console=quiet_console(), get_key=key_source(["", "esc"]), width=40)
        assert result == FormResult.CANCELLED

    def test_output_contains_form(self):
        console = quiet_console()
        form = Form.builder().title("Demo").text("name", "Name").done().build()
        run_form(form, console=console, get_key=key_source(["esc"]), width=40)
        assert "Demo" in console.file.getvalue()


class TestDisplay:
    """Tests para build_display y form_height."""

    def test_height_accounts_for_fields(self):
        form = Form.builder().text("a", "A").done().checkbox("b", "B").done().build()
        assert form_height(form) == 7

    def test_build_display(self):
        form = Form.builder().text("a", "A").done().build()
        text = build_display(form, 30, form_height(form))
        assert "A: " in text.plain


class TestWriteJson:
    """Tests para write_json."""

    def test_writes_value_tree(self, tmp_path):
        form = (
            Form.builder()
            .text("city", "City").initial_value("Montevideo").done()
            .checkbox("ok", "OK").done()
            .build()
        )
        path = write_json(form, tmp_path / "out.json")
        data = json.loads(path.read_text(encoding="utf-8"))
        assert data == {"city": "Montevideo", "ok": False}

    def test_non_ascii_preserved(self, tmp_path):
        form = Form.builder().text("city", "City").initial_value("São Paulo").done().build()
        path = write_json(form, str(tmp_path / "out.json"))
        assert "São Paulo" in path.read_text(encoding="utf-8")
