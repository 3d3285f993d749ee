"""Tests para la CLI."""

import json

import pytest
from typer.testing import CliRunner

from tuiform import FormResult
from tuiform.cli import app
from tuiform.samples import SAMPLES, contact_form, event_form, shipping_form


runner = CliRunner()


def fill_and_submit(form, console=None):
    """Sustituto de run_form: completa el formulario de envío y lo envía."""
    values = {
        "name": "Ana",
        "email": "ana@example.com",
        "shipping_street1": "18 de Julio 1234",
        "shipping_city": "Springfield",
        "shipping_zip": "12345",
    }
    for field_id, text in values.items():
        form.field(field_id).set_value(text)
    form.field("shipping_state").select_value("IL")
    form.field("terms").toggle()
    form.try_submit()
    return form.result


def cancel(form, console=None):
    form.cancel()
    return form.result


class TestThemes:
    """Tests para el comando themes."""

    def test_lists_themes(self):
        result = runner.invoke(app, ["themes"])
        assert result.exit_code == 0
        assert "dark" in result.output
        assert "light" in result.output


class TestDemo:
    """Tests para el comando demo."""

    def test_submit_writes_json(self, tmp_path, monkeypatch):
        monkeypatch.setattr("tuiform.cli.run_form", fill_and_submit)
        output = tmp_path / "shipping.json"
        result = runner.invoke(app, ["demo", "address", "--output", str(output)])

        assert result.exit_code == 0, result.output
        data = json.loads(output.read_text(encoding="utf-8"))
        assert data["shipping_state"] == "IL"
        assert data["terms"] is True
        assert data["newsletter"] is False

    def test_cancel_exits_with_error(self, monkeypatch):
        monkeypatch.setattr("tuiform.cli.run_form", cancel)
        result = runner.invoke(app, ["demo", "address"])
        assert result.exit_code == 1
        assert "cancelado" in result.output

    def test_unknown_sample(self):
        result = runner.invoke(app, ["demo", "nope"])
        assert result.exit_code == 1
        assert "desconocido" in result.output

    def test_unknown_theme(self, monkeypatch):
        monkeypatch.setattr("tuiform.cli.run_form", cancel)
        result = runner.invoke(app, ["demo", "address", "--theme", "neon"])
        assert result.exit_code == 1
        assert "Tema desconocido" in result.output


class TestSamples:
    """Tests para los formularios de ejemplo."""

    @pytest.mark.parametrize("name", sorted(SAMPLES))
    def test_samples_build(self, name):
        form = SAMPLES[name]()
        assert form.is_active
        assert len(form.fields) > 0

    def test_shipping_submits_when_filled(self):
        form = shipping_form()
        assert fill_and_submit(form) == FormResult.SUBMITTED

    def test_contact_requires_topic(self):
        form = contact_form()
        form.field("contact_name").set_value("Ana")
        form.field("contact_email").set_value("ana@example.com")
        form.try_submit()
        assert [e.field_id for e in form.validation_errors] == ["topic"]

    def test_event_range(self):
        form = event_form()
        form.field("event").set_value("PyCon")
        dates = form.field("dates")
        dates.start.set_value("2024-05-10")
        dates.end.set_value("2024-05-01")
        form.try_submit()
        assert [e.field_id for e in form.validation_errors] == ["dates_end"]
        assert form.focused_field is dates
