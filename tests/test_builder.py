"""Tests para FormBuilder."""

import pytest

from tuiform import Checkbox, Email, Form, FormStyle, Select, TextInput


class TestFormBuilder:
    """Tests del constructor fluido."""

    def test_text_stage(self):
        form = (
            Form.builder()
            .text("email", "Email")
            .placeholder("john@example.com")
            .required()
            .validator(Email())
            .initial_value("x@y.com")
            .done()
            .build()
        )
        fld = form.field("email")
        assert isinstance(fld, TextInput)
        assert fld.placeholder == "john@example.com"
        assert fld.required
        assert fld.value() == "x@y.com"
        assert fld.cursor == len("x@y.com")
        assert len(fld.validators) == 1

    def test_select_stage(self):
        form = (
            Form.builder()
            .select("size", "Size")
            .option("s", "Small")
            .options([("m", "Medium"), ("l", "Large")])
            .initial_value("m")
            .required()
            .done()
            .build()
        )
        fld = form.field("size")
        assert isinstance(fld, Select)
        assert [v for v, _ in fld.options] == ["s", "m", "l"]
        assert fld.value() == "m"
        assert fld.required

    def test_checkbox_stage(self):
        form = Form.builder().checkbox("ok", "OK").checked().required().done().build()
        fld = form.field("ok")
        assert isinstance(fld, Checkbox)
        assert fld.value() is True
        assert fld.required

    def test_prebuilt_field(self):
        fld = TextInput("x", "X")
        form = Form.builder().field(fld).build()
        assert form.fields == (fld,)

    def test_title_and_style(self):
        style = FormStyle.light()
        form = Form.builder().title("Hello").style(style).build()
        assert form.title == "Hello"
        assert form.style is style

    def test_default_style(self):
        assert Form.builder().build().style == FormStyle.dark()

    def test_duplicate_ids_rejected(self):
        builder = Form.builder().text("a", "A").done().checkbox("a", "Again").done()
        with pytest.raises(ValueError, match="duplicado"):
            builder.build()

    def test_field_list_is_fixed(self):
        form = Form.builder().text("a", "A").done().build()
        with pytest.raises(AttributeError):
            form.fields.append(TextInput("b", "B"))
