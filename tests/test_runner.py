"""Tests for the example base and runner."""

import io

import pytest
from werkzeug.datastructures import FileStorage

from dv360_samples.examples.base import (
    BaseExample,
    ExampleRunner,
    ParameterDescriptor,
    RequestContext,
    error_code,
    error_message,
)


class SpyExample(BaseExample):
    """Records every run and the values it saw."""

    def __init__(self, service, parameters=()):
        super().__init__(service)
        self.parameters = tuple(parameters)
        self.runs = []

    @classmethod
    def get_name(cls):
        return "Spy Sample"

    def get_input_parameters(self):
        return self.parameters

    def run(self, ctx):
        self.runs.append(dict(self.form_values))
        return "<p>ran</p>"


URL = ParameterDescriptor("url", "URL", required=True)
CREATIVE = ParameterDescriptor("creative", "Creative", required=True, file=True)
NOTE = ParameterDescriptor("note", "Note")


def _file(name="banner.png", data=b"\x89PNG"):
    return FileStorage(stream=io.BytesIO(data), filename=name)


class TestBaseExample:
    def test_requires_service(self):
        with pytest.raises(ValueError):
            SpyExample(None)

    def test_default_parameters_empty(self):
        class Bare(BaseExample):
            @classmethod
            def get_name(cls):
                return "Bare"

            def run(self, ctx):
                return ""

        assert list(Bare(object()).get_input_parameters()) == []

    def test_name_without_instance(self):
        assert SpyExample.get_name() == "Spy Sample"

    def test_descriptor_defaults(self):
        p = ParameterDescriptor("id", "ID")
        assert p.required is False
        assert p.file is False


class TestExecute:
    def test_no_parameters_runs_without_submit(self):
        example = SpyExample(object())
        out = ExampleRunner(example).execute(RequestContext())

        assert out == "<p>ran</p>"
        assert example.runs == [{}]

    def test_no_parameters_runs_with_any_request(self):
        example = SpyExample(object())
        ctx = RequestContext(form={"submit": "1", "x": "y"}, args={"action": "spy"})
        ExampleRunner(example).execute(ctx)

        assert len(example.runs) == 1

    def test_renders_form_without_submit(self):
        example = SpyExample(object(), [URL])
        out = ExampleRunner(example).execute(RequestContext())

        assert example.runs == []
        assert '<input name="url" value="">' in out
        assert "URL*:" in out
        assert "Enter Spy Sample parameters" in out

    def test_runs_on_complete_submit(self):
        example = SpyExample(object(), [URL])
        ctx = RequestContext(form={"submit": "1", "url": "http://example.com"})
        out = ExampleRunner(example).execute(ctx)

        assert out == "<p>ran</p>"
        assert example.runs == [{"url": "http://example.com"}]
        assert example.form_values == {"url": "http://example.com"}

    def test_missing_required_rerenders_form(self):
        example = SpyExample(object(), [URL, NOTE])
        ctx = RequestContext(form={"submit": "1", "url": "", "note": "keep me"})
        out = ExampleRunner(example).execute(ctx)

        assert example.runs == []
        assert '<input name="note" value="keep me">' in out
        assert example.form_values == {}

    def test_file_not_retained_on_rerender(self):
        example = SpyExample(object(), [URL, CREATIVE])
        ctx = RequestContext(form={"submit": "1"}, files={"creative": _file()})
        out = ExampleRunner(example).execute(ctx)

        assert example.runs == []
        assert '<input name="creative" type="file">' in out

    def test_optional_value_left_out(self):
        example = SpyExample(object(), [URL, NOTE])
        ctx = RequestContext(form={"submit": "1", "url": "u", "note": ""})
        ExampleRunner(example).execute(ctx)

        assert example.runs == [{"url": "u"}]


class TestIsSubmitComplete:
    def test_needs_submit_marker(self):
        runner = ExampleRunner(SpyExample(object(), [NOTE]))
        assert runner.is_submit_complete(RequestContext(form={"note": "x"})) is False
        assert runner.is_submit_complete(RequestContext(form={"submit": ""})) is True

    def test_required_file_missing(self):
        runner = ExampleRunner(SpyExample(object(), [CREATIVE]))
        assert runner.is_submit_complete(RequestContext(form={"submit": "1"})) is False

    def test_required_file_without_filename(self):
        runner = ExampleRunner(SpyExample(object(), [CREATIVE]))
        ctx = RequestContext(form={"submit": "1"}, files={"creative": _file(name="", data=b"")})
        assert runner.is_submit_complete(ctx) is False

    def test_required_file_present(self):
        runner = ExampleRunner(SpyExample(object(), [CREATIVE]))
        ctx = RequestContext(form={"submit": "1"}, files={"creative": _file()})
        assert runner.is_submit_complete(ctx) is True

    def test_text_value_does_not_satisfy_file(self):
        runner = ExampleRunner(SpyExample(object(), [CREATIVE]))
        ctx = RequestContext(form={"submit": "1", "creative": "banner.png"})
        assert runner.is_submit_complete(ctx) is False


class TestGetFormValues:
    def test_collects_text_and_files(self):
        upload = _file()
        runner = ExampleRunner(SpyExample(object(), [URL, CREATIVE, NOTE]))
        ctx = RequestContext(form={"submit": "1", "url": "u"}, files={"creative": upload})

        assert runner.get_form_values(ctx) == {"url": "u", "creative": upload}

    def test_text_under_optional_file_name_is_collected(self):
        optional_file = ParameterDescriptor("creative", "Creative", file=True)
        runner = ExampleRunner(SpyExample(object(), [optional_file]))
        ctx = RequestContext(form={"submit": "1", "creative": "banner.png"})

        assert runner.is_submit_complete(ctx) is True
        assert runner.get_form_values(ctx) == {"creative": "banner.png"}

    def test_ignores_fields_not_declared(self):
        runner = ExampleRunner(SpyExample(object(), [URL]))
        ctx = RequestContext(form={"submit": "1", "url": "u", "other": "x"})

        assert runner.get_form_values(ctx) == {"url": "u"}


class TestRenderInputForm:
    def test_empty_without_parameters(self):
        runner = ExampleRunner(SpyExample(object()))
        assert runner.render_input_form(RequestContext()) == ""

    def test_escapes_prefilled_value(self):
        runner = ExampleRunner(SpyExample(object(), [URL]))
        out = runner.render_input_form(RequestContext(form={"url": '"><script>'}))

        assert "<script>" not in out
        assert "&#34;&gt;&lt;script&gt;" in out

    def test_submit_control(self):
        runner = ExampleRunner(SpyExample(object(), [NOTE]))
        out = runner.render_input_form(RequestContext())

        assert 'enctype="multipart/form-data"' in out
        assert '<input type="submit" name="submit" value="Submit"/>' in out
        assert "Note:" in out


class ApiFailure(Exception):
    def __init__(self, code, message):
        super().__init__(message)
        self.code = code


class FakeResponse:
    status = 403


class FakeHttpError(Exception):
    resp = FakeResponse()
    reason = "The caller does not have permission"


class TestRenderError:
    def test_code_message_and_back_link(self):
        runner = ExampleRunner(SpyExample(object()))
        out = runner.render_error(ApiFailure(404, "Advertiser not found"), RequestContext(args={"action": "get_advertiser"}))

        assert "Error Code: 404" in out
        assert "Exception: Advertiser not found" in out
        assert 'href="?action=get_advertiser"' in out
        assert "Go back to Spy Sample sample" in out

    def test_http_error_shape(self):
        err = FakeHttpError("boom")
        assert error_code(err) == 403
        assert error_message(err) == "The caller does not have permission"

    def test_plain_exception(self):
        err = RuntimeError("broken")
        assert error_code(err) == 0
        assert error_message(err) == "broken"
