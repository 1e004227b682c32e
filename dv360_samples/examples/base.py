"""Base example and runner for the sample pages.

Every sample subclasses ``BaseExample`` and declares its inputs with
``ParameterDescriptor``. ``ExampleRunner`` drives one request:
- no parameters: run the example straight away;
- complete submission: collect the values and run;
- otherwise: return the input form (text values are kept, files are not).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Sequence

from dv360_samples.utils.html import render_error, render_form

SUBMIT_FIELD = "submit"


@dataclass(frozen=True)
class ParameterDescriptor:
    name: str
    display: str
    required: bool = False
    file: bool = False


@dataclass(frozen=True)
class RequestContext:
    """POST fields, uploaded files and query args of the current request."""

    form: Mapping[str, str] = field(default_factory=dict)
    files: Mapping[str, Any] = field(default_factory=dict)
    args: Mapping[str, str] = field(default_factory=dict)

    @classmethod
    def from_request(cls, request) -> "RequestContext":
        return cls(
            form=request.form.to_dict(),
            files=request.files.to_dict(),
            args=request.args.to_dict(),
        )

    def text(self, name: str) -> str:
        return self.form.get(name) or ""

    def upload(self, name: str) -> Optional[Any]:
        """Return the uploaded file for ``name``, or None if nothing was chosen.

        Browsers post an empty part for an untouched file input, which
        werkzeug exposes as a ``FileStorage`` with an empty filename.
        """
        f = self.files.get(name)
        if f is None or not getattr(f, "filename", None):
            return None
        return f


class BaseExample(ABC):
    """A single sample exercising one API operation."""

    def __init__(self, service: Any):
        if service is None:
            raise ValueError("An authenticated API service is required.")
        self._service = service
        self.form_values: Dict[str, Any] = {}

    @property
    def service(self) -> Any:
        return self._service

    @classmethod
    @abstractmethod
    def get_name(cls) -> str:
        """Display name, used as the link text on the index page.

        A classmethod so the index can list samples without an API client.
        """

    def get_input_parameters(self) -> Sequence[ParameterDescriptor]:
        """Inputs the sample needs. Samples without inputs run on every request."""
        return ()

    @abstractmethod
    def run(self, ctx: RequestContext) -> str:
        """Call the API and return the result as an HTML fragment."""


class ExampleRunner:
    def __init__(self, example: BaseExample):
        self.example = example

    def execute(self, ctx: RequestContext) -> str:
        """Run the example or return its input form, depending on the submission."""
        if not self.example.get_input_parameters():
            return self.example.run(ctx)
        if self.is_submit_complete(ctx):
            self.example.form_values = self.get_form_values(ctx)
            return self.example.run(ctx)
        return self.render_input_form(ctx)

    def is_submit_complete(self, ctx: RequestContext) -> bool:
        if SUBMIT_FIELD not in ctx.form:
            return False
        for p in self.example.get_input_parameters():
            if not p.required:
                continue
            if p.file:
                if ctx.upload(p.name) is None:
                    return False
            elif not ctx.text(p.name):
                return False
        return True

    def get_form_values(self, ctx: RequestContext) -> Dict[str, Any]:
        values: Dict[str, Any] = {}
        for p in self.example.get_input_parameters():
            upload = ctx.upload(p.name) if p.file else None
            if upload is not None:
                values[p.name] = upload
            elif ctx.text(p.name):
                values[p.name] = ctx.text(p.name)
        return values

    def render_input_form(self, ctx: RequestContext) -> str:
        params = self.example.get_input_parameters()
        if not params:
            return ""
        fields = [
            {
                "name": p.name,
                "display": p.display,
                "required": p.required,
                "file": p.file,
                "value": None if p.file else ctx.text(p.name),
            }
            for p in params
        ]
        return render_form(self.example.get_name(), fields)

    def render_error(self, error: BaseException, ctx: RequestContext) -> str:
        return render_error(
            error_code(error),
            error_message(error),
            ctx.args.get("action"),
            self.example.get_name(),
        )


def error_code(error: BaseException) -> Any:
    """Numeric code of an API error (googleapiclient ``HttpError`` included)."""
    for attr in ("code", "status_code"):
        code = getattr(error, attr, None)
        if code is not None:
            return code
    resp = getattr(error, "resp", None)
    status = getattr(resp, "status", None)
    return status if status is not None else 0


def error_message(error: BaseException) -> str:
    reason = getattr(error, "reason", None)
    if reason:
        return str(reason)
    return str(error)
