"""Shared pytest fixtures for retail studio tests."""

from io import BytesIO

import pytest
from PIL import Image

from retail_studio.clients.media import MediaDownloadError
from retail_studio.engine.audit import ComplianceOracle
from retail_studio.models import (
    ComplianceReport,
    Element,
    ElementKind,
    ElementSubtype,
    Frame,
    Style,
    get_format,
)


def build_element(
    element_id: str,
    kind: str = "text",
    x: int = 0,
    y: int = 0,
    width: int = 100,
    height: int = 100,
    subtype: str = "none",
    z: int = 10,
    locked: bool = False,
    content: str | None = None,
    **style,
) -> Element:
    return Element(
        id=element_id,
        kind=ElementKind(kind),
        subtype=ElementSubtype(subtype),
        frame=Frame(x, y, width, height),
        content=content,
        locked=locked,
        style=Style(z_index=z, **style),
    )


class StubOracle(ComplianceOracle):
    """Returns a fixed report and records every call."""

    def __init__(self, score: int = 100, issues=None, suggestions=None):
        self.report = ComplianceReport(
            is_compliant=not issues,
            score=score,
            issues=list(issues or []),
            suggestions=list(suggestions or []),
        )
        self.calls: list[tuple[list[str], bool]] = []

    def check_compliance(self, texts, has_alcohol):
        self.calls.append((list(texts), has_alcohol))
        return ComplianceReport(
            is_compliant=self.report.is_compliant,
            score=self.report.score,
            issues=list(self.report.issues),
            suggestions=list(self.report.suggestions),
        )


class FailingOracle(ComplianceOracle):
    def check_compliance(self, texts, has_alcohol):
        raise ConnectionError("service unreachable")


class FakeLLM:
    """Stands in for LLMClient: canned replies, recorded prompts."""

    def __init__(self, reply=None, error: Exception | None = None):
        self.reply = reply
        self.error = error
        self.calls: list[tuple[str, str, str]] = []

    def call(self, system_prompt, user_message, label=""):
        self.calls.append((system_prompt, user_message, label))
        if self.error:
            raise self.error
        return self.reply

    def call_json(self, system_prompt, user_message, label=""):
        return self.call(system_prompt, user_message, label)


class FakeGemini:
    """Stands in for GeminiClient: returns a fixed PNG."""

    def __init__(self, image: bytes | None = None, error: Exception | None = None):
        self.image = image
        self.error = error
        self.calls: list[tuple[str, str]] = []

    def generate_image(self, prompt, aspect_ratio="1:1"):
        self.calls.append((prompt, aspect_ratio))
        if self.error:
            raise self.error
        return self.image


class FakeMedia:
    """Stands in for MediaClient: serves bytes by URL."""

    def __init__(self, files: dict[str, bytes] | None = None):
        self.files = files or {}

    def fetch(self, url):
        if url not in self.files:
            raise MediaDownloadError(f"Failed to download {url}: 404")
        return self.files[url]


def png_bytes(width: int, height: int) -> bytes:
    output = BytesIO()
    Image.new("RGB", (width, height), (255, 255, 255)).save(output, format="PNG")
    return output.getvalue()


@pytest.fixture
def make_element():
    """Return the element factory."""
    return build_element


@pytest.fixture
def square():
    return get_format("sq")


@pytest.fixture
def story():
    return get_format("story")


@pytest.fixture
def landscape():
    return get_format("landscape")


@pytest.fixture
def clean_oracle() -> StubOracle:
    """Oracle that finds nothing wrong with the copy."""
    return StubOracle(score=100)


@pytest.fixture
def make_oracle():
    """Return the stub oracle class."""
    return StubOracle


@pytest.fixture
def failing_oracle() -> FailingOracle:
    return FailingOracle()


@pytest.fixture
def make_png():
    """Return a PNG bytes factory."""
    return png_bytes


@pytest.fixture
def make_llm():
    """Return the fake LLM client class."""
    return FakeLLM


@pytest.fixture
def make_gemini():
    """Return the fake Gemini client class."""
    return FakeGemini


@pytest.fixture
def make_media():
    """Return the fake media client class."""
    return FakeMedia
