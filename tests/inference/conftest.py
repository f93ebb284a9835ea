"""Fixtures for the inference layer: a scripted Gemini endpoint and a sleep recorder."""

import json
from typing import Dict, List, Tuple, Union

import httpx
import pytest

from inference import GeminiClient, HttpTransport


class SleepRecorder:
    """Stands in for asyncio.sleep; records requested waits in seconds."""

    def __init__(self):
        self.delays: List[float] = []

    async def __call__(self, seconds: float) -> None:
        self.delays.append(seconds)


Step = Union[httpx.Response, Exception]


class FakeGemini:
    """
    Scripted Gemini REST endpoint served through httpx.MockTransport.

    catalogs:  version -> list of model dicts | status int | Exception
    scripts:   (version, model) -> list of steps; steps are consumed in order
               and the last one repeats. Unscripted models answer 404.
    """

    def __init__(self):
        self.catalogs: Dict[str, Union[list, int, Exception]] = {}
        self.scripts: Dict[Tuple[str, str], List[Step]] = {}
        self.requests: List[httpx.Request] = []
        self.sleep = SleepRecorder()

    # ── response builders ────────────────────────────────────

    @staticmethod
    def text(text: str) -> httpx.Response:
        return httpx.Response(
            200, json={"candidates": [{"content": {"role": "model", "parts": [{"text": text}]}}]}
        )

    @staticmethod
    def error(status: int, message: str = "error", status_name: str = "ERROR") -> httpx.Response:
        return httpx.Response(
            status,
            json={"error": {"code": status, "message": message, "status": status_name}},
        )

    # ── transport ────────────────────────────────────────────

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path
        version = path.split("/")[1]

        if request.method == "GET":
            catalog = self.catalogs.get(version, 404)
            if isinstance(catalog, Exception):
                raise catalog
            if isinstance(catalog, int):
                return self.error(catalog, "catalog unavailable")
            return httpx.Response(200, json={"models": catalog})

        model = path.split("/models/", 1)[1].split(":", 1)[0]
        script = self.scripts.get((version, model))
        if not script:
            return self.error(404, f"models/{model} is not found for API version {version}", "NOT_FOUND")
        step = script.pop(0) if len(script) > 1 else script[0]
        if isinstance(step, Exception):
            raise step
        # fresh object per request; the client mutates responses it sends back
        return httpx.Response(step.status_code, content=step.content, headers=step.headers)

    def client(self, **kwargs) -> GeminiClient:
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(self.handler))
        kwargs.setdefault("sleep", self.sleep)
        return GeminiClient(transport=HttpTransport(http_client), **kwargs)

    # ── inspection ───────────────────────────────────────────

    @property
    def listed_versions(self) -> List[str]:
        return [r.url.path.split("/")[1] for r in self.requests if r.method == "GET"]

    @property
    def generate_calls(self) -> List[str]:
        """'version/model' for every generateContent request, in order."""
        calls = []
        for r in self.requests:
            if r.method != "POST":
                continue
            version = r.url.path.split("/")[1]
            model = r.url.path.split("/models/", 1)[1].split(":", 1)[0]
            calls.append(f"{version}/{model}")
        return calls

    def last_payload(self) -> dict:
        posts = [r for r in self.requests if r.method == "POST"]
        return json.loads(posts[-1].content)


def model(name: str, methods=None) -> dict:
    entry = {"name": f"models/{name}", "displayName": name}
    if methods is not None:
        entry["supportedGenerationMethods"] = methods
    return entry


@pytest.fixture
def fake_gemini() -> FakeGemini:
    return FakeGemini()


@pytest.fixture
def sleep_recorder() -> SleepRecorder:
    return SleepRecorder()


@pytest.fixture
def catalog_entry():
    """Factory for ListModels entries: catalog_entry("gemini-2.0-flash", ["generateContent"])."""
    return model
