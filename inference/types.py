from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Literal, Optional

from pydantic import BaseModel, Field, field_validator


OutcomeStatus = Literal["success", "retryable_failure", "fatal_failure"]

# Gemini and proxy hiccups that tend to clear up on their own
RETRYABLE_STATUSES = frozenset({429, 500, 502, 503, 504})

GENERATE_CONTENT = "generateContent"
_MODEL_PREFIX = "models/"


class ApiVersion(str, Enum):
    """Gemini endpoint namespaces, in preference order."""

    PRIMARY = "v1beta"
    SECONDARY = "v1"


class Capability(str, Enum):
    CAPABLE = "capable"
    INCAPABLE = "incapable"
    UNKNOWN = "unknown"


def bare_model_name(name: str) -> str:
    """Strip the "models/" namespace prefix from a catalog name."""
    if name.startswith(_MODEL_PREFIX):
        return name[len(_MODEL_PREFIX):]
    return name


class ModelDescriptor(BaseModel):
    """One entry of a ListModels response."""

    name: Optional[Any] = None
    supported_operations: Optional[List[str]] = Field(
        default=None, alias="supportedGenerationMethods"
    )

    class Config:
        populate_by_name = True

    @field_validator("supported_operations", mode="before")
    @classmethod
    def _operations_list(cls, value):
        # A non-list says nothing about the model
        if not isinstance(value, list):
            return None
        return [str(op) for op in value]

    @property
    def bare_name(self) -> str:
        if not isinstance(self.name, str):
            return ""
        return bare_model_name(self.name).strip()

    @property
    def capability(self) -> Capability:
        # A missing or empty list says nothing about the model
        if not self.supported_operations:
            return Capability.UNKNOWN
        if GENERATE_CONTENT in self.supported_operations:
            return Capability.CAPABLE
        return Capability.INCAPABLE

    @property
    def may_generate(self) -> bool:
        return self.capability is not Capability.INCAPABLE


class ModelCatalog(BaseModel):
    """ListModels body. Entries stay raw so one bad entry cannot sink the rest."""

    models: List[Any] = Field(default_factory=list)

    @field_validator("models", mode="before")
    @classmethod
    def _null_models(cls, value):
        return [] if value is None else value


class _Part(BaseModel):
    text: Optional[str] = None


class _Content(BaseModel):
    parts: List[_Part] = Field(default_factory=list)


class _Candidate(BaseModel):
    content: Optional[_Content] = None


class GenerateContentResponse(BaseModel):
    """The slice of a generateContent response that carries the text."""

    candidates: List[_Candidate] = Field(default_factory=list)

    def first_text(self) -> Optional[str]:
        if not self.candidates:
            return None
        content = self.candidates[0].content
        if content is None or not content.parts:
            return None
        return content.parts[0].text


@dataclass
class GenerationRequest:
    prompt: str
    api_key: str = field(repr=False)

    def to_payload(self) -> dict:
        return {
            "contents": [
                {
                    "role": "user",
                    "parts": [{"text": self.prompt}],
                }
            ]
        }


@dataclass
class GenerationResult:
    version: ApiVersion
    model: str
    text: str

    def __post_init__(self):
        if not isinstance(self.text, str) or not self.text.strip():
            raise ValueError("GenerationResult.text must not be empty")


@dataclass
class HttpResponse:
    """Status and body of one HTTP exchange, whatever the status."""

    status_code: int
    raw_body: str

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


@dataclass
class CallOutcome:
    status: OutcomeStatus
    status_code: Optional[int] = None
    raw_body: str = ""
    error: Optional[BaseException] = None

    @classmethod
    def from_response(cls, response: HttpResponse) -> "CallOutcome":
        if response.ok:
            status: OutcomeStatus = "success"
        elif response.status_code in RETRYABLE_STATUSES:
            status = "retryable_failure"
        else:
            status = "fatal_failure"
        return cls(
            status=status,
            status_code=response.status_code,
            raw_body=response.raw_body,
        )

    @classmethod
    def from_transport_error(cls, error: BaseException) -> "CallOutcome":
        # Timeouts and network failures are always worth another attempt
        return cls(status="retryable_failure", error=error)

    @property
    def retryable(self) -> bool:
        return self.status == "retryable_failure"
