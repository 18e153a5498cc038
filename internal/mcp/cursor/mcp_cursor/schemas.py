"""Pydantic schemas for Cursor API payloads.

Wire keys are camelCase; attributes are snake_case with camelCase aliases.
Unknown keys in responses are ignored.
"""

from typing import Annotated, Literal
from urllib.parse import urlparse

from pydantic import AfterValidator, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


def _check_url(value: str) -> str:
    parsed = urlparse(value)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ValueError(f"Invalid URL: {value!r}")
    return value


Url = Annotated[str, AfterValidator(_check_url)]
Email = Annotated[str, Field(pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$")]


class CursorModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_wire(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


# Requests


class ImageDimension(CursorModel):
    width: int = Field(ge=1)
    height: int = Field(ge=1)


class Image(CursorModel):
    data: str = Field(min_length=1, description="Base64 encoded image data")
    dimension: ImageDimension | None = None


class Prompt(CursorModel):
    text: str = Field(min_length=1, description="The instruction text")
    images: list[Image] | None = Field(
        default=None,
        max_length=5,
        description="Optional array of base64 encoded images (max 5)",
    )


class Source(CursorModel):
    repository: str = Field(min_length=1, description="The GitHub repository URL")
    ref: str | None = Field(
        default=None, description="Git ref (branch/tag) to use as the base branch"
    )


class Target(CursorModel):
    auto_create_pr: bool | None = Field(
        default=None,
        description="Whether to automatically create a pull request when the agent completes",
    )
    branch_name: str | None = Field(
        default=None, description="Custom branch name for the agent to create"
    )


class Webhook(CursorModel):
    url: Url = Field(max_length=2048, description="URL to receive webhook notifications")
    secret: str = Field(
        min_length=32,
        max_length=256,
        description="Secret key for webhook payload verification",
    )


class LaunchAgentRequest(CursorModel):
    prompt: Prompt
    model: str | None = None
    source: Source
    target: Target | None = None
    webhook: Webhook | None = None


class FollowupRequest(CursorModel):
    prompt: Prompt


# Responses

AgentStatus = Literal["CREATING", "RUNNING", "FINISHED", "ERROR", "EXPIRED"]


class AgentSource(CursorModel):
    repository: str
    ref: str | None = None


class AgentTarget(CursorModel):
    branch_name: str | None = None
    url: str
    pr_url: str | None = None
    auto_create_pr: bool | None = None


class Agent(CursorModel):
    id: str
    name: str
    status: AgentStatus
    source: AgentSource
    target: AgentTarget
    summary: str | None = None
    created_at: str


class AgentList(CursorModel):
    agents: list[Agent]
    next_cursor: str | None = None


class AgentId(CursorModel):
    id: str


class ConversationMessage(CursorModel):
    id: str
    type: Literal["user_message", "assistant_message"]
    text: str


class Conversation(CursorModel):
    id: str
    messages: list[ConversationMessage]


class ApiKeyInfo(CursorModel):
    api_key_name: str
    created_at: str
    user_email: Email | None = None


class Models(CursorModel):
    models: list[str]


class Repository(CursorModel):
    model_config = ConfigDict(frozen=True)

    owner: str
    name: str
    repository: Url


class Repositories(CursorModel):
    repositories: list[Repository]


class ErrorBody(CursorModel):
    message: str
    code: str | None = None


class ErrorResponse(CursorModel):
    error: ErrorBody
