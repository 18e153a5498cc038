"""Tests for request payload constraints."""

import pytest
from pydantic import ValidationError

from mcp_cursor.schemas import ApiKeyInfo, Image, LaunchAgentRequest, Prompt, Webhook


def test_prompt_accepts_up_to_five_images():
    images = [Image(data="aGVsbG8=") for _ in range(5)]

    assert len(Prompt(text="Fix the bug", images=images).images) == 5

    with pytest.raises(ValidationError):
        Prompt(text="Fix the bug", images=images + [Image(data="aGVsbG8=")])


def test_prompt_text_must_not_be_empty():
    with pytest.raises(ValidationError):
        Prompt(text="")


def test_image_dimension_must_be_positive():
    with pytest.raises(ValidationError):
        Image(data="aGVsbG8=", dimension={"width": 0, "height": 10})


@pytest.mark.parametrize(
    "url,secret",
    [
        ("not-a-url", "s" * 32),
        ("https://example.com/hook", "too-short"),
        ("https://example.com/hook", "s" * 257),
    ],
)
def test_webhook_constraints(url, secret):
    with pytest.raises(ValidationError):
        Webhook(url=url, secret=secret)


def test_launch_request_accepts_camel_case_wire_keys():
    request = LaunchAgentRequest.model_validate(
        {
            "prompt": {"text": "Add a README"},
            "source": {"repository": "https://github.com/acme/widgets"},
            "target": {"autoCreatePr": True},
            "webhook": {"url": "https://example.com/hook", "secret": "s" * 32},
        }
    )

    assert request.target.auto_create_pr is True
    assert request.to_wire()["webhook"] == {
        "url": "https://example.com/hook",
        "secret": "s" * 32,
    }


def test_user_email_must_look_like_an_email():
    with pytest.raises(ValidationError):
        ApiKeyInfo(api_key_name="ci", created_at="2024-01-15", user_email="nobody")
