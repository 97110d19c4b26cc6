"""Tests for ccstatusline.utils.model_context."""

import pytest

from ccstatusline.utils.model_context import (
    DEFAULT_CONTEXT,
    EXTENDED_CONTEXT,
    get_context_config,
)


@pytest.mark.parametrize("model_id", [
    "claude-sonnet-4-5-20250929[1m]",
    "us.anthropic.claude-sonnet-4-5-20250929-v1:0[1m]",
    "claude-sonnet-4-5-20250929[1M]",
    "claude-opus-4-6-20260101[1m]",
    "us.anthropic.claude-sonnet-4-6-v1:0[1m]",
    "some-future-model-id[1m]",
])
def test_long_context_marker(model_id):
    """The [1m] marker selects the 1M tier for any model family, in any case."""
    config = get_context_config(model_id)
    assert config.max_tokens == 1_000_000
    assert config.usable_tokens == 800_000


@pytest.mark.parametrize("model_id", [
    "claude-sonnet-4-5-20250929",
    "us.anthropic.claude-sonnet-4-5-20250929-v1:0",
    "claude-3-5-sonnet-20241022",
    "claude-unknown-model",
    "claude-sonnet-4-5-1m",
    "",
    None,
])
def test_default_tier(model_id):
    """Anything without the exact marker, including a bare 1m suffix, gets 200k."""
    config = get_context_config(model_id)
    assert config.max_tokens == 200_000
    assert config.usable_tokens == 160_000


def test_no_argument_uses_default():
    assert get_context_config() == DEFAULT_CONTEXT


def test_usable_is_eighty_percent():
    for config in (DEFAULT_CONTEXT, EXTENDED_CONTEXT):
        assert config.usable_tokens == config.max_tokens * 8 // 10


def test_resolution_is_deterministic():
    model_id = "claude-opus-4-6[1m]"
    assert get_context_config(model_id) == get_context_config(model_id)
