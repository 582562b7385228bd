"""Unit tests for vestigia.domain.links.settings."""

from __future__ import annotations

from unittest.mock import patch

import pytest
from pydantic import ValidationError

from vestigia.domain.links.settings import LinkDeletionSettings, get_link_deletion_settings


@pytest.mark.unit
class TestLinkDeletionSettings:
    def test_defaults(self) -> None:
        with patch.dict("os.environ", {}, clear=True):
            settings = LinkDeletionSettings(_env_file=None)  # type: ignore[call-arg]
            assert settings.batch_size == 1
            assert settings.retry_delay_seconds == 2

    def test_env_var_override(self) -> None:
        env = {"LINK_DELETION_BATCH_SIZE": "50", "LINK_DELETION_RETRY_DELAY_SECONDS": "30"}
        with patch.dict("os.environ", env, clear=True):
            settings = LinkDeletionSettings(_env_file=None)  # type: ignore[call-arg]
            assert settings.batch_size == 50
            assert settings.retry_delay_seconds == 30

    @pytest.mark.parametrize("batch_size", [0, 1001])
    def test_batch_size_bounds(self, batch_size: int) -> None:
        with pytest.raises(ValidationError):
            LinkDeletionSettings(batch_size=batch_size, _env_file=None)  # type: ignore[call-arg]

    def test_retry_delay_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            LinkDeletionSettings(retry_delay_seconds=0, _env_file=None)  # type: ignore[call-arg]

    def test_retry_delay_documented_as_minimum(self) -> None:
        description = LinkDeletionSettings.model_fields["retry_delay_seconds"].description
        assert description is not None
        assert description.startswith("Minimum delay")
        assert "minute granularity" in description

    def test_cached_accessor(self) -> None:
        get_link_deletion_settings.cache_clear()
        with patch.dict("os.environ", {}, clear=True):
            assert get_link_deletion_settings() is get_link_deletion_settings()
        get_link_deletion_settings.cache_clear()
