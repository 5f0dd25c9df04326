"""Unit tests for logging configuration."""

from app.utils.logging import REDACTED, redact_credentials


class TestRedactCredentials:
    """Tests for the credential-masking processor."""

    def test_masks_credential_keys(self):
        event = redact_credentials(
            None,
            "info",
            {
                "event": "tool.started",
                "github_token": "gh_secret",
                "Authorization": "Bearer gh:vc",
                "platform_token": "vc_secret",
            },
        )

        assert event["github_token"] == REDACTED
        assert event["Authorization"] == REDACTED
        assert event["platform_token"] == REDACTED

    def test_keeps_other_keys(self):
        event = redact_credentials(
            None,
            "info",
            {"event": "token refresh", "tool": "deployRepo", "project": "acme-site"},
        )

        assert event == {
            "event": "token refresh",
            "tool": "deployRepo",
            "project": "acme-site",
        }
