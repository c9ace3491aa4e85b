"""Tests for environment settings."""

from pingsync.core.settings import DEFAULT_API_URL, EnvSettings


class TestEnvSettings:
    """Test PINGSYNC_ environment overrides."""

    def test_defaults(self, monkeypatch, tmp_path):
        """Without overrides, the public Pingdom API is used."""
        monkeypatch.chdir(tmp_path)
        monkeypatch.delenv("PINGSYNC_API_URL", raising=False)
        monkeypatch.delenv("PINGSYNC_API_TOKEN", raising=False)

        env = EnvSettings(_env_file=None)

        assert env.api_url == DEFAULT_API_URL
        assert env.api_token == ""
        assert env.request_timeout == 30.0
        assert env.log_level == "INFO"

    def test_environment_overrides(self, monkeypatch):
        """PINGSYNC_* variables override defaults."""
        monkeypatch.setenv("PINGSYNC_API_TOKEN", "secret")
        monkeypatch.setenv("PINGSYNC_REQUEST_TIMEOUT", "5")

        env = EnvSettings(_env_file=None)

        assert env.api_token == "secret"
        assert env.request_timeout == 5.0

    def test_concurrency_is_not_configurable(self, monkeypatch):
        """The Pingdom call limit cannot be changed from the environment."""
        monkeypatch.setenv("PINGSYNC_CONCURRENCY", "0")

        env = EnvSettings(_env_file=None)

        assert not hasattr(env, "concurrency")
