import pytest

from firecrawl_bot.config import Settings
from firecrawl_bot.errors import ConfigError


def test_defaults():
    settings = Settings(_env_file=None, DISCORD_TOKEN="t", CLIENT_ID=1)
    assert settings.INLINE_RESPONSE_LIMIT == 1900
    assert settings.FIRECRAWL_DOCS_URL == "https://docs.firecrawl.dev"
    assert settings.DISCORD_GUILD_ID is None
    settings.require_startup()


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("DISCORD_TOKEN", "env-token")
    monkeypatch.setenv("CLIENT_ID", "987654321")
    monkeypatch.setenv("INLINE_RESPONSE_LIMIT", "1000")
    settings = Settings(_env_file=None)
    assert settings.DISCORD_TOKEN == "env-token"
    assert settings.CLIENT_ID == 987654321
    assert settings.INLINE_RESPONSE_LIMIT == 1000


@pytest.mark.parametrize(
    "values, missing",
    [
        ({"DISCORD_TOKEN": None, "CLIENT_ID": None}, ["DISCORD_TOKEN", "CLIENT_ID"]),
        ({"DISCORD_TOKEN": "t", "CLIENT_ID": None}, ["CLIENT_ID"]),
        ({"DISCORD_TOKEN": "", "CLIENT_ID": 1}, ["DISCORD_TOKEN"]),
    ],
)
def test_require_startup_reports_missing(values, missing):
    settings = Settings(_env_file=None, **values)
    with pytest.raises(ConfigError) as exc:
        settings.require_startup()
    assert exc.value.details["missing"] == missing
    for name in missing:
        assert name in exc.value.message
