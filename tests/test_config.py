from pathlib import Path

import pytest

from allbranding.core.config import (
    DEFAULT_ASSET_REGEX,
    DEFAULT_RELEASES_URL,
    ConfigError,
    QueryConfig,
    default_cache_dir,
    load_config_file,
)


def test_query_config_defaults():
    config = QueryConfig()
    assert config.releases_url == DEFAULT_RELEASES_URL
    assert config.asset_regex == DEFAULT_ASSET_REGEX
    assert config.caching_enabled
    assert config.ignore == ()


def test_query_config_is_immutable():
    config = QueryConfig()
    with pytest.raises(AttributeError):
        config.no_cache = True


def test_default_cache_dir_env_override(monkeypatch, tmp_path):
    monkeypatch.setenv("ALLBRANDING_CACHE_DIR", str(tmp_path))
    assert default_cache_dir() == tmp_path
    assert QueryConfig().resolved_cache_dir() == tmp_path


def test_default_cache_dir_in_tempdir(monkeypatch):
    monkeypatch.delenv("ALLBRANDING_CACHE_DIR", raising=False)
    assert default_cache_dir().name == "allbranding"


def test_explicit_cache_dir(tmp_path):
    assert QueryConfig(cache_dir=tmp_path).resolved_cache_dir() == tmp_path


def test_load_missing_config_file(tmp_path):
    assert load_config_file(tmp_path / "nope.yaml") == {}


def test_load_config_file(tmp_path):
    path = tmp_path / "allbranding.yaml"
    path.write_text(
        "releases-url: https://api.github.com/repos/a/b/releases\n"
        "parse-harder: true\n"
        "ignore: -rc\n"
    )
    assert load_config_file(path) == {
        "releases_url": "https://api.github.com/repos/a/b/releases",
        "parse_harder": True,
        "ignore": ["-rc"],
    }


@pytest.mark.parametrize(
    "content,message",
    [
        ("- a\n- b\n", "must contain a mapping"),
        ("asset-regex: [unclosed\n", "Cannot read config file"),
        ("colour: blue\n", "Unknown keys"),
    ],
)
def test_load_bad_config_file(tmp_path, content, message):
    path = tmp_path / "allbranding.yaml"
    path.write_text(content)
    with pytest.raises(ConfigError, match=message):
        load_config_file(Path(path))
