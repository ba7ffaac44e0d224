"""Tests for regions and dashboard configuration."""
import dataclasses
from pathlib import Path

import pytest

from leandash.core.api import DEFAULT_ORIGINS, DashboardConfig, Region
from leandash.core.api.config import DEFAULT_USER_AGENT
from leandash.core.cookies import paths
from leandash.core.exceptions import FatalConfigurationError, UnknownRegionError
from leandash.version import __version__


class TestRegion:
    """Test suite for Region."""

    @pytest.mark.parametrize('value,expected', [
        ('cn-n1', Region.CN),
        ('us-w1', Region.US),
        ('cn-e1', Region.TAB),
        (Region.US, Region.US),
    ])
    def test_parse_known(self, value, expected):
        assert Region.parse(value) is expected

    def test_parse_unknown_raises(self):
        with pytest.raises(UnknownRegionError, match='mars-1'):
            Region.parse('mars-1')

    def test_str_is_identifier(self):
        assert str(Region.TAB) == 'cn-e1'


class TestDashboardConfig:
    """Test suite for DashboardConfig."""

    def test_origin_table(self):
        assert dict(DEFAULT_ORIGINS) == {
            Region.CN: 'https://leancloud.cn',
            Region.US: 'https://us.leancloud.cn',
            Region.TAB: 'https://tab.leancloud.cn',
        }

    @pytest.mark.parametrize('region', list(Region))
    def test_origin_for_every_region(self, region):
        config = DashboardConfig.default()

        assert config.origin_for(region) == DEFAULT_ORIGINS[region]
        assert config.origin_for(region.value) == DEFAULT_ORIGINS[region]

    @pytest.mark.parametrize('region', ['mars-1', '', None])
    def test_unknown_region_never_falls_back(self, region):
        config = DashboardConfig.default()

        with pytest.raises(UnknownRegionError) as exc_info:
            config.origin_for(region)

        assert isinstance(exc_info.value, FatalConfigurationError)

    def test_from_env_reads_override(self):
        config = DashboardConfig.from_env({'LEANCLOUD_DASHBOARD': 'http://localhost:3000'})

        assert config.override == 'http://localhost:3000'

    def test_from_env_empty_override_ignored(self):
        config = DashboardConfig.from_env({'LEANCLOUD_DASHBOARD': ''})

        assert config.override is None

    def test_from_env_uses_process_environment(self, monkeypatch):
        monkeypatch.setenv('LEANCLOUD_DASHBOARD', 'https://dash.example.com')

        assert DashboardConfig.from_env().override == 'https://dash.example.com'

    def test_default_ignores_environment(self, monkeypatch):
        monkeypatch.setenv('LEANCLOUD_DASHBOARD', 'https://dash.example.com')

        assert DashboardConfig.default().override is None

    def test_is_immutable(self):
        config = DashboardConfig.default()

        with pytest.raises(dataclasses.FrozenInstanceError):
            config.override = 'https://elsewhere'
        with pytest.raises(TypeError):
            config.origins[Region.CN] = 'https://elsewhere'

    def test_custom_origins_are_frozen(self):
        origins = {Region.CN: 'https://cn.example.com'}
        config = DashboardConfig(origins=origins)
        origins[Region.US] = 'https://us.example.com'

        assert config.origin_for(Region.CN) == 'https://cn.example.com'
        with pytest.raises(UnknownRegionError):
            config.origin_for(Region.US)

    def test_session_headers(self):
        config = DashboardConfig(extra_headers={'X-Trace': '1'})

        headers = config.get_session_headers()

        assert headers['User-Agent'] == DEFAULT_USER_AGENT
        assert DEFAULT_USER_AGENT == f'LeanCloud-CLI/{__version__}'
        assert headers['X-Trace'] == '1'


class TestPaths:
    """Test suite for per-user paths."""

    def test_xdg_config_home(self, monkeypatch, tmp_path):
        monkeypatch.setattr(paths.sys, 'platform', 'linux')
        monkeypatch.setenv('XDG_CONFIG_HOME', str(tmp_path))

        assert paths.default_cookie_path() == tmp_path / 'leancloud' / 'cookies'

    def test_home_fallback(self, monkeypatch, tmp_path):
        monkeypatch.setattr(paths.sys, 'platform', 'linux')
        monkeypatch.delenv('XDG_CONFIG_HOME', raising=False)
        monkeypatch.setattr(paths.Path, 'home', classmethod(lambda cls: Path(tmp_path)))

        assert paths.get_user_config_dir() == tmp_path / '.config'
