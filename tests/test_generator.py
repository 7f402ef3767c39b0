"""Tests for forward generation, bot mode and agent pooling."""

from unittest.mock import patch

import pytest
from conftest import assert_well_formed, sample

from guise import (
    Agent,
    BOT_CATEGORIES,
    ClientHelloSpec,
    Generator,
    GeneratorConfig,
    H2Setting,
    NoBotProfile,
    NoCompatiblePlatform,
    TlsIdentity,
)
from guise._h2 import chromium_settings, gecko_settings
from guise._options import Browser, FingerprintProfile, HeaderOrder
from guise._ordering import priority_order
from guise._profiles import BROWSERS

CLIENT_HINTS = ("sec-ch-ua", "sec-ch-ua-mobile", "sec-ch-ua-platform")


class TestDefaults:
    def test_well_formed(self):
        for agent in sample(100):
            assert_well_formed(agent)
            assert isinstance(agent.tls_identity, TlsIdentity)
            assert agent.h2_settings is not None

    def test_priority_order_by_default(self):
        for agent in sample(20):
            assert agent.header_order[4:] == priority_order(list(agent.headers))

    def test_accept_on_encoding_off(self):
        for agent in sample(20):
            assert "accept" in agent.headers
            assert "accept-encoding" not in agent.headers
            assert "accept-language" in agent.headers

    def test_navigate_fetch_metadata(self):
        for agent in sample(20):
            assert agent.headers["sec-fetch-mode"] == "navigate"
            assert agent.headers["upgrade-insecure-requests"] == "1"


class TestBrowserConsistency:
    def test_chrome_windows11(self):
        for agent in sample(20, browsers=["chrome"], os=["windows11"]):
            assert "Windows NT 10.0" in agent.user_agent
            assert agent.headers["sec-ch-ua-platform"] == '"Windows"'
            assert agent.headers["sec-ch-ua-mobile"] == "?0"
            assert '"Google Chrome"' in agent.headers["sec-ch-ua"]
            assert str(agent.tls_identity).startswith("Chrome")
            assert agent.h2_settings == chromium_settings()

    def test_tls_identity_matches_version(self):
        for agent in sample(20, browsers=["edge"]):
            major = int(agent.user_agent.rsplit("Edg/", 1)[1])
            assert agent.tls_identity == BROWSERS[Browser.EDGE].versions[major].tls

    def test_firefox_has_no_client_hints(self):
        for agent in sample(20, browsers=["firefox"]):
            assert "Firefox/" in agent.user_agent
            assert not any(h in agent.headers for h in CLIENT_HINTS)
            assert agent.h2_settings == gecko_settings()

    def test_safari_only_on_apple(self):
        for agent in sample(30, browsers=["safari"]):
            assert "iPhone" in agent.user_agent or "Macintosh" in agent.user_agent

    def test_mobile_hint(self):
        for agent in sample(20, browsers=["chrome"], platforms=["mobile"]):
            assert agent.headers["sec-ch-ua-mobile"] == "?1"
            assert "Mobile Safari/537.36" in agent.user_agent

    def test_brave_navigate_sec_gpc(self):
        for agent in sample(10, browsers=["brave"]):
            assert agent.headers["sec-gpc"] == "1"

    def test_brave_xhr_no_sec_gpc(self):
        for agent in sample(10, browsers=["brave"], request_type="xhr"):
            assert "sec-gpc" not in agent.headers
            assert agent.headers["accept"] == "*/*"

    def test_version_range(self):
        for agent in sample(30, browsers=["chrome"], min_version=130, max_version=136):
            major = int(agent.user_agent.split("Chrome/")[1].split(".")[0])
            assert 130 <= major <= 136

    def test_single_concrete_configuration(self):
        for agent in sample(
            20,
            browsers=["chrome"],
            min_version=120,
            max_version=120,
            os=["windows11"],
            platforms=["desktop"],
        ):
            assert "Chrome/120." in agent.user_agent
            assert "Windows NT 10.0" in agent.user_agent
            assert isinstance(agent.tls_identity, TlsIdentity)
            assert agent.tls_spec is None


class TestToggles:
    def test_accept_disabled(self):
        for agent in sample(10, accept=False):
            assert "accept" not in agent.headers

    def test_accept_encoding_enabled(self):
        for agent in sample(10, accept_encoding=True):
            assert "gzip" in agent.headers["accept-encoding"]

    def test_full_fingerprint(self):
        for agent in sample(
            10, browsers=["chrome"], os=["windows"], full_fingerprint=True
        ):
            assert agent.headers["sec-ch-ua-platform-version"] == '"10.0.0"'
            assert agent.headers["sec-ch-ua-arch"] == '"x86"'
            assert agent.headers["sec-ch-ua-bitness"] == '"64"'
            full = agent.user_agent.split("Chrome/")[1].split(" ")[0]
            assert f'"Google Chrome";v="{full}"' in agent.headers["sec-ch-ua-full-version-list"]

    def test_full_fingerprint_ios_has_no_arch(self):
        for agent in sample(
            10, browsers=["chrome"], os=["ios"], full_fingerprint=True
        ):
            assert "sec-ch-ua-arch" not in agent.headers
            assert agent.headers["sec-ch-ua-platform-version"] == '"17.5.1"'

    def test_h2_only_off(self):
        for agent in sample(10, h2_only=False):
            assert agent.h2_settings is None

    def test_h2_jitter_maximum(self):
        for agent in sample(10, h2_jitter="maximum"):
            assert agent.h2_settings[H2Setting.ENABLE_PUSH] == 0

    def test_custom_header_order(self):
        for agent in sample(5, header_order=sorted):
            assert agent.header_order[4:] == sorted(agent.headers)

    def test_random_header_order(self):
        for agent in sample(5, header_order=HeaderOrder.RANDOM):
            assert_well_formed(agent)


class TestFingerprintProfiles:
    def test_maximum_synthesizes_tls(self):
        for agent in sample(10, fingerprint="maximum"):
            assert agent.tls_identity is None
            assert isinstance(agent.tls_spec, ClientHelloSpec)

    def test_maximum_forces_shuffled_priority(self):
        with patch("guise._generator.shuffled_priority_order", wraps=sorted) as strategy:
            gen = Generator(fingerprint=FingerprintProfile.MAXIMUM, header_order="random")
            gen.generate()
        strategy.assert_called_once()

    def test_extreme_drops_only_client_hints(self):
        dropped = kept = 0
        for agent in sample(40, browsers=["chrome"], fingerprint="extreme"):
            assert_well_formed(agent)
            assert agent.headers["sec-fetch-dest"] == "document"
            assert "accept-language" in agent.headers
            for hint in CLIENT_HINTS:
                if hint in agent.headers:
                    kept += 1
                else:
                    dropped += 1
        assert dropped and kept

    def test_extreme_keeps_static_tls(self):
        for agent in sample(10, fingerprint="extreme"):
            assert isinstance(agent.tls_identity, TlsIdentity)
            assert agent.tls_spec is None

    def test_extreme_keeps_configured_order(self):
        for agent in sample(5, fingerprint="extreme", header_order=sorted):
            assert agent.header_order[4:] == sorted(agent.headers)


class TestBotMode:
    def test_category(self):
        google = {bot.user_agent for bot in BOT_CATEGORIES["GoogleBot"]}
        for agent in sample(30, bot_mode=True, bot_categories=["GoogleBot"]):
            assert agent.user_agent in google
            assert_well_formed(agent)

    def test_headers_verbatim(self):
        bot = BOT_CATEGORIES["ClaudeBot"][0]
        (agent,) = sample(1, bot_mode=True, bot_categories="ClaudeBot", accept_encoding=True)
        assert agent.headers == {"user-agent": bot.user_agent, **bot.headers}
        assert agent.tls_identity == bot.tls
        assert agent.header_order[4:] == priority_order(list(agent.headers))
        assert agent.h2_settings == chromium_settings()

    def test_h2_only_off(self):
        (agent,) = sample(1, bot_mode=True, h2_only=False)
        assert agent.h2_settings is None

    def test_unknown_category(self):
        gen = Generator(bot_mode=True, bot_categories=["NotABot"])
        with pytest.raises(NoBotProfile) as exc_info:
            gen.generate()
        assert exc_info.value.categories == ("NotABot",)


class TestPooling:
    def test_release_clears_in_place(self):
        gen = Generator()
        agent = gen.generate()
        headers = agent.headers
        gen.release(agent)
        assert headers == {}
        assert agent.headers is headers
        assert agent.user_agent == ""
        assert agent.header_order == []
        assert agent.tls_identity is None
        assert agent.h2_settings is None

    def test_released_agent_reused(self):
        gen = Generator()
        agent = gen.generate()
        gen.release(agent)
        assert gen.generate() is agent

    def test_double_release_does_not_duplicate(self):
        gen = Generator()
        agent = gen.generate()
        gen.release(agent)
        gen.release(agent)
        assert len(gen._pool) == 1
        first = gen.generate()
        second = gen.generate()
        assert first is not second

    def test_release_none(self):
        Generator().release(None)

    def test_lease(self):
        gen = Generator()
        with gen.lease() as agent:
            assert agent.user_agent
        assert agent.user_agent == ""

    def test_lease_releases_on_error(self):
        gen = Generator()
        with pytest.raises(RuntimeError):
            with gen.lease() as agent:
                raise RuntimeError("boom")
        assert agent.headers == {}

    def test_failed_generation_returns_record(self):
        gen = Generator(browsers=["safari"], platforms=["desktop"], os=["windows"])
        with pytest.raises(NoCompatiblePlatform):
            gen.generate()
        assert len(gen._pool) == 1

    def test_pool_bounded(self):
        gen = Generator(pool_size=2)
        agents = [gen.generate() for _ in range(5)]
        for agent in agents:
            gen.release(agent)
        assert len(gen._pool) == 2


class TestConfig:
    def test_string_coercion(self):
        config = GeneratorConfig(browsers=["chrome", "firefox"], fingerprint="extreme")
        assert config.browsers == (Browser.CHROME, Browser.FIREFOX)
        assert config.fingerprint is FingerprintProfile.EXTREME

    @pytest.mark.parametrize("options", [
        {"browsers": ["netscape"]},
        {"fingerprint": "paranoid"},
        {"h2_jitter": "wild"},
        {"request_type": "websocket"},
        {"header_order": "alphabetical"},
        {"min_version": 130, "max_version": 120},
        {"languages": []},
        {"pool_size": -1},
    ])
    def test_invalid(self, options):
        with pytest.raises(ValueError):
            GeneratorConfig(**options)

    def test_generator_from_config_with_overrides(self):
        base = GeneratorConfig(browsers=["chrome"])
        gen = Generator(base, h2_only=False)
        assert gen.config.browsers == (Browser.CHROME,)
        assert gen.config.h2_only is False
        assert base.h2_only is True

    def test_unknown_option(self):
        with pytest.raises(TypeError):
            GeneratorConfig().with_options(colour="blue")

    def test_frozen(self):
        with pytest.raises(AttributeError):
            GeneratorConfig().h2_only = False


class TestClientKwargs:
    def test_static_identity(self):
        (agent,) = sample(1, browsers=["chrome"])
        with patch("guise._tls.Emulation") as emulation:
            kwargs = agent.client_kwargs()
        assert set(kwargs) == {"emulation", "headers"}
        assert kwargs["emulation"] is getattr(emulation, agent.tls_identity.name)
        assert list(kwargs["headers"]) == agent.header_order[4:]

    def test_static_identity_leaves_h2_to_emulation(self):
        (agent,) = sample(1, browsers=["chrome"], h2_jitter="moderate")
        assert agent.h2_settings is not None
        with patch("guise._tls.Emulation"), \
                patch("guise._agent.http2_options") as h2_options:
            kwargs = agent.client_kwargs()
        assert "http2_options" not in kwargs
        h2_options.assert_not_called()

    def test_synthesized_identity(self):
        (agent,) = sample(1, fingerprint="maximum")
        with patch("guise._tls.TlsOptions") as tls_options, \
                patch("guise._tls.ExtensionType"), \
                patch("guise._agent.http2_options") as h2_options:
            kwargs = agent.client_kwargs()
        assert set(kwargs) == {"tls_options", "http2_options", "headers"}
        assert kwargs["tls_options"] is tls_options.return_value
        h2_options.assert_called_once_with(agent.h2_settings)

    def test_released_agent(self):
        with pytest.raises(ValueError):
            Agent().client_kwargs()
