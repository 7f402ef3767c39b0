"""Generator: turns a GeneratorConfig into pooled Agent identities."""

import logging
import random
from collections.abc import Iterator
from contextlib import contextmanager

from guise._agent import Agent, AgentPool
from guise._bots import eligible_bots
from guise._config import GeneratorConfig
from guise._errors import GuiseError, NoBotProfile
from guise._h2 import chromium_settings, jitter_settings
from guise._headers import build_headers
from guise._options import FingerprintProfile
from guise._ordering import (
    ordered_keys,
    priority_order,
    resolve_strategy,
    shuffled_priority_order,
)
from guise._resolver import resolve
from guise._tls import synthesize_client_hello
from guise._useragent import compose_user_agent

logger = logging.getLogger("guise")


class Generator:
    """Produces self-consistent synthetic client identities.

    Usage::

        gen = Generator(browsers=["chrome"], os=["windows"])
        with gen.lease() as agent:
            client = rnet.Client(**agent.client_kwargs())

    Agents from ``generate()`` should be handed back with ``release()``
    once the caller is done with them; released agents are cleared and
    recycled.
    """

    def __init__(self, config: GeneratorConfig | None = None, **options):
        if config is None:
            config = GeneratorConfig(**options)
        elif options:
            config = config.with_options(**options)
        self.config = config
        self._pool = AgentPool(config.pool_size)
        logger.debug(
            "Generator created: browsers=%s os=%s fingerprint=%s bot_mode=%s",
            [b.value for b in config.browsers],
            [o.value for o in config.os],
            config.fingerprint.value,
            config.bot_mode,
        )

    # -- public API ---------------------------------------------------------

    def generate(self) -> Agent:
        """Generate one identity, or raise a GuiseError subclass."""
        agent = self._pool.acquire()
        try:
            if self.config.bot_mode:
                self._fill_bot(agent)
            else:
                self._fill_browser(agent)
        except GuiseError:
            self._pool.release(agent)
            raise
        return agent

    def release(self, agent: Agent | None) -> None:
        """Return an agent to the pool. ``None`` is ignored."""
        self._pool.release(agent)

    @contextmanager
    def lease(self) -> Iterator[Agent]:
        """Generate an agent and release it when the block exits."""
        agent = self.generate()
        try:
            yield agent
        finally:
            self.release(agent)

    # -- internals ----------------------------------------------------------

    def _strategy(self):
        if self.config.fingerprint is FingerprintProfile.MAXIMUM:
            return shuffled_priority_order
        return resolve_strategy(self.config.header_order)

    def _fill_browser(self, agent: Agent) -> None:
        config = self.config
        res = resolve(config)

        user_agent = compose_user_agent(
            res.browser_profile,
            res.platform_profile,
            res.os_profile,
            res.version,
            res.major,
            res.full_version,
        )
        headers = build_headers(
            res, user_agent, config, random.choice(config.languages)
        )

        agent.user_agent = user_agent
        agent.headers.update(headers)
        agent.header_order.extend(ordered_keys(list(headers), self._strategy()))

        if config.fingerprint is FingerprintProfile.MAXIMUM:
            agent.tls_spec = synthesize_client_hello()
        else:
            agent.tls_identity = res.version.tls

        if config.h2_only:
            agent.h2_settings = jitter_settings(
                res.browser_profile.h2_settings(), config.h2_jitter
            )

        logger.debug(
            "Generated %s %d on %s (%s)",
            res.browser.value,
            res.major,
            res.os.value,
            res.platform.value,
        )

    def _fill_bot(self, agent: Agent) -> None:
        config = self.config
        bots = eligible_bots(config.bot_categories)
        if not bots:
            raise NoBotProfile(config.bot_categories)
        bot = random.choice(bots)

        agent.user_agent = bot.user_agent
        agent.headers["user-agent"] = bot.user_agent
        agent.headers.update(bot.headers)
        agent.header_order.extend(ordered_keys(list(agent.headers), priority_order))
        agent.tls_identity = bot.tls
        if config.h2_only:
            agent.h2_settings = chromium_settings()

        logger.debug("Generated bot identity: %s", bot.user_agent)
