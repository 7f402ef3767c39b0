"""Generated client identity record and the pool that recycles it."""

import threading
from dataclasses import dataclass, field

from guise._h2 import H2Setting, http2_options
from guise._ordering import PSEUDO_HEADERS
from guise._tls import ClientHelloSpec, TlsIdentity


@dataclass
class Agent:
    """One synthetic HTTP client identity.

    ``headers`` is unordered; ``header_order`` holds the pseudo headers
    followed by the real header names in wire order. At most one of
    ``tls_identity`` / ``tls_spec`` is set.
    """

    user_agent: str = ""
    headers: dict[str, str] = field(default_factory=dict)
    header_order: list[str] = field(default_factory=list)
    tls_identity: TlsIdentity | None = None
    tls_spec: ClientHelloSpec | None = None
    h2_settings: dict[H2Setting, int] | None = None

    def clear(self) -> None:
        """Reset every field. Header entries are deleted in place."""
        self.user_agent = ""
        self.headers.clear()
        self.header_order.clear()
        self.tls_identity = None
        self.tls_spec = None
        self.h2_settings = None

    def ordered_headers(self) -> dict[str, str]:
        """Real headers as a dict whose iteration order is the wire order."""
        ordered = {}
        for name in self.header_order:
            if name in PSEUDO_HEADERS:
                continue
            if name in self.headers:
                ordered[name] = self.headers[name]
        return ordered

    def client_kwargs(self) -> dict:
        """Keyword arguments for ``rnet.Client``.

        A static identity maps to ``emulation`` alone: the emulation
        preset carries its own HTTP/2 SETTINGS, so ``h2_settings`` (and any
        jitter applied to it) is informational on that path. A synthesized
        handshake maps to ``tls_options`` plus ``http2_options`` (when an
        HTTP/2 table is present), which is where ``h2_settings`` reaches
        the wire.
        """
        if self.tls_spec is not None:
            kwargs = {
                "tls_options": self.tls_spec.tls_options(),
                "headers": self.ordered_headers(),
            }
            if self.h2_settings is not None:
                kwargs["http2_options"] = http2_options(self.h2_settings)
            return kwargs

        if self.tls_identity is None:
            raise ValueError("Agent has no TLS identity (was it released?)")
        return {
            "emulation": self.tls_identity.emulation,
            "headers": self.ordered_headers(),
        }


class AgentPool:
    """Thread-safe free list of cleared Agent records, bounded at ``max_size``."""

    def __init__(self, max_size: int = 64):
        self.max_size = max_size
        self._free: list[Agent] = []
        self._lock = threading.Lock()

    def acquire(self) -> Agent:
        with self._lock:
            if self._free:
                return self._free.pop()
        return Agent()

    def release(self, agent: Agent | None) -> None:
        if agent is None:
            return
        with self._lock:
            # Releasing twice must not hand the same record to two callers.
            if any(free is agent for free in self._free):
                return
            agent.clear()
            if len(self._free) < self.max_size:
                self._free.append(agent)

    def __len__(self) -> int:
        with self._lock:
            return len(self._free)
