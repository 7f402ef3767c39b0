"""TLS identities: static rnet Emulation references and synthesized ClientHellos.

A generated identity carries exactly one of the two:

- TlsIdentity: the name of a canonical ``rnet.Emulation`` profile
  (e.g. ``Chrome120``). Resolved lazily so that the reference tables
  import cleanly against any rnet release.
- ClientHelloSpec: a fully synthesized handshake (cipher order, extension
  order, compression methods) that converts to ``rnet.tls.TlsOptions``.
"""

import logging
import random
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from rnet import Emulation
from rnet.tls import (
    AlpnProtocol,
    CertificateCompressionAlgorithm,
    ExtensionType,
    TlsOptions,
    TlsVersion,
)

from guise._matcher import closest_version

logger = logging.getLogger("guise")


@dataclass(frozen=True)
class TlsIdentity:
    """Reference to a canonical rnet Emulation profile, by attribute name."""

    name: str

    @property
    def emulation(self) -> Emulation:
        try:
            return getattr(Emulation, self.name)
        except AttributeError:
            raise LookupError(
                f"rnet has no Emulation.{self.name}"
            ) from None

    def __str__(self) -> str:
        return self.name


# ---------------------------------------------------------------------------
# Emulation profiles shipped by rnet, keyed by browser major version.
# Browser versions without an exact emulation use the closest older one.
# ---------------------------------------------------------------------------

def _table(prefix: str, versions) -> Mapping[int, TlsIdentity]:
    return MappingProxyType(
        {v: TlsIdentity(f"{prefix}{v}") for v in versions}
    )


CHROME_EMULATIONS = _table(
    "Chrome",
    (
        100, 101, 104, 105, 106, 107, 108, 109, 110, 114, 116, 117, 118,
        119, 120, 123, 124, 126, 127, 128, 129, 130, 131, 132, 133, 134,
        135, 136, 137, 138, 139, 140, 141, 142, 143, 144, 145,
    ),
)
EDGE_EMULATIONS = _table("Edge", (101, 122, 127, 131, 134))
FIREFOX_EMULATIONS = _table("Firefox", (109, 117, 128, 133, 135, 136, 139))
SAFARI_EMULATIONS = MappingProxyType({
    15: TlsIdentity("Safari15_5"),
    16: TlsIdentity("Safari16_5"),
    17: TlsIdentity("Safari17_5"),
    18: TlsIdentity("Safari18"),
})

# Non-browser HTTP stack used by crawlers that do not render pages.
GENERIC_CLIENT = TlsIdentity("OkHttp4_9")


def emulation_for(table: Mapping[int, TlsIdentity], version: int) -> TlsIdentity:
    """Closest emulation not newer than ``version`` (oldest as fallback)."""
    return closest_version(table, version)[1]


# ---------------------------------------------------------------------------
# Synthesized ClientHello
# ---------------------------------------------------------------------------

GREASE_CIPHER = "GREASE"
GREASE_EXTENSION = "grease"
PADDING_EXTENSION = "padding"

_CHROME_CIPHERS = (
    GREASE_CIPHER,
    "TLS_AES_128_GCM_SHA256",
    "TLS_AES_256_GCM_SHA384",
    "TLS_CHACHA20_POLY1305_SHA256",
    "ECDHE-ECDSA-AES128-GCM-SHA256",
    "ECDHE-RSA-AES128-GCM-SHA256",
    "ECDHE-ECDSA-AES256-GCM-SHA384",
    "ECDHE-RSA-AES256-GCM-SHA384",
    "ECDHE-ECDSA-CHACHA20-POLY1305",
    "ECDHE-RSA-CHACHA20-POLY1305",
    "ECDHE-RSA-AES128-SHA",
    "ECDHE-RSA-AES256-SHA",
    "AES128-GCM-SHA256",
    "AES256-GCM-SHA384",
    "AES128-SHA",
    "AES256-SHA",
)

# Names match rnet.tls.ExtensionType members (upper-cased).
_CHROME_EXTENSIONS = (
    "server_name",
    "extended_master_secret",
    "renegotiate",
    "supported_groups",
    "ec_point_formats",
    "session_ticket",
    "application_layer_protocol_negotiation",
    "status_request",
    "signature_algorithms",
    "certificate_timestamp",
    "key_share",
    "psk_key_exchange_modes",
    "supported_versions",
    "cert_compression",
)

_SIGALGS = (
    "ecdsa_secp256r1_sha256:rsa_pss_rsae_sha256:"
    "rsa_pkcs1_sha256:ecdsa_secp384r1_sha384:"
    "rsa_pss_rsae_sha384:rsa_pkcs1_sha384:"
    "rsa_pss_rsae_sha512:rsa_pkcs1_sha512"
)


@dataclass(frozen=True)
class ClientHelloSpec:
    """A synthesized TLS ClientHello layout."""

    cipher_suites: tuple[str, ...]
    extensions: tuple[str, ...]
    compression_methods: tuple[int, ...] = (0,)

    def tls_options(self) -> TlsOptions:
        """Convert to rnet TlsOptions.

        BoringSSL places GREASE values itself, so the GREASE and padding
        sentinels are not part of the cipher list or the permutation.
        """
        ciphers = [c for c in self.cipher_suites if c != GREASE_CIPHER]
        permutation = [
            getattr(ExtensionType, ext.upper())
            for ext in self.extensions
            if ext not in (GREASE_EXTENSION, PADDING_EXTENSION)
        ]
        return TlsOptions(
            cipher_list=":".join(ciphers),
            sigalgs_list=_SIGALGS,
            curves_list="X25519:P-256:P-384",
            min_tls_version=TlsVersion.TLS_1_2,
            max_tls_version=TlsVersion.TLS_1_3,
            alpn_protocols=[AlpnProtocol.HTTP2, AlpnProtocol.HTTP1],
            certificate_compression_algorithms=[
                CertificateCompressionAlgorithm.BROTLI,
            ],
            enable_ocsp_stapling=True,
            enable_signed_cert_timestamps=True,
            grease_enabled=True,
            permute_extensions=False,
            extension_permutation=permutation,
        )


def synthesize_client_hello() -> ClientHelloSpec:
    """Build a Chrome-shaped ClientHello with shuffled ciphers and extensions.

    The GREASE cipher is always present; only its position moves.
    Extensions are framed as [grease, *shuffled, grease, padding].
    """
    ciphers = list(_CHROME_CIPHERS)
    random.shuffle(ciphers)

    extensions = list(_CHROME_EXTENSIONS)
    random.shuffle(extensions)

    spec = ClientHelloSpec(
        cipher_suites=tuple(ciphers),
        extensions=(
            GREASE_EXTENSION,
            *extensions,
            GREASE_EXTENSION,
            PADDING_EXTENSION,
        ),
    )
    logger.debug("Synthesized ClientHello: ciphers=%s", ",".join(ciphers))
    return spec
