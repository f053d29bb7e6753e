"""Cryptography checks (G4xx)."""

from gosecrules.rules.models import BuilderRef, RuleDefinition

WEAK_HASH = RuleDefinition(
    id="G401",
    description="Detect the usage of MD5 or SHA1",
    create=BuilderRef("uses_weak_cryptography_hash"),
)

BAD_TLS_SETTINGS = RuleDefinition(
    id="G402",
    description="Look for bad TLS connection settings",
    create=BuilderRef("intermediate_tls_check"),
)

WEAK_RSA_KEY = RuleDefinition(
    id="G403",
    description="Ensure minimum RSA key length of 2048 bits",
    create=BuilderRef("weak_key_strength"),
)

WEAK_RANDOM = RuleDefinition(
    id="G404",
    description="Insecure random number source (rand)",
    create=BuilderRef("weak_rand_check"),
)

WEAK_CIPHER = RuleDefinition(
    id="G405",
    description="Detect the usage of DES or RC4",
    create=BuilderRef("uses_weak_cryptography_encryption"),
)

DEPRECATED_HASH = RuleDefinition(
    id="G406",
    description="Detect the usage of deprecated MD4 or RIPEMD160",
    create=BuilderRef("uses_weak_deprecated_cryptography_hash"),
)

ALL_CRYPTO_RULES = (
    WEAK_HASH,
    BAD_TLS_SETTINGS,
    WEAK_RSA_KEY,
    WEAK_RANDOM,
    WEAK_CIPHER,
    DEPRECATED_HASH,
)
