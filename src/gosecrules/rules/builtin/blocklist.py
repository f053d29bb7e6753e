"""Import blocklist checks (G5xx)."""

from gosecrules.rules.models import BuilderRef, RuleDefinition

IMPORT_MD5 = RuleDefinition(
    id="G501",
    description="Import blocklist: crypto/md5",
    create=BuilderRef("blocklisted_import_md5"),
)

IMPORT_DES = RuleDefinition(
    id="G502",
    description="Import blocklist: crypto/des",
    create=BuilderRef("blocklisted_import_des"),
)

IMPORT_RC4 = RuleDefinition(
    id="G503",
    description="Import blocklist: crypto/rc4",
    create=BuilderRef("blocklisted_import_rc4"),
)

IMPORT_CGI = RuleDefinition(
    id="G504",
    description="Import blocklist: net/http/cgi",
    create=BuilderRef("blocklisted_import_cgi"),
)

IMPORT_SHA1 = RuleDefinition(
    id="G505",
    description="Import blocklist: crypto/sha1",
    create=BuilderRef("blocklisted_import_sha1"),
)

IMPORT_MD4 = RuleDefinition(
    id="G506",
    description="Import blocklist: golang.org/x/crypto/md4",
    create=BuilderRef("blocklisted_import_md4"),
)

IMPORT_RIPEMD160 = RuleDefinition(
    id="G507",
    description="Import blocklist: golang.org/x/crypto/ripemd160",
    create=BuilderRef("blocklisted_import_ripemd160"),
)

ALL_BLOCKLIST_RULES = (
    IMPORT_MD5,
    IMPORT_DES,
    IMPORT_RC4,
    IMPORT_CGI,
    IMPORT_SHA1,
    IMPORT_MD4,
    IMPORT_RIPEMD160,
)
