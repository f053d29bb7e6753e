"""Miscellaneous checks (G1xx)."""

from gosecrules.rules.models import BuilderRef, RuleDefinition

HARDCODED_CREDENTIALS = RuleDefinition(
    id="G101",
    description="Look for hardcoded credentials",
    create=BuilderRef("hardcoded_credentials"),
)

BIND_ALL_INTERFACES = RuleDefinition(
    id="G102",
    description="Bind to all interfaces",
    create=BuilderRef("binds_to_all_network_interfaces"),
)

UNSAFE_BLOCK = RuleDefinition(
    id="G103",
    description="Audit the use of unsafe block",
    create=BuilderRef("using_unsafe"),
)

UNCHECKED_ERRORS = RuleDefinition(
    id="G104",
    description="Audit errors not checked",
    create=BuilderRef("no_error_check"),
)

SSH_INSECURE_HOST_KEY = RuleDefinition(
    id="G106",
    description="Audit the use of ssh.InsecureIgnoreHostKey function",
    create=BuilderRef("ssh_host_key"),
)

SSRF_TAINTED_URL = RuleDefinition(
    id="G107",
    description="Url provided to HTTP request as taint input",
    create=BuilderRef("ssrf_check"),
)

PPROF_EXPOSED = RuleDefinition(
    id="G108",
    description="Profiling endpoint is automatically exposed",
    create=BuilderRef("pprof_check"),
)

ATOI_INTEGER_OVERFLOW = RuleDefinition(
    id="G109",
    description="Converting strconv.Atoi result to int32/int16",
    create=BuilderRef("integer_overflow_check"),
)

DECOMPRESSION_BOMB = RuleDefinition(
    id="G110",
    description="Detect io.Copy instead of io.CopyN when decompression",
    create=BuilderRef("decompression_bomb_check"),
)

HTTP_DIR_TRAVERSAL = RuleDefinition(
    id="G111",
    description="Detect http.Dir('/') as a potential risk",
    create=BuilderRef("directory_traversal"),
)

SLOWLORIS = RuleDefinition(
    id="G112",
    description="Detect ReadHeaderTimeout not configured as a potential risk",
    create=BuilderRef("slowloris"),
)

HTTP_SERVE_NO_TIMEOUTS = RuleDefinition(
    id="G114",
    description="Use of net/http serve function that has no support for setting timeouts",
    create=BuilderRef("http_serve_without_timeouts"),
)

ALL_MISC_RULES = (
    HARDCODED_CREDENTIALS,
    BIND_ALL_INTERFACES,
    UNSAFE_BLOCK,
    UNCHECKED_ERRORS,
    SSH_INSECURE_HOST_KEY,
    SSRF_TAINTED_URL,
    PPROF_EXPOSED,
    ATOI_INTEGER_OVERFLOW,
    DECOMPRESSION_BOMB,
    HTTP_DIR_TRAVERSAL,
    SLOWLORIS,
    HTTP_SERVE_NO_TIMEOUTS,
)
