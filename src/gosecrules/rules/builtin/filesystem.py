"""Filesystem checks (G3xx)."""

from gosecrules.rules.models import BuilderRef, RuleDefinition

MKDIR_PERMISSIONS = RuleDefinition(
    id="G301",
    description="Poor file permissions used when creating a directory",
    create=BuilderRef("mkdir_perms"),
)

FILE_PERMISSIONS = RuleDefinition(
    id="G302",
    description="Poor file permissions used when creation file or using chmod",
    create=BuilderRef("file_perms"),
)

PREDICTABLE_TEMPFILE = RuleDefinition(
    id="G303",
    description="Creating tempfile using a predictable path",
    create=BuilderRef("bad_temp_file"),
)

TAINTED_FILE_PATH = RuleDefinition(
    id="G304",
    description="File path provided as taint input",
    create=BuilderRef("read_file"),
)

ZIP_SLIP = RuleDefinition(
    id="G305",
    description="File path traversal when extracting zip archive",
    create=BuilderRef("archive"),
)

WRITE_PERMISSIONS = RuleDefinition(
    id="G306",
    description="Poor file permissions used when writing to a file",
    create=BuilderRef("write_perms"),
)

OS_CREATE_PERMISSIONS = RuleDefinition(
    id="G307",
    description="Poor file permissions used when creating a file with os.Create",
    create=BuilderRef("os_create_perms"),
)

ALL_FILESYSTEM_RULES = (
    MKDIR_PERMISSIONS,
    FILE_PERMISSIONS,
    PREDICTABLE_TEMPFILE,
    TAINTED_FILE_PATH,
    ZIP_SLIP,
    WRITE_PERMISSIONS,
    OS_CREATE_PERMISSIONS,
)
