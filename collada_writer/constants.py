from typing import ClassVar


class Defaults:
    AUTHORING_TOOL = "collada-writer"
    UNIT_NAME = "meter"
    UNIT_METER = 1.0
    UP_AXIS = "Y_UP"
    INDENT = 2
    XML_DECLARATION = True
    OUTPUT_SUFFIX = ".dae"
    CONFIG_FILE = "collada_writer.toml"


class Constraints:
    COLLADA_VERSION = "1.4.1"
    SUPPORTED_VERSIONS: ClassVar[tuple[str, ...]] = ("1.4.1",)
    UP_AXES: ClassVar[tuple[str, ...]] = ("X_UP", "Y_UP", "Z_UP")
    MAX_INDENT = 8


class Patterns:
    ELEMENT_ID = r"^[A-Za-z_][A-Za-z0-9_.\-]*$"
    # Element names written for extra parameters; no namespace prefixes
    XML_NAME = r"^[A-Za-z_][A-Za-z0-9_.\-]*$"
    # Characters outside the XML 1.0 Char production
    XML_FORBIDDEN_CHARS = r"[^\x09\x0A\x0D\x20-\uD7FF\uE000-\uFFFD\U00010000-\U0010FFFF]"
