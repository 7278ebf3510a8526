"""
tinyS Scanner Configuration
===========================

Lexical limits and file settings for the scanner. Configuration can come
from:
- Default values (defined here)
- Environment variables (ScannerConfig.from_env)
- Command-line options of the tslex tool

The defaults reproduce the reference tinyS language definition:
identifiers and string literals are rejected once they reach 1024
characters, sources use the ".s" extension, and only code points up to
255 are accepted.
"""

from dataclasses import dataclass
import os


@dataclass
class ScannerConfig:
    """
    Configuration for a Scanner instance.

    Attributes:
        max_identifier_length: Identifier length that triggers IdentifierTooLong
        max_string_length: String content length that triggers StringTooLong
        source_extension: Required suffix of source file paths
        max_code_point: Highest accepted character code point
        string_preview_length: Characters kept when reporting an oversized string
        encoding: Text encoding used to open source files
    """

    # ═══════════════════════════════════════════════════════════════════════════
    # LEXEME LIMITS
    # ═══════════════════════════════════════════════════════════════════════════

    max_identifier_length: int = 1024
    max_string_length: int = 1024

    # ═══════════════════════════════════════════════════════════════════════════
    # SOURCE SETTINGS
    # ═══════════════════════════════════════════════════════════════════════════

    source_extension: str = ".s"
    max_code_point: int = 255
    encoding: str = "utf-8"

    # ═══════════════════════════════════════════════════════════════════════════
    # ERROR REPORTING
    # ═══════════════════════════════════════════════════════════════════════════

    string_preview_length: int = 20

    @classmethod
    def from_env(cls) -> "ScannerConfig":
        """
        Create ScannerConfig from environment variables.

        Environment variables (all optional):
            TINYS_MAX_IDENTIFIER_LENGTH: Identifier length limit (integer)
            TINYS_MAX_STRING_LENGTH: String literal length limit (integer)
            TINYS_SOURCE_EXTENSION: Required source suffix (e.g. ".s")
            TINYS_ENCODING: Source file encoding

        Returns:
            ScannerConfig with values from environment variables
        """
        config = cls()

        if limit := os.environ.get("TINYS_MAX_IDENTIFIER_LENGTH"):
            try:
                config.max_identifier_length = int(limit)
            except ValueError:
                pass  # Ignore invalid values

        if limit := os.environ.get("TINYS_MAX_STRING_LENGTH"):
            try:
                config.max_string_length = int(limit)
            except ValueError:
                pass

        if extension := os.environ.get("TINYS_SOURCE_EXTENSION"):
            config.source_extension = extension

        if encoding := os.environ.get("TINYS_ENCODING"):
            config.encoding = encoding

        return config
