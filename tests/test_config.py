# =============================================================================
# test_config.py - Scanner Configuration Tests
# =============================================================================

from tinys.config import ScannerConfig


class TestDefaults:
    def test_defaults(self):
        config = ScannerConfig()
        assert config.max_identifier_length == 1024
        assert config.max_string_length == 1024
        assert config.source_extension == ".s"
        assert config.max_code_point == 255
        assert config.encoding == "utf-8"


class TestFromEnv:
    """Test environment variable overrides."""

    def test_no_environment(self, monkeypatch):
        for name in (
            "TINYS_MAX_IDENTIFIER_LENGTH",
            "TINYS_MAX_STRING_LENGTH",
            "TINYS_SOURCE_EXTENSION",
            "TINYS_ENCODING",
        ):
            monkeypatch.delenv(name, raising=False)
        assert ScannerConfig.from_env() == ScannerConfig()

    def test_overrides(self, monkeypatch):
        monkeypatch.setenv("TINYS_MAX_IDENTIFIER_LENGTH", "64")
        monkeypatch.setenv("TINYS_MAX_STRING_LENGTH", "128")
        monkeypatch.setenv("TINYS_SOURCE_EXTENSION", ".ts")
        monkeypatch.setenv("TINYS_ENCODING", "latin-1")
        config = ScannerConfig.from_env()
        assert config.max_identifier_length == 64
        assert config.max_string_length == 128
        assert config.source_extension == ".ts"
        assert config.encoding == "latin-1"

    def test_invalid_integer_ignored(self, monkeypatch):
        monkeypatch.setenv("TINYS_MAX_IDENTIFIER_LENGTH", "lots")
        monkeypatch.setenv("TINYS_MAX_STRING_LENGTH", "")
        config = ScannerConfig.from_env()
        assert config.max_identifier_length == 1024
        assert config.max_string_length == 1024
