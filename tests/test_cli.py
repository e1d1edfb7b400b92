"""
Tests for the ihex command-line tool
====================================

These tests verify that the ihex CLI joins its arguments, encodes them,
and reports errors with the right exit codes.
"""

from click.testing import CliRunner

from ihexgen import __version__
from ihexgen.cli.ihex import main
from ihexgen.ihex import encode


# =============================================================================
# CLI Tests
# =============================================================================

class TestIHexCLI:
    """Tests for the ihex CLI tool."""

    def test_cli_help(self):
        """Test CLI help output."""
        runner = CliRunner()
        result = runner.invoke(main, ["--help"])

        assert result.exit_code == 0
        assert "Encode hex digits as Intel HEX" in result.output

    def test_cli_version(self):
        """Test CLI version output."""
        runner = CliRunner()
        result = runner.invoke(main, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output

    def test_cli_basic_encoding(self):
        """Encoded text is printed to stdout."""
        runner = CliRunner()
        result = runner.invoke(main, ["-r", "2", "00112233"])

        assert result.exit_code == 0
        assert result.output == (
            ":020000040000FA\n"
            ":020000000011ED\n"
            ":020002002233A7\n"
            ":00000001FF\n"
        )

    def test_cli_joins_fragments(self):
        """Multiple arguments are concatenated before encoding."""
        runner = CliRunner()
        result = runner.invoke(main, ["DEA", "DBE", "EF"])

        assert result.exit_code == 0
        assert result.output == encode("DEADBEEF")

    def test_cli_output_file(self, tmp_path):
        """--output writes the text to a file."""
        out_file = tmp_path / "payload.hex"

        runner = CliRunner()
        result = runner.invoke(main, ["-o", str(out_file), "--record-length", "1", "AB"])

        assert result.exit_code == 0
        assert out_file.read_text() == ":020000040000FA\n:01000000AB54\n:00000001FF\n"

    def test_cli_verify(self):
        """--verify succeeds on freshly encoded output."""
        runner = CliRunner()
        result = runner.invoke(main, ["--verify", "00" * 300])

        assert result.exit_code == 0
        assert result.output.endswith(":00000001FF\n")

    def test_cli_invalid_hex(self):
        """Non-hex input exits with code 1 and an error message."""
        runner = CliRunner()
        result = runner.invoke(main, ["12G4"])

        assert result.exit_code == 1
        assert "error: Input is not a valid hex string" in result.output

    def test_cli_odd_length(self):
        """Odd-length input exits with code 1."""
        runner = CliRunner()
        result = runner.invoke(main, ["ABC"])

        assert result.exit_code == 1
        assert "odd number" in result.output

    def test_cli_no_arguments(self):
        """At least one hex string is required."""
        runner = CliRunner()
        result = runner.invoke(main, [])

        assert result.exit_code == 2

    def test_cli_record_length_range(self):
        """Record lengths outside 1-255 are usage errors."""
        runner = CliRunner()

        assert runner.invoke(main, ["-r", "0", "00"]).exit_code == 2
        assert runner.invoke(main, ["-r", "256", "00"]).exit_code == 2
        assert runner.invoke(main, ["-r", "255", "00"]).exit_code == 0

    def test_cli_output_is_directory(self, tmp_path):
        """An unwritable output path is an argument error."""
        runner = CliRunner()
        result = runner.invoke(main, ["-o", str(tmp_path), "00"])

        assert result.exit_code == 2
