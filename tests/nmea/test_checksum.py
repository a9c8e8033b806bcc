"""Tests for NMEA checksum validation."""

import pytest

from gnssdecode.nmea import (
    ChecksumMismatchError,
    MalformedChecksumError,
    calculate_checksum,
    validate_checksum,
    verify_checksum,
)

RMC_VALID = "$GNRMC,041704.000,A,2935.21718,N,10631.58906,E,0.00,172.39,071124,,,A*7E"
GGA_VALID = "$GNGGA,123519.00,4807.038,N,01131.000,E,1,08,0.9,545.4,M,47.0,M,,*7F"
VTG_VALID = "$GNVTG,054.7,T,034.4,M,005.5,N,010.2,K,A*3B"


class TestValidateChecksum:
    """Tests for validate_checksum function."""

    def test_valid_rmc_checksum(self):
        assert validate_checksum(RMC_VALID) is True

    def test_valid_gga_checksum(self):
        assert validate_checksum(GGA_VALID) is True

    def test_valid_vtg_checksum(self):
        assert validate_checksum(VTG_VALID) is True

    def test_valid_checksum_with_newline(self):
        assert validate_checksum(GGA_VALID + "\r\n") is True

    def test_lowercase_hex_checksum(self):
        assert validate_checksum(RMC_VALID[:-2] + "7e") is True

    def test_double_dollar_prefix(self):
        assert validate_checksum("$" + RMC_VALID) is True

    def test_invalid_checksum(self):
        assert validate_checksum(GGA_VALID[:-2] + "FF") is False

    def test_altered_body(self):
        assert validate_checksum(RMC_VALID.replace("172.39", "172.38")) is False

    def test_missing_dollar_sign(self):
        assert validate_checksum(GGA_VALID[1:]) is False

    def test_missing_asterisk(self):
        assert validate_checksum(GGA_VALID.replace("*", "")) is False

    def test_empty_string(self):
        assert validate_checksum("") is False

    def test_truncated_checksum(self):
        assert validate_checksum(GGA_VALID[:-1]) is False

    def test_asterisk_at_end(self):
        assert validate_checksum("$GNGGA,123519.00*") is False

    def test_non_hex_checksum(self):
        assert validate_checksum(GGA_VALID[:-2] + "ZZ") is False

    def test_signed_checksum_is_not_hex(self):
        assert validate_checksum("$GNGGA*+7") is False

    def test_plain_text(self):
        assert validate_checksum("Invalid NMEA message") is False


class TestVerifyChecksum:
    """Tests for verify_checksum function."""

    def test_returns_body_between_markers(self):
        assert verify_checksum(VTG_VALID) == "GNVTG,054.7,T,034.4,M,005.5,N,010.2,K,A"

    def test_double_dollar_body(self):
        assert verify_checksum("$" + VTG_VALID).startswith("GNVTG,")

    def test_mismatch_reports_both_values(self):
        with pytest.raises(ChecksumMismatchError) as exc_info:
            verify_checksum(GGA_VALID[:-2] + "00")
        assert exc_info.value.calculated == 0x7F
        assert exc_info.value.provided == 0x00

    def test_missing_asterisk_is_malformed(self):
        with pytest.raises(MalformedChecksumError):
            verify_checksum("Invalid NMEA message")

    def test_checksum_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            verify_checksum(GGA_VALID[:-1])


class TestCalculateChecksum:
    """Tests for calculate_checksum function."""

    def test_empty_content(self):
        assert calculate_checksum("") == 0

    def test_known_content(self):
        assert calculate_checksum("GNVTG,054.7,T,034.4,M,005.5,N,010.2,K,A") == 0x3B

    def test_result_fits_in_a_byte(self):
        assert 0 <= calculate_checksum("GNTXT,éÿā") <= 0xFF
