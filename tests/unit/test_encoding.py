"""Unit tests for percent-encoding normalization."""

from url_normalizer.config import DEFAULT_CONTEXT
from url_normalizer.normalization import (
    decode_special_characters,
    decode_unreserved,
    upper_case_percent_encoding,
)
from url_normalizer.normalization.encoding import normalize_percent_encoding


class TestDecodeUnreserved:
    """Test suite for decode_unreserved."""

    def test_decodes_unreserved(self):
        """Test unreserved characters are decoded."""
        assert decode_unreserved("/foo%2Dbar%7E") == "/foo-bar~"

    def test_decodes_alphanumerics(self):
        """Test letters and digits are decoded."""
        assert decode_unreserved("%41%62%30") == "Ab0"

    def test_decodes_lower_case_hex(self):
        """Test hex digits are matched case-insensitively."""
        assert decode_unreserved("/%7euser") == "/~user"
        assert decode_unreserved("/a%2eb%5fc") == "/a.b_c"

    def test_reserved_stays_encoded(self):
        """Test reserved characters are not decoded."""
        assert decode_unreserved("/foo%2Fbar") == "/foo%2Fbar"
        assert decode_unreserved("/a%3Fb%23c") == "/a%3Fb%23c"

    def test_multibyte_sequence_untouched(self):
        """Test UTF-8 multi-byte sequences are left encoded."""
        assert decode_unreserved("/caf%C3%A9") == "/caf%C3%A9"

    def test_malformed_encoding_passes_through(self):
        """Test malformed percent sequences do not raise."""
        assert decode_unreserved("/100%-off") == "/100%-off"
        assert decode_unreserved("/%") == "/%"
        assert decode_unreserved("/%7") == "/%7"
        assert decode_unreserved("/%zz") == "/%zz"

    def test_percent_before_valid_triple(self):
        """Test a stray '%' does not swallow the following triple."""
        assert decode_unreserved("%%7E") == "%~"


class TestUpperCasePercentEncoding:
    """Test suite for upper_case_percent_encoding."""

    def test_upper_cases_hex_digits(self):
        """Test hex digits are upper-cased."""
        assert upper_case_percent_encoding("/a%2fb%c3%a9") == "/a%2Fb%C3%A9"

    def test_leaves_other_text(self):
        """Test non-encoded text keeps its case."""
        assert upper_case_percent_encoding("/Path%-x") == "/Path%-x"


class TestDecodeSpecialCharacters:
    """Test suite for decode_special_characters."""

    def test_decodes_path_characters(self):
        """Test sub-delimiters, ':' and '@' are decoded."""
        assert decode_special_characters("/a%3Ab%40c%2C") == "/a:b@c,"

    def test_slash_stays_encoded(self):
        """Test '/', '?' and '#' stay encoded."""
        assert decode_special_characters("/a%2Fb%3Fc%23") == "/a%2Fb%3Fc%23"


class TestNormalizePercentEncoding:
    """Test suite for normalize_percent_encoding."""

    def test_default_context(self):
        """Test default context upper-cases and decodes unreserved."""
        assert normalize_percent_encoding("/%7e%2f") == "/~%2F"

    def test_decoding_disabled(self):
        """Test decoding can be switched off."""
        ctx = DEFAULT_CONTEXT.merge(decode_unreserved_characters=False)
        assert normalize_percent_encoding("/%7e%2f", ctx) == "/%7E%2F"

    def test_upper_casing_disabled(self):
        """Test upper-casing can be switched off."""
        ctx = DEFAULT_CONTEXT.merge(upper_case_percent_encoding=False)
        assert normalize_percent_encoding("/%7e%2f", ctx) == "/~%2f"

    def test_special_characters(self):
        """Test decode_special_characters implies unreserved decoding."""
        ctx = DEFAULT_CONTEXT.merge(decode_special_characters=True)
        assert normalize_percent_encoding("/%7e%40", ctx) == "/~@"
