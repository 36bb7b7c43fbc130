"""Unit tests for the URI component model and reconstruction."""

import pytest

from url_normalizer.exceptions import InvalidUriError
from url_normalizer.uri import URI, URL, as_uri, build_uri, build_uri_string


class TestURIParse:
    """Test suite for URI.parse."""

    def test_all_components(self):
        """Test every component is extracted in raw form."""
        uri = URI.parse("http://user:pw@Example.COM:8080/p%20a?q=%7e#f%20g")

        assert uri.scheme == "http"
        assert uri.user_info == "user:pw"
        assert uri.host == "Example.COM"
        assert uri.port == 8080
        assert uri.path == "/p%20a"
        assert uri.query == "q=%7e"
        assert uri.fragment == "f%20g"

    def test_decoded_accessors(self):
        """Test decoded accessors percent-decode the raw forms."""
        uri = URI.parse("http://a%20b@example.com/p%20a?q=%7e#f%20g")

        assert uri.user_info_decoded == "a b"
        assert uri.path_decoded == "/p a"
        assert uri.query_decoded == "q=~"
        assert uri.fragment_decoded == "f g"

    def test_absent_components(self):
        """Test absent components are None and the path is ''."""
        uri = URI.parse("")

        assert uri.scheme is None
        assert uri.host is None
        assert uri.port is None
        assert uri.path == ""
        assert uri.query is None
        assert uri.fragment is None
        assert uri.user_info_decoded is None

    def test_empty_query_and_fragment(self):
        """Test '?' and '#' alone give empty strings, not None."""
        uri = URI.parse("http://example.com/?#")
        assert uri.query == ""
        assert uri.fragment == ""

    def test_scheme_relative(self):
        """Test network-path references."""
        uri = URI.parse("//example.com/a")
        assert uri.scheme is None
        assert uri.host == "example.com"
        assert uri.path == "/a"

    def test_opaque(self):
        """Test opaque URIs have no host."""
        uri = URI.parse("mailto:John.Doe@example.com")
        assert uri.scheme == "mailto"
        assert uri.host is None
        assert uri.path == "John.Doe@example.com"
        assert uri.is_opaque

    def test_empty_authority(self):
        """Test 'file:///x' has an empty host."""
        uri = URI.parse("file:///etc/hosts")
        assert uri.host == ""
        assert uri.has_authority
        assert not uri.is_opaque

    def test_empty_port(self):
        """Test an empty port is treated as unspecified."""
        assert URI.parse("http://example.com:/").port is None

    def test_ip_literal(self):
        """Test IPv6 literals keep their brackets."""
        uri = URI.parse("http://[::1]:8080/")
        assert uri.host == "[::1]"
        assert uri.port == 8080

    def test_malformed_percent_encoding_accepted(self):
        """Test malformed percent sequences are not parse errors."""
        assert URI.parse("http://example.com/100%-off").path == "/100%-off"

    @pytest.mark.parametrize(
        "text",
        [
            "http://example.com:80a/",
            "http://exa mple.com/",
            "http://example.com/a b",
            "1http://example.com/",
            "http://[::1/",
            "http://example.com/a[b]",
            "http://example.com/#a#b",
            "/a<b>",
            "1x:y/z",
            "not a uri",
        ],
    )
    def test_invalid(self, text):
        """Test syntactically invalid references raise InvalidUriError."""
        with pytest.raises(InvalidUriError):
            URI.parse(text)

    def test_colon_in_first_relative_segment(self):
        """Test a relative path whose first segment holds a colon is rejected."""
        with pytest.raises(InvalidUriError):
            URI.parse(":a/b")

    def test_non_string(self):
        """Test non-string input raises InvalidUriError."""
        with pytest.raises(InvalidUriError):
            URI.parse(None)

    def test_invalid_uri_error_is_value_error(self):
        """Test InvalidUriError can be caught as ValueError."""
        with pytest.raises(ValueError):
            URI.parse("http://example.com:port/")


class TestURIProperties:
    """Test URI helpers."""

    def test_to_string_round_trip(self):
        """Test recomposition reproduces the input."""
        text = "http://user@host:81/p;x?q=1#f"
        assert str(URI.parse(text)) == text

    def test_authority(self):
        """Test the authority property."""
        assert URI.parse("http://u@h:1/").authority == "u@h:1"
        assert URI.parse("/path").authority is None

    def test_replace(self):
        """Test replace returns a modified copy."""
        uri = URI.parse("http://example.com/a")
        other = uri.replace(path="/b")

        assert other.path == "/b"
        assert uri.path == "/a"

    def test_immutability(self):
        """Test URI is immutable (frozen)."""
        uri = URI.parse("http://example.com/")
        with pytest.raises(Exception):  # FrozenInstanceError
            uri.host = "other.com"

    def test_equality(self):
        """Test URIs compare by components."""
        assert URI.parse("http://a/b") == URI.parse("http://a/b")
        assert URI.parse("http://a/b") != URI.parse("http://a/b?")


class TestURL:
    """Test suite for URL."""

    def test_parse(self):
        """Test strict URL parsing."""
        url = URL.parse("  HTTP://Example.com:8080/a b  ")

        assert url.scheme == "HTTP"
        assert url.host == "Example.com"
        assert url.port == 8080
        assert url.path == "/a b"

    @pytest.mark.parametrize(
        "text",
        [
            "example.com/path",
            "//example.com/path",
            "mailto:a@example.com",
            "http:///path",
            "http://example.com:abc/",
            "http://exa mple.com/",
        ],
    )
    def test_parse_rejects(self, text):
        """Test inputs that are not absolute URLs with a host."""
        with pytest.raises(InvalidUriError):
            URL.parse(text)

    def test_to_uri_encodes_illegal_characters(self):
        """Test illegal characters are percent-encoded."""
        uri = URL.parse("http://example.com/a b?c d#e f#g").to_uri()

        assert isinstance(uri, URI)
        assert uri.path == "/a%20b"
        assert uri.query == "c%20d"
        assert uri.fragment == "e%20f%23g"

    def test_to_uri_keeps_existing_escapes(self):
        """Test existing percent-encoding is not double encoded."""
        uri = URL.parse("http://example.com/a%20b").to_uri()
        assert uri.path == "/a%20b"

    def test_to_uri_encodes_brackets_in_query(self):
        """Test brackets outside the host are encoded."""
        uri = URL.parse("http://example.com/?a[]=1").to_uri()
        assert uri.query == "a%5B%5D=1"


class TestAsURI:
    """Test suite for as_uri."""

    def test_string(self):
        """Test strings are parsed."""
        assert as_uri("http://a/b") == URI.parse("http://a/b")

    def test_uri(self):
        """Test URIs are returned as-is."""
        uri = URI.parse("http://a/b")
        assert as_uri(uri) is uri

    def test_url(self):
        """Test URLs are converted."""
        assert as_uri(URL.parse("http://a/b c")).path == "/b%20c"

    def test_unsupported_type(self):
        """Test other types raise InvalidUriError."""
        with pytest.raises(InvalidUriError):
            as_uri(42)


class TestBuildURI:
    """Test suite for the URI reconstructor."""

    def test_full(self):
        """Test all components."""
        result = build_uri_string(
            scheme="http",
            user_info="user",
            host="example.com",
            port=8080,
            path="/a",
            query="q=1",
            fragment="top",
        )
        assert result == "http://user@example.com:8080/a?q=1#top"

    def test_inserts_leading_slash(self):
        """Test the path always starts with '/'."""
        assert build_uri_string(scheme="http", host="example.com", path="a") == (
            "http://example.com/a"
        )
        assert build_uri_string(scheme="http", host="example.com") == (
            "http://example.com/"
        )

    def test_no_fields(self):
        """Test an empty call yields '/'."""
        assert build_uri_string() == "/"

    def test_hostless(self):
        """Test scheme is only written with a host."""
        assert build_uri_string(scheme="mailto", path="x", query="q", fragment="f") == (
            "/x?q#f"
        )

    def test_scheme_relative(self):
        """Test a host without a scheme yields '//host'."""
        assert build_uri_string(host="example.com", path="/a") == "//example.com/a"

    def test_negative_port_omitted(self):
        """Test port -1 means unspecified."""
        assert build_uri_string(scheme="http", host="h", port=-1) == "http://h/"

    def test_build_uri(self):
        """Test build_uri returns a parsed URI."""
        uri = build_uri(scheme="http", host="example.com", path="/a")
        assert uri == URI.parse("http://example.com/a")
