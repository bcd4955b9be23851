"""tests/integration/test_pipeline.py

End to end checks across parsing, serialization and the codecs.
"""

import pytest

import urikit


@pytest.mark.parametrize(
    "text",
    [
        "http://elixir-lang.org/",
        "https://user:pw@example.com:8443/a?b=c#d",
        "ldap://ldap.example.com/dc=example,dc=com?cn",
        "/just/a/path?with=query",
        "file:///etc/hosts",
    ],
)
def test_render_is_stable(text):
    """Rendering a parsed URI and parsing it again gives the same URI."""
    uri = urikit.parse(text)
    assert urikit.parse(str(uri)) == uri
    assert str(urikit.parse(str(uri))) == str(uri)


def test_default_port_elided_and_restored():
    """A default port disappears from the text but not from the value."""
    uri = urikit.parse("HTTPS://example.com:443/x")
    rendered = urikit.to_string(uri)
    assert rendered == "https://example.com/x"
    assert urikit.parse(rendered).port == uri.port == 443


def test_query_from_parsed_uri():
    """The raw query of a parsed URI decodes with the query codec."""
    uri = urikit.parse("http://h/search?q=put+it%2B%D0%B9&page=2&page=3")
    assert urikit.decode_query(uri.query) == {"q": "put it+й", "page": "3"}
    assert list(urikit.query_decoder(uri.query)) == [
        ("q", "put it+й"),
        ("page", "2"),
        ("page", "3"),
    ]


def test_build_uri_with_encoded_query():
    """A URI built from parts renders the encoded query verbatim."""
    query = urikit.encode_query({"foo": 1, "bar": "a b"})
    uri = urikit.URI(scheme="http", host="h", path="/p", query=query)
    assert str(uri) == "http://h/p?foo=1&bar=a+b"
    assert urikit.decode_query(urikit.parse(str(uri)).query) == {
        "foo": "1",
        "bar": "a b",
    }


def test_decode_path_segments():
    """Escaped path segments decode to text with the percent codec."""
    uri = urikit.parse("http://h/caf%C3%A9/a%2Fb")
    segments = [urikit.decode(segment) for segment in uri.path.split("/")[1:]]
    assert segments == ["café", "a/b"]


def test_malformed_escape_in_query():
    """Parsing tolerates bad escapes; decoding the query does not."""
    uri = urikit.parse("http://h/?a=%G1")
    assert uri.query == "a=%G1"
    with pytest.raises(urikit.MalformedEncoding):
        urikit.decode_query(uri.query)


def test_isolated_registry_pipeline(registry):
    """A private registry drives both parsing and rendering."""
    registry.register("ws", 80)
    parser = urikit.URIParser(registry)
    serializer = urikit.Serializer(registry)
    uri = parser.parse("ws://chat.example.com/socket")
    assert uri.port == 80
    assert serializer.to_string(uri) == "ws://chat.example.com/socket"
    # The process-wide registry does not know the scheme.
    assert urikit.to_string(uri) == "ws://chat.example.com:80/socket"
