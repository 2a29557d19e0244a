import pytest

from designcheck.logic.design_keys import resolve_design_key


@pytest.mark.parametrize(
    "url, expected",
    [
        ("https://example.com/file/ABC123/Name", "ABC123"),
        ("https://example.com/design/XYZ789/Name", "XYZ789"),
        ("https://www.figma.com/file/k3yAbc9/Checkout?node-id=1", "k3yAbc9"),
        ("https://www.figma.com/design/Q1w2E3/Landing", "Q1w2E3"),
        ("www.figma.com/file/NoScheme42", "NoScheme42"),
        ("HTTPS://EXAMPLE.COM/FILE/upper1/x", "upper1"),
    ],
)
def test_key_is_taken_from_file_or_design_segment(url, expected):
    assert resolve_design_key(url) == expected


@pytest.mark.parametrize(
    "url",
    [
        "https://example.com/other/ABC123",
        "https://example.com/file/",
        "https://example.com/files/ABC123",
        "not a url",
        "",
        None,
    ],
)
def test_unmatched_urls_resolve_to_none(url):
    assert resolve_design_key(url) is None


def test_host_marker_restricts_accepted_hosts():
    assert resolve_design_key("https://www.figma.com/file/ABC/x", host_marker="figma.com") == "ABC"
    assert resolve_design_key("https://example.com/file/ABC/x", host_marker="figma.com") is None


def test_key_stops_at_first_non_alphanumeric_character():
    assert resolve_design_key("https://example.com/file/AB-12/Name") == "AB"


@pytest.mark.parametrize(
    "url, expected",
    [
        ("https://figma.com/file/ABC/x", "ABC"),
        ("https://www.figma.com/file/ABC/x", "ABC"),
        ("https://www.figma.com:443/file/ABC/x", "ABC"),
        ("https://notfigma.com/file/ABC/x", None),
        ("https://figma.com.evil.io/file/ABC/x", None),
    ],
)
def test_host_marker_matches_domain_or_subdomain_only(url, expected):
    assert resolve_design_key(url, host_marker="figma.com") == expected
