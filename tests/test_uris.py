from urllib.parse import unquote

import pytest

from graph2rdf.triples.uris import encode_page_name, page_url, property_url

BASE_URL = "https://x/#/page/"


@pytest.mark.parametrize(
    "name",
    ["Animal", "Hello World", "a/b", "Ärger?", "100% & more", "tags#1", "quote's (paren)"],
)
def test_page_url_round_trip(config, name):
    url = page_url(name, config)

    assert url.startswith(BASE_URL)
    assert unquote(url[len(BASE_URL):]) == name


def test_page_url_encodes_like_uri_components(config):
    assert page_url("Hello World/Ä?", config) == BASE_URL + "Hello%20World%2F%C3%84%3F"


def test_unreserved_characters_are_kept():
    assert encode_page_name("a-b_c.d!e~f*g'h(i)") == "a-b_c.d!e~f*g'h(i)"


def test_missing_name_gives_base_url(config):
    assert page_url(None, config) == BASE_URL


def test_non_string_names_use_their_text(config):
    assert page_url(42, config) == BASE_URL + "42"


def test_property_url_prefers_catalog(config):
    catalog = {"color": "https://schema.org/color"}

    assert property_url("color", catalog, config) == "https://schema.org/color"


def test_property_url_generates_missing(config):
    assert property_url("habitat", {}, config) == BASE_URL + "habitat"


def test_property_url_uses_catalog_even_when_equal_to_generated(config):
    catalog = {"color": BASE_URL + "color"}

    assert property_url("color", catalog, config) is catalog["color"]


def test_property_url_without_override_falls_back(config):
    assert property_url("habitat", {"habitat": None}, config) == BASE_URL + "habitat"


def test_property_url_keeps_empty_override(config):
    assert property_url("color", {"color": ""}, config) == ""
