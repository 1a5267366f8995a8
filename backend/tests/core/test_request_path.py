"""Request Path — canonical path extraction, trailing-slash redirects, method tokens."""

import pytest

from minisite.core.request_path import canonical_redirect, normalize_method, normalize_path


@pytest.mark.parametrize("raw, expected", [
    ("/about?x=1", "/about"),
    ("/about#top", "/about"),
    ("/a/b?x=1#frag", "/a/b"),
    ("", "/"),
    (None, "/"),
    ("?only=query", "/"),
    ("http://example.com/contact?x=1", "/contact"),
    ("http://example.com", "/"),
    ("//double", "//double"),
])
def test_normalize_path(raw, expected):
    assert normalize_path(raw) == expected


def test_root_is_already_canonical():
    assert canonical_redirect("/") is None


def test_path_without_trailing_slash_is_canonical():
    assert canonical_redirect("/about") is None


@pytest.mark.parametrize("path, expected", [
    ("/about/", "/about"),
    ("/a/b/", "/a/b"),
    ("/about///", "/about"),
    ("//", "/"),
    ("//evil.example/", "/evil.example"),
    ("///evil.example//", "/evil.example"),
])
def test_trailing_slash_is_stripped(path, expected):
    assert canonical_redirect(path) == expected


@pytest.mark.parametrize("raw, expected", [
    ("get", "GET"),
    (" Post ", "POST"),
    ("", "GET"),
    (None, "GET"),
])
def test_normalize_method(raw, expected):
    assert normalize_method(raw) == expected


@pytest.mark.parametrize("path", ["//evil.example/", "///x//", "//a/b/", "/ok/"])
def test_redirect_target_is_never_protocol_relative(path):
    target = canonical_redirect(path)
    assert target.startswith("/")
    assert not target.startswith("//")
