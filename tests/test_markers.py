"""Tests for block annotation marker classification."""

from mdbook_blocky.markers import MIN_MARKER_LEN, MarkerKind, classify


def test_open_marker():
    marker = classify("{:.warning}")
    assert marker.kind is MarkerKind.OPEN
    assert marker.name == "warning"


def test_close_marker():
    marker = classify("{:/.warning}")
    assert marker.kind is MarkerKind.CLOSE
    assert marker.name == "warning"


def test_plain_text():
    assert classify("Just a paragraph.").kind is MarkerKind.PLAIN


def test_threshold_follows_close_marker_shape():
    assert MIN_MARKER_LEN == 5


def test_four_characters_always_plain():
    # Shaped like an open marker with an empty name, but too short
    assert classify("{:.}").kind is MarkerKind.PLAIN


def test_five_characters_evaluated():
    open_marker = classify("{:.a}")
    assert open_marker.kind is MarkerKind.OPEN
    assert open_marker.name == "a"

    close_marker = classify("{:/.}")
    assert close_marker.kind is MarkerKind.CLOSE
    assert close_marker.name == ""


def test_missing_suffix_is_plain():
    assert classify("{:.warning").kind is MarkerKind.PLAIN
    assert classify("{:/.warning").kind is MarkerKind.PLAIN


def test_wrong_prefix_is_plain():
    assert classify("{.warning}").kind is MarkerKind.PLAIN
    assert classify("{:#warning}").kind is MarkerKind.PLAIN


def test_name_is_not_validated():
    marker = classify('{:.two words "quoted"}')
    assert marker.kind is MarkerKind.OPEN
    assert marker.name == 'two words "quoted"'
