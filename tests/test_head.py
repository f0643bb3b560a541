from htmlsummary.head import HeadFields, parse_head
from htmlsummary.scanner import parse_document


def head_of(html):
    return parse_head(parse_document(html))


def test_title_and_named_metas():
    head = head_of("""
        <html><head>
          <title>  My   Page </title>
          <meta name="Author" content="Lee">
          <meta name="description" content="About things">
        </head><body></body></html>
    """)
    assert head["title"] == "My Page"
    assert head.meta("author") == "Lee"
    assert head["X-META-AUTHOR"] == "Lee"
    assert head.meta("DESCRIPTION") == "About things"


def test_http_equiv_is_not_a_named_meta():
    head = head_of('<head><meta http-equiv="Last-Modified" content="yesterday"></head>')
    assert head["last-modified"] == "yesterday"
    assert head.meta("last-modified") is None


def test_repeated_meta_names_are_joined():
    head = head_of("""
        <head>
          <meta name="keywords" content="html">
          <meta name="keywords" content="summary">
        </head>
    """)
    assert head.meta("keywords") == "html, summary"


def test_empty_content_is_ignored():
    head = head_of('<head><meta name="author" content="  "></head>')
    assert head.meta("author") is None


def test_body_metas_are_ignored():
    head = head_of("""
        <html><head><title>T</title></head>
        <body><meta name="author" content="Body Author"><p>x</p></body></html>
    """)
    assert head["title"] == "T"
    assert head.meta("author") is None


def test_headless_document_stops_at_first_content():
    head = head_of("""
        <title>T</title>
        <meta name="author" content="A">
        <p>text</p>
        <meta name="description" content="too late">
    """)
    assert head["title"] == "T"
    assert head.meta("author") == "A"
    assert head.meta("description") is None


def test_underscore_lookup_matches_dash():
    head = head_of('<head><meta name="last-modified" content="2001-01-01"></head>')
    assert head.meta("LAST_MODIFIED") == "2001-01-01"
    assert "x-meta-last_modified" in head


def test_push_on_empty_fields():
    fields = HeadFields()
    fields.push("Title", "a")
    fields.push("TITLE", "b")
    assert fields["title"] == "a, b"
