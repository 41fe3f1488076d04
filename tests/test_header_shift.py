from wordsworth.header_shift import demote_headers, promote_headers, scan_headers

DOC = "# Title\n\nIntro.\n\n## Section\n\n### Detail\n\n## Another\n#hashtag is not a header"


def test_scan_headers_counts_levels():
    result = scan_headers(DOC)
    assert result.type == "header-shift"
    assert result.header_counts == {1: 1, 2: 2, 3: 1, 4: 0, 5: 0, 6: 0}
    assert result.total_headers == 4


def test_scan_headers_empty_document():
    result = scan_headers("")
    assert result.total_headers == 0
    assert set(result.header_counts) == {1, 2, 3, 4, 5, 6}


def test_seven_hashes_is_not_a_header():
    assert scan_headers("####### too deep").total_headers == 0


def test_promote_headers():
    outcome = promote_headers("## Section\ntext\n### Detail")
    assert outcome.ok is True
    assert outcome.shifted == 2
    assert outcome.content == "# Section\ntext\n## Detail"
    assert outcome.error is None


def test_promote_refuses_when_h1_exists():
    outcome = promote_headers(DOC)
    assert outcome.ok is False
    assert outcome.shifted == 0
    assert outcome.content is None
    assert outcome.error == "Cannot promote: H1 headers already exist and cannot go higher."


def test_demote_headers():
    outcome = demote_headers(DOC)
    assert outcome.ok is True
    assert outcome.shifted == 4
    assert outcome.content is not None
    assert scan_headers(outcome.content).header_counts == {1: 0, 2: 1, 3: 2, 4: 1, 5: 0, 6: 0}
    assert outcome.content.endswith("#hashtag is not a header")


def test_demote_refuses_when_h6_exists():
    outcome = demote_headers("# Top\n###### Deepest")
    assert outcome.ok is False
    assert outcome.error == "Cannot demote: H6 headers already exist and cannot go lower."


def test_shift_without_headers_is_a_no_op():
    outcome = demote_headers("plain text\nonly")
    assert outcome.ok is True
    assert outcome.shifted == 0
    assert outcome.content == "plain text\nonly"
