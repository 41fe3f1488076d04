import pytest

from wordsworth.acronyms import check_acronyms, is_expanded


def test_no_acronyms():
    result = check_acronyms("Hello world. This is a simple sentence.")
    assert result.type == "acronym-checker"
    assert result.all_expanded is True
    assert result.acronyms == []
    assert result.total_acronyms_found == 0
    assert check_acronyms("").all_expanded is True


def test_flags_unexpanded_acronym():
    result = check_acronyms("The API is fast.")
    assert result.all_expanded is False
    assert len(result.acronyms) == 1
    issue = result.acronyms[0]
    assert issue.acronym == "API"
    assert issue.count == 1
    assert issue.dismissed is False
    assert issue.first_expanded is False


@pytest.mark.parametrize(
    "text",
    [
        "The Application Programming Interface (API) is fast. The API works well.",
        "The API (Application Programming Interface) is fast.",
        "The API, or Application Programming Interface, is fast.",
    ],
)
def test_expansion_patterns(text: str):
    result = check_acronyms(text)
    assert result.all_expanded is True
    assert result.acronyms == []
    assert result.total_acronyms_found == 1


def test_is_expanded_requires_definition():
    assert is_expanded("the Software Development Kit (SDK)", "SDK")
    assert is_expanded("the SDK, or Software Development Kit", "SDK")
    assert not is_expanded("SDK is great (really)", "SDK")


def test_counts_and_positions():
    result = check_acronyms("The API is fast. The API is also reliable. The API is great.")
    assert len(result.acronyms) == 1
    assert result.acronyms[0].count == 3

    text = "First line here.\nThe API is on line two."
    issue = check_acronyms(text).acronyms[0]
    assert issue.line == 2
    assert issue.absolute_offset == text.index("API")
    assert text[issue.absolute_offset : issue.absolute_offset + issue.length] == "API"

    assert check_acronyms("The HTML is nice.").acronyms[0].length == 4


def test_sorted_by_first_occurrence():
    result = check_acronyms("The SDK is here. The API is there. The HTML is nice. The SDK again.")
    assert [a.acronym for a in result.acronyms] == ["SDK", "API", "HTML"]


def test_skip_list_and_single_letters():
    assert check_acronyms("This is OK. The US is large. We arrive at 10 AM.").all_expanded
    assert check_acronyms("I went to A place.").acronyms == []
    assert [a.acronym for a in check_acronyms("The NASA mission launched.").acronyms] == ["NASA"]


def test_code_is_ignored():
    assert check_acronyms('Some prose.\n```\nconst API_KEY = "abc"\n```\nMore prose.').all_expanded
    assert check_acronyms("Call `API.get()` to fetch data.").all_expanded
    result = check_acronyms('The API is fast.\n```\nconst SDK = "test"\n```\nMore prose.')
    assert [a.acronym for a in result.acronyms] == ["API"]


def test_mixed_expanded_and_unexpanded():
    text = (
        "The Application Programming Interface (API) is nice. "
        "But the SDK and the CLI need work."
    )
    result = check_acronyms(text)
    assert result.total_acronyms_found == 3
    assert [a.acronym for a in result.acronyms] == ["SDK", "CLI"]


def test_word_boundaries_are_ascii_only():
    text = "ÉAPI is new."
    result = check_acronyms(text)
    assert [a.acronym for a in result.acronyms] == ["API"]
    assert result.acronyms[0].absolute_offset == text.index("API")
