from script.fetch_wordlist import extract_words
from script.prepare_wordlist import prepare


def test_prepare_filters_and_dedupes():
    lines = ["Cold", "cold", "x-ray", "cord", "", "warmer"]
    assert prepare(lines, lengths=[4], lower=True, alpha_only=True) == ["cold", "cord"]
    assert prepare(lines, dedupe=False, lower=True)[:2] == ["cold", "cold"]
    assert prepare(["b", "a"], sort=True) == ["a", "b"]


def test_extract_words_from_html():
    html = "<html><body><ul><li>Cold</li><li>cord</li><li>cold</li><li>warmth</li></ul></body></html>"
    assert extract_words(html) == ["cold", "cord", "warmth"]
    assert extract_words(html, length=4) == ["cold", "cord"]
