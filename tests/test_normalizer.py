from bigram_tfidf.preprocessing.normalizer import normalize_text


def test_removes_single_url() -> None:
    assert normalize_text("great pizza https://t.co/xyz123 tonight") == "great pizza  tonight"


def test_removes_every_url() -> None:
    text = "one http://a.com/x two https://b.org/y?z=1 three"
    assert normalize_text(text) == "one  two  three"


def test_text_without_url_is_unchanged() -> None:
    text = "Cast Iron skillet, @someone #pan"
    assert normalize_text(text) == text


def test_url_at_end_of_text() -> None:
    assert normalize_text("look http") == "look "


def test_none_and_empty_become_empty_string() -> None:
    assert normalize_text(None) == ""
    assert normalize_text("") == ""


def test_strip_handles_is_opt_in() -> None:
    text = "@joe best pizza"
    assert normalize_text(text) == text
    assert normalize_text(text, strip_handles=True) == " best pizza"
