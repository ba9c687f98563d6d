from ollamasearch.query import Query, build_query


def test_build_query_splits_capabilities_from_text() -> None:
    query = build_query("has:tools gemma has:vision small")

    assert query == Query(text="gemma small", capabilities=("tools", "vision"))


def test_build_query_list_form_matches_combined_string() -> None:
    combined = build_query("has:tools  has:vision\tgemma 3")
    split = build_query(["has:tools", "has:vision", "gemma", "3"])
    mixed = build_query(["has:tools has:vision", "gemma", "3"])

    assert combined == split == mixed


def test_build_query_keeps_duplicates_and_order() -> None:
    query = build_query(["has:vision", "has:tools", "has:vision"])

    assert query.capabilities == ("vision", "tools", "vision")
    assert query.text == ""


def test_build_query_passes_empty_capability_through() -> None:
    query = build_query("has: llama")

    assert query.capabilities == ("",)
    assert query.text == "llama"


def test_build_query_prefix_is_case_sensitive() -> None:
    query = build_query("HAS:tools Has:vision has:Thinking")

    assert query.text == "HAS:tools Has:vision"
    assert query.capabilities == ("Thinking",)


def test_build_query_prefix_only_counts_at_token_start() -> None:
    query = build_query("qwen-has:tools")

    assert query.text == "qwen-has:tools"
    assert query.capabilities == ()


def test_build_query_empty_input() -> None:
    assert build_query("") == Query()
    assert build_query([]) == Query()
    assert build_query("   ") == Query()
