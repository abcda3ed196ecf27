from dialex.url import match_url_scheme, normalize_url_arguments


def test_normalize_path_and_query():
    normalization = normalize_url_arguments(
        ["app://open/report.pdf?readonly=true"], ("app",)
    )
    assert normalization is not None
    assert normalization.scheme == "app"
    assert normalization.arguments == ("open", "report.pdf", "--readonly=true")


def test_normalize_decodes_and_drops_empty_pieces():
    normalization = normalize_url_arguments(
        ["app://a%20b//c/?k=v%2Fw&flag&&#frag%20x"], ("app",)
    )
    assert normalization is not None
    assert normalization.arguments == (
        "a b",
        "c",
        "--k=v/w",
        "--flag",
        "--fragment=frag x",
    )


def test_scheme_is_case_insensitive():
    assert match_url_scheme("APP://open", ("app",)) == "app"
    assert match_url_scheme("app:/open", ("app",)) is None
    assert match_url_scheme("ap", ("app",)) is None


def test_only_single_argument_urls_are_normalized():
    assert normalize_url_arguments(["app://open", "extra"], ("app",)) is None
    assert normalize_url_arguments(["app://open"], ()) is None
    assert normalize_url_arguments(["other://open"], ("app",)) is None
    assert normalize_url_arguments([], ("app",)) is None


def test_empty_url_body():
    normalization = normalize_url_arguments(["app://"], ("app",))
    assert normalization is not None
    assert normalization.arguments == ()
