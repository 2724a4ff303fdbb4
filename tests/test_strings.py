from rescom.strings import make_identifier, to_lower, to_upper


def test_case_folding_is_ascii_only():
    assert to_upper("Resources_v2") == "RESOURCES_V2"
    assert to_lower("Resources_V2") == "resources_v2"
    # Non-ASCII letters are left alone
    assert to_upper("émoji") == "éMOJI"
    assert to_lower("ÉMOJI") == "Émoji"


def test_make_identifier():
    assert make_identifier("resources") == "resources"
    assert make_identifier("my-assets.v2") == "my_assets_v2"
    assert make_identifier("2d") == "_2d"
    assert make_identifier("") == "_"
