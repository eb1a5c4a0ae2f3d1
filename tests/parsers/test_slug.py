import pytest

from novelupdates.parsers.slug import extract_series_id, group_slug, group_url


@pytest.mark.parametrize(
    "url, expected",
    [
        ("https://www.novelupdates.com/series/mushoku-tensei/", "mushoku-tensei"),
        ("https://www.novelupdates.com/series/re-zero-2/", "re-zero-2"),
        ("/series/overlord-ln/", "overlord-ln"),
        ("https://www.novelupdates.com/series/mushoku-tensei", ""),
        ("https://www.novelupdates.com/series/Mushoku/", ""),
        ("https://www.novelupdates.com/genre/action/", ""),
        ("", ""),
    ],
)
def test_extract_series_id(url, expected):
    assert extract_series_id(url) == expected


@pytest.mark.parametrize(
    "name, compat, hyphenated",
    [
        ("Fans Translations", "fanstranslations", "fans-translations"),
        ("Baka-Tsuki", "bakatsuki", "baka-tsuki"),
        ("Seven Seas (Official)", "sevenseasofficial", "seven-seas-official"),
        ("J-Novel  Club", "jnovelclub", "j-novel-club"),
        ("Hikari's Translations!", "hikaristranslations", "hikaris-translations"),
        ("snake_case", "snake_case", "snake_case"),
    ],
)
def test_group_slug_modes(name, compat, hyphenated):
    assert group_slug(name) == compat
    assert group_slug(name, "compat") == compat
    assert group_slug(name, "hyphenated") == hyphenated


def test_group_slug_compat_drops_non_ascii():
    assert group_slug("翻訳 Team") == "team"


def test_group_url():
    assert group_url("Fans Translations") == (
        "https://www.novelupdates.com/group/fanstranslations"
    )
    assert group_url("Fans Translations", "hyphenated") == (
        "https://www.novelupdates.com/group/fans-translations"
    )
