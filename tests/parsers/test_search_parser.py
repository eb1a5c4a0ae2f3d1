import pytest

from novelupdates.errors import ParseError
from novelupdates.parsers import SearchParser
from novelupdates.schemas import Link


@pytest.fixture
def parser():
    return SearchParser()


@pytest.fixture
def results(parser, load_html):
    return parser.parse(load_html("search_tensei.html"))


def test_search_page_yields_cards_in_order(results):
    assert len(results) == 10
    assert results[0].id == "tensei-shitara-slime-datta-ken-ln"
    assert results[2].title == "Mushoku Tensei (LN)"
    assert results[-1].id == "tensei-saki-ga-shoujo-manga-no-shiro-buta-reijou-datta"


def test_search_card_fields(results):
    r = results[2]
    assert r.id == "mushoku-tensei-ln"
    assert r.url == "https://www.novelupdates.com/series/mushoku-tensei-ln/"
    assert r.image == "https://cdn.novelupdates.com/imgmid/series_1003.jpg"
    assert r.search_rating == "4.4"
    assert r.releases == "288 Releases"
    assert r.update_freq == "Updates Every 12.5 Day(s)"
    assert r.nu_readers == "21034 Readers"
    assert r.nu_reviews == "412 Reviews"
    assert r.last_updated == "06-22-2023"


def test_search_card_genres(results):
    assert results[2].genres == (
        Link("Action", "https://www.novelupdates.com/genre/action/"),
        Link("Adventure", "https://www.novelupdates.com/genre/adventure/"),
        Link("Fantasy", "https://www.novelupdates.com/genre/fantasy/"),
    )


def test_search_description_joins_visible_and_hidden_parts(results):
    assert results[2].description == (
        "A 34-year-old NEET is kicked out of his home and dies after being hit "
        "by a truck.\n"
        "He was reborn into a world of swords and magic.\n"
        "Rudeus resolves to live his new life to the fullest."
    )


def test_search_description_without_hidden_part(results):
    assert results[9].description == (
        "Summary of Tensei Saki ga Shoujo Manga no Shiro Buta Reijou datta, "
        "a story about starting over in another world."
    )


def test_search_description_drops_toggle_links(results):
    for r in results:
        assert "more>>" not in r.description
        assert "<<less" not in r.description
        assert not r.description.endswith("\n")


def test_search_placeholder_image_is_blank(results):
    assert results[6].id == "tensei-shoujo-no-rirekisho"
    assert results[6].image == ""


def test_search_rating_is_digits_and_dot_only(results):
    for r in results:
        assert r.search_rating
        assert all(c.isdigit() or c == "." for c in r.search_rating)


def test_search_id_is_suffix_of_url(results):
    for r in results:
        assert r.url.endswith(f"/series/{r.id}/")


def test_search_no_results(parser, load_html):
    assert parser.parse(load_html("search_empty.html")) == []


def test_search_card_missing_stats_raises(parser, load_html):
    with pytest.raises(ParseError) as exc:
        parser.parse(load_html("search_broken.html"))
    assert exc.value.anchor == "search_stats/span.ss_desk[4]"


def test_search_card_missing_title_raises(parser):
    page = """
    <html><body>
    <div class="search_main_box_nu">
      <div class="search_body_nu"><div class="search_title">No link</div></div>
    </div>
    </body></html>
    """
    with pytest.raises(ParseError) as exc:
        parser.parse(page)
    assert exc.value.anchor == "search_title/a"


def test_search_card_missing_body_raises(parser):
    page = '<html><body><div class="search_main_box_nu"></div></body></html>'
    with pytest.raises(ParseError) as exc:
        parser.parse(page)
    assert exc.value.anchor == "search_body_nu"


def test_search_card_without_image_region(parser):
    stats = "".join(f'<span class="ss_desk">s{i}</span>' for i in range(5))
    page = f"""
    <html><body>
    <div class="search_main_box_nu">
      <div class="search_body_nu">
        <div class="search_title">
          <a href="https://www.novelupdates.com/series/abc/">Abc</a>
        </div>
        <div class="search_stats">{stats}</div>
        Blurb.
      </div>
    </div>
    </body></html>
    """
    (r,) = parser.parse(page)
    assert r.id == "abc"
    assert r.image == ""
    assert r.search_rating == ""
    assert r.genres == ()
    assert r.description == "Blurb."
    assert r.last_updated == "s4"


def test_search_empty_document_raises(parser):
    with pytest.raises(ParseError):
        parser.parse("   ")
