from datetime import datetime, timezone

from artfolio_client import render


PORTFOLIO = {
    "id": 4,
    "title": "<script>alert(1)</script>",
    "description": "Oil & canvas",
    "image": "https://images.example.com/a.jpg",
    "category": "painting",
    "price": 25.0,
    "authorInfo": {"id": 1, "username": "yana", "location": "Wellington", "website": "https://yana.art"},
}


class TestFormatDate:
    def test_iso_string(self):
        assert render.format_date("2023-11-04T09:05:00Z") == "4/11/2023 at 9:05"

    def test_epoch_milliseconds(self):
        assert render.format_date(1700000000000) == "14/11/2023 at 22:13"

    def test_datetime(self):
        moment = datetime(2024, 1, 2, 15, 30, tzinfo=timezone.utc)
        assert render.format_date(moment) == "2/1/2024 at 15:30"

    def test_unparseable(self):
        assert render.format_date("yesterday") == ""
        assert render.format_date(None) == ""


def test_product_cards_escape_values():
    html = render.product_cards([PORTFOLIO])
    assert "<script>" not in html
    assert "&lt;script&gt;" in html
    assert "Oil &amp; canvas" in html
    assert "yana, Wellington" in html
    assert "&dollar;25<" in html


def test_product_cards_empty():
    assert render.product_cards([]) == ""


def test_my_portfolio_cards():
    html = render.my_portfolio_cards([PORTFOLIO])
    assert html.count('id="4"') == 3
    assert render.my_portfolio_cards([]).endswith(f"{render.NO_PORTFOLIO_TEXT}</div>")


def test_view_more():
    html = render.view_more(PORTFOLIO)
    assert "Location: Wellington" in html
    assert 'href="https://yana.art"' in html
    assert "&lt;script&gt;" in html


def test_own_comments_read_you():
    items = [
        {"postByUsername": "yana", "text": "mine", "posted": "2023-11-04T09:05:00Z"},
        {"postByUsername": "hayley", "text": "<b>theirs</b>", "posted": "2023-11-04T09:06:00Z"},
    ]
    html = render.comments(items, current_user="yana")
    assert "<strong class=\"mr-1\">You</strong>" in html
    assert "comment-right" in html
    assert "hayley" in html
    assert "&lt;b&gt;theirs&lt;/b&gt;" in html
    assert "on 4/11/2023 at 9:05" in html


def test_comments_for_anonymous_viewer():
    html = render.comments([{"postByUsername": "yana", "text": "hi", "posted": None}])
    assert "You" not in html
    assert "comment-left" in html


def test_no_comments():
    assert render.NO_COMMENTS_TEXT in render.comments([])


def test_members_list_escapes():
    html = render.members_list([{"username": "<i>yana</i>"}])
    assert html.startswith('<h2 class="pt-5 pb-4">All Members</h2>')
    assert "&lt;i&gt;yana&lt;/i&gt;" in html


def test_account_summary():
    html = render.account_summary({"username": "yana", "email": "y@example.com", "website": None})
    assert "<div>yana</div>" in html
    assert "<div>y@example.com</div>" in html
    assert 'href=""' in html


def test_no_match():
    assert render.NO_MATCH_TEXT in render.no_match()
