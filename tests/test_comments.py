import textwrap

from aur_news import comments
from aur_news.models import Comment

PAGE = textwrap.dedent(
    """\
    <html><body>
      <div class="comments package-comments">
        <h4 class="comment-header">alice commented on 2024-01-01</h4>
        <div class="article-content"><p>Builds fine.</p></div>
        <h4 class="comment-header">
          bob commented on 2024-01-02
        </h4>
        <div class="article-content">
          <p>Needs <code>base-devel</code>.</p>
        </div>
      </div>
      <div class="article-content">not a comment</div>
    </body></html>
    """
)


def test_parse_comments_pairs_headers_and_bodies():
    result = comments.parse_comments(PAGE)

    assert result == [
        Comment(title="alice commented on 2024-01-01", content="Builds fine."),
        Comment(title="bob commented on 2024-01-02", content="Needs base-devel."),
    ]


def test_parse_comments_drops_unpaired_header():
    page = (
        '<div class="comments"><h4 class="comment-header">only header</h4></div>'
    )

    assert comments.parse_comments(page) == []


def test_parse_comments_empty_page():
    assert comments.parse_comments("<html></html>") == []


def test_comments_url_joins_base():
    assert comments.comments_url("yay") == (
        "https://aur.archlinux.org/packages/yay/comments?&PP=1000000"
    )
    assert comments.comments_url("yay", "https://aur.example.com") == (
        "https://aur.example.com/packages/yay/comments?&PP=1000000"
    )


def test_fetch_comments_requests_package_page(fake_session):
    session = fake_session(body=PAGE)

    result = comments.fetch_comments("yay", session=session, timeout=4.0)

    assert len(result) == 2
    assert session.calls == [(comments.comments_url("yay"), 4.0)]
