"""Contract tests for the MicroPostStore and CommentStore ports."""

from datetime import timedelta

import pytest

from startupnet.domain.social import Comment
from startupnet.domain.startups import Startup
from tests.fixtures.datagen import T0

# pylint: disable=magic-value-comparison,redefined-outer-name


@pytest.fixture
def cast(uow, make_user):
    """Four committed users (me, friend, stranger, founder) and a startup."""
    with uow:
        me = uow.users.add(make_user(name="Mia"))
        friend = uow.users.add(make_user(name="Fred"))
        stranger = uow.users.add(make_user(name="Stan"))
        founder = uow.users.add(make_user(name="Fay"))
        acme = uow.startups.add(Startup(name="Acme"), founder_id=founder.id)
        uow.commit()
    return me, friend, stranger, founder, acme


def _contents(posts):
    return [p.content for p in posts]


class TestAddAndByAuthor:
    """Storing posts and listing them per author."""

    @staticmethod
    def test_add_assigns_id(uow, cast, make_micro_post):
        """add() returns the post with its id."""
        me, *_ = cast
        with uow:
            post = uow.micro_posts.add(make_micro_post(me.id, "hello"))
            uow.commit()
        assert post.id is not None
        assert post.content == "hello"

    @staticmethod
    def test_by_author_newest_first(uow, cast, make_micro_post):
        """Posts come back newest first, regardless of insert order."""
        me, friend, *_ = cast
        with uow:
            uow.micro_posts.add(make_micro_post(me.id, "old", minutes_ago=60))
            uow.micro_posts.add(make_micro_post(me.id, "new", minutes_ago=1))
            uow.micro_posts.add(make_micro_post(me.id, "middle", minutes_ago=30))
            uow.micro_posts.add(make_micro_post(friend.id, "not mine"))
            uow.commit()
        with uow:
            assert _contents(uow.micro_posts.by_author(me.id)) == [
                "new",
                "middle",
                "old",
            ]

    @staticmethod
    def test_equal_timestamps_break_ties_by_id(uow, cast, make_micro_post):
        """Among posts with the same timestamp, the later insert is first."""
        me, *_ = cast
        with uow:
            first = uow.micro_posts.add(make_micro_post(me.id, "first"))
            second = uow.micro_posts.add(make_micro_post(me.id, "second"))
            uow.commit()
        with uow:
            assert [p.id for p in uow.micro_posts.by_author(me.id)] == [
                second.id,
                first.id,
            ]


class TestFeed:
    """The feed: own posts plus posts of followed users, newest first."""

    @staticmethod
    def test_feed_scenario(uow, cast, make_micro_post):
        """Following and unfollowing changes the feed immediately."""
        me, friend, stranger, _, _ = cast
        with uow:
            uow.micro_posts.add(make_micro_post(me.id, "mine", minutes_ago=10))
            uow.micro_posts.add(make_micro_post(friend.id, "friend", minutes_ago=5))
            uow.micro_posts.add(make_micro_post(stranger.id, "stranger", minutes_ago=1))
            uow.commit()

        with uow:
            assert _contents(uow.micro_posts.feed_for(me.id)) == ["mine"]

        with uow:
            uow.social_graph.follow(me.id, friend.follow_target())
            uow.commit()
        with uow:
            assert _contents(uow.micro_posts.feed_for(me.id)) == ["friend", "mine"]

        with uow:
            uow.social_graph.unfollow(me.id, friend.follow_target())
            uow.commit()
        with uow:
            assert _contents(uow.micro_posts.feed_for(me.id)) == ["mine"]

    @staticmethod
    def test_feed_ignores_followed_startups(uow, cast, make_micro_post):
        """Following a startup adds none of its founders' posts."""
        me, _, _, founder, acme = cast
        with uow:
            uow.micro_posts.add(make_micro_post(founder.id, "founder post"))
            uow.social_graph.follow(me.id, acme.follow_target())
            uow.commit()
        with uow:
            assert not uow.micro_posts.feed_for(me.id)

    @staticmethod
    def test_feed_does_not_include_followers(uow, cast, make_micro_post):
        """Edges are directional: my followers' posts are not in my feed."""
        me, friend, *_ = cast
        with uow:
            uow.social_graph.follow(friend.id, me.follow_target())
            uow.micro_posts.add(make_micro_post(me.id, "mine"))
            uow.micro_posts.add(make_micro_post(friend.id, "friend"))
            uow.commit()
        with uow:
            assert _contents(uow.micro_posts.feed_for(me.id)) == ["mine"]
            assert _contents(uow.micro_posts.feed_for(friend.id)) == ["mine", "friend"]

    @staticmethod
    def test_feed_limit(uow, cast, make_micro_post):
        """limit keeps the newest posts."""
        me, *_ = cast
        with uow:
            for minutes in range(5):
                uow.micro_posts.add(make_micro_post(me.id, f"p{minutes}", minutes_ago=minutes))
            uow.commit()
        with uow:
            assert _contents(uow.micro_posts.feed_for(me.id, limit=2)) == ["p0", "p1"]
            assert len(uow.micro_posts.feed_for(me.id, limit=50)) == 5

    @staticmethod
    @pytest.mark.parametrize("limit", [0, -3])
    def test_feed_rejects_non_positive_limit(uow, cast, limit):
        """A limit below 1 is a programming error."""
        me, *_ = cast
        with uow:
            with pytest.raises(ValueError):
                uow.micro_posts.feed_for(me.id, limit=limit)

    @staticmethod
    def test_empty_feed(uow, cast):
        """A user with no posts and no follows has an empty feed."""
        me, *_ = cast
        with uow:
            assert uow.micro_posts.feed_for(me.id) == []


class TestComments:
    """Comments attached to users and startups."""

    @staticmethod
    def test_comments_oldest_first_per_target(uow, cast):
        """for_target() lists comments on one target in posting order."""
        me, friend, _, _, acme = cast
        with uow:
            uow.comments.add(
                Comment(me.id, acme.comment_target(), "later", T0 + timedelta(minutes=5))
            )
            uow.comments.add(Comment(friend.id, acme.comment_target(), "earlier", T0))
            uow.comments.add(Comment(me.id, friend.comment_target(), "on a user", T0))
            uow.commit()

        with uow:
            on_acme = uow.comments.for_target(acme.comment_target())
            on_friend = uow.comments.for_target(friend.comment_target())

        assert [c.content for c in on_acme] == ["earlier", "later"]
        assert [c.user_id for c in on_acme] == [friend.id, me.id]
        assert all(c.target == acme.comment_target() for c in on_acme)
        assert [c.content for c in on_friend] == ["on a user"]

    @staticmethod
    def test_no_comments(uow, cast):
        """A target without comments yields an empty list."""
        *_, acme = cast
        with uow:
            assert uow.comments.for_target(acme.comment_target()) == []
