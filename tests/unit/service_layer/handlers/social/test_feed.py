"""Unit tests for posting micro-posts and reading the feed."""

from datetime import timedelta

import pytest

from startupnet.service_layer import commands, views
from startupnet.service_layer.errors import UserNotFoundError
from tests.fixtures.datagen import T0
from tests.unit.service_layer.handlers.base import HandlerTestBase

# pylint: disable=magic-value-comparison


class TestPostMicroPost(HandlerTestBase):
    """Tests for the post_micro_post handler via the message bus."""

    seed_uses = ("clock",)

    def _seed_bus(self, request) -> None:
        make_user_params = request.getfixturevalue("make_user_params")
        self.author = self.register(**make_user_params())

    def test_posts_with_clock_timestamp(self):
        """Posts are stamped with the injected clock."""
        self.fx.clock.advance(timedelta(minutes=7))
        result = self.bus.handle(commands.PostMicroPost(self.author.id, "Hello"))
        assert result.ok
        assert result.post.id is not None
        assert result.post.created_at == T0 + timedelta(minutes=7)
        self.assert_committed()

    @pytest.mark.parametrize(
        ("content", "expected"),
        [
            ("", {"content": ["can't be blank"]}),
            ("  ", {"content": ["can't be blank"]}),
            ("a" * 141, {"content": ["is too long (maximum is 140 characters)"]}),
        ],
    )
    def test_invalid_content(self, content, expected):
        """Blank or over-long posts are rejected without a write."""
        result = self.bus.handle(commands.PostMicroPost(self.author.id, content))
        assert result.errors == expected
        assert result.post is None
        self.assert_not_committed()

    def test_max_length_accepted(self):
        """Exactly 140 characters is fine."""
        assert self.bus.handle(commands.PostMicroPost(self.author.id, "a" * 140)).ok

    def test_unknown_author_raises(self):
        """Posting as a missing user raises."""
        with pytest.raises(UserNotFoundError):
            self.bus.handle(commands.PostMicroPost(4242, "Hello"))


class TestFeed(HandlerTestBase):
    """The feed follows the follow graph at read time."""

    seed_uses = ("clock",)

    # --- Setup ---

    def _post_at(self, author, content, minutes_ago):
        self.fx.clock.travel_to(T0 - timedelta(minutes=minutes_ago))
        result = self.bus.handle(commands.PostMicroPost(author.id, content))
        assert result.ok
        return result.post

    def _seed_bus(self, request) -> None:
        make_user_params = request.getfixturevalue("make_user_params")
        self.me = self.register(**make_user_params(name="Subject"))
        self.u1 = self.register(**make_user_params(name="User One"))
        self.u2 = self.register(**make_user_params(name="User Two"))

        self._post_at(self.u1, "u1 older", 3)
        self._post_at(self.u1, "u1 newer", 2)
        self._post_at(self.u2, "u2", 1)
        self.bus.handle(commands.Follow(self.me.id, "User", self.u1.id))
        self.bus.handle(commands.Follow(self.me.id, "User", self.u2.id))
        self._post_at(self.me, "mine", 0)

    def _feed(self, **kwargs):
        return [
            p.content
            for p in views.followed_micro_posts(self.bus.uow, self.me.id, **kwargs)
        ]

    # --- Tests ---

    def test_feed_merges_self_and_followed_newest_first(self):
        """Own post first, U1's oldest last."""
        assert self._feed() == ["mine", "u2", "u1 newer", "u1 older"]

    def test_unfollowing_shrinks_feed_immediately(self):
        """Unfollow U1 leaves two posts, unfollow U2 leaves one."""
        self.bus.handle(commands.Unfollow(self.me.id, "User", self.u1.id))
        assert self._feed() == ["mine", "u2"]

        self.bus.handle(commands.Unfollow(self.me.id, "User", self.u2.id))
        assert self._feed() == ["mine"]

    def test_followed_startups_add_nothing(self):
        """A followed startup founded by a stranger does not feed posts in."""
        stranger = self.register(name="Stranger", email="s@example.com", password="foobar")
        startup = self.bus.handle(commands.RegisterStartup(stranger.id, "Acme")).startup
        self._post_at(stranger, "stranger post", 0)
        self.bus.handle(commands.Follow(self.me.id, "Startup", startup.id))

        assert "stranger post" not in self._feed()
        assert len(self._feed()) == 4

    def test_limit(self):
        """limit trims the oldest posts."""
        assert self._feed(limit=2) == ["mine", "u2"]

    def test_posts_by_author(self):
        """micro_posts_by lists one author's posts only."""
        assert [p.content for p in views.micro_posts_by(self.bus.uow, self.u1.id)] == [
            "u1 newer",
            "u1 older",
        ]
