"""Unit tests for the add_comment handler."""

import pytest

from startupnet.service_layer import commands, views
from tests.unit.service_layer.handlers.base import HandlerTestBase

# pylint: disable=magic-value-comparison


class TestAddComment(HandlerTestBase):
    """Tests for the add_comment handler via the message bus."""

    def _seed_bus(self, request) -> None:
        make_user_params = request.getfixturevalue("make_user_params")
        self.author = self.register(**make_user_params(name="Author"))
        self.founder = self.register(**make_user_params(name="Founder"))
        self.startup = self.bus.handle(
            commands.RegisterStartup(self.founder.id, "Acme")
        ).startup

    def test_comment_on_startup_and_user(self):
        """Both users and startups are commentable."""
        on_startup = self.bus.handle(
            commands.AddComment(self.author.id, "Startup", self.startup.id, "Nice pitch")
        )
        on_user = self.bus.handle(
            commands.AddComment(self.author.id, "User", self.founder.id, "Welcome")
        )
        assert on_startup.ok and on_user.ok
        self.assert_committed()

        assert [c.content for c in views.comments_for(self.bus.uow, "Startup", self.startup.id)] == [
            "Nice pitch"
        ]
        assert [c.content for c in views.comments_for(self.bus.uow, "user", self.founder.id)] == [
            "Welcome"
        ]

    def test_blank_content_and_missing_target_reported_together(self):
        """Every failure is reported; nothing is written."""
        result = self.bus.handle(commands.AddComment(self.author.id, "Startup", 4242, " "))
        assert result.errors == {
            "content": ["can't be blank"],
            "target_id": ["does not exist"],
        }
        assert result.comment is None
        self.assert_not_committed()

    @pytest.mark.parametrize("length,ok", [(2000, True), (2001, False)])
    def test_content_length(self, length, ok):
        """Comments are capped at 2000 characters."""
        result = self.bus.handle(
            commands.AddComment(self.author.id, "User", self.founder.id, "x" * length)
        )
        assert result.ok is ok
