"""Handlers for the follow graph, micro-posts and comments."""

import logging
from collections.abc import Callable

from startupnet.domain import validation
from startupnet.domain.social import Comment, MicroPost
from startupnet.domain.value_objects import (
    FieldError,
    FollowableKind,
    TargetRef,
    ValidationReport,
)
from startupnet.interfaces.clock import Clock
from startupnet.interfaces.unit_of_work import AbstractUnitOfWork
from startupnet.service_layer import commands
from startupnet.service_layer.results import CommentResult, FollowResult, PostResult

from ._common import missing, require_user, target_exists

logger = logging.getLogger(__name__)

SELF_FOLLOW = "can't follow yourself"

# ============================================================================
#                           Follow graph
# ============================================================================


def follow(cmd: commands.Follow, uow: AbstractUnitOfWork) -> FollowResult:
    """Make the follower follow a user or startup (idempotent)."""

    target = TargetRef(FollowableKind.from_string(cmd.kind), cmd.target_id)

    with uow:
        require_user(uow, cmd.follower_id)

        if target.kind is FollowableKind.USER and target.id == cmd.follower_id:
            report = ValidationReport.of([FieldError("target", SELF_FOLLOW)])
            return FollowResult(False, report=report)

        if not target_exists(uow, target):
            report = ValidationReport.of([missing("target_id")])
            return FollowResult(False, report=report)

        changed = uow.social_graph.follow(cmd.follower_id, target)
        if not changed:
            logger.debug("Follow %s -> %s: already following; noop", cmd.follower_id, target)
            return FollowResult(False)
        uow.commit()

    logger.info("User %s now follows %s", cmd.follower_id, target)
    return FollowResult(True)


def unfollow(cmd: commands.Unfollow, uow: AbstractUnitOfWork) -> FollowResult:
    """Remove a follow edge if it exists (idempotent)."""

    target = TargetRef(FollowableKind.from_string(cmd.kind), cmd.target_id)

    with uow:
        require_user(uow, cmd.follower_id)
        changed = uow.social_graph.unfollow(cmd.follower_id, target)
        if not changed:
            logger.debug("Unfollow %s -> %s: not following; noop", cmd.follower_id, target)
            return FollowResult(False)
        uow.commit()

    logger.info("User %s stopped following %s", cmd.follower_id, target)
    return FollowResult(True)


# ============================================================================
#                           Activity
# ============================================================================


def post_micro_post(
    cmd: commands.PostMicroPost, uow: AbstractUnitOfWork, clock: Clock
) -> PostResult:
    """Validate and publish a micro-post, timestamped by the injected clock."""

    report = validation.validate_micro_post(cmd.content)
    if not report.ok:
        return PostResult(None, report=report)

    with uow:
        require_user(uow, cmd.author_id)
        post = uow.micro_posts.add(
            MicroPost(user_id=cmd.author_id, content=cmd.content, created_at=clock.now())
        )
        uow.commit()

    logger.info("User %s posted micro-post %s", cmd.author_id, post.id)
    return PostResult(post)


def add_comment(
    cmd: commands.AddComment, uow: AbstractUnitOfWork, clock: Clock
) -> CommentResult:
    """Validate and attach a comment to a user or startup."""

    target = TargetRef(FollowableKind.from_string(cmd.kind), cmd.target_id)
    report = validation.validate_comment(cmd.content)

    with uow:
        require_user(uow, cmd.author_id)
        if not target_exists(uow, target):
            report = report.merge(ValidationReport.of([missing("target_id")]))
        if not report.ok:
            return CommentResult(None, report=report)

        comment = uow.comments.add(
            Comment(
                user_id=cmd.author_id,
                target=target,
                content=cmd.content,
                created_at=clock.now(),
            )
        )
        uow.commit()

    logger.info("User %s commented on %s", cmd.author_id, target)
    return CommentResult(comment)


COMMAND_HANDLERS: dict[type, Callable[..., object]] = {
    commands.Follow: follow,
    commands.Unfollow: unfollow,
    commands.PostMicroPost: post_micro_post,
    commands.AddComment: add_comment,
}
