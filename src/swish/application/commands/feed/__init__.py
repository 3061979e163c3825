"""Feed commands."""

from swish.application.commands.feed.add_comment_command import AddCommentCommand
from swish.application.commands.feed.create_post_command import CreatePostCommand
from swish.application.commands.feed.toggle_like_command import ToggleLikeCommand

__all__ = ["AddCommentCommand", "CreatePostCommand", "ToggleLikeCommand"]
