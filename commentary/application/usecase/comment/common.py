"""Response models shared by the comment use cases."""

from datetime import datetime

from pydantic import BaseModel

from commentary.domain.model import AuthorSummary, Comment
from commentary.domain.service import CommentNode


class AuthorItem(BaseModel):
    """Public author information."""

    id: str
    username: str
    display_name: str | None
    avatar_url: str | None

    @classmethod
    def from_summary(cls, author: AuthorSummary) -> "AuthorItem":
        return cls(
            id=str(author.id),
            username=str(author.username),
            display_name=author.display_name,
            avatar_url=author.avatar_url,
        )


class CommentItem(BaseModel):
    """Comment item in responses."""

    id: str
    content: str
    post_id: str
    parent_id: str | None
    path: list[str]
    thread_id: str
    depth: int
    replies_count: int
    created_by: str | None
    author: AuthorItem | None = None
    created_at: datetime
    updated_at: datetime | None

    @classmethod
    def from_comment(
        cls, comment: Comment, author: AuthorSummary | None = None
    ) -> "CommentItem":
        """Build the response item for a comment."""
        return cls(
            id=str(comment.id),
            content=comment.content,
            post_id=str(comment.post_id),
            parent_id=str(comment.parent_id) if comment.parent_id else None,
            path=[str(ancestor_id) for ancestor_id in comment.path],
            thread_id=str(comment.thread_id),
            depth=comment.depth,
            replies_count=comment.replies_count,
            created_by=str(comment.created_by) if comment.created_by else None,
            author=AuthorItem.from_summary(author) if author else None,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
        )

    @classmethod
    def from_node(cls, node: CommentNode) -> "CommentItem":
        return cls.from_comment(node.comment, node.author)


class ThreadCommentItem(CommentItem):
    """Comment item in the thread view.

    The view is a flat list in display order (depth-first, siblings oldest
    first). `anchor_id` names the item this one is shown under: the
    nearest live ancestor, or None for a top-level item. Clients nest by
    anchor_id, so payload depth stays constant however deep the thread is.
    """

    anchor_id: str | None = None

    @classmethod
    def flatten(cls, roots: list[CommentNode]) -> list["ThreadCommentItem"]:
        """Walk a node tree depth-first into display-ordered items."""
        items: list[ThreadCommentItem] = []
        stack: list[tuple[CommentNode, CommentNode | None]] = [
            (node, None) for node in reversed(roots)
        ]
        while stack:
            node, anchor = stack.pop()
            item = cls.from_node(node)
            item.anchor_id = str(anchor.comment.id) if anchor else None
            items.append(item)
            stack.extend((child, node) for child in reversed(node.replies))
        return items
