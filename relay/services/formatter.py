from ..models import CommentEvent, CommentMeta, OutboundNotification


def format_notification(comment: CommentEvent, meta: CommentMeta) -> OutboundNotification:
    """Build the Discord message for a new comment.

    The comment body is relayed verbatim, without escaping Discord markdown.
    """
    content = f"[{meta.issue_identifier}: {meta.issue_title}]\n{comment.body}\n"
    return OutboundNotification(content=content, username=meta.author_display_name)
