import logging

import httpx

from .exceptions import EnrichmentError
from .models import CommentMeta

logger = logging.getLogger(__name__)

LINEAR_API = "https://api.linear.app/graphql"

COMMENT_INFO_QUERY = """
query CommentInfo($commentId: String!, $userId: String!) {
  comment(id: $commentId) {
    issue {
      title
      identifier
    }
  }
  user(id: $userId) {
    name
  }
}
"""


def is_success_status(status_code: int) -> bool:
    """Linear calls count as successful only for statuses 200-209."""
    return status_code // 10 == 20


async def fetch_comment_meta(
    comment_id: str, user_id: str, api_key: str, api_url: str = LINEAR_API
) -> CommentMeta:
    """Fetch comment author and parent issue details from the Linear GraphQL API.

    Args:
        comment_id: Linear comment ID
        user_id: Linear ID of the comment author
        api_key: Linear API key, sent verbatim in the Authorization header
        api_url: GraphQL endpoint

    Returns:
        CommentMeta with the author's name and the issue title/identifier

    Raises:
        EnrichmentError: On transport failure, unexpected status, GraphQL errors
            or a response missing the requested fields
    """
    headers = {
        "Authorization": api_key,
        "Content-Type": "application/json",
    }
    data = {
        "query": COMMENT_INFO_QUERY,
        "variables": {"commentId": comment_id, "userId": user_id},
    }

    try:
        async with httpx.AsyncClient(timeout=10) as client:
            resp = await client.post(api_url, headers=headers, json=data)
    except httpx.HTTPError as e:
        logger.error(f"Linear request failed: {e}")
        raise EnrichmentError(f"Linear request failed: {e}") from e

    if not is_success_status(resp.status_code):
        logger.error(f"Linear request failed: status={resp.status_code}, content={resp.text!r}")
        raise EnrichmentError(
            "Invalid response code", status_code=resp.status_code, body=resp.text
        )

    try:
        body = resp.json()
    except ValueError as e:
        logger.error(f"Linear returned a non-JSON body: {resp.text!r}")
        raise EnrichmentError("Invalid response body", status_code=resp.status_code) from e

    result = body.get("data") if isinstance(body, dict) else None
    if not result:
        errors = body.get("errors") if isinstance(body, dict) else None
        logger.error(f"Linear GraphQL error: {errors!r}")
        raise EnrichmentError("graphql error", status_code=resp.status_code, body=resp.text)

    try:
        issue = result["comment"]["issue"]
        return CommentMeta(
            author_display_name=result["user"]["name"],
            issue_title=issue["title"],
            issue_identifier=issue["identifier"],
        )
    except (KeyError, TypeError) as e:
        logger.error(f"Unexpected Linear response shape: {result!r}")
        raise EnrichmentError("Unexpected response shape", status_code=resp.status_code) from e
