"""Search posts use case."""

from pydantic import BaseModel

from forum.domain.service import SearchService

from .common import PostResponse


class SearchPostsRequest(BaseModel):
    """Search posts request."""

    query: str


class SearchPostsResponse(BaseModel):
    """Search posts response."""

    query: str
    posts: list[PostResponse]
    total: int


class SearchPostsUseCase:
    """Use case for searching posts."""

    def __init__(self, search_service: SearchService) -> None:
        self.search_service = search_service

    async def execute(self, request: SearchPostsRequest) -> SearchPostsResponse:
        """Find posts matching the query, ordered by ID."""
        posts = await self.search_service.search(request.query)
        return SearchPostsResponse(
            query=request.query,
            posts=[PostResponse.from_post(post) for post in posts],
            total=len(posts),
        )
