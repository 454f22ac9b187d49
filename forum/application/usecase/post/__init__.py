"""Post use cases."""

from .common import PostResponse
from .create_post import CreatePostRequest, CreatePostResponse, CreatePostUseCase
from .search_posts import SearchPostsRequest, SearchPostsResponse, SearchPostsUseCase
from .update_post import UpdatePostRequest, UpdatePostResponse, UpdatePostUseCase

__all__ = [
    "CreatePostRequest",
    "CreatePostResponse",
    "CreatePostUseCase",
    "PostResponse",
    "SearchPostsRequest",
    "SearchPostsResponse",
    "SearchPostsUseCase",
    "UpdatePostRequest",
    "UpdatePostResponse",
    "UpdatePostUseCase",
]
