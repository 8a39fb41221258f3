from postfeed.services.posts_client import PostsService, PostsServiceError, decode_posts

__all__ = ["PostsService", "PostsServiceError", "decode_posts"]
