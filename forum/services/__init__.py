# forum/services/__init__.py

from .catalog_service import CatalogService, AggregationStrategy
from .user_service import UserService
from .comment_service import CommentService
from .seed_service import SeedService

__all__ = ["CatalogService", "AggregationStrategy", "UserService", "CommentService", "SeedService"]
