from claimcheck.search.base import ArticleRetriever
from claimcheck.search.gnews import GNewsRetriever
from claimcheck.search.parsing import article_from_post, articles_from_payload
from claimcheck.search.static import StaticRetriever
from claimcheck.search.webz import WebzRetriever

__all__ = [
    "ArticleRetriever",
    "GNewsRetriever",
    "StaticRetriever",
    "WebzRetriever",
    "article_from_post",
    "articles_from_payload",
]
