from cleanup_html.sanitize import clean_html
from cleanup_html.urls import URLDecodeError, unwrap_redirect

__all__ = ["clean_html", "unwrap_redirect", "URLDecodeError"]
