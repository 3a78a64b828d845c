"""Common base for API services."""

from __future__ import annotations

from .client import RawResponse, RestClient
from .pagination import PageOptions, Paged


class BaseService:
    """Holds the client and the page options shared by service calls."""

    def __init__(self, client: RestClient, page_options: PageOptions | None = None) -> None:
        self.client = client
        self.page_options = page_options if page_options is not None else PageOptions()

    def set_page_options(self, options: PageOptions) -> None:
        """Take over the non-zero limit and page of ``options``."""
        if options.limit:
            self.page_options.limit = options.limit
        if options.page:
            self.page_options.page = options.page

    @staticmethod
    def _decode(model, response: RawResponse):
        result = model.from_dict(response.payload)
        if isinstance(result, Paged):
            result.apply_headers(response.headers)
        return result