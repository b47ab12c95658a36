from typing import Any, Callable, Iterator


class Pager:
    """Walks a Classroom ``list`` method page by page.

    Each iteration starts again from the first page, so a Pager can be
    consumed more than once. Iteration stops on the first response that
    carries no ``nextPageToken``.
    """

    def __init__(self, method: Callable[..., Any], items_key: str, **params):
        self._method = method
        self._items_key = items_key
        self._params = params

    def __iter__(self) -> Iterator[list[dict]]:
        page_token = None
        while True:
            response = self._method(pageToken=page_token, **self._params).execute()
            yield response.get(self._items_key, [])

            page_token = response.get("nextPageToken")
            if not page_token:
                break

    def items(self) -> list[dict]:
        return [item for page in self for item in page]
