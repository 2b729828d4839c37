"""Split lyric text into verses and cut one page out of them."""

from songlib.domain.catalog.exceptions import VersePageNotFoundError
from songlib.domain.catalog.value_objects import (
    DEFAULT_VERSE_LIMIT,
    PageRequest,
    VersePage,
)

VERSE_SEPARATOR = "\n\n"


def split_verses(full_text: str) -> list[str]:
    """Split text on blank lines.

    Empty pieces are kept: ``"a\\n\\n\\n\\nb"`` has three verses, the middle
    one empty.
    """
    return full_text.split(VERSE_SEPARATOR)


class VerseParagraphPaginator:
    """Pages through the verses of a lyric text."""

    def paginate(self, full_text: str, page: int, limit: int) -> VersePage:
        """Return verses ``[(page-1)*limit, page*limit)`` of the text.

        Raises
        ------
        VersePageNotFoundError
            If the text has no verses or the page starts past the last verse.
        """
        page_request = PageRequest.from_raw(
            page, limit, default_limit=DEFAULT_VERSE_LIMIT
        )
        page, limit = page_request.page, page_request.limit

        verses = split_verses(full_text)
        total = len(verses)
        start = page_request.offset

        if total == 0 or start >= total:
            raise VersePageNotFoundError(page=page, limit=limit, total=total)

        end = min(start + limit, total)

        return VersePage(
            page=page,
            limit=limit,
            total=total,
            total_pages=(total + limit - 1) // limit,
            verses=verses[start:end],
        )
