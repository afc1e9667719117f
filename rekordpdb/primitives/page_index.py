class PageIndex:
    """
    Identifier of a page inside a DeviceSQL export file.

    Page pointers stored in the file (table directory entries, next-page
    links) are page numbers, never byte offsets. The byte position of a
    page is always ``page_number * page_size``.
    """

    def __init__(self, page_number: int):
        if page_number < 0:
            raise ValueError(
                f"Page number must be non-negative, got {page_number}")
        self.page_number = page_number

    def get_page_number(self) -> int:
        return self.page_number

    def offset(self, page_size: int) -> int:
        """Return the byte offset of this page for the given page size."""
        return self.page_number * page_size

    def __int__(self) -> int:
        return self.page_number

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PageIndex):
            return False
        return self.page_number == other.page_number

    def __hash__(self) -> int:
        return hash(self.page_number)

    def __str__(self) -> str:
        return f"PageIndex({self.page_number})"

    def __repr__(self) -> str:
        return self.__str__()
