class PaginatedList(list):
    """One page of a query's results plus the metadata needed for navigation.

    Pages past the last one are not clamped: they come back empty with the
    real ``total`` and ``total_pages``.
    """

    def __init__(self, items, total, page_index, page_size):
        super().__init__(items)
        self.page_index = page_index
        self.page_size = page_size
        self.total = total
        self.total_pages = (total + page_size - 1) // page_size

    @property
    def has_previous_page(self):
        return self.page_index > 1

    @property
    def has_next_page(self):
        return self.page_index < self.total_pages

    @classmethod
    def create(cls, query, page_index, page_size):
        """Count and slice ``query`` without loading the whole result set."""
        if page_size < 1:
            raise ValueError("page_size must be a positive integer")
        page_index = page_index if page_index and page_index > 0 else 1
        total = query.count()
        items = query.offset((page_index - 1) * page_size).limit(page_size).all()
        return cls(items, total, page_index, page_size)
