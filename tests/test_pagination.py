from datetime import date
import pytest

from school.models import Student
from school.pagination import PaginatedList


class RecordingQuery:
    """Stand-in for a SQLAlchemy query that records how it is consumed."""

    def __init__(self, items):
        self.items = items
        self.calls = []
        self._offset = 0
        self._limit = None

    def count(self):
        self.calls.append("count")
        return len(self.items)

    def offset(self, n):
        self.calls.append(("offset", n))
        self._offset = n
        return self

    def limit(self, n):
        self.calls.append(("limit", n))
        self._limit = n
        return self

    def all(self):
        self.calls.append("all")
        return self.items[self._offset:self._offset + self._limit]


@pytest.mark.parametrize("total,size,pages,last_len", [
    (7, 3, 3, 1),
    (6, 3, 2, 3),
    (1, 3, 1, 1),
    (10, 1, 10, 1),
    (10, 4, 3, 2),
])
def test_page_counts_and_last_page(total, size, pages, last_len):
    items = list(range(total))
    first = PaginatedList.create(RecordingQuery(items), 1, size)
    assert first.total == total
    assert first.total_pages == pages

    last = PaginatedList.create(RecordingQuery(items), pages, size)
    assert len(last) == last_len
    assert list(last) == items[size * (pages - 1):]
    assert last.has_next_page is False
    assert last.has_previous_page is (pages > 1)


def test_empty_result_has_no_pages():
    page = PaginatedList.create(RecordingQuery([]), 1, 3)
    assert list(page) == []
    assert page.total_pages == 0
    assert page.has_previous_page is False
    assert page.has_next_page is False


@pytest.mark.parametrize("requested", [None, 0, -4])
def test_missing_or_non_positive_page_means_first(requested):
    page = PaginatedList.create(RecordingQuery(list("abcde")), requested, 2)
    assert page.page_index == 1
    assert list(page) == ["a", "b"]
    assert page.has_next_page is True


def test_page_past_the_end_is_empty_not_clamped():
    page = PaginatedList.create(RecordingQuery(list("abcde")), 9, 2)
    assert list(page) == []
    assert page.page_index == 9
    assert page.total == 5
    assert page.total_pages == 3
    assert page.has_previous_page is True
    assert page.has_next_page is False


def test_counts_then_slices_the_same_query():
    query = RecordingQuery(list(range(20)))
    page = PaginatedList.create(query, 3, 5)
    assert query.calls == ["count", ("offset", 10), ("limit", 5), "all"]
    assert list(page) == [10, 11, 12, 13, 14]


def test_rejects_non_positive_page_size():
    with pytest.raises(ValueError):
        PaginatedList.create(RecordingQuery([1]), 1, 0)


def test_works_on_a_real_query(session, add_student):
    for i in range(5):
        add_student(f"Last{i}", "First", date(2020, 1, i + 1))
    query = session.query(Student).order_by(Student.last_name)
    page = PaginatedList.create(query, 2, 2)
    assert [s.last_name for s in page] == ["Last2", "Last3"]
    assert page.total == 5
    assert page.total_pages == 3
