"""페이지 요청/응답 모델 테스트.

Page request parsing/validation and Page metadata tests.
"""

import pytest
from pydantic import ValidationError

from app.utils.pagination import Page, PageRequest, SortOrder


class TestPageRequest:
    """페이지 요청 테스트."""

    def test_defaults(self):
        request = PageRequest()
        assert (request.page, request.size, request.sort) == (0, 20, [])
        assert request.offset == 0

    def test_offset(self):
        """offset = page * size."""
        assert PageRequest(page=3, size=5).offset == 15

    @pytest.mark.parametrize("page,size", [(-1, 10), (0, 0), (0, -5)])
    def test_negative_values_rejected(self, page, size):
        """음수 페이지, 0 이하 크기는 거부."""
        with pytest.raises(ValidationError):
            PageRequest(page=page, size=size)


class TestParseSort:
    """Spring 형식 sort 파라미터 파싱 테스트."""

    def test_property_only_defaults_to_asc(self):
        assert PageRequest.parse_sort(["age"]) == [SortOrder(property="age")]

    def test_direction_and_nulls(self):
        orders = PageRequest.parse_sort(["username,DESC,nullslast", "age,asc"])
        assert orders == [
            SortOrder(property="username", direction="desc", nulls="last"),
            SortOrder(property="age", direction="asc"),
        ]

    def test_multiple_properties_share_direction(self):
        orders = PageRequest.parse_sort(["age,username,desc"])
        assert [(o.property, o.direction) for o in orders] == [("age", "desc"), ("username", "desc")]

    def test_empty_and_none(self):
        assert PageRequest.parse_sort(None) == []
        assert PageRequest.parse_sort(["", " , "]) == []


class TestPage:
    """페이지 메타데이터 테스트."""

    def test_first_page(self):
        page = Page[int].of([1, 2], PageRequest(page=0, size=2), total=5)
        assert page.total_pages == 3
        assert page.number_of_elements == 2
        assert page.first is True
        assert page.last is False
        assert page.empty is False

    def test_last_page(self):
        page = Page[int].of([5], PageRequest(page=2, size=2), total=5)
        assert page.first is False
        assert page.last is True

    def test_empty_result(self):
        page = Page[int].of([], PageRequest(page=0, size=10), total=0)
        assert page.total_pages == 0
        assert page.empty is True
        assert page.first is True
        assert page.last is True

    def test_camel_case_serialization(self):
        page = Page[int].of([1], PageRequest(page=0, size=1, sort=[SortOrder(property="age")]), total=1)
        data = page.model_dump(by_alias=True)
        assert set(data) == {
            "content", "totalElements", "totalPages", "size", "number",
            "numberOfElements", "first", "last", "empty", "sort",
        }
        assert data["sort"] == [{"property": "age", "direction": "asc", "nulls": "native"}]
