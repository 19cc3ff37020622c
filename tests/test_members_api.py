"""회원 검색 API 테스트.

Member search API tests — /v1/members (list) and /v2/members (page).
Covers query-string binding, JSON shape, and validation errors.
"""

from httpx import AsyncClient

V1_URL = "/v1/members"
V2_URL = "/v2/members"


class TestSearchV1:
    """v1 — 전체 조회."""

    async def test_no_params_returns_all(self, client: AsyncClient, members):
        """파라미터 없으면 전체 조회."""
        res = await client.get(V1_URL)
        assert res.status_code == 200
        data = res.json()
        assert isinstance(data, list)
        assert len(data) == 4

    async def test_row_shape(self, client: AsyncClient, members, teams):
        """응답 행은 camelCase 평탄화 필드."""
        res = await client.get(V1_URL, params={"teamName": "teamB", "ageGoe": 31, "ageLoe": 40})
        assert res.status_code == 200
        assert res.json() == [
            {
                "memberId": members[3].id,
                "username": "member4",
                "age": 40,
                "teamId": teams["teamB"].id,
                "teamName": "teamB",
            }
        ]

    async def test_team_filter(self, client: AsyncClient, members):
        res = await client.get(V1_URL, params={"teamName": "teamA"})
        assert sorted(r["username"] for r in res.json()) == ["member1", "member2"]

    async def test_inverted_range_is_empty(self, client: AsyncClient, members):
        """ageGoe > ageLoe 는 빈 배열 (오류 아님)."""
        res = await client.get(V1_URL, params={"ageGoe": 35, "ageLoe": 31})
        assert res.status_code == 200
        assert res.json() == []

    async def test_unknown_params_ignored(self, client: AsyncClient, members):
        res = await client.get(V1_URL, params={"nickname": "x"})
        assert res.status_code == 200
        assert len(res.json()) == 4

    async def test_non_integer_age(self, client: AsyncClient, members):
        """숫자가 아닌 나이는 422."""
        res = await client.get(V1_URL, params={"ageGoe": "ten"})
        assert res.status_code == 422

    async def test_empty_table(self, client: AsyncClient):
        res = await client.get(V1_URL)
        assert res.status_code == 200
        assert res.json() == []


class TestSearchV2:
    """v2 — 페이징 조회."""

    async def test_page_shape(self, client: AsyncClient, members):
        """Spring Page 형태의 응답."""
        res = await client.get(V2_URL, params={"page": 0, "size": 2, "sort": "username,desc"})
        assert res.status_code == 200
        data = res.json()

        assert [r["username"] for r in data["content"]] == ["member4", "member3"]
        assert data["totalElements"] == 4
        assert data["totalPages"] == 2
        assert data["size"] == 2
        assert data["number"] == 0
        assert data["numberOfElements"] == 2
        assert data["first"] is True
        assert data["last"] is False
        assert data["empty"] is False
        assert data["sort"] == [{"property": "username", "direction": "desc", "nulls": "native"}]

    async def test_defaults(self, client: AsyncClient, members):
        """page/size 미지정 시 0/기본 크기."""
        res = await client.get(V2_URL)
        data = res.json()
        assert data["number"] == 0
        assert data["size"] == 20
        assert data["totalElements"] == 4

    async def test_filter_with_paging(self, client: AsyncClient, members):
        res = await client.get(
            V2_URL, params={"teamName": "teamB", "page": 1, "size": 1, "sort": "age,asc"}
        )
        data = res.json()
        assert [r["username"] for r in data["content"]] == ["member4"]
        assert data["totalElements"] == 2
        assert data["last"] is True

    async def test_repeated_sort_params(self, client: AsyncClient, members):
        res = await client.get(
            V2_URL, params=[("sort", "teamName,desc"), ("sort", "age,asc"), ("size", "4")]
        )
        assert [r["username"] for r in res.json()["content"]] == [
            "member3", "member4", "member1", "member2",
        ]

    async def test_negative_page_rejected(self, client: AsyncClient):
        res = await client.get(V2_URL, params={"page": -1})
        assert res.status_code == 422

    async def test_zero_size_rejected(self, client: AsyncClient):
        res = await client.get(V2_URL, params={"size": 0})
        assert res.status_code == 422

    async def test_oversized_page_rejected(self, client: AsyncClient):
        res = await client.get(V2_URL, params={"size": 100000})
        assert res.status_code == 422

    async def test_unknown_sort_property(self, client: AsyncClient, members):
        """정렬 불가 속성은 400."""
        res = await client.get(V2_URL, params={"sort": "nickname,asc"})
        assert res.status_code == 400
        assert "nickname" in res.json()["detail"]

    async def test_no_match_is_empty_page(self, client: AsyncClient, members):
        res = await client.get(V2_URL, params={"teamName": "teamZ"})
        data = res.json()
        assert data["content"] == []
        assert data["totalElements"] == 0
        assert data["empty"] is True


class TestHealth:
    async def test_health(self, client: AsyncClient):
        res = await client.get("/health")
        assert res.status_code == 200
        assert res.json() == {"status": "ok"}


class TestBlankParameters:
    """빈 쿼리 파라미터는 조건 없음으로 처리."""

    async def test_v1_blank_params_return_all(self, client: AsyncClient, members):
        res = await client.get(f"{V1_URL}?teamName=&ageGoe=&ageLoe=")
        assert res.status_code == 200
        assert len(res.json()) == 4

    async def test_v1_blank_team_name_only(self, client: AsyncClient, members):
        res = await client.get(f"{V1_URL}?teamName=")
        assert res.status_code == 200
        assert len(res.json()) == 4

    async def test_v1_blank_mixed_with_value(self, client: AsyncClient, members):
        res = await client.get(f"{V1_URL}?teamName=&ageGoe=25&ageLoe=")
        assert sorted(r["username"] for r in res.json()) == ["member3", "member4"]

    async def test_v2_blank_params_return_all(self, client: AsyncClient, members):
        res = await client.get(f"{V2_URL}?teamName=&ageGoe=&ageLoe=&username=")
        assert res.status_code == 200
        data = res.json()
        assert data["totalElements"] == 4
        assert len(data["content"]) == 4
