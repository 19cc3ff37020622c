"""레포지토리 패키지 — 데이터베이스 쿼리 계층.

Repository package — Database query layer.
Holds the member/team repositories and the reusable search predicates.
Each repository extends BaseRepository for generic save/find operations.
"""
