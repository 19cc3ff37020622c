"""기본 레포지토리 — 모든 레포지토리의 부모 클래스.

Base Repository — Parent class for all domain repositories.
Provides generic save / find-by-id / find-all operations.

Usage:
    class TeamRepository(BaseRepository[Team]):
        def __init__(self) -> None:
            super().__init__(Team)
"""

from typing import Any, Generic, Sequence, TypeVar

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import Base

# 제네릭 타입 변수 — SQLAlchemy 모델을 나타냄
# Generic type variable representing a SQLAlchemy model
ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """제네릭 레포지토리.

    Generic repository providing common database operations.

    Attributes:
        model: SQLAlchemy 모델 클래스 (The SQLAlchemy model class)
    """

    def __init__(self, model: type[ModelType]) -> None:
        """레포지토리를 초기화합니다.

        Initialize the repository with a model class.

        Args:
            model: 이 레포지토리가 관리할 SQLAlchemy 모델 클래스
                   (SQLAlchemy model class this repository manages)
        """
        self.model: type[ModelType] = model

    async def save(self, db: AsyncSession, obj: ModelType) -> ModelType:
        """엔티티를 영속화합니다.

        Persist an entity and flush so its primary key is assigned.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            obj: 저장할 엔티티 (Entity to persist)

        Returns:
            ModelType: 저장된 엔티티 (The persisted entity)
        """
        db.add(obj)
        await db.flush()
        return obj

    async def find_by_id(self, db: AsyncSession, record_id: int) -> ModelType | None:
        """ID로 단일 레코드를 조회합니다.

        Retrieve a single record by primary key.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            record_id: 조회할 레코드의 ID (Primary key of the record)

        Returns:
            ModelType | None: 조회된 레코드 또는 None (Found record or None)
        """
        return await db.get(self.model, record_id)

    async def find_all(
        self,
        db: AsyncSession,
        order_by: Any | None = None,
    ) -> Sequence[ModelType]:
        """모든 레코드를 조회합니다.

        Retrieve all records, optionally ordered.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            order_by: 정렬 기준 컬럼 (Column to order by)

        Returns:
            Sequence[ModelType]: 조회된 레코드 목록 (List of records)
        """
        query: Select = select(self.model)
        if order_by is not None:
            query = query.order_by(order_by)

        result = await db.execute(query)
        return result.scalars().all()
