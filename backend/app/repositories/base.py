"""
Base repository.
Provides generic CRUD operations.
"""
from typing import TypeVar, Generic, Optional, List, Type
from sqlmodel import Session, select, func

T = TypeVar("T")


class BaseRepository(Generic[T]):
    """
    Generic base repository.

    Provides the common CRUD operations for any model.

    Usage:
        class MyRepository(BaseRepository[MyModel]):
            def __init__(self, session: Session):
                super().__init__(session, MyModel)
    """

    def __init__(self, session: Session, model: Type[T]):
        """
        Initializes the repository.

        Args:
            session: Database session
            model: SQLModel model class
        """
        self.session = session
        self.model = model

    def get_by_id(self, id) -> Optional[T]:
        """
        Returns a record by ID.

        Args:
            id: Record ID

        Returns:
            The record or None if it does not exist
        """
        return self.session.get(self.model, id)

    def get_all(self) -> List[T]:
        """
        Returns every record.

        Returns:
            List of all records
        """
        return list(self.session.exec(select(self.model)).all())

    def add(self, obj: T) -> T:
        """
        Stages a record in the session without committing.
        The caller commits the whole unit of work.

        Args:
            obj: The record to stage

        Returns:
            The same record
        """
        self.session.add(obj)
        return obj

    def delete(self, obj: T) -> None:
        """
        Deletes a record.

        Args:
            obj: The record to delete
        """
        self.session.delete(obj)
        self.session.commit()

    def save(self, obj: T) -> T:
        """
        Saves changes to a record.

        Args:
            obj: The record to save

        Returns:
            The saved record
        """
        self.session.add(obj)
        self.session.commit()
        self.session.refresh(obj)
        return obj

    def count(self) -> int:
        """
        Counts every record.

        Returns:
            Number of records
        """
        result = self.session.exec(
            select(func.count()).select_from(self.model)
        ).first()
        return result or 0
