"""Repository layer for database CRUD operations."""

from datetime import datetime
from typing import Optional, Sequence
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from patra.errors import FileRecordNotFound
from patra.models import ExtractData, FileRecord

from .orm_models import FileORM


class FileRepository:
    """Repository for uploaded file records."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, file: FileRecord) -> FileORM:
        """Create a new file record."""
        orm_file = FileORM(
            id=file.id,
            original_name=file.original_name,
            file_name=file.file_name,
            file_path=file.file_path,
            file_url=file.file_url,
            file_size=file.file_size,
            mime_type=file.mime_type,
            uploaded_at=file.uploaded_at,
            extract_data=file.extract_data.to_json() if file.extract_data else None,
            created_at=file.created_at,
            updated_at=file.updated_at,
        )
        self.session.add(orm_file)
        await self.session.flush()
        return orm_file

    async def get_by_id(self, file_id: UUID) -> Optional[FileORM]:
        """Get file by ID."""
        result = await self.session.execute(
            select(FileORM).where(FileORM.id == file_id)
        )
        return result.scalar_one_or_none()

    async def get_record(self, file_id: UUID) -> FileRecord:
        """Get file by ID as a model.

        Raises:
            FileRecordNotFound: If no file has this ID
        """
        orm_file = await self.get_by_id(file_id)
        if orm_file is None:
            raise FileRecordNotFound(file_id)
        return self.to_model(orm_file)

    async def list_recent(self, limit: int = 50) -> Sequence[FileORM]:
        """Get files, newest upload first."""
        result = await self.session.execute(
            select(FileORM).order_by(FileORM.uploaded_at.desc()).limit(limit)
        )
        return result.scalars().all()

    async def save_extract_data(self, file_id: UUID, extract_data: ExtractData) -> FileORM:
        """Replace the cached OCR text and structured record of a file."""
        orm_file = await self.get_by_id(file_id)
        if orm_file is None:
            raise FileRecordNotFound(file_id)
        orm_file.extract_data = extract_data.to_json()
        orm_file.updated_at = datetime.utcnow()
        await self.session.flush()
        return orm_file

    async def delete(self, file_id: UUID) -> bool:
        """Delete a file record. Returns False if it did not exist."""
        orm_file = await self.get_by_id(file_id)
        if orm_file is None:
            return False
        await self.session.delete(orm_file)
        await self.session.flush()
        return True

    @staticmethod
    def to_model(orm_file: FileORM) -> FileRecord:
        """Convert an ORM row to a FileRecord."""
        return FileRecord.model_validate(orm_file)
