"""
Base model definitions for the newsletter subscription service.

This module provides the abstract base class shared by the application's
models. It keeps serialization and primary-key lookup in one place so that
individual models only declare their columns and domain behaviour.
"""

from datetime import datetime
import uuid
from typing import Any, Dict, Optional, Type, TypeVar

from extensions import db

# Define TypeVar with proper constraints for type hinting
T_Model = TypeVar('T_Model', bound='BaseModel')


class BaseModel(db.Model):
    """
    Abstract base model that provides common functionality for all models.

    Attributes:
        __abstract__: SQLAlchemy flag marking this as an abstract class

    Class Methods:
        get_by_id: Retrieve a model instance by its primary key

    Instance Methods:
        to_dict: Convert instance to a dictionary for serialization
    """
    __abstract__ = True

    @classmethod
    def get_by_id(cls: Type[T_Model], record_id: Any) -> Optional[T_Model]:
        """
        Retrieve a model instance by its primary key.

        Args:
            record_id: Primary key value

        Returns:
            Optional[T_Model]: The instance if found, None otherwise
        """
        return db.session.get(cls, record_id)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert the instance to a dictionary for serialization.

        Returns:
            Dict[str, Any]: Dictionary representation of the instance
        """
        result = {}
        for column in self.__table__.columns:
            value = getattr(self, column.name)

            # Handle datetime and UUID objects for JSON serialization
            if isinstance(value, datetime):
                value = value.isoformat()
            elif isinstance(value, uuid.UUID):
                value = str(value)

            result[column.name] = value

        return result
