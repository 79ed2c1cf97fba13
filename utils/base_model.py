# utils/base_model.py
from typing import TypeVar, Any, cast
from pydantic import BaseModel

T = TypeVar('T', bound=BaseModel)


class ImmutableModel(BaseModel):
    """
    Base class for all domain models providing immutability and copy functionality.

    Geometric objects and tolerance strategies are built once per comparison
    call and shared read-only between worker threads, so every instance is
    frozen after validation. Modified copies go through with_changes(), which
    re-runs validation on the new values.
    """
    model_config = {
        "frozen": True,  # Make all instances immutable
    }

    def with_changes(self, **changes: Any) -> T:
        """
        Create a new validated instance with the specified field values replaced.

        Args:
            **changes: Keyword arguments with field values to change

        Returns:
            New instance of the same concrete class

        Raises:
            ValueError: If an invalid field name is provided, or the new
                values fail validation
        """
        current_data = self.model_dump()

        for key, value in changes.items():
            if key not in current_data:
                raise ValueError(f"Invalid field: {key}")
            current_data[key] = value

        # Validate through the concrete class so subclass rules still apply
        return cast(T, self.__class__.model_validate(current_data))
