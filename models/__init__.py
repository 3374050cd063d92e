from models.errors import (
    InstructorQueueError,
    InvalidArgumentError,
    CapacityExceededError,
    EmptyQueueError,
    IndexOutOfRangeError,
)
from models.instructor import Instructor
from models.instructor_queue import InstructorQueue

__all__ = [
    "InstructorQueueError",
    "InvalidArgumentError",
    "CapacityExceededError",
    "EmptyQueueError",
    "IndexOutOfRangeError",
    "Instructor",
    "InstructorQueue",
]
